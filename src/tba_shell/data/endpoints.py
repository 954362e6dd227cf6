from __future__ import annotations
from string import Formatter

# endpoint name -> path template (relative to the API base)
ENDPOINTS: dict[str, str] = {
    "status": "status",
    # team lists are paged
    "teams": "teams/{page}",
    "teams_by_year": "teams/{year}/{page}",
    "team": "team/{team}",
    "team_years_participated": "team/{team}/years_participated",
    "team_districts": "team/{team}/districts",
    "team_robots": "team/{team}/robots",
    "team_events": "team/{team}/events",
    "team_events_by_year": "team/{team}/events/{year}",
    "team_event_matches": "team/{team}/event/{event}/matches",
    "team_event_awards": "team/{team}/event/{event}/awards",
    "team_event_status": "team/{team}/event/{event}/status",
    "team_awards": "team/{team}/awards",
    "team_awards_by_year": "team/{team}/awards/{year}",
    "team_matches_by_year": "team/{team}/matches/{year}",
    "team_media": "team/{team}/media/{year}",
    "team_social_media": "team/{team}/social_media",
    "events": "events/{year}",
    "event": "event/{event}",
    "event_teams": "event/{event}/teams",
    "event_alliances": "event/{event}/alliances",
    "event_insights": "event/{event}/insights",
    "event_oprs": "event/{event}/oprs",
    "event_predictions": "event/{event}/predictions",
    "event_rankings": "event/{event}/rankings",
    "event_district_points": "event/{event}/district_points",
    "event_matches": "event/{event}/matches",
    "event_awards": "event/{event}/awards",
    "districts": "districts/{year}",
    "district_teams": "district/{district}/teams",
    "district_rankings": "district/{district}/rankings",
    "district_events": "district/{district}/events",
    "match": "match/{match}",
}

API_HELP = """V3 <Request>:
\tstatus\t\t\t\t\t\t\t- TBA Status request.
\tteams[/<Year>]/<PageNum>[/simple|keys]\t\t\t- Team List Request with optional year and verbosity.
\tteam/<TeamKey>[/simple]\t\t\t\t\t- Single Team Request with optional verbosity.
\tteam/<TeamKey>/years_participated\t\t\t- Team Years Participated Request.
\tteam/<TeamKey>/districts\t\t\t\t- Team Districts Request.
\tteam/<TeamKey>/robots\t\t\t\t\t- Team Robots Request.
\tteam/<TeamKey>/events[/<Year>][/simple|keys]\t\t- Team Events Request with optional year and verbosity.
\tteam/<TeamKey>/event/<EventKey>/matches[/simple|keys]\t- Team Event Matches Request with optional verbosity.
\tteam/<TeamKey>/event/<EventKey>/awards\t\t\t- Team Event Awards Request.
\tteam/<TeamKey>/event/<EventKey>/status\t\t\t- Team Event Status Request.
\tteam/<TeamKey>/awards[/<Year>]\t\t\t\t- Team Awards Request with optional year.
\tteam/<TeamKey>/matches/<Year>[/simple|keys]\t\t- Team Matches Request with optional verbosity.
\tteam/<TeamKey>/media/<Year>\t\t\t\t- Team Media Request.
\tteam/<TeamKey>/social_media\t\t\t\t- Team Social Media Request.
\tevents/<Year>[/simple|keys]\t\t\t\t- Event List Request with optional verbosity.
\tevent/<EventKey>[/simple]\t\t\t\t- Single Event Request with optional verbosity.
\tevent/<EventKey>/teams[/simple|keys]\t\t\t- Event Teams Request with optional verbosity.
\tevent/<EventKey>/alliances\t\t\t\t- Event Alliances Request.
\tevent/<EventKey>/insights\t\t\t\t- Event Insights Request.
\tevent/<EventKey>/oprs\t\t\t\t\t- Event OPR Request.
\tevent/<EventKey>/predictions\t\t\t\t- Event Predictions Request.
\tevent/<EventKey>/rankings\t\t\t\t- Event Rankings Request.
\tevent/<EventKey>/district_points\t\t\t- Event District Points Request.
\tevent/<EventKey>/matches[/simple|keys]\t\t\t- Event Matches Request with optional verbosity.
\tevent/<EventKey>/awards\t\t\t\t\t- Event Awards Request.
\tdistricts/<Year>\t\t\t\t\t- District List Request.
\tdistrict/<DistrictKey>/teams[/simple|keys]\t\t- District Teams Request with optional verbosity.
\tdistrict/<DistrictKey>/rankings\t\t\t\t- District Rankings Request.
\tdistrict/<DistrictKey>/events[/simple|keys]\t\t- District Events Request with optional verbosity.
\tmatch/<MatchKey>[/simple]\t\t\t\t- Match Request with optional verbosity.
"""


def argument_order(endpoint: str) -> tuple[str, ...]:
    """Placeholder names of an endpoint template, in path order."""
    return tuple(f for _, f, _, _ in Formatter().parse(ENDPOINTS[endpoint]) if f)


def build_path(endpoint: str, suffix: str | None = None, **args: object) -> str:
    path = ENDPOINTS[endpoint].format(**args)
    if suffix:
        path += "/" + suffix
    return path
