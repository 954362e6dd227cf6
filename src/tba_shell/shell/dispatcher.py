from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, TextIO
import click

from ..data.endpoints import argument_order
from ..data.tba_api import TbaApi
from ..data.web_request import FetchError, FetchResult
from ..reporting.render import print_data
from ..utils.logging import get_logger
from .filters import FilterSet

log = get_logger(__name__)

PAGED_ENDPOINTS = {"teams", "teams_by_year"}
VERBOSE_LEVELS = (0, 1, 2)


class ErrorKind(Enum):
    MALFORMED_FILTER = "malformed_filter"
    BAD_VERBOSITY = "bad_verbosity"
    UNRECOGNIZED_MODEL = "unrecognized_model"
    UNRECOGNIZED_FILTER_SHAPE = "unrecognized_filter_shape"
    NO_DATA = "no_data"


class UnrecognizedModel(KeyError):
    pass


# --------------------- suffix rules --------------------- #
def no_suffix(level: int) -> str | None:
    return None


def list_suffix(level: int) -> str | None:
    return {0: "keys", 1: "simple"}.get(level)


def single_suffix(level: int) -> str | None:
    return "simple" if level < 2 else None


def keys_suffix(level: int) -> str | None:
    return "keys" if level == 0 else None


@dataclass(frozen=True)
class Shape:
    keys: frozenset[str]
    endpoint: str
    suffix: Callable[[int], str | None] = no_suffix
    unwrap: str | None = None  # member kept below level 2

    @property
    def argument_order(self) -> tuple[str, ...]:
        return argument_order(self.endpoint)


def shape(keys: str, endpoint: str, **kw: Any) -> Shape:
    return Shape(frozenset(k for k in keys.split(",") if k), endpoint, **kw)


# --------------------- printers --------------------- #
Printer = Callable[[Any, int, "TextIO | None"], None]


def full(data: Any, level: int, out: TextIO | None) -> None:
    print_data(data, out=out)


def project(key1: str, key2: str | None = None, full_from: int = 2) -> Printer:
    """Level 0 prints key1, level 1 adds key2, full_from and up print everything."""
    def printer(data: Any, level: int, out: TextIO | None) -> None:
        if level >= full_from:
            print_data(data, out=out)
        else:
            print_data(data, key1, key2 if level == 1 else None, out=out)
    return printer


def print_robots(data: Any, level: int, out: TextIO | None) -> None:
    for robot in data if isinstance(data, list) else [data]:
        if level < 2:
            print_data(robot, "key", "robot_name", out=out)
        else:
            print_data(robot, out=out)


def media_url(item: dict) -> str:
    site = str(item.get("type", ""))
    watch = "watch?v=" if site.lower() == "youtube" else ""
    return f"http://{site}.com/{watch}{item.get('foreign_key', '')}"


def social_media_url(item: dict) -> str:
    site = str(item.get("type", "")).split("-", 1)[0]
    return f"http://{site}.com/{item.get('foreign_key', '')}"


def link_printer(to_url: Callable[[dict], str]) -> Printer:
    def printer(data: Any, level: int, out: TextIO | None) -> None:
        for item in data if isinstance(data, list) else [data]:
            if level < 2 and isinstance(item, dict):
                click.echo(to_url(item), file=out)
            else:
                print_data(item, out=out)
    return printer


@dataclass(frozen=True)
class ModelSpec:
    shapes: tuple[Shape, ...]
    expecting: str
    printer: Printer = full


# --------------------- model table --------------------- #
_TEAM = '"team=<TeamKey>"'
_EVENT = '"event=<EventKey>"'

MODELS: dict[str, ModelSpec] = {
    "status": ModelSpec(
        (shape("", "status"), shape("team,event", "team_event_status")),
        'Invalid filter, expecting "team=<TeamKey>&event=<EventKey>".',
    ),
    "teams": ModelSpec(
        (
            shape("", "teams", suffix=list_suffix),
            shape("year", "teams_by_year", suffix=list_suffix),
            shape("team", "team", suffix=single_suffix),
            shape("event", "event_teams", suffix=list_suffix),
            shape("district", "district_teams", suffix=list_suffix),
        ),
        'Invalid filter, expecting "year=<Year>" or "team=<TeamKey>" or '
        '"event=<EventKey>" or "district=<DistrictKey>".',
        project("key", "nickname"),
    ),
    "events": ModelSpec(
        (
            shape("year", "events", suffix=list_suffix),
            shape("team", "team_events", suffix=list_suffix),
            shape("team,year", "team_events_by_year", suffix=list_suffix),
            shape("event", "event", suffix=single_suffix),
            shape("district", "district_events", suffix=list_suffix),
        ),
        'Invalid filter, expecting "year=<Year>" or "team=<TeamKey>" or '
        '"team=<TeamKey>&year=<Year>" or "event=<EventKey>" or "district=<DistrictKey>".',
        project("key", "name"),
    ),
    "districts": ModelSpec(
        (shape("year", "districts"), shape("team", "team_districts")),
        'Invalid filter, expecting "year=<Year>" or "team=<TeamKey>".',
        project("key", "display_name"),
    ),
    "matches": ModelSpec(
        (
            shape("event", "event_matches", suffix=keys_suffix),
            shape("match", "match", suffix=single_suffix),
            shape("team,year", "team_matches_by_year", suffix=keys_suffix),
            shape("team,event", "team_event_matches", suffix=keys_suffix),
        ),
        'Invalid filter, expecting "team=<TeamKey>&year=<Year>" or "event=<EventKey>" or '
        '"event=<EventKey>&team=<TeamKey>" or "match=<MatchKey>".',
        project("key", full_from=1),
    ),
    "awards": ModelSpec(
        (
            shape("team", "team_awards"),
            shape("team,year", "team_awards_by_year"),
            shape("event", "event_awards"),
            shape("team,event", "team_event_awards"),
        ),
        'Invalid filter, expecting "team=<TeamKey>" or "team=<TeamKey>&year=<Year>" or '
        '"event=<EventKey>" or "event=<EventKey>&team=<TeamKey>".',
        project("name", "event_key"),
    ),
    "rankings": ModelSpec(
        (
            shape("event", "event_rankings", unwrap="rankings"),
            shape("district", "district_rankings"),
        ),
        'Invalid filter, expecting "event=<EventKey>" or "district=<DistrictKey>".',
        project("rank", "team_key"),
    ),
    "oprs": ModelSpec(
        (shape("event", "event_oprs", unwrap="oprs"),),
        f"Invalid filter, expecting {_EVENT}.",
    ),
    "district_points": ModelSpec(
        (shape("event", "event_district_points", unwrap="points"),),
        f"Invalid filter, expecting {_EVENT}.",
    ),
    "insights": ModelSpec((shape("event", "event_insights"),), f"Invalid filter, expecting {_EVENT}."),
    "predictions": ModelSpec((shape("event", "event_predictions"),), f"Invalid filter, expecting {_EVENT}."),
    "alliances": ModelSpec((shape("event", "event_alliances"),), f"Invalid filter, expecting {_EVENT}."),
    "years_participated": ModelSpec(
        (shape("team", "team_years_participated"),), f"Invalid filter, expecting {_TEAM}."
    ),
    "robots": ModelSpec((shape("team", "team_robots"),), f"Invalid filter, expecting {_TEAM}.", print_robots),
    "media": ModelSpec(
        (shape("team,year", "team_media"),),
        'Invalid filter, expecting "team=<TeamKey>&year=<Year>".',
        link_printer(media_url),
    ),
    "social_media": ModelSpec(
        (shape("team", "team_social_media"),),
        f"Invalid filter, expecting {_TEAM}.",
        link_printer(social_media_url),
    ),
}


def lookup(model: str, filter_keys: frozenset[str] | set[str]) -> Shape | None:
    """Shape whose key set equals filter_keys exactly, or None."""
    try:
        table = MODELS[model]
    except KeyError:
        raise UnrecognizedModel(model) from None
    keys = frozenset(filter_keys)
    for s in table.shapes:
        if s.keys == keys:
            return s
    return None


@dataclass
class DispatchResult:
    data: Any = None
    error: str | None = None
    error_kind: ErrorKind | None = None
    fetch_error: FetchError | None = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, message: str, kind: ErrorKind, fetch_error: FetchError | None = None) -> "DispatchResult":
        return cls(error=message, error_kind=kind, fetch_error=fetch_error)


def parse_verbose_level(token: str) -> int:
    """Integer verbosity in 0..2; ValueError with a user-facing message otherwise."""
    try:
        level = int(token)
    except ValueError:
        raise ValueError(f"Verbose level must be an integer: {token!r}") from None
    if level not in VERBOSE_LEVELS:
        raise ValueError("Verbose level must be 0, 1 or 2.")
    return level


class Dispatcher:
    def __init__(self, api: TbaApi):
        self.api = api

    def dispatch(
        self,
        model: str,
        filters: FilterSet | None,
        verbose_level: int | str = 1,
        out: TextIO | None = None,
        quiet: bool = False,
    ) -> DispatchResult:
        """Run one model request and print it unless quiet."""
        if isinstance(verbose_level, str):
            try:
                verbose_level = parse_verbose_level(verbose_level)
            except ValueError as e:
                return DispatchResult.failed(str(e), ErrorKind.BAD_VERBOSITY)
        elif verbose_level not in VERBOSE_LEVELS:
            return DispatchResult.failed("Verbose level must be 0, 1 or 2.", ErrorKind.BAD_VERBOSITY)

        filters = filters or FilterSet()
        try:
            s = lookup(model, filters.keys())
        except UnrecognizedModel:
            return DispatchResult.failed(f'Invalid request "{model}"', ErrorKind.UNRECOGNIZED_MODEL)
        table = MODELS[model]
        if s is None:
            return DispatchResult.failed(table.expecting, ErrorKind.UNRECOGNIZED_FILTER_SHAPE)

        res = self._fetch(s, filters, verbose_level)
        data = res.data
        if s.unwrap and verbose_level < 2 and isinstance(data, dict):
            data = data.get(s.unwrap)
        if data is None:
            # network trouble and bad filter values look the same to the user
            log.debug("No data for %s %r (%s)", model, filters, res.error)
            return DispatchResult.failed(table.expecting, ErrorKind.NO_DATA, res.error)

        if not quiet:
            table.printer(data, verbose_level, out)
        return DispatchResult(data=data)

    def _fetch(self, s: Shape, filters: FilterSet, level: int) -> FetchResult:
        args = {k: filters.value_of(k) for k in s.keys}
        suffix = s.suffix(level)
        if s.endpoint in PAGED_ENDPOINTS:
            return self.api.get_teams(args.get("year"), suffix)
        return self.api.request(s.endpoint, suffix, **args)
