from __future__ import annotations
from typing import Any

from ..config import Settings, settings as default_settings
from ..utils.cache import ResponseCache
from ..utils.logging import get_logger
from .endpoints import API_HELP, build_path
from .web_request import ApiConfig, FetchResult, WebClient

log = get_logger(__name__)


def api_config_from_settings(s: Settings) -> ApiConfig:
    props = [
        ("User-Agent", s.TBA_APP_NAME),
        ("X-TBA-App-Id", s.app_id()),
    ]
    if s.TBA_AUTH_KEY:
        props.append(("X-TBA-Auth-Key", s.TBA_AUTH_KEY))
    else:
        log.warning("TBA_AUTH_KEY is not set; requests will likely be rejected (401).")
    return ApiConfig(base_url=s.TBA_API_BASE, request_properties=tuple(props), timeout=s.TBA_HTTP_TIMEOUT)


class TbaApi:
    """The Blue Alliance v3 requests on top of a caching WebClient."""

    def __init__(self, client: WebClient):
        self.client = client

    @classmethod
    def from_settings(cls, s: Settings | None = None, cache: ResponseCache | None = None) -> "TbaApi":
        if cache is None:
            cache = ResponseCache()
        return cls(WebClient(api_config_from_settings(s or default_settings), cache=cache))

    @staticmethod
    def api_help() -> str:
        return API_HELP

    def get(self, path: str) -> FetchResult:
        return self.client.fetch(path)

    def request(self, endpoint: str, suffix: str | None = None, **args: Any) -> FetchResult:
        return self.client.fetch(build_path(endpoint, suffix, **args))

    def get_teams(self, year: str | None = None, suffix: str | None = None) -> FetchResult:
        """Fetch every page of the team list and join them into one array."""
        teams: list[Any] = []
        page = 0
        while True:
            if year is None:
                res = self.request("teams", suffix, page=page)
            else:
                res = self.request("teams_by_year", suffix, year=year, page=page)
            if not isinstance(res.data, list) or not res.data:
                if page == 0 and not res.ok:
                    return res
                break
            teams.extend(res.data)
            page += 1
        return FetchResult(data=teams, status=200)
