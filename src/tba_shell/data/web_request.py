from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import requests

from ..utils.cache import ResponseCache
from ..utils.logging import get_logger
from ..utils.time import http_date, parse_http_date

log = get_logger(__name__)


@dataclass(frozen=True)
class ApiConfig:
    base_url: str
    # ordered (key, value) header pairs sent with every request
    request_properties: tuple[tuple[str, str], ...] = ()
    timeout: float | None = None


class FetchError(Enum):
    EMPTY = "empty"                                   # 200 with no parsable body
    NOT_MODIFIED_UNCACHED = "not_modified_uncached"   # 304 but nothing cached
    HTTP_STATUS = "http_status"
    INVALID_URL = "invalid_url"
    CONNECTION = "connection"


@dataclass
class FetchResult:
    data: Any = None
    status: int | None = None
    error: FetchError | None = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None


@dataclass
class WebClient:
    """Single-shot GET client with If-Modified-Since caching.

    One attempt per call, no retries. Failures are logged and returned as a
    FetchResult with an error kind; nothing is raised to the caller.
    """

    config: ApiConfig
    cache: ResponseCache = field(default_factory=ResponseCache)
    session: requests.Session = field(default_factory=requests.Session)

    def url_for(self, request_path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{request_path.lstrip('/')}"

    def fetch(self, request_path: str) -> FetchResult:
        url = self.url_for(request_path)
        cached = self.cache.get(url)
        headers = dict(self.config.request_properties)
        headers["If-Modified-Since"] = http_date(cached.last_modified if cached else 0.0)

        try:
            r = self.session.get(url, headers=headers, timeout=self.config.timeout)
        except (requests.exceptions.InvalidURL,
                requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as e:
            log.warning("Invalid URL <%s>: %s", url, e)
            return FetchResult(error=FetchError.INVALID_URL)
        except requests.RequestException as e:
            log.warning("Failed to open connection to <%s>: %s", url, e)
            return FetchResult(error=FetchError.CONNECTION)

        log.info("Sending request <%s>: %s", url, r.reason)

        if r.status_code == 200:
            if not r.content or not r.content.strip():
                return FetchResult(status=200, error=FetchError.EMPTY)
            try:
                data = r.json()
            except ValueError as e:
                # some endpoints legitimately answer with no JSON at all
                log.debug("No JSON in reply from <%s>: %s", url, e)
                return FetchResult(status=200, error=FetchError.EMPTY)
            self.cache.put(url, data, parse_http_date(r.headers.get("Last-Modified")))
            return FetchResult(data=data, status=200)

        if r.status_code == 304 and cached is not None:
            return FetchResult(data=cached.data, status=304, from_cache=True)

        log.warning("Request failed: %s (%d)", r.reason, r.status_code)
        kind = FetchError.NOT_MODIFIED_UNCACHED if r.status_code == 304 else FetchError.HTTP_STATUS
        return FetchResult(status=r.status_code, error=kind)
