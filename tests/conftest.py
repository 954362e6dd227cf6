from __future__ import annotations
import json
from typing import Any

import pytest
import requests

from tba_shell.data.tba_api import TbaApi
from tba_shell.data.web_request import ApiConfig, WebClient
from tba_shell.utils.cache import ResponseCache

BASE = "https://example.test/api/v3"


def make_response(status: int = 200, body: Any = None, last_modified: str | None = None,
                  reason: str | None = None, raw: bytes | None = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r.reason = reason or {200: "OK", 304: "Not Modified", 401: "Unauthorized", 404: "Not Found"}.get(status, "")
    if raw is not None:
        r._content = raw
    else:
        r._content = b"" if body is None else json.dumps(body).encode("utf-8")
    r.encoding = "utf-8"
    if last_modified:
        r.headers["Last-Modified"] = last_modified
    return r


class StubSession:
    """Stands in for requests.Session: replies come from a per-path table or a queue."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.routes: dict[str, list[Any]] = {}

    def reply(self, path: str, *responses: Any) -> None:
        self.routes.setdefault(BASE + "/" + path, []).extend(responses)

    def get(self, url: str, headers: dict[str, str] | None = None, timeout: float | None = None):
        self.calls.append((url, dict(headers or {})))
        queue = self.routes.get(url)
        if not queue:
            return make_response(404)
        reply = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def paths(self) -> list[str]:
        return [u[len(BASE) + 1:] for u, _ in self.calls]


@pytest.fixture
def session() -> StubSession:
    return StubSession()


@pytest.fixture
def client(session: StubSession) -> WebClient:
    config = ApiConfig(
        base_url=BASE,
        request_properties=(("User-Agent", "TBAShell"), ("X-TBA-App-Id", "frc492:TBAShell:v0.1"),
                            ("X-TBA-Auth-Key", "secret")),
    )
    return WebClient(config, cache=ResponseCache(), session=session)


@pytest.fixture
def api(client: WebClient) -> TbaApi:
    return TbaApi(client)
