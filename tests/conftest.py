"""Shared fixtures for nuget-audit tests.

HTTP never leaves the process: sessions are replaced with ``FakeSession``,
which serves real ``requests.Response`` objects built from canned bodies.
"""

from __future__ import annotations

import io
import json
from typing import Any

import pytest
import requests
from requests.structures import CaseInsensitiveDict
from urllib3.response import HTTPResponse

from nuget_audit.config import Settings


def make_response(
    url: str,
    body: bytes | str | Any = b"",
    status: int = 200,
    headers: dict[str, str] | None = None,
) -> requests.Response:
    if isinstance(body, str):
        body = body.encode("utf-8")
    elif not isinstance(body, bytes):
        body = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status
    response.url = url
    response.headers = CaseInsensitiveDict(headers or {})
    response.encoding = "utf-8"
    response.raw = HTTPResponse(
        body=io.BytesIO(body),
        headers=headers or {},
        status=status,
        preload_content=False,
        decode_content=False,
    )
    return response


class FakeSession:
    """Minimal stand-in for ``requests.Session`` keyed by URL."""

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes: dict[str, Any] = dict(routes or {})
        self.headers: dict[str, str] = {}
        self.calls: list[tuple[str, dict[str, Any] | None]] = []

    def add(self, url: str, body: Any = b"", status: int = 200, headers: dict | None = None):
        self.routes[url] = (body, status, headers)

    def get(self, url: str, params: dict[str, Any] | None = None, **kwargs: Any):
        self.calls.append((url, params))
        if url not in self.routes:
            return make_response(url, b"Not Found", status=404)
        route = self.routes[url]
        if isinstance(route, Exception):
            raise route
        body, status, headers = route
        return make_response(url, body, status=status, headers=headers)

    def requested(self, url: str) -> bool:
        return any(called == url for called, _ in self.calls)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        token="test-token",
        hosting_api_base="https://api.github.test",
        registry_api_base="https://registry.test/v3/registration",
    )


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()
