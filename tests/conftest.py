"""Shared fixtures: a recording fake Gist API served through httpx.MockTransport."""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest

from gist_client.client import GistClient

TOKEN = "MY TOKEN!"
BASE_URL = "https://gists.test"


def _requires_body(request: httpx.Request) -> bool:
    """Create (POST /gists) and edit (PATCH) must carry a JSON body."""
    return request.method == "PATCH" or (request.method == "POST" and request.url.path == "/gists")


class FakeGistServer:
    """Test double for the Gist API that records every request it receives.

    Mirrors the API's expectations: a wrong credential yields 401, a missing
    Accept header 406, a GET with a body or a create/edit request without
    one 400.  Otherwise it answers ``status_code`` with ``body``.
    """

    def __init__(self, token: str = TOKEN) -> None:
        self.token = token
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = b"Request Accepted!"

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = request.read()
        self.requests.append(request)

        if request.headers.get("Authorization") != f"token {self.token}":
            return httpx.Response(401, text="Missing token")
        if request.headers.get("Accept") != "application/vnd.github.v3+json":
            return httpx.Response(406, text="Missing Accept Header")
        if request.method == "GET" and body:
            return httpx.Response(400, text="GET should not have body")
        if _requires_body(request) and not body:
            return httpx.Response(400, text="POST/PATCH should have body")
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_server() -> FakeGistServer:
    """Create a fresh fake API for request inspection."""
    return FakeGistServer()


@pytest.fixture
def gist_client(fake_server: FakeGistServer) -> Iterator[GistClient]:
    """Yield a GistClient wired to the fake API through a MockTransport."""
    client = GistClient(TOKEN, base_url=BASE_URL, transport=httpx.MockTransport(fake_server))
    yield client
    client.close()
