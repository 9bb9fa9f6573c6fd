"""Pytest configuration and shared fixtures."""

from typing import Any, Callable, Optional

import httpx
import pytest
import pytest_asyncio

from subsonic_client import AsyncSubsonic
from subsonic_client.auth import make_token

BASE_URL = "http://host/music"
USER = "alice"
PASSWORD = "sesame"
CLIENT_NAME = "test-client"


def ok(**fields: Any) -> dict[str, Any]:
    return {"subsonic-response": {"status": "ok", "version": "1.16.1", **fields}}


def failed(code: int, message: str, **fields: Any) -> dict[str, Any]:
    return {"subsonic-response": {
        "status": "failed", "version": "1.16.1", "error": {"code": code, "message": message}, **fields,
    }}


class FakeServer:
    """In-process Subsonic server checking salted tokens like the real thing."""

    def __init__(self, password: str = PASSWORD):
        self.password = password
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {
            "ping": lambda request: httpx.Response(200, json=ok()),
        }

    def route(self, endpoint: str, body: Optional[dict[str, Any]] = None, **kwargs: Any) -> None:
        if body is not None:
            kwargs["json"] = body
        status_code = kwargs.pop("status_code", 200)
        self.routes[endpoint] = lambda request: httpx.Response(status_code, **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        params = request.url.params
        if params.get("t") != make_token(self.password, params.get("s", "")):
            return httpx.Response(200, json=failed(40, "Wrong username or password"))
        endpoint = request.url.path.rsplit("/", 1)[-1]
        respond = self.routes.get(endpoint)
        if respond is None:
            return httpx.Response(200, json=failed(0, f"Unknown endpoint {endpoint}"))
        return respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def transport(server: FakeServer) -> httpx.MockTransport:
    return httpx.MockTransport(server.handler)


@pytest_asyncio.fixture
async def client(transport: httpx.MockTransport):
    http_client = httpx.AsyncClient(transport=transport)
    subsonic = AsyncSubsonic(BASE_URL, USER, CLIENT_NAME, http_client=http_client)
    yield subsonic
    await http_client.aclose()


@pytest_asyncio.fixture
async def authed(client: AsyncSubsonic) -> AsyncSubsonic:
    await client.authenticate(PASSWORD)
    return client
