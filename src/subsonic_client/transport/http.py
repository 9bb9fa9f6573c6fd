"""
REST HTTP transport for Subsonic servers.

Every call is ``<base url>/rest/<endpoint>`` with the authentication and
format fields in the query string; nothing travels in the body.
"""

import logging
import re
from typing import Any, Mapping, Optional

import httpx

from subsonic_client.auth import Credentials
from subsonic_client.errors import RequestError, TransportError

logger = logging.getLogger(__name__)

API_VERSION = "1.8.0"
RESPONSE_FORMAT = "json"
REST_PREFIX = "rest"
RESERVED_PARAMS = frozenset({"f", "v", "c", "u", "t", "s"})
DEFAULT_TIMEOUT = 30.0
DEFAULT_HEADERS = {"User-Agent": "subsonic-client/0.1.0", "Accept": "application/json"}

_ENDPOINT_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")

Params = Mapping[str, Any]


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _query_items(params: Optional[Params]) -> list[tuple[str, str]]:
    items: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            items.extend((key, _encode_value(v)) for v in value)
        else:
            items.append((key, _encode_value(value)))
    return items


def build_url(base_url: str, endpoint: str) -> httpx.URL:
    """Join ``base_url``'s path with ``/rest/<endpoint>``, keeping any sub-path."""
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise RequestError(f"Malformed base URL {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise RequestError(f"Base URL must be an absolute http(s) URL, got {base_url!r}")
    if not _ENDPOINT_RE.fullmatch(endpoint):
        raise RequestError(f"Invalid endpoint name {endpoint!r}")
    return url.copy_with(path=f"{url.path.rstrip('/')}/{REST_PREFIX}/{endpoint}")


def build_request(
    method: str,
    base_url: str,
    endpoint: str,
    params: Optional[Params],
    *,
    client_name: str,
    user: str,
    credentials: Credentials,
    client: Optional[httpx.AsyncClient] = None,
) -> httpx.Request:
    """Build an authenticated request.

    With ``client`` the request goes through ``client.build_request`` so the
    client's default headers, params and cookies apply.
    """
    if not method.isalpha():
        raise RequestError(f"Invalid HTTP method {method!r}")
    collisions = RESERVED_PARAMS.intersection(params or {})
    if collisions:
        raise RequestError(f"Reserved query parameter(s) cannot be overridden: {', '.join(sorted(collisions))}")

    query = [
        ("f", RESPONSE_FORMAT),
        ("v", API_VERSION),
        ("c", client_name),
        ("u", user),
        ("t", credentials.token),
        ("s", credentials.salt),
    ]
    query.extend(_query_items(params))
    url = build_url(base_url, endpoint)
    if client is not None:
        return client.build_request(method.upper(), url, params=query)
    return httpx.Request(method.upper(), url, params=query)


class HttpClient:
    """Sends built requests over an ``httpx.AsyncClient``.

    The client may be shared between sessions; it is only closed here when
    this object created it.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(headers=DEFAULT_HEADERS, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def send(self, request: httpx.Request, stream: bool = False) -> httpx.Response:
        # The query carries the token; only the path goes to the log.
        logger.debug("%s %s", request.method, request.url.path)
        try:
            return await self._client.send(request, stream=stream)
        except httpx.HTTPError as e:
            raise TransportError(f"{request.method} {request.url.path} failed: {e!r}") from e

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
