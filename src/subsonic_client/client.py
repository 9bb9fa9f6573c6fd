"""
AsyncSubsonic / Subsonic — main client facades.
"""

import asyncio
import logging
import random
import threading
from typing import Any, Optional

import httpx

from subsonic_client.auth import EMPTY_CREDENTIALS, Credentials, derive_credentials
from subsonic_client.browsing import BrowsingAPI
from subsonic_client.errors import AuthError, SubsonicError
from subsonic_client.media import MediaAPI
from subsonic_client.models.library import License
from subsonic_client.playlists import PlaylistsAPI
from subsonic_client.search import SearchAPI
from subsonic_client.system import SystemAPI
from subsonic_client.transport.envelope import decode_envelope
from subsonic_client.transport.http import DEFAULT_TIMEOUT, HttpClient, Params, build_request

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_NAME = "subsonic-client"
PING_ENDPOINT = "ping"


class AsyncSubsonic:
    """Async Subsonic client (primary).

    Holds one user's session against one server. Calls made before
    ``authenticate()`` go out with an empty salt and token and are
    rejected by the server with an ApiError.
    """

    def __init__(
        self,
        base_url: str,
        user: str,
        client_name: str = DEFAULT_CLIENT_NAME,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        rng: Optional[random.Random] = None,
    ):
        self._base_url = base_url
        self._user = user
        self._client_name = client_name
        self._rng = rng

        self._lock = threading.Lock()
        self._credentials = EMPTY_CREDENTIALS
        self._authenticated = False

        self.http = HttpClient(http_client, timeout=timeout)
        self.system = SystemAPI(self)
        self.browsing = BrowsingAPI(self)
        self.search = SearchAPI(self)
        self.playlists = PlaylistsAPI(self)
        self.media = MediaAPI(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def user(self) -> str:
        return self._user

    @property
    def client_name(self) -> str:
        return self._client_name

    @property
    def credentials(self) -> Credentials:
        with self._lock:
            return self._credentials

    @property
    def authenticated(self) -> bool:
        with self._lock:
            return self._authenticated

    def set_credentials(self, credentials: Credentials) -> None:
        """Install a previously derived salt/token pair, e.g. from a saved login."""
        with self._lock:
            self._credentials = credentials
            self._authenticated = False

    async def authenticate(self, password: str) -> None:
        """Derive a fresh salt/token for ``password`` and verify it with a ping.

        Raises AuthError if the check fails for any reason; the underlying
        error is available as ``__cause__``.
        """
        credentials = derive_credentials(password, rng=self._rng)
        self.set_credentials(credentials)
        try:
            await self._get(PING_ENDPOINT, None, credentials)
        except SubsonicError as e:
            raise AuthError(f"Authentication failed for user {self._user!r}: {e}") from e
        with self._lock:
            # Another authenticate() may have replaced the pair meanwhile.
            if self._credentials is credentials:
                self._authenticated = True
        logger.info("Authenticated %r against %s", self._user, self._base_url)

    async def request(
        self, method: str, endpoint: str, params: Optional[Params] = None, *, stream: bool = False,
    ) -> httpx.Response:
        """Send an authenticated request and return the raw response.

        HTTP status codes are not interpreted. With ``stream=True`` the body
        is left unread and the caller must close the response.
        """
        return await self._send(method, endpoint, params, self.credentials, stream)

    async def get(self, endpoint: str, params: Optional[Params] = None) -> dict[str, Any]:
        """GET ``endpoint`` and return the decoded ``subsonic-response`` object."""
        return await self._get(endpoint, params, self.credentials)

    async def ping(self) -> bool:
        """True if the server answered the ping with a successful envelope."""
        try:
            await self.get(PING_ENDPOINT)
        except SubsonicError as e:
            logger.warning("Ping to %s failed: %s", self._base_url, e)
            return False
        return True

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncSubsonic":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _send(
        self,
        method: str,
        endpoint: str,
        params: Optional[Params],
        credentials: Credentials,
        stream: bool = False,
    ) -> httpx.Response:
        request = build_request(
            method, self._base_url, endpoint, params,
            client_name=self._client_name,
            user=self._user,
            credentials=credentials,
            client=self.http.client,
        )
        return await self.http.send(request, stream=stream)

    async def _get(self, endpoint: str, params: Optional[Params], credentials: Credentials) -> dict[str, Any]:
        response = await self._send("GET", endpoint, params, credentials)
        return decode_envelope(response.content)


class Subsonic:
    """Sync wrapper around AsyncSubsonic. Runs the event loop internally.

    Calls from several threads are serialized on the wrapper's loop.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        self._async = AsyncSubsonic(*args, **kwargs)
        self._loop = asyncio.new_event_loop()
        self._run_lock = threading.Lock()

    def _run(self, coro: Any) -> Any:
        with self._run_lock:
            return self._loop.run_until_complete(coro)

    @property
    def async_client(self) -> AsyncSubsonic:
        return self._async

    @property
    def credentials(self) -> Credentials:
        return self._async.credentials

    @property
    def authenticated(self) -> bool:
        return self._async.authenticated

    def set_credentials(self, credentials: Credentials) -> None:
        self._async.set_credentials(credentials)

    def authenticate(self, password: str) -> None:
        self._run(self._async.authenticate(password))

    def request(self, method: str, endpoint: str, params: Optional[Params] = None) -> httpx.Response:
        return self._run(self._async.request(method, endpoint, params))

    def get(self, endpoint: str, params: Optional[Params] = None) -> dict[str, Any]:
        return self._run(self._async.get(endpoint, params))

    def ping(self) -> bool:
        return self._run(self._async.ping())

    def get_license(self) -> License:
        return self._run(self._async.system.get_license())

    def close(self) -> None:
        if self._loop.is_closed():
            return
        self._run(self._async.close())
        self._loop.close()

    def __enter__(self) -> "Subsonic":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
