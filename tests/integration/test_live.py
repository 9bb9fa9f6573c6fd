"""
Integration tests for subsonic-client — tests against a real server.

Requires environment variables:
  SUBSONIC_URL       — server base URL, e.g. https://demo.navidrome.org
  SUBSONIC_USER      — username
  SUBSONIC_PASSWORD  — password

Run: SUBSONIC_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest

from subsonic_client import ApiError, AsyncSubsonic, AuthError, ErrorCode

SKIP = not os.environ.get("SUBSONIC_INTEGRATION")
BASE_URL = os.environ.get("SUBSONIC_URL", "")
USER = os.environ.get("SUBSONIC_USER", "")
PASSWORD = os.environ.get("SUBSONIC_PASSWORD", "")

pytestmark = pytest.mark.skipif(SKIP, reason="SUBSONIC_INTEGRATION not set")


def make_client() -> AsyncSubsonic:
    return AsyncSubsonic(BASE_URL, USER, "subsonic-client-tests")


class TestAuthentication:
    @pytest.mark.asyncio
    async def test_authenticate_and_ping(self):
        async with make_client() as client:
            await client.authenticate(PASSWORD)
            assert client.authenticated
            assert await client.ping()

    @pytest.mark.asyncio
    async def test_rejects_wrong_password(self):
        async with make_client() as client:
            with pytest.raises(AuthError) as exc_info:
                await client.authenticate(PASSWORD + "-wrong")
            assert isinstance(exc_info.value.__cause__, ApiError)
            assert exc_info.value.__cause__.error_code == ErrorCode.WRONG_CREDENTIALS


class TestLibrary:
    @pytest.mark.asyncio
    async def test_license(self):
        async with make_client() as client:
            await client.authenticate(PASSWORD)
            lic = await client.system.get_license()
            assert isinstance(lic.valid, bool)

    @pytest.mark.asyncio
    async def test_browse_first_album(self):
        async with make_client() as client:
            await client.authenticate(PASSWORD)
            indexes = await client.browsing.get_artists()
            artists = [a for index in indexes for a in index.artists]
            if not artists:
                pytest.skip("server library is empty")
            artist = await client.browsing.get_artist(artists[0].id)
            assert artist.id == artists[0].id

    @pytest.mark.asyncio
    async def test_not_found(self):
        async with make_client() as client:
            await client.authenticate(PASSWORD)
            with pytest.raises(ApiError) as exc_info:
                await client.browsing.get_album("does-not-exist-0000")
            assert exc_info.value.error_code in (ErrorCode.NOT_FOUND, ErrorCode.GENERIC)
