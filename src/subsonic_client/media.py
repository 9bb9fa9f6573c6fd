"""
Media retrieval — stream, download, getCoverArt.

These return the raw streamed response: reading the bytes (and decoding
or playing them) is up to the caller, who must also close the response.
"""

from typing import TYPE_CHECKING, Any, Optional

import httpx

from subsonic_client.errors import EnvelopeError, TransportError
from subsonic_client.transport.envelope import decode_envelope

if TYPE_CHECKING:
    from subsonic_client.client import AsyncSubsonic

JSON_CONTENT_TYPES = ("application/json", "text/json")


class MediaAPI:
    def __init__(self, client: "AsyncSubsonic"):
        self._client = client

    async def stream(
        self,
        song_id: str,
        max_bit_rate: Optional[int] = None,
        format: Optional[str] = None,
        time_offset: Optional[int] = None,
    ) -> httpx.Response:
        """Stream a song, optionally transcoded to ``format`` at ``max_bit_rate`` kbps."""
        return await self._fetch("stream", {
            "id": song_id,
            "maxBitRate": max_bit_rate,
            "format": format,
            "timeOffset": time_offset,
        })

    async def download(self, song_id: str) -> httpx.Response:
        """Download the original file, without transcoding."""
        return await self._fetch("download", {"id": song_id})

    async def get_cover_art(self, cover_art_id: str, size: Optional[int] = None) -> httpx.Response:
        return await self._fetch("getCoverArt", {"id": cover_art_id, "size": size})

    async def _fetch(self, endpoint: str, params: dict[str, Any]) -> httpx.Response:
        response = await self._client.request("GET", endpoint, params, stream=True)
        content_type = response.headers.get("content-type", "")
        if not content_type.startswith(JSON_CONTENT_TYPES):
            return response
        # Failures come back as an envelope instead of media bytes.
        try:
            await response.aread()
        except httpx.HTTPError as e:
            raise TransportError(f"Reading {endpoint} response failed: {e!r}") from e
        finally:
            await response.aclose()
        decode_envelope(response.content)
        raise EnvelopeError(f"{endpoint} returned an envelope instead of media content")
