"""
Search endpoint — search3.
"""

from typing import TYPE_CHECKING, Optional

from subsonic_client.models.library import SearchResult
from subsonic_client.transport.envelope import payload_field

if TYPE_CHECKING:
    from subsonic_client.client import AsyncSubsonic


class SearchAPI:
    def __init__(self, client: "AsyncSubsonic"):
        self._client = client

    async def search3(
        self,
        query: str,
        artist_count: int = 20,
        album_count: int = 20,
        song_count: int = 20,
        offset: int = 0,
        music_folder_id: Optional[str] = None,
    ) -> SearchResult:
        """Search artists, albums and songs by ID3 tags. ``offset`` applies to all three lists."""
        payload = await self._client.get("search3", {
            "query": query,
            "artistCount": artist_count,
            "artistOffset": offset,
            "albumCount": album_count,
            "albumOffset": offset,
            "songCount": song_count,
            "songOffset": offset,
            "musicFolderId": music_folder_id,
        })
        return SearchResult.model_validate(payload_field(payload, "searchResult3"))
