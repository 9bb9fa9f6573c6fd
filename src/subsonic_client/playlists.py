"""
Playlists REST API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from subsonic_client.models.library import Playlist
from subsonic_client.transport.envelope import payload_field

if TYPE_CHECKING:
    from subsonic_client.client import AsyncSubsonic


class PlaylistsAPI:
    def __init__(self, client: AsyncSubsonic):
        self._client = client

    async def list(self, username: Optional[str] = None) -> list[Playlist]:
        """List playlists visible to the current user, or to ``username`` (admin only)."""
        payload = await self._client.get("getPlaylists", {"username": username})
        playlists = payload_field(payload, "playlists")
        return [Playlist.model_validate(p) for p in playlists.get("playlist", [])]

    async def get(self, playlist_id: str) -> Playlist:
        payload = await self._client.get("getPlaylist", {"id": playlist_id})
        return Playlist.model_validate(payload_field(payload, "playlist"))

    async def create(self, name: str, song_ids: Iterable[str] = ()) -> Optional[Playlist]:
        """Create a playlist. Servers older than API 1.14.0 return no playlist body."""
        payload = await self._client.get("createPlaylist", {"name": name, "songId": list(song_ids)})
        if "playlist" not in payload:
            return None
        return Playlist.model_validate(payload["playlist"])

    async def delete(self, playlist_id: str) -> None:
        await self._client.get("deletePlaylist", {"id": playlist_id})
