"""
Browsing endpoints — folders, artists, albums, songs (ID3 tag based).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from subsonic_client.models.library import Album, Artist, ArtistIndex, MusicFolder, Song
from subsonic_client.transport.envelope import payload_field

if TYPE_CHECKING:
    from subsonic_client.client import AsyncSubsonic


class BrowsingAPI:
    def __init__(self, client: AsyncSubsonic):
        self._client = client

    async def get_music_folders(self) -> list[MusicFolder]:
        payload = await self._client.get("getMusicFolders")
        folders = payload_field(payload, "musicFolders")
        return [MusicFolder.model_validate(f) for f in folders.get("musicFolder", [])]

    async def get_artists(self, music_folder_id: Optional[str] = None) -> list[ArtistIndex]:
        payload = await self._client.get("getArtists", {"musicFolderId": music_folder_id})
        artists = payload_field(payload, "artists")
        return [ArtistIndex.model_validate(i) for i in artists.get("index", [])]

    async def get_artist(self, artist_id: str) -> Artist:
        payload = await self._client.get("getArtist", {"id": artist_id})
        return Artist.model_validate(payload_field(payload, "artist"))

    async def get_album(self, album_id: str) -> Album:
        payload = await self._client.get("getAlbum", {"id": album_id})
        return Album.model_validate(payload_field(payload, "album"))

    async def get_song(self, song_id: str) -> Song:
        payload = await self._client.get("getSong", {"id": song_id})
        return Song.model_validate(payload_field(payload, "song"))
