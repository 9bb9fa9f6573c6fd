"""
Library models — typed views over endpoint payloads.

Subsonic sends camelCase keys; fields here are snake_case with camelCase
aliases. Unknown keys are kept so server extensions are not lost.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SubsonicModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )


class License(SubsonicModel):
    valid: bool
    email: Optional[str] = None
    license_expires: Optional[str] = None
    trial_expires: Optional[str] = None


class MusicFolder(SubsonicModel):
    id: str
    name: Optional[str] = None


class Song(SubsonicModel):
    id: str
    title: str = ""
    album: Optional[str] = None
    artist: Optional[str] = None
    album_id: Optional[str] = None
    artist_id: Optional[str] = None
    track: Optional[int] = None
    year: Optional[int] = None
    genre: Optional[str] = None
    duration: Optional[int] = None    # seconds
    bit_rate: Optional[int] = None    # kbps
    size: Optional[int] = None        # bytes
    suffix: Optional[str] = None
    content_type: Optional[str] = None
    cover_art: Optional[str] = None
    is_dir: bool = False


class Album(SubsonicModel):
    id: str
    name: str = ""
    artist: Optional[str] = None
    artist_id: Optional[str] = None
    cover_art: Optional[str] = None
    song_count: int = 0
    duration: int = 0
    year: Optional[int] = None
    created: Optional[str] = None
    songs: list[Song] = Field(default_factory=list, alias="song")


class Artist(SubsonicModel):
    id: str
    name: str = ""
    cover_art: Optional[str] = None
    album_count: int = 0
    albums: list[Album] = Field(default_factory=list, alias="album")


class ArtistIndex(SubsonicModel):
    name: str
    artists: list[Artist] = Field(default_factory=list, alias="artist")


class Playlist(SubsonicModel):
    id: str
    name: str = ""
    owner: Optional[str] = None
    public: Optional[bool] = None
    song_count: int = 0
    duration: int = 0
    created: Optional[str] = None
    changed: Optional[str] = None
    entries: list[Song] = Field(default_factory=list, alias="entry")


class SearchResult(SubsonicModel):
    artists: list[Artist] = Field(default_factory=list, alias="artist")
    albums: list[Album] = Field(default_factory=list, alias="album")
    songs: list[Song] = Field(default_factory=list, alias="song")
