"""CLI: subsonic ping|license|call|library|search|playlists"""

import json

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _get_client():
    from subsonic_client.cli.main import _get_client
    return _get_client()


def _run(coro):
    from subsonic_client.cli.main import _run
    return _run(coro)


def _dump(data) -> None:
    click.echo(json.dumps(data, indent=2))


def _duration(seconds: int) -> str:
    return f"{seconds // 60}:{seconds % 60:02d}"


def _parse_params(pairs: tuple[str, ...]) -> dict[str, list[str]]:
    params: dict[str, list[str]] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="-p/--param")
        params.setdefault(key, []).append(value)
    return params


@click.command("ping")
def ping_cmd():
    """Check that the server is reachable and accepts the saved login."""

    async def _ping():
        async with _get_client() as client:
            return await client.ping()

    if _run(_ping()):
        console.print("[green]Server is reachable.[/green]")
    else:
        console.print("[red]Server is unreachable or rejected the login.[/red]")
        raise SystemExit(1)


@click.command("license")
def license_cmd():
    """Show the server's license details."""

    async def _license():
        async with _get_client() as client:
            return await client.system.get_license()

    lic = _run(_license())
    state = "[green]valid[/green]" if lic.valid else "[red]invalid[/red]"
    console.print(f"License: {state}")
    if lic.email:
        console.print(f"Email: {lic.email}")
    if lic.license_expires:
        console.print(f"Expires: {lic.license_expires}")


@click.command("call")
@click.argument("endpoint")
@click.option("-p", "--param", "pairs", multiple=True, help="Query parameter as key=value (repeatable)")
def call_cmd(endpoint, pairs):
    """Issue a raw authenticated GET and print the response payload."""
    params = _parse_params(pairs)

    async def _call():
        async with _get_client() as client:
            return await client.get(endpoint, params)

    _dump(_run(_call()))


@click.group()
def library():
    """Browse artists and albums."""


@library.command("artists")
@click.option("--folder", "music_folder_id", default=None, help="Music folder ID")
@click.option("--json-output", "--json", is_flag=True)
def library_artists(music_folder_id, json_output):
    """List all artists."""

    async def _artists():
        async with _get_client() as client:
            return await client.browsing.get_artists(music_folder_id)

    indexes = _run(_artists())
    if json_output:
        _dump([i.model_dump(by_alias=True) for i in indexes])
        return
    table = Table(title="Artists")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Albums", justify="right")
    for index in indexes:
        for a in index.artists:
            table.add_row(a.id, a.name, str(a.album_count))
    console.print(table)


@library.command("artist")
@click.argument("artist_id")
@click.option("--json-output", "--json", is_flag=True)
def library_artist(artist_id, json_output):
    """Show an artist and their albums."""

    async def _artist():
        async with _get_client() as client:
            return await client.browsing.get_artist(artist_id)

    artist = _run(_artist())
    if json_output:
        _dump(artist.model_dump(by_alias=True))
        return
    table = Table(title=artist.name)
    table.add_column("ID", style="bold")
    table.add_column("Album")
    table.add_column("Year")
    table.add_column("Songs", justify="right")
    for album in artist.albums:
        table.add_row(album.id, album.name, str(album.year or ""), str(album.song_count))
    console.print(table)


@library.command("album")
@click.argument("album_id")
@click.option("--json-output", "--json", is_flag=True)
def library_album(album_id, json_output):
    """Show an album's track list."""

    async def _album():
        async with _get_client() as client:
            return await client.browsing.get_album(album_id)

    album = _run(_album())
    if json_output:
        _dump(album.model_dump(by_alias=True))
        return
    table = Table(title=f"{album.artist or ''} — {album.name}")
    table.add_column("#", justify="right")
    table.add_column("ID", style="bold")
    table.add_column("Title")
    table.add_column("Length", justify="right")
    for song in album.songs:
        table.add_row(str(song.track or ""), song.id, song.title, _duration(song.duration or 0))
    console.print(table)


@click.command("search")
@click.argument("query")
@click.option("--limit", default=10, type=int)
@click.option("--json-output", "--json", is_flag=True)
def search_cmd(query, limit, json_output):
    """Search artists, albums and songs."""

    async def _search():
        async with _get_client() as client:
            return await client.search.search3(query, artist_count=limit, album_count=limit, song_count=limit)

    result = _run(_search())
    if json_output:
        _dump(result.model_dump(by_alias=True))
        return
    table = Table(title=f"Results for {query!r}")
    table.add_column("Type")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    for a in result.artists:
        table.add_row("artist", a.id, a.name)
    for al in result.albums:
        table.add_row("album", al.id, f"{al.name} ({al.artist or '?'})")
    for s in result.songs:
        table.add_row("song", s.id, f"{s.title} ({s.artist or '?'})")
    console.print(table)


@click.group()
def playlists():
    """Playlist listing."""


@playlists.command("list")
@click.option("--json-output", "--json", is_flag=True)
def playlists_list(json_output):
    """List playlists."""

    async def _list():
        async with _get_client() as client:
            return await client.playlists.list()

    result = _run(_list())
    if json_output:
        _dump([p.model_dump(by_alias=True) for p in result])
        return
    table = Table(title=f"Playlists ({len(result)} total)")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Owner")
    table.add_column("Songs", justify="right")
    for p in result:
        table.add_row(p.id, p.name, p.owner or "", str(p.song_count))
    console.print(table)


@playlists.command("show")
@click.argument("playlist_id")
def playlists_show(playlist_id):
    """Show a playlist's entries."""

    async def _show():
        async with _get_client() as client:
            return await client.playlists.get(playlist_id)

    playlist = _run(_show())
    table = Table(title=playlist.name)
    table.add_column("ID", style="bold")
    table.add_column("Title")
    table.add_column("Artist")
    table.add_column("Length", justify="right")
    for song in playlist.entries:
        table.add_row(song.id, song.title, song.artist or "", _duration(song.duration or 0))
    console.print(table)
