"""
Subsonic CLI — `subsonic` command.

Commands:
  subsonic auth login            Derive and save a salted token
  subsonic ping                  Check that the server is reachable
  subsonic license               Show license details
  subsonic call <endpoint>       Raw authenticated GET, JSON output
  subsonic library <cmd>         Artists and albums
  subsonic search <query>        search3
  subsonic playlists <cmd>       Playlist listing
"""

import asyncio
import json
import logging
from pathlib import Path

try:
    import click
    from rich.console import Console
    from rich.markup import escape
except ImportError:
    raise SystemExit("CLI requires extras: pip install subsonic-client[cli]")

from subsonic_client.auth import Credentials
from subsonic_client.client import DEFAULT_CLIENT_NAME, AsyncSubsonic
from subsonic_client.errors import ApiError, SubsonicError

console = Console()
CONFIG_FILE = Path.home() / ".subsonic" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _make_client(base_url: str, user: str, client_name: str = DEFAULT_CLIENT_NAME) -> AsyncSubsonic:
    return AsyncSubsonic(base_url, user, client_name)


def _get_client() -> AsyncSubsonic:
    cfg = _load_config()
    if not cfg.get("token") or not cfg.get("salt"):
        console.print("[red]Not logged in. Run `subsonic auth login` first.[/red]")
        raise SystemExit(1)
    client = _make_client(cfg["base_url"], cfg["user"], cfg.get("client_name", DEFAULT_CLIENT_NAME))
    client.set_credentials(Credentials(salt=cfg["salt"], token=cfg["token"]))
    return client


def _run(coro):
    try:
        return asyncio.run(coro)
    except ApiError as e:
        console.print(f"[red]Server error {e.error_code}: {escape(str(e))}[/red]")
    except SubsonicError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
    raise SystemExit(1)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr.")
def main(verbose: bool):
    """Subsonic CLI — talk to a Subsonic-compatible music server."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands from separate modules
from subsonic_client.cli.auth import auth
from subsonic_client.cli.library import call_cmd, library, license_cmd, ping_cmd, playlists, search_cmd

main.add_command(auth)
main.add_command(ping_cmd)
main.add_command(license_cmd)
main.add_command(call_cmd)
main.add_command(library)
main.add_command(search_cmd)
main.add_command(playlists)


if __name__ == "__main__":
    main()
