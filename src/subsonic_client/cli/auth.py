"""CLI: subsonic auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

from subsonic_client.client import DEFAULT_CLIENT_NAME

console = Console()


def _load_config() -> dict:
    from subsonic_client.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from subsonic_client.cli.main import _save_config
    _save_config(cfg)


def _make_client(base_url: str, user: str, client_name: str):
    from subsonic_client.cli.main import _make_client
    return _make_client(base_url, user, client_name)


def _run(coro):
    from subsonic_client.cli.main import _run
    return _run(coro)


@click.group()
def auth():
    """Authentication commands."""


@auth.command("login")
@click.option("--base-url", default=None, help="Server URL, e.g. https://music.example.com")
@click.option("--user", default=None, help="Subsonic username")
@click.option("--client-name", default=None, help="Client identifier sent as `c`")
def auth_login(base_url: Optional[str], user: Optional[str], client_name: Optional[str]):
    """Log in with a salted token. The password is never saved."""
    cfg = _load_config()
    url = base_url or cfg.get("base_url") or click.prompt("Server URL")
    username = user or cfg.get("user") or click.prompt("Username")
    name = client_name or cfg.get("client_name", DEFAULT_CLIENT_NAME)
    password = click.prompt("Password", hide_input=True)

    async def _login():
        async with _make_client(url, username, name) as client:
            with console.status("Authenticating..."):
                await client.authenticate(password)
            return client.credentials

    credentials = _run(_login())
    console.print(f"[green]Logged in as {username} on {url}[/green]")
    _save_config({**cfg, "base_url": url, "user": username, "client_name": name,
                  "salt": credentials.salt, "token": credentials.token})
    console.print("[dim]Token saved to ~/.subsonic/config.json[/dim]")


@auth.command("status")
def auth_status():
    """Show current auth status."""
    cfg = _load_config()
    if cfg.get("token"):
        console.print(f"[green]Logged in[/green] as {cfg.get('user', 'unknown')} on {cfg.get('base_url')}")
    else:
        console.print("[yellow]Not logged in. Run `subsonic auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear saved credentials."""
    cfg = _load_config()
    cfg.pop("salt", None)
    cfg.pop("token", None)
    _save_config(cfg)
    console.print("[green]Logged out.[/green]")
