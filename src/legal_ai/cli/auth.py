"""CLI: legal-ai auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

from legal_ai.errors import AuthError

console = Console()


def _get_client():
    from legal_ai.cli.main import _get_client
    return _get_client()


@click.group()
def auth():
    """Authentication commands."""


@auth.command("login")
@click.option("--email", default=None, help="Email address")
@click.option("--phone", default=None, help="Phone number (optional)")
def auth_login(email: Optional[str], phone: Optional[str]):
    """Sign in with email (and optionally phone)."""
    client = _get_client()
    if email is None:
        email = click.prompt("Email")
    if phone is None:
        phone = click.prompt("Phone (optional)", default="", show_default=False)
    try:
        identity = client.auth.login(email, phone or None)
    except AuthError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    console.print(f"[green]Logged in as {identity.email}[/green]")
    console.print(f"[dim]Session saved to {client.settings.session_file}[/dim]")


@auth.command("status")
def auth_status():
    """Show current auth status."""
    identity = _get_client().auth.current_identity()
    if identity:
        phone = f" ({identity.phone})" if identity.phone else ""
        console.print(f"[green]Logged in[/green] as {identity.email}{phone}")
    else:
        console.print("[yellow]Not logged in. Run `legal-ai auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear the saved session."""
    _get_client().auth.logout()
    console.print("[green]Logged out.[/green]")
