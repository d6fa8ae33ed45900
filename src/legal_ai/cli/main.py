"""
Legal AI CLI: `legal-ai` command.

Commands:
  legal-ai auth login              Sign in (required to generate documents)
  legal-ai chat [--mode]           Interactive REPL chat
  legal-ai ask <message>           One-shot message
  legal-ai templates <cmd>         Browse and fill document templates
  legal-ai billing <cmd>           Subscription status, orders, checkout
  legal-ai kb search <query>       Search the legal knowledge base
  legal-ai config <cmd>            Show or change settings
"""

import asyncio
import logging

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install legal-ai[cli]")

from legal_ai.client import AsyncLegalAI
from legal_ai.config import Settings
from legal_ai.errors import AuthError
from legal_ai.models.identity import Identity

console = Console()


def _load_settings() -> Settings:
    return Settings.load()


def _get_client() -> AsyncLegalAI:
    return AsyncLegalAI(_load_settings())


def _run(coro):
    return asyncio.run(coro)


def _sign_in(client: AsyncLegalAI) -> Identity:
    """Interactive sign-in, repeated until the email is accepted."""
    console.print("[yellow]Sign in to generate documents.[/yellow]")
    while True:
        email = click.prompt("Email")
        phone = click.prompt("Phone (optional)", default="", show_default=False)
        try:
            return client.auth.login(email, phone or None)
        except AuthError as e:
            console.print(f"[red]{e}[/red]")


def _ensure_signed_in(client: AsyncLegalAI) -> Identity:
    return client.auth.current_identity() or _sign_in(client)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Show SDK log output")
def main(verbose: bool):
    """Legal AI CLI: legal documents through a conversation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


# Register subcommands from separate modules
from legal_ai.cli.auth import auth
from legal_ai.cli.chat import chat_cmd, ask_cmd
from legal_ai.cli.templates import templates
from legal_ai.cli.billing import billing
from legal_ai.cli.kb import kb
from legal_ai.cli.config import config

main.add_command(auth)
main.add_command(chat_cmd)
main.add_command(ask_cmd)
main.add_command(templates)
main.add_command(billing)
main.add_command(kb)
main.add_command(config)


if __name__ == "__main__":
    main()
