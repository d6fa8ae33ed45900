"""CLI: legal-ai config show|set"""

import json

import click
import pydantic
from rich.console import Console

from legal_ai.config import Settings, load_config_file, save_config_file

console = Console()


def _load_settings() -> Settings:
    from legal_ai.cli.main import _load_settings
    return _load_settings()


@click.group()
def config():
    """Settings stored in ~/.legal-ai/config.json."""


@config.command("show")
def config_show():
    """Show effective settings."""
    settings = _load_settings()
    data = settings.model_dump(mode="json")
    if data.get("supabase_anon_key"):
        data["supabase_anon_key"] = data["supabase_anon_key"][:6] + "..."
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@config.command("set")
@click.argument("key", type=click.Choice([k for k in Settings.model_fields if k != "state_dir"]))
@click.argument("value")
def config_set(key: str, value: str):
    """Persist one setting."""
    settings = _load_settings()
    data = load_config_file(settings.config_file)
    data[key] = value
    try:
        Settings.model_validate(data)
    except pydantic.ValidationError as e:
        console.print(f"[red]Invalid value for {key}: {e.errors()[0]['msg']}[/red]")
        raise SystemExit(1)
    save_config_file(settings.config_file, data)
    console.print(f"[green]{key} saved to {settings.config_file}[/green]")
