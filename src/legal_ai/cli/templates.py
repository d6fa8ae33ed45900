"""CLI: legal-ai templates list|show|fill"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from legal_ai.errors import LegalAIError, ValidationError
from legal_ai.models.document import DocumentType
from legal_ai.templates import find_placeholders, initial_form_data, validate_form

console = Console()


def _get_client():
    from legal_ai.cli.main import _get_client
    return _get_client()


def _run(coro):
    from legal_ai.cli.main import _run
    return _run(coro)


def _ensure_signed_in(client):
    from legal_ai.cli.main import _ensure_signed_in
    return _ensure_signed_in(client)


@click.group()
def templates():
    """Document templates."""


@templates.command("list")
@click.option("--type", "document_type", type=click.Choice([t.value for t in DocumentType]), default=None)
@click.option("--json-output", "--json", is_flag=True)
def templates_list(document_type: Optional[str], json_output: bool):
    """List templates, optionally for one document type."""

    async def _list():
        client = _get_client()
        try:
            if document_type:
                items = await client.templates.list_by_type(DocumentType(document_type))
            else:
                items = await client.templates.list_all()
        finally:
            await client.close()
        if json_output:
            click.echo(json.dumps([t.model_dump(mode="json") for t in items], indent=2, ensure_ascii=False))
            return
        table = Table(title=f"Templates ({len(items)})")
        table.add_column("ID", style="bold")
        table.add_column("Type")
        table.add_column("Name")
        table.add_column("Description")
        for t in items:
            table.add_row(t.id, t.document_type.value, t.name, t.description)
        console.print(table)

    _run(_list())


@templates.command("show")
@click.argument("template_id")
def templates_show(template_id: str):
    """Show a template body and its fields."""

    async def _show():
        client = _get_client()
        try:
            template = await client.templates.get_by_id(template_id)
            fields = await client.templates.list_fields(template_id) if template else []
        finally:
            await client.close()
        if template is None:
            console.print(f"[red]Template not found: {template_id}[/red]")
            raise SystemExit(1)
        console.print(f"[bold]{template.name}[/bold] [dim]({template.document_type.value})[/dim]")
        console.print(template.content)
        table = Table(title="Fields")
        table.add_column("#")
        table.add_column("Name", style="bold")
        table.add_column("Label")
        table.add_column("Type")
        table.add_column("Required")
        for f in fields:
            table.add_row(str(f.order), f.field_name, f.display_name, f.field_type.value, "yes" if f.required else "")
        console.print(table)
        unfilled = [p for p in find_placeholders(template.content) if p not in {f.field_name for f in fields}]
        if unfilled:
            console.print(f"[yellow]Placeholders without a field: {', '.join(unfilled)}[/yellow]")

    _run(_show())


@templates.command("fill")
@click.argument("template_id")
@click.option("--set", "values", multiple=True, metavar="FIELD=VALUE", help="Pre-set a field value")
def templates_fill(template_id: str, values: tuple[str, ...]):
    """Fill a template field by field and generate the document."""

    async def _fill():
        client = _get_client()
        try:
            _ensure_signed_in(client)
            template = await client.templates.get_by_id(template_id)
            if template is None:
                console.print(f"[red]Template not found: {template_id}[/red]")
                raise SystemExit(1)
            fields = await client.templates.list_fields(template_id)
            form_data = initial_form_data(fields)
            for item in values:
                key, _, value = item.partition("=")
                form_data[key] = value

            for field in fields:
                if not form_data.get(field.field_name):
                    form_data[field.field_name] = click.prompt(
                        field.display_name, default="", show_default=False,
                    )
            errors = validate_form(fields, form_data, client.locale)
            for field in fields:
                while field.field_name in errors:
                    console.print(f"[red]{field.display_name}: {errors[field.field_name]}[/red]")
                    form_data[field.field_name] = click.prompt(field.display_name, default="", show_default=False)
                    errors = validate_form(fields, form_data, client.locale)

            conversation = client.conversation()
            with console.status("Generating..."):
                url = await conversation.generate_from_template(template_id, form_data)
        except ValidationError as e:
            console.print(f"[red]{e}: {e.details}[/red]")
            raise SystemExit(1)
        except LegalAIError as e:
            console.print(f"[red]{e}[/red]")
            raise SystemExit(1)
        finally:
            await client.close()

        console.print(f"[green]Document ready:[/green] {url}")
        document = client.documents.get(url)
        if document and document.content:
            console.print(document.content)

    _run(_fill())
