"""CLI: legal-ai kb search"""

import click
from rich.console import Console
from rich.panel import Panel

from legal_ai import knowledge

console = Console()


@click.group()
def kb():
    """Legal knowledge base."""


@kb.command("search")
@click.argument("query", required=False, default="")
def kb_search(query: str):
    """Search articles by title, text or tag."""
    categories = knowledge.search(query)
    if not categories:
        console.print("[yellow]Nothing found.[/yellow]")
        return
    for category in categories:
        console.print(f"[bold]{category.title}[/bold]")
        for doc in category.documents:
            console.print(Panel(doc.content, title=doc.title, subtitle=", ".join(doc.tags), border_style="blue"))
