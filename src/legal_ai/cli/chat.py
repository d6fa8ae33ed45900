"""CLI: legal-ai chat, legal-ai ask"""

import json

import click
from rich.console import Console
from rich.panel import Panel

from legal_ai.errors import AuthError, LegalAIError
from legal_ai.i18n import document_type_name
from legal_ai.models.document import ChatMode

console = Console()

MODES = click.Choice([m.value for m in ChatMode])


def _get_client():
    from legal_ai.cli.main import _get_client
    return _get_client()


def _run(coro):
    from legal_ai.cli.main import _run
    return _run(coro)


def _sign_in(client):
    from legal_ai.cli.main import _sign_in
    return _sign_in(client)


def _print_references(conversation) -> None:
    for ref in conversation.references:
        console.print(Panel(ref.content, title=ref.title, border_style="blue"))


def _print_state(conversation) -> None:
    if conversation.mode != ChatMode.DOCUMENT:
        return
    doc_type = (document_type_name(conversation.locale, conversation.document_type)
                if conversation.document_type else "-")
    console.print(f"[dim][document: {doc_type} | status: {conversation.document_status.value}][/dim]")


async def _generate(client, conversation) -> None:
    try:
        url = await conversation.generate_document()
    except AuthError:
        _sign_in(client)
        url = await conversation.generate_document()
    console.print(f"[green]Document ready:[/green] {url}")


@click.command("chat")
@click.option("--mode", type=MODES, default=ChatMode.DOCUMENT.value, show_default=True)
def chat_cmd(mode: str):
    """Interactive chat with the legal assistant.

    Commands inside the chat: /generate, /reset, /quit
    """

    async def _chat():
        client = _get_client()
        conversation = client.conversation(ChatMode(mode))
        console.print(f"[green]Assistant:[/green] {conversation.messages[0].content}")
        console.print("[cyan]Type your message (/generate, /reset, /quit)[/cyan]\n")
        try:
            while True:
                msg = click.prompt("You", prompt_suffix=": ")
                command = msg.strip().lower()
                if command in ("/quit", "/exit"):
                    break
                if command == "/reset":
                    conversation.reset()
                    console.print(f"[green]Assistant:[/green] {conversation.messages[0].content}")
                    continue
                if command == "/generate":
                    try:
                        with console.status("Generating..."):
                            await _generate(client, conversation)
                    except LegalAIError as e:
                        console.print(f"[red]{e}[/red]")
                    continue
                try:
                    with console.status("Thinking..."):
                        reply = await conversation.send_message(msg)
                except LegalAIError as e:
                    console.print(f"[red]{e}[/red]")
                    continue
                console.print(f"[green]Assistant:[/green] {reply.content}")
                _print_references(conversation)
                _print_state(conversation)
        except (KeyboardInterrupt, EOFError, click.Abort):
            pass
        finally:
            await client.close()

    _run(_chat())


@click.command("ask")
@click.argument("message")
@click.option("--mode", type=MODES, default=ChatMode.DOCUMENT.value, show_default=True)
@click.option("--json-output", "--json", is_flag=True)
def ask_cmd(message: str, mode: str, json_output: bool):
    """Send a one-shot message."""

    async def _ask():
        client = _get_client()
        try:
            conversation = client.conversation(ChatMode(mode))
            reply = await conversation.send_message(message)
        finally:
            await client.close()
        if json_output:
            click.echo(json.dumps({
                "response": reply.content,
                "documentType": conversation.document_type.value if conversation.document_type else None,
                "documentStatus": conversation.document_status.value,
                "references": [r.model_dump() for r in conversation.references],
            }, ensure_ascii=False))
            return
        console.print(f"[green]Assistant:[/green] {reply.content}")
        _print_references(conversation)
        _print_state(conversation)

    _run(_ask())
