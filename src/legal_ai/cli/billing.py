"""CLI: legal-ai billing status|orders|checkout"""

from datetime import datetime, timezone

import click
from rich.console import Console
from rich.table import Table

from legal_ai.billing import PRODUCTS, get_product_by_price_id, plan_name
from legal_ai.errors import CheckoutError
from legal_ai.i18n import translate

console = Console()


def _get_client():
    from legal_ai.cli.main import _get_client
    return _get_client()


def _run(coro):
    from legal_ai.cli.main import _run
    return _run(coro)


@click.group()
def billing():
    """Subscription and payments."""


@billing.command("status")
def billing_status():
    """Show the current subscription."""

    async def _status():
        client = _get_client()
        try:
            if client.auth.current_identity() is None:
                console.print(f"[yellow]{translate(client.locale, 'notLoggedIn')}[/yellow]")
                return
            subscription = await client.billing.get_subscription()
        finally:
            await client.close()
        if subscription is None or not subscription.is_active:
            console.print(f"[yellow]{translate(client.locale, 'noActiveSubscription')}[/yellow]")
            return
        line = f"[green]{plan_name(subscription, client.locale)}[/green] ({subscription.subscription_status})"
        if subscription.current_period_end:
            ends = datetime.fromtimestamp(subscription.current_period_end, tz=timezone.utc)
            line += f" until {ends:%Y-%m-%d}"
        console.print(line)

    _run(_status())


@billing.command("orders")
def billing_orders():
    """List past orders, newest first."""

    async def _orders():
        client = _get_client()
        try:
            orders = await client.billing.get_orders()
        finally:
            await client.close()
        table = Table(title=f"Orders ({len(orders)})")
        table.add_column("Date")
        table.add_column("Total")
        table.add_column("Payment")
        table.add_column("Status")
        for o in orders:
            total = f"{o.amount_total / 100:.2f} {(o.currency or '').upper()}" if o.amount_total is not None else ""
            table.add_row(o.order_date or "", total, o.payment_status or "", o.order_status or "")
        console.print(table)

    _run(_orders())


@billing.command("products")
def billing_products():
    """List purchasable plans."""
    table = Table(title="Products")
    table.add_column("Price ID", style="bold")
    table.add_column("Name")
    table.add_column("Mode")
    table.add_column("Description")
    for p in PRODUCTS.values():
        table.add_row(p.price_id, p.name, p.mode, p.description)
    console.print(table)


@billing.command("checkout")
@click.argument("price_id")
@click.option("--success-url", default="https://localhost/payment/success", show_default=True)
@click.option("--cancel-url", default="https://localhost/payment/canceled", show_default=True)
def billing_checkout(price_id: str, success_url: str, cancel_url: str):
    """Open a checkout session for a plan."""
    product = get_product_by_price_id(price_id)
    if product is None:
        console.print(f"[red]Unknown price: {price_id}[/red]")
        raise SystemExit(1)

    async def _checkout():
        client = _get_client()
        try:
            return await client.billing.create_checkout_session(price_id, product.mode, success_url, cancel_url)
        finally:
            await client.close()

    try:
        session = _run(_checkout())
    except CheckoutError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    console.print(f"[green]Checkout:[/green] {session.url or session.session_id}")
