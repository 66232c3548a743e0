"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ecommerce.application.dto import (
    ListOrdersRequest,
    PlaceOrderLineRequest,
    PlaceOrderRequest,
)
from ecommerce.domain.context import RequestContext
from ecommerce.domain.exceptions import DomainException
from ecommerce.domain.model.order import Order, OrderStatus
from ecommerce.infrastructure.bootstrap import Settings, order_use_case


def _parse_lines(raw: str) -> list[PlaceOrderLineRequest]:
    """Parse 'p1:3,p2:5' into PlaceOrderLineRequest list."""
    specs: list[PlaceOrderLineRequest] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(PlaceOrderLineRequest(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(o: Order) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{o.id}  (status={o.status.value})")
    click.echo(f"User: {o.user_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*37}")
    for line in o.lines:
        name = line.product.name if line.product is not None else line.product_id
        click.echo(f"  {name:<20} {line.quantity:>5} {str(line.price):>10}")
    click.echo(f"  {'-'*37}")
    click.echo(f"  {'Order Total':<26} {str(o.total_price):>10}")


@click.command("place")
@click.option("--user", "user_id", required=True, help="Ordering user.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.pass_obj
def order_place(settings: Settings, user_id: str, items: str) -> None:
    """Place a new order."""
    request = PlaceOrderRequest(user_id=user_id, lines=_parse_lines(items))
    use_case = order_use_case(settings)

    try:
        o = use_case.place_order(RequestContext(), request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{o.id} placed")
    _display_order(o)


@click.command("list")
@click.option("--user", "user_id", required=True, help="Orders of this user.")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus]),
    default=None,
    help="Only orders in this status.",
)
@click.option("--page", default=1, show_default=True, type=int)
@click.option("--limit", default=20, show_default=True, type=int)
@click.pass_obj
def order_list(
    settings: Settings, user_id: str, status: str | None, page: int, limit: int
) -> None:
    """List a user's orders."""
    use_case = order_use_case(settings)
    request = ListOrdersRequest(user_id=user_id, page=page, limit=limit, status=status)

    try:
        orders, pagination = use_case.list_my_orders(RequestContext(), request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<12} {'Lines':>5} {'Total':>10}")
    click.echo("-" * 36)
    for o in orders:
        click.echo(f"{o.id:<6} {o.status.value:<12} {len(o.lines):>5} {str(o.total_price):>10}")
    click.echo(
        f"Page {pagination.current_page}/{pagination.total_pages} "
        f"({pagination.total} order(s))"
    )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: str) -> None:
    """Show details of an existing order."""
    use_case = order_use_case(settings)

    try:
        o = use_case.get_order_by_id(RequestContext(), order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(o)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--user", "user_id", required=True, help="Order owner.")
@click.option("--status", required=True, help="new, in_progress, done or canceled.")
@click.pass_obj
def order_status(settings: Settings, order_id: str, user_id: str, status: str) -> None:
    """Change the status of an order."""
    use_case = order_use_case(settings)

    try:
        o = use_case.update_order(RequestContext(), order_id, user_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{o.id} is now {o.status.value}.")
