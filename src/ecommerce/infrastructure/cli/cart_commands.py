"""CLI commands for the Cart aggregate.

Carts are addressed by their owner; each command looks the cart up
from ``--user`` first.
"""

from __future__ import annotations

import click

from ecommerce.application.dto import (
    AddProductRequest,
    RemoveProductRequest,
    UpdateCartLineRequest,
)
from ecommerce.domain.context import RequestContext
from ecommerce.domain.exceptions import DomainException
from ecommerce.infrastructure.bootstrap import Settings, cart_use_case


@click.command("show")
@click.option("--user", "user_id", required=True, help="Cart owner.")
@click.pass_obj
def cart_show(settings: Settings, user_id: str) -> None:
    """Show the user's cart."""
    use_case = cart_use_case(settings)

    try:
        c = use_case.get_cart_by_user_id(RequestContext(), user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart #{c.id}  (user={c.user_id})")
    if not c.lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*37}")
    for line in c.lines:
        click.echo(f"  {line.product_id:<20} {line.quantity:>5} {str(line.price):>10}")
    click.echo(f"  {'-'*37}")
    click.echo(f"  {'Cart Total':<26} {str(c.total):>10}")


@click.command("add")
@click.option("--user", "user_id", required=True, help="Cart owner.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int)
@click.pass_obj
def cart_add(settings: Settings, user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to the user's cart."""
    use_case = cart_use_case(settings)
    ctx = RequestContext()

    try:
        c = use_case.get_cart_by_user_id(ctx, user_id)
        line = use_case.add_product(
            ctx, AddProductRequest(cart_id=c.id, product_id=product_id, quantity=quantity)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {line.quantity} x {line.product_id} ({line.price}) to cart #{c.id}")


@click.command("update")
@click.option("--user", "user_id", required=True, help="Cart owner.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int)
@click.pass_obj
def cart_update(settings: Settings, user_id: str, product_id: str, quantity: int) -> None:
    """Change the quantity of a product already in the cart."""
    use_case = cart_use_case(settings)
    ctx = RequestContext()

    try:
        c = use_case.get_cart_by_user_id(ctx, user_id)
        line = use_case.update_cart_line(
            ctx,
            UpdateCartLineRequest(cart_id=c.id, product_id=product_id, quantity=quantity),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart #{c.id}: {line.product_id} now {line.quantity} ({line.price})")


@click.command("remove")
@click.option("--user", "user_id", required=True, help="Cart owner.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def cart_remove(settings: Settings, user_id: str, product_id: str) -> None:
    """Remove a product from the cart."""
    use_case = cart_use_case(settings)
    ctx = RequestContext()

    try:
        c = use_case.get_cart_by_user_id(ctx, user_id)
        use_case.remove_product(ctx, RemoveProductRequest(cart_id=c.id, product_id=product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed {product_id} from cart #{c.id}")
