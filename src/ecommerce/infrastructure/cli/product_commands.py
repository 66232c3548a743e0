"""CLI commands for the Product aggregate."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from ecommerce.application.dto import (
    CreateProductRequest,
    ListProductRequest,
    UpdateProductRequest,
)
from ecommerce.domain.context import RequestContext
from ecommerce.domain.exceptions import DomainException
from ecommerce.infrastructure.bootstrap import Settings, product_use_case


def _parse_price(raw: str | None) -> Decimal | None:
    if raw is None:
        return None
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price '{raw}'.", param_hint="--price")


@click.command("list")
@click.option("--name", default=None, help="Filter by name (substring).")
@click.option("--page", default=1, show_default=True, type=int)
@click.option("--limit", default=20, show_default=True, type=int)
@click.pass_obj
def product_list(settings: Settings, name: str | None, page: int, limit: int) -> None:
    """List products in the catalog."""
    use_case = product_use_case(settings)

    try:
        products, pagination = use_case.list_products(
            RequestContext(), ListProductRequest(page=page, limit=limit, name=name)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}")
    click.echo(
        f"Page {pagination.current_page}/{pagination.total_pages} "
        f"({pagination.total} product(s))"
    )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: str) -> None:
    """Show a single product."""
    use_case = product_use_case(settings)

    try:
        p = use_case.get_product_by_id(RequestContext(), product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}  {p.name}  {p.price}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
def product_add(settings: Settings, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    use_case = product_use_case(settings)
    request = CreateProductRequest(name=name, price=_parse_price(price))

    try:
        p = use_case.create_product(RequestContext(), request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id} '{p.name}' added at {p.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(
    settings: Settings, product_id: str, name: str | None, price: str | None
) -> None:
    """Rename or reprice a product."""
    use_case = product_use_case(settings)
    request = UpdateProductRequest(name=name, price=_parse_price(price))

    try:
        p = use_case.update_product(RequestContext(), product_id, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id} is now '{p.name}' at {p.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str) -> None:
    """Remove a product from the catalog."""
    use_case = product_use_case(settings)

    try:
        use_case.delete_product(RequestContext(), product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
