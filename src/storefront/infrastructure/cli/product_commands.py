"""CLI commands for the catalog."""

from __future__ import annotations

import click

from storefront.config import Settings
from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import Money
from storefront.infrastructure import bootstrap


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price in VND.")
@click.option("--stock", "stock_quantity", default=0, show_default=True, type=int,
              help="Units in stock.")
@click.option("--inactive", is_flag=True, default=False, help="Add as not for sale.")
@click.option("--image", "images", multiple=True, help="Image URL; repeat for more.")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    price: str,
    stock_quantity: int,
    inactive: bool,
    images: tuple[str, ...],
) -> None:
    """Add a product to the catalog."""
    handler = bootstrap.add_product_handler(bootstrap.open_store(settings))

    try:
        dto = handler.handle(
            name=name,
            price=price,
            stock_quantity=stock_quantity,
            is_active=not inactive,
            image_urls=list(images),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} added: {dto.name} at {Money(dto.price)}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List the catalog with prices and stock."""
    handler = bootstrap.list_products_handler(bootstrap.open_store(settings))
    products = handler.handle()

    if not products:
        click.echo("No products in catalog.")
        return

    click.echo(f"  {'ID':<5} {'Product':<30} {'Price':>16} {'Stock':>6}  Status")
    click.echo(f"  {'-'*68}")
    for p in products:
        status = "active" if p.is_active else "inactive"
        click.echo(
            f"  {p.id:<5} {p.name:<30} {str(Money(p.price)):>16} {p.stock_quantity:>6}  {status}"
        )
