"""CLI commands for placing and looking up orders."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.schemas import parse_lookup_email, parse_place_order
from storefront.config import Settings
from storefront.domain.exceptions import DomainException, ValidationError
from storefront.domain.model.value_objects import Money
from storefront.infrastructure import bootstrap


def _parse_items(raw: str) -> list[dict]:
    """Parse '1:2,3:1' (product id : quantity) into cart entries."""
    entries: list[dict] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        pid_str, qty_str = pair.split(":", 1)
        try:
            entries.append({"product_id": int(pid_str), "quantity": int(qty_str)})
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product id and quantity must be integers."
            )
    return entries


def _validation_message(exc: ValidationError) -> str:
    if not exc.errors:
        return str(exc)
    details = "; ".join(f"{e['field']}: {e['message']}" for e in exc.errors)
    return f"{exc} ({details})"


@click.command("place")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--phone", required=True, help="Customer phone.")
@click.option("--address", required=True, help="Shipping address.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--payment", default=None, help="qr_code, bank_transfer or cod.")
@click.option("--shipping", default=None, help="standard or express.")
@click.option("--notes", default=None)
@click.option("--city", default=None)
@click.option("--country", default=None)
@click.option("--dob", default=None, help="Date of birth, YYYY-MM-DD.")
@click.option("--gender", default=None, help="male, female or other.")
@click.pass_obj
def order_place(
    settings: Settings,
    name: str,
    email: str,
    phone: str,
    address: str,
    items: str,
    payment: str | None,
    shipping: str | None,
    notes: str | None,
    city: str | None,
    country: str | None,
    dob: str | None,
    gender: str | None,
) -> None:
    """Place an order for a cart of products."""
    payload = {
        "customer_name": name,
        "customer_email": email,
        "customer_phone": phone,
        "shipping_address": address,
        "items": _parse_items(items),
        "payment_method": payment,
        "shipping_method": shipping,
        "notes": notes,
        "city": city,
        "country": country,
        "date_of_birth": dob,
        "gender": gender,
    }
    store = bootstrap.open_store(settings)
    handler = bootstrap.place_order_handler(store, settings)

    try:
        dto = handler.handle(parse_place_order({k: v for k, v in payload.items() if v is not None}))
    except ValidationError as exc:
        raise click.ClickException(_validation_message(exc))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} placed  (status={dto.status})")
    _display_order(dto)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    click.echo(f"Ship to:  {dto.shipping_address}")
    click.echo(f"Payment:  {dto.payment_method}  Shipping: {dto.shipping_method}")
    click.echo(f"Created:  {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Product':<30} {'Qty':>5} {'Price':>16} {'Total':>16}")
    click.echo(f"  {'-'*70}")
    for item in dto.items:
        name = item.product_name or f"#{item.product_id}"
        click.echo(
            f"  {name:<30} {item.quantity:>5} "
            f"{str(Money(item.price_at_purchase)):>16} {str(Money(item.line_total)):>16}"
        )
    click.echo(f"  {'-'*70}")
    click.echo(f"  {'Order Total':<37} {str(Money(dto.total_amount)):>32}")


@click.command("show")
@click.option("--number", "order_number", required=True, help="Order number, e.g. RP123456789.")
@click.pass_obj
def order_show(settings: Settings, order_number: str) -> None:
    """Show details of an existing order."""
    handler = bootstrap.show_order_handler(bootstrap.open_store(settings))

    try:
        dto = handler.handle(order_number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number}  (status={dto.status})")
    _display_order(dto)


@click.command("list")
@click.option("--email", required=True, help="Customer email.")
@click.pass_obj
def order_list(settings: Settings, email: str) -> None:
    """List a customer's orders, newest first."""
    try:
        normalized = parse_lookup_email(email)
        dtos = bootstrap.list_customer_orders_handler(bootstrap.open_store(settings)).handle(
            normalized
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo(f"No orders for {normalized}.")
        return
    for dto in dtos:
        click.echo(
            f"  {dto.order_number}  {dto.created_at.strftime('%Y-%m-%d %H:%M')}  "
            f"{dto.status:<10} {str(Money(dto.total_amount)):>16}"
        )
