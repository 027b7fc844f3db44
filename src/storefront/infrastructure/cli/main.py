import click

from storefront.config import Settings
from storefront.infrastructure.cli.order_commands import order_list, order_place, order_show
from storefront.infrastructure.cli.product_commands import product_add, product_list
from storefront.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Rare Parfume storefront"""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def order() -> None:
    """Place and look up orders."""


@cli.group()
def product() -> None:
    """Manage the catalog."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=5000, show_default=True, type=int)
@click.option("--debug", is_flag=True, default=False)
@click.pass_obj
def serve(settings: Settings, host: str, port: int, debug: bool) -> None:
    """Run the HTTP API on the development server."""
    from storefront.infrastructure.web.app import create_app

    create_app(settings).run(host=host, port=port, debug=debug)


# Register subcommands
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
