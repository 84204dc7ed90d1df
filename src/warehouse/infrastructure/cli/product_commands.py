"""CLI commands for the Product aggregate."""

from __future__ import annotations

import json

import click

from warehouse.application.add_product import AddProductHandler
from warehouse.application.list_products import ListProductsHandler
from warehouse.application.show_product import ShowProductHandler
from warehouse.domain.exceptions import DomainException
from warehouse.infrastructure.bootstrap import Settings, product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name (made unique if taken).")
@click.option("--in-stock", "in_stock", required=True, type=int, help="Units on hand.")
@click.pass_obj
def product_add(settings: Settings, name: str, in_stock: int) -> None:
    """Add a new product to the warehouse."""
    handler = AddProductHandler(product_repo=product_repository(settings))

    try:
        response = handler.handle(name=name, in_stock_quantity=in_stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(response.to_dict()))
    if not response.success:
        raise SystemExit(1)


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: int) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository(settings))

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(dto.to_dict()))


@click.command("list")
@click.option(
    "--in-stock", "in_stock_only", is_flag=True, default=False,
    help="Only products with unreserved units on hand.",
)
@click.pass_obj
def product_list(settings: Settings, in_stock_only: bool) -> None:
    """List products."""
    handler = ListProductsHandler(product_repo=product_repository(settings))

    try:
        dtos = handler.handle(in_stock_only=in_stock_only)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'In stock':>9} {'Reserved':>9}")
    click.echo("-" * 51)
    for p in dtos:
        click.echo(
            f"{p.id:<6} {p.name:<24} {p.in_stock_quantity:>9} {p.reserved_quantity:>9}"
        )
