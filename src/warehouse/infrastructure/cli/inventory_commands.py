"""CLI commands for quantity changes (order, ship, restock)."""

from __future__ import annotations

import json

import click

from warehouse.application.dto import UpdateQuantityRequest
from warehouse.application.order_item import OrderItemHandler
from warehouse.application.restock_item import RestockItemHandler
from warehouse.application.ship_item import ShipItemHandler
from warehouse.application.update_quantity import UpdateQuantityHandler
from warehouse.domain.exceptions import DomainException
from warehouse.infrastructure.bootstrap import Settings, product_repository


def _run(
    handler_cls: type[UpdateQuantityHandler],
    settings: Settings,
    product_id: int,
    quantity: int,
) -> None:
    """Shared body: run the handler, print the response, fail on rejection."""
    handler = handler_cls(product_repo=product_repository(settings))

    try:
        response = handler.handle(UpdateQuantityRequest(id=product_id, quantity=quantity))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(response.to_dict()))
    if not response.success:
        raise SystemExit(1)


@click.command("order")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to reserve.")
@click.pass_obj
def inventory_order(settings: Settings, product_id: int, quantity: int) -> None:
    """Reserve units of a product."""
    _run(OrderItemHandler, settings, product_id, quantity)


@click.command("ship")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Reserved units to ship.")
@click.pass_obj
def inventory_ship(settings: Settings, product_id: int, quantity: int) -> None:
    """Ship reserved units (deducts stock)."""
    _run(ShipItemHandler, settings, product_id, quantity)


@click.command("restock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units received.")
@click.pass_obj
def inventory_restock(settings: Settings, product_id: int, quantity: int) -> None:
    """Add units to the stock on hand."""
    _run(RestockItemHandler, settings, product_id, quantity)
