"""Domain service: Inventory Operation Engine.

Pure decision logic for the four inventory operations.  Each function
takes the current state, checks the rules in a fixed order (missing
product, then negative quantity, then capacity) and returns either
``Accepted`` with the new state or ``Rejected`` with the first rule
that failed.

Nothing here touches storage: the application handlers fetch the
product beforehand and persist the accepted state afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable

from warehouse.domain.model.product import Product
from warehouse.domain.model.results import (
    Accepted,
    ErrorReason,
    OperationResult,
    Rejected,
)
from warehouse.domain.service.name_resolver import resolve_unique_name


def order(product: Product | None, quantity: int) -> OperationResult:
    """Reserve *quantity* units.

    Rejected with NOT_ENOUGH_QUANTITY if the reservation would exceed
    the stock on hand.
    """
    if product is None:
        return Rejected(ErrorReason.INVALID_REQUEST)
    if quantity < 0:
        return Rejected(ErrorReason.QUANTITY_INVALID)

    if product.reserved_quantity + quantity > product.in_stock_quantity:
        return Rejected(ErrorReason.NOT_ENOUGH_QUANTITY)

    return Accepted(
        product.with_quantities(reserved_quantity=product.reserved_quantity + quantity)
    )


def ship(product: Product | None, quantity: int) -> OperationResult:
    """Ship *quantity* reserved units.

    Only the reservation is checked; the stock on hand is floored at
    zero rather than validated.  With ``reserved <= in_stock`` holding
    beforehand the floor never kicks in.
    """
    if product is None:
        return Rejected(ErrorReason.INVALID_REQUEST)
    if quantity < 0:
        return Rejected(ErrorReason.QUANTITY_INVALID)

    if quantity > product.reserved_quantity:
        return Rejected(ErrorReason.NOT_ENOUGH_QUANTITY)

    return Accepted(
        product.with_quantities(
            in_stock_quantity=max(product.in_stock_quantity - quantity, 0),
            reserved_quantity=product.reserved_quantity - quantity,
        )
    )


def restock(product: Product | None, quantity: int) -> OperationResult:
    """Add *quantity* units to the stock on hand."""
    if product is None:
        return Rejected(ErrorReason.INVALID_REQUEST)
    if quantity < 0:
        return Rejected(ErrorReason.QUANTITY_INVALID)

    return Accepted(
        product.with_quantities(in_stock_quantity=product.in_stock_quantity + quantity)
    )


def add(
    name: str | None,
    in_stock_quantity: int,
    existing_names: Iterable[str],
) -> OperationResult:
    """Build a new, not yet stored product.

    The name is made unique against *existing_names*; the reserved
    quantity always starts at zero.  The returned product has no ID.
    """
    if name is None or not name.strip():
        return Rejected(ErrorReason.INVALID_REQUEST)
    if in_stock_quantity < 0:
        return Rejected(ErrorReason.QUANTITY_INVALID)

    return Accepted(
        Product(
            id=None,
            name=resolve_unique_name(name, existing_names),
            in_stock_quantity=in_stock_quantity,
            reserved_quantity=0,
        )
    )
