"""Application service: Ship Item use case.

Shipping fulfils an earlier reservation, so both the reserved and the
in-stock quantity go down.
"""

from __future__ import annotations

from warehouse.application.update_quantity import UpdateQuantityHandler
from warehouse.domain.model.product import Product
from warehouse.domain.model.results import OperationResult
from warehouse.domain.service import inventory_engine


class ShipItemHandler(UpdateQuantityHandler):

    action = "ship"

    def decide(self, product: Product | None, quantity: int) -> OperationResult:
        return inventory_engine.ship(product, quantity)
