"""Application service: Restock Item use case."""

from __future__ import annotations

from warehouse.application.update_quantity import UpdateQuantityHandler
from warehouse.domain.model.product import Product
from warehouse.domain.model.results import OperationResult
from warehouse.domain.service import inventory_engine


class RestockItemHandler(UpdateQuantityHandler):

    action = "restock"

    def decide(self, product: Product | None, quantity: int) -> OperationResult:
        return inventory_engine.restock(product, quantity)
