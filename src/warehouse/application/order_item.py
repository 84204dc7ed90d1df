"""Application service: Order Item use case (reserve stock)."""

from __future__ import annotations

from warehouse.application.update_quantity import UpdateQuantityHandler
from warehouse.domain.model.product import Product
from warehouse.domain.model.results import OperationResult
from warehouse.domain.service import inventory_engine


class OrderItemHandler(UpdateQuantityHandler):

    action = "order"

    def decide(self, product: Product | None, quantity: int) -> OperationResult:
        return inventory_engine.order(product, quantity)
