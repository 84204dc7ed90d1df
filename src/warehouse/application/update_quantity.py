"""Shared flow for the quantity-changing use cases.

Order, Ship and Restock all run the same fetch -> decide -> persist
sequence; they differ only in the engine function that decides.

The sequence is not atomic.  Two concurrent requests against the same
product can both decide on the state they read, so this assumes a
single writer per store.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from warehouse.application.dto import UpdateQuantityRequest, UpdateResponse
from warehouse.domain.model.product import Product
from warehouse.domain.model.results import Accepted, OperationResult
from warehouse.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateQuantityHandler(ABC):

    #: Short verb used in log lines, e.g. "order".
    action = "update"

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    @abstractmethod
    def decide(self, product: Product | None, quantity: int) -> OperationResult:
        """Return the engine's decision for *quantity* against *product*."""

    def handle(self, request: UpdateQuantityRequest) -> UpdateResponse:
        product = self._product_repo.get_by_id(request.id)
        result = self.decide(product, request.quantity)

        if not isinstance(result, Accepted):
            logger.warning(
                "%s of %d for product #%s rejected: %s",
                self.action, request.quantity, request.id, result.reason.value,
            )
            return UpdateResponse(success=False, error_reason=result.reason)

        self._product_repo.update_quantities(result.product)
        logger.info(
            "%s of %d for product #%s accepted (in stock %d, reserved %d)",
            self.action, request.quantity, request.id,
            result.product.in_stock_quantity, result.product.reserved_quantity,
        )
        return UpdateResponse(success=True)
