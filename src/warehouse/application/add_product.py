"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from warehouse.application.dto import CreateResponse, ProductDTO
from warehouse.domain.model.results import Accepted
from warehouse.domain.repository.product_repository import ProductRepository
from warehouse.domain.service import inventory_engine

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str | None, in_stock_quantity: int) -> CreateResponse:
        """Add a new product under a unique name.

        The name snapshot is taken once, right before deciding.
        """
        existing_names = [p.name for p in self._product_repo.list_all()]
        result = inventory_engine.add(name, in_stock_quantity, existing_names)

        if not isinstance(result, Accepted):
            logger.warning("add of %r rejected: %s", name, result.reason.value)
            return CreateResponse(success=False, error_reason=result.reason)

        created = self._product_repo.insert(result.product)
        if created.name != (name or "").strip():
            logger.info("name %r taken, stored as %r", name, created.name)
        logger.info(
            "product #%s '%s' added with %d in stock",
            created.id, created.name, created.in_stock_quantity,
        )
        return CreateResponse(success=True, model=ProductDTO.from_domain(created))
