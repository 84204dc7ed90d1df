"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry requests in and responses out of the application layer.
``to_dict`` produces the camelCase JSON shape used on the wire, e.g.
``{"success": false, "errorReason": "NotEnoughQuantity"}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from warehouse.domain.model.product import Product
from warehouse.domain.model.results import ErrorReason


@dataclass(frozen=True)
class UpdateQuantityRequest:
    """Input: change the quantity of product ``id`` by ``quantity``."""

    id: int
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as shown to the outside world."""

    id: int
    name: str
    in_stock_quantity: int
    reserved_quantity: int

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            in_stock_quantity=product.in_stock_quantity,
            reserved_quantity=product.reserved_quantity,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "inStockQuantity": self.in_stock_quantity,
            "reservedQuantity": self.reserved_quantity,
        }


@dataclass(frozen=True)
class UpdateResponse:
    """Output of Order / Ship / Restock."""

    success: bool
    error_reason: ErrorReason | None = None

    def to_dict(self) -> dict[str, Any]:
        raw: dict[str, Any] = {"success": self.success}
        if self.error_reason is not None:
            raw["errorReason"] = self.error_reason.value
        return raw


@dataclass(frozen=True)
class CreateResponse:
    """Output of Add; ``model`` is only set on success."""

    success: bool
    error_reason: ErrorReason | None = None
    model: ProductDTO | None = None

    def to_dict(self) -> dict[str, Any]:
        raw: dict[str, Any] = {"success": self.success}
        if self.error_reason is not None:
            raw["errorReason"] = self.error_reason.value
        if self.model is not None:
            raw["model"] = self.model.to_dict()
        return raw
