"""Outcome of an inventory operation.

Every operation either succeeds with the new product state or is
rejected for exactly one ``ErrorReason``.  The two variants are separate
types so callers branch with ``isinstance`` (or ``match``) instead of
checking a boolean and a nullable field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from warehouse.domain.model.product import Product


class ErrorReason(Enum):
    INVALID_REQUEST = "InvalidRequest"
    QUANTITY_INVALID = "QuantityInvalid"
    NOT_ENOUGH_QUANTITY = "NotEnoughQuantity"


@dataclass(frozen=True)
class Accepted:
    """The request passed every rule; ``product`` is the state to persist."""

    product: Product

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """The request broke a business rule; nothing should be persisted."""

    reason: ErrorReason

    @property
    def success(self) -> bool:
        return False


OperationResult: TypeAlias = Accepted | Rejected
