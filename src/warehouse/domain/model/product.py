"""Product aggregate — one inventory line in the warehouse.

A product is created once (with a unique name and nothing reserved) and
afterwards only its two quantities change.  The inventory engine never
mutates a Product in place; it hands back a new one built with
``with_quantities`` so a rejected request can't leave partial state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from warehouse.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Product:
    """Aggregate root for inventory tracking.

    ``id`` is ``None`` until the store inserts the product.
    """

    id: int | None
    name: str
    in_stock_quantity: int
    reserved_quantity: int = 0

    @property
    def available_quantity(self) -> int:
        return self.in_stock_quantity - self.reserved_quantity

    @property
    def is_in_stock(self) -> bool:
        """True if there is stock on hand that is not already reserved."""
        return self.in_stock_quantity > 0 and self.available_quantity > 0

    def with_quantities(
        self,
        in_stock_quantity: int | None = None,
        reserved_quantity: int | None = None,
    ) -> Product:
        """Return a copy with the given quantities; identity and name are kept."""
        return replace(
            self,
            in_stock_quantity=(
                self.in_stock_quantity if in_stock_quantity is None else in_stock_quantity
            ),
            reserved_quantity=(
                self.reserved_quantity if reserved_quantity is None else reserved_quantity
            ),
        )

    def check_invariants(self) -> None:
        """Raise ValidationError if this record could not have come from
        a successful operation (used when loading persisted data)."""
        if not self.name or not self.name.strip():
            raise ValidationError(f"Product #{self.id} has a blank name")
        if self.in_stock_quantity < 0:
            raise ValidationError(
                f"Product '{self.name}' has negative in-stock quantity "
                f"({self.in_stock_quantity})"
            )
        if self.reserved_quantity < 0:
            raise ValidationError(
                f"Product '{self.name}' has negative reserved quantity "
                f"({self.reserved_quantity})"
            )
