"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from warehouse.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the warehouse."""

    def query(self, predicate: Callable[[Product], bool]) -> list[Product]:
        """Return the products matching *predicate*."""
        return [p for p in self.list_all() if predicate(p)]

    @abstractmethod
    def insert(self, product: Product) -> Product:
        """Store a new product and return it with its assigned ID.

        Raises ValidationError if the product already has an ID.
        """

    @abstractmethod
    def update_quantities(self, product: Product) -> Product:
        """Persist the quantity fields of an existing product.

        Raises EntityNotFoundError if no product has ``product.id``.
        """
