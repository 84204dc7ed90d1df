"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

from warehouse.domain.exceptions import EntityNotFoundError, ValidationError
from warehouse.domain.model.product import Product
from warehouse.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def insert(self, product: Product) -> Product:
        if product.id is not None:
            raise ValidationError(
                f"Cannot insert product '{product.name}' — it already has ID {product.id}"
            )
        products = self._load()
        stored = replace(product, id=max(products, default=0) + 1)
        products[stored.id] = stored  # type: ignore[index]
        self._persist(products)
        logger.debug("inserted product #%s '%s'", stored.id, stored.name)
        return stored

    def update_quantities(self, product: Product) -> Product:
        products = self._load()
        existing = products.get(product.id)  # type: ignore[arg-type]
        if existing is None:
            raise EntityNotFoundError(f"Product #{product.id} not found")

        # Only the quantities are writable; name and id stay as stored.
        updated = existing.with_quantities(
            in_stock_quantity=product.in_stock_quantity,
            reserved_quantity=product.reserved_quantity,
        )
        products[updated.id] = updated  # type: ignore[index]
        self._persist(products)
        logger.debug(
            "updated product #%s: in stock %d, reserved %d",
            updated.id, updated.in_stock_quantity, updated.reserved_quantity,
        )
        return updated

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "in_stock_quantity": product.in_stock_quantity,
            "reserved_quantity": product.reserved_quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        product = Product(
            id=int(raw["id"]),
            name=raw["name"],
            in_stock_quantity=raw["in_stock_quantity"],
            reserved_quantity=raw.get("reserved_quantity", 0),
        )
        product.check_invariants()
        return product

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[int, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"{self._file_path} is not valid JSON: {exc.msg} (line {exc.lineno})"
            ) from exc
        products = [self._to_domain(item) for item in raw]
        return {p.id: p for p in products}  # type: ignore[misc]

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [self._to_raw(p) for _, p in sorted(products.items())]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
