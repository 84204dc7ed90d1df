"""Application service: List Products use case (query).

With ``in_stock_only`` this is the public catalog: products with units
on hand that are not all reserved already.
"""

from __future__ import annotations

from warehouse.application.dto import ProductDTO
from warehouse.domain.model.product import Product
from warehouse.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, in_stock_only: bool = False) -> list[ProductDTO]:
        if in_stock_only:
            products = self._product_repo.query(lambda p: p.is_in_stock)
        else:
            products = self._product_repo.list_all()
        return [ProductDTO.from_domain(p) for p in sorted(products, key=_by_id)]


def _by_id(product: Product) -> int:
    return product.id or 0
