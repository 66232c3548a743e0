"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from ecommerce.application.dto import ListProductRequest
from ecommerce.domain.context import RequestContext
from ecommerce.domain.exceptions import EntityNotFoundError
from ecommerce.domain.model.pagination import Pagination
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from ecommerce.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def list_products(
        self, ctx: RequestContext, request: ListProductRequest
    ) -> tuple[list[Product], Pagination]:
        ctx.raise_if_cancelled()
        products = list(self._load().values())
        if request.name:
            needle = request.name.lower()
            products = [p for p in products if needle in p.name.lower()]

        pagination = Pagination.new(request.page, request.limit, len(products))
        page = products[pagination.skip:pagination.skip + pagination.limit]
        return page, pagination

    def get_product_by_id(self, ctx: RequestContext, product_id: str) -> Product:
        ctx.raise_if_cancelled()
        product = self._load().get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def create_product(self, ctx: RequestContext, product: Product) -> None:
        ctx.raise_if_cancelled()
        products = self._load()
        if not product.id:
            product.id = self._next_id(products)
        products[product.id] = product
        self._persist(products)
        logger.debug("Stored product id=%s in %s", product.id, self._file_path)

    def update_product(self, ctx: RequestContext, product: Product) -> None:
        ctx.raise_if_cancelled()
        products = self._load()
        if product.id not in products:
            raise EntityNotFoundError(f"Product with ID '{product.id}' not found")
        products[product.id] = product
        self._persist(products)

    def delete_product(self, ctx: RequestContext, product: Product) -> None:
        ctx.raise_if_cancelled()
        products = self._load()
        if products.pop(product.id, None) is None:
            raise EntityNotFoundError(f"Product with ID '{product.id}' not found")
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _next_id(products: dict[str, Product]) -> str:
        numeric = [int(pid) for pid in products if pid.isdigit()]
        return str(max(numeric) + 1) if numeric else "1"

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
