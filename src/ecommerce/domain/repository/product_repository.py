"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Implementations raise EntityNotFoundError for unknown
ids; they never return None.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ecommerce.domain.context import RequestContext
from ecommerce.domain.model.pagination import Pagination
from ecommerce.domain.model.product import Product

if TYPE_CHECKING:
    from ecommerce.application.dto import ListProductRequest


class ProductRepository(ABC):

    @abstractmethod
    def list_products(
        self, ctx: RequestContext, request: ListProductRequest
    ) -> tuple[list[Product], Pagination]:
        """Return one page of products and its pagination descriptor."""

    @abstractmethod
    def get_product_by_id(self, ctx: RequestContext, product_id: str) -> Product:
        """Return a product by its ID."""

    @abstractmethod
    def create_product(self, ctx: RequestContext, product: Product) -> None:
        """Persist a new product. An empty ``id`` is assigned by the repository."""

    @abstractmethod
    def update_product(self, ctx: RequestContext, product: Product) -> None:
        """Persist changes to an existing product."""

    @abstractmethod
    def delete_product(self, ctx: RequestContext, product: Product) -> None:
        """Remove a product from the catalog."""
