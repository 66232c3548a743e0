"""Application service: Product use cases.

Listing and lookup are straight delegations to the repository. Catalog
maintenance validates the request first.
"""

from __future__ import annotations

import logging

from ecommerce.application.dto import (
    CreateProductRequest,
    ListProductRequest,
    UpdateProductRequest,
)
from ecommerce.application.validator import Validator
from ecommerce.domain.context import RequestContext
from ecommerce.domain.model.pagination import Pagination
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from ecommerce.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductUseCase:

    def __init__(self, validator: Validator, product_repo: ProductRepository) -> None:
        self._validator = validator
        self._product_repo = product_repo

    # --- Queries --------------------------------------------------------------

    def list_products(
        self, ctx: RequestContext, request: ListProductRequest
    ) -> tuple[list[Product], Pagination]:
        return self._product_repo.list_products(ctx, request)

    def get_product_by_id(self, ctx: RequestContext, product_id: str) -> Product:
        return self._product_repo.get_product_by_id(ctx, product_id)

    # --- Commands -------------------------------------------------------------

    def create_product(self, ctx: RequestContext, request: CreateProductRequest) -> Product:
        """Add a product to the catalog; the repository assigns its ID."""
        self._validator.validate_struct(request)

        product = Product(id="", name=request.name.strip(), price=Money.of(request.price))
        self._product_repo.create_product(ctx, product)

        logger.info("Created product id=%s", product.id)
        return product

    def update_product(
        self, ctx: RequestContext, product_id: str, request: UpdateProductRequest
    ) -> Product:
        """Rename and/or reprice a product.

        Orders placed earlier keep the price they were placed at.
        """
        self._validator.validate_struct(request)

        product = self._product_repo.get_product_by_id(ctx, product_id)
        if request.name is not None:
            product.name = request.name.strip()
        if request.price is not None:
            product.update_price(Money.of(request.price))
        self._product_repo.update_product(ctx, product)

        logger.info("Updated product id=%s", product.id)
        return product

    def delete_product(self, ctx: RequestContext, product_id: str) -> None:
        product = self._product_repo.get_product_by_id(ctx, product_id)
        self._product_repo.delete_product(ctx, product)
        logger.info("Deleted product id=%s", product_id)
