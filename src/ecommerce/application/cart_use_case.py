"""Application service: Cart use cases.

Every mutation prices the line from the product's *current* catalog
price; whatever price the line carried before is discarded.
"""

from __future__ import annotations

import logging

from ecommerce.application.dto import (
    AddProductRequest,
    RemoveProductRequest,
    UpdateCartLineRequest,
)
from ecommerce.application.validator import Validator
from ecommerce.domain.context import RequestContext
from ecommerce.domain.model.cart import Cart, CartLine
from ecommerce.domain.repository.cart_repository import CartRepository
from ecommerce.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CartUseCase:

    def __init__(
        self,
        validator: Validator,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._validator = validator
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def get_cart_by_user_id(self, ctx: RequestContext, user_id: str) -> Cart:
        return self._cart_repo.get_cart_by_user_id(ctx, user_id)

    def add_product(self, ctx: RequestContext, request: AddProductRequest) -> CartLine:
        """Add a product to a cart as a new line."""
        self._validator.validate_struct(request)

        product = self._product_repo.get_product_by_id(ctx, request.product_id)
        line = CartLine.for_product(request.cart_id, product, request.quantity)
        self._cart_repo.create_cart_line(ctx, line)

        logger.info(
            "Added product=%s qty=%d to cart=%s",
            line.product_id, line.quantity, line.cart_id,
        )
        return line

    def update_cart_line(
        self, ctx: RequestContext, request: UpdateCartLineRequest
    ) -> CartLine:
        """Change the quantity of an existing line and reprice it."""
        self._validator.validate_struct(request)

        product = self._product_repo.get_product_by_id(ctx, request.product_id)
        line = self._cart_repo.get_cart_line(ctx, request.cart_id, request.product_id)

        line.reprice(product, request.quantity)
        self._cart_repo.update_cart_line(ctx, line)

        logger.info(
            "Updated cart=%s product=%s qty=%d",
            line.cart_id, line.product_id, line.quantity,
        )
        return line

    def remove_product(self, ctx: RequestContext, request: RemoveProductRequest) -> None:
        line = self._cart_repo.get_cart_line(ctx, request.cart_id, request.product_id)
        self._cart_repo.remove_cart_line(ctx, line)
        logger.info("Removed product=%s from cart=%s", line.product_id, line.cart_id)
