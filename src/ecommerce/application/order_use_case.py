"""Application service: Order use cases.

Placement resolves every product, prices each line from the current
catalog and hands the lines to the repository, which assigns the ID and
the total. Status updates run the order state machine after an ownership
check.
"""

from __future__ import annotations

import logging

from ecommerce.application.dto import ListOrdersRequest, PlaceOrderRequest
from ecommerce.application.validator import Validator
from ecommerce.domain.context import RequestContext
from ecommerce.domain.exceptions import (
    InvalidOrderStatusError,
    PermissionDeniedError,
    RepositoryContractError,
)
from ecommerce.domain.model.order import Order, OrderLine, OrderStatus
from ecommerce.domain.model.pagination import Pagination
from ecommerce.domain.model.product import Product
from ecommerce.domain.repository.order_repository import OrderRepository
from ecommerce.domain.repository.product_repository import ProductRepository
from ecommerce.domain.service.pricing import line_price

logger = logging.getLogger(__name__)


class OrderUseCase:

    def __init__(
        self,
        validator: Validator,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._validator = validator
        self._order_repo = order_repo
        self._product_repo = product_repo

    # --- Placement ------------------------------------------------------------

    def place_order(self, ctx: RequestContext, request: PlaceOrderRequest) -> Order:
        """Place a NEW order for ``request.user_id``.

        Steps:
        1. Validate the request (no lookups on failure).
        2. Resolve every product in input order; the first failure aborts.
        3. Price each line as ``product.price * quantity``.
        4. Let the repository persist it, assign the ID and total.
        5. Attach the resolved products to the returned lines.
        """
        self._validator.validate_struct(request)
        logger.debug(
            "Placing order for user=%s with %d line(s)", request.user_id, len(request.lines)
        )

        products: list[Product] = [
            self._product_repo.get_product_by_id(ctx, item.product_id)
            for item in request.lines
        ]

        lines = [
            OrderLine(
                product_id=product.id,
                quantity=item.quantity,
                price=line_price(product, item.quantity),  # <-- price snapshot
                product=product,
            )
            for item, product in zip(request.lines, products)
        ]

        order = self._order_repo.create_order(ctx, request.user_id, lines)
        self._attach_products(order, products)

        logger.info(
            "Placed order id=%s user=%s total=%s",
            order.id, order.user_id, order.total_price,
        )
        return order

    # --- Queries --------------------------------------------------------------

    def list_my_orders(
        self, ctx: RequestContext, request: ListOrdersRequest
    ) -> tuple[list[Order], Pagination]:
        return self._order_repo.get_my_orders(ctx, request)

    def get_order_by_id(self, ctx: RequestContext, order_id: str) -> Order:
        return self._order_repo.get_order_by_id(ctx, order_id, preload=True)

    # --- Status transition ----------------------------------------------------

    def update_order(
        self, ctx: RequestContext, order_id: str, user_id: str, status: str
    ) -> Order:
        """Move an order to *status* on behalf of *user_id*.

        Checks run in a fixed order: ownership, then the current status
        (terminal orders never move), then the requested status.
        """
        order = self._order_repo.get_order_by_id(ctx, order_id, preload=False)

        if not order.is_owned_by(user_id):
            logger.warning("User %s may not update order %s", user_id, order_id)
            raise PermissionDeniedError()

        if order.status.is_terminal:
            logger.warning(
                "Order %s is %s and cannot change status", order_id, order.status.value
            )
            raise InvalidOrderStatusError()

        new_status = OrderStatus.parse(status)
        previous = order.status
        order.transition_to(new_status)
        self._order_repo.update_order(ctx, order)

        logger.info(
            "Order %s status %s -> %s", order_id, previous.value, new_status.value
        )
        return order

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _attach_products(order: Order, products: list[Product]) -> None:
        """Copy the resolved products onto the repository's lines by position."""
        if len(order.lines) != len(products):
            raise RepositoryContractError(
                f"Order {order.id} came back with {len(order.lines)} line(s), "
                f"expected {len(products)}"
            )
        for line, product in zip(order.lines, products):
            if line.product_id != product.id:
                raise RepositoryContractError(
                    f"Order {order.id} line for product '{line.product_id}' "
                    f"is out of order, expected '{product.id}'"
                )
            line.product = product
