"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ecommerce.domain.context import RequestContext
from ecommerce.domain.model.order import Order, OrderLine
from ecommerce.domain.model.pagination import Pagination

if TYPE_CHECKING:
    from ecommerce.application.dto import ListOrdersRequest


class OrderRepository(ABC):

    @abstractmethod
    def create_order(
        self, ctx: RequestContext, user_id: str, lines: list[OrderLine]
    ) -> Order:
        """Persist a NEW order made of *lines*.

        The repository assigns the ID and computes ``total_price``. The
        returned lines must be in submission order.
        """

    @abstractmethod
    def get_order_by_id(self, ctx: RequestContext, order_id: str, preload: bool) -> Order:
        """Return an order; its lines are loaded only when *preload* is true."""

    @abstractmethod
    def get_my_orders(
        self, ctx: RequestContext, request: ListOrdersRequest
    ) -> tuple[list[Order], Pagination]:
        """Return one page of the requesting user's orders."""

    @abstractmethod
    def update_order(self, ctx: RequestContext, order: Order) -> None:
        """Persist changes to an existing order."""
