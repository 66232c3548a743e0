"""JSON-file-backed implementation of OrderRepository.

Lines are stored without the product snapshot; only the product ID,
quantity and locked price are kept.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from ecommerce.application.dto import ListOrdersRequest
from ecommerce.domain.context import RequestContext
from ecommerce.domain.exceptions import EntityNotFoundError
from ecommerce.domain.model.order import Order, OrderLine, OrderStatus
from ecommerce.domain.model.pagination import Pagination
from ecommerce.domain.model.value_objects import Money
from ecommerce.domain.repository.order_repository import OrderRepository
from ecommerce.domain.service.pricing import total_price


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def create_order(
        self, ctx: RequestContext, user_id: str, lines: list[OrderLine]
    ) -> Order:
        ctx.raise_if_cancelled()
        orders = self._load_raw()
        order = Order(
            id=self._next_id(orders),
            user_id=user_id,
            lines=[
                OrderLine(product_id=line.product_id, quantity=line.quantity, price=line.price)
                for line in lines
            ],
            total_price=total_price([line.price for line in lines]),
            status=OrderStatus.NEW,
        )
        orders.append(self._to_raw(order))
        self._persist_raw(orders)
        return order

    def get_order_by_id(self, ctx: RequestContext, order_id: str, preload: bool) -> Order:
        ctx.raise_if_cancelled()
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw, preload=preload)
        raise EntityNotFoundError(f"Order #{order_id} not found")

    def get_my_orders(
        self, ctx: RequestContext, request: ListOrdersRequest
    ) -> tuple[list[Order], Pagination]:
        ctx.raise_if_cancelled()
        matching = [
            raw
            for raw in self._load_raw()
            if raw["user_id"] == request.user_id
            and (request.status is None or raw["status"] == request.status)
        ]
        pagination = Pagination.new(request.page, request.limit, len(matching))
        page = matching[pagination.skip:pagination.skip + pagination.limit]
        return [self._to_domain(raw, preload=True) for raw in page], pagination

    def update_order(self, ctx: RequestContext, order: Order) -> None:
        ctx.raise_if_cancelled()
        orders = self._load_raw()
        for raw in orders:
            if raw["id"] == order.id:
                # Only the status is mutable; lines may not have been preloaded.
                raw["status"] = order.status.value
                self._persist_raw(orders)
                return
        raise EntityNotFoundError(f"Order #{order.id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "status": order.status.value,
            "total_price": str(order.total_price.amount),
            "currency": order.total_price.currency,
            "lines": [
                {
                    "product_id": line.product_id,
                    "quantity": line.quantity,
                    "price": str(line.price.amount),
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict, preload: bool) -> Order:
        currency = raw.get("currency", "USD")
        lines = []
        if preload:
            lines = [
                OrderLine(
                    product_id=line["product_id"],
                    quantity=line["quantity"],
                    price=Money(Decimal(line["price"]), currency),
                )
                for line in raw["lines"]
            ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            lines=lines,
            total_price=Money(Decimal(raw["total_price"]), currency),
            status=OrderStatus(raw["status"]),
        )

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _next_id(orders: list[dict]) -> str:
        if not orders:
            return "1"
        return str(max(int(o["id"]) for o in orders) + 1)

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
