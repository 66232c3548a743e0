"""Order aggregate — the core of the domain.

An order is created NEW by placement and changes status only through the
order use case. DONE and CANCELED are terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ecommerce.domain.exceptions import InvalidOrderStatusError, InvalidStatusError
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money


class OrderStatus(Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    CANCELED = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DONE, OrderStatus.CANCELED)

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        """Return the status named by *raw*.

        Raises InvalidStatusError for anything outside the four known
        values. Matching is exact: ``"Done"`` is not ``"done"``.
        """
        try:
            return OrderStatus(raw)
        except ValueError as exc:
            raise InvalidStatusError() from exc


@dataclass
class OrderLine:
    """A priced line of an order.

    ``price`` is locked at placement time. ``product`` is the snapshot of
    the catalog entry resolved at placement; repositories that do not
    store it leave it ``None``.
    """

    product_id: str
    quantity: int
    price: Money
    product: Product | None = None


@dataclass
class Order:
    id: str
    user_id: str
    lines: list[OrderLine] = field(default_factory=list)
    total_price: Money = field(default_factory=Money.zero)
    status: OrderStatus = OrderStatus.NEW

    # --- State transitions ----------------------------------------------------

    def transition_to(self, new_status: OrderStatus) -> None:
        """Move to *new_status*.

        NEW and IN_PROGRESS accept any target, including themselves and
        a direct jump to DONE. Terminal orders accept nothing.
        """
        if self.status.is_terminal:
            raise InvalidOrderStatusError()
        self.status = new_status

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id
