"""JSON-file-backed implementation of CartRepository.

A user's cart is created, empty, the first time it is looked up.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from ecommerce.domain.context import RequestContext
from ecommerce.domain.exceptions import EntityNotFoundError, ValidationError
from ecommerce.domain.model.cart import Cart, CartLine
from ecommerce.domain.model.value_objects import Money
from ecommerce.domain.repository.cart_repository import CartRepository


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def get_cart_by_user_id(self, ctx: RequestContext, user_id: str) -> Cart:
        ctx.raise_if_cancelled()
        records = self._load_raw()
        for raw in records:
            if raw["user_id"] == user_id:
                return self._to_domain(raw)

        cart = Cart(id=self._next_id(records), user_id=user_id)
        records.append(self._to_raw(cart))
        self._persist_raw(records)
        return cart

    def get_cart_line(
        self, ctx: RequestContext, cart_id: str, product_id: str
    ) -> CartLine:
        ctx.raise_if_cancelled()
        raw = self._find_cart(self._load_raw(), cart_id)
        for line in raw["lines"]:
            if line["product_id"] == product_id:
                return self._line_to_domain(cart_id, line)
        raise EntityNotFoundError(
            f"Product '{product_id}' is not in cart '{cart_id}'"
        )

    def create_cart_line(self, ctx: RequestContext, line: CartLine) -> None:
        ctx.raise_if_cancelled()
        records = self._load_raw()
        raw = self._find_cart(records, line.cart_id)
        if any(existing["product_id"] == line.product_id for existing in raw["lines"]):
            raise ValidationError(
                f"Product '{line.product_id}' is already in cart '{line.cart_id}'"
            )
        raw["lines"].append(self._line_to_raw(line))
        self._persist_raw(records)

    def update_cart_line(self, ctx: RequestContext, line: CartLine) -> None:
        ctx.raise_if_cancelled()
        records = self._load_raw()
        raw = self._find_cart(records, line.cart_id)
        for i, existing in enumerate(raw["lines"]):
            if existing["product_id"] == line.product_id:
                raw["lines"][i] = self._line_to_raw(line)
                self._persist_raw(records)
                return
        raise EntityNotFoundError(
            f"Product '{line.product_id}' is not in cart '{line.cart_id}'"
        )

    def remove_cart_line(self, ctx: RequestContext, line: CartLine) -> None:
        ctx.raise_if_cancelled()
        records = self._load_raw()
        raw = self._find_cart(records, line.cart_id)
        remaining = [
            existing for existing in raw["lines"] if existing["product_id"] != line.product_id
        ]
        if len(remaining) == len(raw["lines"]):
            raise EntityNotFoundError(
                f"Product '{line.product_id}' is not in cart '{line.cart_id}'"
            )
        raw["lines"] = remaining
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _line_to_raw(line: CartLine) -> dict:
        return {
            "product_id": line.product_id,
            "quantity": line.quantity,
            "price": str(line.price.amount),
            "currency": line.price.currency,
        }

    @staticmethod
    def _line_to_domain(cart_id: str, raw: dict) -> CartLine:
        return CartLine(
            cart_id=cart_id,
            product_id=raw["product_id"],
            quantity=raw["quantity"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
        )

    @classmethod
    def _to_raw(cls, cart: Cart) -> dict:
        return {
            "id": cart.id,
            "user_id": cart.user_id,
            "lines": [cls._line_to_raw(line) for line in cart.lines],
        }

    @classmethod
    def _to_domain(cls, raw: dict) -> Cart:
        return Cart(
            id=raw["id"],
            user_id=raw["user_id"],
            lines=[cls._line_to_domain(raw["id"], line) for line in raw["lines"]],
        )

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _find_cart(records: list[dict], cart_id: str) -> dict:
        for raw in records:
            if raw["id"] == cart_id:
                return raw
        raise EntityNotFoundError(f"Cart '{cart_id}' not found")

    @staticmethod
    def _next_id(records: list[dict]) -> str:
        if not records:
            return "1"
        return str(max(int(r["id"]) for r in records) + 1)

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
