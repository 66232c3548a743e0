"""Abstract repository for Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecommerce.domain.context import RequestContext
from ecommerce.domain.model.cart import Cart, CartLine


class CartRepository(ABC):

    @abstractmethod
    def get_cart_by_user_id(self, ctx: RequestContext, user_id: str) -> Cart:
        """Return the user's cart with its lines."""

    @abstractmethod
    def get_cart_line(
        self, ctx: RequestContext, cart_id: str, product_id: str
    ) -> CartLine:
        """Return the line for *product_id* in *cart_id*, or raise EntityNotFoundError."""

    @abstractmethod
    def create_cart_line(self, ctx: RequestContext, line: CartLine) -> None:
        """Persist a new cart line."""

    @abstractmethod
    def update_cart_line(self, ctx: RequestContext, line: CartLine) -> None:
        """Persist a changed cart line."""

    @abstractmethod
    def remove_cart_line(self, ctx: RequestContext, line: CartLine) -> None:
        """Delete a cart line."""
