"""Cart aggregate.

Every user owns a single cart. A cart line's price is derived from the
product's current price and the line quantity; it is recomputed whenever
either changes and is never set on its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from ecommerce.domain.service.pricing import line_price, total_price


@dataclass
class CartLine:
    cart_id: str
    product_id: str
    quantity: int
    price: Money

    @staticmethod
    def for_product(cart_id: str, product: Product, quantity: int) -> CartLine:
        """Build a new line priced from *product*'s current price."""
        return CartLine(
            cart_id=cart_id,
            product_id=product.id,
            quantity=quantity,
            price=line_price(product, quantity),
        )

    def reprice(self, product: Product, quantity: int) -> None:
        """Set a new quantity and recompute the price.

        The stored price is discarded, discounts included: the new price
        is always the catalog price of *product* times *quantity*.
        """
        self.quantity = quantity
        self.price = line_price(product, quantity)


@dataclass
class Cart:
    id: str
    user_id: str
    lines: list[CartLine] = field(default_factory=list)

    @property
    def total(self) -> Money:
        return total_price([line.price for line in self.lines])
