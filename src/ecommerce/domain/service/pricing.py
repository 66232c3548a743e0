"""Domain service: line pricing.

Cart lines and order lines are both priced the same way: the product's
*current* catalog price times the requested quantity. Keeping the rule in
one place means a cart line and the order line placed from it can never
disagree about arithmetic.
"""

from __future__ import annotations

from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money


def line_price(product: Product, quantity: int) -> Money:
    """Return ``product.price * quantity``."""
    if quantity <= 0:
        raise ValidationError("Quantity must be positive")
    return product.price * quantity


def total_price(prices: list[Money]) -> Money:
    """Sum line prices; an empty list totals zero."""
    result = Money.zero(prices[0].currency) if prices else Money.zero()
    for price in prices:
        result = result + price
    return result
