"""Product aggregate.

Products live independently of carts and orders. Carts read the current
price on every mutation; orders keep a snapshot taken at placement.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Existing order lines keep their price; cart lines pick the new
        price up the next time they are updated.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price
