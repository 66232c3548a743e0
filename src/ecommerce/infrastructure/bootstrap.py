"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ecommerce.application.cart_use_case import CartUseCase
from ecommerce.application.order_use_case import OrderUseCase
from ecommerce.application.product_use_case import ProductUseCase
from ecommerce.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from ecommerce.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from ecommerce.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ecommerce.infrastructure.validation import PydanticValidator

DEFAULT_DATA_DIR = Path("data")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def cart_repository(settings: Settings) -> JsonCartRepository:
    return JsonCartRepository(settings.data_dir / "carts.json")


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def product_use_case(settings: Settings) -> ProductUseCase:
    return ProductUseCase(PydanticValidator(), product_repository(settings))


def cart_use_case(settings: Settings) -> CartUseCase:
    return CartUseCase(
        PydanticValidator(), cart_repository(settings), product_repository(settings)
    )


def order_use_case(settings: Settings) -> OrderUseCase:
    return OrderUseCase(
        PydanticValidator(), order_repository(settings), product_repository(settings)
    )
