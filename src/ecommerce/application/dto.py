"""Request objects — plain containers that cross layer boundaries.

Field constraints are declared with ``Annotated[..., Field(...)]`` so a
Validator can check them; the dataclasses themselves accept anything.
Quantities and identifiers are strict: ``"2"``, ``2.0`` and ``True`` are
not quantities. List queries carry no rules; they are passed to the
repository as given and ``Pagination.new`` falls back to defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field

NonEmptyStr = Annotated[str, Field(min_length=1, strict=True)]
PositiveQuantity = Annotated[int, Field(ge=1, strict=True)]


# --- Product -----------------------------------------------------------------


@dataclass
class ListProductRequest:
    page: int = 1
    limit: int = 20
    name: Optional[str] = None  # case-insensitive substring


@dataclass
class CreateProductRequest:
    name: NonEmptyStr
    price: Annotated[Decimal, Field(gt=0)]


@dataclass
class UpdateProductRequest:
    name: Optional[NonEmptyStr] = None
    price: Optional[Annotated[Decimal, Field(gt=0)]] = None


# --- Cart --------------------------------------------------------------------


@dataclass
class AddProductRequest:
    cart_id: NonEmptyStr
    product_id: NonEmptyStr
    quantity: PositiveQuantity


@dataclass
class UpdateCartLineRequest:
    cart_id: NonEmptyStr
    product_id: NonEmptyStr
    quantity: PositiveQuantity


@dataclass
class RemoveProductRequest:
    cart_id: str
    product_id: str


# --- Order -------------------------------------------------------------------


@dataclass
class PlaceOrderLineRequest:
    product_id: NonEmptyStr
    quantity: PositiveQuantity


@dataclass
class PlaceOrderRequest:
    user_id: NonEmptyStr
    lines: Annotated[list[PlaceOrderLineRequest], Field(min_length=1)] = field(
        default_factory=list
    )


@dataclass
class ListOrdersRequest:
    user_id: str
    page: int = 1
    limit: int = 20
    status: Optional[str] = None
