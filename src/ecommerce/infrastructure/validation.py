"""pydantic-backed implementation of Validator.

Request dataclasses declare their rules with ``Annotated[..., Field(...)]``;
a ``TypeAdapter`` per request class checks a plain-dict dump of the
instance against them. Fields marked ``strict=True`` are not coerced,
so the use cases only ever see the types the request declares.
"""

from __future__ import annotations

import dataclasses
from functools import lru_cache
from typing import Any

import pydantic
from pydantic import TypeAdapter

from ecommerce.application.validator import Validator
from ecommerce.domain.exceptions import ValidationError


@lru_cache(maxsize=None)
def _adapter_for(request_type: type) -> TypeAdapter:
    return TypeAdapter(request_type)


class PydanticValidator(Validator):

    def validate_struct(self, request: Any) -> None:
        if not dataclasses.is_dataclass(request) or isinstance(request, type):
            raise ValidationError(
                f"Cannot validate {type(request).__name__}: not a request object"
            )

        try:
            _adapter_for(type(request)).validate_python(dataclasses.asdict(request))
        except pydantic.ValidationError as exc:
            raise ValidationError(self._format(exc)) from exc

    @staticmethod
    def _format(exc: pydantic.ValidationError) -> str:
        problems = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"]) or "request"
            problems.append(f"{location}: {error['msg']}")
        return "; ".join(problems)
