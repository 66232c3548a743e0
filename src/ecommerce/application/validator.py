"""Abstract request validator used by the use cases."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Validator(ABC):

    @abstractmethod
    def validate_struct(self, request: Any) -> None:
        """Check *request* against its declared rules.

        Raises ValidationError on the first failing request; returns
        None otherwise.
        """
