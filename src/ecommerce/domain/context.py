"""Per-request context passed through every use case to the repositories.

The use-case layer only forwards it. Repositories check
``raise_if_cancelled()`` before doing I/O.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field

from ecommerce.domain.exceptions import OperationCancelledError


@dataclass
class RequestContext:
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    _cancelled: threading.Event = field(
        default_factory=threading.Event, repr=False, compare=False
    )

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise OperationCancelledError(f"Request {self.request_id} was cancelled")
