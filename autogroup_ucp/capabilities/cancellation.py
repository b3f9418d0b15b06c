"""
Cancellation tokens passed opaquely from callers to handlers.
"""

import threading
import time
from typing import Optional

from .errors import DispatchCancelled


class CancellationToken:
    """One-way cancel flag with an optional monotonic deadline."""

    def __init__(self, deadline: Optional[float] = None) -> None:
        self._event = threading.Event()
        self.deadline = deadline

    @classmethod
    def deadline_in(cls, seconds: float) -> "CancellationToken":
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._event.set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    @property
    def cancelled(self) -> bool:
        return self._event.is_set() or self.expired

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise DispatchCancelled("Dispatch was cancelled")
        if self.expired:
            raise DispatchCancelled("Dispatch deadline exceeded")
