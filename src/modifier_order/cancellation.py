"""Cooperative cancellation for long traversals."""

from __future__ import annotations

import threading
from typing import Protocol


class OperationCancelledError(Exception):
    """Raised when a traversal observes a cancellation request."""


class CancellationSignal(Protocol):
    """Anything that can be polled for a cancellation request."""

    @property
    def is_cancelled(self) -> bool: ...


class CancellationToken:
    """Thread-safe cancellation flag.

    One thread calls cancel(); the traversal polls is_cancelled.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()


def raise_if_cancelled(signal: CancellationSignal | None) -> None:
    """Raise OperationCancelledError if signal has been cancelled."""
    if signal is not None and signal.is_cancelled:
        raise OperationCancelledError("operation was cancelled")


__all__ = [
    "CancellationSignal",
    "CancellationToken",
    "OperationCancelledError",
    "raise_if_cancelled",
]
