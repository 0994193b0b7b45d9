from __future__ import annotations

from threading import Event


class CancelToken:
    """Shared between a caller and a long-running loop; the loop polls it."""

    def __init__(self) -> None:
        self._event = Event()

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()
