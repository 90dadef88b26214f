"""Bounded queue for consuming layout messages by polling."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Iterator

from .protocols import CanvasMessage

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 50

# How often a blocked producer re-checks whether the poller was closed
_PUT_RETRY_INTERVAL = 0.1


class CanvasLayoutPoller:
    """
    Queue-backed message sink.

    ``sink`` is handed to a layout (or any canvas) as its callback.
    When the queue is full, ``sink`` blocks the delivering thread until
    the consumer catches up, so a slow consumer stalls device input
    rather than losing messages. ``close`` releases blocked producers.

    Example:
        ```python
        layout, poller = CanvasLayout.polling()
        ...
        while (msg := poller.try_recv()) is not None:
            handle(msg)
        ```
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize poller.

        Args:
            capacity: Maximum number of queued messages
        """
        if capacity <= 0:
            raise ValueError(f"Poller capacity must be positive, got {capacity}")
        self._queue: queue.Queue[CanvasMessage] = queue.Queue(maxsize=capacity)
        self._closed = threading.Event()

    @property
    def capacity(self) -> int:
        return self._queue.maxsize

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def sink(self, message: CanvasMessage) -> None:
        """
        Enqueue a message, blocking while the queue is full.

        Called from device input threads. Messages arriving after ``close``
        are dropped.
        """
        while not self._closed.is_set():
            try:
                self._queue.put(message, timeout=_PUT_RETRY_INTERVAL)
                return
            except queue.Full:
                continue
        logger.debug(f"Poller closed, dropping {message}")

    def try_recv(self) -> CanvasMessage | None:
        """Next message, or None immediately if the queue is empty."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def recv(self, timeout: float | None = None) -> CanvasMessage | None:
        """
        Wait for the next message.

        Args:
            timeout: Seconds to wait (None = until a message arrives)

        Returns:
            The message, or None if the timeout expired
        """
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def iter_pending(self) -> Iterator[CanvasMessage]:
        """Yield queued messages without blocking, stopping when empty."""
        while (message := self.try_recv()) is not None:
            yield message

    def __iter__(self) -> Iterator[CanvasMessage]:
        """Yield messages as they arrive until the poller is closed and drained."""
        while True:
            message = self.recv(timeout=_PUT_RETRY_INTERVAL)
            if message is not None:
                yield message
            elif self._closed.is_set():
                return

    def close(self) -> None:
        """Stop accepting messages. Already queued messages can still be read."""
        if not self._closed.is_set():
            self._closed.set()
            logger.debug("Poller closed")

    def __len__(self) -> int:
        return self._queue.qsize()
