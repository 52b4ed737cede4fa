"""In-memory sender adapter."""

import logging
import threading

logger = logging.getLogger(__name__)


class InMemorySender:
    """In-memory implementation of SenderPort.

    Records every query and payload instead of sending it. Suitable for
    testing and for inspecting what a tracker would send.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._queries: list[str] = []
        self._payloads: list[bytes] = []

    def send_single(self, query: str) -> None:
        """Record a query string."""
        logger.debug("Recording single request: %s", query)
        with self._lock:
            self._queries.append(query)

    def send_bulk(self, payload: bytes) -> None:
        """Record a bulk payload."""
        logger.debug("Recording bulk request of %d bytes", len(payload))
        with self._lock:
            self._payloads.append(payload)

    @property
    def queries(self) -> list[str]:
        with self._lock:
            return list(self._queries)

    @property
    def payloads(self) -> list[bytes]:
        with self._lock:
            return list(self._payloads)

    def clear(self) -> None:
        with self._lock:
            self._queries.clear()
            self._payloads.clear()
