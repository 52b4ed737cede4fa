"""Port interface for sender adapters.

The core produces query strings and bulk payloads; delivering them to the
collector (HTTP, proxies, retries, executors) is the job of an adapter
implementing this protocol.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SenderPort(Protocol):
    """Port for delivering encoded tracking requests.

    Examples: InMemorySender.
    """

    def send_single(self, query: str) -> None:
        """Send one encoded query string (GET transport)."""
        ...

    def send_bulk(self, payload: bytes) -> None:
        """Send one bulk envelope (POST transport)."""
        ...
