"""Sender adapters implementing SenderPort."""

from matomopy.adapters.senders.in_memory import InMemorySender

__all__ = ["InMemorySender"]
