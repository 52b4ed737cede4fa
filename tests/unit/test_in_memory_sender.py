"""Tests for the in-memory sender adapter."""

import threading

import pytest

from matomopy.adapters.senders.in_memory import InMemorySender
from matomopy.core.ports import SenderPort


class TestInMemorySender:
    """Tests for InMemorySender."""

    @pytest.mark.core
    def test_implements_sender_port(self) -> None:
        assert isinstance(InMemorySender(), SenderPort)

    @pytest.mark.core
    def test_records_queries_and_payloads(self, sender: InMemorySender) -> None:
        sender.send_single("a=1")
        sender.send_bulk(b'{"requests":["?a=1"]}')

        assert sender.queries == ["a=1"]
        assert sender.payloads == [b'{"requests":["?a=1"]}']

    @pytest.mark.core
    def test_returns_copies(self, sender: InMemorySender) -> None:
        sender.send_single("a=1")

        sender.queries.append("tampered")

        assert sender.queries == ["a=1"]

    @pytest.mark.core
    def test_clear(self, sender: InMemorySender) -> None:
        sender.send_single("a=1")
        sender.send_bulk(b"{}")

        sender.clear()

        assert sender.queries == []
        assert sender.payloads == []

    @pytest.mark.core
    def test_concurrent_sends_are_all_recorded(self, sender: InMemorySender) -> None:
        def send_many(prefix: str) -> None:
            for i in range(100):
                sender.send_single(f"{prefix}={i}")

        threads = [threading.Thread(target=send_many, args=(f"t{n}",)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(sender.queries) == 400


class TestSenderPort:
    """Tests for the SenderPort protocol."""

    @pytest.mark.core
    def test_object_without_send_bulk_is_not_a_sender(self) -> None:
        class SingleOnly:
            def send_single(self, query: str) -> None:
                pass

        assert not isinstance(SingleOnly(), SenderPort)
