"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from typing import Any

import pytest

from matomopy.adapters.senders.in_memory import InMemorySender
from matomopy.core.config import TrackerConfig
from matomopy.core.models import TrackingEvent
from matomopy.core.parameters import RandomValue, VisitorId

DEFAULT_AUTH_TOKEN = "876de1876fb2cda2816c362a61bfc712"

API_ENDPOINT = "https://your-matomo-domain.example/matomo.php"


@pytest.fixture
def tracker_config() -> TrackerConfig:
    """Configuration with default site id 42 and no default auth token."""
    return TrackerConfig(api_endpoint=API_ENDPOINT, default_site_id=42)


@pytest.fixture
def authenticated_tracker_config() -> TrackerConfig:
    """Configuration with default site id 42 and a default auth token."""
    return TrackerConfig(
        api_endpoint=API_ENDPOINT,
        default_site_id=42,
        default_auth_token=DEFAULT_AUTH_TOKEN,
    )


@pytest.fixture
def make_event() -> Callable[..., TrackingEvent]:
    """Factory fixture for events with deterministic visitor id and random value.

    Keyword arguments are passed on to TrackingEvent.
    """

    def _make(**kwargs: Any) -> TrackingEvent:
        kwargs.setdefault("visitor_id", VisitorId.from_hex("00bbccddeeff1122"))
        kwargs.setdefault("random_value", RandomValue.from_string("someRandom"))
        return TrackingEvent(**kwargs)

    return _make


@pytest.fixture
def sender() -> InMemorySender:
    """Fresh in-memory sender."""
    return InMemorySender()
