"""Tests for the bulk envelope encoder."""

import json
from collections.abc import Callable

import pytest

from matomopy.core.config import TrackerConfig
from matomopy.core.encoding.bulk import build_bulk_payload, encode_bulk, encode_bulk_queries
from matomopy.core.exceptions import ConfigurationError, ValidationError
from matomopy.core.models import TrackingEvent

from tests.conftest import DEFAULT_AUTH_TOKEN

BASE_QUERY = "idsite=42&rec=1&apiv=1&_id=00bbccddeeff1122&send_image=0&rand=someRandom"


def _with_action_name(name: str) -> str:
    return BASE_QUERY.replace("rec=1&", f"rec=1&action_name={name}&")


class TestEncodeBulk:
    """Tests for encode_bulk()."""

    @pytest.mark.encoding
    def test_wraps_queries_without_token(self) -> None:
        payload = encode_bulk(["a=1", "b=2"])

        assert payload == b'{"requests":["?a=1","?b=2"]}'

    @pytest.mark.encoding
    def test_token_follows_requests(self) -> None:
        payload = encode_bulk(["a=1"], DEFAULT_AUTH_TOKEN)

        assert payload == (
            b'{"requests":["?a=1"],"token_auth":"' + DEFAULT_AUTH_TOKEN.encode() + b'"}'
        )

    @pytest.mark.encoding
    def test_empty_queries_fail(self) -> None:
        with pytest.raises(ConfigurationError, match="Queries must not be empty"):
            encode_bulk([])


class TestBuildBulkPayload:
    """Tests for build_bulk_payload()."""

    @pytest.mark.tra("Bulk.Order")
    @pytest.mark.tier(0)
    def test_keeps_event_order_without_token(
        self,
        tracker_config: TrackerConfig,
        make_event: Callable[..., TrackingEvent],
    ) -> None:
        events = [make_event(action_name=name) for name in ("First", "Second", "Third")]

        envelope = json.loads(build_bulk_payload(events, tracker_config))

        assert envelope == {
            "requests": [
                f"?{_with_action_name('First')}",
                f"?{_with_action_name('Second')}",
                f"?{_with_action_name('Third')}",
            ]
        }

    @pytest.mark.tra("Bulk.DefaultToken")
    @pytest.mark.tier(0)
    def test_default_token_goes_into_envelope_only(
        self,
        authenticated_tracker_config: TrackerConfig,
        make_event: Callable[..., TrackingEvent],
    ) -> None:
        envelope = json.loads(build_bulk_payload([make_event()], authenticated_tracker_config))

        assert envelope["token_auth"] == DEFAULT_AUTH_TOKEN
        assert envelope["requests"] == [f"?{BASE_QUERY}"]

    @pytest.mark.tra("Bulk.OverrideToken")
    @pytest.mark.tier(0)
    def test_override_token_beats_default(
        self,
        authenticated_tracker_config: TrackerConfig,
        make_event: Callable[..., TrackingEvent],
    ) -> None:
        override = "a" * 32

        envelope = json.loads(
            build_bulk_payload([make_event()], authenticated_tracker_config, override)
        )

        assert envelope["token_auth"] == override

    @pytest.mark.tra("Bulk.Empty")
    @pytest.mark.tier(0)
    def test_empty_batch_fails(self, tracker_config: TrackerConfig) -> None:
        with pytest.raises(ConfigurationError, match="Queries must not be empty"):
            build_bulk_payload([], tracker_config)

    @pytest.mark.tra("Bulk.FailFast")
    @pytest.mark.tier(0)
    def test_one_invalid_event_fails_the_batch(
        self,
        tracker_config: TrackerConfig,
        make_event: Callable[..., TrackingEvent],
    ) -> None:
        events = [make_event(), make_event(search_results_count=5), make_event()]

        with pytest.raises(
            ValidationError, match="Search query must be set if search results count is set"
        ):
            build_bulk_payload(events, tracker_config)

    @pytest.mark.encoding
    def test_geolocated_events_pass_with_shared_token(
        self,
        authenticated_tracker_config: TrackerConfig,
        make_event: Callable[..., TrackingEvent],
    ) -> None:
        """The shared token satisfies the auth requirement of every event."""
        payload = build_bulk_payload(
            [make_event(visitor_city="Berlin")], authenticated_tracker_config
        )

        assert b"city=Berlin" in payload


class TestEncodeBulkQueries:
    """Tests for encode_bulk_queries()."""

    @pytest.mark.encoding
    def test_queries_never_carry_the_shared_token(
        self, make_event: Callable[..., TrackingEvent]
    ) -> None:
        queries = encode_bulk_queries([make_event()], DEFAULT_AUTH_TOKEN, 42)

        assert queries == [BASE_QUERY]
