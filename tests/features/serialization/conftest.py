"""BDD step definitions for serialization features.

Each scenario works on a fresh SerializationContext that the given steps
fill in and the when steps act on.
"""

import json
from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from matomopy.core.config import TrackerConfig
from matomopy.core.encoding.bulk import build_bulk_payload
from matomopy.core.encoding.query import QueryCreator
from matomopy.core.exceptions import MatomoError
from matomopy.core.models import TrackingEvent
from matomopy.core.parameters import RandomValue, VisitorId
from matomopy.core.validation import validate_event

from tests.conftest import API_ENDPOINT


@dataclass
class SerializationContext:
    """State shared between the steps of one scenario."""

    config: TrackerConfig | None = None
    event: TrackingEvent | None = None
    events: list[TrackingEvent] = field(default_factory=list)
    query: str = ""
    envelope: dict[str, Any] = field(default_factory=dict)
    error: MatomoError | None = None
    validated: bool = False


@pytest.fixture
def ctx() -> SerializationContext:
    """Fresh scenario context for each test."""
    return SerializationContext()


def _event(visitor_id: str, random_value: str, **kwargs: Any) -> TrackingEvent:
    return TrackingEvent(
        visitor_id=VisitorId.from_hex(visitor_id),
        random_value=RandomValue.from_string(random_value),
        **kwargs,
    )


# === Given Steps ===


@given(parsers.parse("a tracker configuration with default site id {site_id:d}"))
def step_config(ctx: SerializationContext, site_id: int) -> None:
    ctx.config = TrackerConfig(api_endpoint=API_ENDPOINT, default_site_id=site_id)


@given(
    parsers.parse('an event with visitor id "{visitor_id}" and random value "{random_value}"')
)
def step_event(ctx: SerializationContext, visitor_id: str, random_value: str) -> None:
    ctx.event = _event(visitor_id, random_value)


@given("the event has the flash plugin enabled")
def step_flash(ctx: SerializationContext) -> None:
    ctx.event.plugin_flash = True


@given(parsers.parse('the event has action url "{url}"'))
def step_action_url(ctx: SerializationContext, url: str) -> None:
    ctx.event.action_url = url


@given(parsers.parse("the event has search results count {count:d}"))
def step_search_count(ctx: SerializationContext, count: int) -> None:
    ctx.event.search_results_count = count


@given(parsers.parse("the event has latitude {latitude:g}"))
def step_latitude(ctx: SerializationContext, latitude: float) -> None:
    ctx.event.visitor_latitude = latitude


@given(parsers.parse('events with action names "{first}", "{second}" and "{third}"'))
def step_named_events(ctx: SerializationContext, first: str, second: str, third: str) -> None:
    ctx.events = [
        _event("00bbccddeeff1122", "someRandom", action_name=name)
        for name in (first, second, third)
    ]


# === When Steps ===


@when("the event is encoded")
def step_encode(ctx: SerializationContext) -> None:
    ctx.query = QueryCreator(ctx.config).create_query(ctx.event, None)


@when("the bulk payload is built")
def step_build_bulk(ctx: SerializationContext) -> None:
    ctx.envelope = json.loads(build_bulk_payload(ctx.events, ctx.config))


@when("the event is validated without an auth token")
def step_validate_anonymous(ctx: SerializationContext) -> None:
    try:
        validate_event(ctx.event, None)
        ctx.validated = True
    except MatomoError as e:
        ctx.error = e


@when(parsers.parse('the event is validated with auth token "{token}"'))
def step_validate_with_token(ctx: SerializationContext, token: str) -> None:
    try:
        validate_event(ctx.event, token)
        ctx.validated = True
    except MatomoError as e:
        ctx.error = e


# === Then Steps ===


@then(parsers.parse('the query is "{expected}"'))
def step_query_is(ctx: SerializationContext, expected: str) -> None:
    assert ctx.query == expected


@then(parsers.parse('the query contains "{fragment}"'))
def step_query_contains(ctx: SerializationContext, fragment: str) -> None:
    assert fragment in ctx.query


@then(parsers.parse("the payload has {count:d} requests"))
def step_request_count(ctx: SerializationContext, count: int) -> None:
    assert len(ctx.envelope["requests"]) == count


@then(parsers.parse('request {index:d} contains "{fragment}"'))
def step_request_contains(ctx: SerializationContext, index: int, fragment: str) -> None:
    request = ctx.envelope["requests"][index - 1]
    assert request.startswith("?")
    assert fragment in request


@then("the payload has no auth token")
def step_no_token(ctx: SerializationContext) -> None:
    assert "token_auth" not in ctx.envelope


@then(parsers.parse('validation fails with "{message}"'))
def step_validation_fails(ctx: SerializationContext, message: str) -> None:
    assert ctx.error is not None
    assert str(ctx.error) == message


@then("validation succeeds")
def step_validation_succeeds(ctx: SerializationContext) -> None:
    assert ctx.error is None
    assert ctx.validated
