"""JSON envelope encoder for bulk tracking requests."""

import json
from collections.abc import Iterable

from matomopy.core.auth import determine_auth_token
from matomopy.core.config import TrackerConfig
from matomopy.core.encoding.query import encode_query
from matomopy.core.exceptions import ConfigurationError
from matomopy.core.models import TrackingEvent
from matomopy.core.validation import validate_event


def encode_bulk(queries: Iterable[str], auth_token: str | None = None) -> bytes:
    """Wrap encoded queries into the bulk envelope.

    The result is ``{"requests":["?<query>",...],"token_auth":"<token>"}``
    encoded as UTF-8; ``token_auth`` is only present when a token is given.

    Raises:
        ConfigurationError: If there are no queries.
    """
    requests = [f"?{query}" for query in queries]
    if not requests:
        raise ConfigurationError("Queries must not be empty")
    envelope: dict[str, object] = {"requests": requests}
    if auth_token is not None:
        envelope["token_auth"] = auth_token
    return json.dumps(envelope, separators=(",", ":")).encode("utf-8")


def encode_bulk_queries(
    events: Iterable[TrackingEvent],
    auth_token: str | None,
    default_site_id: int | None = None,
) -> list[str]:
    """Validate and encode every event of a batch.

    The shared auth token is checked against each event but left out of the
    individual queries; it travels once in the envelope instead.
    """
    queries = []
    for event in events:
        validate_event(event, auth_token)
        queries.append(encode_query(event, None, default_site_id))
    return queries


def build_bulk_payload(
    events: Iterable[TrackingEvent],
    config: TrackerConfig,
    override_token: str | None = None,
) -> bytes:
    """Resolve the token, validate, encode and wrap a batch of events.

    Fails without producing a payload if any event is invalid.

    Args:
        events: Events in the order they should be sent.
        config: Supplies the default site id and default auth token.
        override_token: Token that takes precedence over all others.

    Returns:
        The bulk envelope as UTF-8 bytes.
    """
    events = list(events)
    if not events:
        raise ConfigurationError("Queries must not be empty")
    auth_token = determine_auth_token(override_token, events, config)
    queries = encode_bulk_queries(events, auth_token, config.default_site_id)
    return encode_bulk(queries, auth_token)
