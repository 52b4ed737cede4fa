"""Cross-field rules checked before an event is serialized."""

from datetime import datetime, timedelta, timezone

from matomopy.core.config import AUTH_TOKEN_LENGTH
from matomopy.core.exceptions import ConfigurationError, ValidationError
from matomopy.core.models import TrackingEvent

# Events older than this may only be sent with an auth token
MAX_UNAUTHENTICATED_AGE = timedelta(hours=4)


def as_utc(value: datetime) -> datetime:
    """Return an aware datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _uses_ecommerce(event: TrackingEvent) -> bool:
    return (
        event.ecommerce_id is not None
        or event.ecommerce_revenue is not None
        or event.ecommerce_discount is not None
        or bool(event.ecommerce_items)
        or event.ecommerce_last_order_timestamp is not None
        or event.ecommerce_shipping_cost is not None
        or event.ecommerce_subtotal is not None
        or event.ecommerce_tax is not None
    )


def _uses_geolocation(event: TrackingEvent) -> bool:
    return (
        event.visitor_longitude is not None
        or event.visitor_latitude is not None
        or event.visitor_region is not None
        or event.visitor_city is not None
        or event.visitor_country is not None
    )


def validate_event(event: TrackingEvent, auth_token: str | None) -> None:
    """Check an event against the collector's cross-field rules.

    Only the first violation is reported.

    Args:
        event: The event about to be serialized.
        auth_token: The token resolved for the request, if any.

    Raises:
        ValidationError: If a cross-field rule is violated.
        ConfigurationError: If the auth token has the wrong length.
    """
    if event.site_id is not None and event.site_id < 0:
        raise ValidationError("Site ID must not be negative")
    if event.goal_id is None and _uses_ecommerce(event):
        raise ValidationError("Goal ID must be set if ecommerce parameters are used")
    if event.search_results_count is not None and event.search_query is None:
        raise ValidationError("Search query must be set if search results count is set")
    if auth_token is None:
        if _uses_geolocation(event):
            raise ValidationError(
                "Auth token must be present if longitude, latitude, region, city or country are set"
            )
        if event.request_timestamp is not None and as_utc(
            event.request_timestamp
        ) < datetime.now(timezone.utc) - MAX_UNAUTHENTICATED_AGE:
            raise ValidationError(
                "Auth token must be present if request timestamp is more than four hours ago"
            )
    elif len(auth_token) != AUTH_TOKEN_LENGTH:
        raise ConfigurationError("Auth token must be exactly 32 characters long")
