"""Auth token precedence shared by single and bulk requests."""

from collections.abc import Iterable

from matomopy.core.config import TrackerConfig, validate_auth_token
from matomopy.core.models import TrackingEvent


def _is_not_blank(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def resolve_auth_token(
    override_token: str | None,
    events: Iterable[TrackingEvent | None] | None,
    default_token: str | None,
) -> str | None:
    """Choose the auth token for a request.

    The first non-blank token wins: the explicit override, then the first
    event carrying a token (in iteration order), then the default.

    Args:
        override_token: Token passed explicitly by the caller.
        events: Events of the current request or batch.
        default_token: Token from the tracker configuration.

    Returns:
        The resolved token, or None if no token is available.

    Raises:
        ConfigurationError: If the resolved token is malformed.
    """
    token = _first_token(override_token, events, default_token)
    if token is not None:
        validate_auth_token(token)
    return token


def _first_token(
    override_token: str | None,
    events: Iterable[TrackingEvent | None] | None,
    default_token: str | None,
) -> str | None:
    if _is_not_blank(override_token):
        return override_token
    for event in events or ():
        if event is not None and _is_not_blank(event.auth_token):
            return event.auth_token
    if _is_not_blank(default_token):
        return default_token
    return None


def determine_auth_token(
    override_token: str | None,
    events: Iterable[TrackingEvent | None] | None,
    config: TrackerConfig | None,
) -> str | None:
    """Like ``resolve_auth_token``, taking the default from a config."""
    default_token = config.default_auth_token if config is not None else None
    return resolve_auth_token(override_token, events, default_token)
