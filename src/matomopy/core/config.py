"""Tracker configuration."""

import re
from dataclasses import dataclass

from matomopy.core.exceptions import ConfigurationError

AUTH_TOKEN_LENGTH = 32

_AUTH_TOKEN_PATTERN = re.compile(r"[a-z0-9]+")


def validate_auth_token(auth_token: str) -> None:
    """Check that an auth token has the collector's expected format.

    Raises:
        ConfigurationError: If the token is not exactly 32 lowercase letters
            and digits.
    """
    if len(auth_token.strip()) != AUTH_TOKEN_LENGTH:
        raise ConfigurationError("Auth token must be exactly 32 characters long")
    if not _AUTH_TOKEN_PATTERN.fullmatch(auth_token):
        raise ConfigurationError("Auth token must contain only lowercase letters and numbers")


@dataclass(frozen=True)
class TrackerConfig:
    """Long-lived settings shared by all events sent through one tracker.

    Attributes:
        api_endpoint: URL of the collector (e.g. ``https://example.org/matomo.php``).
            Only used by senders.
        default_site_id: Site id used for events that do not set one.
        default_auth_token: Auth token used when neither the caller nor an
            event provides one.
        enabled: When False, the tracker drops events instead of sending them.
    """

    api_endpoint: str
    default_site_id: int | None = None
    default_auth_token: str | None = None
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.api_endpoint or not self.api_endpoint.strip():
            raise ConfigurationError("API endpoint must not be empty")
        if self.default_auth_token is not None:
            validate_auth_token(self.default_auth_token)
