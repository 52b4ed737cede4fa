"""Query string encoder for single tracking events."""

import codecs
import re
from datetime import datetime
from typing import Any
from urllib.parse import quote_plus

from matomopy.core.config import TrackerConfig
from matomopy.core.custom_variables import CustomVariables
from matomopy.core.ecommerce import EcommerceItems
from matomopy.core.exceptions import ConfigurationError
from matomopy.core.models import TrackingEvent
from matomopy.core.registry import PARAMETERS
from matomopy.core.validation import as_utc

_CHARSET_NAMES = {
    "ascii": "US-ASCII",
    "utf-8": "UTF-8",
    "utf-16": "UTF-16",
    "utf-16-be": "UTF-16BE",
    "utf-16-le": "UTF-16LE",
    "utf-32": "UTF-32",
    "utf-32-be": "UTF-32BE",
    "utf-32-le": "UTF-32LE",
}

_ISO_8859 = re.compile(r"iso8859-(\d+)")
_WINDOWS_CODE_PAGE = re.compile(r"cp(125\d)")


def charset_name(codec: codecs.CodecInfo) -> str:
    """Return the canonical (IANA) name of a codec, e.g. ``ISO-8859-1``.

    Python codec names are mapped to the spelling collectors expect;
    unknown codecs fall back to their upper-cased Python name.
    """
    name = codec.name
    if name in _CHARSET_NAMES:
        return _CHARSET_NAMES[name]
    iso_match = _ISO_8859.fullmatch(name)
    if iso_match:
        return f"ISO-8859-{iso_match.group(1)}"
    code_page_match = _WINDOWS_CODE_PAGE.fullmatch(name)
    if code_page_match:
        return f"windows-{code_page_match.group(1)}"
    return name.upper()


def encode_value(value: Any) -> str | None:
    """Encode a non-null parameter value for the query string.

    Args:
        value: A value read off a ``TrackingEvent``.

    Returns:
        The wire text, or None if the parameter must be left out (empty
        collections and blank strings).
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, codecs.CodecInfo):
        return charset_name(value)
    if isinstance(value, datetime):
        return str(int(as_utc(value).timestamp()))
    if isinstance(value, (CustomVariables, EcommerceItems)):
        return quote_plus(value.to_json()) if value else None
    text = str(value)
    if not text.strip():
        return None
    return quote_plus(text)


def encode_query(
    event: TrackingEvent,
    auth_token: str | None = None,
    default_site_id: int | None = None,
) -> str:
    """Encode an event as a URL query string (without the leading ``?``).

    Parameters appear in this order: ``idsite`` (only if the event has no
    site id), ``token_auth`` (if given), the named parameters in registry
    order, additional parameters in insertion order, then ``dimensionN``.

    Args:
        event: The event to encode. Should have passed ``validate_event``.
        auth_token: Resolved auth token to send up front, if any.
        default_site_id: Site id to use when the event has none.

    Returns:
        The encoded query string.

    Raises:
        ConfigurationError: If neither the event nor the default has a site id.
        ParameterConstraintError: If a parameter value violates its
            constraints. Nothing is returned in that case.
    """
    parts: list[str] = []
    if event.site_id is None:
        if default_site_id is None:
            raise ConfigurationError("No default site ID and no request site ID is given")
        parts.append(f"idsite={default_site_id}")
    if auth_token is not None:
        parts.append(f"token_auth={auth_token}")

    for descriptor in PARAMETERS:
        value = descriptor.read(event)
        if value is None:
            continue
        descriptor.validate(value)
        encoded = encode_value(value)
        if encoded is not None:
            parts.append(f"{descriptor.name}={encoded}")

    for key, values in event.additional_parameters.items():
        for value in values:
            if value is not None and str(value).strip():
                parts.append(f"{quote_plus(key)}={quote_plus(str(value))}")

    # Dimension values are sent as given, without percent-encoding
    for index, value in event.dimensions.items():
        if value is None:
            continue
        parts.append(f"dimension{index}={value}")

    return "&".join(parts)


class QueryCreator:
    """Encodes events with the defaults of a tracker configuration."""

    def __init__(self, config: TrackerConfig) -> None:
        self._config = config

    def create_query(self, event: TrackingEvent, auth_token: str | None) -> str:
        return encode_query(event, auth_token, self._config.default_site_id)
