"""matomopy - typed tracking events and Matomo wire encoding."""

from matomopy.adapters.senders.in_memory import InMemorySender
from matomopy.core.auth import determine_auth_token, resolve_auth_token
from matomopy.core.config import TrackerConfig
from matomopy.core.custom_variables import CustomVariable, CustomVariables
from matomopy.core.ecommerce import EcommerceItem, EcommerceItems
from matomopy.core.encoding.bulk import build_bulk_payload, encode_bulk
from matomopy.core.encoding.query import QueryCreator, encode_query
from matomopy.core.events import (
    ActionType,
    action,
    content_impression,
    content_interaction,
    crash,
    crash_from_exception,
    ecommerce_cart_update,
    ecommerce_order,
    event,
    goal,
    page_view,
    ping,
    site_search,
)
from matomopy.core.exceptions import (
    ConfigurationError,
    MatomoError,
    ParameterConstraintError,
    ValidationError,
)
from matomopy.core.models import TrackingEvent
from matomopy.core.parameters import (
    AcceptLanguage,
    Country,
    DeviceResolution,
    LanguageRange,
    RandomValue,
    UniqueId,
    VisitorId,
)
from matomopy.core.ports import SenderPort
from matomopy.core.registry import PARAMETERS, ParameterDescriptor
from matomopy.core.validation import validate_event
from matomopy.tracker import MatomoTracker

__all__ = [
    # Models
    "TrackingEvent",
    "CustomVariable",
    "CustomVariables",
    "EcommerceItem",
    "EcommerceItems",
    "AcceptLanguage",
    "Country",
    "DeviceResolution",
    "LanguageRange",
    "RandomValue",
    "UniqueId",
    "VisitorId",
    # Registry
    "PARAMETERS",
    "ParameterDescriptor",
    # Configuration
    "TrackerConfig",
    # Errors
    "MatomoError",
    "ValidationError",
    "ParameterConstraintError",
    "ConfigurationError",
    # Validation and encoding
    "validate_event",
    "resolve_auth_token",
    "determine_auth_token",
    "encode_query",
    "encode_bulk",
    "build_bulk_payload",
    "QueryCreator",
    # Event helpers
    "ActionType",
    "action",
    "content_impression",
    "content_interaction",
    "crash",
    "crash_from_exception",
    "ecommerce_cart_update",
    "ecommerce_order",
    "event",
    "goal",
    "page_view",
    "ping",
    "site_search",
    # Ports and adapters
    "SenderPort",
    "InMemorySender",
    "MatomoTracker",
]
