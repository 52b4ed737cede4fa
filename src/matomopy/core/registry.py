"""Static table of tracking parameters.

``PARAMETERS`` maps every named attribute of ``TrackingEvent`` to its wire key
and constraints. The table is built once at import time and never mutated.
Its order is the order of the parameters in the query string and is part of
the wire contract.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from matomopy.core.exceptions import ParameterConstraintError


def _format_bound(bound: float) -> str:
    return str(int(bound)) if float(bound).is_integer() else str(bound)


@dataclass(frozen=True)
class ParameterDescriptor:
    """How one ``TrackingEvent`` attribute is sent.

    Attributes:
        attribute: Attribute name on ``TrackingEvent``.
        name: Wire key (e.g. ``idsite``).
        regex: Pattern the string form of the value must fully match.
        max_length: Maximum length of the string form.
        minimum: Lower bound for numeric values.
        maximum: Upper bound for numeric values.
    """

    attribute: str
    name: str
    regex: str | None = None
    max_length: int | None = None
    minimum: float | None = None
    maximum: float | None = None
    pattern: re.Pattern[str] | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = re.compile(self.regex) if self.regex else None
        object.__setattr__(self, "pattern", compiled)

    def read(self, event: Any) -> Any:
        """Read this parameter's value off an event."""
        return getattr(event, self.attribute)

    def validate(self, value: Any) -> None:
        """Check a non-null value against this parameter's constraints.

        Raises:
            ParameterConstraintError: If a constraint is violated.
        """
        text = str(value)
        if self.pattern is not None and not self.pattern.fullmatch(text):
            raise ParameterConstraintError(self.name, f"Must match regex {self.regex}")
        if self.max_length is not None and len(text) > self.max_length:
            raise ParameterConstraintError(
                self.name, f"Must be less or equal than {self.max_length} characters"
            )
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if self.minimum is not None and value < self.minimum:
                raise ParameterConstraintError(
                    self.name, f"Must be greater or equal than {_format_bound(self.minimum)}"
                )
            if self.maximum is not None and value > self.maximum:
                raise ParameterConstraintError(
                    self.name, f"Must be less or equal than {_format_bound(self.maximum)}"
                )


_P = ParameterDescriptor

PARAMETERS: tuple[ParameterDescriptor, ...] = (
    _P("required", "rec"),
    _P("site_id", "idsite", minimum=1),
    _P("action_name", "action_name"),
    _P("action_url", "url"),
    _P("api_version", "apiv"),
    _P("visitor_id", "_id"),
    _P("new_visitor", "_idn"),
    _P("referrer_url", "urlref"),
    _P("visit_custom_variables", "_cvar"),
    _P("visitor_visit_count", "_idvc"),
    _P("visitor_previous_visit_timestamp", "_viewts"),
    _P("visitor_first_visit_timestamp", "_idts"),
    _P("campaign_name", "_rcn"),
    _P("campaign_keyword", "_rck"),
    _P("device_resolution", "res"),
    _P("current_hour", "h", minimum=0, maximum=23),
    _P("current_minute", "m", minimum=0, maximum=59),
    _P("current_second", "s", minimum=0, maximum=59),
    _P("plugin_flash", "fla"),
    _P("plugin_java", "java"),
    _P("plugin_director", "dir"),
    _P("plugin_quicktime", "qt"),
    _P("plugin_real_player", "realp"),
    _P("plugin_pdf", "pdf"),
    _P("plugin_windows_media", "wma"),
    _P("plugin_gears", "gears"),
    _P("plugin_silverlight", "ag"),
    _P("supports_cookies", "cookie"),
    _P("header_user_agent", "ua"),
    _P("header_accept_language", "lang"),
    _P("user_id", "uid"),
    _P("visitor_custom_id", "cid"),
    _P("new_visit", "new_visit"),
    _P("page_custom_variables", "cvar"),
    _P("outlink_url", "link"),
    _P("download_url", "download"),
    _P("search_query", "search"),
    _P("search_category", "search_cat"),
    _P("search_results_count", "search_count"),
    _P("page_view_id", "pv_id"),
    _P("goal_id", "idgoal"),
    _P("ecommerce_revenue", "revenue"),
    _P("character_set", "cs"),
    _P("custom_action", "ca"),
    _P("network_time", "pf_net"),
    _P("server_time", "pf_srv"),
    _P("transfer_time", "pf_tfr"),
    _P("dom_processing_time", "pf_dm1"),
    _P("dom_completion_time", "pf_dm2"),
    _P("onload_time", "pf_onl"),
    _P("event_category", "e_c"),
    _P("event_action", "e_a"),
    _P("event_name", "e_n"),
    _P("event_value", "e_v"),
    _P("content_name", "c_n"),
    _P("content_piece", "c_p"),
    _P("content_target", "c_t"),
    _P("content_interaction", "c_i"),
    _P("ecommerce_id", "ec_id"),
    _P("ecommerce_items", "ec_items"),
    _P("ecommerce_subtotal", "ec_st"),
    _P("ecommerce_tax", "ec_tx"),
    _P("ecommerce_shipping_cost", "ec_sh"),
    _P("ecommerce_discount", "ec_dt"),
    _P("ecommerce_last_order_timestamp", "_ects"),
    _P("auth_token", "token_auth", regex="[a-z0-9]{32}"),
    _P("visitor_ip", "cip"),
    _P("request_timestamp", "cdt"),
    _P("visitor_country", "country", max_length=2),
    _P("visitor_region", "region", max_length=2),
    _P("visitor_city", "city"),
    _P("visitor_latitude", "lat", minimum=-90, maximum=90),
    _P("visitor_longitude", "long", minimum=-180, maximum=180),
    _P("queued_tracking", "queuedtracking"),
    _P("response_as_image", "send_image"),
    _P("ping", "ping"),
    _P("track_bot_requests", "bots"),
    _P("random_value", "rand"),
    _P("debug", "debug"),
    _P("crash_message", "cra"),
    _P("crash_type", "cra_tp"),
    _P("crash_category", "cra_ct"),
    _P("crash_stack_trace", "cra_st"),
    _P("crash_location", "cra_ru"),
    _P("crash_line", "cra_rl"),
    _P("crash_column", "cra_rc"),
)

del _P


def lookup(name: str) -> ParameterDescriptor | None:
    """Return the descriptor for a wire key, or None if there is none."""
    for descriptor in PARAMETERS:
        if descriptor.name == name:
            return descriptor
    return None
