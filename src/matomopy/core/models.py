"""Core domain model for a single tracking event."""

import codecs
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from matomopy.core.custom_variables import CustomVariable, CustomVariables
from matomopy.core.ecommerce import EcommerceItem, EcommerceItems
from matomopy.core.parameters import (
    AcceptLanguage,
    Country,
    DeviceResolution,
    RandomValue,
    UniqueId,
    VisitorId,
)


@dataclass
class TrackingEvent:
    """One analytics event, described by its tracking parameters.

    Every named attribute maps to one wire parameter (see
    ``matomopy.core.registry``); None means "not sent". The open-ended
    collections are emitted after the named parameters:

    Attributes:
        additional_parameters: Wire key to ordered values, for parameters
            without a named attribute. Emitted in insertion order, in addition
            to (never instead of) a named attribute with the same key.
        dimensions: Custom dimension index to value, sent as ``dimensionN``.
    """

    required: bool | None = True
    site_id: int | None = None
    action_name: str | None = None
    action_url: str | None = None
    api_version: str | None = "1"
    visitor_id: VisitorId | None = field(default_factory=VisitorId.random)
    new_visitor: bool | None = None
    referrer_url: str | None = None
    visit_custom_variables: CustomVariables | None = None
    visitor_visit_count: int | None = None
    visitor_previous_visit_timestamp: datetime | None = None
    visitor_first_visit_timestamp: datetime | None = None
    campaign_name: str | None = None
    campaign_keyword: str | None = None
    device_resolution: DeviceResolution | None = None
    current_hour: int | None = None
    current_minute: int | None = None
    current_second: int | None = None
    plugin_flash: bool | None = None
    plugin_java: bool | None = None
    plugin_director: bool | None = None
    plugin_quicktime: bool | None = None
    plugin_real_player: bool | None = None
    plugin_pdf: bool | None = None
    plugin_windows_media: bool | None = None
    plugin_gears: bool | None = None
    plugin_silverlight: bool | None = None
    supports_cookies: bool | None = None
    header_user_agent: str | None = None
    header_accept_language: AcceptLanguage | None = None
    user_id: str | None = None
    visitor_custom_id: VisitorId | None = None
    new_visit: bool | None = None
    page_custom_variables: CustomVariables | None = None
    outlink_url: str | None = None
    download_url: str | None = None
    search_query: str | None = None
    search_category: str | None = None
    search_results_count: int | None = None
    page_view_id: UniqueId | None = None
    goal_id: int | None = None
    ecommerce_revenue: float | None = None
    character_set: codecs.CodecInfo | str | None = None
    custom_action: bool | None = None
    network_time: int | None = None
    server_time: int | None = None
    transfer_time: int | None = None
    dom_processing_time: int | None = None
    dom_completion_time: int | None = None
    onload_time: int | None = None
    event_category: str | None = None
    event_action: str | None = None
    event_name: str | None = None
    event_value: float | None = None
    content_name: str | None = None
    content_piece: str | None = None
    content_target: str | None = None
    content_interaction: str | None = None
    ecommerce_id: str | None = None
    ecommerce_items: EcommerceItems | None = None
    ecommerce_subtotal: float | None = None
    ecommerce_tax: float | None = None
    ecommerce_shipping_cost: float | None = None
    ecommerce_discount: float | None = None
    ecommerce_last_order_timestamp: datetime | None = None
    auth_token: str | None = None
    visitor_ip: str | None = None
    request_timestamp: datetime | None = None
    visitor_country: Country | None = None
    visitor_region: str | None = None
    visitor_city: str | None = None
    visitor_latitude: float | None = None
    visitor_longitude: float | None = None
    queued_tracking: bool | None = None
    response_as_image: bool | None = False
    ping: bool | None = None
    track_bot_requests: bool | None = None
    random_value: RandomValue | None = field(default_factory=RandomValue.random)
    debug: bool | None = None
    crash_message: str | None = None
    crash_type: str | None = None
    crash_category: str | None = None
    crash_stack_trace: str | None = None
    crash_location: str | None = None
    crash_line: int | None = None
    crash_column: int | None = None
    dimensions: dict[int, Any] = field(default_factory=dict)
    additional_parameters: dict[str, list[Any]] = field(default_factory=dict)

    def get_custom_parameter(self, key: str) -> list[Any]:
        """Return a copy of the values of an additional parameter."""
        return list(self.additional_parameters.get(key, []))

    def set_custom_parameter(self, key: str, value: Any) -> None:
        """Replace all values of an additional parameter. None removes it."""
        if not key.strip():
            raise ValueError("Parameter name must not be empty")
        if value is None:
            self.additional_parameters.pop(key, None)
        else:
            self.additional_parameters[key] = [value]

    def add_custom_parameter(self, key: str, value: Any) -> None:
        """Append a value to an additional parameter."""
        if not key.strip():
            raise ValueError("Parameter name must not be empty")
        self.additional_parameters.setdefault(key, []).append(value)

    def clear_custom_parameters(self) -> None:
        self.additional_parameters.clear()

    def set_dimension(self, index: int, value: Any) -> None:
        """Set custom dimension ``index``. None removes it."""
        if index <= 0:
            raise ValueError("Dimension index must be greater than 0")
        if value is None:
            self.dimensions.pop(index, None)
        else:
            self.dimensions[index] = value

    def get_page_custom_variable(self, index_or_key: int | str) -> CustomVariable | str | None:
        if self.page_custom_variables is None:
            return None
        return self.page_custom_variables.get(index_or_key)

    def set_page_custom_variable(self, key: str, value: str | None) -> None:
        """Add or overwrite a page scope custom variable. None removes the key."""
        self.page_custom_variables = _set_custom_variable(self.page_custom_variables, key, value)

    def get_visit_custom_variable(self, index_or_key: int | str) -> CustomVariable | str | None:
        if self.visit_custom_variables is None:
            return None
        return self.visit_custom_variables.get(index_or_key)

    def set_visit_custom_variable(self, key: str, value: str | None) -> None:
        """Add or overwrite a visit scope custom variable. None removes the key."""
        self.visit_custom_variables = _set_custom_variable(self.visit_custom_variables, key, value)

    def add_ecommerce_item(self, item: EcommerceItem) -> None:
        if self.ecommerce_items is None:
            self.ecommerce_items = EcommerceItems()
        self.ecommerce_items.add(item)

    def enable_ecommerce(self) -> None:
        """Mark this event as an ecommerce interaction (goal id 0)."""
        self.goal_id = 0


def _set_custom_variable(
    custom_variables: CustomVariables | None, key: str, value: str | None
) -> CustomVariables | None:
    if value is None:
        if custom_variables is not None:
            custom_variables.remove(key)
        return custom_variables
    if custom_variables is None:
        custom_variables = CustomVariables()
    return custom_variables.add(CustomVariable(key, value))
