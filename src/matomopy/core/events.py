"""Helper functions for creating common TrackingEvent objects."""

import traceback
from enum import Enum

from matomopy.core.ecommerce import EcommerceItems
from matomopy.core.models import TrackingEvent


class ActionType(Enum):
    """Kinds of actions that are tracked by URL."""

    DOWNLOAD = "download_url"
    LINK = "outlink_url"

    def apply_url(self, event: TrackingEvent, url: str) -> TrackingEvent:
        """Set the URL attribute this action type uses on an event."""
        setattr(event, self.value, url)
        return event


def page_view(name: str) -> TrackingEvent:
    """Create a page view event.

    Args:
        name: Page title, e.g. "Help / Feedback".

    Returns:
        TrackingEvent with ``action_name`` set
    """
    return TrackingEvent(action_name=name)


def action(url: str, action_type: ActionType) -> TrackingEvent:
    """Create a download or outlink event.

    Args:
        url: The downloaded file or the external link
        action_type: Which URL parameter to set

    Returns:
        TrackingEvent with the download or outlink URL set
    """
    return action_type.apply_url(TrackingEvent(), url)


def content_impression(name: str, piece: str | None = None, target: str | None = None) -> TrackingEvent:
    """Create a content impression event."""
    return TrackingEvent(content_name=name, content_piece=piece, content_target=target)


def content_interaction(
    interaction: str,
    name: str,
    piece: str | None = None,
    target: str | None = None,
) -> TrackingEvent:
    """Create a content interaction event, e.g. a click on a banner."""
    return TrackingEvent(
        content_interaction=interaction,
        content_name=name,
        content_piece=piece,
        content_target=target,
    )


def crash(
    message: str,
    crash_type: str | None = None,
    category: str | None = None,
    stack_trace: str | None = None,
    location: str | None = None,
    line: int | None = None,
    column: int | None = None,
) -> TrackingEvent:
    """Create a crash event.

    Args:
        message: The error message
        crash_type: Error type, e.g. an exception class name
        category: Free-form category, e.g. "payment"
        stack_trace: Formatted stack trace
        location: Source file or URL where the crash happened
        line: Line number of the crash location
        column: Column number of the crash location

    Returns:
        TrackingEvent with the crash parameters set
    """
    return TrackingEvent(
        crash_message=message,
        crash_type=crash_type,
        crash_category=category,
        crash_stack_trace=stack_trace,
        crash_location=location,
        crash_line=line,
        crash_column=column,
    )


def crash_from_exception(exc: BaseException, category: str | None = None) -> TrackingEvent:
    """Create a crash event from a caught exception.

    The location and line are taken from the innermost traceback frame, if
    the exception has been raised.
    """
    frames = traceback.extract_tb(exc.__traceback__)
    last_frame = frames[-1] if frames else None
    return crash(
        message=str(exc),
        crash_type=f"{type(exc).__module__}.{type(exc).__qualname__}",
        category=category,
        stack_trace="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        location=last_frame.filename if last_frame else None,
        line=last_frame.lineno if last_frame else None,
    )


def ecommerce_cart_update(revenue: float) -> TrackingEvent:
    """Create a cart update event. Sets goal id 0 as ecommerce events require."""
    return TrackingEvent(goal_id=0, ecommerce_revenue=revenue)


def ecommerce_order(
    order_id: str,
    revenue: float,
    subtotal: float | None = None,
    tax: float | None = None,
    shipping_cost: float | None = None,
    discount: float | None = None,
    items: EcommerceItems | None = None,
) -> TrackingEvent:
    """Create an ecommerce order event.

    Args:
        order_id: Unique order id
        revenue: Grand total of the order
        subtotal: Total excluding shipping
        tax: Tax amount
        shipping_cost: Shipping amount
        discount: Discount granted
        items: Ordered line items

    Returns:
        TrackingEvent with goal id 0 and the order parameters set
    """
    return TrackingEvent(
        goal_id=0,
        ecommerce_id=order_id,
        ecommerce_revenue=revenue,
        ecommerce_subtotal=subtotal,
        ecommerce_tax=tax,
        ecommerce_shipping_cost=shipping_cost,
        ecommerce_discount=discount,
        ecommerce_items=items,
    )


def event(
    category: str,
    action: str,
    name: str | None = None,
    value: float | None = None,
) -> TrackingEvent:
    """Create a custom event (``e_c``, ``e_a``, ``e_n``, ``e_v``)."""
    return TrackingEvent(
        event_category=category,
        event_action=action,
        event_name=name,
        event_value=value,
    )


def goal(goal_id: int, revenue: float | None = None) -> TrackingEvent:
    """Create a goal conversion event."""
    return TrackingEvent(goal_id=goal_id, ecommerce_revenue=revenue)


def site_search(
    query: str,
    category: str | None = None,
    results_count: int | None = None,
) -> TrackingEvent:
    """Create a site search event."""
    return TrackingEvent(
        search_query=query,
        search_category=category,
        search_results_count=results_count,
    )


def ping() -> TrackingEvent:
    """Create a heartbeat event that extends the current visit."""
    return TrackingEvent(ping=True)
