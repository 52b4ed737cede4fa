"""Example of building, validating and encoding tracking events.

Run with:
    python examples/basic_tracking.py

Output:
    The query string of a single page view, followed by the bulk envelope
    of an ecommerce order and a site search. Events are recorded by an
    InMemorySender instead of being sent over the network.
"""

import logging

from matomopy import (
    EcommerceItem,
    EcommerceItems,
    InMemorySender,
    MatomoTracker,
    TrackerConfig,
    ecommerce_order,
    page_view,
    site_search,
)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    config = TrackerConfig(
        api_endpoint="https://your-matomo-domain.example/matomo.php",
        default_site_id=1,
    )
    sender = InMemorySender()
    tracker = MatomoTracker(config, sender)

    home = page_view("Home")
    home.action_url = "https://shop.example/?utm_source=newsletter"
    home.set_page_custom_variable("Category", "Landing")
    tracker.send_request(home)

    items = EcommerceItems()
    items.add(EcommerceItem(sku="B-42", name="Blue shirt", category="Shirts", price=19.99, quantity=2))
    order = ecommerce_order("A100", revenue=44.98, subtotal=39.98, shipping_cost=5.0, items=items)
    tracker.send_bulk_request([order, site_search("shirts", results_count=12)])

    for query in sender.queries:
        print(f"GET ?{query}")
    for payload in sender.payloads:
        print(f"POST {payload.decode('utf-8')}")


if __name__ == "__main__":
    main()
