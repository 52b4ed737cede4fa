"""Tracker facade tying configuration, encoding and a sender together."""

import logging
from collections.abc import Iterable

from matomopy.core.auth import determine_auth_token
from matomopy.core.config import TrackerConfig
from matomopy.core.encoding.bulk import build_bulk_payload
from matomopy.core.encoding.query import QueryCreator
from matomopy.core.exceptions import ConfigurationError
from matomopy.core.models import TrackingEvent
from matomopy.core.ports import SenderPort
from matomopy.core.validation import validate_event

logger = logging.getLogger(__name__)


class MatomoTracker:
    """Sends tracking events to a Matomo collector through a sender.

    Example:
        ```python
        from matomopy import InMemorySender, MatomoTracker, TrackerConfig, page_view

        config = TrackerConfig(api_endpoint="https://example.org/matomo.php", default_site_id=1)
        tracker = MatomoTracker(config, InMemorySender())
        tracker.send_request(page_view("Home"))
        ```
    """

    def __init__(self, config: TrackerConfig, sender: SenderPort) -> None:
        """Initialize the tracker.

        Args:
            config: Tracker configuration.
            sender: Adapter that delivers encoded requests.
        """
        self.config = config
        self.sender = sender
        self._query_creator = QueryCreator(config)

    def _check_site_id(self, event: TrackingEvent) -> None:
        if self.config.default_site_id is None and event.site_id is None:
            raise ConfigurationError("No default site ID and no request site ID is given")

    def send_request(self, event: TrackingEvent) -> None:
        """Validate, encode and send a single event.

        Raises:
            ConfigurationError: If no site id is available or the auth token
                is malformed.
            ValidationError: If the event violates a cross-field rule.
            ParameterConstraintError: If a parameter value is invalid.
        """
        if not self.config.enabled:
            logger.warning("Not sending request, because tracker is disabled")
            return
        self._check_site_id(event)
        auth_token = determine_auth_token(None, [event], self.config)
        validate_event(event, auth_token)
        query = self._query_creator.create_query(event, auth_token)
        logger.debug("Sending request via GET to %s", self.config.api_endpoint)
        self.sender.send_single(query)

    def send_bulk_request(
        self,
        events: Iterable[TrackingEvent],
        auth_token: str | None = None,
    ) -> None:
        """Validate, encode and send several events in one bulk request.

        Args:
            events: Events in the order they should be recorded.
            auth_token: Token overriding event and default tokens.
        """
        if not self.config.enabled:
            logger.warning("Not sending request, because tracker is disabled")
            return
        events = list(events)
        for event in events:
            self._check_site_id(event)
        payload = build_bulk_payload(events, self.config, auth_token)
        logger.debug(
            "Sending %d requests via POST to %s", len(events), self.config.api_endpoint
        )
        self.sender.send_bulk(payload)
