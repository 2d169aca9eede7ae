"""Events resource for GhostMarket API client."""

from typing import Any

from ...shared.models import EventsQuery
from ..query import Query
from .base import BaseResource

EVENTS_DEFAULTS: dict[str, Any] = {
    "limit": 50,
    "offset": 0,
    "order_by": "id",
    "order_direction": "asc",
    "show_events": "not_hidden",
    "fiat_currency": "USD",
    "grouping": 0,
    "with_metadata": 0,
    "with_series": 0,
    "with_total": 0,
}


class EventsResource(BaseResource):
    """Event-related client methods."""

    async def list(self, query: EventsQuery | Query | None = None) -> dict[str, Any]:
        """Get marketplace events."""
        return await self.request("/events/", query, EVENTS_DEFAULTS)
