"""Series resource for GhostMarket API client."""

from typing import Any

from ...shared.models import SeriesQuery
from ..query import Query
from .base import BaseResource

SERIES_DEFAULTS: dict[str, Any] = {
    "limit": 50,
    "offset": 0,
    "order_by": "id",
    "order_direction": "asc",
}


class SeriesResource(BaseResource):
    """Series-related client methods."""

    async def list(self, query: SeriesQuery | Query | None = None) -> dict[str, Any]:
        """Get NFT series available on the marketplace."""
        return await self.request("/series/", query, SERIES_DEFAULTS)
