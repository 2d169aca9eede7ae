"""Statistics resource for GhostMarket API client."""

from typing import Any

from ...shared.models import StatisticsQuery
from ..query import Query
from .base import BaseResource

STATISTICS_DEFAULTS: dict[str, Any] = {
    "limit": 50,
    "offset": 0,
    "order_by": "id",
    "order_direction": "asc",
    "currency": "USD",
    **{
        f"with_{scope}_{period}_stats": 1
        for scope in ("collections", "chains", "marketplace")
        for period in ("daily", "weekly", "monthly", "total")
    },
}


class StatisticsResource(BaseResource):
    """Statistics client methods."""

    async def get(
        self, query: StatisticsQuery | Query | None = None
    ) -> dict[str, Any]:
        """Get marketplace, chain and collection statistics."""
        return await self.request("/statistics/", query, STATISTICS_DEFAULTS)
