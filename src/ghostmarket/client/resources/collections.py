"""Collections resource for GhostMarket API client."""

from typing import Any

from ...shared.models import CollectionsQuery
from ..query import Query
from .base import BaseResource

COLLECTIONS_DEFAULTS: dict[str, Any] = {
    "limit": 50,
    "offset": 0,
    "order_by": "id",
    "order_direction": "asc",
    "with_total": 1,
}


class CollectionsResource(BaseResource):
    """Collection-related client methods."""

    async def list(
        self, query: CollectionsQuery | Query | None = None
    ) -> dict[str, Any]:
        """Get NFT collections available on the marketplace."""
        return await self.request("/collections/", query, COLLECTIONS_DEFAULTS)
