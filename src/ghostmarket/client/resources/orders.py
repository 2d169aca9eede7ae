"""Orders resource for GhostMarket API client."""

from typing import Any

from ...shared.models import OpenMintingsQuery, OrderQuery
from ..query import Query
from .base import BaseResource


class OrdersResource(BaseResource):
    """Orderbook client methods.

    ``get`` and ``list`` page through the orderbook using the client's
    ``page_size``, read at call time.
    """

    def _page_defaults(self, page: int) -> dict[str, Any]:
        page_size = self._base_client.page_size
        return {"limit": page_size, "offset": (page - 1) * page_size}

    async def get(
        self, query: OrderQuery | Query | None = None, page: int = 1
    ) -> dict[str, Any]:
        """Get an order from the orderbook."""
        return await self.request("/openorders/", query, self._page_defaults(page))

    async def list(
        self, query: OrderQuery | Query | None = None, page: int = 1
    ) -> dict[str, Any]:
        """Get a page of orders from the orderbook."""
        return await self.request("/openorders/", query, self._page_defaults(page))

    async def open(self, query: OrderQuery | Query | None = None) -> dict[str, Any]:
        """Get open orders."""
        return await self.request("/getopenorders/", query)

    async def open_mintings(
        self, query: OpenMintingsQuery | Query | None = None
    ) -> dict[str, Any]:
        """Get open mintings."""
        return await self.request("/getopenmintings/", query)
