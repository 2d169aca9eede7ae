"""Assets resource for GhostMarket API client."""

from typing import Any

from ...shared.models import AssetsQuery, TokenMetadataQuery
from ..query import Query
from .base import BaseResource

ASSETS_DEFAULTS: dict[str, Any] = {
    "limit": 50,
    "offset": 0,
    "order_by": "id",
    "order_direction": "asc",
    "with_total": 0,
    "fiat_currency": "USD",
    "auction_state": "all",
    "auction_started": "all",
    "light_mode": 0,
}


class AssetsResource(BaseResource):
    """NFT asset and token metadata client methods."""

    async def list(self, query: AssetsQuery | Query | None = None) -> dict[str, Any]:
        """Get NFT assets available on the marketplace."""
        return await self.request("/assets/", query, ASSETS_DEFAULTS)

    async def metadata(
        self, query: TokenMetadataQuery | Query | None = None
    ) -> Any:
        """Get the metadata of a token."""
        return await self.request("/metadata/", query)

    async def refresh_metadata(
        self, query: TokenMetadataQuery | Query | None = None
    ) -> dict[str, Any]:
        """Ask the marketplace to refresh the metadata of a token."""
        return await self.request("/refreshmetadata/", query)

    async def token_uri(
        self, query: TokenMetadataQuery | Query | None = None
    ) -> dict[str, Any]:
        """Get the token URI of a token."""
        return await self.request("/tokenuri/", query)
