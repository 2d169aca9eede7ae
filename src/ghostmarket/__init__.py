"""GhostMarket API - An asyncio client for the GhostMarket NFT marketplace."""

from .client import (
    APIError,
    ClientError,
    GhostMarketAPI,
    GhostMarketAPIConfig,
    Network,
)

__all__ = ["GhostMarketAPI", "GhostMarketAPIConfig", "Network", "ClientError", "APIError"]
