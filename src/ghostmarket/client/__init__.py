"""Client module for the GhostMarket API."""

from .base import APIError, ClientError, RequestOptions
from .client import GhostMarketAPI
from .config import GhostMarketAPIConfig, Network

__all__ = [
    "GhostMarketAPI",
    "GhostMarketAPIConfig",
    "Network",
    "RequestOptions",
    "ClientError",
    "APIError",
]
