"""Shared models for the GhostMarket API client."""

from .models import (
    AssetsQuery,
    BaseQuery,
    CollectionsQuery,
    EventsQuery,
    OpenMintingsQuery,
    OrderQuery,
    PaginatedQuery,
    SeriesQuery,
    StatisticsQuery,
    TokenMetadataQuery,
    UsersQuery,
)

__all__ = [
    "BaseQuery",
    "PaginatedQuery",
    "AssetsQuery",
    "CollectionsQuery",
    "EventsQuery",
    "OrderQuery",
    "OpenMintingsQuery",
    "SeriesQuery",
    "StatisticsQuery",
    "TokenMetadataQuery",
    "UsersQuery",
]
