"""Query models for the GhostMarket API.

Every field is optional. Unknown keys are kept and forwarded as query
parameters, so filters the API adds later work without a client release.
"""

from pydantic import BaseModel, ConfigDict


class BaseQuery(BaseModel):
    """Base class for all endpoint queries."""

    model_config = ConfigDict(extra="allow")


class PaginatedQuery(BaseQuery):
    """Query with offset/limit pagination and ordering."""

    offset: int | None = None
    limit: int | None = None
    order_by: str | None = None
    order_direction: str | None = None


class AssetsQuery(PaginatedQuery):
    """Query for NFT assets."""

    auction_started: str | None = None
    auction_state: str | None = None
    auction_type: str | None = None
    bidder: str | None = None
    chain: str | None = None
    chain_name: str | None = None
    collection_slug: str | None = None
    contract: str | None = None
    contract_id: str | None = None
    creator: str | None = None
    fiat_currency: str | None = None
    filter1name: str | None = None
    filter1value: str | None = None
    filter2name: str | None = None
    filter2value: str | None = None
    filter3name: str | None = None
    filter3value: str | None = None
    filter4name: str | None = None
    filter4value: str | None = None
    filter5name: str | None = None
    filter5value: str | None = None
    grouping: int | None = None
    issuer: str | None = None
    light_mode: int | None = None
    maker: str | None = None
    name: str | None = None
    nsfw_mode: str | None = None
    only_verified: int | None = None
    owner: str | None = None
    price_similar: int | None = None
    price_similar_delta: int | None = None
    quote_symbol: str | None = None
    series_id: str | None = None
    status: str | None = None
    symbol: str | None = None
    token_id: str | None = None
    with_total: int | None = None


class CollectionsQuery(PaginatedQuery):
    """Query for NFT collections."""

    chain: str | None = None
    collection_slug: str | None = None
    issuer: str | None = None
    nft_name: str | None = None
    owner: str | None = None
    quote_symbol: str | None = None
    series_id: str | None = None
    with_total: int | None = None


class EventsQuery(PaginatedQuery):
    """Query for marketplace events (sales, listings, transfers, ...)."""

    chain: str | None = None
    contract: str | None = None
    token_id: str | None = None
    address: str | None = None
    event_kind: str | None = None
    show_events: str | None = None
    fiat_currency: str | None = None
    grouping: int | None = None
    with_metadata: int | None = None
    with_series: int | None = None
    with_total: int | None = None


class OrderQuery(BaseQuery):
    """Query for orderbook orders."""

    chain: str | None = None
    contract: str | None = None
    token_id: str | None = None
    offset: int | str | None = None
    limit: int | None = None
    with_deleted: bool | None = None


class OpenMintingsQuery(BaseQuery):
    """Query for open mintings."""

    chain: str | None = None
    contract: str | None = None


class SeriesQuery(PaginatedQuery):
    """Query for NFT series."""

    chain: str | None = None
    contract: str | None = None
    creator: str | None = None
    id: str | None = None
    name: str | None = None
    symbol: str | None = None


class StatisticsQuery(PaginatedQuery):
    """Query for marketplace statistics."""

    chain: str | None = None
    currency: str | None = None
    with_collections_daily_stats: int | None = None
    with_collections_weekly_stats: int | None = None
    with_collections_monthly_stats: int | None = None
    with_collections_total_stats: int | None = None
    with_chains_daily_stats: int | None = None
    with_chains_weekly_stats: int | None = None
    with_chains_monthly_stats: int | None = None
    with_chains_total_stats: int | None = None
    with_marketplace_daily_stats: int | None = None
    with_marketplace_weekly_stats: int | None = None
    with_marketplace_monthly_stats: int | None = None
    with_marketplace_total_stats: int | None = None


class TokenMetadataQuery(BaseQuery):
    """Query identifying a single token, used by the metadata endpoints."""

    chain: str | None = None
    contract: str | None = None
    token_id: str | None = None


class UsersQuery(PaginatedQuery):
    """Query for marketplace users."""

    address: str | None = None
    chain: str | None = None
    issuer: str | None = None
    offchain_name: str | None = None
    offchain_name_partial: str | None = None
    verified: bool | None = None
    with_sales_statistics: int | None = None
    with_total: int | None = None
