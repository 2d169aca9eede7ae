"""Main GhostMarketAPI client with modular resource access."""

from typing import Any

from .base import BaseClient, LogCallback
from .config import (
    DEFAULT_NETWORK,
    DEFAULT_PAGE_SIZE,
    GhostMarketAPIConfig,
    resolve_hosts,
)
from .query import Query
from .resources import (
    AssetsResource,
    CollectionsResource,
    EventsResource,
    OrdersResource,
    SeriesResource,
    StatisticsResource,
    UsersResource,
)


class GhostMarketAPI:
    """Client for the GhostMarket API with modular resource access.

    Usage:
        config = GhostMarketAPIConfig(api_key="...")
        async with GhostMarketAPI(config) as api:
            assets = await api.assets.list({"chain": "n3", "limit": 10})
            orders = await api.orders.list(page=2)
            taken = await api.users.exists("alice")
    """

    DEFAULT_NETWORK = DEFAULT_NETWORK

    def __init__(
        self,
        config: GhostMarketAPIConfig | None = None,
        logger: LogCallback | None = None,
        *,
        timeout: float | None = None,
    ):
        """Initialize the client from a configuration and optional log callback.

        Args:
            config: API configuration, read from the environment when omitted
            logger: Callback receiving one line before and one after each request
            timeout: Optional total timeout handed to aiohttp, none by default

        """
        config = config or GhostMarketAPIConfig()
        api_base_url, host_url = resolve_hosts(config)
        self._api_base_url = api_base_url
        self._host_url = host_url

        self._base_client = BaseClient(
            api_base_url,
            api_key=config.api_key,
            log_callback=logger,
            page_size=DEFAULT_PAGE_SIZE,
            timeout=timeout,
        )

        self.assets = AssetsResource(self._base_client)
        self.collections = CollectionsResource(self._base_client)
        self.events = EventsResource(self._base_client)
        self.orders = OrdersResource(self._base_client)
        self.series = SeriesResource(self._base_client)
        self.statistics = StatisticsResource(self._base_client)
        self.users = UsersResource(self._base_client)

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self):
        """Open the underlying HTTP session (increments reference count)."""
        await self._base_client.connect()

    async def close(self):
        """Close the underlying HTTP session (decrements reference count)."""
        await self._base_client.close()

    @property
    def api_base_url(self) -> str:
        """Base URL for the API."""
        return self._api_base_url

    @property
    def host_url(self) -> str:
        """Host URL of the marketplace site."""
        return self._host_url

    @property
    def page_size(self) -> int:
        """Page size used when paging through orders."""
        return self._base_client.page_size

    @page_size.setter
    def page_size(self, value: int) -> None:
        self._base_client.page_size = value

    @property
    def logger(self) -> LogCallback:
        """Callback used to trace requests when debugging."""
        return self._base_client.log_callback

    @logger.setter
    def logger(self, callback: LogCallback) -> None:
        self._base_client.log_callback = callback

    async def get(self, api_path: str, query: Query | None = None) -> Any:
        """Get JSON data from an API path, sending the API key in headers.

        Args:
            api_path: Path under the base URL, including the version prefix
            query: Query parameters

        Returns:
            Any: Parsed JSON response

        """
        return await self._base_client.get(api_path, query)
