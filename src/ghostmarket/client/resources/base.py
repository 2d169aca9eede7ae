"""Base resource class shared by the endpoint groups."""

import logging
from collections.abc import Mapping
from typing import Any

from ..base import BaseClient
from ..config import API_PATH
from ..query import Query, merge_query

logger = logging.getLogger(__name__)


class BaseResource:
    """Base class for API resources.

    A resource owns a group of endpoint paths and their default query
    parameters. Callers' queries are merged over the defaults and sent through
    the shared request pipeline.
    """

    def __init__(self, base_client: BaseClient):
        """Initialize resource with base client.

        Args:
            base_client: The BaseClient instance for making HTTP requests

        """
        self._base_client = base_client

    async def request(
        self,
        path: str,
        query: Query | None = None,
        defaults: Mapping[str, Any] | None = None,
    ) -> Any:
        """Get an endpoint under the API version prefix.

        Args:
            path: Endpoint path relative to the API version prefix
            query: Caller query, overrides ``defaults`` key by key
            defaults: Endpoint defaults

        Returns:
            Any: Parsed JSON response

        """
        params = merge_query(defaults or {}, query)
        logger.debug(f"GET {path} with {len(params)} query parameters")
        return await self._base_client.get(f"{API_PATH}{path}", params)
