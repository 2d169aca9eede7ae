"""Users resource for GhostMarket API client."""

from typing import Any

from ...shared.models import UsersQuery
from ..query import Query
from .base import BaseResource

USERS_DEFAULTS: dict[str, Any] = {
    "limit": 50,
    "offset": 0,
    "order_by": "join_order",
    "order_direction": "asc",
    "with_sales_statistics": 0,
    "with_total": 0,
}


class UsersResource(BaseResource):
    """User-related client methods."""

    async def list(self, query: UsersQuery | Query | None = None) -> dict[str, Any]:
        """Get users from the marketplace userbase."""
        return await self.request("/users/", query, USERS_DEFAULTS)

    async def exists(self, username: str) -> dict[str, Any]:
        """Check whether a username is already taken."""
        return await self.request("/userexists/", {"username": username})
