"""Client resources for the GhostMarket API."""

from .assets import AssetsResource
from .base import BaseResource
from .collections import CollectionsResource
from .events import EventsResource
from .orders import OrdersResource
from .series import SeriesResource
from .statistics import StatisticsResource
from .users import UsersResource

__all__ = [
    "BaseResource",
    "AssetsResource",
    "CollectionsResource",
    "EventsResource",
    "OrdersResource",
    "SeriesResource",
    "StatisticsResource",
    "UsersResource",
]
