"""Network presets and client configuration.

The client picks its API and site hosts from a network selector at
construction time. Every configuration field may also come from an environment
variable so that scripts and the CLI can run without explicit arguments.
"""

import logging
import os
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ORDERBOOK_VERSION = 1
API_PATH = f"/api/v{ORDERBOOK_VERSION}"

API_BASE_MAINNET = "https://api.ghostmarket.io"
# No public API host for the test network; callers must pass api_base_url.
API_BASE_RINKEBY = ""
SITE_HOST_MAINNET = "https://ghostmarket.io"
SITE_HOST_RINKEBY = "https://rinkeby.ghostmarket.io"

MAINNET_API_URL = f"{API_BASE_MAINNET}{API_PATH}"
RINKEBY_API_URL = f"{API_BASE_RINKEBY}{API_PATH}"

DEFAULT_PAGE_SIZE = 20
SUPPORT_URL = "https://discord.gg/ga8EJbv"

API_KEY_HEADER = "X-API-KEY"


class Network(str, Enum):
    """Networks with built-in host presets."""

    MAIN = "main"
    RINKEBY = "rinkeby"


DEFAULT_NETWORK = Network.MAIN

TField = TypeVar("TField")


def EnvField(*env_vars: str, default: TField | None = None, **kwargs: Any) -> TField:  # noqa: UP047
    """Create a Field that gets its default value from an environment variable."""

    def get_env_value():
        for env_var in env_vars:
            value = os.getenv(env_var)
            if value is not None:
                return value
        logger.debug(
            f"No environment variable found among: {env_vars}, using default value: {default}"
        )
        return default

    return Field(default_factory=get_env_value, validate_default=True, **kwargs)  # pyright: ignore[reportReturnType]


class GhostMarketAPIConfig(BaseModel):
    """GhostMarket API configuration.

    Attributes:
        network_name: Network preset to use. Anything other than
            ``Network.RINKEBY`` resolves to the main network.
        api_key: Optional key sent as the ``X-API-KEY`` header.
        api_base_url: Optional base URL that replaces the network preset.
        use_read_only_provider: Accepted for compatibility, not used by the
            HTTP client.

    """

    network_name: Network | str | None = EnvField(
        "GHOSTMARKET_NETWORK", default=DEFAULT_NETWORK
    )
    api_key: str | None = EnvField("GHOSTMARKET_API_KEY", default=None)
    api_base_url: str | None = EnvField("GHOSTMARKET_API_BASE_URL", default=None)
    use_read_only_provider: bool = EnvField(
        "GHOSTMARKET_USE_READ_ONLY_PROVIDER", default=False
    )


def resolve_hosts(config: GhostMarketAPIConfig) -> tuple[str, str]:
    """Return ``(api_base_url, host_url)`` for a configuration.

    Unknown or missing networks fall back to the main network presets. An
    explicit ``api_base_url`` always takes precedence over the preset.
    """
    if config.network_name == Network.RINKEBY:
        api_base_url = config.api_base_url or API_BASE_RINKEBY
        host_url = SITE_HOST_RINKEBY
    else:
        api_base_url = config.api_base_url or API_BASE_MAINNET
        host_url = SITE_HOST_MAINNET

    if not api_base_url:
        logger.warning(
            f"No API base URL for network {config.network_name!r}; pass api_base_url to reach it"
        )
    return api_base_url, host_url
