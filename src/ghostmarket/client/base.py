"""Lightweight base client with the shared aiohttp request pipeline."""

import json
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass, field
from typing import Any

import aiohttp

from .config import API_KEY_HEADER, DEFAULT_PAGE_SIZE, SUPPORT_URL
from .query import Query, stringify_query

logger = logging.getLogger(__name__)

LogCallback = Callable[[str], None]

# Number of characters of the request options kept in the "Sending request" line
_LOGGED_OPTIONS_LENGTH = 100


def default_log_callback(message: str) -> None:
    """Forward pipeline messages to the package logger at DEBUG level."""
    logger.debug(message)


class ClientError(Exception):
    """Base exception for client errors."""

    pass


class APIError(ClientError):
    """Non-2xx response from the GhostMarket API."""

    def __init__(self, status: int, message: str, body: Any = None):
        """Initialize API error with status, classified message and decoded body."""
        self.status = status
        self.message = message
        self.body = body
        super().__init__(f"API Error {status}: {message}")


@dataclass
class RequestOptions:
    """Options for a single HTTP request, similar to the Fetch API's init."""

    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None


def decode_error_body(text: str | None) -> Any:
    """Decode an error body as JSON, falling back to the raw text.

    Empty or missing bodies decode to ``None``. Never raises.
    """
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def _dump(value: Any) -> str:
    return json.dumps(value, default=str)


def classify_error(status: int, body: Any) -> str:
    """Build the human-readable message for an error response."""
    dump = _dump(body)
    if status == 400:
        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            if isinstance(errors, list | tuple):
                return ", ".join(str(error) for error in errors)
            return str(errors)
        return f"Invalid request: {dump}"
    if status in (401, 403):
        return f"Unauthorized. Full message was '{dump}'"
    if status == 404:
        return f"Not found. Full message was '{dump}'"
    if status == 500:
        return (
            "Internal server error. Ghost Market has been alerted, but if the problem "
            f"persists please contact us via Discord: {SUPPORT_URL} - full message was {dump}"
        )
    if status == 503:
        return (
            "Service unavailable. Please try again in a few minutes. If the problem "
            f"persists please contact us via Discord: {SUPPORT_URL} - full message was {dump}"
        )
    return f"Message: {dump}"


class BaseClient:
    """Request pipeline shared by every endpoint.

    Holds the per-client settings the pipeline reads on each call: base URL,
    API key, page size and the log callback. Settings live on the instance, so
    several clients can run side by side with different values.
    """

    def __init__(
        self,
        api_base_url: str,
        api_key: str | None = None,
        log_callback: LogCallback | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float | None = None,
    ):
        """Initialize base client with URL, credentials and logging hook."""
        self.api_base_url = api_base_url
        self._api_key = api_key
        self.log_callback: LogCallback = log_callback or default_log_callback
        self.page_size = page_size
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None
        self._session: aiohttp.ClientSession | None = None
        self._ref_count: int = 0

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
        """Create the aiohttp session and increment reference count."""
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        self._ref_count += 1

    async def close(self):
        """Close the aiohttp session when reference count reaches zero."""
        self._ref_count = max(self._ref_count - 1, 0)

        if self._ref_count == 0 and self._session:
            session = self._session
            self._session = None
            await session.close()

    @property
    def has_api_key(self) -> bool:
        """Whether requests carry the API key header."""
        return bool(self._api_key)

    @asynccontextmanager
    async def _session_scope(self) -> AsyncIterator[aiohttp.ClientSession]:
        """Yield the open session, or a session that lives for one request."""
        if self._session is not None:
            yield self._session
            return
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            yield session

    def _build_headers(self, headers: dict[str, str] | None = None) -> dict[str, str]:
        """Merge caller headers with the API key header.

        The key header is owned by the client: a caller-supplied copy is
        dropped, and the configured key (if any) is always added.
        """
        final_headers = {
            name: value
            for name, value in (headers or {}).items()
            if name.lower() != API_KEY_HEADER.lower()
        }
        if self._api_key:
            final_headers[API_KEY_HEADER] = self._api_key
        return final_headers

    def _describe_options(self, opts: RequestOptions) -> str:
        data = asdict(opts)
        if API_KEY_HEADER in data["headers"]:
            data["headers"][API_KEY_HEADER] = "***"
        return json.dumps(data)[:_LOGGED_OPTIONS_LENGTH]

    async def get(self, api_path: str, query: Query | None = None) -> Any:
        """Get JSON data from the API, sending the API key in headers.

        Args:
            api_path: Path to the endpoint, including the API version prefix
            query: Query parameters, serialized in insertion order

        Returns:
            Any: Parsed JSON response body

        """
        url = f"{api_path}?{stringify_query(query)}"
        response = await self._fetch(url)
        return await response.json(content_type=None)

    async def _fetch(
        self, api_path: str, opts: RequestOptions | None = None
    ) -> aiohttp.ClientResponse:
        """Send one request to an API path and classify the response.

        The response body is buffered before the connection is released, so
        callers can read it after this returns.
        """
        opts = opts or RequestOptions()
        final_url = self.api_base_url + api_path
        final_opts = RequestOptions(
            method=opts.method,
            headers=self._build_headers(opts.headers),
            body=opts.body,
        )

        self.log_callback(
            f"Sending request: {final_url} {self._describe_options(final_opts)}..."
        )

        async with self._session_scope() as session:
            async with session.request(
                final_opts.method,
                final_url,
                headers=final_opts.headers,
                data=final_opts.body,
            ) as response:
                await response.read()

        return await self._handle_api_response(response)

    async def _handle_api_response(
        self, response: aiohttp.ClientResponse
    ) -> aiohttp.ClientResponse:
        """Return 2xx responses unchanged, raise APIError for anything else."""
        if 200 <= response.status < 300:
            self.log_callback(f"Got success: {response.status}")
            return response

        try:
            text = await response.text()
        except (aiohttp.ClientError, UnicodeDecodeError):
            # Unreadable body, classify without it
            text = None
        body = decode_error_body(text)

        self.log_callback(f"Got error {response.status}: {_dump(body)}")

        raise APIError(response.status, classify_error(response.status, body), body)
