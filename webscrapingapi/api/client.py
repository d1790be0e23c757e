"""Client for the WebScrapingAPI scraping endpoint."""

import logging
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from ..config.settings import APIConfig
from ..core.exceptions import check_headers
from ..core.models import API_KEY_PARAM, HttpMethod
from ..core.query_builder import QueryBuilder

logger = logging.getLogger(__name__)


class WebScrapingAPI:
    """Client that dispatches scraping requests.

    Every call issues exactly one HTTP request and returns the raw
    ``httpx.Response``. Status codes are not interpreted and transport
    errors (``httpx.ConnectError``, ``httpx.TimeoutException``, ...) are
    raised unchanged.
    """

    def __init__(self, api_key: str, config: APIConfig | None = None,
                 transport: httpx.AsyncBaseTransport | None = None):
        """Initialize client with an API key and transport configuration."""
        self._api_key = api_key
        self.config = config or APIConfig()
        self.base_url = self.config.base_url.rstrip('/')

        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout),
            limits=httpx.Limits(
                max_keepalive_connections=self.config.max_keepalive_connections,
                max_connections=self.config.max_connections,
            ),
            transport=transport,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    def build_api_url(self, params: dict[str, str]) -> str:
        """Build the endpoint URL with the API key and percent-encoded params.

        The API key comes first, followed by the caller's params in order.
        A caller param named ``api_key`` is dropped so the client's key is
        the only one sent.
        """
        query = {API_KEY_PARAM: self._api_key}
        for key, value in params.items():
            if key == API_KEY_PARAM:
                logger.warning(f"Ignoring '{API_KEY_PARAM}' param, the client's API key is used")
                continue
            query[key] = value

        separator = "&" if "?" in self.base_url else "?"
        return f"{self.base_url}{separator}{urlencode(query, quote_via=quote)}"

    async def get(self, query_builder: QueryBuilder) -> httpx.Response:
        """GET request built from a QueryBuilder."""
        return await self._dispatch(HttpMethod.GET, query_builder.get_params(),
                                    query_builder.get_headers())

    async def post(self, query_builder: QueryBuilder) -> httpx.Response:
        """POST request built from a QueryBuilder, sending its body as JSON."""
        return await self._dispatch(HttpMethod.POST, query_builder.get_params(),
                                    query_builder.get_headers(), query_builder.get_body())

    async def put(self, query_builder: QueryBuilder) -> httpx.Response:
        """PUT request built from a QueryBuilder, sending its body as JSON."""
        return await self._dispatch(HttpMethod.PUT, query_builder.get_params(),
                                    query_builder.get_headers(), query_builder.get_body())

    async def raw_get(self, params: dict[str, str],
                      headers: dict[str, str] | None = None) -> httpx.Response:
        """GET request from raw params, for options QueryBuilder does not model."""
        return await self._dispatch(HttpMethod.GET, params, headers)

    async def raw_post(self, params: dict[str, str],
                       headers: dict[str, str] | None = None,
                       body: dict[str, Any] | None = None) -> httpx.Response:
        """POST request from raw params and body."""
        return await self._dispatch(HttpMethod.POST, params, headers, body)

    async def raw_put(self, params: dict[str, str],
                      headers: dict[str, str] | None = None,
                      body: dict[str, Any] | None = None) -> httpx.Response:
        """PUT request from raw params and body."""
        return await self._dispatch(HttpMethod.PUT, params, headers, body)

    def _redact(self, url: str) -> str:
        """Hide the API key in logged URLs."""
        if not self._api_key:
            return url
        return url.replace(f"{API_KEY_PARAM}={quote(self._api_key, safe='')}", f"{API_KEY_PARAM}=***", 1)

    async def _dispatch(self, method: HttpMethod, params: dict[str, str],
                        headers: dict[str, str] | None = None,
                        body: dict[str, Any] | None = None) -> httpx.Response:
        """Send a single request. No retries."""
        request_headers = check_headers(headers or {})
        url = self.build_api_url(params)
        json_data = (body or {}) if method.has_body else None

        logger.debug(f"{method.value} {self._redact(url)}")

        response = await self.client.request(
            method=method.value,
            url=url,
            headers=request_headers,
            json=json_data,
        )

        logger.debug(f"{method.value} returned HTTP {response.status_code}")
        return response
