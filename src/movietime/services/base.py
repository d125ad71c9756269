"""Base HTTP client for external API integrations."""

from abc import ABC, abstractmethod
from typing import Any

import httpx


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteFetchError(APIError):
    """Raised when a catalog resource cannot be retrieved or decoded."""

    def __init__(self, resource: str, status_code: int | None = None) -> None:
        super().__init__(f"Failed to retrieve {resource}.", status_code=status_code)
        self.resource = resource


class BaseAPIClient(ABC):
    """Abstract base class for external API clients.

    Provides common functionality for HTTP requests and error handling.
    A client either owns its ``httpx.AsyncClient`` (created lazily and closed
    by :meth:`close`) or uses a shared one handed in by the caller, which it
    never closes.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the base API client.

        Args:
            base_url: The base URL for the API.
            timeout: Request timeout in seconds.
            http_client: Shared HTTP client. If not provided, one is created on demand.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = http_client
        self._owns_client = http_client is None

    @property
    @abstractmethod
    def default_headers(self) -> dict[str, str]:
        """Return default headers for API requests."""
        ...

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.default_headers,
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _build_url(self, endpoint: str) -> str:
        """Join an endpoint onto the base URL."""
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, etc.).
            endpoint: API endpoint path.
            params: Query parameters.
            headers: Additional headers to include.

        Returns:
            Decoded JSON body.

        Raises:
            APIError: For transport failures, HTTP errors and invalid JSON.
        """
        client = await self._get_client()

        request_headers = dict(self.default_headers)
        if headers:
            request_headers.update(headers)

        try:
            response = await client.request(
                method=method,
                url=self._build_url(endpoint),
                params=params,
                headers=request_headers,
            )
        except httpx.TimeoutException as e:
            raise APIError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise APIError(f"Request failed: {e}") from e

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        """Handle the HTTP response.

        Args:
            response: The HTTP response object.

        Returns:
            Decoded JSON body.

        Raises:
            APIError: For HTTP errors and bodies that are not valid JSON.
        """
        if response.status_code >= 400:
            raise APIError(
                f"API error: {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"Invalid JSON response: {e}", status_code=response.status_code) from e

    async def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a GET request to the API."""
        return await self._request("GET", endpoint, params=params, headers=headers)

    async def __aenter__(self) -> "BaseAPIClient":
        """Async context manager entry."""
        await self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
