"""Async HTTP client used by the remote candidate providers."""

from typing import Any

import httpx
from loguru import logger

from infrastructure.errors import ProviderAuthError, ProviderError, ProviderTimeoutError


class AsyncHTTPClient:
    """Thin wrapper over ``httpx.AsyncClient`` that raises provider errors."""

    def __init__(
        self,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize HTTP client.

        Args:
            timeout: Per-request timeout in seconds
            client: Preconfigured httpx client (tests pass one with a mock transport)
        """
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
        )

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        logger.debug(f"GET {url}")
        return await self._request("GET", url, params=params)

    async def post_json(self, url: str, payload: Any) -> Any:
        logger.debug(f"POST {url}")
        return await self._request("POST", url, json=payload)

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError(f"Request to {url} timed out") from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Request to {url} failed: {e}") from e

        if response.status_code in (401, 403):
            raise ProviderAuthError(f"Authentication failed for {url}: {response.status_code}")
        if response.is_error:
            raise ProviderError(f"HTTP error {response.status_code} from {url}: {_error_message(response)}")

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON from {url}") from e

    async def close(self) -> None:
        await self._client.aclose()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.reason_phrase
