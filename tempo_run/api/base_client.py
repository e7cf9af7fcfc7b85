"""
Base API client providing common functionality for remote API clients.
Includes async HTTP session handling, rate limiting, request timeouts and error mapping.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
import aiohttp
import backoff
from tempo_run.utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

class APIError(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status

class RateLimitError(APIError):
    """Exception raised when rate limit is exceeded."""

    def __init__(self, message: str, retry_after: float = 1.0):
        super().__init__(message, status=429)
        self.retry_after = retry_after

class AuthenticationError(APIError):
    """Exception raised when the bearer token is missing, expired or rejected."""

    def __init__(self, message: str):
        super().__init__(message, status=401)

class BaseAPIClient(ABC):
    """Base class for bearer-token API clients."""

    def __init__(
        self,
        base_url: str,
        rate_limit: int,
        timeout: int = 30,
        max_retries: int = 0
    ):
        self.base_url = base_url
        self.rate_limiter = RateLimiter(rate_limit)
        self.timeout = timeout
        self.max_retries = max(0, max_retries)
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self):
        """Ensure HTTP session is created."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self.session = aiohttp.ClientSession(timeout=timeout)

    async def close(self):
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()

    @abstractmethod
    def _get_auth_headers(self) -> Dict[str, str]:
        """Get authentication headers, raising AuthenticationError if unusable."""
        pass

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Make HTTP request with rate limiting.

        Only HTTP 429 responses are retried, honouring Retry-After, up to
        ``max_retries`` times. Every other failure propagates.
        """
        retrying = backoff.on_exception(
            backoff.runtime,
            RateLimitError,
            value=lambda e: e.retry_after,
            max_tries=self.max_retries + 1,
            jitter=None,
            logger=logger
        )
        return await retrying(self._send_request)(
            method, endpoint, params=params, data=data, headers=headers
        )

    async def _send_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """Send a single HTTP request and decode the JSON body."""
        request_headers = self._get_auth_headers()
        if headers:
            request_headers.update(headers)

        await self._ensure_session()
        await self.rate_limiter.acquire()

        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.debug(f"{method} {url} params={params}")

        try:
            async with self.session.request(
                method, url, params=params, json=data, headers=request_headers
            ) as response:

                if response.status == 429:
                    retry_after = float(response.headers.get('Retry-After', 1))
                    logger.warning(f"Rate limited on {method} {url}, retry after {retry_after}s")
                    raise RateLimitError(f"Rate limit exceeded, retry after {retry_after}s", retry_after)

                if response.status == 401:
                    raise AuthenticationError("Access token was rejected")

                response.raise_for_status()

                if response.status == 204:
                    return {}
                return await response.json()

        except aiohttp.ClientResponseError as e:
            logger.error(f"HTTP request failed: {method} {url} - {e.status} {e.message}")
            raise APIError(f"Request failed: {e.status} {e.message}", status=e.status) from e
        except aiohttp.ClientError as e:
            logger.error(f"HTTP request failed: {method} {url} - {e}")
            raise APIError(f"Request failed: {e}") from e
        except asyncio.TimeoutError as e:
            logger.error(f"HTTP request timed out after {self.timeout}s: {method} {url}")
            raise APIError(f"Request timed out after {self.timeout}s") from e
