"""
Base API Client - Shared request handling for every upstream the core talks to.
All clients inherit from this and go through _core_async_request.

Requests are paced per endpoint and never retried: a failed search or feed fetch is
surfaced to the user, who decides whether to submit again.
"""

import asyncio
import json
from typing import Any, Literal

import aiohttp

from utils.errors import ParseFailureError, TransportFailureError
from utils.get_logger import get_logger
from utils.rate_limiter import get_rate_limiter

logger = get_logger(__name__)

ReadMode = Literal["json", "text", "bytes", "none"]


def status_description(status: int, reason: str | None) -> str:
    """Render a status line such as '503 Service Unavailable'."""
    return f"{status} {reason}".strip() if reason else str(status)


class BaseAPIClient:
    """
    Base class for API clients.
    Provides pacing, status checking and body decoding on top of aiohttp.
    """

    # Subclasses override to get their own limiter
    _rate_limit_endpoint = "default"
    _rate_limit_max = 10
    _rate_limit_period = 1.0

    timeout_seconds: float = 10

    async def _core_async_request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        json_body: Any = None,
        read: ReadMode = "json",
        timeout: float | None = None,
    ) -> Any:
        """
        Core async HTTP request.

        Args:
            method: HTTP method ("GET", "POST")
            url: Full URL to request
            params: Optional query parameters (URL-encoded by aiohttp)
            headers: Optional HTTP headers
            json_body: Optional JSON-serializable request body
            read: "json" to decode a JSON body, "text" for the decoded body, "bytes" for the
                undecoded body, "none" to skip it
            timeout: Request timeout in seconds (default: the client's timeout_seconds)

        Returns:
            Decoded JSON, the body text or bytes, or None when read="none"

        Raises:
            TransportFailureError: On a non-2xx status or a network-level error
            ParseFailureError: When the body cannot be decoded as text or is not valid JSON
        """
        request_timeout = aiohttp.ClientTimeout(total=timeout or self.timeout_seconds)
        rate_limiter = get_rate_limiter(
            self._rate_limit_endpoint, self._rate_limit_max, self._rate_limit_period
        )

        try:
            async with (
                rate_limiter,
                aiohttp.ClientSession() as session,
                session.request(
                    method,
                    url,
                    params=params,
                    headers=headers,
                    json=json_body,
                    timeout=request_timeout,
                ) as response,
            ):
                status = response.status
                if not 200 <= status < 300:
                    status_text = status_description(status, response.reason)
                    logger.warning(f"{method} {url} returned {status_text}")
                    raise TransportFailureError(status_text, status=status)

                if read == "none":
                    return None
                if read == "bytes":
                    return await response.read()
                body = await response.text()
        except asyncio.CancelledError:
            raise
        except (TimeoutError, aiohttp.ClientError) as e:
            detail = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
            logger.error(f"Error making request to {url}: {detail}")
            raise TransportFailureError(detail) from e
        except UnicodeDecodeError as e:
            logger.error(f"Undecodable body from {url}: {e}")
            raise ParseFailureError(f"Undecodable response from {url}: {e}") from e

        if read == "text":
            return body

        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise ParseFailureError(f"Invalid JSON response from {url}: {e}") from e
