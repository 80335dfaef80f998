"""Bing Dictionary page adapter.

Implements PageFetcher with httpx. Transient connection failures are
retried; every other transport or status error is raised as FetchError.
"""

import logging
import os

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from bingdict.domain.model.errors import FetchError

logger = logging.getLogger(__name__)

BING_DICT_TIMEOUT_SECONDS = float(os.getenv("BING_DICT_TIMEOUT_SECONDS", "10.0"))

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
}


class HttpxPageFetcher:
    """Adapter that fetches dictionary pages over HTTP."""

    def __init__(
        self,
        timeout: float = BING_DICT_TIMEOUT_SECONDS,
        headers: dict[str, str] | None = None,
    ):
        self.timeout = timeout
        self.headers = headers if headers is not None else DEFAULT_HEADERS

    async def fetch(self, url: str) -> bytes:
        """Fetch the body of a page.

        Args:
            url: Fully built search URL.

        Returns:
            Raw response bytes.

        Raises:
            FetchError: On transport errors or a non-2xx response.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            ) as client:
                response = await _fetch_with_retry(client, url)
                response.raise_for_status()
                logger.debug(
                    "Fetched dictionary page",
                    extra={"url": url, "status_code": response.status_code, "size": len(response.content)},
                )
                return response.content

        except httpx.HTTPStatusError as e:
            logger.warning(
                "Dictionary page HTTP error",
                extra={"url": url, "status_code": e.response.status_code},
            )
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(
                "Dictionary page request error",
                extra={"url": url, "error_type": type(e).__name__},
            )
            raise FetchError(url, type(e).__name__) from e


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _fetch_with_retry(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """Fetch URL with automatic retry on transient failures."""
    return await client.get(url)
