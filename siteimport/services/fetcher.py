import asyncio
import logging
from typing import Optional
from urllib.parse import urljoin

import httpx

from siteimport.services.errors import FetchError
from siteimport.services.url_guard import validate_url

logger = logging.getLogger(__name__)

MAX_CONTENT_SIZE = 10 * 1024 * 1024  # 10 MB
TIMEOUT = 10  # seconds, for the whole exchange including redirects
MAX_REDIRECTS = 10
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


async def fetch_html(url: str, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """Fetch *url* once and return the response body as text.

    Redirects are followed manually so that every hop is re-checked by the
    URL guard. There are no retries.

    Raises:
        ValidationError: if the URL or a redirect target fails the guard.
        FetchError: on non-2xx status, timeout, oversized body, or transport errors.
    """
    validate_url(url)

    try:
        return await asyncio.wait_for(_fetch(url, transport), timeout=TIMEOUT)
    except (asyncio.TimeoutError, httpx.TimeoutException):
        logger.error("Timeout fetching %s", url)
        raise FetchError("Failed to fetch website: request timed out", aborted=True)
    except httpx.RequestError as exc:
        logger.error("Network error fetching %s: %s", url, exc)
        raise FetchError(f"Failed to fetch website: {exc}")


async def _fetch(url: str, transport: Optional[httpx.AsyncBaseTransport]) -> str:
    current_url = url
    async with httpx.AsyncClient(
        follow_redirects=False,
        timeout=TIMEOUT,
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    ) as client:
        for _ in range(MAX_REDIRECTS + 1):
            async with client.stream("GET", current_url) as response:
                if response.is_redirect:
                    location = response.headers.get("location", "")
                    next_url = urljoin(current_url, location)
                    validate_url(next_url)
                    logger.debug("Following redirect %s -> %s", current_url, next_url)
                    current_url = next_url
                    continue

                if not response.is_success:
                    reason = response.reason_phrase or f"HTTP {response.status_code}"
                    logger.error("Failed to fetch %s: %s", current_url, reason)
                    raise FetchError(
                        f"Failed to fetch website: {reason}",
                        status_code=response.status_code,
                    )

                content_length = response.headers.get("content-length")
                if content_length:
                    try:
                        declared_size = int(content_length)
                    except ValueError:
                        logger.error(
                            "Invalid Content-Length from %s: %r", current_url, content_length
                        )
                        raise FetchError("Failed to fetch website: invalid Content-Length header")
                    if declared_size > MAX_CONTENT_SIZE:
                        raise FetchError("Response body exceeds the maximum allowed size.")

                chunks = []
                total = 0
                async for chunk in response.aiter_bytes():
                    total += len(chunk)
                    if total > MAX_CONTENT_SIZE:
                        raise FetchError("Response body exceeds the maximum allowed size.")
                    chunks.append(chunk)

                encoding = response.encoding or "utf-8"
                return b"".join(chunks).decode(encoding, errors="replace")

    raise FetchError("Failed to fetch website: too many redirects")
