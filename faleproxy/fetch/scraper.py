import logging
from typing import AsyncIterator

import httpx

from faleproxy.core.config import settings
from faleproxy.core.errors import FetchError

LOG = logging.getLogger("faleproxy.fetch")

def build_headers() -> dict:
    return {
        "User-Agent": settings.USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.7",
    }

async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """FastAPI dependency: one upstream client per request, closed afterwards."""
    async with httpx.AsyncClient(
        timeout=settings.REQUEST_TIMEOUT,
        headers=build_headers(),
        follow_redirects=True
    ) as client:
        yield client

async def fetch_html(url: str, client: httpx.AsyncClient) -> str:
    """Fetch raw HTML from a URL, raising FetchError on any failure."""
    try:
        target = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise FetchError(f"Invalid URL {url!r}: {e}") from e
    if target.scheme not in ("http", "https") or not target.host:
        raise FetchError(f"Invalid URL {url!r}: expected an absolute http:// or https:// URL")

    try:
        response = await client.get(target)
        response.raise_for_status()
    except httpx.TimeoutException as e:
        LOG.warning("fetch.timeout", extra={"extra": {"url": url}})
        raise FetchError(f"Timeout after {settings.REQUEST_TIMEOUT:g}s while fetching {url}") from e
    except httpx.HTTPStatusError as e:
        upstream = e.response
        LOG.warning("fetch.bad_status", extra={"extra": {"url": url, "status": upstream.status_code}})
        raise FetchError(f"{upstream.status_code} {upstream.reason_phrase}".strip()) from e
    except httpx.HTTPError as e:
        LOG.warning("fetch.failed", extra={"extra": {"url": url, "error": repr(e)}})
        raise FetchError(str(e) or e.__class__.__name__) from e

    LOG.info("fetch.ok", extra={"extra": {
        "url": url,
        "status": response.status_code,
        "bytes": len(response.content),
    }})
    return response.text
