import logging
from typing import Any

import httpx

from faleproxy.core.errors import ValidationError
from faleproxy.fetch import scraper
from faleproxy.rewrite.substitution import rewrite_html
from faleproxy.schemas import FetchResult

LOG = logging.getLogger("faleproxy.relay")

def validate_url(url: Any) -> str:
    """Return url unchanged, or raise ValidationError if it is missing or blank."""
    if not isinstance(url, str) or not url.strip():
        raise ValidationError("URL is required")
    return url

async def process_fetch_request(url: Any, client: httpx.AsyncClient) -> FetchResult:
    """
    Relay pipeline for one request.

    1. Validate the submitted URL
    2. Fetch the upstream page (single attempt, no retries)
    3. Rewrite the brand name in text nodes and pull out the title
    4. Return the result with the URL exactly as submitted
    """
    url = validate_url(url)
    LOG.info("relay.accepted", extra={"extra": {"url": url}})

    html = await scraper.fetch_html(url, client)
    page = rewrite_html(html)

    LOG.info("relay.done", extra={"extra": {"url": url, "title": page.title, "content_length": len(page.content)}})
    return FetchResult(success=True, content=page.content, title=page.title, original_url=url)
