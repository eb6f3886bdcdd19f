"""Document fetcher: downloads a document for URL-based validation."""

from dataclasses import dataclass
from typing import Optional

import httpx
import structlog

from amp_validator.config import get_settings

logger = structlog.get_logger()


@dataclass(frozen=True)
class FetchedDocument:
    url: str
    status_code: int
    text: str


async def fetch_document(url: str, client: Optional[httpx.AsyncClient] = None) -> FetchedDocument:
    """GET a URL, following redirects. Status checks are left to the caller."""
    if client is None:
        timeout = httpx.Timeout(get_settings().FETCH_TIMEOUT_SECONDS)
        async with httpx.AsyncClient(follow_redirects=True, timeout=timeout) as local_client:
            return await fetch_document(url, client=local_client)

    response = await client.get(url, follow_redirects=True)
    logger.info("document_fetched", url=url, status_code=response.status_code, bytes=len(response.content))
    return FetchedDocument(url=url, status_code=response.status_code, text=response.text)
