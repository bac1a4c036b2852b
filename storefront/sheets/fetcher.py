"""
Spreadsheet CSV Fetcher

Downloads a published spreadsheet export as CSV text.
"""

import logging
from typing import Optional

import httpx

from ..core.exceptions import FetchError, FetchTimeout, NotPublic, ParseError

logger = logging.getLogger(__name__)

CSV_HEADERS = {
    "Accept": "text/csv,text/plain,*/*",
    "Cache-Control": "no-cache",
}


def looks_like_html(text: str) -> bool:
    """Check if a body is an HTML page (login or error page) rather than CSV"""
    return "<html" in text or "<!DOCTYPE" in text


async def fetch_csv(
    url: str,
    timeout: float,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Fetch a published sheet as CSV.

    Args:
        url: CSV export URL
        timeout: Seconds before the request is abandoned
        client: Optional shared HTTP client

    Returns:
        Raw CSV text

    Raises:
        FetchTimeout, FetchError, NotPublic, ParseError
    """
    logger.info(f"Fetching sheet CSV: {url}")

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(follow_redirects=True)

    try:
        response = await client.get(url, headers=CSV_HEADERS, timeout=timeout)
    except httpx.TimeoutException as e:
        logger.error(f"Sheet request timed out after {timeout:g} seconds")
        raise FetchTimeout(
            f"Request timeout: sheet took longer than {timeout:g} seconds to respond"
        ) from e
    except httpx.HTTPError as e:
        logger.error(f"Sheet request failed: {e}")
        raise FetchError(f"Network error: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    if not response.is_success:
        raise FetchError(
            f"HTTP {response.status_code}: {response.reason_phrase}",
            status_code=response.status_code,
        )

    text = response.text
    logger.info(f"Fetched CSV data, length: {len(text)}")

    if looks_like_html(text):
        raise NotPublic(
            "Sheet is not publicly accessible. "
            "Set sharing to \"Anyone with the link can view\""
        )

    if "," not in text:
        raise ParseError("Invalid CSV format received from sheet")

    return text
