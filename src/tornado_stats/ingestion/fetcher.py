"""
Page fetcher.

Public API:
    fetch_page(url: str, timeout: float | None = None) -> str

Behavior:
- Fetches the page with a single requests.get (no retries).
- Only status 200 counts as success; the raw body text is returned.
- Raises FetchError for any other status and for network/timeout errors.
"""

from typing import Optional
import logging
import requests

from ..config import get_timeout
from ..errors import FetchError

logger = logging.getLogger(__name__)


def fetch_page(url: str, timeout: Optional[float] = None) -> str:
    """
    Fetch a URL and return its body as text.

    Args:
        url: The HTTP/HTTPS URL to fetch.
        timeout: Seconds to wait; defaults to TORNADO_STATS_TIMEOUT.

    Raises:
        FetchError: on non-200 status, network or timeout errors.
    """
    if timeout is None:
        timeout = get_timeout()

    logger.info(f"Fetching tornado table from: {url}")
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.exceptions.RequestException as exc:
        raise FetchError(url, str(exc)) from exc

    if resp.status_code != 200:
        # raise_for_status() ignores 1xx/3xx and other 2xx codes
        reason = resp.reason or "unexpected response"
        raise FetchError(url, f"HTTP {resp.status_code} {reason}", status_code=resp.status_code)

    body = resp.text
    logger.info(f"Fetched {len(body)} characters from {url}")
    return body
