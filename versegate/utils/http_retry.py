# versegate/utils/http_retry.py
"""
HTTP GET with retry for rate limits and transient errors.

Bible Gateway is scraped one chapter per request during a download, so
rate limits and the odd 5xx are expected. A GET is idempotent, which
makes every transient failure safe to repeat.

Usage:
    from versegate.utils.http_retry import get_with_retry

    response = get_with_retry(
        "https://www.biblegateway.com/passage/",
        params={"search": "John 3", "version": "ESV"},
    )
    html = response.text
"""

import logging
import time
from typing import Optional

import requests

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "versegate/1.0 (terminal scripture reader)",
}

MAX_WAIT = 30  # seconds


def _retry_after(response: requests.Response, attempt: int) -> int:
    """Seconds to wait after a 429, from Retry-After when it is numeric."""
    value = response.headers.get("retry-after", "")
    if value.isdigit():
        return min(int(value), MAX_WAIT)
    return min(2 ** attempt * 2, MAX_WAIT)


def get_with_retry(
    url: str,
    params: Optional[dict] = None,
    timeout: int = 15,
    max_retries: int = 3,
) -> requests.Response:
    """
    GET a URL, retrying 429, 5xx and dropped connections.

    Other 4xx responses and timeouts fail immediately. No wait follows
    the final attempt.

    Returns:
        requests.Response with a 2xx/3xx status

    Raises:
        RuntimeError: On any failure; the message names the URL
    """
    failure = "no attempts made"

    for attempt in range(max_retries):
        wait = 2 ** attempt
        try:
            response = requests.get(url, params=params, headers=HEADERS, timeout=timeout)
        except requests.Timeout as e:
            raise RuntimeError(f"Request to {url} timed out after {timeout}s") from e
        except requests.ConnectionError as e:
            failure = f"connection error: {e}"
        except requests.RequestException as e:
            raise RuntimeError(f"Request to {url} failed: {e}") from e
        else:
            status = response.status_code
            if status == 429:
                wait = _retry_after(response, attempt)
                failure = "last status: 429"
            elif status >= 500:
                failure = f"last status: {status}"
            else:
                try:
                    response.raise_for_status()
                except requests.HTTPError as e:
                    raise RuntimeError(f"HTTP error from {url}: {e}") from e
                return response

        if attempt == max_retries - 1:
            break
        logger.warning(
            f"GET {url} failed ({failure}), retrying in {wait}s "
            f"(attempt {attempt + 1}/{max_retries})"
        )
        time.sleep(wait)

    raise RuntimeError(f"GET {url} failed after {max_retries} attempts ({failure})")
