import logging
import time
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)


def new_session() -> requests.Session:
    """Create a new requests session without transport-level retries"""
    session = requests.Session()

    # Attempts are counted by get_data, so the adapter itself never retries
    adapter = HTTPAdapter(max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    # Set default headers
    session.headers.update(
        {"User-Agent": "restcountries-queries/1.0", "Accept": "application/json"}
    )

    return session


def get_data(
    session: requests.Session,
    url: str,
    retry_attempts: int = 3,
    params: Optional[Dict[str, Any]] = None,
    timeout: int = 30,
) -> Any:
    """Helper function to fetch JSON from a URL with retries.

    A failed request, a non-success status and an unparseable body each
    consume one attempt. There is no delay between attempts.

    Args:
        session: HTTP session to use
        url: URL to fetch
        retry_attempts: Total number of attempts
        params: Optional query parameters
        timeout: Request timeout in seconds

    Returns:
        Parsed JSON response

    Raises:
        requests.RequestException: On HTTP errors after the last attempt
        ValueError: On invalid JSON after the last attempt, or when
            retry_attempts is less than 1
    """
    if retry_attempts < 1:
        raise ValueError(f"retry_attempts must be at least 1, got {retry_attempts}")

    for attempt in range(retry_attempts):
        try:
            start = time.time()
            response = session.get(url, params=params, timeout=timeout)
            response.raise_for_status()

            if not 200 <= response.status_code < 300:
                raise requests.HTTPError(
                    f"status={response.status_code}, url={url!r}", response=response
                )

            data = response.json()
            logger.info(f"Fetched from {url}: {time.time() - start:.2f} seconds")
            return data

        except (requests.RequestException, ValueError) as e:
            if attempt == retry_attempts - 1:
                logger.error(
                    f"Failed to fetch data after {retry_attempts} attempts: {e}"
                )
                raise
            logger.warning(f"Retrying fetch... ({attempt + 1}/{retry_attempts})")
