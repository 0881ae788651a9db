"""
REST Countries API Client - Pure I/O Operations

This module handles all external API calls to REST Countries with no business logic.
Returns the raw country records exactly as the API serves them.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from src.coreutils.env import env_get, env_int
from src.coreutils.request import get_data, new_session

logger = logging.getLogger(__name__)

# API Endpoints
ALL_COUNTRIES_ENDPOINT = "https://restcountries.com/v3.1/all"

DEFAULT_RETRIES = 3
DEFAULT_TIMEOUT = 30


class RestCountriesAPIClient:
    """Pure API client for the REST Countries /all endpoint"""

    def __init__(
        self,
        url: Optional[str] = None,
        retries: Optional[int] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = url or env_get("RESTCOUNTRIES_URL", ALL_COUNTRIES_ENDPOINT)
        self.retries = (
            retries
            if retries is not None
            else env_int("RESTCOUNTRIES_RETRIES", DEFAULT_RETRIES)
        )
        self.timeout = (
            timeout
            if timeout is not None
            else env_int("RESTCOUNTRIES_TIMEOUT", DEFAULT_TIMEOUT)
        )
        self.session = session or new_session()

    def get_all_countries(self) -> List[Dict[str, Any]]:
        """
        Fetch the full country dataset, retrying failed attempts

        Every call performs a fresh round trip; nothing is cached.

        Returns:
            List[Dict]: Raw country records from API

        Raises:
            requests.RequestException: If every attempt failed at the HTTP level
            ValueError: If the body is not valid JSON or not a JSON array
        """
        logger.info(f"Fetching from {self.url}")
        data = get_data(
            self.session, self.url, retry_attempts=self.retries, timeout=self.timeout
        )

        if not isinstance(data, list):
            raise ValueError(
                f"Expected a JSON array from {self.url}, got {type(data).__name__}"
            )

        logger.info(f"Fetched {len(data)} country records")
        return data

    def close(self):
        self.session.close()


# Convenience function for direct use
def fetch_countries_data(retries: int = DEFAULT_RETRIES) -> List[Dict[str, Any]]:
    """Convenience function to get the full country dataset"""
    client = RestCountriesAPIClient(retries=retries)
    try:
        return client.get_all_countries()
    finally:
        client.close()
