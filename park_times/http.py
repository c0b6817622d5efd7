"""HTTP data source with retries and rate limiting."""

import json
import logging
import time
from typing import Optional
from urllib.parse import urlparse

import requests
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from park_times.config import (
    API_BASE_URL,
    DEFAULT_API_REGION,
    DLP_SCHEDULE_URL,
    USER_AGENT,
    REQUEST_TIMEOUT,
    RATE_LIMIT_DELAY,
    MAX_RETRIES,
    RETRY_BACKOFF_BASE,
)
from park_times.source import DataSource

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Error fetching URL."""
    pass


class ContentAPIClient(DataSource):
    """
    Fetches park pages from the content API over HTTP.

    Retries connection errors and 5xx responses with exponential backoff.
    Requests to the same host are spaced by RATE_LIMIT_DELAY seconds.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        schedule_url: str = DLP_SCHEDULE_URL,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.schedule_url = schedule_url
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        })
        # Track last request time per host for rate limiting
        self._last_request_time: dict[str, float] = {}

    def _rate_limit(self, url: str) -> None:
        """Enforce rate limiting per host."""
        host = urlparse(url).netloc
        now = time.time()
        last = self._last_request_time.get(host, 0)
        elapsed = now - last

        if elapsed < RATE_LIMIT_DELAY:
            sleep_time = RATE_LIMIT_DELAY - elapsed
            logger.debug(f"Rate limiting: sleeping {sleep_time:.2f}s for {host}")
            time.sleep(sleep_time)

        self._last_request_time[host] = time.time()

    @retry(
        stop=stop_after_attempt(MAX_RETRIES),
        wait=wait_exponential(multiplier=RETRY_BACKOFF_BASE, min=1, max=30),
        retry=retry_if_exception_type((requests.exceptions.RequestException,)),
        reraise=True,
    )
    def _get_with_retry(self, url: str, params: Optional[dict] = None) -> requests.Response:
        """GET with retry logic."""
        response = self.session.get(url, params=params, timeout=REQUEST_TIMEOUT)

        # Retry on 5xx errors
        if 500 <= response.status_code < 600:
            raise requests.exceptions.RequestException(f"Server error: {response.status_code}")

        return response

    def get_json(self, url: str, params: Optional[dict] = None) -> dict:
        """
        Fetch JSON from URL.

        Raises:
            FetchError: If fetch or parse fails
        """
        self._rate_limit(url)

        try:
            logger.debug(f"Fetching JSON: {url}")
            response = self._get_with_retry(url, params)
            response.raise_for_status()
            return response.json()

        except requests.exceptions.RequestException as e:
            raise FetchError(f"Failed to fetch {url}: {e}") from e
        except json.JSONDecodeError as e:
            raise FetchError(f"Invalid JSON from {url}: {e}") from e

    def page_url(self, park_id: str, category: str, subpage: str = "", apiopts: str = "") -> str:
        """Build a content page URL, e.g. .../theme-parks/80007944/wait-times."""
        url = f"{self.base_url}/{category}s/{park_id}"
        if subpage:
            url += f"/{subpage}"
        if apiopts:
            url += f";{apiopts}"
        return url

    def fetch_entries(
        self,
        park_id: str,
        category: str,
        subpage: str = "",
        apiopts: str = "",
        region: str = DEFAULT_API_REGION,
    ) -> dict:
        url = self.page_url(park_id, category, subpage, apiopts)
        data = self.get_json(url, params={"region": region})
        if not isinstance(data, dict):
            raise FetchError(f"Unexpected payload from {url}")
        data.setdefault("entries", [])
        logger.debug(f"Fetched {len(data['entries'])} entries for park {park_id}")
        return data

    def fetch_schedule_table(self) -> Optional[dict]:
        try:
            data = self.get_json(self.schedule_url)
        except FetchError as e:
            logger.warning(f"Schedule table unavailable: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning("Schedule table payload is not an object")
            return None

        return data

    def fetch_raw_schedule(self, park_id: str) -> dict:
        url = self.page_url(park_id, "schedule")
        data = self.get_json(url)
        if not isinstance(data, dict):
            raise FetchError(f"Unexpected payload from {url}")
        data.setdefault("schedules", [])
        return data
