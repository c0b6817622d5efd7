"""Data source interface used by ParkService."""

from abc import ABC, abstractmethod
from typing import Optional

from park_times.config import DEFAULT_API_REGION


class DataSource(ABC):
    """Fetches raw park payloads from the content API."""

    @abstractmethod
    def fetch_entries(
        self,
        park_id: str,
        category: str,
        subpage: str = "",
        apiopts: str = "",
        region: str = DEFAULT_API_REGION,
    ) -> dict:
        """
        Fetch a park content page.

        Args:
            park_id: Upstream park identifier
            category: Page kind, e.g. "theme-park"
            subpage: Sub-page selector, e.g. "wait-times"
            apiopts: Extra query-string fragment
            region: API region

        Returns:
            Payload with an "entries" list
        """
        pass

    @abstractmethod
    def fetch_schedule_table(self) -> Optional[dict]:
        """
        Fetch the id-keyed schedule table.

        Returns:
            Mapping of id -> {"times": {...}}, or None if unavailable.
            Must not raise on transport failure.
        """
        pass

    @abstractmethod
    def fetch_raw_schedule(self, park_id: str) -> dict:
        """Fetch a park's schedule page. Payload has a "schedules" list."""
        pass
