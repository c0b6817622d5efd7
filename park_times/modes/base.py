"""Base interface for park operating modes."""

from abc import ABC, abstractmethod

from park_times.models import ParkConfig, RideStatus, ScheduleEntry
from park_times.source import DataSource

# Content page category for park pages
THEME_PARK_CATEGORY = "theme-park"


class BaseMode(ABC):
    """
    Fetch and normalize strategy for one way of sourcing park data.

    Each mode decides which pages to request and how to turn the
    payloads into RideStatus and ScheduleEntry records.
    """

    @abstractmethod
    def fetch_wait_times(
        self,
        config: ParkConfig,
        source: DataSource,
        include_entertainment: bool = False,
    ) -> list[RideStatus]:
        """
        Fetch and normalize current ride wait times.

        Args:
            config: Park configuration
            source: Data source to fetch from
            include_entertainment: Passed through to the entry filter

        Returns:
            RideStatus records in upstream order
        """
        pass

    @abstractmethod
    def fetch_schedule(self, config: ParkConfig, source: DataSource) -> list[ScheduleEntry]:
        """Fetch and normalize the park's opening schedule."""
        pass
