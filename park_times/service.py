"""Park-level entry point for wait times and schedules."""

import logging
from typing import Optional

from park_times.http import ContentAPIClient
from park_times.models import ParkConfig, RideStatus, ScheduleEntry
from park_times.modes import BaseMode, get_mode
from park_times.source import DataSource

logger = logging.getLogger(__name__)


class ParkService:
    """
    Fetches normalized data for one park.

    Set up with a park config and, optionally, a data source:

        service = ParkService(ParkConfig(park_id="80007944"))
        rides = service.fetch_wait_times()

    The operating mode strategy is picked from the config when the
    service is created and again on reconfigure().
    """

    def __init__(
        self,
        config: ParkConfig,
        source: Optional[DataSource] = None,
        mode: Optional[BaseMode] = None,
    ):
        self._config = config
        self._source = source or ContentAPIClient()
        self._mode = mode or get_mode(config.operating_mode)

    @property
    def config(self) -> ParkConfig:
        return self._config

    @property
    def mode(self) -> BaseMode:
        return self._mode

    def reconfigure(self, **options) -> ParkConfig:
        """
        Overwrite the given config fields, keeping the rest.

        Not safe to call while another call on this service is running.
        """
        previous = self._config
        self._config = previous.reconfigure(**options)

        if self._config.operating_mode != previous.operating_mode:
            self._mode = get_mode(self._config.operating_mode)
            logger.debug(f"Park {self._config.park_id}: switched to {self._config.operating_mode.value} mode")

        return self._config

    def fetch_wait_times(self, include_entertainment: bool = False) -> list[RideStatus]:
        """
        Get current wait times for the park's rides.

        Args:
            include_entertainment: Accepted for compatibility, has no effect

        Returns:
            RideStatus records. In alternate joined mode, rides operating
            today also carry opening and closing times when available.

        Raises:
            FetchError: If the wait-time page cannot be fetched
        """
        return self._mode.fetch_wait_times(self._config, self._source, include_entertainment)

    def fetch_schedule(self) -> list[ScheduleEntry]:
        """
        Get the park's opening hours.

        Raises:
            FetchError: If the schedule cannot be fetched (standard mode)
            ParseError: If a date or time cannot be parsed
            NoScheduleDataError: If the schedule table is empty
            ParkNotFoundError: If the park is missing from the schedule table
        """
        return self._mode.fetch_schedule(self._config, self._source)
