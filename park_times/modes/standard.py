"""Standard mode: one wait-time page and one self-contained schedule page."""

import logging

from park_times.entries import filter_entries, load_entries, project_rides
from park_times.models import ParkConfig, RideStatus, ScheduleEntry
from park_times.modes.base import BaseMode, THEME_PARK_CATEGORY
from park_times.schedule import load_raw_schedules, project_schedule
from park_times.source import DataSource

logger = logging.getLogger(__name__)


class StandardMode(BaseMode):
    """
    Mode for parks whose schedule page carries raw date and clock values.

    Wait times come from the park's "wait-times" sub-page; schedule
    times are converted to the park timezone with day-rollover.
    """

    def fetch_wait_times(
        self,
        config: ParkConfig,
        source: DataSource,
        include_entertainment: bool = False,
    ) -> list[RideStatus]:
        data = source.fetch_entries(
            config.park_id,
            THEME_PARK_CATEGORY,
            subpage="wait-times",
            apiopts="",
            region=config.api_region,
        )
        entries = filter_entries(load_entries(data.get("entries")), include_entertainment)
        rides = project_rides(entries)
        logger.info(f"Park {config.park_id}: {len(rides)} rides")
        return rides

    def fetch_schedule(self, config: ParkConfig, source: DataSource) -> list[ScheduleEntry]:
        data = source.fetch_raw_schedule(config.park_id)
        schedule = project_schedule(load_raw_schedules(data.get("schedules")), config)
        logger.info(f"Park {config.park_id}: {len(schedule)} schedule entries")
        return schedule
