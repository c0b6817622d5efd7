"""Alternate joined mode: wait times joined with a separate schedule table."""

import logging

from park_times.entries import filter_entries, load_entries, project_rides
from park_times.merge import merge_schedule
from park_times.models import ParkConfig, RideStatus, ScheduleEntry
from park_times.modes.base import BaseMode, THEME_PARK_CATEGORY
from park_times.schedule import flatten_schedule_table, load_schedule_table
from park_times.source import DataSource
from park_times.timefmt import park_today

logger = logging.getLogger(__name__)

# Query fragment selecting the destination-wide wait-time feed
WAIT_TIMES_APIOPTS = "destination=dlp/wait-times"


class AlternateJoinedMode(BaseMode):
    """
    Mode for parks whose opening times live in an id-keyed schedule table.

    Wait times are enriched with today's Operating hours from the table
    when it can be fetched. A missing table leaves the rides unenriched.
    The park schedule is read from the same table.
    """

    def __init__(self, today_func=park_today):
        # Returns the park-local date for a timezone
        self.today_func = today_func

    def fetch_wait_times(
        self,
        config: ParkConfig,
        source: DataSource,
        include_entertainment: bool = False,
    ) -> list[RideStatus]:
        data = source.fetch_entries(
            config.park_id,
            THEME_PARK_CATEGORY,
            subpage="",
            apiopts=WAIT_TIMES_APIOPTS,
            region=config.api_region,
        )
        entries = filter_entries(load_entries(data.get("entries")), include_entertainment)
        rides = project_rides(entries)
        logger.info(f"Park {config.park_id}: {len(rides)} rides")

        # Opening times are best-effort
        try:
            table = load_schedule_table(source.fetch_schedule_table())
        except Exception as e:
            logger.warning(f"Park {config.park_id}: schedule table fetch failed: {e}")
            return rides

        if not table:
            logger.warning(f"Park {config.park_id}: no schedule table, returning wait times only")
            return rides

        return merge_schedule(rides, table, self.today_func(config.timezone))

    def fetch_schedule(self, config: ParkConfig, source: DataSource) -> list[ScheduleEntry]:
        table = load_schedule_table(source.fetch_schedule_table())
        schedule = flatten_schedule_table(table, config.park_id, config.date_format)
        logger.info(f"Park {config.park_id}: {len(schedule)} schedule entries")
        return schedule
