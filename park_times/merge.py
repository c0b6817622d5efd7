"""Join alternate-source schedule times into ride status records."""

import logging
from typing import Iterable, Optional

from park_times.entries import OPERATING_STATUS
from park_times.models import RideStatus, ScheduleBlock, ScheduleTable

logger = logging.getLogger(__name__)


def find_operating_block(
    table: ScheduleTable,
    ride_id: str,
    today: str,
) -> Optional[ScheduleBlock]:
    """
    Find the first "Operating" period for a ride on a given day.

    Other period types (special events, extra hours) are skipped.
    """
    ride_schedule = table.get(ride_id)
    if ride_schedule is None:
        return None

    for block in ride_schedule.times.get(today, []):
        if block.type == OPERATING_STATUS:
            return block

    return None


def merge_schedule(
    rides: Iterable[RideStatus],
    table: ScheduleTable,
    today: str,
) -> list[RideStatus]:
    """
    Add today's opening and closing times to each ride.

    Args:
        rides: Ride status records
        table: Schedule table keyed by ride id
        today: Park-local date as YYYY-MM-DD

    Returns:
        New list in the same order. Rides without an Operating period
        today are returned unchanged.
    """
    merged = []
    matched = 0

    for ride in rides:
        block = find_operating_block(table, ride.id, today)
        if block is None:
            merged.append(ride)
            continue

        merged.append(ride.model_copy(update={
            "opening_time": block.opening_time,
            "closing_time": block.closing_time,
        }))
        matched += 1

    logger.debug(f"Schedule merge for {today}: {matched}/{len(merged)} rides matched")
    return merged
