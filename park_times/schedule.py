"""Normalize park opening schedules from both schedule sources."""

import logging
from typing import Iterable, Optional

from pydantic import ValidationError

from park_times.errors import NoScheduleDataError, ParkNotFoundError
from park_times.models import (
    ParkConfig,
    RawScheduleEntry,
    RideSchedule,
    ScheduleBlock,
    ScheduleEntry,
    ScheduleTable,
)
from park_times.timefmt import (
    SOURCE_FORMAT,
    clock_token,
    needs_rollover,
    normalize,
    reformat_date,
)

logger = logging.getLogger(__name__)


def load_raw_schedules(items: Iterable[dict]) -> list[RawScheduleEntry]:
    """Validate raw schedule rows, skipping unreadable ones."""
    schedules = []
    for item in items or []:
        try:
            schedules.append(RawScheduleEntry.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Skipping unreadable schedule row: {e}")
    return schedules


def _load_blocks(key: str, date: str, items) -> list[ScheduleBlock]:
    """Validate one day's periods, skipping unreadable ones."""
    blocks = []
    for item in items if isinstance(items, list) else []:
        try:
            blocks.append(ScheduleBlock.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Skipping unreadable period for {key} on {date}: {e}")
    return blocks


def load_schedule_table(data: Optional[dict]) -> ScheduleTable:
    """
    Validate an alternate-source schedule table.

    Periods are validated one by one, so a malformed period only drops
    itself, not the rest of the row.

    Args:
        data: Mapping of id -> {"times": {date: [period, ...]}}, or None

    Returns:
        ScheduleTable, empty when there is no usable data
    """
    table: ScheduleTable = {}
    if not data:
        return table
    if not isinstance(data, dict):
        logger.warning(f"Ignoring schedule table of type {type(data).__name__}")
        return table

    for key, row in data.items():
        times = row.get("times") if isinstance(row, dict) else None
        if not isinstance(times, dict):
            logger.warning(f"Skipping schedule for {key}: no times mapping")
            continue

        table[str(key)] = RideSchedule(times={
            str(date): _load_blocks(key, date, items)
            for date, items in times.items()
        })

    return table


def project_schedule_entry(raw: RawScheduleEntry, config: ParkConfig) -> ScheduleEntry:
    """
    Convert one standard-source schedule row.

    Closing times starting with "0" belong to the following day.

    Raises:
        ParseError: If the date or a clock value cannot be parsed
    """
    opening = normalize(
        raw.date + clock_token(raw.start_time),
        SOURCE_FORMAT,
        config.timezone,
        config.time_format,
    )
    closing = normalize(
        raw.date + clock_token(raw.end_time),
        SOURCE_FORMAT,
        config.timezone,
        config.time_format,
        rollover=needs_rollover(raw.end_time),
    )

    return ScheduleEntry(
        date=reformat_date(raw.date, config.date_format),
        opening_time=opening,
        closing_time=closing,
        type=raw.type,
    )


def project_schedule(
    raw_schedules: Iterable[RawScheduleEntry],
    config: ParkConfig,
) -> list[ScheduleEntry]:
    """Convert standard-source schedule rows, keeping their order."""
    return [project_schedule_entry(raw, config) for raw in raw_schedules]


def flatten_schedule_table(
    table: ScheduleTable,
    park_id: str,
    date_format: str,
) -> list[ScheduleEntry]:
    """
    Flatten a park's alternate-source schedule into entries.

    Walks each date in table order, then each period of that date. Times
    are already formatted upstream and are passed through.

    Raises:
        NoScheduleDataError: If the table is empty
        ParkNotFoundError: If the park id is not in the table
    """
    if not table:
        raise NoScheduleDataError("No schedule data available")

    park_schedule = table.get(park_id)
    if park_schedule is None:
        raise ParkNotFoundError(park_id)

    entries = []
    for date, blocks in park_schedule.times.items():
        formatted_date = reformat_date(date, date_format)
        for block in blocks:
            entries.append(ScheduleEntry(
                date=formatted_date,
                opening_time=block.opening_time,
                closing_time=block.closing_time,
                type=block.type,
            ))

    return entries
