"""Filtering and projection of raw park entries into ride status records."""

import logging
from typing import Iterable

from pydantic import ValidationError

from park_times.errors import MalformedEntryError
from park_times.models import RawEntry, RideStatus

logger = logging.getLogger(__name__)

ATTRACTION_TYPE = "Attraction"
OPERATING_STATUS = "Operating"


def load_entries(items: Iterable[dict]) -> list[RawEntry]:
    """
    Validate raw entry dicts from a content page.

    Entries that cannot be read at all are logged and skipped.
    """
    entries = []
    for item in items or []:
        try:
            entries.append(RawEntry.model_validate(item))
        except ValidationError as e:
            ident = item.get("id", "unknown") if isinstance(item, dict) else "unknown"
            logger.warning(f"Skipping unreadable entry {ident}: {e}")
    return entries


def is_ride(entry: RawEntry) -> bool:
    """Check an entry has an id, name and the Attraction type."""
    return bool(entry.id and entry.name and entry.type) and entry.type == ATTRACTION_TYPE


def filter_entries(
    entries: Iterable[RawEntry],
    include_entertainment: bool = False,
) -> list[RawEntry]:
    """
    Select ride entries from a content page.

    Args:
        entries: Raw entries in upstream order
        include_entertainment: Accepted for API compatibility. Has no
            effect, only Attraction entries are ever returned.

    Returns:
        Attraction entries in upstream order
    """
    if include_entertainment:
        logger.debug("include_entertainment is not supported, returning attractions only")

    return [entry for entry in entries if is_ride(entry)]


def project_ride(entry: RawEntry) -> RideStatus:
    """
    Map a raw attraction entry to a RideStatus.

    Missing wait-time data is read as: no posted wait, not operating,
    no FastPass.

    Raises:
        MalformedEntryError: If id, name or type is missing
    """
    if not (entry.id and entry.name and entry.type):
        raise MalformedEntryError(f"Entry missing id, name or type: {entry.id or 'unknown'}")

    wait = entry.wait_time

    minutes = 0
    if wait is not None and wait.posted_wait_minutes:
        minutes = max(int(wait.posted_wait_minutes), 0)

    active = wait is not None and wait.status == OPERATING_STATUS

    fast_pass = False
    if wait is not None and wait.fast_pass is not None:
        fast_pass = bool(wait.fast_pass.available)

    return RideStatus(
        id=entry.id,
        name=entry.name,
        wait_time_minutes=minutes,
        active=active,
        fast_pass_available=fast_pass,
    )


def project_rides(entries: Iterable[RawEntry]) -> list[RideStatus]:
    """Project each entry, keeping upstream order."""
    return [project_ride(entry) for entry in entries]
