"""Atomic JSON output writer."""

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from park_times.config import PARKS_OUTPUT_DIR
from park_times.models import RideStatus, ScheduleEntry

logger = logging.getLogger(__name__)


def to_json_data(data: dict | list | BaseModel):
    """Convert models (or lists of models) to JSON-ready data, dropping unset optionals."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", exclude_none=True)
    if isinstance(data, list):
        return [to_json_data(item) for item in data]
    return data


def write_json_atomic(path: Path, data: dict | list | BaseModel) -> None:
    """
    Write JSON atomically using temp file + rename.

    Args:
        path: Target path
        data: Data to write (dict, list, or Pydantic model)
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    json_data = to_json_data(data)

    # Write to temp file in same directory (for atomic rename)
    fd, temp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.stem}_",
        suffix=".tmp"
    )

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(json_data, f, indent=2)
            f.write("\n")

        # Atomic rename
        os.replace(temp_path, path)
        logger.debug(f"Wrote {path}")

    except Exception:
        # Clean up temp file on error
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


def write_wait_times(
    slug: str,
    rides: list[RideStatus],
    output_dir: Optional[Path] = None,
) -> Path:
    """
    Write <slug>/wait-times.json.

    Returns:
        Path written
    """
    path = (output_dir or PARKS_OUTPUT_DIR) / slug / "wait-times.json"
    write_json_atomic(path, {
        "generated_at_utc": datetime.now(timezone.utc).isoformat(),
        "rides": to_json_data(rides),
    })
    logger.info(f"Wrote {path} with {len(rides)} rides")
    return path


def write_schedule(
    slug: str,
    entries: list[ScheduleEntry],
    output_dir: Optional[Path] = None,
) -> Path:
    """
    Write <slug>/schedule.json.

    Returns:
        Path written
    """
    path = (output_dir or PARKS_OUTPUT_DIR) / slug / "schedule.json"
    write_json_atomic(path, {
        "generated_at_utc": datetime.now(timezone.utc).isoformat(),
        "schedule": to_json_data(entries),
    })
    logger.info(f"Wrote {path} with {len(entries)} schedule entries")
    return path
