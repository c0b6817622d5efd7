"""Park registry backed by parks.yaml."""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from park_times.config import PARKS_YAML
from park_times.models import ParkRecord

logger = logging.getLogger(__name__)


class ParkRegistry:
    """
    Registered parks, indexed by slug.

    Rows are kept in file order. A row that fails validation (including
    an unknown timezone) is logged and left out; a repeated slug keeps
    the first row.
    """

    def __init__(self, parks: list[ParkRecord]):
        self._by_slug: dict[str, ParkRecord] = {}
        for park in parks:
            if park.slug in self._by_slug:
                logger.warning(f"Duplicate park slug '{park.slug}', keeping the first entry")
                continue
            self._by_slug[park.slug] = park

    @classmethod
    def from_yaml(cls, yaml_path: Optional[Path] = None) -> "ParkRegistry":
        """
        Read a registry file with a top-level `parks:` list.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If `parks` is missing or not a list
        """
        path = yaml_path or PARKS_YAML
        if not path.exists():
            raise FileNotFoundError(f"Park registry not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        rows = data.get("parks") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise ValueError(f"{path}: expected a 'parks' list")

        parks = []
        for index, row in enumerate(rows):
            try:
                park = ParkRecord.model_validate(row)
                park.to_config()
            except ValidationError as e:
                slug = row.get("slug", f"#{index}") if isinstance(row, dict) else f"#{index}"
                logger.warning(f"Invalid park config {slug}: {e}")
                continue
            parks.append(park)

        logger.info(f"Loaded {len(parks)} parks from {path}")
        return cls(parks)

    @property
    def parks(self) -> list[ParkRecord]:
        return list(self._by_slug.values())

    def enabled(self) -> list[ParkRecord]:
        return [p for p in self._by_slug.values() if p.enabled]

    def get(self, slug: str) -> Optional[ParkRecord]:
        return self._by_slug.get(slug)

    def __len__(self) -> int:
        return len(self._by_slug)

    def __contains__(self, slug: str) -> bool:
        return slug in self._by_slug
