"""Shared fixtures for park-times tests."""

from typing import Optional

import pytest

from park_times.models import ParkConfig, OperatingMode
from park_times.source import DataSource


class FakeSource(DataSource):
    """In-memory data source that records every call."""

    def __init__(self, entries=None, schedule_table=None, schedules=None):
        self.entries = entries or []
        self.schedule_table = schedule_table
        self.schedules = schedules or []
        # Set to an exception instance to make that fetch raise
        self.entries_error: Optional[Exception] = None
        self.table_error: Optional[Exception] = None
        self.calls: list[tuple] = []

    def fetch_entries(self, park_id, category, subpage="", apiopts="", region="us"):
        self.calls.append(("entries", park_id, category, subpage, apiopts, region))
        if self.entries_error:
            raise self.entries_error
        return {"entries": self.entries}

    def fetch_schedule_table(self):
        self.calls.append(("schedule_table",))
        if self.table_error:
            raise self.table_error
        return self.schedule_table

    def fetch_raw_schedule(self, park_id):
        self.calls.append(("raw_schedule", park_id))
        return {"schedules": self.schedules}


@pytest.fixture
def raw_entries():
    return [
        {
            "id": "1",
            "name": "Space Mountain",
            "type": "Attraction",
            "waitTime": {
                "postedWaitMinutes": 45,
                "status": "Operating",
                "fastPass": {"available": True},
            },
        },
        {"id": "2", "name": "Parade", "type": "Entertainment"},
    ]


@pytest.fixture
def schedule_table():
    return {
        "1": {
            "times": {
                "2024-06-01": [
                    {"openingTime": "07:00", "closingTime": "08:00", "type": "Special Ticketed Event"},
                    {"openingTime": "08:00", "closingTime": "20:00", "type": "Operating"},
                    {"openingTime": "09:00", "closingTime": "21:00", "type": "Operating"},
                ],
            },
        },
        "P1": {
            "times": {
                "2024-06-01": [
                    {"openingTime": "09:30", "closingTime": "23:00", "type": "Operating"},
                ],
                "2024-06-02": [
                    {"openingTime": "08:30", "closingTime": "09:30", "type": "Extra Magic Hours"},
                    {"openingTime": "09:30", "closingTime": "22:00", "type": "Operating"},
                ],
            },
        },
    }


@pytest.fixture
def fake_source(raw_entries, schedule_table):
    return FakeSource(entries=raw_entries, schedule_table=schedule_table)


@pytest.fixture
def standard_config():
    return ParkConfig(park_id="80007944", timezone="America/New_York")


@pytest.fixture
def alternate_config():
    return ParkConfig(
        park_id="P1",
        timezone="Europe/Paris",
        api_region="fr",
        operating_mode=OperatingMode.ALTERNATE_JOINED,
    )
