"""Tests for entry filtering and ride projection."""

import pytest

from park_times.entries import filter_entries, load_entries, project_ride, project_rides
from park_times.errors import MalformedEntryError
from park_times.models import RawEntry


def entry(**fields) -> RawEntry:
    return RawEntry.model_validate(fields)


class TestLoadEntries:
    """Test reading raw entry dicts."""

    def test_reads_camel_case_payload(self, raw_entries):
        entries = load_entries(raw_entries)
        assert len(entries) == 2
        assert entries[0].wait_time.posted_wait_minutes == 45
        assert entries[0].wait_time.fast_pass.available is True
        assert entries[1].wait_time is None

    def test_numeric_id_becomes_string(self):
        entries = load_entries([{"id": 80010190, "name": "Big Thunder", "type": "Attraction"}])
        assert entries[0].id == "80010190"

    def test_bad_wait_time_fields_read_as_missing(self):
        """A mistyped waitTime field does not cost the ride its entry."""
        entries = load_entries([
            {"id": "1", "name": "Space Mountain", "type": "Attraction",
             "waitTime": {"postedWaitMinutes": "", "status": "Closed"}},
            {"id": "2", "name": "Tron", "type": "Attraction", "waitTime": {"status": 1}},
            {"id": "3", "name": "Dumbo", "type": "Attraction", "waitTime": "soon"},
            {"id": "4", "name": "Peter Pan", "type": "Attraction",
             "waitTime": {"postedWaitMinutes": 30, "fastPass": {"available": [1]}}},
        ])
        rides = project_rides(filter_entries(entries))

        assert [r.id for r in rides] == ["1", "2", "3", "4"]
        for ride in rides[:3]:
            assert ride.wait_time_minutes == 0
            assert ride.active is False
            assert ride.fast_pass_available is False
        assert rides[3].wait_time_minutes == 30
        assert rides[3].fast_pass_available is False

    @pytest.mark.parametrize("minutes", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_wait_reads_as_zero(self, minutes):
        entries = load_entries([{
            "id": "1", "name": "Space Mountain", "type": "Attraction",
            "waitTime": {"postedWaitMinutes": minutes, "status": "Operating"},
        }])
        ride = project_ride(entries[0])
        assert ride.wait_time_minutes == 0
        assert ride.active is True

    def test_unreadable_identity_skipped(self):
        entries = load_entries([
            {"id": "1", "name": "Ok", "type": "Attraction"},
            {"id": "2", "name": ["not", "a", "name"], "type": "Attraction"},
        ])
        assert [e.id for e in entries] == ["1"]

    def test_missing_list(self):
        assert load_entries(None) == []


class TestFilterEntries:
    """Test attraction filtering."""

    def test_keeps_only_attractions(self, raw_entries):
        kept = filter_entries(load_entries(raw_entries))
        assert [e.id for e in kept] == ["1"]

    @pytest.mark.parametrize("include_entertainment", [False, True])
    def test_entertainment_always_excluded(self, include_entertainment):
        entries = [
            entry(id="1", name="Parade", type="Entertainment"),
            entry(id="2", name="Castle Show", type="Show"),
            entry(id="3", name="Peter Pan's Flight", type="Attraction"),
        ]
        kept = filter_entries(entries, include_entertainment)
        assert [e.id for e in kept] == ["3"]

    def test_requires_id_name_and_type(self):
        entries = [
            entry(name="No Id", type="Attraction"),
            entry(id="", name="Empty Id", type="Attraction"),
            entry(id="2", type="Attraction"),
            entry(id="3", name="No Type"),
            entry(id="4", name="Haunted Mansion", type="Attraction"),
        ]
        assert [e.id for e in filter_entries(entries)] == ["4"]

    def test_keeps_upstream_order(self):
        entries = [entry(id=str(i), name=f"Ride {i}", type="Attraction") for i in (3, 1, 2)]
        assert [e.id for e in filter_entries(entries)] == ["3", "1", "2"]


class TestProjectRide:
    """Test RawEntry -> RideStatus."""

    def test_full_entry(self, raw_entries):
        ride = project_ride(load_entries(raw_entries)[0])
        assert ride.id == "1"
        assert ride.name == "Space Mountain"
        assert ride.wait_time_minutes == 45
        assert ride.active is True
        assert ride.fast_pass_available is True
        assert ride.opening_time is None
        assert ride.closing_time is None

    def test_missing_wait_time(self):
        """No waitTime block reads as closed with no wait and no FastPass."""
        ride = project_ride(entry(id="1", name="Jungle Cruise", type="Attraction"))
        assert ride.wait_time_minutes == 0
        assert ride.active is False
        assert ride.fast_pass_available is False

    def test_missing_fast_pass(self):
        ride = project_ride(entry(
            id="1", name="Jungle Cruise", type="Attraction",
            waitTime={"postedWaitMinutes": 20, "status": "Operating"},
        ))
        assert ride.wait_time_minutes == 20
        assert ride.active is True
        assert ride.fast_pass_available is False

    def test_fast_pass_without_available_flag(self):
        ride = project_ride(entry(
            id="1", name="Jungle Cruise", type="Attraction",
            waitTime={"fastPass": {}},
        ))
        assert ride.fast_pass_available is False

    def test_status_must_be_operating(self):
        for status in ("Down", "Closed", "operating", None):
            ride = project_ride(entry(
                id="1", name="Splash Mountain", type="Attraction",
                waitTime={"postedWaitMinutes": 10, "status": status},
            ))
            assert ride.active is False

    def test_zero_and_negative_waits(self):
        zero = project_ride(entry(id="1", name="A", type="Attraction", waitTime={"postedWaitMinutes": 0}))
        negative = project_ride(entry(id="2", name="B", type="Attraction", waitTime={"postedWaitMinutes": -5}))
        assert zero.wait_time_minutes == 0
        assert negative.wait_time_minutes == 0

    def test_malformed_entry_raises(self):
        with pytest.raises(MalformedEntryError):
            project_ride(entry(name="Nameless", type="Attraction"))
        with pytest.raises(MalformedEntryError):
            project_ride(entry(id="1", name="Typeless"))

    def test_project_rides_keeps_order(self):
        entries = [entry(id=str(i), name=f"Ride {i}", type="Attraction") for i in (2, 1)]
        assert [r.id for r in project_rides(entries)] == ["2", "1"]
