"""Error types raised by the normalization core."""


class ParkTimesError(Exception):
    """Base class for park-times errors."""
    pass


class ParseError(ParkTimesError):
    """A date/time string did not match the expected format."""
    pass


class MalformedEntryError(ParkTimesError):
    """A raw entry is missing its id, name or type."""
    pass


class NoScheduleDataError(ParkTimesError):
    """The schedule source returned no data."""
    pass


class ParkNotFoundError(ParkTimesError):
    """The requested park is absent from the schedule data."""

    def __init__(self, park_id: str):
        super().__init__(f"Unable to find park schedule data for {park_id}")
        self.park_id = park_id
