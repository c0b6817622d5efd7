"""Pydantic models for the park wait-time and schedule data contract."""

from enum import Enum
from typing import Annotated, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FiniteFloat,
    ValidationError,
    WrapValidator,
    field_validator,
)

from park_times.config import (
    DEFAULT_API_REGION,
    DEFAULT_DATE_FORMAT,
    DEFAULT_TIME_FORMAT,
    DEFAULT_TIMEZONE,
)


class OperatingMode(str, Enum):
    """How a park's wait times and schedules are sourced."""
    STANDARD = "standard"
    ALTERNATE_JOINED = "alternate_joined"  # wait times and schedule joined by ride id


class ParkConfig(BaseModel):
    """Per-park settings used by ParkService."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    park_id: str
    timezone: str = DEFAULT_TIMEZONE
    time_format: str = DEFAULT_TIME_FORMAT
    date_format: str = DEFAULT_DATE_FORMAT
    api_region: str = DEFAULT_API_REGION
    operating_mode: OperatingMode = OperatingMode.STANDARD

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    def reconfigure(self, **options) -> "ParkConfig":
        """
        Return a copy with the supplied fields overwritten.

        Fields that are not supplied keep their current value. The result
        is validated like a freshly constructed config.
        """
        data = self.model_dump()
        data.update(options)
        return ParkConfig(**data)


# ========== Upstream payloads ==========


def _none_if_invalid(value, handler):
    """Wrap validator: an unreadable optional field is treated as missing."""
    try:
        return handler(value)
    except ValidationError:
        return None


Lenient = WrapValidator(_none_if_invalid)


class FastPassInfo(BaseModel):
    """FastPass block of a raw wait-time entry."""
    model_config = ConfigDict(extra="ignore")

    available: Annotated[Optional[bool], Lenient] = None


class WaitTimeInfo(BaseModel):
    """waitTime block of a raw entry."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    posted_wait_minutes: Annotated[Optional[FiniteFloat], Lenient] = Field(default=None, alias="postedWaitMinutes")
    status: Annotated[Optional[str], Lenient] = None
    fast_pass: Annotated[Optional[FastPassInfo], Lenient] = Field(default=None, alias="fastPass")


class RawEntry(BaseModel):
    """Entry from a park content page. Any field may be missing."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    # id, name and type stay strict, a bad waitTime block reads as no wait data
    wait_time: Annotated[Optional[WaitTimeInfo], Lenient] = Field(default=None, alias="waitTime")


class RawScheduleEntry(BaseModel):
    """Per-day schedule row from the standard schedule page."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    date: str
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    type: str


class ScheduleBlock(BaseModel):
    """One opening period from the alternate schedule table."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    opening_time: str = Field(alias="openingTime")
    closing_time: str = Field(alias="closingTime")
    type: str


class RideSchedule(BaseModel):
    """Schedule table row: date string -> ordered opening periods."""
    model_config = ConfigDict(extra="ignore")

    times: dict[str, list[ScheduleBlock]] = Field(default_factory=dict)


# Ride or park id -> schedule
ScheduleTable = dict[str, RideSchedule]


# ========== Normalized output ==========


class RideStatus(BaseModel):
    """Normalized live status for a single ride."""
    id: str
    name: str
    wait_time_minutes: int = Field(default=0, ge=0)
    active: bool = False
    fast_pass_available: bool = False
    opening_time: Optional[str] = None
    closing_time: Optional[str] = None


class ScheduleEntry(BaseModel):
    """Normalized opening hours for one day."""
    date: str
    opening_time: str
    closing_time: str
    type: str  # "Operating", "Extra Magic Hours", "Special Ticketed Event", ...


class ParkRecord(BaseModel):
    """Configuration for a single park from parks.yaml."""
    slug: str
    name: str
    park_id: str
    timezone: str = DEFAULT_TIMEZONE
    time_format: str = DEFAULT_TIME_FORMAT
    date_format: str = DEFAULT_DATE_FORMAT
    api_region: str = DEFAULT_API_REGION
    operating_mode: OperatingMode = OperatingMode.STANDARD
    enabled: bool = True
    note: Optional[str] = None

    def to_config(self) -> ParkConfig:
        """Build the ParkConfig for this park."""
        return ParkConfig(
            park_id=self.park_id,
            timezone=self.timezone,
            time_format=self.time_format,
            date_format=self.date_format,
            api_region=self.api_region,
            operating_mode=self.operating_mode,
        )
