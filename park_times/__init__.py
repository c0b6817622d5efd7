"""Theme park wait-time and schedule normalization."""

from park_times.models import OperatingMode, ParkConfig, RideStatus, ScheduleEntry
from park_times.service import ParkService

__version__ = "0.1.0"

__all__ = ["OperatingMode", "ParkConfig", "ParkService", "RideStatus", "ScheduleEntry"]
