"""Park operating modes."""

from park_times.modes.base import BaseMode
from park_times.modes.registry import get_mode

__all__ = ["BaseMode", "get_mode"]
