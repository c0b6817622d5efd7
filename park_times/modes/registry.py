"""Mode registry - maps operating modes to implementations."""

from typing import Type

from park_times.models import OperatingMode
from park_times.modes.alternate import AlternateJoinedMode
from park_times.modes.base import BaseMode
from park_times.modes.standard import StandardMode

MODE_REGISTRY: dict[OperatingMode, Type[BaseMode]] = {
    OperatingMode.STANDARD: StandardMode,
    OperatingMode.ALTERNATE_JOINED: AlternateJoinedMode,
}


def get_mode(operating_mode: OperatingMode) -> BaseMode:
    """
    Get a mode instance for an operating mode.

    Raises:
        ValueError: If the mode is not registered
    """
    mode_class = MODE_REGISTRY.get(OperatingMode(operating_mode))
    if mode_class is None:
        raise ValueError(f"No implementation for operating mode '{operating_mode}'")
    return mode_class()
