"""suntimes public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    compute_event,
    sunrise,
    sunset,
    sunrise_sunset,
)
from .core.errors import SunTimesError, UnknownEventError, UnknownZenithError
from .core.types import CalculationRequest, KNOWN_EVENTS, RiseSet, UtcTimeOfDay
from .core.zenith import DEFAULT_ZENITH, ZENITH_PRESETS, resolve_zenith
from .engines.calculation import calculate

__all__ = [
    "compute_event",
    "sunrise",
    "sunset",
    "sunrise_sunset",
    "calculate",
    "CalculationRequest",
    "UtcTimeOfDay",
    "RiseSet",
    "KNOWN_EVENTS",
    "DEFAULT_ZENITH",
    "ZENITH_PRESETS",
    "resolve_zenith",
    "SunTimesError",
    "UnknownEventError",
    "UnknownZenithError",
]
