"""
suntimes.core.zenith
--------------------
Zenith angles (degrees from overhead) that define the rise/set events.

The "official" zenith puts the sun's upper limb on the horizon: 90 degrees
geometric plus 34' of standard refraction plus 16' of solar semi-diameter.
The twilight zeniths put the sun's centre 6, 12 and 18 degrees below it.
"""

from __future__ import annotations
from typing import Dict, Union

from .errors import UnknownZenithError

DEFAULT_ZENITH = 90.8333

ZENITH_PRESETS: Dict[str, float] = {
    "official": DEFAULT_ZENITH,
    "civil": 96.0,
    "nautical": 102.0,
    "astronomical": 108.0,
}

ZenithLike = Union[float, int, str]


def resolve_zenith(value: ZenithLike) -> float:
    """Turn a preset name or a number into a zenith angle in degrees."""
    if isinstance(value, str):
        key = value.strip().lower()
        if key in ZENITH_PRESETS:
            return ZENITH_PRESETS[key]
        try:
            return float(key)
        except ValueError:
            raise UnknownZenithError(
                f"Unknown zenith '{value}'. Available: {sorted(ZENITH_PRESETS)}"
            ) from None
    return float(value)
