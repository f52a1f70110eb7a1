from __future__ import annotations

import math
from math import fmod


def to_radians(deg: float) -> float:
    return deg / 360.0 * 2.0 * math.pi

def to_degrees(rad: float) -> float:
    return rad * 360.0 / (2.0 * math.pi)

def normalize_degrees(deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(deg, 360.0)
    if y < 0:
        y += 360.0
    # tiny negatives round up to exactly 360.0
    if y >= 360.0:
        y -= 360.0
    return y

def quadrant(deg: float) -> float:
    """Lower bound of the 90-degree quadrant containing deg."""
    return math.floor(deg / 90.0) * 90.0
