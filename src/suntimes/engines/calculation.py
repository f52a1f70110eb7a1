"""
suntimes.engines.calculation
----------------------------
Turns a CalculationRequest into a UTC clock time.

The pipeline is straight-line with a single branch: if the sun never reaches
the requested zenith on that day (cos H outside [-1, 1]) the result is None.
No iteration is done; the accuracy is about one minute.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from ..core.types import CalculationRequest, UtcTimeOfDay
from ..reference import solar

log = logging.getLogger(__name__)

HOURS_PER_DAY = 24.0


def local_mean_time(local_hour_hours: float, right_ascension_hours: float, t: float) -> float:
    """T = H + RA - 0.06571 t - 6.622 (hours)."""
    return local_hour_hours + right_ascension_hours - (0.06571 * t) - 6.622

def resolve_utc_hours(lmt_hours: float, lng_hour: float) -> float:
    """
    UT = T - lngHour, brought back into [0,24) by a single day of correction.

    The upper wrap fires at >= 24, where the almanac formula uses > 24; an
    exact 24.0 would otherwise come out as hour 24.

    Only one wrap is applied in each direction. At longitude +-180 with the
    sun barely crossing the horizon the raw value can reach about -24.1 or
    48.1, and the result then stays slightly out of range.
    """
    utc_hours = lmt_hours - lng_hour
    if utc_hours >= HOURS_PER_DAY:
        utc_hours -= HOURS_PER_DAY
    if utc_hours < 0:
        utc_hours += HOURS_PER_DAY
    return utc_hours

def split_hours(utc_hours: float) -> Tuple[int, int, float]:
    """Fractional hours -> (hour, minute, second)."""
    hour = math.floor(utc_hours)
    hour_remainder = (utc_hours - hour) * 60.0
    minute = math.floor(hour_remainder)
    seconds = (hour_remainder - minute) * 60.0
    return hour, minute, seconds


def calculate(request: CalculationRequest) -> Optional[UtcTimeOfDay]:
    """
    Run the rise/set formula for one request.

    Returns None when the sun does not rise or set at the requested zenith
    (continuous day or continuous night at that latitude and date).
    """
    log.debug("calculating %s", request)

    t = solar.approximate_time(request.event, request.day_of_year, request.longitude)
    pos = solar.solar_position(t)

    cos_h = solar.cos_local_hour_angle(
        request.zenith, pos.sin_declination, pos.cos_declination, request.latitude
    )
    # polar day or night: the sun stays on one side of the zenith all day
    if not solar.has_event(cos_h):
        log.debug("no %s on %s at lat=%s: cos H = %r", request.event, request.date, request.latitude, cos_h)
        return None

    lmt = local_mean_time(solar.suns_local_hour_hours(request.event, cos_h), pos.right_ascension_hours, t)
    utc_hours = resolve_utc_hours(lmt, solar.longitude_hour(request.longitude))
    hour, minute, second = split_hours(utc_hours)

    return UtcTimeOfDay(date=request.date, hour=hour, minute=minute, second=second)
