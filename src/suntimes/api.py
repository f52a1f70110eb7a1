from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from typing import Optional

from .core.types import CalculationRequest, Event, RiseSet, UtcTimeOfDay
from .core.zenith import DEFAULT_ZENITH, ZenithLike, resolve_zenith
from .engines.calculation import calculate


def compute_event(
    event: Event,
    d: date,
    latitude: float,
    longitude: float,
    zenith: ZenithLike = DEFAULT_ZENITH,
) -> Optional[UtcTimeOfDay]:
    """
    UTC time of the given event on date d, or None if the sun does not cross
    the zenith there that day. zenith is degrees or a preset name.
    """
    request = CalculationRequest(
        event=event,
        date=d,
        latitude=latitude,
        longitude=longitude,
        zenith=resolve_zenith(zenith),
    )
    return calculate(request)

def sunrise(d: date, latitude: float, longitude: float, zenith: ZenithLike = DEFAULT_ZENITH) -> Optional[UtcTimeOfDay]:
    return compute_event("rise", d, latitude, longitude, zenith)

def sunset(d: date, latitude: float, longitude: float, zenith: ZenithLike = DEFAULT_ZENITH) -> Optional[UtcTimeOfDay]:
    return compute_event("set", d, latitude, longitude, zenith)

def sunrise_sunset(d: date, latitude: float, longitude: float, zenith: ZenithLike = DEFAULT_ZENITH) -> RiseSet:
    """
    Rise and set bounding local day d.

    Both events come from the formula for d. When the set clock time lands
    before the rise, one of them belongs to a neighbouring UTC day: west of
    Greenwich the local evening runs past 00:00 UTC, so the set is dated
    d + 1; east of it the local morning starts before 00:00 UTC, so the
    rise is dated d - 1. Only the date moves; no event is recomputed.
    """
    rise = sunrise(d, latitude, longitude, zenith)
    set_ = sunset(d, latitude, longitude, zenith)
    if rise is not None and set_ is not None and set_.hours < rise.hours:
        if longitude < 0:
            set_ = replace(set_, date=set_.date + timedelta(days=1))
        else:
            rise = replace(rise, date=rise.date - timedelta(days=1))
    return RiseSet(rise=rise, set=set_)
