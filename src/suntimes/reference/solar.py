# reference/solar.py

"""
Solar position for the rise/set formula of the "Almanac for Computers"
(Nautical Almanac Office, US Naval Observatory, 1990).

Every function here is a pure scalar transform. Angles are degrees unless a
name says otherwise; times are hours or fractional days as named.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.types import Event
from .angles import normalize_degrees, quadrant, to_degrees, to_radians

DEGREES_PER_HOUR = 15.0


# ------------------------------------------------------------
# Approximate time (seed)
# ------------------------------------------------------------

def longitude_hour(longitude: float) -> float:
    """Observer longitude expressed in hours of Earth rotation (positive east)."""
    return longitude / DEGREES_PER_HOUR

def base_time(event: Event) -> float:
    """Nominal local hour of the event: 06:00 for rise, 18:00 for set."""
    return 6.0 if event == "rise" else 18.0

def approximate_time(event: Event, day_of_year: int, longitude: float) -> float:
    """
    Fractional day-of-year at which the event nominally happens.

      t = N + (base - lngHour) / 24

    Single pass; the result is not refined by iteration.
    """
    return day_of_year + (base_time(event) - longitude_hour(longitude)) / 24.0


# ------------------------------------------------------------
# Sun's coordinates
# ------------------------------------------------------------

def mean_anomaly(t: float) -> float:
    """Sun's mean anomaly M for approximate time t."""
    return (0.9856 * t) - 3.289

def true_longitude(m: float) -> float:
    """
    Sun's true ecliptic longitude L from the mean anomaly, wrapped to [0,360).

      L = M + 1.916 sin M + 0.020 sin 2M + 282.634
    """
    m_rad = to_radians(m)
    return normalize_degrees(
        m
        + (1.916 * math.sin(m_rad))
        + (0.020 * math.sin(2.0 * m_rad))
        + 282.634
    )

def sin_declination(L: float) -> float:
    # 0.39782 = sin(23.44 deg), the obliquity of the ecliptic
    return 0.39782 * math.sin(to_radians(L))

def cos_declination(sin_dec: float) -> float:
    return math.cos(math.asin(sin_dec))

def raw_right_ascension(L: float) -> float:
    """
    atan-derived right ascension, wrapped to [0,360).

    atan of a tangent only spans two quadrants, so this value may sit a
    multiple of 90 degrees away from the true one; see right_ascension.
    """
    tan_ra = 0.91764 * math.tan(to_radians(L))
    return normalize_degrees(to_degrees(math.atan(tan_ra)))

def right_ascension(L: float) -> float:
    """Sun's right ascension, moved into the same quadrant as L."""
    ra = raw_right_ascension(L)
    return ra + (quadrant(L) - quadrant(ra))

def right_ascension_hours(L: float) -> float:
    return right_ascension(L) / DEGREES_PER_HOUR


@dataclass(frozen=True)
class SolarPosition:
    """Intermediate state of one rise/set evaluation."""
    approximate_time: float
    mean_anomaly_deg: float
    true_longitude_deg: float
    sin_declination: float
    cos_declination: float
    right_ascension_deg: float

    @property
    def right_ascension_hours(self) -> float:
        return self.right_ascension_deg / DEGREES_PER_HOUR


def solar_position(t: float) -> SolarPosition:
    """All sun coordinates needed downstream, evaluated at approximate time t."""
    m = mean_anomaly(t)
    L = true_longitude(m)
    sin_dec = sin_declination(L)
    return SolarPosition(
        approximate_time=t,
        mean_anomaly_deg=m,
        true_longitude_deg=L,
        sin_declination=sin_dec,
        cos_declination=cos_declination(sin_dec),
        right_ascension_deg=right_ascension(L),
    )


# ------------------------------------------------------------
# Local hour angle
# ------------------------------------------------------------

def cos_local_hour_angle(zenith: float, sin_dec: float, cos_dec: float, latitude: float) -> float:
    """
    Spherical law of cosines for the hour angle H at which the sun sits at
    the given zenith distance:

      cos H = (cos z - sin d sin phi) / (cos d cos phi)

    At latitude +-90 the denominator is (nearly) zero and the value is huge
    or NaN; has_event rejects both.
    """
    lat_rad = to_radians(latitude)
    return (math.cos(to_radians(zenith)) - (sin_dec * math.sin(lat_rad))) / (cos_dec * math.cos(lat_rad))

def has_event(cos_h: float) -> bool:
    """False when the sun never reaches the zenith (polar day or night)."""
    return -1.0 <= cos_h <= 1.0

def suns_local_hour(event: Event, cos_h: float) -> float:
    """
    Local hour angle H in degrees. Rise lies on the eastern branch, so it
    is reflected to 360 - H. Only valid when has_event(cos_h).
    """
    h = to_degrees(math.acos(cos_h))
    if event == "rise":
        return 360.0 - h
    return h

def suns_local_hour_hours(event: Event, cos_h: float) -> float:
    return suns_local_hour(event, cos_h) / DEGREES_PER_HOUR
