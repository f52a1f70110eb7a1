from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, timezone
from typing import Literal, Optional, Tuple

from .errors import UnknownEventError
from .time import civil_date, day_of_year
from .zenith import DEFAULT_ZENITH

Event = Literal["rise", "set"]
KNOWN_EVENTS: Tuple[str, ...] = ("rise", "set")


@dataclass(frozen=True)
class CalculationRequest:
    """
    One rise/set question: which event, on which date, for which observer.

    Latitude is positive north, longitude positive east, both in degrees.
    The zenith is fixed here, once; nothing downstream changes it.
    """
    event: Event
    date: date
    latitude: float
    longitude: float
    zenith: float = DEFAULT_ZENITH

    def __post_init__(self) -> None:
        if self.event not in KNOWN_EVENTS:
            raise UnknownEventError(f"Unknown event '{self.event}'. Expected one of {KNOWN_EVENTS}")
        object.__setattr__(self, "date", civil_date(self.date))
        object.__setattr__(self, "zenith", float(self.zenith))

    @property
    def day_of_year(self) -> int:
        return day_of_year(self.date)

    def with_zenith(self, zenith: float) -> "CalculationRequest":
        return replace(self, zenith=zenith)


@dataclass(frozen=True)
class UtcTimeOfDay:
    """A UTC clock time paired with the calendar date it was computed for."""
    date: date
    hour: int
    minute: int
    second: float

    @property
    def hours(self) -> float:
        """Fractional UTC hours since midnight."""
        return self.hour + self.minute / 60.0 + self.second / 3600.0

    def to_datetime(self) -> datetime:
        midnight = datetime(self.date.year, self.date.month, self.date.day, tzinfo=timezone.utc)
        return midnight + timedelta(hours=self.hour, minutes=self.minute, seconds=self.second)

    def isoformat(self) -> str:
        return self.to_datetime().isoformat()

    def clock(self) -> str:
        """HH:MM:SS.ss, rounding to hundredths and carrying into minutes and hours."""
        ticks = round((self.hour * 3600 + self.minute * 60 + self.second) * 100)
        secs, hundredths = divmod(ticks, 100)
        hour, rem = divmod(secs, 3600)
        minute, second = divmod(rem, 60)
        return f"{hour:02d}:{minute:02d}:{second:02d}.{hundredths:02d}"

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self.clock()} UTC"


@dataclass(frozen=True)
class RiseSet:
    """Sunrise and sunset for one local day; either side may be absent."""
    rise: Optional[UtcTimeOfDay] = None
    set: Optional[UtcTimeOfDay] = None

    @property
    def day_length_hours(self) -> Optional[float]:
        if self.rise is None or self.set is None:
            return None
        return (self.set.to_datetime() - self.rise.to_datetime()).total_seconds() / 3600.0
