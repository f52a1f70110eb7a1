# tests/test_types.py

import dataclasses
from datetime import date, datetime, timezone

import pytest

from suntimes.core.errors import SunTimesError, UnknownEventError, UnknownZenithError
from suntimes.core.time import civil_date, day_of_year
from suntimes.core.types import CalculationRequest, KNOWN_EVENTS, RiseSet, UtcTimeOfDay
from suntimes.core.zenith import DEFAULT_ZENITH, ZENITH_PRESETS, resolve_zenith


def test_day_of_year():
    assert day_of_year(date(2010, 1, 1)) == 1
    assert day_of_year(date(2010, 6, 9)) == 160
    assert day_of_year(date(2010, 12, 31)) == 365
    assert day_of_year(date(2012, 12, 31)) == 366
    assert day_of_year(date(2012, 3, 1)) == 61

def test_civil_date_drops_time_of_day():
    dt = datetime(2010, 6, 9, 23, 59, tzinfo=timezone.utc)
    assert civil_date(dt) == date(2010, 6, 9)
    assert type(civil_date(dt)) is date
    assert civil_date(date(2010, 6, 9)) == date(2010, 6, 9)

def test_request_defaults_to_official_zenith():
    req = CalculationRequest(event="rise", date=date(2010, 6, 9), latitude=36.72016, longitude=-4.42034)
    assert req.zenith == DEFAULT_ZENITH == 90.8333
    assert req.day_of_year == 160
    assert KNOWN_EVENTS == ("rise", "set")

def test_request_rejects_unknown_event():
    with pytest.raises(UnknownEventError, match="noon"):
        CalculationRequest(event="noon", date=date(2010, 6, 9), latitude=0.0, longitude=0.0)

    # contract violations are ValueErrors as well as library errors
    assert issubclass(UnknownEventError, ValueError)
    assert issubclass(UnknownEventError, SunTimesError)

def test_request_is_immutable():
    req = CalculationRequest(event="set", date=date(2010, 6, 9), latitude=10.0, longitude=20.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.zenith = 96.0  # type: ignore[misc]

    civil = req.with_zenith(96.0)
    assert civil.zenith == 96.0
    assert req.zenith == DEFAULT_ZENITH
    assert civil.event == req.event and civil.date == req.date

def test_request_accepts_datetime():
    req = CalculationRequest(event="set", date=datetime(2012, 12, 31, 18, 0), latitude=0.0, longitude=0.0)
    assert req.date == date(2012, 12, 31)
    assert req.day_of_year == 366

def test_resolve_zenith():
    assert resolve_zenith("official") == DEFAULT_ZENITH
    assert resolve_zenith("civil") == 96.0
    assert resolve_zenith(" Nautical ") == 102.0
    assert resolve_zenith("astronomical") == 108.0
    assert resolve_zenith("91.5") == 91.5
    assert resolve_zenith(90) == 90.0
    assert sorted(ZENITH_PRESETS) == ["astronomical", "civil", "nautical", "official"]

def test_resolve_zenith_unknown_name():
    with pytest.raises(UnknownZenithError, match="Available"):
        resolve_zenith("golden-hour")
    assert issubclass(UnknownZenithError, KeyError)

def test_utc_time_of_day_helpers():
    t = UtcTimeOfDay(date=date(2010, 6, 9), hour=19, minute=35, second=19.5)
    assert t.hours == pytest.approx(19.0 + 35.0 / 60.0 + 19.5 / 3600.0)
    assert t.to_datetime() == datetime(2010, 6, 9, 19, 35, 19, 500000, tzinfo=timezone.utc)
    assert t.isoformat() == "2010-06-09T19:35:19.500000+00:00"
    assert str(t) == "2010-06-09 19:35:19.50 UTC"

def test_utc_time_of_day_clock_carries_rounded_seconds():
    t = UtcTimeOfDay(date=date(2010, 6, 9), hour=19, minute=35, second=59.996)
    assert t.clock() == "19:36:00.00"
    assert str(t) == "2010-06-09 19:36:00.00 UTC"
    t = UtcTimeOfDay(date=date(2010, 6, 9), hour=19, minute=35, second=59.994)
    assert t.clock() == "19:35:59.99"

def test_rise_set_day_length():
    rise = UtcTimeOfDay(date=date(2010, 6, 9), hour=12, minute=0, second=0.0)
    set_ = UtcTimeOfDay(date=date(2010, 6, 10), hour=2, minute=30, second=0.0)
    assert RiseSet(rise=rise, set=set_).day_length_hours == pytest.approx(14.5)
    assert RiseSet(rise=rise, set=None).day_length_hours is None
    assert RiseSet().rise is None
