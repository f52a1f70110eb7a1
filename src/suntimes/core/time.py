from __future__ import annotations
from datetime import date, datetime


def civil_date(d: date) -> date:
    """Reduce a date or datetime to its plain calendar date."""
    if isinstance(d, datetime):
        return d.date()
    return d

def day_of_year(d: date) -> int:
    """1-based ordinal of d within its year (1..365, or 1..366 in leap years)."""
    return d.toordinal() - date(d.year, 1, 1).toordinal() + 1
