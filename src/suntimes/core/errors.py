class SunTimesError(Exception):
    """Base error."""

class UnknownEventError(SunTimesError, ValueError):
    """Raised when a request names an event other than 'rise' or 'set'."""

class UnknownZenithError(SunTimesError, KeyError):
    """Raised when a zenith preset name is not known."""
