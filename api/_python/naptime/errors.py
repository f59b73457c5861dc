"""
Errors raised by schedule generation and its helpers.

All errors derive from ValueError so callers that already treat bad input
as a ValueError (HTTP function, CLI) keep working unchanged.
"""


class NaptimeError(ValueError):
    """Base class for all naptime errors."""


class TimeParseError(NaptimeError):
    """A time-of-day value could not be parsed or is out of range."""


class InvalidPolicyError(NaptimeError):
    """Schedule policy or settings value is unusable."""


class InvalidNapError(NaptimeError):
    """A logged nap is inconsistent (end before start, duplicate id, ...)."""
