"""Source-agnostic data errors."""

from __future__ import annotations


class F1DataError(Exception):
    """Source-agnostic data fetch error. UI catches only this."""


class DataUnavailable(F1DataError):
    """Neither the snapshot cache nor the live API yielded the resource."""


class MalformedRecord(F1DataError):
    """A standings row carries an unparsable position or points value."""
