# elspot/utils/errors.py
from datetime import datetime, timezone

# Returned alongside a decoding failure; equals datetime.min in UTC.
ZERO_INSTANT = datetime(1, 1, 1, tzinfo=timezone.utc)


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (zone, years, paths, etc).
    Should NOT print traceback.
    """


class UnsupportedYear(UserInputError):
    """
    The zone rule cannot model ``year``: it lies outside the configured range,
    or its offset changes are not one spring and one autumn transition.
    """

    def __init__(
        self,
        year: int,
        min_year: int | None = None,
        max_year: int | None = None,
        reason: str | None = None,
    ):
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        self.reason = reason
        if min_year is not None and max_year is not None:
            msg = f"year {year} outside supported range {min_year}..{max_year}"
        elif reason:
            msg = f"year {year} not supported by zone rule: {reason}"
        else:
            msg = f"year {year} not supported by zone rule"
        super().__init__(msg)


class MalformedReading(ValueError):
    """
    A disguised reading that is not a non-negative decimal integer.

    Per-record and recoverable: ``instant`` is always ZERO_INSTANT and the
    resolver state is left as it was.
    """

    def __init__(self, raw, reason: str = "not a non-negative integer"):
        self.raw = raw
        self.reason = reason
        self.instant = ZERO_INSTANT
        super().__init__(f"malformed reading {raw!r}: {reason}")


class TableFormatError(ValueError):
    """Elspot HTML table does not have the expected shape."""


class LoadError(RuntimeError):
    """A storage stage failed; the message names the stage."""

    def __init__(self, stage: str, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage}: {cause}")
