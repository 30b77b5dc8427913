"""Jerarquía de errores del cliente y del normalizador."""

from __future__ import annotations

import datetime as dt


class WeightbotError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(WeightbotError, ValueError):
    """Missing or empty credentials at construction time."""


class InvalidExportFormat(WeightbotError):
    """The site did not return a usable export.

    Bad credentials, a changed page layout and a transient site error all
    look the same from here, so no cause is reported.
    """


class MalformedLine(WeightbotError, ValueError):
    """A data line is not ``YYYY-MM-DD, <kg>, <lb>``."""

    def __init__(self, line_number: int, line: str, reason: str = "") -> None:
        self.line_number = line_number
        self.line = line
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Malformed line {line_number}: {line!r}{detail}")


class NonChronologicalOrder(WeightbotError, ValueError):
    """A date does not come strictly after the previous one."""

    def __init__(self, day: dt.date, previous: dt.date) -> None:
        self.day = day
        self.previous = previous
        super().__init__(
            f"Date '{day.isoformat()}' is not later than '{previous.isoformat()}'"
        )
