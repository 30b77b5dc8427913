"""Normalización del export: serie diaria densa con huecos rellenados."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from datetime import date, datetime, timedelta

from weightbot.errors import MalformedLine, NonChronologicalOrder
from weightbot.model import RAW_EXPORT_HEADER, MeasurementRecord

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)

_LINE_RX = re.compile(
    r"^\s*(?P<date>\d{4}-\d{2}-\d{2})\s*,"
    r"\s*(?P<kg>\d+(?:\.\d+)?)\s*,"
    r"\s*(?P<lb>\d+(?:\.\d+)?)\s*$"
)


def parse_export(raw: str) -> Iterator[tuple[date, str, str]]:
    """Yield ``(date, kilograms, pounds)`` for each data line in file order.

    The header line and blank lines are skipped.

    Raises:
        MalformedLine: If a data line does not have the expected shape.
    """
    for line_number, line in enumerate(raw.splitlines(), start=1):
        if line == RAW_EXPORT_HEADER or not line.strip():
            continue
        match = _LINE_RX.match(line)
        if match is None:
            raise MalformedLine(line_number, line)
        try:
            day = datetime.strptime(match["date"], "%Y-%m-%d").date()
        except ValueError as exc:
            raise MalformedLine(line_number, line, str(exc)) from exc
        yield day, match["kg"], match["lb"]


def normalize(raw: str) -> list[MeasurementRecord]:
    """Convert the raw export into a gap-free, numbered daily series.

    Days missing between two measurements get placeholder records with empty
    weights. Sequence numbers run 1..N over the dense series.

    Args:
        raw: Export text as returned by the site.

    Returns:
        One record per calendar day from the first to the last date.

    Raises:
        MalformedLine: If a data line cannot be parsed.
        NonChronologicalOrder: If a date is not later than the previous one.
    """
    result: list[MeasurementRecord] = []
    previous: date | None = None
    n = 1

    for day, kg, lb in parse_export(raw):
        if previous is not None:
            if day <= previous:
                raise NonChronologicalOrder(day, previous)
            expected = previous + _ONE_DAY
            while expected != day:
                result.append(MeasurementRecord(n, expected.isoformat()))
                expected += _ONE_DAY
                n += 1

        result.append(MeasurementRecord(n, day.isoformat(), kg, lb))
        previous = day
        n += 1

    logger.debug("Normalized series: %d records", len(result))
    return result
