"""Conversión de la serie normalizada a DataFrame de pandas."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from weightbot.model import MeasurementRecord

FRAME_COLUMNS = ["n", "date", "kilograms", "pounds"]


def series_to_frame(records: Sequence[MeasurementRecord]) -> pd.DataFrame:
    """Convert records to a DataFrame with numeric weights (NaN for placeholders)."""
    if not records:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    df = pd.DataFrame(
        [
            {
                "n": r.sequence_number,
                "date": r.day,
                "kilograms": r.kilograms,
                "pounds": r.pounds,
            }
            for r in records
        ]
    )
    df["kilograms"] = pd.to_numeric(df["kilograms"], errors="coerce")
    df["pounds"] = pd.to_numeric(df["pounds"], errors="coerce")
    return df[FRAME_COLUMNS]
