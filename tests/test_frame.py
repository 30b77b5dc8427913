from __future__ import annotations

import math
from datetime import date

from weightbot.frame import FRAME_COLUMNS, series_to_frame
from weightbot.model import MeasurementRecord


def test_series_to_frame_empty() -> None:
    df = series_to_frame([])
    assert list(df.columns) == FRAME_COLUMNS
    assert df.empty


def test_series_to_frame_numeric_weights_and_nan_placeholders() -> None:
    records = [
        MeasurementRecord(1, "2008-12-04", "80.9", "178.4"),
        MeasurementRecord(2, "2008-12-05"),
        MeasurementRecord(3, "2008-12-06", "81.9", "180.6"),
    ]
    df = series_to_frame(records)
    assert list(df.columns) == FRAME_COLUMNS
    assert list(df["n"]) == [1, 2, 3]
    assert list(df["date"]) == [date(2008, 12, 4), date(2008, 12, 5), date(2008, 12, 6)]
    assert df.iloc[0]["kilograms"] == 80.9
    assert math.isnan(df.iloc[1]["kilograms"])
    assert math.isnan(df.iloc[1]["pounds"])
    assert df.iloc[2]["pounds"] == 180.6
