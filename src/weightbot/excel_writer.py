"""Generación de Excel formateado con la serie diaria de pesos."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, Side

_WEEKDAYS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_HEADER_MAP: dict[str, str] = {
    "n": "#",
    "weekday": "Day",
    "date": "Date",
    "kilograms": "Weight (kg)",
    "pounds": "Weight (lb)",
}


@dataclass(frozen=True)
class ExcelLayout:
    """Layout/formatting configuration for the weight sheet."""

    sheet_name: str = "Weight"


def _weekday_label(i: object) -> str:
    """Convierte índice 0-6 (lunes-domingo) a etiqueta de 3 letras."""
    try:
        if i is None or (isinstance(i, float) and pd.isna(i)):
            return ""
        if isinstance(i, int | float):
            idx = int(i)
            return _WEEKDAYS[idx] if 0 <= idx < 7 else ""
        return ""
    except (ValueError, TypeError):
        return ""


def _add_weekday_column(export_df: pd.DataFrame) -> pd.DataFrame:
    """Añade columna weekday justo antes de date."""
    if "date" not in export_df.columns or export_df.empty:
        return export_df
    export_df = export_df.copy()
    export_df["weekday"] = (
        pd.to_datetime(export_df["date"]).dt.weekday.map(_weekday_label)
    )
    cols = [c for c in export_df.columns if c != "weekday"]
    cols.insert(cols.index("date"), "weekday")
    return export_df[cols]


def write_series_xlsx(df: pd.DataFrame, out_path: Path, layout: ExcelLayout) -> None:
    """Write the dense weight series to a formatted workbook.

    Args:
        df: Frame from ``series_to_frame`` (n, date, kilograms, pounds).
        out_path: Output path for the XLSX file.
        layout: Excel layout parameters.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)

    export_df = _add_weekday_column(df)
    if "date" in export_df.columns and not export_df.empty:
        export_df["date"] = pd.to_datetime(export_df["date"])
    export_df = export_df.rename(columns=_HEADER_MAP)

    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        export_df.to_excel(writer, index=False, sheet_name=layout.sheet_name)
        ws = writer.book[layout.sheet_name]
        _format_sheet(ws)


def _style_header_row(ws: Any) -> None:
    """Aplica fuente negrita, alineación y borde a la fila de cabecera."""
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    header_font = Font(bold=True)
    center = Alignment(horizontal="center", vertical="center", wrap_text=True)
    for cell in ws[1]:
        cell.font = header_font
        cell.alignment = center
        cell.border = border


def _style_body_rows(ws: Any) -> None:
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    center = Alignment(horizontal="center", vertical="center")
    for row in ws.iter_rows(min_row=2):
        for cell in row:
            cell.alignment = center
            cell.border = border


def _get_header_col_index(ws: Any) -> dict[str, int]:
    """Devuelve mapa nombre de cabecera -> índice de columna (1-based)."""
    headers = [str(cell.value) for cell in ws[1]]
    return {name: idx + 1 for idx, name in enumerate(headers)}


def _apply_column_widths(ws: Any, col_index: dict[str, int]) -> None:
    widths = [
        ("#", 6),
        ("Day", 6),
        ("Date", 12),
        ("Weight (kg)", 12),
        ("Weight (lb)", 12),
    ]
    for header, width in widths:
        idx = col_index.get(header)
        if idx is not None:
            letter = ws.cell(row=1, column=idx).column_letter
            ws.column_dimensions[letter].width = width


def _apply_number_formats(ws: Any, col_index: dict[str, int]) -> None:
    fmt_map: dict[str, str] = {
        "#": "0",
        "Date": "yyyy-mm-dd",
        "Weight (kg)": "0.0",
        "Weight (lb)": "0.0",
    }
    for row in ws.iter_rows(min_row=2):
        for header, fmt in fmt_map.items():
            idx = col_index.get(header)
            if idx is not None:
                row[idx - 1].number_format = fmt


def _format_sheet(ws: Any) -> None:
    """Apply borders, widths and number formats to a worksheet.

    Args:
        ws: openpyxl worksheet.
    """
    _style_header_row(ws)
    _style_body_rows(ws)
    col_index = _get_header_col_index(ws)
    _apply_column_widths(ws, col_index)
    _apply_number_formats(ws, col_index)
