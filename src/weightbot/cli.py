"""CLI para descargar el historial de Weightbot y mostrarlo o exportarlo."""

from __future__ import annotations

import argparse
import logging
import os
from datetime import datetime
from pathlib import Path

from dateutil import tz

from weightbot.api import WeightbotAPI
from weightbot.excel_writer import ExcelLayout, write_series_xlsx
from weightbot.frame import series_to_frame
from weightbot.model import DEFAULT_SITE

logger = logging.getLogger(__name__)

EMAIL_ENV = "WEIGHTBOT_EMAIL"
PASSWORD_ENV = "WEIGHTBOT_PASSWORD"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Weight history from weightbot.com as a gap-free daily series.",
        epilog=f"The password is read from ${PASSWORD_ENV}.",
    )
    parser.add_argument(
        "--email",
        default=os.getenv(EMAIL_ENV),
        help=f"Account email (default: ${EMAIL_ENV}).",
    )
    parser.add_argument(
        "--site",
        default=DEFAULT_SITE,
        help=f"Site base URL (default: {DEFAULT_SITE}).",
    )
    parser.add_argument(
        "--from-file",
        type=Path,
        help="Read the raw export from this file instead of downloading it.",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the raw export instead of the normalized series.",
    )
    parser.add_argument(
        "--xlsx",
        type=Path,
        help=(
            "Also write the normalized series to this Excel file "
            "(or to a timestamped file inside this directory)."
        ),
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Exit code (0 on success).
    """
    ns = parse_args(argv)
    setup_logging(ns.log_level)

    raw = ns.from_file.read_text(encoding="utf-8") if ns.from_file else None
    api = WeightbotAPI(ns.email, os.getenv(PASSWORD_ENV), site=ns.site, raw_data=raw)

    if ns.raw:
        print(api.raw_data(), end="")
        return 0

    records = api.data()
    for r in records:
        print(f"{r.sequence_number}\t{r.date}\t{r.kilograms}\t{r.pounds}")

    if ns.xlsx:
        out_path = _xlsx_path(ns.xlsx)
        write_series_xlsx(series_to_frame(records), out_path, ExcelLayout())
        logger.info("Wrote %d days to %s", len(records), out_path)
    return 0


def _xlsx_path(target: Path) -> Path:
    """Usa el archivo indicado o genera uno con fecha/hora local en el directorio."""
    if not target.is_dir():
        return target
    ts = datetime.now(tz=tz.tzlocal()).strftime("%Y-%m-%d_%H-%M-%S")
    return target / f"weightbot_{ts}.xlsx"
