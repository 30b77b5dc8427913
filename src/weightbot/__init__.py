"""Cliente de datos de Weightbot: descarga autenticada y serie diaria densa."""

from __future__ import annotations

__version__ = "0.1.0"

from weightbot.api import WeightbotAPI
from weightbot.errors import (
    ConfigurationError,
    InvalidExportFormat,
    MalformedLine,
    NonChronologicalOrder,
    WeightbotError,
)
from weightbot.model import Credentials, MeasurementRecord

__all__ = [
    "ConfigurationError",
    "Credentials",
    "InvalidExportFormat",
    "MalformedLine",
    "MeasurementRecord",
    "NonChronologicalOrder",
    "WeightbotAPI",
    "WeightbotError",
    "__version__",
]
