"""Modelos tipados para credenciales y registros de peso diarios."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from weightbot.errors import ConfigurationError

DEFAULT_SITE = "https://weightbot.com"
USER_AGENT = "weightbot/0.1.0"
RAW_EXPORT_HEADER = "date, kilograms, pounds"


@dataclass(frozen=True)
class Credentials:
    """Account login for the weight-tracking site."""

    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"

    @classmethod
    def validated(cls, email: str | None, password: str | None) -> Credentials:
        """Build credentials, rejecting missing or blank values.

        Raises:
            ConfigurationError: If email or password is missing or empty.
        """
        if not email or not email.strip():
            raise ConfigurationError("No email specified")
        if not password or not password.strip():
            raise ConfigurationError("No password specified")
        return cls(email=email, password=password)


@dataclass(frozen=True)
class MeasurementRecord:
    """One day of the dense series (measured or placeholder)."""

    sequence_number: int
    date: str
    kilograms: str = ""
    pounds: str = ""

    @property
    def day(self) -> dt.date:
        return dt.date.fromisoformat(self.date)

    @property
    def is_placeholder(self) -> bool:
        return self.kilograms == "" and self.pounds == ""

    def as_dict(self) -> dict[str, object]:
        """Return the record with the short keys used by the export (n/date/kg/lb)."""
        return {
            "n": self.sequence_number,
            "date": self.date,
            "kg": self.kilograms,
            "lb": self.pounds,
        }
