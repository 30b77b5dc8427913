"""Punto de acceso único: descarga y normalización perezosas con caché."""

from __future__ import annotations

import logging

import requests

from weightbot.model import DEFAULT_SITE, Credentials, MeasurementRecord
from weightbot.normalize import normalize
from weightbot.session import fetch_raw_export

logger = logging.getLogger(__name__)


class WeightbotAPI:
    """Weight history of one account, fetched on first use.

    Nothing is requested until ``raw_data()`` or ``data()`` is called. The
    raw export and the normalized series are each computed at most once per
    instance; a failed attempt leaves the cache empty so the next call retries.

    Example:
        >>> api = WeightbotAPI("user@example.com", "secret")
        >>> api.data()[0].as_dict()
        {'n': 1, 'date': '2008-12-04', 'kg': '80.9', 'lb': '178.4'}
    """

    def __init__(
        self,
        email: str | None,
        password: str | None,
        site: str | None = None,
        raw_data: str | None = None,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        """Create the client.

        Args:
            email: Account email (required).
            password: Account password (required).
            site: Site base URL (default ``https://weightbot.com``).
            raw_data: Export text to use instead of downloading it.
            session: Optional requests session for the download.
            timeout: Per-request timeout in seconds.

        Raises:
            ConfigurationError: If email or password is missing or empty.
        """
        self._credentials = Credentials.validated(email, password)
        self._site = site or DEFAULT_SITE
        self._session = session
        self._timeout = timeout
        self._raw_data = raw_data
        self._data: list[MeasurementRecord] | None = None

    @property
    def site(self) -> str:
        return self._site

    @property
    def email(self) -> str:
        return self._credentials.email

    def raw_data(self) -> str:
        """Return the export text exactly as the site serves it."""
        return self._get_data_if_needed()

    def data(self) -> list[MeasurementRecord]:
        """Return the dense daily series (a new list each call, same records)."""
        raw = self.raw_data()
        if self._data is None:
            self._data = normalize(raw)
        else:
            logger.debug("Using cached series")
        return list(self._data)

    def _get_data_if_needed(self) -> str:
        if self._raw_data is not None:
            logger.debug("Using cached export")
            return self._raw_data
        logger.debug("Fetching export for %s from %s", self.email, self._site)
        self._raw_data = fetch_raw_export(
            self._site,
            self._credentials,
            session=self._session,
            timeout=self._timeout,
        )
        return self._raw_data
