"""Descarga autenticada del export de pesos simulando un navegador.

El sitio no tiene API: se inicia sesión con el formulario de login y luego se
confirma el formulario de exportación, que devuelve el texto plano.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from urllib.parse import urljoin

import requests
from lxml import etree, html

from weightbot.errors import InvalidExportFormat
from weightbot.model import RAW_EXPORT_HEADER, USER_AGENT, Credentials

logger = logging.getLogger(__name__)

LOGIN_PATH = "/account/login"
_HEADERS = {"User-Agent": USER_AGENT}


def fetch_raw_export(
    endpoint: str,
    credentials: Credentials,
    *,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> str:
    """Log in and download the raw export text.

    Args:
        endpoint: Site base URL, e.g. ``https://weightbot.com``.
        credentials: Account email and password.
        session: Optional session to use; a private one is created otherwise.
        timeout: Per-request timeout in seconds passed to requests.

    Returns:
        The export body, starting with the ``date, kilograms, pounds`` header.

    Raises:
        InvalidExportFormat: If a page has no form or the final body is not
            an export.
        requests.HTTPError: If the site answers with an error status.
    """
    if session is not None:
        return _fetch_with(session, endpoint, credentials, timeout)
    with requests.Session() as own_session:
        return _fetch_with(own_session, endpoint, credentials, timeout)


def _fetch_with(
    session: requests.Session,
    endpoint: str,
    credentials: Credentials,
    timeout: float | None,
) -> str:
    login_url = endpoint.rstrip("/") + LOGIN_PATH
    logger.debug("GET %s", login_url)
    login_page = session.get(login_url, headers=_HEADERS, timeout=timeout)
    login_page.raise_for_status()

    confirm_page = _submit_first_form(
        session,
        login_page,
        {"email": credentials.email, "password": credentials.password},
        timeout,
    )
    export = _submit_first_form(session, confirm_page, {}, timeout)

    body = export.text
    if not body.startswith(RAW_EXPORT_HEADER + "\n"):
        raise InvalidExportFormat("Received incorrect data from the site")
    logger.debug("Export received: %d bytes", len(body))
    return body


def _submit_first_form(
    session: requests.Session,
    page: requests.Response,
    overrides: Mapping[str, str],
    timeout: float | None,
) -> requests.Response:
    """Envía el primer formulario de la página con sus valores por defecto."""
    try:
        tree = html.fromstring(page.content)
    except etree.ParserError as exc:
        raise InvalidExportFormat(f"Empty page at {page.url}") from exc
    forms = tree.forms
    if not forms:
        raise InvalidExportFormat(f"No form found on {page.url}")
    form = forms[0]

    action = urljoin(page.url, form.get("action") or "")
    values = [(k, v) for k, v in form.form_values() if k not in overrides]
    button = _submit_button(form)
    if button is not None and button[0] not in overrides:
        values.append(button)
    values.extend(overrides.items())

    logger.debug("%s %s (%d fields)", form.method, action, len(values))
    if form.method == "GET":
        response = session.get(
            action, params=values, headers=_HEADERS, timeout=timeout
        )
    else:
        response = session.post(
            action, data=values, headers=_HEADERS, timeout=timeout
        )
    response.raise_for_status()
    return response


def _submit_button(form: html.FormElement) -> tuple[str, str] | None:
    """Primer botón de envío con nombre, como lo pulsaría un navegador."""
    buttons = form.xpath(
        ".//input[@type='submit' and @name]"
        " | .//button[@name and (not(@type) or @type='submit')]"
    )
    if not buttons:
        return None
    return buttons[0].get("name"), buttons[0].get("value", "")
