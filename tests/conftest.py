"""Fakes de requests compartidos por los tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
import requests

SITE = "https://weightbot.com"

LOGIN_PAGE = """
<html><body>
<form action="/account/session" method="post">
  <input type="hidden" name="authenticity_token" value="tok123">
  <input type="text" name="email" value="">
  <input type="password" name="password" value="">
  <input type="submit" name="commit" value="Log in">
</form>
<form action="/search" method="get"><input name="q"></form>
</body></html>
"""

CONFIRM_PAGE = """
<html><body>
<form action="export" method="post">
  <input type="hidden" name="format" value="csv">
</form>
</body></html>
"""

EXPORT_BODY = (
    "date, kilograms, pounds\n"
    "2008-12-04, 80.9, 178.4\n"
    "2008-12-05, 82.6, 182.1\n"
    "2008-12-06, 81.9, 180.6\n"
    "2008-12-08, 82.6, 182.1\n"
)


class FakeResponse:
    def __init__(self, url: str, text: str, status_code: int = 200) -> None:
        self.url = url
        self.text = text
        self.content = text.encode("utf-8")
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} for {self.url}")


@dataclass
class FakeSession:
    """Records calls and answers from a url -> body map."""

    pages: dict[str, str]
    status: dict[str, int] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    calls: list[tuple[str, str, Any]] = field(default_factory=list)
    sent_headers: list[dict[str, str]] = field(default_factory=list)

    def _respond(self, url: str) -> FakeResponse:
        return FakeResponse(url, self.pages[url], self.status.get(url, 200))

    def get(
        self, url: str, params: Any = None, headers: Any = None, timeout: Any = None
    ) -> FakeResponse:
        self.calls.append(("GET", url, params))
        self.sent_headers.append(dict(headers or {}))
        return self._respond(url)

    def post(
        self, url: str, data: Any = None, headers: Any = None, timeout: Any = None
    ) -> FakeResponse:
        self.calls.append(("POST", url, data))
        self.sent_headers.append(dict(headers or {}))
        return self._respond(url)


def site_pages(export_body: str = EXPORT_BODY) -> dict[str, str]:
    return {
        f"{SITE}/account/login": LOGIN_PAGE,
        f"{SITE}/account/session": CONFIRM_PAGE,
        f"{SITE}/account/export": export_body,
    }


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession(pages=site_pages())
