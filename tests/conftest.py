"""
Shared fakes and HTML fixtures for the trademark search tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from requests.cookies import RequestsCookieJar
from requests.structures import CaseInsensitiveDict

from trademark_search.config.models import TrademarkSearchSettings
from trademark_search.http.session import HttpSession

BASE_URL = "https://search.example.test"


class FakeResponse:
    def __init__(
        self,
        *,
        status_code: int = 200,
        text: str = "",
        headers: dict[str, str] | None = None,
        cookies: dict[str, str] | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.text = text
        self.headers = CaseInsensitiveDict(headers or {})
        self.url = url
        self.cookies = RequestsCookieJar()
        for name, value in (cookies or {}).items():
            self.cookies.set(name, value)


class FakeTransport:
    """
    Stand-in for `requests.Session` that routes requests to handlers.
    """

    def __init__(self) -> None:
        self.cookies = RequestsCookieJar()
        self.calls: list[dict[str, Any]] = []
        self.closed = False
        self._routes: dict[tuple[str, str], Callable[[dict[str, Any]], FakeResponse]] = {}

    def route(
        self,
        method: str,
        url: str,
        handler: FakeResponse | Callable[[dict[str, Any]], FakeResponse],
    ) -> None:
        if isinstance(handler, FakeResponse):
            response = handler
            self._routes[(method.upper(), url)] = lambda _: response
        else:
            self._routes[(method.upper(), url)] = handler

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        call = {"method": method.upper(), "url": url, **kwargs}
        self.calls.append(call)
        handler = self._routes.get((method.upper(), url))
        if handler is None:
            raise AssertionError(f"Unexpected request {method} {url}")
        response = handler(call)
        if not response.url:
            response.url = url
        return response

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def settings() -> TrademarkSearchSettings:
    return TrademarkSearchSettings(
        base_url=BASE_URL,
        user_agent="TestAgent/1.0",
        timeout_seconds=5.0,
        max_redirects=3,
        page_workers=1,
        output_path="results.json",
    )


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def http(transport: FakeTransport) -> HttpSession:
    return HttpSession(timeout_seconds=5.0, max_redirects=3, session=transport)


def index_page(token: str | None = "tok1") -> str:
    meta = f'<meta name="_csrf" content="{token}">' if token is not None else ""
    return f"""
    <html><head>
      <meta name="_csrf_header" content="X-CSRF-TOKEN">
      {meta}
    </head><body><form id="advanced-search"></form></body></html>
    """


def result_row(
    index: str,
    *,
    number: str | None = None,
    name: str = "ACME",
    trademark_class: str = " 9, 42 ",
    status: str | None = "Registered",
    logo: str | None = "https://images.example.test/logo.png",
    mark_url: str | None = None,
) -> str:
    number = number or f"10000{index}"
    mark_url = mark_url if mark_url is not None else f"/trademarks/search/view/{number}?s=SID1"
    logo_html = (
        f'<td class="trademark image"><img src="{logo}"></td>'
        if logo is not None
        else '<td class="trademark image"></td>'
    )
    status_html = f'<td class="status">{status}</td>' if status is not None else ""
    mark_attr = f' data-markurl="{mark_url}"' if mark_url else ""
    return f"""
    <tbody>
      <tr{mark_attr}>
        <td class="col c-5 table-index"><span>{index}</span></td>
        <td class="number"><a href="#">{number}</a></td>
        {logo_html}
        <td class="trademark words"> {name} </td>
        <td class="classes">{trademark_class}</td>
        {status_html}
      </tr>
    </tbody>
    """


def results_page(rows: list[str], *, last_page: int | None = None, page_status: str | None = None) -> str:
    control = (
        f'<a class="button green no-fill square goto-last-page" data-gotopage="{last_page}">Last</a>'
        if last_page is not None
        else ""
    )
    status_block = (
        f'<div class="status"><span> {page_status} </span></div>' if page_status is not None else ""
    )
    return f"""
    <html><body>
      {status_block}
      <table class="results">{''.join(rows)}</table>
      <div class="pagination">{control}</div>
    </body></html>
    """
