"""
Cookie-owning HTTP session that impersonates a desktop browser.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from http.cookiejar import DefaultCookiePolicy
from typing import Any
from urllib.parse import urljoin

import requests
from requests.cookies import RequestsCookieJar
from requests.structures import CaseInsensitiveDict

from trademark_search.errors import TransportError
from trademark_search.logging_utils import log_event

logger = logging.getLogger(__name__)

REDIRECT_STATUS_CODES = {301, 302, 303, 307, 308}
METHOD_DOWNGRADE_STATUS_CODES = {301, 302, 303}

FormBody = Mapping[str, str] | Sequence[tuple[str, str]]


@dataclass(frozen=True)
class HttpResponse:
    """
    Fully read HTTP response.
    """

    status_code: int
    headers: CaseInsensitiveDict
    body: str
    url: str

    @property
    def is_redirect(self) -> bool:
        return self.status_code in REDIRECT_STATUS_CODES


class HttpSession:
    """
    Issues requests with explicit headers and an ordered cookie store.

    Cookies set by any response are merged into the store and sent back as
    a single `Cookie` header on every later request. The jar of the wrapped
    `requests.Session` is disabled; the store is the only cookie source.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = 30.0,
        max_redirects: int = 5,
        session: requests.Session | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        self._timeout_seconds = timeout_seconds
        self._max_redirects = max_redirects
        self._cookies: dict[str, str] = {}
        self._lock = threading.Lock()

    def __enter__(self) -> "HttpSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    @property
    def cookies(self) -> dict[str, str]:
        with self._lock:
            return dict(self._cookies)

    def cookie_header(self) -> str | None:
        with self._lock:
            if not self._cookies:
                return None
            return "; ".join(f"{name}={value}" for name, value in self._cookies.items())

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        form: FormBody | None = None,
        query: Mapping[str, Any] | None = None,
        follow_redirects: bool = True,
    ) -> HttpResponse:
        """
        Send one request and return the final (or raw redirect) response.
        """

        current_method = method.upper()
        current_url = url
        current_form = form
        current_query = query

        for _ in range(self._max_redirects + 1):
            response = self._send_once(
                current_method,
                current_url,
                headers=headers,
                form=current_form,
                query=current_query,
            )
            if not follow_redirects or not response.is_redirect:
                return self._checked(response)

            location = response.headers.get("Location")
            if not location:
                return self._checked(response)

            log_event(
                logger,
                logging.DEBUG,
                "http_redirect_followed",
                status_code=response.status_code,
                from_url=current_url,
                location=location,
            )
            if response.status_code in METHOD_DOWNGRADE_STATUS_CODES and current_method != "HEAD":
                current_method = "GET"
                current_form = None
            current_url = urljoin(current_url, location)
            current_query = None

        raise TransportError(f"Exceeded {self._max_redirects} redirects for {method.upper()} {url}")

    def _send_once(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None,
        form: FormBody | None,
        query: Mapping[str, Any] | None,
    ) -> HttpResponse:
        request_headers = dict(headers or {})
        cookie_header = self.cookie_header()
        if cookie_header is not None:
            request_headers["Cookie"] = cookie_header

        try:
            response = self._session.request(
                method,
                url,
                headers=request_headers,
                data=form,
                params=query,
                timeout=self._timeout_seconds,
                allow_redirects=False,
            )
        except requests.RequestException as exc:
            log_event(
                logger,
                logging.ERROR,
                "http_request_failed",
                method=method,
                url=url,
                error=str(exc),
            )
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        self._store_cookies(response.cookies)
        log_event(
            logger,
            logging.DEBUG,
            "http_request_completed",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return HttpResponse(
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers),
            body=response.text,
            url=str(response.url),
        )

    def _store_cookies(self, jar: RequestsCookieJar) -> None:
        with self._lock:
            for cookie in jar:
                if cookie.value is None:
                    continue
                self._cookies[cookie.name] = cookie.value

    @staticmethod
    def _checked(response: HttpResponse) -> HttpResponse:
        if response.status_code >= 400:
            raise TransportError(f"HTTP {response.status_code} returned by {response.url}")
        return response
