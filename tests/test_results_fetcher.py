from __future__ import annotations

import pytest

from conftest import BASE_URL, FakeResponse, FakeTransport
from trademark_search.config.models import TrademarkSearchSettings
from trademark_search.fetcher import ResultsFetcher
from trademark_search.http.session import HttpSession
from trademark_search.types import SearchSession

RESULTS_URL = f"{BASE_URL}/trademarks/search/result"


def test_fetch_returns_raw_body_with_query(
    settings: TrademarkSearchSettings,
    http: HttpSession,
    transport: FakeTransport,
) -> None:
    transport.route("GET", RESULTS_URL, FakeResponse(text="<html>page</html>"))

    body = ResultsFetcher(settings=settings).fetch(SearchSession(http), "SID1", 3)

    assert body == "<html>page</html>"
    call = transport.calls[0]
    assert call["params"] == {"s": "SID1", "p": 3}
    assert call["headers"]["sec-fetch-site"] == "same-origin"
    assert call["headers"]["user-agent"] == "TestAgent/1.0"


def test_negative_page_index_is_rejected(
    settings: TrademarkSearchSettings,
    http: HttpSession,
    transport: FakeTransport,
) -> None:
    with pytest.raises(ValueError):
        ResultsFetcher(settings=settings).fetch(SearchSession(http), "SID1", -1)
    assert transport.calls == []
