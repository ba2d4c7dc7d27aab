"""
Shared search runtime data models.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from trademark_search.errors import SearchStateError

if TYPE_CHECKING:
    from trademark_search.http.session import HttpSession


class SearchState(str, enum.Enum):
    INIT = "init"
    INDEX_FETCHED = "index_fetched"
    SEARCH_SUBMITTED = "search_submitted"
    PAGINATING = "paginating"
    DONE = "done"


@dataclass(frozen=True)
class TrademarkRecord:
    """
    One row of the search results table.
    """

    index: str
    number: str
    logo_url: str | None
    name: str
    trademark_class: str
    status: str
    details_url: str

    def to_output(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "url_logo": self.logo_url,
            "name": self.name,
            "class": self.trademark_class,
            "status": self.status,
            "url_details_page": self.details_url,
        }


@dataclass(frozen=True)
class ResultPage:
    """
    Parsed content of one results page.
    """

    records: dict[str, TrademarkRecord]
    total_pages: int

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class AggregatedResults:
    """
    Records merged across every page of one search, keyed by index.
    """

    records: dict[str, TrademarkRecord] = field(default_factory=dict)

    def merge(self, page: ResultPage) -> None:
        # Later pages win on index collisions.
        self.records.update(page.records)

    def to_output(self) -> dict[str, dict[str, Any]]:
        return {index: record.to_output() for index, record in self.records.items()}

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[str]:
        return iter(self.records)

    def __getitem__(self, index: str) -> TrademarkRecord:
        return self.records[index]


class SearchSession:
    """
    Transient state of one query: HTTP session, CSRF token and search id.
    """

    def __init__(self, http: HttpSession) -> None:
        self.http = http
        self.state = SearchState.INIT
        self._csrf_token: str | None = None
        self._search_id: str | None = None

    @property
    def cookies(self) -> Mapping[str, str]:
        return self.http.cookies

    @property
    def csrf_token(self) -> str | None:
        return self._csrf_token

    @property
    def search_id(self) -> str | None:
        return self._search_id

    def mark_index_fetched(self, csrf_token: str) -> None:
        if self.state is not SearchState.INIT or self._csrf_token is not None:
            raise SearchStateError(f"CSRF token cannot be set in state={self.state.value}")
        self._csrf_token = csrf_token
        self.state = SearchState.INDEX_FETCHED

    def mark_search_submitted(self, search_id: str) -> None:
        if self.state is not SearchState.INDEX_FETCHED or self._search_id is not None:
            raise SearchStateError(f"Search id cannot be set in state={self.state.value}")
        self._search_id = search_id
        self.state = SearchState.SEARCH_SUBMITTED

    def mark_paginating(self) -> None:
        if self.state is not SearchState.SEARCH_SUBMITTED:
            raise SearchStateError(f"Cannot paginate in state={self.state.value}")
        self.state = SearchState.PAGINATING

    def mark_done(self) -> None:
        if self.state is not SearchState.PAGINATING:
            raise SearchStateError(f"Cannot finish in state={self.state.value}")
        self.state = SearchState.DONE

    def require_csrf_token(self) -> str:
        if self._csrf_token is None:
            raise SearchStateError("CSRF token requested before the index page was fetched")
        return self._csrf_token

    def require_search_id(self) -> str:
        if self._search_id is None:
            raise SearchStateError("Search id requested before the search was submitted")
        return self._search_id
