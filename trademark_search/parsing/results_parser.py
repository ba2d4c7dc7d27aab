"""
BeautifulSoup-based parser for advanced search result pages.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from bs4 import BeautifulSoup, Tag

from trademark_search.errors import MalformedResultPage
from trademark_search.types import ResultPage, TrademarkRecord

SELECTORS = {
    "last_page": ".button.green.no-fill.square.goto-last-page",
    "row_group": "tbody",
    "row": "tr",
    "index": ".col.c-5.table-index span",
    "number": ".number a",
    "logo": ".trademark.image img",
    "name": ".trademark.words",
    "class": ".classes",
    "row_status": ".status",
    "page_status": ".status span",
}
LAST_PAGE_ATTRIBUTE = "data-gotopage"
DETAILS_URL_ATTRIBUTE = "data-markurl"
SEARCH_ID_MARKER = "?s="


class RecordExtractor:
    """
    Turns one results page into trademark records plus its declared page count.

    A missing required element rejects the whole page. Logos and row statuses
    are optional.
    """

    def __init__(self, *, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def parse(self, html_text: str) -> ResultPage:
        soup = BeautifulSoup(html_text, "html.parser")
        total_pages = self.total_pages(soup)
        page_status = self._page_status(soup)

        records: dict[str, TrademarkRecord] = {}
        for position, row_group in enumerate(soup.select(SELECTORS["row_group"])):
            record = self._parse_row_group(row_group, position=position, page_status=page_status)
            records[record.index] = record
        return ResultPage(records=records, total_pages=total_pages)

    @staticmethod
    def total_pages(soup: BeautifulSoup) -> int:
        # Without a last-page control the search fits on one page.
        control = soup.select_one(SELECTORS["last_page"])
        if control is None:
            return 1

        raw = control.get(LAST_PAGE_ATTRIBUTE)
        if raw is None or not re.fullmatch(r"\d+", str(raw).strip()):
            raise MalformedResultPage(
                f"Last page control has invalid {LAST_PAGE_ATTRIBUTE}={raw!r}"
            )
        return int(str(raw).strip()) + 1

    def _parse_row_group(self, row_group: Tag, *, position: int, page_status: str) -> TrademarkRecord:
        row = row_group.select_one(SELECTORS["row"])
        if row is None:
            raise MalformedResultPage(f"Result row missing at position={position}")

        details_path = row.get(DETAILS_URL_ATTRIBUTE)
        if not details_path:
            raise MalformedResultPage(
                f"Result row attribute {DETAILS_URL_ATTRIBUTE} missing at position={position}"
            )

        index = self._required_text(row, "index", position=position)
        if not index:
            raise MalformedResultPage(f"Result field 'index' is empty at position={position}")

        logo = row.select_one(SELECTORS["logo"])
        return TrademarkRecord(
            index=index,
            number=self._required_text(row, "number", position=position),
            logo_url=logo.get("src") if logo is not None else None,
            name=self._required_text(row, "name", position=position),
            trademark_class=self._required_text(row, "class", position=position),
            status=self._status(row, page_status=page_status),
            details_url=self._details_url(str(details_path)),
        )

    @staticmethod
    def _required_text(row: Tag, field: str, *, position: int) -> str:
        node = row.select_one(SELECTORS[field])
        if node is None:
            raise MalformedResultPage(f"Result field '{field}' missing at position={position}")
        return node.get_text().strip()

    @staticmethod
    def _status(row: Tag, *, page_status: str) -> str:
        # Row-level status first, then the page-level status element.
        node = row.select_one(SELECTORS["row_status"])
        row_status = node.get_text().strip() if node is not None else ""
        if row_status:
            return row_status
        return page_status

    @staticmethod
    def _page_status(soup: BeautifulSoup) -> str:
        node = soup.select_one(SELECTORS["page_status"])
        if node is None:
            return ""
        return node.get_text().strip()

    def _details_url(self, raw_path: str) -> str:
        path = raw_path.partition(SEARCH_ID_MARKER)[0]
        if urlsplit(path).scheme:
            return path
        return f"{self.base_url}/{path.lstrip('/')}"
