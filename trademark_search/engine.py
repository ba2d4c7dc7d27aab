"""
Trademark search orchestration engine.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor

from trademark_search.config.models import TrademarkSearchSettings
from trademark_search.fetcher import ResultsFetcher
from trademark_search.http.headers import document_headers
from trademark_search.http.session import HttpSession
from trademark_search.logging_utils import log_event
from trademark_search.parsing.csrf import CsrfExtractor
from trademark_search.parsing.results_parser import RecordExtractor
from trademark_search.submitter import SearchSubmitter
from trademark_search.types import AggregatedResults, ResultPage, SearchSession

logger = logging.getLogger(__name__)


class SearchOrchestrator:
    """
    Drives index fetch, CSRF extraction, search submission and pagination.

    Any component error propagates unchanged and aborts the run; there is no
    partial result.
    """

    def __init__(
        self,
        *,
        settings: TrademarkSearchSettings,
        http: HttpSession | None = None,
        csrf_extractor: CsrfExtractor | None = None,
        submitter: SearchSubmitter | None = None,
        fetcher: ResultsFetcher | None = None,
        extractor: RecordExtractor | None = None,
    ) -> None:
        self._settings = settings
        self._http = http
        self._csrf_extractor = csrf_extractor or CsrfExtractor()
        self._submitter = submitter or SearchSubmitter(settings=settings)
        self._fetcher = fetcher or ResultsFetcher(settings=settings)
        self._extractor = extractor or RecordExtractor(base_url=settings.base_url)

    def run(self, keyword: str) -> AggregatedResults:
        self._submitter.validate_keyword(keyword)

        if self._http is not None:
            return self._run(SearchSession(self._http), keyword)

        with HttpSession(
            timeout_seconds=self._settings.timeout_seconds,
            max_redirects=self._settings.max_redirects,
        ) as http:
            return self._run(SearchSession(http), keyword)

    def _run(self, session: SearchSession, keyword: str) -> AggregatedResults:
        self._fetch_index(session)
        self._submitter.submit(session, keyword)
        search_id = session.require_search_id()

        session.mark_paginating()
        first_page = self._fetch_page(session, search_id, 0)
        total_pages = first_page.total_pages
        log_event(
            logger,
            logging.INFO,
            "pagination_discovered",
            search_id=search_id,
            total_pages=total_pages,
            records_on_first_page=len(first_page),
        )

        results = AggregatedResults()
        results.merge(first_page)
        for page_index, page in self._remaining_pages(session, search_id, total_pages):
            if page.total_pages != total_pages:
                log_event(
                    logger,
                    logging.INFO,
                    "total_pages_mismatch",
                    search_id=search_id,
                    page_index=page_index,
                    expected=total_pages,
                    reported=page.total_pages,
                )
            results.merge(page)

        session.mark_done()
        log_event(
            logger,
            logging.INFO,
            "search_completed",
            keyword=keyword,
            search_id=search_id,
            total_pages=total_pages,
            records=len(results),
        )
        return results

    def _fetch_index(self, session: SearchSession) -> None:
        response = session.http.send(
            "GET",
            self._settings.index_url,
            headers=document_headers(user_agent=self._settings.user_agent),
        )
        if not session.cookies:
            log_event(
                logger,
                logging.WARNING,
                "index_cookies_missing",
                url=self._settings.index_url,
                message="cookie store empty after index fetch; continuing without cookies",
            )
        session.mark_index_fetched(self._csrf_extractor.extract(response.body))

    def _fetch_page(self, session: SearchSession, search_id: str, page_index: int) -> ResultPage:
        html_text = self._fetcher.fetch(session, search_id, page_index)
        page = self._extractor.parse(html_text)
        log_event(
            logger,
            logging.INFO,
            "results_page_parsed",
            search_id=search_id,
            page_index=page_index,
            records=len(page),
        )
        return page

    def _remaining_pages(self, session: SearchSession, search_id: str, total_pages: int):
        """
        Yield `(page_index, page)` for pages 1..total_pages-1 in page order.
        """

        page_indexes = range(1, total_pages)
        if self._settings.page_workers <= 1 or len(page_indexes) <= 1:
            for page_index in page_indexes:
                yield page_index, self._fetch_page(session, search_id, page_index)
            return

        with ThreadPoolExecutor(max_workers=self._settings.page_workers) as executor:
            futures: list[tuple[int, Future[ResultPage]]] = [
                (page_index, executor.submit(self._fetch_page, session, search_id, page_index))
                for page_index in page_indexes
            ]
            try:
                for page_index, future in futures:
                    yield page_index, future.result()
            except BaseException:
                for _, future in futures:
                    future.cancel()
                raise
