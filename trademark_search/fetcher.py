"""
Results page retrieval.
"""

from __future__ import annotations

import logging

from trademark_search.config.models import TrademarkSearchSettings
from trademark_search.http.headers import same_origin_navigation_headers
from trademark_search.logging_utils import log_event
from trademark_search.types import SearchSession

logger = logging.getLogger(__name__)


class ResultsFetcher:
    """
    Downloads one results page of an executed search.
    """

    def __init__(self, *, settings: TrademarkSearchSettings) -> None:
        self.settings = settings

    def fetch(self, session: SearchSession, search_id: str, page_index: int) -> str:
        if page_index < 0:
            raise ValueError(f"page_index must be zero or positive, got {page_index}")

        response = session.http.send(
            "GET",
            self.settings.results_url,
            headers=same_origin_navigation_headers(
                user_agent=self.settings.user_agent,
                referer=self.settings.index_url,
            ),
            query={"s": search_id, "p": page_index},
        )
        log_event(
            logger,
            logging.DEBUG,
            "results_page_fetched",
            search_id=search_id,
            page_index=page_index,
            status_code=response.status_code,
        )
        return response.body
