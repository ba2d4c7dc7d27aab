"""
Advanced search form submission.
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlsplit

from trademark_search.config.models import TrademarkSearchSettings
from trademark_search.errors import InvalidQuery, SearchUuidNotFound
from trademark_search.http.headers import form_submission_headers
from trademark_search.logging_utils import log_event
from trademark_search.types import SearchSession

logger = logging.getLogger(__name__)

SEARCH_ID_PARAM = "s"

# Field order and defaults of the portal's advanced search form: one word in the
# first word slot, PART matching, AND operators, trademarks of every type.
_FORM_DEFAULTS_AFTER_KEYWORD: tuple[tuple[str, str], ...] = (
    ("wt[0]", "PART"),
    ("weOp[0]", "AND"),
    ("wv[1]", ""),
    ("wt[1]", "PART"),
    ("wrOp", "AND"),
    ("wv[2]", ""),
    ("wt[2]", "PART"),
    ("weOp[1]", "AND"),
    ("wv[3]", ""),
    ("wt[3]", "PART"),
    ("iv[0]", ""),
    ("it[0]", "PART"),
    ("ieOp[0]", "AND"),
    ("iv[1]", ""),
    ("it[1]", "PART"),
    ("irOp", "AND"),
    ("iv[2]", ""),
    ("it[2]", "PART"),
    ("ieOp[1]", "AND"),
    ("iv[3]", ""),
    ("it[3]", "PART"),
    ("wp", ""),
    ("_sw", "on"),
    ("classList", ""),
    ("ct", "A"),
    ("status", ""),
    ("dateType", "LODGEMENT_DATE"),
    ("fromDate", ""),
    ("toDate", ""),
    ("ia", ""),
    ("gsd", ""),
    ("endo", ""),
    ("nameField[0]", "OWNER"),
    ("name[0]", ""),
    ("attorney", ""),
    ("oAcn", ""),
    ("idList", ""),
    ("ir", ""),
    ("publicationFromDate", ""),
    ("publicationToDate", ""),
    ("i", ""),
    ("c", ""),
    ("originalSegment", ""),
)


class SearchSubmitter:
    """
    Posts the advanced search form and recovers the search id from the redirect.
    """

    def __init__(self, *, settings: TrademarkSearchSettings) -> None:
        self.settings = settings

    @staticmethod
    def validate_keyword(keyword: str) -> str:
        if not keyword:
            raise InvalidQuery("Please provide a search word")
        if any(char.isspace() for char in keyword):
            raise InvalidQuery("Spaces are not allowed in the search word")
        return keyword

    @staticmethod
    def build_form(*, csrf_token: str, keyword: str) -> list[tuple[str, str]]:
        return [
            ("_csrf", csrf_token),
            ("wv[0]", keyword),
            *_FORM_DEFAULTS_AFTER_KEYWORD,
        ]

    def submit(self, session: SearchSession, keyword: str) -> str:
        """
        Submit the search without following the redirect and return the search id.
        """

        self.validate_keyword(keyword)
        form = self.build_form(csrf_token=session.require_csrf_token(), keyword=keyword)
        response = session.http.send(
            "POST",
            self.settings.do_search_url,
            headers=form_submission_headers(
                user_agent=self.settings.user_agent,
                origin=self.settings.base_url,
                referer=self.settings.index_url,
            ),
            form=form,
            follow_redirects=False,
        )

        location = response.headers.get("Location")
        if not location:
            raise SearchUuidNotFound("Location header not present in response headers")

        search_id = self.parse_search_id(location)
        session.mark_search_submitted(search_id)
        log_event(
            logger,
            logging.INFO,
            "search_submitted",
            keyword=keyword,
            status_code=response.status_code,
            search_id=search_id,
        )
        return search_id

    @staticmethod
    def parse_search_id(location: str) -> str:
        values = parse_qs(urlsplit(location).query).get(SEARCH_ID_PARAM, [])
        if not values or not values[0]:
            raise SearchUuidNotFound("Search UUID not found in the redirect URL")
        return values[0]
