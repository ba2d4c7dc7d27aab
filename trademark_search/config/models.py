"""
Search configuration models.
"""

from __future__ import annotations

from dataclasses import dataclass

ADVANCED_SEARCH_INDEX_PATH = "/trademarks/search/advanced"
ADVANCED_SEARCH_DO_SEARCH_PATH = "/trademarks/search/doSearch"
ADVANCED_SEARCH_RESULTS_PATH = "/trademarks/search/result"


@dataclass(frozen=True)
class TrademarkSearchSettings:
    """
    Runtime settings for one trademark search run.
    """

    base_url: str
    user_agent: str
    timeout_seconds: float
    max_redirects: int
    page_workers: int
    output_path: str

    @property
    def index_url(self) -> str:
        return f"{self.base_url}{ADVANCED_SEARCH_INDEX_PATH}"

    @property
    def do_search_url(self) -> str:
        return f"{self.base_url}{ADVANCED_SEARCH_DO_SEARCH_PATH}"

    @property
    def results_url(self) -> str:
        return f"{self.base_url}{ADVANCED_SEARCH_RESULTS_PATH}"
