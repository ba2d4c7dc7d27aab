"""
trademark_search/service.py

Service facade running one search and persisting its results.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from trademark_search.config import TrademarkSearchSettings, get_trademark_search_settings
from trademark_search.engine import SearchOrchestrator
from trademark_search.storage import ResultWriter
from trademark_search.types import AggregatedResults


@dataclass(frozen=True)
class SearchRunSummary:
    """
    Outcome of one completed search run.
    """

    keyword: str
    results: AggregatedResults
    output_path: Path


class TrademarkSearchService:
    """
    Runs the search workflow and writes the aggregated results to JSON.
    """

    def __init__(
        self,
        *,
        settings: TrademarkSearchSettings | None = None,
        orchestrator: SearchOrchestrator | None = None,
    ) -> None:
        self._settings = settings or get_trademark_search_settings()
        self._orchestrator = orchestrator or SearchOrchestrator(settings=self._settings)

    def search(self, *, keyword: str, output_path: Path | None = None) -> SearchRunSummary:
        results = self._orchestrator.run(keyword)
        target = output_path or Path(self._settings.output_path)
        written = ResultWriter(target).write(results)
        return SearchRunSummary(keyword=keyword, results=results, output_path=written)
