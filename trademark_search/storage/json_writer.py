"""
JSON writer for aggregated search results.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from trademark_search.logging_utils import log_event
from trademark_search.schemas import SearchResultsOutput
from trademark_search.types import AggregatedResults

logger = logging.getLogger(__name__)


def render_results(results: AggregatedResults) -> str:
    """
    Render results as the pretty-printed JSON document that gets persisted.
    """

    payload = SearchResultsOutput.from_results(results).to_payload()
    return json.dumps(payload, indent=4, ensure_ascii=False)


class ResultWriter:
    """
    Writes a completed result set to disk in one atomic replace.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath

    def write(self, results: AggregatedResults) -> Path:
        document = render_results(results)
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.filepath.name}.",
            suffix=".tmp",
            dir=self.filepath.parent,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(document)
            os.replace(tmp_name, self.filepath)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        log_event(
            logger,
            logging.INFO,
            "results_written",
            path=str(self.filepath),
            records=len(results),
        )
        return self.filepath
