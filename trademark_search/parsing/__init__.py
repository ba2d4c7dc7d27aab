"""
HTML parsing layer exports.
"""

from trademark_search.parsing.csrf import CsrfExtractor
from trademark_search.parsing.results_parser import RecordExtractor

__all__ = ["CsrfExtractor", "RecordExtractor"]
