"""
Config helpers for trademark search.
"""

from trademark_search.config.loader import (
    get_trademark_search_settings,
    load_trademark_search_settings,
    resolve_output_path,
)
from trademark_search.config.models import TrademarkSearchSettings

__all__ = [
    "TrademarkSearchSettings",
    "get_trademark_search_settings",
    "load_trademark_search_settings",
    "resolve_output_path",
]
