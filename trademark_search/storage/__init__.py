"""
Storage layer exports.
"""

from trademark_search.storage.json_writer import ResultWriter, render_results

__all__ = ["ResultWriter", "render_results"]
