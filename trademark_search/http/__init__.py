"""
HTTP layer exports.
"""

from trademark_search.http.headers import (
    document_headers,
    form_submission_headers,
    same_origin_navigation_headers,
)
from trademark_search.http.session import HttpResponse, HttpSession

__all__ = [
    "HttpResponse",
    "HttpSession",
    "document_headers",
    "form_submission_headers",
    "same_origin_navigation_headers",
]
