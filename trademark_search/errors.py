"""
trademark_search/errors.py

Exception taxonomy for the search workflow.
"""

from __future__ import annotations


class TrademarkSearchError(Exception):
    """Base exception for trademark search failures."""

    default_message = "Trademark search failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidQuery(TrademarkSearchError, ValueError):
    """Raised when the search keyword fails validation."""

    default_message = "Search keyword must be a single word without spaces"


class CsrfTokenNotFound(TrademarkSearchError):
    """Raised when the index page carries no usable CSRF meta tag."""

    default_message = "CSRF token used to perform search was not extracted"


class SearchUuidNotFound(TrademarkSearchError):
    """Raised when the search redirect does not expose a search identifier."""

    default_message = "Search UUID not found in the search response"


class MalformedResultPage(TrademarkSearchError):
    """Raised when a results page is missing a required element."""

    default_message = "Results page layout did not match the expected structure"


class TransportError(TrademarkSearchError, RuntimeError):
    """Raised when the HTTP layer fails to produce a usable response."""

    default_message = "HTTP request failed"


class SearchStateError(RuntimeError):
    """
    Raised when the search session is driven out of order.
    """
