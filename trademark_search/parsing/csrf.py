"""
CSRF token extraction from the advanced search page.
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from trademark_search.errors import CsrfTokenNotFound

CSRF_META_NAME = "_csrf"


class CsrfExtractor:
    """
    Reads the anti-forgery token the portal embeds in a `<meta name="_csrf">` tag.
    """

    def extract(self, html: str) -> str:
        soup = BeautifulSoup(html, "html.parser")
        tag = soup.find("meta", attrs={"name": CSRF_META_NAME})
        if tag is None:
            raise CsrfTokenNotFound()

        content = tag.get("content")
        if not content:
            raise CsrfTokenNotFound("CSRF meta tag has no content attribute")
        return content
