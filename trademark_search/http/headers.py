"""
Browser-mimicking request header profiles.

Header sets a Chrome 125 desktop browser on Linux sends for each kind of
navigation on the portal.
"""

from __future__ import annotations

ACCEPT_DOCUMENT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,"
    "image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7"
)
SEC_CH_UA = '"Google Chrome";v="125", "Chromium";v="125", "Not.A/Brand";v="24"'


def _browser_headers(user_agent: str) -> dict[str, str]:
    return {
        "accept": ACCEPT_DOCUMENT,
        "accept-language": "en-US,en;q=0.9",
        "priority": "u=0, i",
        "sec-ch-ua": SEC_CH_UA,
        "sec-ch-ua-mobile": "?0",
        "sec-ch-ua-platform": '"Linux"',
        "sec-fetch-dest": "document",
        "sec-fetch-mode": "navigate",
        "sec-fetch-user": "?1",
        "upgrade-insecure-requests": "1",
        "user-agent": user_agent,
    }


def document_headers(*, user_agent: str) -> dict[str, str]:
    """
    Headers for a top-level navigation typed into the address bar.
    """

    return {**_browser_headers(user_agent), "sec-fetch-site": "none"}


def same_origin_navigation_headers(*, user_agent: str, referer: str) -> dict[str, str]:
    """
    Headers for a link-driven navigation inside the portal.
    """

    return {
        **_browser_headers(user_agent),
        "cache-control": "max-age=0",
        "referer": referer,
        "sec-fetch-site": "same-origin",
    }


def form_submission_headers(*, user_agent: str, origin: str, referer: str) -> dict[str, str]:
    """
    Headers for a url-encoded form POST inside the portal.
    """

    return {
        **same_origin_navigation_headers(user_agent=user_agent, referer=referer),
        "content-type": "application/x-www-form-urlencoded",
        "origin": origin,
    }
