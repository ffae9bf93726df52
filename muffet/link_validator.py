"""Deciding which linked pages are themselves checked."""

from __future__ import annotations

from typing import AbstractSet, Any
from urllib.parse import urlsplit

from muffet.config import AGENT_NAME


class LinkValidator:
    """Accepts pages on one host, optionally limited by robots.txt and a sitemap."""

    def __init__(
        self,
        hostname: str,
        robots_data: Any = None,
        sitemap_urls: AbstractSet[str] | None = None,
    ) -> None:
        self._hostname = hostname
        self._robots_data = robots_data
        self._sitemap_urls = sitemap_urls

    def validate(self, url: str) -> bool:
        """Whether the page at the URL should be checked too."""
        if self._sitemap_urls is not None and url not in self._sitemap_urls:
            return False
        parts = urlsplit(url)
        if self._robots_data is not None and not self._robots_data.can_fetch(
            AGENT_NAME, parts.path
        ):
            return False
        return (parts.hostname or "") == self._hostname