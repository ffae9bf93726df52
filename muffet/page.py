"""Pages and the results of checking their links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Page:
    """An HTML page with its fragment ids and links.

    A link maps to ``None`` when it is valid, or to the error it raised.
    """

    url: str
    fragments: set[str] = field(default_factory=set)
    links: dict[str, Exception | None] = field(default_factory=dict)


@dataclass(frozen=True)
class SuccessLinkResult:
    url: str
    status_code: int


@dataclass(frozen=True)
class ErrorLinkResult:
    url: str
    error: Exception


@dataclass
class PageResult:
    """The outcome of checking every link on one page."""

    url: str
    success_link_results: list[SuccessLinkResult] = field(default_factory=list)
    error_link_results: list[ErrorLinkResult] = field(default_factory=list)

    def ok(self) -> bool:
        """Whether no link on the page failed."""
        return not self.error_link_results


def json_page_result(result: PageResult) -> dict[str, Any]:
    """Build the JSON-serializable form of a page result's failures."""
    return {
        "url": result.url,
        "links": [
            {"url": r.url, "error": str(r.error)} for r in result.error_link_results
        ],
    }