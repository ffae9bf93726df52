"""Human-readable formatting of page results."""

from __future__ import annotations

from typing import Iterable

from muffet.page import ErrorLinkResult, PageResult, SuccessLinkResult

_RED = 31
_GREEN = 32
_YELLOW = 33


class PageResultFormatter:
    """Formats a page result as its URL followed by one line per link."""

    def __init__(self, verbose: bool, color: bool) -> None:
        self._verbose = verbose
        self._color = color

    def format(self, result: PageResult) -> str:
        """Render a page result, listing successful links only when verbose."""
        lines: list[str] = []
        if self._verbose:
            lines.extend(self._format_successes(result.success_link_results))
        lines.extend(self._format_errors(result.error_link_results))

        return "\n".join([self._paint(result.url, _YELLOW), *("\t" + s for s in lines)])

    def _format_successes(self, results: Iterable[SuccessLinkResult]) -> list[str]:
        return sorted(
            f"{self._paint(str(r.status_code), _GREEN)}\t{r.url}" for r in results
        )

    def _format_errors(self, results: Iterable[ErrorLinkResult]) -> list[str]:
        return sorted(f"{self._paint(str(r.error), _RED)}\t{r.url}" for r in results)

    def _paint(self, text: str, code: int) -> str:
        if not self._color:
            return text
        return f"\x1b[{code}m{text}\x1b[0m"