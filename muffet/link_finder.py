"""Extracting links from HTML documents."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Iterable, Pattern
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

_VALID_SCHEMES = frozenset({"", "http", "https"})

_TAG_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "a": ("href",),
    "frame": ("src",),
    "iframe": ("src",),
    "img": ("src",),
    "link": ("href",),
    "script": ("src",),
    "source": ("src", "srcset"),
    "track": ("src",),
}

_IMAGE_DESCRIPTOR = re.compile(r" [^ ]*$")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2}).{0,2}", re.DOTALL)


def _url_scheme(s: str) -> str:
    """Return the scheme of a URL, raising ValueError if it is malformed."""
    if s.startswith(":"):
        raise ValueError(f'parse "{s}": missing protocol scheme')
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in s):
        raise ValueError(f'parse "{s}": invalid control character in URL')
    rest = s.partition("#")[0].partition("?")[0]
    if not _SCHEME.match(rest) and ":" in rest.split("/", 1)[0]:
        raise ValueError(f'parse "{s}": first path segment in URL cannot contain colon')
    bad = _BAD_ESCAPE.search(s)
    if bad:
        raise ValueError(f'parse "{s}": invalid URL escape "{bad.group()}"')
    try:
        parts = urlsplit(s)
        parts.port
    except ValueError as error:
        raise ValueError(f'parse "{s}": {error}') from error
    return parts.scheme


def _resolve(base: str, reference: str) -> str:
    parts = urlsplit(urljoin(base, reference))
    return urlunsplit(parts._replace(path=quote(parts.path, safe="/%:@!$&'()*+,;=~")))


@dataclass
class Element:
    """An HTML start tag with its attributes."""

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)


class _ElementCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.elements: list[Element] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        values: dict[str, str] = {}
        for name, value in attrs:
            values.setdefault(name, value or "")
        self.elements.append(Element(tag, values))


def parse_elements(body: bytes | str | None) -> list[Element]:
    """Return the elements of an HTML document in document order."""
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    collector = _ElementCollector()
    collector.feed(body or "")
    collector.close()
    return collector.elements


class LinkFinder:
    """Finds links in elements, skipping those matched by excluded patterns."""

    def __init__(self, excluded_patterns: Iterable[Pattern[str]] = ()) -> None:
        self._excluded_patterns = list(excluded_patterns)

    def find(self, elements: Iterable[Element], base: str) -> dict[str, Exception | None]:
        """Map each link to None, or to the error raised while parsing it."""
        links: dict[str, Exception | None] = {}
        for element in elements:
            for attribute in _TAG_ATTRIBUTES.get(element.tag, ()):
                value = element.attrs.get(attribute, "")
                if attribute == "srcset":
                    candidates = [_IMAGE_DESCRIPTOR.sub("", s.strip()) for s in value.split(",")]
                else:
                    candidates = [value]
                for candidate in candidates:
                    link = candidate.strip()
                    if not link or self.is_link_excluded(link):
                        continue
                    try:
                        scheme = _url_scheme(link)
                    except ValueError as error:
                        links[link] = error
                        continue
                    if scheme in _VALID_SCHEMES:
                        links[_resolve(base, link)] = None
        return links

    def is_link_excluded(self, url: str) -> bool:
        return any(pattern.search(url) for pattern in self._excluded_patterns)