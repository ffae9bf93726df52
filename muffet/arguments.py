"""Command-line argument parsing."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field
from typing import Iterable, NoReturn

from muffet.config import Color


class ArgumentError(ValueError):
    """Raised for invalid command-line arguments."""


@dataclass
class Arguments:
    """Parsed command-line options."""

    url: str = ""
    buffer_size: int = 4096
    max_connections: int = 512
    max_connections_per_host: int = 512
    excluded_patterns: list[re.Pattern[str]] = field(default_factory=list)
    follow_robots_txt: bool = False
    follow_sitemap_xml: bool = False
    headers: dict[str, str] = field(default_factory=dict)
    ignore_fragments: bool = False
    json_output: bool = False
    max_redirections: int = 64
    rate_limit: int = 0
    timeout: int = 10
    verbose: bool = False
    proxy: str = ""
    skip_tls_verification: bool = False
    one_page_only: bool = False
    color: Color = Color.AUTO
    help: bool = False
    version: bool = False


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def _parser() -> _Parser:
    p = _Parser(
        prog="muffet",
        usage="%(prog)s [options] <url>",
        add_help=False,
        allow_abbrev=False,
    )
    p.add_argument("-b", "--buffer-size", type=int, default=4096, metavar="<size>",
                   help="HTTP response buffer size in bytes (default: 4096)")
    p.add_argument("-c", "--max-connections", type=int, default=512, metavar="<count>",
                   help="Maximum number of HTTP connections (default: 512)")
    p.add_argument("--max-connections-per-host", type=int, default=512, metavar="<count>",
                   help="Maximum number of HTTP connections per host (default: 512)")
    p.add_argument("-e", "--exclude", action="append", default=[], metavar="<pattern>",
                   help="Exclude URLs matched with given regular expressions")
    p.add_argument("--follow-robots-txt", action="store_true",
                   help="Follow robots.txt when scraping pages")
    p.add_argument("--follow-sitemap-xml", action="store_true",
                   help="Scrape only pages listed in sitemap.xml")
    p.add_argument("--header", action="append", default=[], metavar="<header>",
                   help="Custom headers")
    p.add_argument("-f", "--ignore-fragments", action="store_true",
                   help="Ignore URL fragments")
    p.add_argument("--json", action="store_true", help="Output results in JSON")
    p.add_argument("-r", "--max-redirections", type=int, default=64, metavar="<count>",
                   help="Maximum number of redirections (default: 64)")
    p.add_argument("--rate-limit", type=int, default=0, metavar="<rate>",
                   help="Max requests per second")
    p.add_argument("-t", "--timeout", type=int, default=10, metavar="<seconds>",
                   help="Timeout for HTTP requests in seconds (default: 10)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Show successful results too")
    p.add_argument("--proxy", default="", metavar="<host>", help="HTTP proxy host")
    p.add_argument("--skip-tls-verification", action="store_true",
                   help="Skip TLS certificate verification")
    p.add_argument("--one-page-only", action="store_true",
                   help="Only check links found in the given URL")
    p.add_argument("--color", choices=[c.value for c in Color], default=Color.AUTO.value,
                   help="Color output (default: auto)")
    p.add_argument("-h", "--help", action="store_true", help="Show this help")
    p.add_argument("--version", action="store_true", help="Show version")
    p.add_argument("url", nargs="*", help=argparse.SUPPRESS)
    return p


def get_arguments(argv: Iterable[str]) -> Arguments:
    """Parse command-line arguments, raising ArgumentError when they are invalid."""
    ns = _parser().parse_intermixed_args(list(argv))

    args = Arguments(
        buffer_size=ns.buffer_size,
        max_connections=ns.max_connections,
        max_connections_per_host=ns.max_connections_per_host,
        follow_robots_txt=ns.follow_robots_txt,
        follow_sitemap_xml=ns.follow_sitemap_xml,
        ignore_fragments=ns.ignore_fragments,
        json_output=ns.json,
        max_redirections=ns.max_redirections,
        rate_limit=ns.rate_limit,
        timeout=ns.timeout,
        verbose=ns.verbose,
        proxy=ns.proxy,
        skip_tls_verification=ns.skip_tls_verification,
        one_page_only=ns.one_page_only,
        color=Color(ns.color),
        help=ns.help,
        version=ns.version,
    )

    if args.help or args.version:
        return args
    if len(ns.url) != 1:
        raise ArgumentError("invalid number of arguments")

    args.url = ns.url[0]
    args.excluded_patterns = compile_regexps(ns.exclude)
    args.headers = parse_headers(ns.header)
    return args


def help_text() -> str:
    """Return the usage and option help."""
    return _parser().format_help()


def compile_regexps(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile regular expressions, raising ArgumentError on an invalid one."""
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as error:
            raise ArgumentError(str(error)) from error
    return compiled


def parse_headers(headers: Iterable[str] | None) -> dict[str, str]:
    """Parse ``Name: value`` strings into a mapping."""
    parsed = {}
    for header in headers or ():
        name, sep, value = header.partition(":")
        if not sep:
            raise ArgumentError("invalid header format")
        parsed[name] = value.strip()
    return parsed