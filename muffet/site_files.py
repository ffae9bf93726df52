"""Fetching robots.txt and sitemap.xml of a site."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from urllib.parse import urlsplit, urlunsplit
from urllib.robotparser import RobotFileParser

from muffet.http_client import HttpClient, HttpError


class SiteFileError(Exception):
    """Raised when a site file cannot be fetched or parsed."""


def _site_file_url(url: str, name: str) -> str:
    return urlunsplit(urlsplit(url)._replace(path="/" + name))


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


class RobotsTxtFetcher:
    """Fetches and parses a site's robots.txt."""

    def __init__(self, client: HttpClient) -> None:
        self._client = client

    def fetch(self, url: str) -> RobotFileParser:
        """Fetch robots.txt from the site of the URL."""
        try:
            body = self._client.get(_site_file_url(url, "robots.txt")).body()
        except (HttpError, ValueError) as error:
            raise SiteFileError(f"failed to fetch robots.txt: {error}") from error

        robots = RobotFileParser()
        robots.parse(body.decode("utf-8", errors="replace").splitlines())
        return robots


class SitemapFetcher:
    """Fetches a site's sitemap.xml and collects its page locations."""

    def __init__(self, client: HttpClient) -> None:
        self._client = client

    def fetch(self, url: str) -> set[str]:
        """Fetch sitemap.xml from the site of the URL and return its URLs."""
        try:
            body = self._client.get(_site_file_url(url, "sitemap.xml")).body()
        except (HttpError, ValueError) as error:
            raise SiteFileError(f"failed to GET sitemap.xml: {error}") from error

        body = body.strip()
        if not body:
            return set()
        try:
            root = ET.fromstring(body)
        except ET.ParseError as error:
            raise SiteFileError(f"failed to parse sitemap.xml: {error}") from error

        return {
            (child.text or "").strip()
            for element in root.iter()
            if _local_name(element.tag) == "url"
            for child in element
            if _local_name(child.tag) == "loc"
        }