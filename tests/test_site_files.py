import pytest

from muffet.http_client import HttpClient, HttpError, HttpResponse
from muffet.site_files import RobotsTxtFetcher, SiteFileError, SitemapFetcher


class FakeClient(HttpClient):
    def __init__(self, handler):
        self._handler = handler

    def get(self, url):
        return self._handler(url)


def response(status, url, content_type, body):
    return HttpResponse(url, status, {"Content-Type": content_type}, body)


def failing(url):
    raise HttpError("foo")


def test_fetch_robots_txt():
    def handler(url):
        if url != "http://foo.com/robots.txt":
            raise HttpError("")
        return response(
            200,
            "http://foo.com",
            "text/plain",
            b"""
            User-Agent: *
            Disallow: /bar
            """,
        )

    robots = RobotsTxtFetcher(FakeClient(handler)).fetch("http://foo.com")
    assert robots.can_fetch("foo", "/bar") is False
    assert robots.can_fetch("foo", "/baz") is True


def test_fail_to_fetch_robots_txt():
    with pytest.raises(SiteFileError) as info:
        RobotsTxtFetcher(FakeClient(failing)).fetch("http://foo.com")
    assert str(info.value) == "failed to fetch robots.txt: foo"


def test_fetch_sitemap():
    def handler(url):
        if url != "http://foo.com/sitemap.xml":
            raise HttpError("")
        return response(
            200,
            "http://foo.com",
            "text/xml",
            b"""
            <?xml version="1.0" encoding="UTF-8"?>
            <urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
                <url>
                    <loc>http://foo.com/bar</loc>
                </url>
            </urlset>
            """,
        )

    urls = SitemapFetcher(FakeClient(handler)).fetch("http://foo.com")
    assert urls == {"http://foo.com/bar"}


def test_fail_to_fetch_sitemap():
    with pytest.raises(SiteFileError) as info:
        SitemapFetcher(FakeClient(failing)).fetch("http://foo.com")
    assert str(info.value) == "failed to GET sitemap.xml: foo"


def test_fail_to_parse_sitemap():
    client = FakeClient(lambda url: response(200, "", "text/xml", b"<"))
    with pytest.raises(SiteFileError) as info:
        SitemapFetcher(client).fetch("http://foo.com")
    assert str(info.value).startswith("failed to parse sitemap.xml: ")