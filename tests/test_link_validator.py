from urllib.robotparser import RobotFileParser

import pytest

from muffet.link_validator import LinkValidator


@pytest.mark.parametrize(
    "url", ["http://foo.com", "http://foo.com/bar", "https://foo.com"]
)
def test_true_for_same_hostname(url):
    assert LinkValidator("foo.com").validate(url) is True


def test_false_for_different_hostname():
    assert LinkValidator("foo.com").validate("http://bar.com") is False


def test_validate_with_sitemap():
    validator = LinkValidator("foo.com", None, {"http://foo.com/foo"})
    assert validator.validate("http://foo.com/foo") is True
    assert validator.validate("http://foo.com/bar") is False


def test_validate_with_robots_txt():
    robots = RobotFileParser()
    robots.parse(
        """
        User-Agent: *
        Disallow: /bar
        """.splitlines()
    )
    validator = LinkValidator("foo.com", robots, None)
    assert validator.validate("http://foo.com/foo") is True
    assert validator.validate("http://foo.com/bar") is False