from muffet.formatter import PageResultFormatter
from muffet.page import ErrorLinkResult, PageResult, SuccessLinkResult

YELLOW_URL = "\x1b[33mhttp://foo.com\x1b[0m"
GREEN_200 = "\x1b[32m200\x1b[0m"
RED_500 = "\x1b[31m500\x1b[0m"


def test_format_empty_result():
    result = PageResult("http://foo.com")
    assert PageResultFormatter(False, True).format(result) == YELLOW_URL


def test_format_success_link_results():
    result = PageResult("http://foo.com", [SuccessLinkResult("http://foo.com", 200)])
    assert PageResultFormatter(False, True).format(result) == YELLOW_URL


def test_format_error_link_results():
    result = PageResult(
        "http://foo.com",
        [SuccessLinkResult("http://foo.com", 200)],
        [ErrorLinkResult("http://foo.com", Exception("500"))],
    )
    assert PageResultFormatter(False, True).format(result) == (
        f"{YELLOW_URL}\n\t{RED_500}\thttp://foo.com"
    )


def test_format_success_link_results_verbosely():
    result = PageResult("http://foo.com", [SuccessLinkResult("http://foo.com", 200)])
    assert PageResultFormatter(True, True).format(result) == (
        f"{YELLOW_URL}\n\t{GREEN_200}\thttp://foo.com"
    )


def test_format_error_link_results_verbosely():
    result = PageResult(
        "http://foo.com",
        [SuccessLinkResult("http://foo.com", 200)],
        [ErrorLinkResult("http://foo.com", Exception("500"))],
    )
    assert PageResultFormatter(True, True).format(result) == (
        f"{YELLOW_URL}\n\t{GREEN_200}\thttp://foo.com\n\t{RED_500}\thttp://foo.com"
    )


def test_sort_success_link_results():
    result = PageResult(
        "http://foo.com",
        [
            SuccessLinkResult("http://foo.com", 200),
            SuccessLinkResult("http://bar.com", 200),
        ],
    )
    assert PageResultFormatter(True, True).format(result) == (
        f"{YELLOW_URL}\n\t{GREEN_200}\thttp://bar.com\n\t{GREEN_200}\thttp://foo.com"
    )


def test_sort_error_link_results():
    result = PageResult(
        "http://foo.com",
        [],
        [
            ErrorLinkResult("http://foo.com", Exception("500")),
            ErrorLinkResult("http://bar.com", Exception("500")),
        ],
    )
    assert PageResultFormatter(False, True).format(result) == (
        f"{YELLOW_URL}\n\t{RED_500}\thttp://bar.com\n\t{RED_500}\thttp://foo.com"
    )


def test_format_without_color():
    result = PageResult(
        "http://foo.com",
        [SuccessLinkResult("http://foo.com/a", 200)],
        [ErrorLinkResult("http://foo.com/b", Exception("404"))],
    )
    assert PageResultFormatter(True, False).format(result) == (
        "http://foo.com\n\t200\thttp://foo.com/a\n\t404\thttp://foo.com/b"
    )