"""HTTP client interfaces and their httpx implementation."""

from __future__ import annotations

import gzip
import zlib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping
from urllib.parse import urljoin

import brotli
import httpx

from muffet.config import TCP_TIMEOUT


class HttpError(Exception):
    """Raised when an HTTP request does not end in a successful response."""


def _lookup(headers: Mapping[str, str], name: str) -> str:
    lowered = name.lower()
    return next((v for k, v in headers.items() if k.lower() == lowered), "")


def include_header(headers: Mapping[str, str], name: str) -> bool:
    """Whether a header is present, comparing names case-insensitively."""
    lowered = name.lower()
    return any(k.lower() == lowered for k in headers)


def decode_body(content_encoding: str, data: bytes) -> bytes:
    """Decode a body according to its Content-Encoding."""
    try:
        if content_encoding == "gzip":
            return gzip.decompress(data)
        if content_encoding == "deflate":
            return zlib.decompress(data)
        if content_encoding == "br":
            return brotli.decompress(data)
    except (OSError, EOFError, zlib.error, brotli.error) as error:
        raise HttpError(str(error)) from error
    return data


@dataclass
class HttpResponse:
    """A successful HTTP response with its undecoded body."""

    url: str
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    def header(self, name: str) -> str:
        """Return a header value, or an empty string if absent."""
        return _lookup(self.headers, name)

    def body(self) -> bytes:
        """Return the body decoded according to its Content-Encoding."""
        return decode_body(self.header("Content-Encoding"), self.content)


@dataclass
class HttpClientOptions:
    max_connections_per_host: int = 512
    buffer_size: int = 4096
    max_redirections: int = 64
    proxy: str = ""
    skip_tls_verification: bool = False
    timeout: float = 10.0
    headers: dict[str, str] = field(default_factory=dict)


class HttpClient(ABC):
    @abstractmethod
    def get(self, url: str) -> HttpResponse:
        """Send a GET request; any non-2xx final status raises HttpError."""


class HttpClientFactory(ABC):
    @abstractmethod
    def create(self, options: HttpClientOptions) -> HttpClient:
        """Build a client from options."""


class HttpxHttpClient(HttpClient):
    """Sends GET requests with httpx, following redirects itself."""

    def __init__(
        self,
        client: httpx.Client,
        max_redirections: int,
        timeout: float,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._client = client
        self._max_redirections = max_redirections
        self._timeout = httpx.Timeout(timeout, connect=min(TCP_TIMEOUT, timeout))
        self._headers = dict(headers or {})

    def get(self, url: str) -> HttpResponse:
        headers = dict(self._headers)
        # Some servers require an explicit Accept header.
        if not include_header(headers, "Accept"):
            headers["Accept"] = "*/*"
        headers["Connection"] = "close"

        redirections = 0
        current = url
        while True:
            try:
                status, response_headers, content = self._send(current, headers)
            except (httpx.HTTPError, httpx.InvalidURL) as error:
                message = str(error)
                if redirections > 0:
                    message = f"{message} (following redirect {current})"
                raise HttpError(message) from error

            category = status // 100
            if category == 2:
                return HttpResponse(current, status, response_headers, content)
            if category != 3:
                raise HttpError(str(status))

            redirections += 1
            if redirections > self._max_redirections:
                raise HttpError("too many redirections")
            location = _lookup(response_headers, "Location")
            if not location:
                raise HttpError("location header not found")
            current = urljoin(current, location)

    def _send(self, url: str, headers: dict[str, str]) -> tuple[int, dict[str, str], bytes]:
        request = self._client.build_request("GET", url, headers=headers, timeout=self._timeout)
        response = self._client.send(request, stream=True)
        try:
            content = b"".join(response.iter_raw())
        finally:
            response.close()
        return response.status_code, dict(response.headers.items()), content

    def close(self) -> None:
        self._client.close()


class HttpxHttpClientFactory(HttpClientFactory):
    def create(self, options: HttpClientOptions) -> HttpClient:
        proxy = options.proxy
        if proxy and "://" not in proxy:
            proxy = "http://" + proxy
        client = httpx.Client(
            verify=not options.skip_tls_verification,
            proxy=proxy or None,
            limits=httpx.Limits(max_connections=options.max_connections_per_host),
            follow_redirects=False,
            trust_env=False,
        )
        client.headers.pop("User-Agent", None)
        return HttpxHttpClient(
            client, options.max_redirections, options.timeout, options.headers
        )