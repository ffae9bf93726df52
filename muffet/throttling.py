"""Connection and request-rate limiting."""

from __future__ import annotations

import threading
import time
from urllib.parse import urlsplit

from muffet.http_client import HttpClient, HttpResponse
from muffet.sync_utils import Semaphore


class RateLimiter:
    """Allows at most ``rate`` calls of ``take`` per second; 0 means unlimited."""

    def __init__(self, rate: int = 0) -> None:
        self._interval = 1.0 / rate if rate > 0 else 0.0
        self._lock = threading.Lock()
        self._next = 0.0

    def take(self) -> None:
        if not self._interval:
            return
        with self._lock:
            now = time.monotonic()
            wait = self._next - now
            self._next = max(now, self._next) + self._interval
        if wait > 0:
            time.sleep(wait)


class HostThrottler:
    """Limits connections and request rate for one host."""

    def __init__(self, requests_per_second: int, max_connections_per_host: int) -> None:
        self._limiter = RateLimiter(requests_per_second)
        self._connections = Semaphore(max_connections_per_host)

    def request(self) -> None:
        self._connections.request()
        self._limiter.take()

    def release(self) -> None:
        self._connections.release()


class HostThrottlerPool:
    """Hands out one throttler per host name."""

    def __init__(self, requests_per_second: int, max_connections_per_host: int) -> None:
        self._args = (requests_per_second, max_connections_per_host)
        self._lock = threading.Lock()
        self._hosts: dict[str, HostThrottler] = {}

    def get(self, name: str) -> HostThrottler:
        with self._lock:
            if name not in self._hosts:
                self._hosts[name] = HostThrottler(*self._args)
            return self._hosts[name]


class ThrottledHttpClient(HttpClient):
    """Wraps a client with global and per-host limits."""

    def __init__(
        self,
        client: HttpClient,
        requests_per_second: int,
        max_connections: int,
        max_connections_per_host: int,
    ) -> None:
        self._client = client
        self._connections = Semaphore(max_connections)
        self._pool = HostThrottlerPool(requests_per_second, max_connections_per_host)

    def get(self, url: str) -> HttpResponse:
        with self._connections:
            throttler = self._pool.get(urlsplit(url).hostname or "")
            throttler.request()
            try:
                return self._client.get(url)
            finally:
                throttler.release()