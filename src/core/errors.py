"""Fetch error taxonomy.

Every failure of a single GET surfaces as one of these. Nothing in the Core
recovers from them: they propagate through the aggregators to the caller.
"""

from __future__ import annotations


class FetchError(Exception):
    """Base class: a resource at `url` could not be obtained."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url


class NetworkError(FetchError):
    """Transport-level failure (DNS, connect, read, timeout)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(url, f"network error: {reason}")
        self.reason = reason


class HttpStatusError(FetchError):
    """The server answered with a 4xx/5xx status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(url, f"HTTP {status_code}")
        self.status_code = status_code


class DecodeError(FetchError):
    """Body is not JSON, or the JSON does not match the expected shape."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(url, f"decode error: {reason}")
        self.reason = reason
