"""JSON fetcher contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The HTTP adapter and in-memory fakes used by tests are interchangeable.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


@runtime_checkable
class JsonFetcher(Protocol):
    """Minimal contract for obtaining one typed document.

    Design rules:
    - `fetch` is asynchronous because it does I/O (HTTP).
    - The expected shape is chosen by the call site through `model`.
    - Failures raise `core.errors.FetchError` subclasses; no retries.
    """

    async def fetch(self, url: str, model: type[ModelT]) -> ModelT:
        """GET `url` and decode the body into `model`."""

        ...
