"""Asynchronous aggregate producer contract."""

from __future__ import annotations

from typing import Awaitable, Protocol, runtime_checkable

from core.domain.models import PersonInfo


@runtime_checkable
class AggregateProducer(Protocol):
    """Anything that can produce one `PersonInfo` asynchronously.

    The returned awaitable may be a coroutine or a future; callers only
    `await` it. It resolves once every dependent fetch has succeeded, or
    raises the first `FetchError` encountered.
    """

    def get_person_info(self) -> Awaitable[PersonInfo]:
        ...
