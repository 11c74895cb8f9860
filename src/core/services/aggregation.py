"""Person aggregate orchestration.

One primary fetch (the person), then one dependent fetch per film plus one
for the homeworld, all in flight at the same time, then a synchronous join
into `PersonInfo`.

The same operation is exposed through three concurrency idioms:

- `CallbackAggregator`: futures chained with done-callbacks.
- `AwaitAggregator`: plain `async`/`await` with `asyncio.gather`.
- `StreamAggregator`: a single-element async stream with explicit states.

All of them share `fetch_person`, `dependent_fetches` and `join_person_info`,
so they produce equal results for equal responses. None of them catches a
`FetchError`: the first failure fails the whole operation, and a failed
primary fetch means no dependent fetch is ever issued.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from functools import partial
from typing import Any, Awaitable, Sequence

from core.config import AppSettings
from core.domain.models import Film, FilmSummary, Homeworld, Person, PersonInfo
from core.interfaces.aggregator import AggregateProducer
from core.interfaces.fetcher import JsonFetcher
from core.observability import get_logger

logger = get_logger(__name__)


class Variant(str, Enum):
    """Concurrency idiom used to run the aggregate operation."""

    CALLBACK = "callback"
    AWAIT = "await"
    STREAM = "stream"


async def fetch_person(fetcher: JsonFetcher, url: str) -> Person:
    return await fetcher.fetch(url, Person)


def dependent_fetches(
    fetcher: JsonFetcher,
    person: Person,
) -> tuple[list[Awaitable[Film]], Awaitable[Homeworld]]:
    """Derive the dependent fetches of `person`, film order preserved.

    Only coroutines are returned: nothing runs until the caller schedules
    them, which lets every variant start all of them together.
    """

    films = [fetcher.fetch(url, Film) for url in person.films]
    homeworld = fetcher.fetch(person.homeworld, Homeworld)
    return films, homeworld


def fan_out(fetcher: JsonFetcher, person: Person) -> asyncio.Future:
    """Schedule every dependent fetch at once.

    Resolves to `(films, homeworld)`; `films` is positional, so the order of
    `person.films` is kept whatever the completion order.
    """

    films, homeworld = dependent_fetches(fetcher, person)
    logger.debug("fan_out", person=person.name, films=len(films))
    return asyncio.gather(asyncio.gather(*films), homeworld)


def join_person_info(person: Person, films: Sequence[Film], homeworld: Homeworld) -> PersonInfo:
    if len(films) != len(person.films):
        raise ValueError(
            f"expected {len(person.films)} films for {person.name!r}, got {len(films)}"
        )
    return PersonInfo(
        name=person.name,
        height=person.height,
        gender=person.gender,
        homeworld=homeworld.name,
        films=[FilmSummary.from_film(film) for film in films],
    )


class _BaseAggregator:
    def __init__(self, fetcher: JsonFetcher, person_url: str | None = None) -> None:
        self._fetcher = fetcher
        self._person_url = person_url or AppSettings().person_url

    @property
    def person_url(self) -> str:
        return self._person_url


class CallbackAggregator(_BaseAggregator, AggregateProducer):
    """Future-based aggregate: each stage hands over to the next via callbacks."""

    def get_person_info(self) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        result: asyncio.Future = loop.create_future()
        primary = asyncio.ensure_future(fetch_person(self._fetcher, self._person_url))
        primary.add_done_callback(partial(self._on_person, result))
        return result

    def _on_person(self, result: asyncio.Future, primary: asyncio.Future) -> None:
        if not _forward_failure(primary, result):
            return
        person: Person = primary.result()
        dependents = fan_out(self._fetcher, person)
        dependents.add_done_callback(partial(self._on_dependents, result, person))

    def _on_dependents(self, result: asyncio.Future, person: Person, dependents: asyncio.Future) -> None:
        if not _forward_failure(dependents, result):
            return
        films, homeworld = dependents.result()
        try:
            info = join_person_info(person, films, homeworld)
        except Exception as exc:
            result.set_exception(exc)
            return
        logger.info("person_info_ready", variant=Variant.CALLBACK.value, person=info.name)
        result.set_result(info)


def _forward_failure(source: asyncio.Future, target: asyncio.Future) -> bool:
    """Copy a cancellation or exception of `source` onto `target`.

    Returns True when `source` succeeded and the chain should continue.
    """

    if target.done():
        if not source.cancelled():
            source.exception()
        return False
    if source.cancelled():
        target.cancel()
        return False
    exc = source.exception()
    if exc is not None:
        target.set_exception(exc)
        return False
    return True


class AwaitAggregator(_BaseAggregator, AggregateProducer):
    """Coroutine-based aggregate."""

    async def get_person_info(self) -> PersonInfo:
        person = await fetch_person(self._fetcher, self._person_url)
        films, homeworld = await fan_out(self._fetcher, person)
        info = join_person_info(person, films, homeworld)
        logger.info("person_info_ready", variant=Variant.AWAIT.value, person=info.name)
        return info


class StreamState(str, Enum):
    IDLE = "idle"
    PRIMARY_IN_FLIGHT = "primary_in_flight"
    DEPENDENTS_IN_FLIGHT = "dependents_in_flight"
    JOINING = "joining"
    COMPLETED = "completed"
    FAILED = "failed"


class PersonInfoStream:
    """Single-element, finite, non-restartable async stream of `PersonInfo`.

    Emits one value then completes, or raises the originating error once and
    then completes. Once terminated, further iteration yields nothing; a
    fresh stream comes from `StreamAggregator.stream()`.
    """

    def __init__(self, fetcher: JsonFetcher, person_url: str) -> None:
        self._fetcher = fetcher
        self._person_url = person_url
        self.state = StreamState.IDLE

    @property
    def terminated(self) -> bool:
        return self.state in (StreamState.COMPLETED, StreamState.FAILED)

    def __aiter__(self) -> "PersonInfoStream":
        return self

    async def __anext__(self) -> PersonInfo:
        if self.state is not StreamState.IDLE:
            raise StopAsyncIteration
        try:
            self.state = StreamState.PRIMARY_IN_FLIGHT
            person = await fetch_person(self._fetcher, self._person_url)
            self.state = StreamState.DEPENDENTS_IN_FLIGHT
            films, homeworld = await fan_out(self._fetcher, person)
            self.state = StreamState.JOINING
            info = join_person_info(person, films, homeworld)
        except BaseException:
            self.state = StreamState.FAILED
            raise
        self.state = StreamState.COMPLETED
        logger.info("person_info_ready", variant=Variant.STREAM.value, person=info.name)
        return info


class StreamAggregator(_BaseAggregator, AggregateProducer):
    """Stream-based aggregate."""

    def stream(self) -> PersonInfoStream:
        return PersonInfoStream(self._fetcher, self._person_url)

    async def get_person_info(self) -> PersonInfo:
        async for info in self.stream():
            return info
        raise RuntimeError("person info stream completed without a value")


_VARIANTS: dict[Variant, Any] = {
    Variant.CALLBACK: CallbackAggregator,
    Variant.AWAIT: AwaitAggregator,
    Variant.STREAM: StreamAggregator,
}


def build_aggregator(
    variant: Variant | str,
    fetcher: JsonFetcher,
    person_url: str | None = None,
) -> AggregateProducer:
    """Factory: pick the aggregate implementation for `variant`."""

    return _VARIANTS[Variant(variant)](fetcher, person_url)
