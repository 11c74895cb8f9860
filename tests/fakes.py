"""Test doubles: SWAPI documents, an in-memory fetcher and an HTTP transport."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

PERSON_URL = "https://swapi.test/api/people/1/"
HOMEWORLD_URL = "https://swapi.test/api/planets/1/"
FILM_1_URL = "https://swapi.test/api/films/1/"
FILM_2_URL = "https://swapi.test/api/films/2/"


def make_documents() -> dict[str, dict[str, Any]]:
    """SWAPI documents for Luke Skywalker, with a few ignored extra fields."""
    return {
        PERSON_URL: {
            "name": "Luke Skywalker",
            "height": "172",
            "mass": "77",
            "gender": "male",
            "homeworld": HOMEWORLD_URL,
            "films": [FILM_1_URL, FILM_2_URL],
            "url": PERSON_URL,
        },
        HOMEWORLD_URL: {
            "name": "Tatooine",
            "climate": "arid",
            "url": HOMEWORLD_URL,
        },
        FILM_1_URL: {
            "title": "A New Hope",
            "episode_id": 4,
            "director": "George Lucas",
            "release_date": "1977-05-25",
        },
        FILM_2_URL: {
            "title": "Empire Strikes Back",
            "episode_id": 5,
            "director": "Irvin Kershner",
            "release_date": "1980-05-21",
        },
    }


class FakeFetcher:
    """In-memory `JsonFetcher` with per-URL delays and injected failures.

    Records every call, the completion order, and how many fetches were in
    flight at the same time.
    """

    def __init__(
        self,
        documents: dict[str, dict[str, Any]],
        *,
        delays: dict[str, float] | None = None,
        failures: dict[str, Exception] | None = None,
    ) -> None:
        self.documents = documents
        self.delays = delays or {}
        self.failures = failures or {}
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.calls_at_first_completion: int | None = None
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, url, model):
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
            if url in self.failures:
                raise self.failures[url]
            document = model.model_validate(self.documents[url])
        finally:
            self.in_flight -= 1
            if url != PERSON_URL and self.calls_at_first_completion is None:
                self.calls_at_first_completion = len(self.calls)
        self.completed.append(url)
        return document


def make_transport(
    documents: dict[str, Any],
    status_codes: dict[str, int] | None = None,
) -> httpx.MockTransport:
    """Create an httpx.MockTransport serving `documents` keyed by URL.

    Unknown URLs answer 404.
    """
    codes = status_codes or {}
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        requested.append(url)
        if url not in documents:
            return httpx.Response(status_code=404, json={"detail": "Not found"})
        return httpx.Response(
            status_code=codes.get(url, 200),
            json=documents[url],
            headers={"Content-Type": "application/json"},
        )

    transport = httpx.MockTransport(handler)
    transport.requested = requested  # type: ignore[attr-defined]
    return transport
