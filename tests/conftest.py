"""Shared fixtures for the swapi-aggregator test suite."""

from __future__ import annotations

from typing import Any

import pytest

from core.domain.models import Gender, PersonInfo
from fakes import FakeFetcher, make_documents


@pytest.fixture
def documents() -> dict[str, dict[str, Any]]:
    return make_documents()


@pytest.fixture
def fake_fetcher(documents) -> FakeFetcher:
    return FakeFetcher(documents)


@pytest.fixture
def expected_luke() -> PersonInfo:
    return PersonInfo.model_validate(
        {
            "name": "Luke Skywalker",
            "height": "172",
            "gender": Gender.MALE,
            "homeworld": "Tatooine",
            "films": [
                {
                    "title": "A New Hope",
                    "director": "George Lucas",
                    "release_date": "1977-05-25",
                },
                {
                    "title": "Empire Strikes Back",
                    "director": "Irvin Kershner",
                    "release_date": "1980-05-21",
                },
            ],
        }
    )
