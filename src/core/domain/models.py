"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Decoding is also validation: a SWAPI document that does not have the
  expected shape fails at the Fetcher boundary instead of deep in the join.
- Models are frozen: each one is built once from fetched data and never
  mutated afterwards.

Note:
- These models describe *what* the data is, not *how* it is obtained.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Gender(str, Enum):
    """Gender as reported by the API.

    SWAPI also serves values such as "n/a" or "hermaphrodite"; those are
    folded into `UNKNOWN` instead of failing the whole aggregate.
    """

    MALE = "male"
    FEMALE = "female"
    DIVERS = "divers"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "Gender":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.UNKNOWN


class Person(BaseModel):
    """Primary entity: the person document the aggregate starts from."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., description="Full name of the character.")
    height: str = Field(
        ...,
        description="Height in centimeters, kept as the raw text served by the API.",
    )
    gender: Gender = Field(
        ...,
        description="Unrecognized values become `Gender.UNKNOWN`; a missing key is an error.",
    )
    homeworld: str = Field(..., min_length=1, description="URL of the homeworld planet.")
    films: list[str] = Field(
        ...,
        description="Film URLs, in the order served by the API.",
    )

    @field_validator("gender", mode="before")
    @classmethod
    def _coerce_gender(cls, value: Any) -> Gender:
        return Gender.parse(value)


class Film(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str
    director: str
    release_date: str = Field(..., description="ISO date text (YYYY-MM-DD).")


class Homeworld(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str


class FilmSummary(BaseModel):
    """Projection of a `Film` kept in the aggregate."""

    model_config = ConfigDict(frozen=True)

    title: str
    director: str
    release_date: str

    @classmethod
    def from_film(cls, film: Film) -> "FilmSummary":
        return cls(title=film.title, director=film.director, release_date=film.release_date)


class PersonInfo(BaseModel):
    """Aggregate: a person with its homeworld and films resolved.

    Invariants:
    - `homeworld` is the planet *name*, never its URL.
    - `films` has one entry per film reference of the source `Person`, in the
      same order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    height: str
    gender: Gender
    homeworld: str
    films: list[FilmSummary] = Field(default_factory=list)
