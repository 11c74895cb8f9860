"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP) and services read one consistent contract.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed + validated at the edge (env vars) without leaking into the Core.
    - The entry-point URL is injected here instead of being hard-coded in the
      aggregators, so tests never need the network.
    """

    model_config = SettingsConfigDict(
        env_prefix="SWAPI_AGG_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://swapi.dev/api",
        min_length=8,
        description="Root of the Star Wars API.",
    )
    person_url: str = Field(
        default="https://swapi.dev/api/people/1/",
        min_length=8,
        description="Primary entity fetched by the aggregate operation.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="swapi-aggregator/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    log_level: str = Field(
        default="INFO",
        min_length=1,
        description="Log level (DEBUG, INFO, WARNING, ERROR).",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="structlog renderer: 'console' for humans, 'json' for pipelines.",
    )
