"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
- where the city matrix CSV lives and how it is decoded
- which search algorithms the planner runs, and in which order
- logging level and format

Configuration can be overridden via environment variables:
- CITYROUTE_GRAPH_DATA_DIR=/path/to/data
- CITYROUTE_GRAPH_CITIES_FILE=turkish_cities.csv
- CITYROUTE_SEARCH_ALGORITHMS='["bfs"]'
- CITYROUTE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .graph.city_graph import INFINITY


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with CITYROUTE_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYROUTE_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    cities_file: str = "cities.csv"
    encoding: str = "utf-8"
    # Value substituted for cells that cannot be parsed as an integer.
    infinity_weight: int = INFINITY

    @field_validator("infinity_weight")
    @classmethod
    def check_infinity_is_no_edge(cls, value: int) -> int:
        if value < INFINITY:
            raise ValueError(f"infinity_weight must be at least {INFINITY}")
        return value

    @property
    def cities_path(self) -> Path:
        """Full path to the city adjacency matrix CSV file."""
        return self.data_dir / self.cities_file


class SearchConfig(BaseSettings):
    """Search algorithm selection.

    Environment variables prefixed with CITYROUTE_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYROUTE_SEARCH_")

    algorithms: List[Literal["dfs", "bfs"]] = Field(
        default_factory=lambda: ["dfs", "bfs"]
    )

    @field_validator("algorithms")
    @classmethod
    def check_algorithms_non_empty(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one search algorithm is required")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with CITYROUTE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYROUTE_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.cities_path)
        print(config.search.algorithms)

    Environment variables prefixed with CITYROUTE_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYROUTE_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply the observability settings to the root logger."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=config.format, force=True)
