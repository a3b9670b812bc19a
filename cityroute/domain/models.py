"""Immutable domain models for the city route finder.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies and represent the core
concepts of the application.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ConfigurationError


class SearchAlgorithm(Enum):
    """Traversal strategy used to look for a route."""

    DFS = "dfs"
    BFS = "bfs"

    @classmethod
    def from_name(cls, name: str) -> SearchAlgorithm:
        """Look up an algorithm by its case-insensitive name.

        Raises:
            ConfigurationError: If the name matches no algorithm.
        """
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown search algorithm: {name!r}",
                setting_name="algorithms",
                expected_type="dfs | bfs",
                cause=e,
            )


@dataclass(frozen=True, slots=True)
class PathNode:
    """A node of the search tree.

    Attributes:
        city_index: Index of the city in the graph's city list
        parent: Node this one was reached from (None for the start node)
        path_cost: Total edge cost from the start node to this node
    """

    city_index: int
    parent: Optional[PathNode] = None
    path_cost: int = 0


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of one route search between two cities.

    Attributes:
        algorithm: Search strategy that produced the route
        path: Ordered tuple of city names forming the route
        total_cost: Sum of the edge weights along the route
        elapsed_ms: Wall-clock duration of the search in milliseconds
    """

    algorithm: SearchAlgorithm
    path: tuple[str, ...]
    total_cost: int = 0
    elapsed_ms: float = 0.0

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.path)
