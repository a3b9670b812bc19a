"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations, including
loading the city network and searching routes through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RouteResult, SearchAlgorithm
    from ..graph.city_graph import CityGraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the
    city network from persistent storage.
    """

    def load(self) -> CityGraph:
        """Load the city graph.

        Returns:
            The graph built from the configured data source.
        """
        ...

    def list_cities(self) -> Sequence[str]:
        """List all city names in graph order."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/search_solver.py
    """

    @property
    def algorithm(self) -> SearchAlgorithm:
        """Search strategy this solver runs."""
        ...

    def solve(self, graph: CityGraph, departure: str, arrival: str) -> RouteResult:
        """Find a route between two cities.

        Args:
            graph: The city network.
            departure: Departure city name.
            arrival: Arrival city name.

        Returns:
            RouteResult with path, cost and elapsed time.
        """
        ...

    def solve_safe(
        self, graph: CityGraph, departure: str, arrival: str
    ) -> RouteResult:
        """Like solve(), but return an empty RouteResult instead of raising."""
        ...
