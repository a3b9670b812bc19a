"""Route planner service - Main orchestrator.

This service loads the city graph, validates the requested cities and
runs every configured search strategy on the same query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from ..domain.models import RouteResult
from ..io.display import format_route_result
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


@dataclass
class RoutePlannerService:
    """Main service for planning a route between two cities.

    This service orchestrates:
    1. Graph loading
    2. City name validation
    3. One search per configured solver

    Attributes:
        graph_repository: Loads the city graph
        solvers: Route solvers, run in order
    """

    graph_repository: GraphRepositoryPort
    solvers: Sequence[RouteSolverPort]

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def available_cities(self) -> Tuple[str, ...]:
        """Return the city names of the loaded graph.

        Raises:
            GraphError: If the graph cannot be loaded.
        """
        return tuple(self.graph_repository.list_cities())

    def plan(self, departure: str, arrival: str) -> Tuple[RouteResult, ...]:
        """Run every solver between two cities.

        An unreachable destination yields an empty RouteResult for that
        solver instead of an error, so one strategy failing to find a
        route does not hide the others.

        Args:
            departure: Departure city name.
            arrival: Arrival city name.

        Returns:
            One RouteResult per solver, in solver order.

        Raises:
            GraphError: If the graph cannot be loaded.
            CityNotFoundError: If either city is not in the graph.
            CapacityExceededError: If a search open list overflows.
        """
        self._logger.info(
            "Planning route",
            extra={"departure": departure, "arrival": arrival},
        )

        graph = self.graph_repository.load()
        graph.require_city_index(departure)
        graph.require_city_index(arrival)

        results = tuple(
            solver.solve_safe(graph, departure, arrival) for solver in self.solvers
        )

        for result in results:
            self._logger.info(
                "Route computed",
                extra={
                    "algorithm": result.algorithm.name,
                    "stops": result.num_stops,
                    "cost": result.total_cost,
                    "elapsed_ms": result.elapsed_ms,
                },
            )

        return results

    def format_result(self, route: RouteResult) -> str:
        """Format a route result as a human-readable block."""
        return format_route_result(route)
