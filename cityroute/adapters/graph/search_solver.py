"""Search Route Solver adapter.

This adapter wraps the CityGraph traversals and adds:
- Domain model output (RouteResult with city names)
- Wall-clock timing of each search
- Typed error handling
- Logging
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List

from ...domain.errors import CityNotFoundError, NoRouteFoundError
from ...domain.models import PathNode, RouteResult, SearchAlgorithm
from ...graph.city_graph import CityGraph


@dataclass
class SearchRouteSolver:
    """Route solver running one of the CityGraph search strategies.

    This adapter implements RouteSolverPort.

    Attributes:
        algorithm: Which traversal to run (DFS or BFS)
    """

    algorithm: SearchAlgorithm = SearchAlgorithm.BFS
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: CityGraph, departure: str, arrival: str) -> RouteResult:
        """Find a route between two cities.

        Args:
            graph: The city network.
            departure: Departure city name.
            arrival: Arrival city name.

        Returns:
            RouteResult with path, total cost and elapsed time.

        Raises:
            CityNotFoundError: If departure or arrival is not in the graph.
            NoRouteFoundError: If no path exists.
            CapacityExceededError: If the search open list overflows.
        """
        self._logger.debug(
            "Solving route",
            extra={
                "algorithm": self.algorithm.name,
                "departure": departure,
                "arrival": arrival,
            },
        )

        result = self._run(graph, departure, arrival)

        if result.is_empty:
            self._logger.warning(
                "No route found",
                extra={
                    "algorithm": self.algorithm.name,
                    "departure": departure,
                    "arrival": arrival,
                },
            )
            raise NoRouteFoundError(
                f"No path from {departure} to {arrival}",
                departure=departure,
                arrival=arrival,
            )

        self._logger.info(
            "Route found",
            extra={
                "algorithm": self.algorithm.name,
                "stops": result.num_stops,
                "cost": result.total_cost,
                "elapsed_ms": result.elapsed_ms,
            },
        )
        return result

    def solve_safe(
        self, graph: CityGraph, departure: str, arrival: str
    ) -> RouteResult:
        """Find a route, returning an empty result on lookup or routing failure.

        Like solve(), but unknown cities and unreachable destinations
        produce an empty RouteResult. Container overflow still raises.

        Args:
            graph: The city network.
            departure: Departure city name.
            arrival: Arrival city name.

        Returns:
            RouteResult with path and cost, or an empty result.
        """
        try:
            return self._run(graph, departure, arrival)
        except CityNotFoundError as e:
            self._logger.warning("Unknown city", extra={"city": e.city_name})
            return RouteResult(algorithm=self.algorithm, path=())

    def _run(self, graph: CityGraph, departure: str, arrival: str) -> RouteResult:
        search = self._search_for(graph)

        started = time.perf_counter()
        nodes = search(departure, arrival)
        elapsed_ms = (time.perf_counter() - started) * 1000.0

        if not nodes:
            return RouteResult(
                algorithm=self.algorithm, path=(), elapsed_ms=elapsed_ms
            )

        return RouteResult(
            algorithm=self.algorithm,
            path=tuple(graph.city_name(node.city_index) for node in nodes),
            total_cost=nodes[-1].path_cost,
            elapsed_ms=elapsed_ms,
        )

    def _search_for(
        self, graph: CityGraph
    ) -> Callable[[str, str], List[PathNode]]:
        if self.algorithm is SearchAlgorithm.DFS:
            return graph.find_shortest_path_dfs
        return graph.find_shortest_path_bfs
