"""Weighted city graph and its two path-search strategies.

The graph is an adjacency matrix over an ordered list of city names.
Two traversals are offered:

* a depth-first search that keeps exploring after the first arrival
  and prunes nodes that are no cheaper than the best one already seen
  for their city;
* a breadth-first search that relaxes per-city path costs and never
  expands the destination.

Neither is a guaranteed shortest-path algorithm on weighted graphs: the
open lists are a plain stack and a plain FIFO queue, not a priority
queue ordered by cost.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Tuple, cast

from ..domain.errors import CityNotFoundError, GraphError
from ..domain.models import PathNode
from .containers import BoundedQueue, BoundedStack

# Weights outside the open interval (NO_EDGE, INFINITY) mean "no edge".
NO_EDGE = 0
INFINITY = 99999


def is_edge(weight: int) -> bool:
    """Return True if ``weight`` denotes a traversable edge."""
    return NO_EDGE < weight < INFINITY


class CityGraph:
    """Read-only city graph backed by an adjacency matrix.

    Parameters
    ----------
    cities:
        Ordered, unique city names. The position of a name is its index
        in the matrix.
    adjacency_matrix:
        Square matrix where ``[i][j]`` is the cost of travelling from
        city ``i`` to city ``j``.

    Raises
    ------
    GraphError
        If a city name is repeated or the matrix is not N x N.
    """

    def __init__(
        self, cities: Sequence[str], adjacency_matrix: Sequence[Sequence[int]]
    ) -> None:
        self._cities: Tuple[str, ...] = tuple(cities)
        size = len(self._cities)

        if len(adjacency_matrix) != size or any(
            len(row) != size for row in adjacency_matrix
        ):
            raise GraphError(
                f"Adjacency matrix must be {size}x{size} to match the city list"
            )

        self._matrix: Tuple[Tuple[int, ...], ...] = tuple(
            tuple(int(weight) for weight in row) for row in adjacency_matrix
        )

        self._index: Dict[str, int] = {}
        for i, name in enumerate(self._cities):
            if name in self._index:
                raise GraphError(f"Duplicate city name: {name!r}")
            self._index[name] = i

    @property
    def cities(self) -> Tuple[str, ...]:
        return self._cities

    @property
    def adjacency_matrix(self) -> Tuple[Tuple[int, ...], ...]:
        return self._matrix

    @property
    def num_cities(self) -> int:
        return len(self._cities)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._cities)

    def get_city_index(self, name: str) -> int:
        """Return the index of ``name``, or -1 if the city is unknown."""
        return self._index.get(name, -1)

    def require_city_index(self, name: str) -> int:
        """Return the index of ``name``.

        Raises
        ------
        CityNotFoundError
            If the city is unknown.
        """
        index = self.get_city_index(name)
        if index == -1:
            raise CityNotFoundError(f"Unknown city: {name}", city_name=name)
        return index

    def city_name(self, index: int) -> str:
        return self._cities[index]

    def find_shortest_path_dfs(self, start_city: str, end_city: str) -> List[PathNode]:
        """Search a route with a depth-first open list and cost pruning.

        The search does not stop at the first arrival: every node popped
        from the stack is expanded unless its city was already reached
        at an equal or lower cost. The cheapest arrival seen wins.

        Returns
        -------
        list[PathNode]
            Nodes from start to end, or an empty list if ``end_city`` is
            unreachable.

        Raises
        ------
        CityNotFoundError
            If either city is unknown.
        CapacityExceededError
            If the open list outgrows ``num_cities ** 2`` entries.
        """
        start = self.require_city_index(start_city)
        end = self.require_city_index(end_city)
        n = self.num_cities

        open_list: BoundedStack[PathNode] = BoundedStack(n * n)
        visited = [False] * n
        best_path_nodes: List[Optional[PathNode]] = [None] * n
        best_node: Optional[PathNode] = None

        open_list.push(PathNode(start, None, 0))

        while not open_list.is_empty():
            current = cast(PathNode, open_list.pop())
            city = current.city_index

            recorded = best_path_nodes[city]
            if (
                visited[city]
                and recorded is not None
                and recorded.path_cost <= current.path_cost
            ):
                continue

            visited[city] = True
            best_path_nodes[city] = current

            if city == end and (
                best_node is None or current.path_cost < best_node.path_cost
            ):
                best_node = current

            for neighbor, weight in enumerate(self._matrix[city]):
                if not is_edge(weight):
                    continue
                new_cost = current.path_cost + weight
                known = best_path_nodes[neighbor]
                # Best-known costs ignore nodes still waiting on the stack.
                if not visited[neighbor] or (
                    known is not None and new_cost < known.path_cost
                ):
                    open_list.push(PathNode(neighbor, current, new_cost))

        return self.construct_path(best_node)

    def find_shortest_path_bfs(self, start_city: str, end_city: str) -> List[PathNode]:
        """Search a route with a FIFO open list and per-city cost relaxation.

        A successor is enqueued only when it improves the best cost known
        for its city. Nodes for ``end_city`` are recorded but never
        expanded.

        Returns
        -------
        list[PathNode]
            Nodes from start to end, or an empty list if ``end_city`` is
            unreachable.

        Raises
        ------
        CityNotFoundError
            If either city is unknown.
        CapacityExceededError
            If the open list outgrows ``num_cities ** 2`` entries.
        """
        start = self.require_city_index(start_city)
        end = self.require_city_index(end_city)
        n = self.num_cities

        open_list: BoundedQueue[PathNode] = BoundedQueue(n * n)
        path_costs: List[float] = [math.inf] * n
        best_node: Optional[PathNode] = None

        open_list.enqueue(PathNode(start, None, 0))
        path_costs[start] = 0

        while not open_list.is_empty():
            current = cast(PathNode, open_list.dequeue())

            if current.city_index == end:
                if best_node is None or current.path_cost < best_node.path_cost:
                    best_node = current
                continue

            for neighbor, weight in enumerate(self._matrix[current.city_index]):
                if not is_edge(weight):
                    continue
                new_cost = current.path_cost + weight
                if new_cost < path_costs[neighbor]:
                    path_costs[neighbor] = new_cost
                    open_list.enqueue(PathNode(neighbor, current, new_cost))

        return self.construct_path(best_node)

    @staticmethod
    def construct_path(end_node: Optional[PathNode]) -> List[PathNode]:
        """Walk parent links back from ``end_node`` and return start-to-end order."""
        path: List[PathNode] = []
        current = end_node
        while current is not None:
            path.append(current)
            current = current.parent
        path.reverse()
        return path
