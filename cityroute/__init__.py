"""Top-level package for the city route finder.

This package loads a weighted city adjacency matrix and searches a
route between two cities with a depth-first and a breadth-first
strategy, reporting path, cost and timing for each.
"""

from .domain.models import PathNode, RouteResult, SearchAlgorithm
from .graph.city_graph import CityGraph

__all__ = ["CityGraph", "PathNode", "RouteResult", "SearchAlgorithm"]
