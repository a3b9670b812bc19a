"""Graph-related utilities for representing the city network.

This subpackage contains modules to build an in-memory graph from CSV
data and to run path-finding algorithms on top of that graph.
"""

from .city_graph import INFINITY, NO_EDGE, CityGraph, is_edge
from .containers import BoundedQueue, BoundedStack
from .load_graph import load_matrix_csv

__all__ = [
    "CityGraph",
    "BoundedStack",
    "BoundedQueue",
    "load_matrix_csv",
    "is_edge",
    "NO_EDGE",
    "INFINITY",
]
