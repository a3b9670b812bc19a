"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVMatrixRepository: Loads the city graph from a CSV matrix
- SearchRouteSolver: Finds routes with the DFS or BFS strategy
"""

from .csv_repository import CSVMatrixRepository
from .search_solver import SearchRouteSolver

__all__ = ["CSVMatrixRepository", "SearchRouteSolver"]
