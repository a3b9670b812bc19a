"""CSV Graph Repository adapter.

This adapter wraps the CSV matrix loader and adds:
- Configuration injection (paths from config)
- Caching of the built graph
- Typed error handling
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...graph.city_graph import CityGraph
from ...graph.load_graph import load_matrix_csv


@dataclass
class CSVMatrixRepository:
    """Graph repository that loads an adjacency matrix from a CSV file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (data directory, file name, encoding)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[CityGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> CityGraph:
        """Load the city graph from the configured CSV file.

        Returns:
            The graph built from the file.

        Raises:
            GraphError: If the graph cannot be loaded.
            ConfigurationError: If infinity_weight would read as an edge.
        """
        if self._graph is not None:
            return self._graph

        path = self.config.cities_path
        self._logger.debug("Loading graph", extra={"cities_path": str(path)})

        try:
            cities, matrix = load_matrix_csv(
                path,
                encoding=self.config.encoding,
                infinity=self.config.infinity_weight,
            )
            graph = CityGraph(cities, matrix)
        except GraphError as e:
            if e.file_path is None:
                e.file_path = str(path)
            raise
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise GraphError(
                f"Failed to load graph: {e}",
                file_path=str(path),
                cause=e,
            )

        self._graph = graph
        self._logger.info("Graph loaded", extra={"cities": graph.num_cities})
        return graph

    def list_cities(self) -> Tuple[str, ...]:
        """List all city names in graph order.

        Raises:
            GraphError: If the graph cannot be loaded.
        """
        return self.load().cities

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
