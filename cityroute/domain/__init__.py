"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CapacityExceededError,
    CityNotFoundError,
    CityRouteError,
    ConfigurationError,
    EmptyAccessError,
    GraphError,
    NoRouteFoundError,
)
from .models import PathNode, RouteResult, SearchAlgorithm

__all__ = [
    # Models
    "PathNode",
    "RouteResult",
    "SearchAlgorithm",
    # Errors
    "CityRouteError",
    "CapacityExceededError",
    "CityNotFoundError",
    "ConfigurationError",
    "EmptyAccessError",
    "GraphError",
    "NoRouteFoundError",
]
