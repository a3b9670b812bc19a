"""Typed domain errors for the city route finder.

All errors inherit from CityRouteError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CityRouteError(Exception):
    """Base error for the city route finder.

    All domain-specific errors inherit from this class.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(CityRouteError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class CityNotFoundError(CityRouteError):
    """City name not found in the graph.

    Attributes:
        city_name: The city name that was not found
    """

    city_name: str = ""


@dataclass
class NoRouteFoundError(CityRouteError):
    """No path exists between the requested cities.

    Attributes:
        departure: Departure city name
        arrival: Arrival city name
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class CapacityExceededError(CityRouteError):
    """A bounded container was asked to hold more than its capacity.

    Attributes:
        capacity: The fixed capacity that was exceeded
    """

    capacity: int = 0


@dataclass
class EmptyAccessError(CityRouteError):
    """An element was requested from an empty container."""


@dataclass
class ConfigurationError(CityRouteError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
