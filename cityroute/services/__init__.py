"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Runs the configured route searches for a query
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
