"""Services layer - Application use cases.

Services orchestrate the network loader and the routing core.
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
