"""Domain layer - Core network models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    InconsistentDataError,
    InvariantViolation,
    MRTRouterError,
    NetworkLoadError,
    NoRouteFoundError,
    NotFoundError,
    SearchCancelledError,
    StationNotFoundError,
)
from .models import (
    GraphEdge,
    GraphEdgeSummary,
    Language,
    Line,
    LocalizedName,
    NoRouteFound,
    RideEdge,
    Route,
    RouteOutcome,
    RoutePlan,
    Station,
    TransferEdge,
)

__all__ = [
    # Models
    "LocalizedName",
    "Language",
    "Station",
    "Line",
    "RideEdge",
    "TransferEdge",
    "GraphEdge",
    "GraphEdgeSummary",
    "Route",
    "NoRouteFound",
    "RouteOutcome",
    "RoutePlan",
    # Errors
    "MRTRouterError",
    "InconsistentDataError",
    "NotFoundError",
    "StationNotFoundError",
    "NoRouteFoundError",
    "SearchCancelledError",
    "NetworkLoadError",
    "ConfigurationError",
    "InvariantViolation",
]
