"""Top-level package for the MRT router project.

This package finds the route between two stations of a rail network
where changing lines at a shared station costs one transfer step, and
turns the resulting path into a readable itinerary.
"""

from .graph import (
    build_graph,
    build_network,
    describe_route,
    find_route,
    summarize_route,
)

__all__ = [
    "build_network",
    "build_graph",
    "find_route",
    "summarize_route",
    "describe_route",
]
