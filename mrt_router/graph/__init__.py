"""Graph-related code for representing and searching the rail network.

This subpackage builds the network model and its edge set, runs the
route search and turns the resulting path into an itinerary.
"""

from .builder import RouteGraph, build_edges, build_graph
from .network import NetworkModel, build_network
from .search import EdgeWeights, RouteSearch, find_route
from .summary import describe_route, describe_summary, summarize_route

__all__ = [
    "NetworkModel",
    "build_network",
    "RouteGraph",
    "build_edges",
    "build_graph",
    "EdgeWeights",
    "RouteSearch",
    "find_route",
    "summarize_route",
    "describe_summary",
    "describe_route",
]
