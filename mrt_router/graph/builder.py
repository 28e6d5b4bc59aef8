"""Directed edge set derived from a network model.

Ride edges join adjacent stops of a line; transfer edges join adjacent
line-stop codes of one station. Both are emitted in each direction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence, Tuple, TypeVar

from ..domain.models import GraphEdge, RideEdge, TransferEdge
from .network import NetworkModel

T = TypeVar("T")

logger = logging.getLogger(__name__)


def pairwise(items: Sequence[T]) -> Iterator[Tuple[T, T]]:
    """Yield every adjacent pair ``(items[i], items[i + 1])``."""
    for index in range(len(items) - 1):
        yield items[index], items[index + 1]


@dataclass(frozen=True)
class RouteGraph:
    """Ordered edge set plus an adjacency index by origin code.

    Attributes:
        edges: All edges, lines first then stations, each in input order
    """

    edges: Tuple[GraphEdge, ...]
    _adjacency: Dict[str, Tuple[GraphEdge, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        adjacency: Dict[str, List[GraphEdge]] = {}
        for edge in self.edges:
            adjacency.setdefault(edge.origin, []).append(edge)
        object.__setattr__(
            self,
            "_adjacency",
            {code: tuple(out) for code, out in adjacency.items()},
        )

    def edges_from(self, code: str) -> Tuple[GraphEdge, ...]:
        """Return every edge leaving ``code``, in edge-set order."""
        return self._adjacency.get(code, ())

    def __len__(self) -> int:
        return len(self.edges)

    def __contains__(self, edge: object) -> bool:
        if not isinstance(edge, (RideEdge, TransferEdge)):
            return False
        return edge in self._adjacency.get(edge.origin, ())


def build_edges(network: NetworkModel) -> Tuple[GraphEdge, ...]:
    """Derive the directed edge set of a network.

    For every line, each adjacent pair of stops yields a forward and a
    reverse ride edge. For every station, each adjacent pair of its
    codes yields a forward and a reverse transfer edge, so a station
    with codes X1, X2, X3 is joined X1-X2 and X2-X3 but not X1-X3.

    The result depends only on the input order of lines and stations.
    """
    edges: List[GraphEdge] = []

    for line in network.lines:
        for first, second in pairwise(line.codes):
            edges.append(RideEdge(first, second, line))
            edges.append(RideEdge(second, first, line))

    for station in network.stations:
        for first, second in pairwise(station.codes):
            edges.append(TransferEdge(first, second))
            edges.append(TransferEdge(second, first))

    return tuple(edges)


def build_graph(network: NetworkModel) -> RouteGraph:
    """Build the searchable graph for a network."""
    graph = RouteGraph(build_edges(network))
    logger.debug(
        "Graph built",
        extra={
            "edges": len(graph),
            "transfers": sum(1 for edge in graph.edges if edge.is_transfer),
        },
    )
    return graph
