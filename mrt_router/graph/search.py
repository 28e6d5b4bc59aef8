"""Route search over the line-stop code graph.

With uniform edge weights (the default) the search is a breadth-first
traversal returning the path with the fewest edges, where one ride hop
and one change of lines cost the same. Non-uniform weights switch to
Dijkstra's algorithm over the same edge set.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, List, Optional, Set, Tuple

from ..config import RoutingConfig
from ..domain.errors import ConfigurationError, InvariantViolation, SearchCancelledError
from ..domain.models import GraphEdge, NoRouteFound, Route, RouteOutcome, Station
from .builder import RouteGraph, build_graph
from .network import NetworkModel

CancelCheck = Callable[[], bool]
EdgePath = Tuple[GraphEdge, ...]


@dataclass(frozen=True)
class EdgeWeights:
    """Cost of one ride hop and of one change of lines."""

    ride: int = 1
    transfer: int = 1

    def __post_init__(self) -> None:
        if self.ride < 1:
            raise ConfigurationError(
                f"Ride weight must be at least 1, got {self.ride}",
                setting_name="ride_weight",
            )
        if self.transfer < 1:
            raise ConfigurationError(
                f"Transfer weight must be at least 1, got {self.transfer}",
                setting_name="transfer_weight",
            )

    @property
    def is_uniform(self) -> bool:
        return self.ride == self.transfer

    def cost(self, edge: GraphEdge) -> int:
        return self.transfer if edge.is_transfer else self.ride

    @classmethod
    def from_config(cls, config: RoutingConfig) -> EdgeWeights:
        return cls(ride=config.ride_weight, transfer=config.transfer_weight)


@dataclass
class RouteSearch:
    """Route solver between two stations of a network.

    Each call to ``solve`` builds its own queue and visited set, so one
    instance can serve concurrent queries against a shared graph.

    Attributes:
        weights: Edge costs; uniform weights run breadth-first search
        max_expansions: Optional bound on expanded paths per search
    """

    weights: EdgeWeights = field(default_factory=EdgeWeights)
    max_expansions: Optional[int] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: RoutingConfig) -> RouteSearch:
        return cls(
            weights=EdgeWeights.from_config(config),
            max_expansions=config.max_expansions,
        )

    def solve(
        self,
        network: NetworkModel,
        graph: RouteGraph,
        start_station_id: str,
        destination_station_id: str,
        cancel: Optional[CancelCheck] = None,
    ) -> RouteOutcome:
        """Find a route between two stations.

        Args:
            network: The network the graph was built from.
            graph: Edge set produced by ``build_graph``.
            start_station_id: Id of the departure station.
            destination_station_id: Id of the arrival station.
            cancel: Optional callable polled between expansions.

        Returns:
            A Route, or NoRouteFound if the stations are not connected.

        Raises:
            StationNotFoundError: If either station id is unknown.
            SearchCancelledError: If ``cancel`` returned True or the
                expansion bound was reached.
        """
        start = network.get_station(start_station_id)
        destination = network.get_station(destination_station_id)

        self._logger.debug(
            "Searching route",
            extra={
                "start": start.id,
                "destination": destination.id,
                "uniform": self.weights.is_uniform,
            },
        )

        if start.id == destination.id:
            return Route()

        if self.weights.is_uniform:
            path = self._breadth_first(graph, start, destination, cancel)
        else:
            path = self._cheapest_first(graph, start, destination, cancel)

        if path is None:
            self._logger.warning(
                "No route found",
                extra={"start": start.id, "destination": destination.id},
            )
            return NoRouteFound(start.id, destination.id)

        route = Route(path)
        self._logger.info(
            "Route found",
            extra={
                "start": start.id,
                "destination": destination.id,
                "edges": route.num_edges,
                "transfers": route.num_transfers,
            },
        )
        return route

    def _check_cancelled(self, expansions: int, cancel: Optional[CancelCheck]) -> None:
        if cancel is not None and cancel():
            raise SearchCancelledError("Route search cancelled", expansions=expansions)

    def _check_bound(self, expansions: int) -> None:
        if self.max_expansions is not None and expansions >= self.max_expansions:
            raise SearchCancelledError(
                f"Route search exceeded {self.max_expansions} expansions",
                expansions=expansions,
            )

    def _breadth_first(
        self,
        graph: RouteGraph,
        start: Station,
        destination: Station,
        cancel: Optional[CancelCheck],
    ) -> Optional[EdgePath]:
        targets = set(destination.codes)
        visited: Set[str] = set(start.codes)
        queue: Deque[EdgePath] = deque()

        # Seed with ride edges only: a route always begins by boarding.
        for code in start.codes:
            for edge in graph.edges_from(code):
                if edge.is_transfer or edge.destination in visited:
                    continue
                visited.add(edge.destination)
                queue.append((edge,))

        expansions = 0
        while queue:
            self._check_cancelled(expansions, cancel)
            path = queue.popleft()
            if not path:
                raise InvariantViolation("Path cannot be empty")

            reached = path[-1].destination
            if reached in targets:
                self._logger.debug("Search finished", extra={"expansions": expansions})
                return path

            self._check_bound(expansions)
            expansions += 1
            for edge in graph.edges_from(reached):
                if edge.destination in visited:
                    continue
                visited.add(edge.destination)
                queue.append(path + (edge,))

        return None

    def _cheapest_first(
        self,
        graph: RouteGraph,
        start: Station,
        destination: Station,
        cancel: Optional[CancelCheck],
    ) -> Optional[EdgePath]:
        targets = set(destination.codes)
        origins = set(start.codes)
        costs: Dict[str, int] = {code: 0 for code in origins}
        previous: Dict[str, GraphEdge] = {}
        order = itertools.count()
        heap: List[Tuple[int, int, str]] = []

        for code in start.codes:
            for edge in graph.edges_from(code):
                if edge.is_transfer:
                    continue
                cost = self.weights.cost(edge)
                if cost < costs.get(edge.destination, cost + 1):
                    costs[edge.destination] = cost
                    previous[edge.destination] = edge
                    heapq.heappush(heap, (cost, next(order), edge.destination))

        settled: Set[str] = set(origins)
        expansions = 0
        while heap:
            self._check_cancelled(expansions, cancel)
            cost, _, code = heapq.heappop(heap)
            if code in settled:
                continue
            settled.add(code)

            if code in targets:
                self._logger.debug("Search finished", extra={"expansions": expansions})
                return self._unwind(previous, code)

            self._check_bound(expansions)
            expansions += 1
            for edge in graph.edges_from(code):
                if edge.destination in settled:
                    continue
                new_cost = cost + self.weights.cost(edge)
                if new_cost < costs.get(edge.destination, new_cost + 1):
                    costs[edge.destination] = new_cost
                    previous[edge.destination] = edge
                    heapq.heappush(heap, (new_cost, next(order), edge.destination))

        return None

    @staticmethod
    def _unwind(previous: Dict[str, GraphEdge], code: str) -> EdgePath:
        edges: List[GraphEdge] = []
        while code in previous:
            edge = previous[code]
            edges.append(edge)
            code = edge.origin
        if not edges:
            raise InvariantViolation("Path cannot be empty")
        edges.reverse()
        return tuple(edges)


def find_route(
    network: NetworkModel,
    start_station_id: str,
    destination_station_id: str,
    graph: Optional[RouteGraph] = None,
    weights: Optional[EdgeWeights] = None,
    cancel: Optional[CancelCheck] = None,
    max_expansions: Optional[int] = None,
) -> RouteOutcome:
    """Find the route between two stations of a network.

    Builds the graph when none is given. See ``RouteSearch.solve``.
    """
    search = RouteSearch(
        weights=weights or EdgeWeights(),
        max_expansions=max_expansions,
    )
    return search.solve(
        network,
        graph if graph is not None else build_graph(network),
        start_station_id,
        destination_station_id,
        cancel=cancel,
    )
