"""Route planner service - Main orchestrator.

Loads the network once, builds its graph once and answers route
queries against that shared, read-only state.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from ..config import RoutingConfig, get_config
from ..domain.errors import NoRouteFoundError
from ..domain.models import NoRouteFound, RouteOutcome, RoutePlan
from ..graph.builder import RouteGraph, build_graph
from ..graph.network import NetworkModel
from ..graph.search import RouteSearch
from ..graph.summary import describe_route, summarize_route
from ..ports.network import NetworkRepositoryPort, RouteSolverPort


@dataclass
class RoutePlannerService:
    """Main service for planning routes.

    This service orchestrates:
    1. Network loading (once)
    2. Graph building (once)
    3. Route search (per query)
    4. Summarizing and rendering the itinerary

    Attributes:
        repository: Loads the network model
        config: Routing configuration (weights, language)
        solver: Route solver; defaults to a RouteSearch built from config
    """

    repository: NetworkRepositoryPort
    config: RoutingConfig = field(default_factory=lambda: get_config().routing)
    solver: Optional[RouteSolverPort] = None

    # Network and graph are published together, never one without the other
    _loaded: Optional[Tuple[NetworkModel, RouteGraph]] = field(default=None, init=False, repr=False)
    _solver: RouteSolverPort = field(init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._solver = self.solver if self.solver is not None else RouteSearch.from_config(self.config)

    @property
    def network(self) -> NetworkModel:
        network, _ = self._ensure_loaded()
        return network

    @property
    def graph(self) -> RouteGraph:
        _, graph = self._ensure_loaded()
        return graph

    def _ensure_loaded(self) -> Tuple[NetworkModel, RouteGraph]:
        loaded = self._loaded
        if loaded is not None:
            return loaded
        with self._lock:
            if self._loaded is None:
                network = self.repository.load()
                graph = build_graph(network)
                self._loaded = (network, graph)
                self._logger.debug(
                    "Planner ready",
                    extra={"stations": len(network.stations), "edges": len(graph)},
                )
            return self._loaded

    def find(
        self,
        start_station_id: str,
        destination_station_id: str,
        cancel: Optional[Callable[[], bool]] = None,
    ) -> RouteOutcome:
        """Search for a route without summarizing it.

        Returns:
            A Route, or NoRouteFound if the stations are not connected.
        """
        network, graph = self._ensure_loaded()
        return self._solver.solve(
            network,
            graph,
            start_station_id,
            destination_station_id,
            cancel=cancel,
        )

    def plan(
        self,
        start_station_id: str,
        destination_station_id: str,
        cancel: Optional[Callable[[], bool]] = None,
    ) -> RoutePlan:
        """Plan a route and describe it.

        Args:
            start_station_id: Id of the departure station.
            destination_station_id: Id of the arrival station.
            cancel: Optional callable polled during the search.

        Returns:
            RoutePlan with the route, its summaries and description.

        Raises:
            StationNotFoundError: If either station id is unknown.
            NoRouteFoundError: If the stations are not connected.
            SearchCancelledError: If the search was cancelled.
        """
        outcome = self.find(start_station_id, destination_station_id, cancel=cancel)

        if isinstance(outcome, NoRouteFound):
            raise NoRouteFoundError(
                f"No route from {start_station_id} to {destination_station_id}",
                start=start_station_id,
                destination=destination_station_id,
            )

        summaries = summarize_route(outcome.edges)
        description = describe_route(summaries, self.network, self.config.language)
        self._logger.info(
            "Route planned",
            extra={
                "start": start_station_id,
                "destination": destination_station_id,
                "segments": len(summaries),
            },
        )
        return RoutePlan(route=outcome, summaries=summaries, description=description)
