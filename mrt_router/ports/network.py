"""Network ports - Abstractions for network loading and routing.

These protocols define the contracts for loading a rail network and
computing routes on it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import RouteOutcome
    from ..graph.builder import RouteGraph
    from ..graph.network import NetworkModel


class NetworkRepositoryPort(Protocol):
    """Port for loading network data.

    Implementation: adapters/network/json_repository.py

    The repository is responsible for loading and caching the
    network model from persistent storage.
    """

    def load(self) -> NetworkModel:
        """Load the rail network.

        Returns:
            A validated, read-only NetworkModel.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: graph/search.py (RouteSearch)
    """

    def solve(
        self,
        network: NetworkModel,
        graph: RouteGraph,
        start_station_id: str,
        destination_station_id: str,
        cancel: Optional[Callable[[], bool]] = None,
    ) -> RouteOutcome:
        """Find a route between two stations.

        Returns:
            A Route, or NoRouteFound if the stations are not connected.
        """
        ...
