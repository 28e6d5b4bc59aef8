"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the routing core and the adapters
that feed it, so services can be tested with in-memory networks.
"""

from .network import NetworkRepositoryPort, RouteSolverPort

__all__ = [
    "NetworkRepositoryPort",
    "RouteSolverPort",
]
