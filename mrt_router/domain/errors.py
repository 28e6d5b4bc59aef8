"""Typed domain errors for the MRT router.

All recoverable errors inherit from MRTRouterError and can optionally
wrap a root cause exception for debugging.

InvariantViolation is not part of that hierarchy. It signals a bug in
graph construction or search and is never caught by handlers written
against MRTRouterError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MRTRouterError(Exception):
    """Base error for the MRT router domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InconsistentDataError(MRTRouterError):
    """Stations and lines disagree about which line-stop codes exist.

    Raised while building a NetworkModel; the build is abandoned and no
    partial network is returned.

    Attributes:
        code: The offending line-stop code, if any
        station_id: The station involved, if any
        line_id: The line involved, if any
    """

    code: Optional[str] = None
    station_id: Optional[str] = None
    line_id: Optional[str] = None


@dataclass
class NotFoundError(MRTRouterError):
    """A requested entity is absent from the network."""


@dataclass
class StationNotFoundError(NotFoundError):
    """Station id not found in the network.

    Attributes:
        station_id: The station id that was not found
    """

    station_id: str = ""


@dataclass
class NoRouteFoundError(MRTRouterError):
    """No path exists between the requested stations.

    The search itself reports this as a NoRouteFound value; the service
    layer raises this error for callers that want an exception.

    Attributes:
        start: Start station id
        destination: Destination station id
    """

    start: str = ""
    destination: str = ""


@dataclass
class SearchCancelledError(MRTRouterError):
    """A route search was stopped before it finished.

    Attributes:
        expansions: Number of queue expansions performed before stopping
    """

    expansions: int = 0


@dataclass
class NetworkLoadError(MRTRouterError):
    """Network data could not be read or decoded.

    Attributes:
        file_path: Path to the network data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(MRTRouterError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


class InvariantViolation(RuntimeError):
    """Internal consistency check failed; indicates a programming error."""
