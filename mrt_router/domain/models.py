"""Immutable domain models for the MRT router.

All models are frozen dataclasses with slots. These models have no
external dependencies and represent the core concepts of a rail
network: stations, lines, the edges between line-stop codes and the
route values produced by a search.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

Language = Literal["en", "zh", "ta"]


@dataclass(frozen=True, slots=True)
class LocalizedName:
    """Station name in English, Chinese and Tamil."""

    en: str
    zh: str
    ta: str

    def get(self, language: Language = "en") -> str:
        """Return the name for a language key, falling back to English."""
        value = getattr(self, language, "")
        return value or self.en

    def __str__(self) -> str:
        return self.en


@dataclass(frozen=True, slots=True)
class Station:
    """A physical station.

    Attributes:
        id: Public station identifier (e.g., 'BNK')
        name: Localized station name
        codes: One line-stop code per line serving the station (e.g., 'NS16')
    """

    id: str
    name: LocalizedName
    codes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_interchange(self) -> bool:
        """Check if more than one line serves this station."""
        return len(self.codes) > 1


@dataclass(frozen=True, slots=True)
class Line:
    """A rail line with its stops in physical order.

    Attributes:
        id: Line identifier (e.g., 'NS')
        name: Display name, may be empty
        codes: Line-stop codes in stop order
    """

    id: str
    name: str
    codes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        return self.name or self.id

    @property
    def first_stop(self) -> Optional[str]:
        return self.codes[0] if self.codes else None

    @property
    def last_stop(self) -> Optional[str]:
        return self.codes[-1] if self.codes else None

    def index_of(self, code: str) -> Optional[int]:
        """Return the position of a code in stop order, or None."""
        try:
            return self.codes.index(code)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class RideEdge:
    """Ride ``line`` one stop from ``origin`` to ``destination``."""

    origin: str
    destination: str
    line: Line

    @property
    def is_transfer(self) -> bool:
        return False

    def reversed(self) -> RideEdge:
        return RideEdge(self.destination, self.origin, self.line)


@dataclass(frozen=True, slots=True)
class TransferEdge:
    """Change lines on foot between two codes of the same station."""

    origin: str
    destination: str

    @property
    def line(self) -> None:
        return None

    @property
    def is_transfer(self) -> bool:
        return True

    def reversed(self) -> TransferEdge:
        return TransferEdge(self.destination, self.origin)


GraphEdge = Union[RideEdge, TransferEdge]


@dataclass(frozen=True, slots=True)
class GraphEdgeSummary:
    """A contiguous run of same-line ride edges, or of transfer edges.

    Attributes:
        start: Code the run starts from
        end: Code the run ends at
        line: Line ridden, or None for a change of lines
        stops: Number of edges folded into this summary
    """

    start: str
    end: str
    line: Optional[Line] = None
    stops: int = 1

    @property
    def is_transfer(self) -> bool:
        return self.line is None


@dataclass(frozen=True, slots=True)
class Route:
    """A found path as an ordered tuple of edges.

    An empty route means start and destination are the same station.
    """

    edges: tuple[GraphEdge, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return len(self.edges) == 0

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @property
    def num_transfers(self) -> int:
        return sum(1 for edge in self.edges if edge.is_transfer)

    @property
    def codes(self) -> tuple[str, ...]:
        """Return every code visited, in order."""
        if not self.edges:
            return ()
        return (self.edges[0].origin,) + tuple(e.destination for e in self.edges)


@dataclass(frozen=True, slots=True)
class NoRouteFound:
    """The network is valid but the two stations are not connected."""

    start_station_id: str
    destination_station_id: str


RouteOutcome = Union[Route, NoRouteFound]


@dataclass(frozen=True, slots=True)
class RoutePlan:
    """A route together with its itinerary.

    Attributes:
        route: The edge path found by the search
        summaries: The path folded into itinerary segments
        description: Rendered itinerary, one line per summary
    """

    route: Route
    summaries: tuple[GraphEdgeSummary, ...] = field(default_factory=tuple)
    description: str = ""

    @property
    def num_stops(self) -> int:
        """Total ride stops, excluding changes of lines."""
        return sum(s.stops for s in self.summaries if not s.is_transfer)
