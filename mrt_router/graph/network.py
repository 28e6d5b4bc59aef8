"""Network model: stations, lines and the lookup indices between them.

The model is built once from already-decoded stations and lines and is
read-only afterwards, so it can be shared between concurrent queries.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple

from ..domain.errors import InconsistentDataError, StationNotFoundError
from ..domain.models import Line, Station

logger = logging.getLogger(__name__)


class NetworkModel:
    """Stations and lines plus the three indices derived from them.

    Use ``build_network`` to construct one; the constructor expects
    indices that have already been validated.
    """

    __slots__ = ("_stations", "_lines", "_by_id", "_station_by_code", "_line_by_code")

    def __init__(
        self,
        stations: Tuple[Station, ...],
        lines: Tuple[Line, ...],
        by_id: Dict[str, Station],
        station_by_code: Dict[str, Station],
        line_by_code: Dict[str, Line],
    ) -> None:
        self._stations = stations
        self._lines = lines
        self._by_id = by_id
        self._station_by_code = station_by_code
        self._line_by_code = line_by_code

    @property
    def stations(self) -> Tuple[Station, ...]:
        return self._stations

    @property
    def lines(self) -> Tuple[Line, ...]:
        return self._lines

    def __len__(self) -> int:
        return len(self._stations)

    def __contains__(self, station_id: object) -> bool:
        return station_id in self._by_id

    def find_station(self, station_id: str) -> Optional[Station]:
        """Get a station by id, or None if not found."""
        return self._by_id.get(station_id)

    def get_station(self, station_id: str) -> Station:
        """Get a station by id, raising if not found.

        Raises:
            StationNotFoundError: If the station is not in the network.
        """
        station = self._by_id.get(station_id)
        if station is None:
            raise StationNotFoundError(
                f"Station not found: {station_id}",
                station_id=station_id,
            )
        return station

    def station_for_code(self, code: str) -> Optional[Station]:
        """Return the station owning a line-stop code."""
        return self._station_by_code.get(code)

    def line_for_code(self, code: str) -> Optional[Line]:
        """Return the line a line-stop code belongs to."""
        return self._line_by_code.get(code)

    def __repr__(self) -> str:
        return f"NetworkModel(stations={len(self._stations)}, lines={len(self._lines)})"


def build_network(stations: Iterable[Station], lines: Iterable[Line]) -> NetworkModel:
    """Build a NetworkModel and its lookup indices.

    Args:
        stations: Stations in input order.
        lines: Lines in input order.

    Returns:
        A read-only NetworkModel.

    Raises:
        InconsistentDataError: If stations and lines do not describe the
            same set of line-stop codes, or identifiers are duplicated.
    """
    station_tuple = tuple(stations)
    line_tuple = tuple(lines)

    by_id: Dict[str, Station] = {}
    station_by_code: Dict[str, Station] = {}
    for station in station_tuple:
        if station.id in by_id:
            raise InconsistentDataError(
                f"Duplicate station id: {station.id}",
                station_id=station.id,
            )
        by_id[station.id] = station
        for code in station.codes:
            owner = station_by_code.get(code)
            if owner is not None:
                raise InconsistentDataError(
                    f"Code {code} is listed by stations {owner.id} and {station.id}",
                    code=code,
                    station_id=station.id,
                )
            station_by_code[code] = station

    line_ids: set[str] = set()
    line_by_code: Dict[str, Line] = {}
    for line in line_tuple:
        if line.id in line_ids:
            raise InconsistentDataError(
                f"Duplicate line id: {line.id}",
                line_id=line.id,
            )
        line_ids.add(line.id)
        for code in line.codes:
            if code not in station_by_code:
                raise InconsistentDataError(
                    f"Code {code} on line {line.id} has no owning station",
                    code=code,
                    line_id=line.id,
                )
            other = line_by_code.get(code)
            if other is not None:
                raise InconsistentDataError(
                    f"Code {code} is listed more than once (lines {other.id} and {line.id})",
                    code=code,
                    line_id=line.id,
                )
            line_by_code[code] = line

    for code, station in station_by_code.items():
        if code not in line_by_code:
            raise InconsistentDataError(
                f"Code {code} of station {station.id} is not on any line",
                code=code,
                station_id=station.id,
            )

    logger.info(
        "Network built",
        extra={
            "stations": len(station_tuple),
            "lines": len(line_tuple),
            "codes": len(station_by_code),
        },
    )
    return NetworkModel(
        stations=station_tuple,
        lines=line_tuple,
        by_id=by_id,
        station_by_code=station_by_code,
        line_by_code=line_by_code,
    )
