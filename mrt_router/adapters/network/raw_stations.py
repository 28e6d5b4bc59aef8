"""Conversion of a raw per-station list into the network JSON format.

The raw source is a JSON list of stations as published by the operator:

    [{"abbr": "BNK", "en": "Bukit Panjang", "zh": "...", "ta": "...",
      "lines": ["BP6", "DT1"]}, ...]

Lines are not listed separately: a code such as ``NS12`` is split into
its line prefix (``NS``) and stop number (``12``), and each line's stops
are ordered by number. A code without a number (``CE``) is stop 0.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ...domain.errors import InconsistentDataError, NetworkLoadError
from .records import LineRecord, LocalizedNameRecord, NetworkRecord, StationRecord

logger = logging.getLogger(__name__)

LINE_STOP_PATTERN = re.compile(r"([A-Z]+)([0-9]*)")


class RawStationRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    abbr: str = Field(min_length=1)
    en: str
    zh: str = ""
    ta: str = ""
    lines: List[str] = Field(default_factory=list)


_RAW_STATIONS = TypeAdapter(List[RawStationRecord])


def split_line_stop(code: str) -> tuple[str, int]:
    """Split a line-stop code into line prefix and stop number.

    >>> split_line_stop("NS12")
    ('NS', 12)

    Raises:
        InconsistentDataError: If the code has no upper-case line prefix.
    """
    match = LINE_STOP_PATTERN.search(code)
    if match is None:
        raise InconsistentDataError(f"Malformed line-stop code: {code!r}", code=code)
    prefix, number = match.groups()
    return prefix, int(number) if number else 0


def network_from_raw_stations(raw_stations: Iterable[RawStationRecord]) -> NetworkRecord:
    """Derive station and line records from a raw station list.

    Repeated ``abbr`` entries after the first are ignored. Stations are
    sorted by id; lines keep the order in which they were first seen.
    """
    stations: Dict[str, RawStationRecord] = {}
    stops: Dict[str, Dict[int, str]] = {}

    for raw in raw_stations:
        if raw.abbr in stations:
            logger.debug("Skipping duplicate station", extra={"abbr": raw.abbr})
            continue
        for code in raw.lines:
            prefix, number = split_line_stop(code)
            line_stops = stops.setdefault(prefix, {})
            if number in line_stops:
                raise InconsistentDataError(
                    f"Stop {number} of line {prefix} is claimed by {line_stops[number]} and {code}",
                    code=code,
                    station_id=raw.abbr,
                    line_id=prefix,
                )
            line_stops[number] = code
        stations[raw.abbr] = raw

    station_records = [
        StationRecord(
            id=abbr,
            name=LocalizedNameRecord(en=raw.en, zh=raw.zh, ta=raw.ta),
            lines=list(raw.lines),
        )
        for abbr, raw in sorted(stations.items())
    ]
    line_records = [
        LineRecord(
            id=prefix,
            name="",
            stations=[line_stops[number] for number in sorted(line_stops)],
        )
        for prefix, line_stops in stops.items()
    ]

    logger.info(
        "Converted raw stations",
        extra={"stations": len(station_records), "lines": len(line_records)},
    )
    return NetworkRecord(stations=station_records, lines=line_records)


def load_raw_stations(path: Path) -> NetworkRecord:
    """Read a raw station list file and convert it.

    Raises:
        NetworkLoadError: If the file cannot be read or decoded.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise NetworkLoadError(
            f"Failed to read raw stations file {path}",
            file_path=str(path),
            cause=e,
        )
    try:
        records = _RAW_STATIONS.validate_json(raw)
    except (ValidationError, UnicodeDecodeError) as e:
        raise NetworkLoadError(
            f"Invalid raw stations file {path}",
            file_path=str(path),
            cause=e,
        )
    return network_from_raw_stations(records)


def write_network(record: NetworkRecord, path: Path) -> None:
    """Write a network record as JSON."""
    path.write_text(record.model_dump_json(), encoding="utf-8")
