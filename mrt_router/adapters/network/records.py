"""Pydantic records for the network JSON format.

    {"stations": [{"id": "BNK", "name": {"en": ..., "zh": ..., "ta": ...},
                   "lines": ["NS16"]}],
     "lines": [{"id": "NS", "name": "", "stations": ["NS1", ...]}]}

Records only check the shape of the data. Cross-references between
stations and lines are validated by ``build_network``.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models import Line, LocalizedName, Station
from ...graph.network import NetworkModel, build_network


class LocalizedNameRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    en: str
    zh: str
    ta: str


class StationRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: LocalizedNameRecord
    lines: List[str] = Field(default_factory=list)

    def to_domain(self) -> Station:
        return Station(
            id=self.id,
            name=LocalizedName(en=self.name.en, zh=self.name.zh, ta=self.name.ta),
            codes=tuple(self.lines),
        )


class LineRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = ""
    stations: List[str] = Field(default_factory=list)

    def to_domain(self) -> Line:
        return Line(id=self.id, name=self.name, codes=tuple(self.stations))


class NetworkRecord(BaseModel):
    """Top-level document of the network JSON format."""

    model_config = ConfigDict(frozen=True)

    stations: List[StationRecord] = Field(default_factory=list)
    lines: List[LineRecord] = Field(default_factory=list)

    def to_network(self) -> NetworkModel:
        """Convert the records into a validated NetworkModel.

        Raises:
            InconsistentDataError: If stations and lines disagree.
        """
        return build_network(
            (record.to_domain() for record in self.stations),
            (record.to_domain() for record in self.lines),
        )
