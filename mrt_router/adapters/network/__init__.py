"""Network adapters - Implementations of network-related ports.

Available implementations:
- JSONNetworkRepository: Loads the network from the JSON format
- network_from_raw_stations: Converts a raw per-station list
"""

from .json_repository import JSONNetworkRepository
from .raw_stations import load_raw_stations, network_from_raw_stations, write_network
from .records import LineRecord, NetworkRecord, StationRecord

__all__ = [
    "JSONNetworkRepository",
    "NetworkRecord",
    "StationRecord",
    "LineRecord",
    "network_from_raw_stations",
    "load_raw_stations",
    "write_network",
]
