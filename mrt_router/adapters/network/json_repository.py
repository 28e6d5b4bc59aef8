"""JSON Network Repository adapter.

Loads the network JSON file, validates its shape with pydantic records
and builds the NetworkModel once, caching it for later calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ...config import NetworkConfig, get_config
from ...domain.errors import NetworkLoadError
from ...graph.network import NetworkModel
from .records import NetworkRecord


@dataclass
class JSONNetworkRepository:
    """Network repository that loads from a JSON file.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Network configuration (data directory, file name)
        path: Optional explicit file path overriding the configuration
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _network: Optional[NetworkModel] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def network_path(self) -> Path:
        return self.path if self.path is not None else self.config.network_path

    def load(self) -> NetworkModel:
        """Load the network from JSON.

        Returns:
            The validated network model.

        Raises:
            NetworkLoadError: If the file cannot be read or decoded.
            InconsistentDataError: If stations and lines disagree.
        """
        if self._network is not None:
            return self._network

        path = self.network_path
        self._logger.debug("Loading network", extra={"network_path": str(path)})

        record = self._read_record(path)
        network = record.to_network()
        self._network = network
        self._logger.info(
            "Network loaded",
            extra={"stations": len(network.stations), "lines": len(network.lines)},
        )
        return network

    def _read_record(self, path: Path) -> NetworkRecord:
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise NetworkLoadError(
                f"Failed to read network file {path}",
                file_path=str(path),
                cause=e,
            )
        try:
            return NetworkRecord.model_validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            raise NetworkLoadError(
                f"Invalid network file {path}",
                file_path=str(path),
                cause=e,
            )

    def clear_cache(self) -> None:
        """Clear the cached network."""
        self._network = None
        self._logger.debug("Network cache cleared")
