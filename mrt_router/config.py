"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- MRT_NETWORK_DATA_DIR=/path/to/data
- MRT_ROUTING_TRANSFER_WEIGHT=3
- MRT_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with MRT_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="MRT_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    network_file: str = "mrt.json"

    @property
    def network_path(self) -> Path:
        """Full path to the network JSON file."""
        return self.data_dir / self.network_file


class RoutingConfig(BaseSettings):
    """Route search configuration.

    Environment variables prefixed with MRT_ROUTING_.

    With equal ride and transfer weights the search is a plain
    breadth-first search minimizing edge count.
    """

    model_config = SettingsConfigDict(env_prefix="MRT_ROUTING_")

    ride_weight: int = Field(default=1, ge=1)
    transfer_weight: int = Field(default=1, ge=1)
    max_expansions: Optional[int] = Field(default=None, ge=1)
    language: Literal["en", "zh", "ta"] = "en"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with MRT_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="MRT_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.network.network_path)
        print(config.routing.transfer_weight)

    Environment variables prefixed with MRT_.
    """

    model_config = SettingsConfigDict(env_prefix="MRT_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
