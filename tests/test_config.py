from pathlib import Path

import pytest
from pydantic import ValidationError

from mrt_router.config import AppConfig, ObservabilityConfig, RoutingConfig, get_config, reset_config


def test_defaults():
    config = get_config()

    assert config.routing.ride_weight == 1
    assert config.routing.transfer_weight == 1
    assert config.routing.max_expansions is None
    assert config.routing.language == "en"
    assert config.network.network_path == Path(config.network.data_dir) / "mrt.json"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MRT_ROUTING_TRANSFER_WEIGHT", "3")
    monkeypatch.setenv("MRT_ROUTING_LANGUAGE", "ta")
    monkeypatch.setenv("MRT_NETWORK_DATA_DIR", str(tmp_path))
    reset_config()

    config = get_config()

    assert config.routing.transfer_weight == 3
    assert config.routing.language == "ta"
    assert config.network.network_path == tmp_path / "mrt.json"


def test_invalid_weight_is_rejected():
    with pytest.raises(ValidationError):
        RoutingConfig(transfer_weight=0)


def test_invalid_language_is_rejected():
    with pytest.raises(ValidationError):
        RoutingConfig(language="fr")


def test_app_config_aggregates_sub_configs():
    config = AppConfig()

    assert config.observability.level == "WARNING"
    assert isinstance(config.routing, RoutingConfig)


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("MRT_LOG_LEVEL", "debug")
    reset_config()

    assert get_config().observability.level == "DEBUG"


def test_invalid_log_level_is_rejected():
    with pytest.raises(ValidationError):
        ObservabilityConfig(level="LOUD")
