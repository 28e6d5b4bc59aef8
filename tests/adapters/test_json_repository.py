"""Tests for the JSON network repository adapter."""

import json

import pytest

from mrt_router.adapters.network import JSONNetworkRepository
from mrt_router.config import NetworkConfig
from mrt_router.domain.errors import InconsistentDataError, NetworkLoadError


def write_json(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestJSONNetworkRepository:
    """Test suite for JSONNetworkRepository."""

    def test_load_sample_network(self, sample_path):
        network = JSONNetworkRepository(path=sample_path).load()

        assert len(network.stations) == 10
        assert [l.id for l in network.lines] == ["NS", "EW", "CC", "CE", "DT"]
        assert network.get_station("BFT").name.en == "Bayfront"
        assert network.get_station("BFT").codes == ("CE1", "DT16")
        assert network.line_for_code("NS26").name == "North South Line"

    def test_load_is_cached(self, sample_path):
        repository = JSONNetworkRepository(path=sample_path)

        assert repository.load() is repository.load()

    def test_clear_cache_reloads(self, sample_path):
        repository = JSONNetworkRepository(path=sample_path)
        first = repository.load()

        repository.clear_cache()

        assert repository.load() is not first

    def test_path_from_config(self, tmp_path):
        write_json(
            tmp_path / "net.json",
            {
                "stations": [{"id": "A", "name": {"en": "Alpha", "zh": "甲", "ta": "அ"}, "lines": ["X1"]}],
                "lines": [{"id": "X", "stations": ["X1"]}],
            },
        )
        config = NetworkConfig(data_dir=tmp_path, network_file="net.json")

        repository = JSONNetworkRepository(config)
        network = repository.load()

        assert repository.network_path == tmp_path / "net.json"
        assert network.get_station("A").name.zh == "甲"
        assert network.line_for_code("X1").display_name == "X"

    def test_missing_file_raises(self, tmp_path):
        missing = tmp_path / "missing.json"

        with pytest.raises(NetworkLoadError) as excinfo:
            JSONNetworkRepository(path=missing).load()

        assert excinfo.value.file_path == str(missing)
        assert isinstance(excinfo.value.cause, OSError)

    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(NetworkLoadError):
            JSONNetworkRepository(path=path).load()

    def test_missing_name_field_raises(self, tmp_path):
        path = write_json(
            tmp_path / "net.json",
            {"stations": [{"id": "A", "name": {"en": "Alpha"}, "lines": []}], "lines": []},
        )

        with pytest.raises(NetworkLoadError):
            JSONNetworkRepository(path=path).load()

    def test_inconsistent_network_raises(self, tmp_path):
        path = write_json(
            tmp_path / "net.json",
            {
                "stations": [{"id": "A", "name": {"en": "A", "zh": "A", "ta": "A"}, "lines": ["X1"]}],
                "lines": [{"id": "X", "name": "X", "stations": ["X1", "X2"]}],
            },
        )
        repository = JSONNetworkRepository(path=path)

        with pytest.raises(InconsistentDataError):
            repository.load()
        with pytest.raises(InconsistentDataError):
            repository.load()

    def test_undecodable_bytes_raise(self, tmp_path):
        path = tmp_path / "net.json"
        path.write_bytes(b'{"stations": [], "lines": [\xff]}')

        with pytest.raises(NetworkLoadError) as excinfo:
            JSONNetworkRepository(path=path).load()

        assert excinfo.value.file_path == str(path)
