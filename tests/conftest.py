"""Shared fixtures: small hand-built networks and the bundled sample."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mrt_router.config import reset_config
from mrt_router.domain.models import Line, LocalizedName, Station
from mrt_router.graph.network import build_network

SAMPLE_NETWORK = Path(__file__).resolve().parents[1] / "data" / "mrt.json"


def station(station_id, *codes):
    return Station(
        id=station_id,
        name=LocalizedName(en=station_id.title(), zh=f"{station_id}站", ta=station_id.lower()),
        codes=tuple(codes),
    )


def line(line_id, *codes, name=""):
    return Line(id=line_id, name=name, codes=tuple(codes))


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def abc_lines():
    return {
        "L1": line("L1", "L1-1", "L1-2", name="Line One"),
        "L2": line("L2", "L2-1", "L2-2", name="Line Two"),
    }


@pytest.fixture
def abc_network(abc_lines):
    """A sits on L1 and L2; B is the other end of L1, C the other end of L2."""
    return build_network(
        [
            station("A", "L1-1", "L2-1"),
            station("B", "L1-2"),
            station("C", "L2-2"),
            station("D"),
        ],
        [abc_lines["L1"], abc_lines["L2"]],
    )


@pytest.fixture
def detour_network():
    """S to T is three edges with one change (Q, R) or four rides on P."""
    return build_network(
        [
            station("S", "P1", "Q1"),
            station("X2", "P2"),
            station("X3", "P3"),
            station("X4", "P4"),
            station("T", "P5", "R2"),
            station("M", "Q2", "R1"),
        ],
        [
            line("P", "P1", "P2", "P3", "P4", "P5"),
            line("Q", "Q1", "Q2"),
            line("R", "R1", "R2"),
        ],
    )


@pytest.fixture
def sample_path():
    return SAMPLE_NETWORK


@pytest.fixture
def sample_network():
    from mrt_router.adapters.network import JSONNetworkRepository

    return JSONNetworkRepository(path=SAMPLE_NETWORK).load()
