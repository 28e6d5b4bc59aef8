import json

import pytest

from mrt_router.cli import build_parser, main
from mrt_router.config import reset_config


def test_route_command_prints_itinerary(sample_path, capsys):
    exit_code = main(["route", "BFT", "RFP", "--network", str(sample_path)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.splitlines() == [
        "CE1 (Bayfront) to CE2 (Marina Bay) on Circle Line Extension - 1 stop",
        "Change lines",
        "NS27 (Marina Bay) to NS26 (Raffles Place) on North South Line - towards NS24 (Dhoby Ghaut) - 1 stop",
    ]


def test_route_command_language(sample_path, capsys):
    exit_code = main(["route", "DBG", "CTH", "--network", str(sample_path), "--language", "zh"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == (
        "NS24 (多美歌) to NS25 (政府大厦) on North South Line - towards NS27 (滨海湾) - 1 stop"
    )


def test_unknown_station_exits_with_error(sample_path, capsys):
    exit_code = main(["route", "BFT", "XXX", "--network", str(sample_path)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "Error: Station not found: XXX" in captured.err


def test_invalid_transfer_weight_exits_with_error(sample_path, capsys):
    exit_code = main(["route", "BFT", "RFP", "--network", str(sample_path), "--transfer-weight", "0"])

    assert exit_code == 1
    assert "Transfer weight" in capsys.readouterr().err


def test_missing_network_exits_with_error(tmp_path, capsys):
    exit_code = main(["route", "BFT", "RFP", "--network", str(tmp_path / "none.json")])

    assert exit_code == 1
    assert "Failed to read network file" in capsys.readouterr().err


def test_undecodable_network_exits_with_error(tmp_path, capsys):
    network = tmp_path / "mrt.json"
    network.write_bytes(b'{"stations": [], "lines": [\xff]}')

    exit_code = main(["route", "A", "B", "--network", str(network)])

    assert exit_code == 1
    assert "Invalid network file" in capsys.readouterr().err


def test_invalid_log_level_exits_with_error(monkeypatch, sample_path, capsys):
    monkeypatch.setenv("MRT_LOG_LEVEL", "LOUD")
    reset_config()

    exit_code = main(["route", "BFT", "RFP", "--network", str(sample_path)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "invalid configuration" in captured.err


def test_convert_command_writes_network(tmp_path, capsys):
    raw = tmp_path / "mrt_stations.json"
    raw.write_text(
        json.dumps(
            [
                {"abbr": "AAA", "en": "Alpha", "zh": "甲", "ta": "அ", "lines": ["XY1"]},
                {"abbr": "BBB", "en": "Beta", "zh": "乙", "ta": "ஆ", "lines": ["XY2"]},
            ]
        ),
        encoding="utf-8",
    )
    out = tmp_path / "mrt.json"

    exit_code = main(["convert", str(raw), str(out)])

    assert exit_code == 0
    assert "Wrote 2 stations and 1 lines" in capsys.readouterr().out
    document = json.loads(out.read_text(encoding="utf-8"))
    assert document["lines"] == [{"id": "XY", "name": "", "stations": ["XY1", "XY2"]}]

    assert main(["route", "AAA", "BBB", "--network", str(out)]) == 0
    assert capsys.readouterr().out.strip() == "XY1 (Alpha) to XY2 (Beta) on XY - 1 stop"


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
