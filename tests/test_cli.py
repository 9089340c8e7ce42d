import json

import pytest

from parking_allocation.cli import build_parser, main, run_shell
from parking_allocation.lot import ParkingLot


@pytest.fixture(autouse=True)
def no_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def feed(*lines):
    answers = iter(lines)

    def read(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    return read


def test_test_mode_prints_summary(capsys):
    assert main(["2", "Unconstrained,Constrained"]) == 0
    out = capsys.readouterr().out
    assert "Parking lot created with total spots: 4" in out
    assert "Overall -> Total: 4, Available: 4, Occupied: 0" in out


@pytest.mark.parametrize("argv", [["0", "Unconstrained"], ["abc", "Unconstrained"], ["2", "  "]])
def test_bad_arguments(argv, capsys):
    assert main(argv) == 1
    assert "Parking lot creation failed." in capsys.readouterr().err


def test_bad_spot_type(capsys):
    assert main(["2", "Unconstrained,Massive"]) == 1
    assert "Massive" in capsys.readouterr().err


def test_unsupported_admin_type(capsys):
    assert main(["2", "Unconstrained", "--admin-type", "VALET"]) == 1
    assert "VALET" in capsys.readouterr().err


def test_config_file_supplies_defaults(tmp_path, capsys):
    (tmp_path / "lot.json").write_text(json.dumps({"rows": 4, "row_sequence": "Constrained"}))
    assert main(["--config", "lot.json"]) == 0
    assert "total spots: 4" in capsys.readouterr().out


def test_live_mode_reads_stdin(monkeypatch, capsys):
    answers = feed("2", "V1", "Large", "1", "4")
    monkeypatch.setattr("builtins.input", answers)

    assert main(["1", "Unconstrained,Unconstrained", "--mode", "live"]) == 0

    out = capsys.readouterr().out
    assert "Vehicle parked at spot(s): R1-1, R1-2" in out
    assert "Large vehicles parked: 2" in out
    assert "Exiting application." in out


def test_shell_park_remove_and_errors(capsys):
    lot = ParkingLot(1, "Unconstrained,Constrained")

    run_shell(lot, feed(
        "2", "C1", "Standard",
        "2", "C2", "Standard",
        "2", "B1", "Bus",
        "3", "C1",
        "9",
    ))

    captured = capsys.readouterr()
    assert "Vehicle parked at spot(s): R1-1" in captured.out
    assert "Error: No available spots for vehicle: C2" in captured.err
    assert "Invalid vehicle type." in captured.err
    assert "Vehicle removed (if present)." in captured.out
    assert "Invalid option. Please try again." in captured.out
    assert "Exiting application." in captured.out
    assert lot.summary().is_empty


def test_display_flag_echoes_events(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", feed("2", "M1", "Small"))
    assert main(["1", "Constrained", "--mode", "live", "--display"]) == 0
    assert "[Display] Vehicle M1 parked in R1-1" in capsys.readouterr().out


def test_help_names_default_config_file():
    help_text = " ".join(build_parser().format_help().split())
    assert "parking.json" in help_text
    assert build_parser().parse_args([]).config == "parking.json"
