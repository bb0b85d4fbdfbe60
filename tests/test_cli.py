from pathlib import Path

from fspl_calc.cli import main


def test_single_defaults(capsys):
    assert main(["single"]) == 0
    out = capsys.readouterr().out
    assert "100.04 dB" in out
    assert "-80.04 dBm" in out


def test_single_units(capsys):
    assert main(["single", "--pt", "100", "--pt-unit", "mW", "--d", "1000", "--d-unit", "m", "--f", "2.4", "--f-unit", "GHz"]) == 0
    assert "-80.04 dBm" in capsys.readouterr().out


def test_invalid_input_exit_code(capsys):
    assert main(["single", "--d", "0"]) == 2
    err = capsys.readouterr().err
    assert "Invalid input" in err


def test_range_writes_csv_and_plot(tmp_path: Path, capsys):
    csv_path = tmp_path / "out" / "sweep.csv"
    png_path = tmp_path / "pr.png"
    rc = main(["range", "--start", "800", "--stop", "2600", "--step", "50", "--csv", str(csv_path), "--plot", str(png_path)])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Range mode: 37 points." in out
    assert len(csv_path.read_text(encoding="utf-8").splitlines()) == 38
    assert png_path.exists()


def test_range_empty_sweep(capsys):
    assert main(["range", "--start", "2600", "--stop", "800"]) == 2
    assert "stop >= start" in capsys.readouterr().err
