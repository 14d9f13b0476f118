import json

import numpy as np
from typer.testing import CliRunner

from swaragraph.cli import app

TEXT = "0.00 261.63\n0.01 523.26\n0.02 392.00\n"

runner = CliRunner()


def make_file(tmp_path, name="pitch.txt", text=TEXT):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_inspect(tmp_path):
    path = make_file(tmp_path)
    result = runner.invoke(app, ["inspect", str(path)])
    assert result.exit_code == 0
    assert "3 samples" in result.stdout
    assert "261.63..523.26 Hz" in result.stdout


def test_inspect_rejects_extension(tmp_path):
    path = make_file(tmp_path, "pitch.wav")
    result = runner.invoke(app, ["inspect", str(path)])
    assert result.exit_code == 1
    assert "Unsupported file format" in result.output


def test_inspect_rejects_empty(tmp_path):
    path = make_file(tmp_path, "pitch.csv", "time,pitch\n")
    result = runner.invoke(app, ["inspect", str(path)])
    assert result.exit_code == 1
    assert "No valid pitch data" in result.output


def test_window_hz(tmp_path):
    path = make_file(tmp_path)
    result = runner.invoke(app, ["window", str(path), "--start", "0", "--end", "0.015"])
    assert result.exit_code == 0
    assert "261.63" in result.stdout
    assert "523.26" in result.stdout
    assert "392.00" not in result.stdout


def test_window_cents_and_export(tmp_path):
    path = make_file(tmp_path)
    out = tmp_path / "points.npz"
    result = runner.invoke(
        app,
        ["window", str(path), "--tonic", "261.63", "--export", str(out)],
    )
    assert result.exit_code == 0
    assert "1200.00" in result.stdout
    assert "exported 3 points" in result.stdout
    np.testing.assert_allclose(np.load(out)["value"][:2], [0.0, 1200.0], atol=1e-9)


def test_window_invalid_range_is_neutral(tmp_path):
    path = make_file(tmp_path)
    result = runner.invoke(app, ["window", str(path), "--start", "1", "--end", "0.5"])
    assert result.exit_code == 0
    assert "Enter a valid time range" in result.stdout


def test_window_swaras(tmp_path):
    path = make_file(tmp_path)
    result = runner.invoke(
        app, ["window", str(path), "--tonic", "261.63", "--y-axis", "swaras"]
    )
    assert result.exit_code == 0
    assert "Sa@0" in result.stdout


def test_window_bad_axis(tmp_path):
    path = make_file(tmp_path)
    result = runner.invoke(app, ["window", str(path), "--y-axis", "log"])
    assert result.exit_code == 2


def test_ticks_numeric():
    result = runner.invoke(app, ["ticks", "--min", "0", "--max", "100"])
    assert result.exit_code == 0
    assert result.stdout.split() == [
        "0", "0.0", "20", "20.0", "40", "40.0", "60", "60.0", "80", "80.0", "100", "100.0"
    ]


def test_ticks_swaras():
    result = runner.invoke(app, ["ticks", "--min", "0", "--max", "1200", "--swaras"])
    assert result.exit_code == 0
    labels = [line.split("\t")[1] for line in result.stdout.splitlines()]
    assert labels == ["Sa", "Re", "Ga", "Ma♯/Pa♭", "Dha", "Ni"]


def test_set_override(tmp_path):
    result = runner.invoke(
        app,
        ["--set", "axis.numeric_tick_count=2", "ticks", "--min", "0", "--max", "10"],
    )
    assert result.exit_code == 0
    assert len(result.stdout.splitlines()) == 3


def test_set_override_unknown_key():
    result = runner.invoke(app, ["--set", "axis.colour=red", "ticks", "--min", "0", "--max", "1"])
    assert result.exit_code != 0


def test_config_file(tmp_path):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"tonic": {"hz": 261.63}}))
    path = make_file(tmp_path)
    result = runner.invoke(app, ["--config", str(cfg), "window", str(path)])
    assert result.exit_code == 0
    assert "1200.00" in result.stdout


def test_plot_table_multiple_files(tmp_path):
    a = make_file(tmp_path, "a.txt")
    b = make_file(tmp_path, "b.csv", "0,100\n1,200\n")
    result = runner.invoke(app, ["plot", str(a), str(b), "--adapter", "table"])
    assert result.exit_code == 0
    assert "== Pitch Graph 1" in result.stdout
    assert "== Pitch Graph 2" in result.stdout
    assert "200.00" in result.stdout


def test_plot_shared_windows(tmp_path):
    a = make_file(tmp_path)
    result = runner.invoke(
        app,
        ["plot", str(a), "--shared", "-w", "0:0.005", "-w", "0.015,0.02", "-a", "table"],
    )
    assert result.exit_code == 0
    graph1, graph2 = result.stdout.split("== Pitch Graph 2")
    assert "261.63" in graph1 and "523.26" not in graph1
    assert "392.00" in graph2


def test_plot_matplotlib_save(tmp_path):
    a = make_file(tmp_path)
    out = tmp_path / "chart.png"
    result = runner.invoke(app, ["plot", str(a), "--tonic", "261.63", "--save", str(out)])
    assert result.exit_code == 0
    assert out.exists()
    assert "saved chart" in result.stdout


def test_plot_unknown_adapter(tmp_path):
    a = make_file(tmp_path)
    result = runner.invoke(app, ["plot", str(a), "--adapter", "nivo"])
    assert result.exit_code == 2


def test_plot_rejects_bad_file(tmp_path):
    a = make_file(tmp_path, "a.txt", "nothing here\n")
    result = runner.invoke(app, ["plot", str(a), "-a", "table"])
    assert result.exit_code == 1
    assert "No valid pitch data" in result.output


def test_window_single_sample_file(tmp_path):
    path = make_file(tmp_path, "one.txt", "0.5 220\n")
    result = runner.invoke(app, ["window", str(path)])
    assert result.exit_code == 0
    assert "220.00" in result.stdout
    assert "Enter a valid time range" not in result.stdout


def test_window_one_bound_uses_series_edge(tmp_path):
    path = make_file(tmp_path)
    result = runner.invoke(app, ["window", str(path), "--start", "0.015"])
    assert result.exit_code == 0
    assert "392.00" in result.stdout
    assert "261.63" not in result.stdout

    result = runner.invoke(app, ["window", str(path), "--end", "0.005"])
    assert result.exit_code == 0
    assert "261.63" in result.stdout
    assert "392.00" not in result.stdout


def test_plot_open_ended_window(tmp_path):
    a = make_file(tmp_path)
    result = runner.invoke(app, ["plot", str(a), "-w", "0.015:", "-a", "table"])
    assert result.exit_code == 0
    assert "392.00" in result.stdout
    assert "523.26" not in result.stdout


def test_plot_shared_rejects_extra_files(tmp_path):
    a = make_file(tmp_path, "a.txt")
    b = make_file(tmp_path, "b.txt")
    result = runner.invoke(app, ["plot", str(a), str(b), "--shared", "-a", "table"])
    assert result.exit_code == 2


def test_ticks_swaras_in_hz():
    result = runner.invoke(
        app, ["ticks", "--min", "0", "--max", "1200", "--swaras", "--tonic", "100"]
    )
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0].split("\t") == ["0", "Sa", "100.00 Hz"]
    assert lines[-1].split("\t")[1] == "Ni"


def test_ticks_tonic_requires_swaras():
    result = runner.invoke(app, ["ticks", "--min", "0", "--max", "1", "--tonic", "100"])
    assert result.exit_code == 2
