import pytest

from swaragraph.core import derive_display
from swaragraph.ingest import parse_pitch_text
from swaragraph.types import TimeWindow
from swaragraph.viz import ChartAdapter, available_charts, get_chart, register_chart

TEXT = "0 220\n0.5 247.5\n1 261.63\n"


def test_registry():
    assert {"table", "matplotlib"} <= set(available_charts())
    chart = get_chart("table")
    assert chart.name == "table"
    assert isinstance(chart, ChartAdapter)
    with pytest.raises(KeyError):
        get_chart("victory")


def test_register_rejects_non_adapter():
    with pytest.raises(TypeError):
        register_chart(object())


def test_table_render(tmp_path):
    series = parse_pitch_text(TEXT)
    displays = {
        "hz": derive_display(series, TimeWindow(0, 0.6)),
        "bad": derive_display(series, TimeWindow(1, 0)),
    }
    out = tmp_path / "table.txt"
    text = get_chart("table").render(displays, title="Pitch", save=out)
    assert text.splitlines()[0] == "Pitch"
    assert "== hz" in text
    assert "247.50" in text
    assert "261.63" not in text
    assert "(Enter a valid time range)" in text
    assert out.read_text().startswith("Pitch")


def test_table_marks_snapped():
    series = parse_pitch_text("0 100\n10 200\n")
    text = get_chart("table").render({"x": derive_display(series, TimeWindow(4, 5))})
    assert "Rounded to nearest points" in text


def test_matplotlib_render(tmp_path):
    series = parse_pitch_text(TEXT)
    displays = {
        "Pitch Graph 1": derive_display(series, TimeWindow(0, 1), 220, y_axis="swaras"),
        "Pitch Graph 2": derive_display(series, TimeWindow(0, 1), -1),
    }
    out = tmp_path / "chart.png"
    fig = get_chart("matplotlib").render(displays, title="Pitch", save=out)
    assert out.exists()
    axes = fig.get_axes()
    assert len(axes) == 2
    labels = [t.get_text() for t in axes[0].get_yticklabels()]
    assert labels[0] == "Sa"
    assert axes[0].get_ylabel() == "Swaras"


def test_matplotlib_requires_displays():
    with pytest.raises(ValueError):
        get_chart("matplotlib").render({})
