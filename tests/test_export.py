import numpy as np

from swaragraph.core import derive_display
from swaragraph.export.to_numpy import display_to_numpy
from swaragraph.ingest import parse_pitch_text
from swaragraph.types import TimeWindow


def test_display_to_numpy(tmp_path):
    display = derive_display(parse_pitch_text("0 100\n1 200\n"), TimeWindow(0, 1), 100)
    csv_path = tmp_path / "points.csv"
    npz_path = tmp_path / "points.npz"
    t, v = display_to_numpy(display, save_csv=csv_path, save_npz=npz_path)
    np.testing.assert_allclose(t, [0.0, 1.0])
    np.testing.assert_allclose(v, [0.0, 1200.0])

    assert csv_path.read_text().splitlines()[0] == "time,cents"
    # the exported CSV is itself a valid pitch file (header row is dropped)
    reparsed = parse_pitch_text(csv_path.read_text())
    np.testing.assert_allclose(reparsed.values, [0.0, 1200.0])

    data = np.load(npz_path)
    np.testing.assert_allclose(data["value"], [0.0, 1200.0])
    assert str(data["unit"]) == "cents"


def test_empty_display_exports_empty_arrays(tmp_path):
    display = derive_display(None, TimeWindow(0, 1))
    t, v = display_to_numpy(display, save_csv=tmp_path / "e.csv")
    assert t.size == 0 and v.size == 0
    assert (tmp_path / "e.csv").read_text().strip() == "time,Hz"
