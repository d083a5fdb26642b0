"""Tests for PNG rendering."""

from planegeo.export.plot import _bounds, _line_xy, render_scene
from planegeo.models import Line2D
from planegeo.scene import Scene

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _scene() -> Scene:
    scene = Scene(name="Plot")
    scene.add_point("A", 0, 0)
    scene.add_point("B", 0, 4)
    scene.add_point("C", 3, 0)
    scene.add_triangle("A", "B", "C")
    scene.add_segment("B", "C")
    scene.add_line("h", 0, 1, -2)
    scene.add_line("v", 1, 0, -1)
    scene.add_slope_line("d", 1, 0)
    return scene


class TestRenderScene:
    def test_writes_png(self, tmp_path):
        path = render_scene(_scene(), tmp_path / "plot.png", dpi=50)
        assert path.exists()
        assert path.read_bytes()[:8] == PNG_MAGIC

    def test_empty_scene(self, tmp_path):
        path = render_scene(Scene(), tmp_path / "empty.png", dpi=50)
        assert path.exists()

    def test_bounds_include_margin(self):
        assert _bounds(_scene(), margin=1.0) == (-1.0, 4.0, -1.0, 5.0)

    def test_empty_bounds(self):
        assert _bounds(Scene(), margin=1.0) == (-10.0, 10.0, -10.0, 10.0)

    def test_vertical_line_spans_view(self):
        x, y = _line_xy(Line2D(a=1, b=0, c=-1), (-1.0, 4.0, -1.0, 5.0))
        assert list(x) == [1.0, 1.0]
        assert list(y) == [-1.0, 5.0]

    def test_sloped_line(self):
        x, y = _line_xy(Line2D(a=1, b=-1, c=0), (-1.0, 4.0, -1.0, 5.0))
        assert list(x) == [-1.0, 4.0]
        assert list(y) == [-1.0, 4.0]
