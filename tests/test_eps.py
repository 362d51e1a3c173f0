"""Tests for EPS export."""

from turtlevec.eps import EpsExporter
from turtlevec.turtle import Canvas
from turtlevec.units import Position


def right_angle() -> Canvas:
    t = Canvas()
    t.forward(100)
    t.right(90)
    t.forward(100)
    return t


class TestEpsDocument:
    def test_header_comments(self):
        """Should start with the DSC header and end with %%EOF."""
        lines = EpsExporter().export(Canvas()).splitlines()
        assert lines[0] == "%!PS-Adobe-3.0 EPSF-3.0"
        assert "%%LanguageLevel: 2" in lines
        assert "%%Pages: 1" in lines
        assert lines[-1] == "%%EOF"

    def test_empty_canvas(self):
        """Should emit the minimum viewport and no strokes."""
        eps = EpsExporter().export(Canvas())
        assert "%%BoundingBox: -10 -10 110 110" in eps
        assert "0.12 setlinewidth" in eps
        assert "newpath" not in eps

    def test_keeps_native_y_axis(self):
        """Should write turtle coordinates without flipping y."""
        lines = EpsExporter().export(right_angle()).splitlines()
        start = lines.index("newpath")
        assert lines[start : start + 5] == [
            "newpath",
            "0 0 moveto",
            "100 0 lineto",
            "100 -100 lineto",
            "stroke",
        ]
        assert "%%BoundingBox: -10 -110 110 10" in lines

    def test_stroke_per_path(self):
        t = Canvas()
        t.forward(10)
        t.pen_up()
        t.goto(Position(0, 20))
        t.pen_down()
        t.forward(10)
        t.pen_up()
        t.goto(Position(0, 40))
        eps = EpsExporter().export(t)
        assert eps.count("newpath") == 2
        assert eps.count("stroke") == 2
        assert eps.count("lineto") == 2

    def test_nan_does_not_crash(self):
        t = Canvas()
        t.forward(float("nan"))
        assert EpsExporter().export(t).endswith("%%EOF\n")
