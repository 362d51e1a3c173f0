"""Encapsulated PostScript export of turtle paths."""

import math

from .bounds import Viewport
from .exporter import VectorExporter
from .turtle import Path


def _whole(value: float, rounding) -> str:
    # DSC bounding boxes are integers; nan/inf pass through unrounded
    if not math.isfinite(value):
        return str(value)
    return str(rounding(value))


class EpsExporter(VectorExporter):
    """Exports paths as EPS, keeping the turtle's bottom-up y-axis."""

    name = "eps"
    suffix = ".eps"
    encoding = "ascii"

    def header(self, viewport: Viewport) -> list[str]:
        lo, hi = viewport.origin, viewport.corner
        return [
            "%!PS-Adobe-3.0 EPSF-3.0",
            "%%BoundingBox: "
            f"{_whole(lo.x, math.floor)} {_whole(lo.y, math.floor)} "
            f"{_whole(hi.x, math.ceil)} {_whole(hi.y, math.ceil)}",
            f"%%HiResBoundingBox: {self.point(lo)} {self.point(hi)}",
            "%%Creator: turtlevec",
            "%%LanguageLevel: 2",
            "%%Pages: 1",
            "%%EndComments",
            "1 setlinejoin 1 setlinecap",
            f"{self.num(viewport.stroke_width)} setlinewidth",
        ]

    def stroke(self, path: Path) -> list[str]:
        head, *tail = path
        lines = ["newpath", f"{self.point(head)} moveto"]
        lines.extend(f"{self.point(p)} lineto" for p in tail)
        lines.append("stroke")
        return lines

    def footer(self) -> list[str]:
        return ["showpage", "%%EOF"]
