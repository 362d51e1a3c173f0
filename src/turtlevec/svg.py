"""SVG export of turtle paths."""

from xml.sax.saxutils import quoteattr

from .bounds import Viewport
from .exporter import VectorExporter
from .turtle import Path


class SvgExporter(VectorExporter):
    """Exports paths as an SVG document, one <path> per polyline."""

    name = "svg"
    suffix = ".svg"
    flip_y = True

    def header(self, viewport: Viewport) -> list[str]:
        view_box = " ".join(
            self.num(v)
            for v in (viewport.origin.x, viewport.origin.y, viewport.width, viewport.height)
        )
        return [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" baseProfile="full" '
            f'viewBox="{view_box}">',
            f"<g stroke={quoteattr(self.fmt.stroke_color)} "
            f'stroke-width="{self.num(viewport.stroke_width)}" fill="none">',
        ]

    def stroke(self, path: Path) -> list[str]:
        head, *tail = path
        d = [f"M{self.point(head)}"]
        d.extend(f"L{self.point(p)}" for p in tail)
        return [f'<path d="{" ".join(d)}"/>']

    def footer(self) -> list[str]:
        return ["</g>", "</svg>"]
