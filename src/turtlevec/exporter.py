"""Shared plumbing for vector exporters."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from .bounds import Bounds, Viewport
from .config import Config
from .turtle import Path as TurtlePath
from .turtle import Turtle
from .units import Position

Drawing = Turtle | Sequence[Sequence[Position]]


class ExportError(OSError):
    """Writing an exported document to its sink failed."""


def format_number(value: float, precision: int | None = 6) -> str:
    """Format a coordinate, trimming trailing zeros and negative zero."""
    if precision is None:
        text = repr(float(value))
        if text.endswith(".0"):
            text = text[:-2]
    else:
        text = f"{value:.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


class VectorExporter(ABC):
    """Turns recorded turtle paths into a text vector document."""

    name: str = ""
    suffix: str = ""
    encoding: str = "utf-8"
    # SVG's y-axis grows downward
    flip_y: bool = False

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.viewport_config = self.config.viewport
        self.fmt = self.config.format

    def _paths(self, drawing: Drawing) -> list[TurtlePath]:
        paths = getattr(drawing, "paths", drawing)
        if self.flip_y:
            return [tuple(p.flip_y() for p in path) for path in paths]
        return [tuple(path) for path in paths]

    def num(self, value: float) -> str:
        return format_number(value, self.fmt.precision)

    def point(self, p: Position) -> str:
        return f"{self.num(p.x)} {self.num(p.y)}"

    def viewport(self, paths: Sequence[TurtlePath]) -> Viewport:
        bounds = Bounds.of(p for path in paths for p in path)
        return Viewport.fit(bounds, self.viewport_config)

    def export(self, drawing: Drawing) -> str:
        """Render the drawing as a complete document."""
        paths = self._paths(drawing)
        lines = self.header(self.viewport(paths))
        for path in paths:
            if len(path) < 2:
                continue
            lines.extend(self.stroke(path))
        lines.extend(self.footer())
        return "\n".join(lines) + "\n"

    def write(self, drawing: Drawing, sink: BinaryIO):
        """Write the document to a binary sink, wrapping write failures."""
        data = self.export(drawing).encode(self.encoding)
        try:
            sink.write(data)
            sink.flush()
        except OSError as e:
            raise ExportError(f"Failed to write {self.name} document: {e}") from e

    def save(self, drawing: Drawing, path: str | Path) -> Path:
        path = Path(path)
        try:
            f = open(path, "wb")
        except OSError as e:
            raise ExportError(f"Cannot open {path}: {e}") from e
        with f:
            self.write(drawing, f)
        return path

    @abstractmethod
    def header(self, viewport: Viewport) -> list[str]: ...

    @abstractmethod
    def stroke(self, path: TurtlePath) -> list[str]: ...

    @abstractmethod
    def footer(self) -> list[str]: ...


def get_exporter(name: str, config: Config | None = None) -> VectorExporter:
    """Get an exporter by format name."""
    from .eps import EpsExporter
    from .svg import SvgExporter

    exporters = {"svg": SvgExporter, "eps": EpsExporter}
    cls = exporters.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown format: {name} (expected one of {', '.join(exporters)})")
    return cls(config)


def format_for_path(path: str | Path, default: str = "svg") -> str:
    """Infer the export format from a file suffix."""
    suffix = Path(path).suffix.lower().lstrip(".")
    if suffix in ("svg", "eps"):
        return suffix
    if suffix == "ps":
        return "eps"
    return default


def list_formats() -> list[str]:
    return ["svg", "eps"]
