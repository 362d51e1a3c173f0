"""Bounding geometry for exported drawings."""

from collections.abc import Iterable
from dataclasses import dataclass

from .config import ViewportConfig
from .units import Position


@dataclass
class Bounds:
    """Running min/max over observed points."""

    min: Position
    max: Position

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def extend(self, point: Position):
        self.min = self.min.min(point)
        self.max = self.max.max(point)

    @classmethod
    def of(cls, points: Iterable[Position]) -> "Bounds | None":
        """Bounds of ``points``, or None when there are none."""
        bounds = None
        for point in points:
            if bounds is None:
                bounds = cls(point, point)
            else:
                bounds.extend(point)
        return bounds


@dataclass
class Viewport:
    """Padded drawing area plus the stroke width derived from it."""

    origin: Position
    width: float
    height: float
    stroke_width: float

    @property
    def corner(self) -> Position:
        return Position(self.origin.x + self.width, self.origin.y + self.height)

    @classmethod
    def fit(cls, bounds: Bounds | None, config: ViewportConfig | None = None) -> "Viewport":
        cfg = config or ViewportConfig()
        if bounds is None:
            bounds = Bounds(Position.origin(), Position.origin())

        width = max(bounds.width, cfg.min_size)
        height = max(bounds.height, cfg.min_size)
        scale = 1 + 2 * cfg.padding

        origin = Position(bounds.min.x - cfg.padding * width, bounds.min.y - cfg.padding * height)
        width, height = width * scale, height * scale
        return cls(
            origin=origin,
            width=width,
            height=height,
            stroke_width=max(width, height) / cfg.stroke_divisor,
        )
