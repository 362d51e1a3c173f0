"""Line-segment recording turtle."""

from .turtle import Path, Turtle
from .units import Position


class TurtleRecorder(Turtle):
    """Records every pen-down move as an independent two-point segment.

    Relocations (pen-up moves, goto, pop) leave no trace.
    """

    def __init__(self):
        super().__init__()
        self.lines: list[tuple[Position, Position]] = []

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple((src, dst) for src, dst in self.lines)

    def _line_to(self, src: Position, dst: Position) -> None:
        self.lines.append((src, dst))

    def _move_to(self, dst: Position) -> None:
        pass

    def reset(self):
        super().reset()
        self.lines = []
