"""Turtle graphics state machine and path accumulation."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from .units import Degree, Distance, Position, Radian, as_degrees, as_distance

Path = tuple[Position, ...]


class StackUnderflowError(IndexError):
    """Raised when pop() is called with only the base state left."""


@dataclass
class TurtleState:
    position: Position = field(default_factory=Position.origin)
    heading: Degree = field(default_factory=lambda: Degree(0.0))
    pen_is_down: bool = True

    def copy(self) -> "TurtleState":
        return replace(self)


class Turtle(ABC):
    """Command surface shared by every turtle implementation.

    Heading 0 points along +x and positive angles turn counter-clockwise,
    so ``left`` adds to the heading and ``right`` subtracts from it. The
    heading is never normalised.

    Subclasses decide what a stroke is by implementing ``_line_to`` (pen-down
    motion from ``src`` to ``dst``) and ``_move_to`` (pen-up relocation).
    """

    def __init__(self):
        self._states: list[TurtleState] = [TurtleState()]

    @property
    @abstractmethod
    def paths(self) -> tuple[Path, ...]:
        """Snapshot of the recorded polylines in draw order."""

    @abstractmethod
    def _line_to(self, src: Position, dst: Position) -> None: ...

    @abstractmethod
    def _move_to(self, dst: Position) -> None: ...

    @property
    def _current(self) -> TurtleState:
        return self._states[-1]

    @property
    def state(self) -> TurtleState:
        return self._current.copy()

    @property
    def position(self) -> Position:
        return self._current.position

    @property
    def heading(self) -> Degree:
        return self._current.heading

    @property
    def stack_depth(self) -> int:
        """Number of saved states above the base state."""
        return len(self._states) - 1

    def _displacement(self, distance: Distance) -> Position:
        rad = self._current.heading.to_radians().value
        return Position(math.cos(rad) * distance.value, math.sin(rad) * distance.value)

    def forward(self, distance: float | Distance):
        """Move along the heading, drawing if the pen is down."""
        src = self._current.position
        dst = src + self._displacement(as_distance(distance))
        if self._current.pen_is_down:
            self._line_to(src, dst)
        else:
            self._move_to(dst)
        self._current.position = dst

    def backward(self, distance: float | Distance):
        self.forward(-as_distance(distance))

    def move_forward(self, distance: float | Distance):
        """Move along the heading without drawing, whatever the pen state."""
        dst = self._current.position + self._displacement(as_distance(distance))
        self._move_to(dst)
        self._current.position = dst

    def rotate(self, angle: float | Degree | Radian):
        """Add ``angle`` to the heading.

        Rotation is plain float addition, so ``left(a)`` then ``right(a)`` can
        leave the heading off by up to one ulp of the larger intermediate value.
        """
        self._current.heading = Degree(self._current.heading.value + as_degrees(angle).value)

    def left(self, angle: float | Degree | Radian):
        self.rotate(angle)

    def right(self, angle: float | Degree | Radian):
        self.rotate(Degree(-as_degrees(angle).value))

    def pen_down(self):
        self._move_to(self._current.position)
        self._current.pen_is_down = True

    def pen_up(self):
        self._current.pen_is_down = False

    def is_pen_down(self) -> bool:
        return self._current.pen_is_down

    def is_pen_up(self) -> bool:
        return not self._current.pen_is_down

    def goto(self, position: Position):
        """Teleport to ``position``; never draws."""
        self._current.position = position
        self._move_to(position)

    def home(self):
        self.goto(Position.origin())

    def push(self):
        """Save a copy of the current state on the stack."""
        self._states.append(self._current.copy())

    def pop(self):
        """Restore the previously pushed state."""
        if len(self._states) == 1:
            raise StackUnderflowError("pop() without matching push()")
        self._states.pop()
        self._move_to(self._current.position)

    def reset(self):
        self._states = [TurtleState()]


class Canvas(Turtle):
    """Turtle that accumulates polylines, one per stroke in the output.

    A pen-up relocation either starts a new single-point path or, when the
    last path is still a lone anchor, moves that anchor in place. Pen-down
    motion always extends the last path.
    """

    def __init__(self):
        super().__init__()
        self._paths: list[list[Position]] = []

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(tuple(path) for path in self._paths)

    def _line_to(self, src: Position, dst: Position) -> None:
        if not self._paths:
            self._paths.append([src])
        self._paths[-1].append(dst)

    def _move_to(self, dst: Position) -> None:
        if not self._paths or len(self._paths[-1]) > 1:
            self._paths.append([dst])
        else:
            # Lone anchor, nothing drawn from it yet
            self._paths[-1][0] = dst

    def reset(self):
        super().reset()
        self._paths = []
