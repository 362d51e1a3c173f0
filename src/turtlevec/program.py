"""Line-oriented turtle command scripts."""

import logging
import re
from dataclasses import dataclass, field

from .turtle import StackUnderflowError, Turtle
from .units import Degree, Position, Radian

logger = logging.getLogger(__name__)

ALIASES = {
    "fd": "forward",
    "bk": "backward",
    "back": "backward",
    "lt": "left",
    "rt": "right",
    "pu": "penup",
    "pd": "pendown",
}

# command -> number of numeric arguments
ARITY = {
    "forward": 1,
    "backward": 1,
    "move": 1,
    "left": 1,
    "right": 1,
    "rotate": 1,
    "penup": 0,
    "pendown": 0,
    "goto": 2,
    "home": 0,
    "push": 0,
    "pop": 0,
}

ANGLE_COMMANDS = {"left", "right", "rotate"}

NUMBER = re.compile(
    r"^([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|[-+]?inf|nan)(rad|deg)?$",
    re.IGNORECASE,
)


class ProgramError(ValueError):
    """A script line could not be parsed or run."""

    def __init__(self, line: int, message: str):
        super().__init__(f"L{line}: {message}")
        self.line = line


@dataclass
class Command:
    name: str
    args: tuple = ()
    line: int = 0


@dataclass
class Program:
    commands: list[Command] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.commands)


def _parse_arg(token: str, command: str, line: int):
    m = NUMBER.match(token)
    if not m:
        raise ProgramError(line, f"{command}: expected a number, got {token!r}")
    value = float(m.group(1))
    unit = (m.group(2) or "").lower()
    if unit and command not in ANGLE_COMMANDS:
        raise ProgramError(line, f"{command}: unit suffix {unit!r} only applies to angles")
    if command in ANGLE_COMMANDS:
        return Radian(value) if unit == "rad" else Degree(value)
    return value


def _parse_command(tokens: list[str], line: int) -> Command:
    name = tokens[0].lower()
    name = ALIASES.get(name, name)

    if name == "repeat":
        if len(tokens) < 3:
            raise ProgramError(line, "repeat: expected a count and a command")
        try:
            count = int(tokens[1])
        except ValueError:
            raise ProgramError(line, f"repeat: invalid count {tokens[1]!r}") from None
        if count < 0:
            raise ProgramError(line, f"repeat: negative count {count}")
        # Kept as a node; expanded only while running
        return Command("repeat", (count, _parse_command(tokens[2:], line)), line)

    if name not in ARITY:
        raise ProgramError(line, f"unknown command {tokens[0]!r}")

    args = tokens[1:]
    if len(args) != ARITY[name]:
        raise ProgramError(line, f"{name}: expected {ARITY[name]} argument(s), got {len(args)}")

    return Command(name, tuple(_parse_arg(a, name, line) for a in args), line)


def parse_program(source: str) -> Program:
    """Parse a script into commands. Nothing is executed."""
    program = Program()
    for i, raw in enumerate(source.splitlines(), 1):
        text = raw.split("#", 1)[0].strip()
        if not text:
            continue
        program.commands.append(_parse_command(text.split(), i))
    return program


EXECUTORS = {
    "forward": lambda t, d: t.forward(d),
    "backward": lambda t, d: t.backward(d),
    "move": lambda t, d: t.move_forward(d),
    "left": lambda t, a: t.left(a),
    "right": lambda t, a: t.right(a),
    "rotate": lambda t, a: t.rotate(a),
    "penup": lambda t: t.pen_up(),
    "pendown": lambda t: t.pen_down(),
    "goto": lambda t, x, y: t.goto(Position(x, y)),
    "home": lambda t: t.home(),
    "push": lambda t: t.push(),
    "pop": lambda t: t.pop(),
}


def execute(turtle: Turtle, command: Command):
    if command.name == "repeat":
        count, body = command.args
        for _ in range(count):
            execute(turtle, body)
        return

    func = EXECUTORS.get(command.name)
    if func is None:
        raise ProgramError(command.line, f"unknown command {command.name!r}")
    try:
        func(turtle, *command.args)
    except StackUnderflowError as e:
        raise ProgramError(command.line, str(e)) from e


def run_program(turtle: Turtle, source: str | Program) -> Turtle:
    """Parse (if needed) and run a script against ``turtle``."""
    program = parse_program(source) if isinstance(source, str) else source
    for command in program.commands:
        execute(turtle, command)
    logger.debug("Executed %d commands, %d paths recorded", len(program), len(turtle.paths))
    return turtle
