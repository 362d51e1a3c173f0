"""Tests for turtle command scripts."""

import pytest

from turtlevec.program import ProgramError, parse_program, run_program
from turtlevec.recorder import TurtleRecorder
from turtlevec.turtle import Canvas
from turtlevec.units import Degree, Position, Radian

SQUARE = """
# a square
pendown
fd 10   # side
rt 90
fd 10
rt 90
fd 10
rt 90
fd 10
"""


class TestParseProgram:
    def test_skips_comments_and_blanks(self):
        program = parse_program("\n# nothing\n   \n")
        assert len(program) == 0

    def test_aliases(self):
        """Should map short aliases to command names."""
        program = parse_program("fd 1\nbk 2\nlt 3\nrt 4\npu\npd")
        assert [c.name for c in program.commands] == [
            "forward",
            "backward",
            "left",
            "right",
            "penup",
            "pendown",
        ]

    def test_angle_units(self):
        """Should tag angles as degrees unless suffixed with rad."""
        program = parse_program("left 90\nright 1.5rad\nrotate 45deg")
        assert program.commands[0].args == (Degree(90.0),)
        assert program.commands[1].args == (Radian(1.5),)
        assert program.commands[2].args == (Degree(45.0),)

    def test_repeat_is_a_single_node(self):
        """Should keep a repeat as one command wrapping its body."""
        program = parse_program("repeat 3 forward 5")
        assert len(program) == 1
        (command,) = program.commands
        assert command.name == "repeat"
        assert command.line == 1
        count, body = command.args
        assert count == 3
        assert body.name == "forward"
        assert body.args == (5.0,)

    def test_nested_repeat_is_not_expanded(self):
        """Should parse huge nested repeats without materialising them."""
        program = parse_program("repeat 100000 repeat 100000 fd 1")
        assert len(program) == 1
        count, inner = program.commands[0].args
        assert count == 100000
        assert inner.name == "repeat"
        assert inner.args[0] == 100000
        assert inner.args[1].name == "forward"

    def test_unknown_command(self):
        """Should report the offending line number."""
        with pytest.raises(ProgramError) as exc:
            parse_program("forward 1\njump 3")
        assert exc.value.line == 2
        assert str(exc.value) == "L2: unknown command 'jump'"

    def test_wrong_arity(self):
        with pytest.raises(ProgramError, match="goto: expected 2"):
            parse_program("goto 1")

    def test_bad_number(self):
        with pytest.raises(ProgramError, match="expected a number"):
            parse_program("forward ten")

    def test_unit_on_distance(self):
        with pytest.raises(ProgramError, match="only applies to angles"):
            parse_program("forward 10rad")

    def test_bad_repeat(self):
        with pytest.raises(ProgramError, match="invalid count"):
            parse_program("repeat x forward 1")


class TestRunProgram:
    def test_square(self):
        t = run_program(Canvas(), SQUARE)
        assert len(t.paths) == 1
        assert len(t.paths[0]) == 5

    def test_repeat_runs_body_count_times(self):
        t = run_program(Canvas(), "repeat 3 fd 10")
        (path,) = t.paths
        assert len(path) == 4
        assert t.position.x == pytest.approx(30)

    def test_nested_repeat_runs(self):
        """Should multiply nested repeat counts when running."""
        t = run_program(TurtleRecorder(), "repeat 4 repeat 5 fd 1")
        assert len(t.lines) == 20

    def test_repeat_zero(self):
        t = run_program(Canvas(), "repeat 0 fd 10")
        assert t.paths == ()

    def test_underflow_inside_repeat_reports_line(self):
        with pytest.raises(ProgramError) as exc:
            run_program(Canvas(), "push\nrepeat 2 pop")
        assert exc.value.line == 2

    def test_goto_and_home(self):
        t = run_program(Canvas(), "goto 3 4\nhome")
        assert t.position == Position.origin()

    def test_branching(self):
        """Should start a new path after pop."""
        t = run_program(Canvas(), "push\nfd 10\npop\nlt 90\nfd 10")
        assert len(t.paths) == 2

    def test_underflow_reports_line(self):
        """Should turn a stack underflow into a ProgramError."""
        with pytest.raises(ProgramError) as exc:
            run_program(Canvas(), "push\npop\npop")
        assert exc.value.line == 3

    def test_parse_errors_run_nothing(self):
        t = Canvas()
        with pytest.raises(ProgramError):
            run_program(t, "fd 10\nbogus")
        assert t.paths == ()

    def test_runs_on_recorder(self):
        t = run_program(TurtleRecorder(), "fd 1\nmove 1\nfd 1")
        assert len(t.lines) == 2
