"""Built-in demo drawings."""

from .turtle import Canvas, Turtle


def square(turtle: Turtle, size: float = 10.0) -> Turtle:
    turtle.pen_down()
    for _ in range(4):
        turtle.forward(size)
        turtle.right(90)
    return turtle


def broken_square(turtle: Turtle, size: float = 100.0, gap: float = 10.0) -> Turtle:
    """Two open strokes separated by a pen-up hop."""
    turtle.forward(size)
    turtle.right(90)
    turtle.forward(size)
    turtle.pen_up()
    turtle.forward(gap)
    turtle.pen_down()
    turtle.right(90)
    turtle.forward(size)
    turtle.right(90)
    turtle.forward(size)
    return turtle


def tree(turtle: Turtle, length: float = 60.0, depth: int = 6, angle: float = 25.0) -> Turtle:
    """Binary branching tree, exercising push/pop."""
    turtle.left(90)

    def branch(size: float, level: int):
        turtle.forward(size)
        if level > 0:
            for turn in (angle, -angle):
                turtle.push()
                turtle.left(turn)
                branch(size * 0.7, level - 1)
                turtle.pop()

    branch(length, depth)
    return turtle


DEMOS = {
    "square": {"name": "Square", "draw": square},
    "broken-square": {"name": "Broken Square", "draw": broken_square},
    "tree": {"name": "Branching Tree", "draw": tree},
}


def draw_demo(name: str, turtle: Turtle | None = None) -> Turtle:
    demo = DEMOS.get(name)
    if demo is None:
        raise ValueError(f"Unknown demo: {name}")
    return demo["draw"](turtle if turtle is not None else Canvas())
