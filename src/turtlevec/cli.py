"""CLI for turtlevec."""

import logging
from pathlib import Path

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """turtlevec - Turtle graphics to SVG/EPS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_path: Path | None):
    from .config import Config

    if config_path is None:
        return Config()
    try:
        return Config.load(config_path)
    except (OSError, ValueError, TypeError) as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}") from e


def _save(turtle, output: Path, fmt: str | None, config_path: Path | None):
    from .exporter import ExportError, format_for_path, get_exporter

    exporter = get_exporter(fmt or format_for_path(output), _load_config(config_path))
    try:
        exporter.save(turtle, output)
    except ExportError as e:
        raise click.ClickException(str(e)) from e
    strokes = sum(1 for path in turtle.paths if len(path) > 1)
    click.echo(f"Saved: {output} ({exporter.name}, {strokes} strokes)")


@main.command()
@click.argument("script", type=Path)
@click.option("--output", "-o", required=True, type=Path)
@click.option("--format", "-f", "fmt", type=click.Choice(["svg", "eps"]))
@click.option("--config", "-c", "config_path", type=Path)
@click.option("--recorder", is_flag=True, help="Record independent line segments")
def render(script: Path, output: Path, fmt: str | None, config_path: Path | None, recorder: bool):
    """Run a turtle command script and export the drawing."""
    from .program import ProgramError, run_program
    from .recorder import TurtleRecorder
    from .turtle import Canvas

    turtle = TurtleRecorder() if recorder else Canvas()
    try:
        source = script.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {script}: {e}") from e

    try:
        run_program(turtle, source)
    except ProgramError as e:
        raise click.ClickException(f"{script}: {e}") from e

    _save(turtle, output, fmt, config_path)


@main.command()
@click.argument("name")
@click.option("--output", "-o", required=True, type=Path)
@click.option("--format", "-f", "fmt", type=click.Choice(["svg", "eps"]))
@click.option("--config", "-c", "config_path", type=Path)
def demo(name: str, output: Path, fmt: str | None, config_path: Path | None):
    """Export a built-in demo drawing."""
    from .demos import DEMOS, draw_demo

    if name not in DEMOS:
        raise click.BadParameter(f"expected one of {', '.join(DEMOS)}", param_hint="NAME")
    _save(draw_demo(name), output, fmt, config_path)


@main.command()
def formats():
    """List export formats and demos."""
    from .demos import DEMOS
    from .exporter import list_formats

    for name in list_formats():
        click.echo(f"format: {name}")
    for name, cfg in DEMOS.items():
        click.echo(f"demo: {name} ({cfg['name']})")


if __name__ == "__main__":
    main()
