"""CLI for turtlesoup."""

from pathlib import Path

import click

from .config import DEFAULT_CONFIG_PATH, Config
from .render import HtmlExporter, open_html, save_html
from .shapes import (
    distance,
    draw_approximate_circle,
    draw_personal_art,
    draw_square,
    find_path,
)
from .turtle import Point, SimpleTurtle


def _load_config(path: Path | None) -> Config:
    return Config.load(path) if path else Config()


def _render(turtle: SimpleTurtle, config: Config, output: Path | None, show: bool):
    html = HtmlExporter(config).export(turtle.get_path())
    saved = save_html(html, output or config.output.filename)
    if show:
        open_html(saved)


def _parse_point(ctx, param, values) -> list[Point]:
    points = []
    for value in values:
        try:
            x, y = value.split(",")
            points.append(Point(float(x), float(y)))
        except ValueError:
            raise click.BadParameter(f"expected x,y but got {value!r}")
    return points


@click.group()
def main():
    """turtlesoup - Turtle graphics to SVG."""
    pass


@main.command()
@click.option("--output", "-o", type=Path, help="Output HTML file")
@click.option("--config", "-c", "config_path", type=Path)
@click.option("--open/--no-open", "show", default=True)
def demo(output: Path | None, config_path: Path | None, show: bool):
    """Draw the demonstration picture."""
    config = _load_config(config_path)
    turtle = SimpleTurtle(color=config.pen.color)

    draw_square(turtle, 100)
    draw_approximate_circle(turtle, 50, 36)

    p1 = Point(0, 0)
    p2 = Point(100, 100)
    click.echo(f"Distance between p1 and p2: {distance(p1, p2)}")

    points_to_visit = [Point(0, 0), Point(50, 50), Point(100, 0)]
    click.echo(f"Path instructions: {find_path(turtle, points_to_visit)}")

    draw_personal_art(turtle)

    _render(turtle, config, output, show)


@main.command(name="distance", context_settings={"ignore_unknown_options": True})
@click.argument("x1", type=float)
@click.argument("y1", type=float)
@click.argument("x2", type=float)
@click.argument("y2", type=float)
def distance_cmd(x1: float, y1: float, x2: float, y2: float):
    """Euclidean distance between two points."""
    click.echo(distance(Point(x1, y1), Point(x2, y2)))


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("points", nargs=-1, callback=_parse_point)
def path(points: list[Point]):
    """Turn/forward instructions visiting POINTS (each as x,y)."""
    for instruction in find_path(SimpleTurtle(), points):
        click.echo(instruction)


@main.command()
@click.argument("kind", type=click.Choice(["square", "circle", "art"]))
@click.option("--size", "-s", default=100.0, type=float, help="Side length or radius")
@click.option("--sides", "-n", default=36, type=int, help="Sides for circles")
@click.option("--color", help="Pen color")
@click.option("--output", "-o", type=Path, help="Output HTML file")
@click.option("--config", "-c", "config_path", type=Path)
@click.option("--open/--no-open", "show", default=True)
def shape(
    kind: str,
    size: float,
    sides: int,
    color: str | None,
    output: Path | None,
    config_path: Path | None,
    show: bool,
):
    """Render a single shape."""
    config = _load_config(config_path)
    turtle = SimpleTurtle(color=color or config.pen.color)

    if kind == "square":
        draw_square(turtle, size)
    elif kind == "circle":
        draw_approximate_circle(turtle, size, sides)
    else:
        draw_personal_art(turtle)

    click.echo(f"{len(turtle.path)} segments")
    _render(turtle, config, output, show)


@main.command(name="config-init")
@click.argument("path", type=Path, default=DEFAULT_CONFIG_PATH)
def config_init(path: Path):
    """Write the default configuration."""
    Config().save(path)
    click.echo(f"Saved: {path}")


if __name__ == "__main__":
    main()
