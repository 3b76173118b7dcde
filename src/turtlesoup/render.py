"""HTML/SVG export of turtle paths."""

import math
import subprocess
from pathlib import Path

import click

from .config import Config
from .turtle import Segment

# Tried in order; the first one that runs cleanly wins.
VIEWER_COMMANDS = [
    ["open"],
    ["cmd", "/c", "start", ""],
    ["xdg-open"],
]


def _num(value: float) -> str:
    """Shortest text for a coordinate, without a trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class HtmlExporter:
    """Exports turtle paths to a standalone HTML page with an inline SVG."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.canvas = self.config.canvas

    def to_device(self, x: float, y: float) -> tuple[float, float]:
        """Map world coordinates onto the canvas, origin at the centre."""
        return (
            x * self.canvas.scale + self.canvas.width / 2,
            y * self.canvas.scale + self.canvas.height / 2,
        )

    def line(self, segment: Segment) -> str:
        x1, y1 = self.to_device(segment.start.x, segment.start.y)
        x2, y2 = self.to_device(segment.end.x, segment.end.y)
        return (
            f'<line x1="{_num(x1)}" y1="{_num(y1)}" x2="{_num(x2)}" y2="{_num(y2)}" '
            f'stroke="{segment.color}" stroke-width="{self.canvas.stroke_width}"/>'
        )

    def export(self, segments: list[Segment]) -> str:
        """Convert a segment list to an HTML document string."""
        lines = "".join(self.line(s) for s in segments)
        c = self.canvas

        return f"""<!DOCTYPE html>
<html>
<head>
    <title>{self.config.output.title}</title>
    <style>
        body {{ margin: 0; }}
        canvas {{ display: block; }}
    </style>
</head>
<body>
    <svg width="{c.width}" height="{c.height}" style="background-color:{c.background};">
        {lines}
    </svg>
</body>
</html>"""


def generate_html(segments: list[Segment]) -> str:
    """Render segments with the default 500x500 canvas."""
    return HtmlExporter().export(segments)


def save_html(html: str, filename: str | Path = "output.html") -> Path:
    path = Path(filename)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    click.echo(f"Drawing saved to {path}")
    return path


def open_html(filename: str | Path = "output.html") -> bool:
    """Try to show the file in the platform viewer. Never raises."""
    for cmd in VIEWER_COMMANDS:
        try:
            subprocess.run(
                [*cmd, str(filename)],
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            return True
        except (OSError, subprocess.CalledProcessError):
            continue

    click.echo(click.style("Could not open the file automatically", fg="yellow"))
    return False
