"""Turtle graphics state machine."""

import math
from dataclasses import dataclass, field
from typing import Protocol

Color = str


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    color: Color


class Turtle(Protocol):
    """Anything that can be driven by the drawing routines."""

    def forward(self, distance: float) -> None: ...

    def turn(self, angle: float) -> None: ...

    def set_color(self, color: Color) -> None: ...


@dataclass
class SimpleTurtle:
    """Cursor on the plane that records every move as a segment.

    Heading is in degrees, counter-clockwise from the positive x axis,
    and always kept in [0, 360).
    """

    position: Point = field(default_factory=Point)
    heading: float = 0.0
    color: Color = "black"
    path: list[Segment] = field(default_factory=list)

    def forward(self, distance: float):
        radians = math.radians(self.heading)
        end = Point(
            self.position.x + distance * math.cos(radians),
            self.position.y + distance * math.sin(radians),
        )
        self.path.append(Segment(self.position, end, self.color))
        self.position = end

    def turn(self, angle: float):
        heading = (self.heading + angle) % 360
        # tiny negative values wrap to exactly 360.0 under float modulo
        self.heading = 0.0 if heading == 360 else heading

    def set_color(self, color: Color):
        self.color = color

    def get_path(self) -> list[Segment]:
        return list(self.path)
