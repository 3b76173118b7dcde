"""Shapes and geometry helpers built on the turtle primitives."""

import math
from decimal import ROUND_HALF_UP, Decimal

from .turtle import Point, Turtle

PALETTE = ["red", "green", "blue", "orange", "purple"]


def draw_square(turtle: Turtle, side_length: float):
    """Draw a square, turning 90 degrees after each side.

    The square is oriented by whatever heading the turtle has on entry.
    """
    for _ in range(4):
        turtle.forward(side_length)
        turtle.turn(90)


def chord_length(radius: float, angle_in_degrees: float) -> float:
    """Length of the chord subtended by `angle_in_degrees` on a circle."""
    return 2 * radius * math.sin(math.radians(angle_in_degrees) / 2)


def draw_approximate_circle(turtle: Turtle, radius: float, num_sides: float):
    """Draw a regular polygon with `num_sides` sides inscribed in a circle.

    A fractional count draws one extra side, e.g. 3.5 draws four.
    """
    if num_sides <= 0:
        return

    angle = 360 / num_sides
    side_length = chord_length(radius, angle)
    drawn = 0
    while drawn < num_sides:
        turtle.forward(side_length)
        turtle.turn(angle)
        drawn += 1


def distance(p1: Point, p2: Point) -> float:
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def _fixed(value: float) -> str:
    """Two decimals, rounding exact binary ties away from zero (0.125 -> 0.13)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= 1e21:
        return repr(value)
    if value == 0:
        value = 0.0
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def find_path(turtle: Turtle, points: list[Point]) -> list[str]:
    """Describe how to visit `points` in order as turn/forward instructions.

    Each leg yields an absolute heading (degrees, from atan2) and a length,
    both to two decimals. The turtle is not moved.
    """
    instructions = []
    if not points:
        return instructions

    current = points[0]
    for nxt in points[1:]:
        angle = math.degrees(math.atan2(nxt.y - current.y, nxt.x - current.x))
        dist = distance(current, nxt)
        instructions.append(f"turn {_fixed(angle)}")
        instructions.append(f"forward {_fixed(dist)}")
        current = nxt
    return instructions


def draw_personal_art(turtle: Turtle):
    """Rosette of 36 circles, rotating 10 degrees and cycling colors."""
    for i in range(36):
        turtle.set_color(PALETTE[i % len(PALETTE)])
        draw_approximate_circle(turtle, 50, 36)
        turtle.turn(10)
