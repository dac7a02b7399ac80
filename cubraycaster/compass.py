"""The compass drawn in the corner of the screen."""

from __future__ import annotations

import math

from .constants import BASE_WIDTH, COLOR_NORTH, COLOR_OTHER, CROSS_SIZE, PI, WIDTH
from .image import Canvas

Point = tuple[int, int]


def _cdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def interp_x(p0: Point, p1: Point, y: int) -> int:
    """The x of the edge from ``p0`` to ``p1`` at row ``y``, in whole pixels."""
    if p1[1] == p0[1]:
        return p0[0]
    return p0[0] + _cdiv((y - p0[1]) * (p1[0] - p0[0]), p1[1] - p0[1])


def point_at(angle: float, length: int, center: Point) -> Point:
    """The point ``length`` pixels from ``center`` along ``angle``."""
    return (
        int(center[0] + math.cos(angle) * length),
        int(center[1] + math.sin(angle) * length),
    )


def _scanline(canvas: Canvas, y: int, x0: int, x1: int, color: int) -> None:
    for x in range(min(x0, x1), max(x0, x1) + 1):
        canvas.draw_pixel(x, y, color)


def fill_triangle(canvas: Canvas, p0: Point, p1: Point, p2: Point, color: int) -> None:
    """Fill the triangle with corners ``p0``, ``p1`` and ``p2``."""
    if p1[1] < p0[1]:
        p0, p1 = p1, p0
    if p2[1] < p0[1]:
        p0, p2 = p2, p0
    if p2[1] < p1[1]:
        p1, p2 = p2, p1
    for y in range(p0[1], p1[1]):
        _scanline(canvas, y, interp_x(p0, p2, y), interp_x(p0, p1, y), color)
    for y in range(p1[1], p2[1] + 1):
        _scanline(canvas, y, interp_x(p0, p2, y), interp_x(p1, p2, y), color)


def draw_arrow(canvas: Canvas, angle: float, color: int, center: Point) -> None:
    """Draw one compass needle pointing along ``angle``."""
    tip = point_at(angle, CROSS_SIZE, center)
    base1 = point_at(angle + PI / 2, BASE_WIDTH, center)
    base2 = point_at(angle - PI / 2, BASE_WIDTH, center)
    fill_triangle(canvas, tip, base1, base2, color)


def normalize_angle(angle: float) -> float:
    """Bring ``angle`` into ``[0, 2*PI)``."""
    while angle < 0:
        angle += 2 * PI
    while angle >= 2 * PI:
        angle -= 2 * PI
    return angle


def draw_compass(canvas: Canvas, player_angle: float) -> None:
    """Draw four needles in the top-right corner, the north one in red."""
    center = (WIDTH - CROSS_SIZE - 20, CROSS_SIZE + 20)
    north = normalize_angle(3 * PI - player_angle)
    for i in range(4):
        color = COLOR_NORTH if i == 0 else COLOR_OTHER
        draw_arrow(canvas, north + i * (PI / 2), color, center)