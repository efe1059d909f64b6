"""Perpendiculars, least-squares fits and rotations in the plane."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from . import formatter
from .rational import Rational

_EPSILON = sys.float_info.epsilon

PERPENDICULAR_LABEL = "수선 방정식"
FOOT_LABEL = "교점"
LEAST_SQUARES_LABEL = "최소 자승식"

Point = Sequence[float]


class CollinearPointError(ValueError):
    """Raised when a perpendicular is dropped from a point on the line itself."""


@dataclass(frozen=True)
class Perpendicular:
    """The perpendicular from a point to a line and where it meets the line."""

    equation: str
    intersection: str
    foot: tuple[int, int]


@dataclass(frozen=True)
class LineFit:
    """A least-squares line and the segment that draws it on the board."""

    equation: str
    start: tuple[int, int]
    end: tuple[int, int]


@dataclass(frozen=True)
class CircleFit:
    """A least-squares circle and its bounding box."""

    equation: str
    center: tuple[float, float]
    radius: float
    top_left: tuple[int, int]
    bottom_right: tuple[int, int]


@dataclass(frozen=True)
class ParabolaFit:
    """A least-squares parabola.

    ``axis`` is ``"x"`` for ``y = ax² + bx + c`` and ``"y"`` for
    ``x = ay² + by + c``.
    """

    equation: str
    axis: str
    a: float
    b: float
    c: float


def _pairs(points: Iterable[Point]) -> list[tuple[float, float]]:
    return [(float(p[0]), float(p[1])) for p in points]


def _require_three(points: list[tuple[float, float]]) -> None:
    if len(points) < 3:
        raise ValueError("a fit needs at least three points")


def perpendicular(p1: Point, p2: Point, p3: Point) -> Perpendicular:
    """Drop a perpendicular from ``p3`` onto the line through ``p1`` and ``p2``."""
    x1, y1 = int(p1[0]), int(p1[1])
    x2, y2 = int(p2[0]), int(p2[1])
    x3, y3 = int(p3[0]), int(p3[1])
    dx, dy = x2 - x1, y2 - y1

    if dx == 0:
        return Perpendicular(
            formatter.horizontal_line(PERPENDICULAR_LABEL, y3),
            formatter.float_coord(FOOT_LABEL, x1, y3),
            (x1, y3),
        )
    if dy == 0:
        return Perpendicular(
            formatter.vertical_line(PERPENDICULAR_LABEL, x3),
            formatter.float_coord(FOOT_LABEL, x3, y1),
            (x3, y1),
        )

    m = Rational(dy, dx)
    c = Rational(-x1) * m + y1
    if m * x3 + c == y3:
        raise CollinearPointError(
            "cannot drop a perpendicular from a point on the line"
        )

    im = Rational(-m.denominator, m.numerator)
    ic = Rational(-x3) * im + y3
    inter_x = Rational.ratio(ic - c, m - im)
    inter_y = m * inter_x + c
    return Perpendicular(
        formatter.line_equation(PERPENDICULAR_LABEL, im, ic),
        formatter.coord(FOOT_LABEL, inter_x, inter_y),
        (int(inter_x.value()), int(inter_y.value())),
    )


def fit_line(points: Iterable[Point], width: int, height: int) -> LineFit:
    """Fit ``y = mx + c`` and clip it to a board of ``width`` by ``height``."""
    pts = _pairs(points)
    _require_three(pts)
    n = len(pts)
    a11 = sum(x * x for x, _ in pts)
    a12 = a21 = sum(x for x, _ in pts)
    a22 = float(n)
    b11 = sum(x * y for x, y in pts)
    b21 = sum(y for _, y in pts)

    det = a11 * a22 - a12 * a21
    first_x, first_y = int(pts[0][0]), int(pts[0][1])

    if abs(det) < _EPSILON:
        return LineFit(
            formatter.vertical_line(LEAST_SQUARES_LABEL, first_x),
            (first_x, 0),
            (first_x, height),
        )

    m = (a22 * b11 - a21 * b21) / det
    c = (a11 * b21 - a12 * b11) / det

    if abs(m) < _EPSILON:
        return LineFit(
            formatter.horizontal_line(LEAST_SQUARES_LABEL, first_y),
            (0, first_y),
            (width, first_y),
        )

    return LineFit(
        formatter.line_equation(LEAST_SQUARES_LABEL, m, c),
        (int(-c / m), 0),
        (int((height - c) / m), height),
    )


def fit_circle(points: Iterable[Point]) -> CircleFit:
    """Fit a circle centred on the mean of the points."""
    pts = _pairs(points)
    _require_three(pts)
    n = len(pts)
    h = sum(x for x, _ in pts) / n
    k = sum(y for _, y in pts) / n
    spread = sum((x - h) * (x - h) / n + (y - k) * (y - k) / n for x, y in pts)
    r = math.sqrt(spread)
    return CircleFit(
        formatter.circle_equation(LEAST_SQUARES_LABEL, h, k, r),
        (h, k),
        r,
        (int(h - r), int(k - r)),
        (int(h + r), int(k + r)),
    )


def _quadratic(
    us: list[float], vs: list[float]
) -> tuple[float, float, float, float] | None:
    n = len(us)
    s1 = sum(us)
    s2 = sum(u**2 for u in us)
    s3 = sum(u**3 for u in us)
    s4 = sum(vs)
    s5 = sum(u * v for u, v in zip(us, vs))
    s6 = sum(u**2 * v for u, v in zip(us, vs))
    s7 = sum(u**4 for u in us)

    det = (
        s7 * (n * s2 - s1**2)
        - s3 * (n * s3 - s2 * s1)
        + s2 * (s3 * s1 - s2**2)
    )
    if det == 0:
        return None

    a = (
        s6 * (n * s2 - s1**2)
        - s3 * (n * s5 - s1 * s4)
        + s2 * (s1 * s5 - s2 * s4)
    ) / det
    b = (
        s7 * (n * s5 - s1 * s4)
        - s6 * (n * s3 - s2 * s1)
        + s2 * (s3 * s4 - s2 * s5)
    ) / det
    c = (
        s7 * (s2 * s4 - s5 * s1)
        - s3 * (s3 * s4 - s5 * s2)
        + s6 * (s3 * s1 - s2**2)
    ) / det
    residual = sum(abs(v - (a * u**2 + b * u + c)) for u, v in zip(us, vs))
    return a, b, c, residual


def fit_parabola(points: Iterable[Point]) -> ParabolaFit:
    """Fit a parabola in x and one in y and keep the one with smaller error."""
    pts = _pairs(points)
    _require_three(pts)
    xs = [x for x, _ in pts]
    ys = [y for _, y in pts]
    over_x = _quadratic(xs, ys)
    over_y = _quadratic(ys, xs)

    if over_x is None and over_y is None:
        raise ValueError("the points do not determine a parabola")

    if over_x is not None and (over_y is None or over_x[3] < over_y[3]):
        a, b, c, _ = over_x
        return ParabolaFit(
            formatter.parabola_x(LEAST_SQUARES_LABEL, a, b, c), "x", a, b, c
        )

    a, b, c, _ = over_y
    return ParabolaFit(
        formatter.parabola_y(LEAST_SQUARES_LABEL, a, b, c), "y", a, b, c
    )


def rotate(points: Iterable[Point], degrees: float) -> list[tuple[float, float]]:
    """Rotate points about the origin, counter-clockwise by ``degrees``."""
    radian = degrees * (math.pi / 180.0)
    cos, sin = math.cos(radian), math.sin(radian)
    return [(x * cos - y * sin, x * sin + y * cos) for x, y in _pairs(points)]