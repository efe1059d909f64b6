"""Text renderings of lines, circles, parabolas and coordinates."""

from __future__ import annotations

from .rational import Rational


def _as_rational(value: Rational | float) -> Rational:
    return value if isinstance(value, Rational) else Rational(value)


def _term(value: Rational, decimal: bool) -> str:
    if value.is_integer():
        return f"{value.numerator:+.0f}"
    if decimal:
        return f"{value.numerator / value.denominator:+.3f}"
    return f"{value.numerator:+.0f}/{value.denominator:.0f}"


def _signed(value: Rational, amount: float) -> str:
    return f"{amount:+.0f}" if value.is_integer() else f"{amount:+.3f}"


def line_equation(
    desc: str,
    gradient: Rational | float,
    constant: Rational | float,
    decimal: bool = True,
) -> str:
    """Render ``y = mx + c`` as decimals or as fractions."""
    m = _term(_as_rational(gradient), decimal)
    c = _term(_as_rational(constant), decimal)
    return f"{desc} [ y = {m}x {c} ]"


def line_through(
    desc: str, dx: int, dy: int, x1: int, y1: int, decimal: bool = True
) -> str:
    """Render the line through ``(x1, y1)`` with direction ``(dx, dy)``."""
    if dx == 0:
        return vertical_line(desc, x1)
    if dy == 0:
        return horizontal_line(desc, y1)
    m = Rational(dy, dx)
    return line_equation(desc, m, m * -x1 + y1, decimal)


def vertical_line(desc: str, constant: int) -> str:
    """Render ``x = constant``."""
    return f"{desc} [ x = {int(constant)} ]"


def horizontal_line(desc: str, constant: int) -> str:
    """Render ``y = constant``."""
    return f"{desc} [ y = {int(constant)} ]"


def circle_equation(
    desc: str, a: Rational | float, b: Rational | float, r: Rational | float
) -> str:
    """Render the circle centred on ``(a, b)`` with radius ``r``."""
    ra, rb, rr = _as_rational(a), _as_rational(b), _as_rational(r)
    part_a = _signed(ra, -ra.value())
    part_b = _signed(rb, -rb.value())
    radius = f"{rr.value():.0f}" if rr.is_integer() else f"{rr.value():.3f}"
    return f"{desc} [ (x{part_a})\u00b2+(y{part_b})\u00b2 = {radius}\u00b2 ]"


def _vertex_form(a: Rational | float, b: Rational | float, c: Rational | float):
    ra, rb, rc = _as_rational(a), _as_rational(b), _as_rational(c)
    shift = rb / (ra * 2)
    offset = Rational(-(rb.value() ** 2 / (ra * 4).value()) + rc.value())
    return (
        _signed(ra, ra.value()),
        _signed(shift, shift.value()),
        _signed(offset, offset.value()),
    )


def parabola_x(
    desc: str, a: Rational | float, b: Rational | float, c: Rational | float
) -> str:
    """Render ``y = ax² + bx + c`` in vertex form."""
    s, x, y = _vertex_form(a, b, c)
    return f"{desc} [ y = {s}(x{x})\u00b2{y} ]"


def parabola_y(
    desc: str, a: Rational | float, b: Rational | float, c: Rational | float
) -> str:
    """Render ``x = ay² + by + c`` in vertex form."""
    s, x, y = _vertex_form(a, b, c)
    return f"{desc} [ x = {s}(y{x})\u00b2{y} ]"


def coord(
    desc: str, x: Rational | float, y: Rational | float, decimal: bool = True
) -> str:
    """Render a point whose coordinates are fractions."""
    px = _term(_as_rational(x), decimal)
    py = _term(_as_rational(y), decimal)
    return f"{desc} ( {px}, {py} )"


def float_coord(desc: str, x: float, y: float) -> str:
    """Render a point with three decimals per coordinate."""
    return f"{desc} ( {x:+.3f}, {y:+.3f} )"


def labeled_coord(desc: str, label: int, x: float, y: float) -> str:
    """Render a numbered point with three decimals per coordinate."""
    return f"{desc} {int(label)} ( {x:+.3f}, {y:+.3f} )"