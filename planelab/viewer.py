"""An interactive board that turns picked points into equations."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass, field

from . import formatter, geometry

LINE_LABEL = "직선 방정식"
_EDIT_SLOTS = 6
_NUMBER = re.compile(r"\s*([+-]?\d+)")


class Method(enum.IntEnum):
    """The drawing modes, numbered as the dialog's radio buttons are."""

    PERPENDICULAR = 1013
    ROTATION = 1014
    LINE_FIT = 1015
    CIRCLE_FIT = 1016
    PARABOLA_FIT = 1017

    @property
    def capacity(self) -> int:
        """How many points the mode accepts."""
        return 3 if self in (Method.PERPENDICULAR, Method.ROTATION) else 500


class ViewerError(Exception):
    """Raised when a pick or command cannot be carried out."""


@dataclass
class MathViewer:
    """A board of ``width`` by ``height`` pixels on which points are picked.

    Picked points are kept in the mode's own coordinates: client pixels for
    most modes, and axes centred on the board with y pointing up for rotation.
    """

    width: int
    height: int
    method: Method | None = field(default=None, init=False)
    picked: list[tuple[int, int]] = field(default_factory=list, init=False)
    expressions: list[str] = field(default_factory=list, init=False)
    guides: list[tuple[int, int]] = field(default_factory=list, init=False)
    parabola: geometry.ParabolaFit | None = field(default=None, init=False)
    trail: list[list[tuple[int, int]]] = field(default_factory=list, init=False)
    rotation: int = field(default=0, init=False)

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.method = None
        self.picked = []
        self.expressions = []
        self.guides = []
        self.parabola = None
        self.trail = []
        self.rotation = 0
        self._exact: list[tuple[float, float]] = []
        self._slots = [""] * _EDIT_SLOTS
        self._first_enter = True

    def select_method(self, method: Method | int) -> None:
        """Switch mode, clearing every point and result; same mode is a no-op."""
        chosen = Method(method)
        if chosen == self.method:
            return
        self.method = chosen
        self.reset()

    def contains(self, x: int, y: int) -> bool:
        """True when the client point lies on the board, edges included."""
        return 0 <= x <= self.width and 0 <= y <= self.height

    def to_orthogonal(self, x: int, y: int) -> tuple[int, int]:
        """Map a client point into the current mode's coordinates."""
        if self.method is Method.ROTATION:
            return x - self.width // 2, -(y - self.height // 2)
        return x, y

    def to_client(self, x: int, y: int) -> tuple[int, int]:
        """Map a point in the current mode's coordinates back to the board."""
        if self.method is Method.ROTATION:
            return x + self.width // 2, -y + self.height // 2
        return x, y

    def pick(self, x: int, y: int) -> list[str]:
        """Pick the client point ``(x, y)`` and return the lines it produced."""
        if self.method is None:
            raise ViewerError("select a method first")
        if len(self.picked) >= self.method.capacity:
            raise ViewerError("all the points this method needs are picked")
        point = self.to_orthogonal(int(x), int(y))
        self.picked.append(point)
        self._exact.append((float(point[0]), float(point[1])))
        before = len(self.expressions)
        self._update()
        return self.expressions[before:]

    def pick_text(self, text: str) -> list[str]:
        """Pick a point typed as ``"x y"`` or ``"x, y"`` in mode coordinates."""
        tokens = [t for t in re.split(r"[ ,]+", text) if t]
        if len(tokens) < 2:
            raise ViewerError("enter x and y separated by a space or a comma")
        x, y = (_leading_int(t) for t in tokens[:2])
        return self.pick(*self.to_client(x, y))

    def rotate(self, degrees: int) -> list[str]:
        """Turn the triangle by ``degrees`` more; ignored outside rotation mode."""
        if self.method is not Method.ROTATION:
            return []
        self.rotation = int(math.fmod(self.rotation + int(degrees), 360))
        turned = geometry.rotate(self._exact, self.rotation)
        polygon = []
        for i, (tx, ty) in enumerate(turned):
            point = (int(tx), int(ty))
            self.picked[i] = point
            polygon.append(self.to_client(*point))
        if polygon:
            polygon.append(polygon[0])
            self.trail.append(polygon)
        before = len(self.expressions)
        self._update()
        return self.expressions[before:]

    def reset(self) -> None:
        """Forget every picked point, result and rotation."""
        self.picked.clear()
        self._exact.clear()
        self.expressions.clear()
        self._slots = [""] * _EDIT_SLOTS
        self._first_enter = True
        self.guides.clear()
        self.trail.clear()
        self.parabola = None
        self.rotation = 0

    def coordinate_labels(self) -> list[str]:
        """The six coordinate fields, each showing the last point written to it."""
        return list(self._slots)

    def _update(self) -> None:
        for i, (px, py) in enumerate(self.picked):
            self._slots[i % _EDIT_SLOTS] = f"({px}, {py})"

        handler = {
            Method.PERPENDICULAR: self._update_perpendicular,
            Method.ROTATION: self._update_rotation,
            Method.LINE_FIT: self._update_line,
            Method.CIRCLE_FIT: self._update_circle,
            Method.PARABOLA_FIT: self._update_parabola,
        }[self.method]
        handler()

    def _update_perpendicular(self) -> None:
        if len(self.picked) == 2:
            (x0, y0), (x1, y1) = self.picked
            self.expressions.append(
                formatter.line_through(LINE_LABEL, x1 - x0, y1 - y0, x0, y0)
            )
        elif len(self.picked) == 3:
            try:
                result = geometry.perpendicular(*self.picked)
            except geometry.CollinearPointError as exc:
                self.picked.pop()
                self._exact.pop()
                raise ViewerError(
                    "a perpendicular cannot be dropped from a point on the line"
                ) from exc
            self.expressions.append(result.equation)
            self.expressions.append(result.intersection)
            self.guides.append(result.foot)

    def _update_rotation(self) -> None:
        if len(self._exact) != 3:
            return
        if self._first_enter:
            self._first_enter = False
            self.rotation = 0
            polygon = [self.to_client(int(x), int(y)) for x, y in self._exact]
            polygon.append(polygon[0])
            self.trail.append(polygon)
        turned = geometry.rotate(self._exact, self.rotation)
        self.expressions.extend(
            formatter.labeled_coord("", i, x, y) for i, (x, y) in enumerate(turned)
        )

    def _update_line(self) -> None:
        if len(self._exact) > 2:
            fit = geometry.fit_line(self._exact, self.width, self.height)
            self.expressions.append(fit.equation)
            self.guides = [fit.start, fit.end]

    def _update_circle(self) -> None:
        if len(self._exact) > 2:
            fit = geometry.fit_circle(self._exact)
            self.expressions.append(fit.equation)
            self.guides = [fit.top_left, fit.bottom_right]

    def _update_parabola(self) -> None:
        if len(self._exact) > 2:
            try:
                fit = geometry.fit_parabola(self._exact)
            except ValueError as exc:
                raise ViewerError(str(exc)) from exc
            self.parabola = fit
            self.expressions.append(fit.equation)


def _leading_int(token: str) -> int:
    match = _NUMBER.match(token)
    return int(match.group(1)) if match else 0