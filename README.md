# planelab

Small tools for working with points on a plane.

## Modules

- `planelab.rational`: `Rational`, a fraction whose numerator and
  denominator are stored as floats. The constructor reduces both parts by
  the greatest common divisor of their integer parts. `Rational.ratio(top,
  bottom)` divides one fraction by another. The type supports `+`, `-`, `*`
  and `/`, also with plain numbers, and provides `is_integer()`, `value()`
  and `float()`. Equality is approximate to within machine epsilon, so
  `Rational` values cannot be hashed.
- `planelab.formatter`: functions that return equations as text.
  `line_equation`, `line_through`, `vertical_line`, `horizontal_line`,
  `circle_equation`, `parabola_x`, `parabola_y` (vertex form), `coord`,
  `float_coord` and `labeled_coord`. `line_equation`, `line_through` and
  `coord` take `decimal=True` for decimals and `False` for fractions.
- `planelab.geometry`:
  - `perpendicular(p1, p2, p3)` returns a `Perpendicular` with the equation,
    the intersection text and the integer foot point. It raises
    `CollinearPointError` when `p3` lies on the line.
  - `fit_line(points, width, height)` returns a `LineFit`.
  - `fit_circle(points)` returns a `CircleFit` with `center`, `radius` and a
    bounding box. The centre is the mean of the points.
  - `fit_parabola(points)` fits a parabola in x and one in y and returns a
    `ParabolaFit` for whichever has the smaller absolute error. Its `axis` is
    `"x"` or `"y"`.
  - `rotate(points, degrees)` rotates points about the origin.

  All fits need at least three points and raise `ValueError` otherwise.
- `planelab.viewer`: `MathViewer(width, height)`, a model of a drawing board.
  - Choose a `Method` with `select_method`: `PERPENDICULAR`, `ROTATION`,
    `LINE_FIT`, `CIRCLE_FIT` or `PARABOLA_FIT`.
  - Add points with `pick(x, y)` using client pixels, or with
    `pick_text("x, y")` using the mode's own coordinates.
  - Read the results from `expressions`, `guides`, `parabola` and `trail`.
  - In rotation mode, `rotate(degrees)` turns the triangle further.
  - `coordinate_labels()` gives the six coordinate fields.

  Problems raise `ViewerError`.
- `planelab.settings`:
  - `Settings` is six unsigned 32-bit fields, stored as 24 little-endian
    bytes by `to_bytes` and `from_bytes`.
  - `load_settings(path)` creates an empty file when the path is missing and
    returns defaults for an empty file. `save_settings(path, settings)`
    writes a profile, and `directory_exists(path)` checks for a directory.
  - `Snapshot.render()` returns the summary lines of a panel state.
- `planelab.panel`: `SettingsPanel(data_dir, selected=0)` keeps named
  profiles as `<name>.data` files in a directory. The `"default"` profile is
  always listed.
  - It provides `load`, `save` and `delete`, and `set_mode` takes an
    `OptionMode`.
  - `set_option` and `options_text` handle the three options.
  - The timer is driven by `start_timer`, `stop_timer`, `reset_timer` and
    `tick`.
  - The scroll bars are moved by `scroll_horizontal` and `scroll_vertical`,
    with positions clamped to 0–255 by `scroll`.
  - `snapshot()` returns the current state as a `Snapshot`.

  Each event appends a line to `panel.log`. Profile failures raise
  `PanelError`.

## What it does not do

This package is a library only.

- It has no window, no drawing and no command-line program.
- `MathViewer` computes equations and the points you would draw, but it
  renders nothing.
- `SettingsPanel` has no clock. Its counter advances only when you call
  `tick()`.
- It reads and writes no registry or system settings. The selected profile
  is whatever index you pass as `selected`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from planelab.rational import Rational
from planelab.formatter import line_equation
from planelab.geometry import fit_circle
from planelab.viewer import MathViewer, Method

m = Rational.ratio(1, 2)
print(line_equation("line", m, Rational(3, 1)))  # line [ y = +0.500x +3 ]

fit = fit_circle([(10, 0), (0, 10), (-10, 0), (0, -10)])
print(fit.center, fit.radius)  # (0.0, 0.0) 10.0

board = MathViewer(400, 300)
board.select_method(Method.PERPENDICULAR)
board.pick(10, 10)
board.pick(110, 60)
print(board.pick(50, 120))  # perpendicular equation and intersection
```