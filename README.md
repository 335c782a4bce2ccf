# rasterlab

Classic raster graphics algorithms in plain Python, with no drawing library
required. Every algorithm returns points, segments or polygons that you can
inspect, test or hand to any renderer you like.

## What is inside

- `rasterlab.lines`: `dda` and `bresenham` return the pixels of a line
  between two integer points, in drawing order.
- `rasterlab.circle`: `bresenham_circle(radius, xc=320, yc=240)` returns the
  pixels of a circle in plotting order; `octant_points` gives the eight
  symmetric pixels of one offset. A negative radius raises `ValueError`.
- `rasterlab.koch`: `koch_segments` returns the segments of a Koch curve of a
  given level between two points; `koch_points` returns the same curve as a
  connected polyline.
- `rasterlab.transform`: `translate`, `scale` (about the origin) and `rotate`
  (anticlockwise about the origin, in degrees) for lists of vertices, with
  results rounded to the pixel grid by `round_half_up`.
- `rasterlab.fill`: `Canvas`, an in-memory RGB grid with its origin at the
  bottom left, offering `get`, `set`, `contains`, `draw_line`,
  `draw_polygon` and `to_ppm` (binary PPM export). `boundary_fill` and
  `flood_fill` fill regions on it and return how many pixels they painted;
  both take an `offsets` sequence choosing the neighbours visited
  (`FOUR_CONNECTED` by default).
- `rasterlab.clipping`: edge clippers `clip_left`, `clip_right`, `clip_top`
  and `clip_bottom`, and `clip_polygon`, which applies all four against a
  `Window(xmin, ymin, xmax, ymax)`. A window with corners out of order
  raises `ValueError`.
- `rasterlab.animation`: `VehicleScene`, a vehicle body and two wheels that
  drift sideways; `step` advances it, `body` and `wheel_centres` give its
  geometry, and `frames(count)` yields `Frame` snapshots (forever when no
  count is given).

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from rasterlab.lines import bresenham
from rasterlab.transform import rotate
from rasterlab.clipping import Window, clip_polygon

pixels = bresenham(0, 0, 5, 3)
turned = rotate([(100, 0), (0, 100)], 90)
clipped = clip_polygon([(0, 0), (200, 0), (200, 200)], Window(50, 50, 150, 150))
```

Filling a shape on a canvas and saving it:

```python
from rasterlab.fill import Canvas, boundary_fill

canvas = Canvas(640, 480, (1.0, 1.0, 1.0))
canvas.draw_polygon([(200, 200), (400, 200), (400, 400), (200, 400)], (1.0, 0.0, 0.0))
boundary_fill(canvas, 300, 300, (0.0, 0.0, 1.0), (1.0, 0.0, 0.0))
with open("square.ppm", "wb") as image:
    image.write(canvas.to_ppm())
```

## Command line

The `rasterlab` command clips or transforms a polygon given on the command
line and prints the resulting vertices, one `x y` pair per line. Vertices are
given in order with repeated `--vertex X Y` options.

```
rasterlab clip --window 0 0 100 100 --vertex -50 50 --vertex 50 150 --vertex 150 50
rasterlab clip --window 0 0 100 100 --edge left --edge top --vertex ...
rasterlab translate 10 20 --vertex 0 0 --vertex 10 0 --vertex 10 10
rasterlab scale 2 0.5 --vertex 0 0 --vertex 10 0 --vertex 10 10
rasterlab rotate 90 --vertex 100 0 --vertex 0 100 --vertex 0 0
```

Without `--edge`, `clip` clips against the left, right, top and bottom edges
in that order. Run `rasterlab --help` or `rasterlab <command> --help` for the
full options.

## What it does not do

rasterlab opens no windows and draws nothing on screen. The algorithms
return coordinates, the canvas exists only in memory (save it with
`to_ppm`), and `VehicleScene` produces geometry for each frame but does not
render or play it.