# wirerast

A small software rasterizer. It transforms triangles through model, view and
projection matrices, maps them to the screen and draws their edges as white
wireframes into a colour buffer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Rendering a frame

```
wirerast -r 20 output.png
```

When given at least two arguments, the command renders the sample triangle
once. The second argument is the rotation angle in degrees around the Z axis.
The first argument, `-r` here, is not read. The image is 700 by 700 pixels. It
is written to the third argument when exactly three arguments are given, and
to `output.png` otherwise.

## Interactive rotation

```
wirerast
```

With fewer than two arguments the command renders frames in a loop. It writes
each frame to `output.png` and prints `frame count: N`. It then reads one line
from standard input. Enter `a` to rotate by +10 degrees or `d` to rotate by
-10 degrees. Enter `q` or ESC, or end the input, to stop.

## Matrix examples

```
wirerast-basics
```

This command prints a set of worked scalar, vector and matrix operations. The
last one rotates the point `(2, 1, 1)` by 45 degrees and then translates it by
`(1, 2)`. The same steps are available as `wirerast.basics.rotation_matrix`,
`translation_matrix` and `transform_point`.

## Using the library

```python
from wirerast.rasterizer import Rasterizer, Buffers, Primitive
from wirerast.app import get_model_matrix, get_view_matrix, get_projection_matrix, save_image

r = Rasterizer(700, 700)
pos_id = r.load_positions([(2, 0, -2), (0, 2, -2), (-2, 0, -2)])
ind_id = r.load_indices([(0, 1, 2)])

r.clear(Buffers.COLOR | Buffers.DEPTH)
r.set_model(get_model_matrix(0))
r.set_view(get_view_matrix((0, 0, 5)))
r.set_projection(get_projection_matrix(45, 1, 0.1, 50))
r.draw(pos_id, ind_id, Primitive.TRIANGLE)

save_image(r, "output.png")
```

`wirerast.app.render(angle)` builds this same scene and returns the rasterizer.

- `get_model_matrix(angle)` rotates around the Z axis by `angle` degrees.
- `get_view_matrix(eye_pos)` moves the camera to the origin.
- `get_projection_matrix(fov, aspect, near, far)` gives a perspective
  projection. It takes a vertical field of view in degrees and positive
  clipping distances.

`load_positions` and `load_indices` take sequences of 3-component rows and
return `PosBufId` and `IndBufId` handles. They raise `ValueError` for any
other shape. The matrix setters raise `ValueError` for anything that is not
4x4.

`Rasterizer.frame_buffer()` returns the colour buffer as a NumPy array. It has
one RGB row per pixel, with the top image row first. `set_pixel` takes `(x, y)`
with the origin at the bottom-left corner and ignores points off screen.

`save_image` writes the buffer with its colour channels in reverse order. This
makes no difference for the white wireframes that `draw` produces.

Only triangles can be drawn. Passing any other `Primitive` raises `ValueError`.

`Triangle` holds per-vertex positions, colours, texture coordinates and
normals. `Triangle.set_color` takes channel values from 0 to 255, stores them
scaled to 0..1, and raises `ValueError` for anything outside that range.

## What it does not do

- Triangles are drawn only as outlines. They are not filled, and the vertex
  colours are not used.
- The depth buffer can be cleared, but it is not used for depth testing.
- Nothing is shown in a window. Frames are only written to image files.