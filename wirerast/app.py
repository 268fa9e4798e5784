"""Render a rotating wireframe triangle to an image file."""

from __future__ import annotations

import math
import sys

import numpy as np
from PIL import Image

from wirerast.rasterizer import Buffers, Primitive, Rasterizer

MY_PI = 3.1415926
WIDTH = 700
HEIGHT = 700
EYE_POS = (0.0, 0.0, 5.0)
POSITIONS = [(2.0, 0.0, -2.0), (0.0, 2.0, -2.0), (-2.0, 0.0, -2.0)]
INDICES = [(0, 1, 2)]
DEFAULT_OUTPUT = "output.png"
_ESCAPE = "\x1b"


def get_view_matrix(eye_pos) -> np.ndarray:
    """Matrix that moves the camera at ``eye_pos`` to the origin."""
    view = np.identity(4, dtype=np.float32)
    view[:3, 3] = -np.asarray(eye_pos, dtype=np.float32)
    return view


def get_model_matrix(rotation_angle) -> np.ndarray:
    """Rotation about the Z axis by ``rotation_angle`` degrees."""
    radians = rotation_angle * MY_PI / 180.0
    cos, sin = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [cos, -sin, 0.0, 0.0],
            [sin, cos, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float32,
    )


def get_projection_matrix(eye_fov, aspect_ratio, z_near, z_far) -> np.ndarray:
    """Perspective projection for a camera looking down -Z.

    ``eye_fov`` is the vertical field of view in degrees; ``z_near`` and
    ``z_far`` are positive distances to the clipping planes.
    """
    n, f = -z_near, -z_far
    top = math.tan(eye_fov / 2.0 * MY_PI / 180.0) * abs(n)
    right = top * aspect_ratio
    persp_to_ortho = np.array(
        [
            [n, 0.0, 0.0, 0.0],
            [0.0, n, 0.0, 0.0],
            [0.0, 0.0, n + f, -n * f],
            [0.0, 0.0, 1.0, 0.0],
        ]
    )
    translate = np.identity(4)
    translate[2, 3] = -(n + f) / 2.0
    scale = np.diag([1.0 / right, 1.0 / top, 2.0 / (n - f), 1.0])
    return (scale @ translate @ persp_to_ortho).astype(np.float32)


def render(angle) -> Rasterizer:
    """Draw the scene with the triangle rotated by ``angle`` degrees."""
    r = Rasterizer(WIDTH, HEIGHT)
    pos_id = r.load_positions(POSITIONS)
    ind_id = r.load_indices(INDICES)
    r.clear(Buffers.COLOR | Buffers.DEPTH)
    r.set_model(get_model_matrix(angle))
    r.set_view(get_view_matrix(EYE_POS))
    r.set_projection(get_projection_matrix(45, 1, 0.1, 50))
    r.draw(pos_id, ind_id, Primitive.TRIANGLE)
    return r


def save_image(rasterizer, filename) -> None:
    """Write the rasterizer's color buffer to an image file."""
    pixels = rasterizer.frame_buffer().reshape(rasterizer.height, rasterizer.width, 3)
    data = np.clip(np.rint(pixels), 0, 255).astype(np.uint8)
    # The buffer is read as blue-green-red when written out.
    Image.fromarray(np.ascontiguousarray(data[..., ::-1])).save(filename)


def _interactive(filename: str) -> None:
    angle = 0.0
    frame_count = 0
    while True:
        save_image(render(angle), filename)
        print(f"frame count: {frame_count}")
        frame_count += 1
        line = sys.stdin.readline()
        if not line:
            break
        key = line.strip()
        if key in (_ESCAPE, "q"):
            break
        if key == "a":
            angle += 10
        elif key == "d":
            angle -= 10


def main(argv=None) -> int:
    """Render once with ``-r ANGLE [FILE]``, otherwise rotate interactively.

    In interactive mode each frame is written to the output file; enter
    ``a`` or ``d`` to rotate and ``q`` or ESC to quit.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) >= 2:
        angle = float(args[1])
        filename = args[2] if len(args) == 3 else DEFAULT_OUTPUT
        save_image(render(angle), filename)
        return 0
    _interactive(DEFAULT_OUTPUT)
    return 0


if __name__ == "__main__":
    sys.exit(main())