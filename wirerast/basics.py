"""Basic vector and matrix examples with 2D homogeneous transforms."""

from __future__ import annotations

import math
import sys

import numpy as np

_PI = np.float32(math.acos(-1.0))


def rotation_matrix(degrees) -> np.ndarray:
    """Homogeneous 2D rotation by ``degrees`` counter-clockwise."""
    angle = np.float32(degrees) / np.float32(180.0) * _PI
    cos, sin = np.cos(angle), np.sin(angle)
    return np.array(
        [[cos, -sin, 0.0], [sin, cos, 0.0], [0.0, 0.0, 1.0]],
        dtype=np.float32,
    )


def translation_matrix(tx, ty) -> np.ndarray:
    """Homogeneous 2D translation by (tx, ty)."""
    return np.array(
        [[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]],
        dtype=np.float32,
    )


def transform_point(point) -> np.ndarray:
    """Rotate a homogeneous 2D point by 45 degrees, then translate it by (1, 2)."""
    p = np.asarray(point, dtype=np.float32)
    return translation_matrix(1.0, 2.0) @ rotation_matrix(45.0) @ p


def _format_matrix(values) -> str:
    arr = np.asarray(values)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    cells = [[f"{float(x):g}" for x in row] for row in arr]
    width = max(len(cell) for row in cells for cell in row)
    return "\n".join(" ".join(cell.rjust(width) for cell in row) for row in cells)


def main(argv=None) -> int:
    """Print worked examples of scalar, vector and matrix arithmetic."""
    a, b = 1.0, 2.0
    print("Example of cpp ")
    for value in (a, a / b, math.sqrt(b), math.acos(-1), math.sin(30.0 / 180.0 * math.acos(-1))):
        print(f"{value:g}")

    print("Example of vector ")
    v = np.array([1.0, 2.0, 3.0], dtype=np.float32)
    w = np.array([1.0, 0.0, 0.0], dtype=np.float32)
    print("Example of output ")
    print(_format_matrix(v))
    print("Example of add ")
    print(_format_matrix(v + w))
    print("Example of scalar multiply ")
    print(_format_matrix(v * np.float32(3.0)))
    print(_format_matrix(np.float32(2.0) * v))

    print("Example of matrix ")
    i = np.array([[1, 2, 3], [4, 5, 6], [7, 8, 9]], dtype=np.float32)
    j = np.array([[2, 3, 1], [4, 6, 5], [9, 7, 8]], dtype=np.float32)
    print("Example of output ")
    print(_format_matrix(i))
    print("Example of add ")
    print(_format_matrix(i + j))
    print("Example of scalar multiply ")
    print(_format_matrix(i * np.float32(2.0)))
    print("Example of matrix multiply ")
    print(_format_matrix(i @ j))
    print("Example of matrix multiply vector ")
    print(_format_matrix(i @ v))

    p = np.array([2.0, 1.0, 1.0], dtype=np.float32)
    print(_format_matrix(p))
    print("New Point: ")
    print(_format_matrix(transform_point(p)))
    return 0


if __name__ == "__main__":
    sys.exit(main())