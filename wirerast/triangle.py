"""Triangle primitive with per-vertex attributes."""

from __future__ import annotations

import numpy as np


class Triangle:
    """A triangle with positions, colors, texture coordinates and normals per vertex.

    Vertices are stored in counter-clockwise order.
    """

    def __init__(self) -> None:
        self.v = np.zeros((3, 3), dtype=np.float32)
        self.color = np.zeros((3, 3), dtype=np.float32)
        self.tex_coords = np.zeros((3, 2), dtype=np.float32)
        self.normal = np.zeros((3, 3), dtype=np.float32)

    def a(self) -> np.ndarray:
        """Return a copy of the first vertex."""
        return self.v[0].copy()

    def b(self) -> np.ndarray:
        """Return a copy of the second vertex."""
        return self.v[1].copy()

    def c(self) -> np.ndarray:
        """Return a copy of the third vertex."""
        return self.v[2].copy()

    def set_vertex(self, ind, ver) -> None:
        """Set the coordinates of vertex ``ind``."""
        self.v[ind] = np.asarray(ver, dtype=np.float32)

    def set_normal(self, ind, n) -> None:
        """Set the normal vector of vertex ``ind``."""
        self.normal[ind] = np.asarray(n, dtype=np.float32)

    def set_color(self, ind, r, g, b) -> None:
        """Set the color of vertex ``ind`` from 0..255 components, stored as 0..1."""
        if any(component < 0.0 or component > 255.0 for component in (r, g, b)):
            raise ValueError("Invalid color values")
        self.color[ind] = np.array([r, g, b], dtype=np.float32) / np.float32(255.0)

    def set_tex_coord(self, ind, s, t) -> None:
        """Set the texture coordinate of vertex ``ind``."""
        self.tex_coords[ind] = (s, t)

    def to_vector4(self) -> np.ndarray:
        """Return the vertices as homogeneous points, one per row, with w = 1."""
        ones = np.ones((3, 1), dtype=np.float32)
        return np.hstack([self.v, ones])