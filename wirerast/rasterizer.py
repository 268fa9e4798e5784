"""Wireframe rasterizer with model/view/projection transforms."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from wirerast.triangle import Triangle

_LINE_COLOR = np.array([255.0, 255.0, 255.0], dtype=np.float32)


class Buffers(enum.Flag):
    """Buffers that can be cleared."""

    COLOR = 1
    DEPTH = 2


class Primitive(enum.Enum):
    """Kinds of primitives the index buffer may describe."""

    LINE = enum.auto()
    TRIANGLE = enum.auto()


@dataclass(frozen=True)
class PosBufId:
    """Handle to a loaded position buffer."""

    pos_id: int = 0


@dataclass(frozen=True)
class IndBufId:
    """Handle to a loaded index buffer."""

    ind_id: int = 0


def _matrix4(m) -> np.ndarray:
    arr = np.array(m, dtype=np.float32)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


class Rasterizer:
    """Draws triangles as white wireframes into a color buffer."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.model = np.identity(4, dtype=np.float32)
        self.view = np.identity(4, dtype=np.float32)
        self.projection = np.identity(4, dtype=np.float32)
        self._pos_buf: dict[int, np.ndarray] = {}
        self._ind_buf: dict[int, np.ndarray] = {}
        self._frame_buf = np.zeros((width * height, 3), dtype=np.float32)
        self._depth_buf = np.zeros(width * height, dtype=np.float32)
        self._next_id = 0

    def _get_next_id(self) -> int:
        next_id = self._next_id
        self._next_id += 1
        return next_id

    def load_positions(self, positions) -> PosBufId:
        """Store a list of 3D positions and return its handle."""
        arr = np.array(positions, dtype=np.float32)
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ValueError("positions must be a sequence of 3-component vectors")
        buf_id = self._get_next_id()
        self._pos_buf[buf_id] = arr
        return PosBufId(buf_id)

    def load_indices(self, indices) -> IndBufId:
        """Store a list of index triples and return its handle."""
        arr = np.array(indices, dtype=np.int64)
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ValueError("indices must be a sequence of index triples")
        buf_id = self._get_next_id()
        self._ind_buf[buf_id] = arr
        return IndBufId(buf_id)

    def set_model(self, m) -> None:
        self.model = _matrix4(m)

    def set_view(self, v) -> None:
        self.view = _matrix4(v)

    def set_projection(self, p) -> None:
        self.projection = _matrix4(p)

    def set_pixel(self, point, color) -> None:
        """Write ``color`` at screen ``point``; points off screen are ignored."""
        x, y = point[0], point[1]
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return
        index = int((self.height - 1 - y) * self.width + x)
        self._frame_buf[index] = color

    def clear(self, buff: Buffers) -> None:
        """Reset the selected buffers: color to black, depth to infinity."""
        if Buffers.COLOR in buff:
            self._frame_buf.fill(0.0)
        if Buffers.DEPTH in buff:
            self._depth_buf.fill(np.inf)

    def frame_buffer(self) -> np.ndarray:
        """Return the color buffer, one RGB row per pixel, top row first."""
        return self._frame_buf

    def draw(self, pos_buffer: PosBufId, ind_buffer: IndBufId, primitive: Primitive) -> None:
        """Transform and draw every indexed triangle as a wireframe."""
        if primitive is not Primitive.TRIANGLE:
            raise ValueError("Drawing primitives other than triangle is not supported")
        positions = self._pos_buf[pos_buffer.pos_id]
        indices = self._ind_buf[ind_buffer.ind_id]

        f1 = np.float32((100 - 0.1) / 2.0)
        f2 = np.float32((100 + 0.1) / 2.0)
        mvp = self.projection @ self.view @ self.model

        for triple in indices:
            corners = positions[triple]
            homogeneous = np.hstack([corners, np.ones((3, 1), dtype=np.float32)])
            clip = homogeneous @ mvp.T
            ndc = clip / clip[:, 3:4]

            triangle = Triangle()
            for i, vert in enumerate(ndc):
                screen = (
                    np.float32(0.5) * self.width * (vert[0] + np.float32(1.0)),
                    np.float32(0.5) * self.height * (vert[1] + np.float32(1.0)),
                    vert[2] * f1 + f2,
                )
                triangle.set_vertex(i, screen)

            triangle.set_color(0, 255.0, 0.0, 0.0)
            triangle.set_color(1, 0.0, 255.0, 0.0)
            triangle.set_color(2, 0.0, 0.0, 255.0)

            self._rasterize_wireframe(triangle)

    def _rasterize_wireframe(self, t: Triangle) -> None:
        self._draw_line(t.c(), t.a())
        self._draw_line(t.c(), t.b())
        self._draw_line(t.b(), t.a())

    def _plot(self, x: int, y: int) -> None:
        self.set_pixel((x, y, 1.0), _LINE_COLOR)

    def _draw_line(self, begin, end) -> None:
        """Bresenham's line algorithm between two screen points."""
        x1, y1 = begin[0], begin[1]
        x2, y2 = end[0], end[1]

        dx = int(x2 - x1)
        dy = int(y2 - y1)
        dx1 = abs(dx)
        dy1 = abs(dy)
        px = 2 * dy1 - dx1
        py = 2 * dx1 - dy1
        step = 1 if (dx < 0 and dy < 0) or (dx > 0 and dy > 0) else -1

        if dy1 <= dx1:
            if dx >= 0:
                x, y, xe = int(x1), int(y1), int(x2)
            else:
                x, y, xe = int(x2), int(y2), int(x1)
            self._plot(x, y)
            while x < xe:
                x += 1
                if px < 0:
                    px += 2 * dy1
                else:
                    y += step
                    px += 2 * (dy1 - dx1)
                self._plot(x, y)
        else:
            if dy >= 0:
                x, y, ye = int(x1), int(y1), int(y2)
            else:
                x, y, ye = int(x2), int(y2), int(y1)
            self._plot(x, y)
            while y < ye:
                y += 1
                if py <= 0:
                    py += 2 * dx1
                else:
                    x += step
                    py += 2 * (dx1 - dy1)
                self._plot(x, y)