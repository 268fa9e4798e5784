import numpy as np
import pytest

from wirerast.triangle import Triangle


def test_new_triangle_is_all_zero():
    t = Triangle()
    assert np.array_equal(t.v, np.zeros((3, 3)))
    assert np.array_equal(t.color, np.zeros((3, 3)))
    assert np.array_equal(t.tex_coords, np.zeros((3, 2)))


def test_set_vertex_and_accessors():
    t = Triangle()
    t.set_vertex(0, (1, 2, 3))
    t.set_vertex(1, (4, 5, 6))
    t.set_vertex(2, (7, 8, 9))
    assert np.array_equal(t.a(), [1, 2, 3])
    assert np.array_equal(t.b(), [4, 5, 6])
    assert np.array_equal(t.c(), [7, 8, 9])


def test_accessor_returns_copy():
    t = Triangle()
    t.set_vertex(0, (1, 2, 3))
    first = t.a()
    first[0] = 100
    assert np.array_equal(t.a(), [1, 2, 3])


def test_set_color_scales_to_unit_range():
    t = Triangle()
    t.set_color(0, 255.0, 0.0, 0.0)
    t.set_color(2, 0.0, 0.0, 255.0)
    assert np.allclose(t.color[0], [1, 0, 0])
    assert np.allclose(t.color[2], [0, 0, 1])


@pytest.mark.parametrize("rgb", [(-1, 0, 0), (0, 256, 0), (0, 0, 300), (-0.5, -0.5, -0.5)])
def test_set_color_rejects_out_of_range(rgb):
    t = Triangle()
    with pytest.raises(ValueError):
        t.set_color(0, *rgb)


def test_set_tex_coord_and_normal():
    t = Triangle()
    t.set_tex_coord(1, 0.25, 0.75)
    t.set_normal(2, (0, 0, 1))
    assert np.allclose(t.tex_coords[1], [0.25, 0.75])
    assert np.allclose(t.normal[2], [0, 0, 1])


def test_to_vector4_appends_unit_w():
    t = Triangle()
    t.set_vertex(0, (1, 2, 3))
    t.set_vertex(1, (-1, 0, 2))
    t.set_vertex(2, (0, 5, -4))
    vec4 = t.to_vector4()
    assert vec4.shape == (3, 4)
    assert np.array_equal(vec4[:, :3], t.v)
    assert np.array_equal(vec4[:, 3], [1, 1, 1])