import io

import numpy as np
from PIL import Image

from wirerast.app import (
    get_model_matrix,
    get_projection_matrix,
    get_view_matrix,
    main,
    render,
    save_image,
)


def test_view_matrix_moves_eye_to_origin():
    view = get_view_matrix((0, 0, 5))
    assert np.allclose(view @ np.array([0, 0, 5, 1]), [0, 0, 0, 1])
    assert np.allclose(view @ np.array([1, 2, 3, 1]), [1, 2, -2, 1])


def test_model_matrix_zero_is_identity():
    assert np.allclose(get_model_matrix(0), np.identity(4))


def test_model_matrix_full_turn_is_identity():
    assert np.allclose(get_model_matrix(360), np.identity(4), atol=1e-5)


def test_model_matrix_quarter_turn():
    rotated = get_model_matrix(90) @ np.array([1, 0, 0, 1])
    assert np.allclose(rotated, [0, 1, 0, 1], atol=1e-5)


def test_model_matrix_keeps_z():
    point = np.array([1.5, -2.0, 3.0, 1.0])
    rotated = get_model_matrix(37) @ point
    assert np.isclose(rotated[2], 3.0)
    assert np.isclose(np.linalg.norm(rotated[:2]), np.linalg.norm(point[:2]), atol=1e-5)


def _ndc(matrix, point):
    clip = matrix @ np.array(point, dtype=np.float64)
    return clip / clip[3]


def test_projection_maps_clip_planes_to_opposite_ends():
    proj = get_projection_matrix(45, 1, 0.1, 50)
    near = _ndc(proj, [0, 0, -0.1, 1])
    far = _ndc(proj, [0, 0, -50, 1])
    assert np.isclose(abs(near[2]), 1, atol=1e-4)
    assert np.isclose(abs(far[2]), 1, atol=1e-4)
    assert np.sign(near[2]) == -np.sign(far[2])


def test_projection_keeps_axis_centred_and_side_preserved():
    proj = get_projection_matrix(45, 1, 0.1, 50)
    centre = _ndc(proj, [0, 0, -7, 1])
    assert np.allclose(centre[:2], [0, 0], atol=1e-6)
    right = _ndc(proj, [2, 0, -7, 1])
    up = _ndc(proj, [0, 2, -7, 1])
    assert 0 < right[0] < 1
    assert 0 < up[1] < 1


def test_render_draws_white_wireframe():
    r = render(0)
    values = set(np.unique(r.frame_buffer()))
    assert values == {0.0, 255.0}


def test_render_rotation_changes_image():
    assert not np.array_equal(render(0).frame_buffer(), render(90).frame_buffer())


def test_save_image_writes_frame(tmp_path):
    r = render(0)
    path = tmp_path / "frame.png"
    save_image(r, path)
    with Image.open(path) as img:
        data = np.asarray(img.convert("RGB"))
    assert data.shape == (r.height, r.width, 3)
    expected = r.frame_buffer().reshape(r.height, r.width, 3).astype(np.uint8)
    assert np.array_equal(data, expected)


def test_main_command_line_writes_file(tmp_path):
    path = tmp_path / "out.png"
    assert main(["-r", "20", str(path)]) == 0
    reference = tmp_path / "ref.png"
    save_image(render(20), reference)
    with Image.open(path) as a, Image.open(reference) as b:
        assert np.array_equal(np.asarray(a), np.asarray(b))


def test_main_interactive_counts_frames(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("a\nd\nq\n"))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["frame count: 0", "frame count: 1", "frame count: 2"]
    assert (tmp_path / "output.png").exists()