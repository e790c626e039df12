import numpy as np
import pytest

from softglview.environment import (
    CAPTURE_VIEWS,
    IBL_TEX_CACHE_DIR,
    PREFILTER_MAX_MIP_LEVELS,
    LookAtParam,
    cache_file_path,
    capture_view_projection,
    prefilter_roughness,
    texture_hash_key,
)


def test_hash_key_is_hex_md5_digest():
    key = texture_hash_key("assets/sky.hdr", 512, 256)
    assert len(key) == 32
    assert all(c in "0123456789abcdef" for c in key)


def test_hash_key_is_deterministic_and_size_sensitive():
    a = texture_hash_key("sky", 128, 128)
    assert a == texture_hash_key("sky", 128, 128)
    assert a != texture_hash_key("sky", 64, 128)
    assert a != texture_hash_key("sky.cubeMap", 128, 128)


def test_hash_key_concatenates_tag_and_sizes():
    assert texture_hash_key("a", 12, 3) == texture_hash_key("a1", 2, 3)


def test_cache_file_path_uses_tex_extension():
    path = cache_file_path("abc", IBL_TEX_CACHE_DIR)
    assert path.endswith("abc.tex")
    assert path.startswith("./cache/IBL")


def test_cache_file_path_custom_dir(tmp_path):
    path = cache_file_path("deadbeef", str(tmp_path))
    assert path == str(tmp_path / "deadbeef.tex")


def test_prefilter_roughness_endpoints():
    assert prefilter_roughness(0) == 0.0
    assert prefilter_roughness(PREFILTER_MAX_MIP_LEVELS - 1) == 1.0


def test_prefilter_roughness_increasing():
    values = [prefilter_roughness(level) for level in range(PREFILTER_MAX_MIP_LEVELS)]
    assert values == sorted(values)
    assert len(set(values)) == PREFILTER_MAX_MIP_LEVELS


@pytest.mark.parametrize("level", [-1, PREFILTER_MAX_MIP_LEVELS])
def test_prefilter_roughness_out_of_range(level):
    with pytest.raises(ValueError):
        prefilter_roughness(level)


def test_capture_views_give_six_distinct_projections():
    assert len(CAPTURE_VIEWS) == 6
    assert all(isinstance(v, LookAtParam) for v in CAPTURE_VIEWS)
    matrices = [np.asarray(capture_view_projection(face)) for face in range(len(CAPTURE_VIEWS))]
    assert all(m.shape == (4, 4) for m in matrices)
    for i, a in enumerate(matrices):
        for b in matrices[i + 1:]:
            assert not np.allclose(a, b)


@pytest.mark.parametrize("face", range(6))
def test_capture_face_center_projects_to_screen_center(face):
    mvp = capture_view_projection(face)
    direction = np.append(np.array(CAPTURE_VIEWS[face].center), 1.0)
    clip = mvp @ direction
    assert clip[3] > 0
    assert clip[0] / clip[3] == pytest.approx(0.0, abs=1e-9)
    assert clip[1] / clip[3] == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("face", range(6))
def test_capture_has_no_translation(face):
    mvp = capture_view_projection(face)
    # A point at the origin only picks up the projection's constant column.
    clip = mvp @ np.array([0.0, 0.0, 0.0, 1.0])
    assert clip[0] == pytest.approx(0.0)
    assert clip[1] == pytest.approx(0.0)
    assert clip[3] == pytest.approx(0.0)


def test_opposite_faces_see_opposite_directions():
    mvp_pos = capture_view_projection(0)
    behind = mvp_pos @ np.array([-1.0, 0.0, 0.0, 1.0])
    assert behind[3] < 0


@pytest.mark.parametrize("face", [-1, 6])
def test_capture_face_out_of_range(face):
    with pytest.raises(ValueError):
        capture_view_projection(face)