import math

import numpy as np
import pytest

from softglview.camera import Camera, Plane


def make_camera(reverse_z=False):
    cam = Camera()
    cam.reverse_z = reverse_z
    cam.set_perspective(math.radians(60.0), 1.5, 0.1, 50.0)
    cam.look_at((1.0, 2.0, 5.0), (0.0, 0.5, 0.0), (0.0, 1.0, 0.0))
    return cam


def test_set_perspective_stores_values():
    cam = make_camera()
    assert cam.aspect == 1.5
    assert cam.near == 0.1
    assert cam.far == 50.0


def test_projection_structure():
    cam = make_camera()
    proj = cam.projection_matrix()
    assert proj[0, 0] * cam.aspect == pytest.approx(proj[1, 1])
    assert proj[3, 2] == -1.0
    assert proj[2, 2] == -1.0
    assert proj[2, 3] == pytest.approx(-cam.near)
    assert proj[3, 3] == 0.0


def test_projection_reverse_z():
    cam = make_camera(reverse_z=True)
    proj = cam.projection_matrix()
    assert proj[2, 2] == 0.0
    assert proj[2, 3] == pytest.approx(cam.near)
    assert proj[3, 2] == -1.0


def test_view_matrix_is_rigid():
    cam = make_camera()
    view = cam.view_matrix()
    rot = view[:3, :3]
    assert np.allclose(rot @ rot.T, np.eye(3))
    assert np.linalg.det(rot) == pytest.approx(1.0)


def test_view_matrix_maps_eye_to_origin_and_center_forward():
    cam = make_camera()
    view = cam.view_matrix()
    eye_view = view @ np.append(cam.eye, 1.0)
    assert np.allclose(eye_view[:3], 0.0)
    center_view = view @ np.append(cam.center, 1.0)
    dist = np.linalg.norm(cam.center - cam.eye)
    assert np.allclose(center_view[:3], [0.0, 0.0, -dist])


def test_world_position_round_trip():
    cam = make_camera()
    point = np.array([0.3, 0.9, 1.0])
    clip = cam.projection_matrix() @ cam.view_matrix() @ np.append(point, 1.0)
    ndc = clip[:3] / clip[3]
    assert np.allclose(cam.world_position_from_view(ndc), point)


def test_view_matrix_degenerate_raises():
    cam = Camera()
    cam.look_at((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 0.0))
    with pytest.raises(ValueError):
        cam.view_matrix()


def test_plane_distance():
    plane = Plane()
    plane.set((0.0, 2.0, 0.0), (5.0, 1.0, -3.0))
    assert np.allclose(plane.normal, [0.0, 1.0, 0.0])
    assert plane.distance((7.0, 1.0, 2.0)) == pytest.approx(0.0)
    assert plane.distance((0.0, 4.0, 0.0)) > 0
    assert plane.distance((0.0, -4.0, 0.0)) < 0


def test_frustum_contains_point_on_axis():
    cam = make_camera()
    cam.update()
    forward = (cam.center - cam.eye) / np.linalg.norm(cam.center - cam.eye)
    inside = cam.eye + forward * 10.0
    for plane in cam.frustum.planes:
        assert plane.distance(inside) > 0
    behind = cam.eye - forward
    assert cam.frustum.planes[0].distance(behind) < 0
    beyond = cam.eye + forward * (cam.far + 1.0)
    assert cam.frustum.planes[1].distance(beyond) < 0


def test_frustum_corners_lie_on_planes():
    cam = make_camera()
    cam.update()
    corners = cam.frustum.corners
    assert len(corners) == 8
    for corner in corners[:4]:
        assert cam.frustum.planes[0].distance(corner) == pytest.approx(0.0, abs=1e-9)
    for corner in corners[4:]:
        assert cam.frustum.planes[1].distance(corner) == pytest.approx(0.0, abs=1e-6)


def test_frustum_bbox_encloses_corners():
    cam = make_camera()
    cam.update()
    bbox = cam.frustum.bbox
    corners = np.array([np.asarray(c, dtype=float) for c in cam.frustum.corners])
    assert np.allclose(np.asarray(bbox.min, dtype=float), corners.min(axis=0))
    assert np.allclose(np.asarray(bbox.max, dtype=float), corners.max(axis=0))