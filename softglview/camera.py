"""Perspective camera with view/projection matrices and frustum planes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

CAMERA_FOV = 60.0
CAMERA_NEAR = 0.01
CAMERA_FAR = 100.0

# Smallest positive normal float32; the frustum box's max corner starts here.
_FLOAT32_TINY = float(np.finfo(np.float32).tiny)
_FLOAT32_MAX = float(np.finfo(np.float32).max)


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=np.float64).reshape(3).copy()


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


@dataclass
class Plane:
    """A plane given by a unit normal and an offset: dot(normal, p) + d = 0."""

    normal: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    d: float = 0.0

    def set(self, normal, point) -> None:
        """Place the plane through ``point`` facing ``normal``."""
        self.normal = _normalize(_vec3(normal))
        self.d = -float(np.dot(self.normal, _vec3(point)))

    def distance(self, point) -> float:
        """Signed distance from ``point``; positive on the side the normal faces."""
        return float(np.dot(self.normal, _vec3(point))) + self.d


@dataclass
class BoundingBox:
    """Axis-aligned box."""

    min: np.ndarray = field(default_factory=lambda: np.zeros(3))
    max: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass
class Frustum:
    """Six inward-facing planes (near, far, top, bottom, left, right), eight corners, a box."""

    planes: list[Plane] = field(default_factory=lambda: [Plane() for _ in range(6)])
    corners: list[np.ndarray] = field(default_factory=lambda: [np.zeros(3) for _ in range(8)])
    bbox: BoundingBox = field(default_factory=BoundingBox)


class Camera:
    """A look-at camera with an infinite-far perspective projection."""

    def __init__(self) -> None:
        self.fov = math.radians(CAMERA_FOV)
        self.aspect = 1.0
        self.near = CAMERA_NEAR
        self.far = CAMERA_FAR
        self.reverse_z = False
        self.eye = np.zeros(3)
        self.center = np.zeros(3)
        self.up = np.zeros(3)
        self.frustum = Frustum()

    def set_perspective(self, fov, aspect, near, far) -> None:
        self.fov = float(fov)
        self.aspect = float(aspect)
        self.near = float(near)
        self.far = float(far)

    def look_at(self, eye, center, up) -> None:
        self.eye = _vec3(eye)
        self.center = _vec3(center)
        self.up = _vec3(up)

    def _basis(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        forward = _normalize(self.center - self.eye)
        side = _normalize(np.cross(forward, self.up))
        up = np.cross(side, forward)
        return forward, side, up

    def projection_matrix(self) -> np.ndarray:
        """4x4 projection matrix (row-major, acts on column vectors)."""
        inv_tan = 1.0 / math.tan(self.fov * 0.5)
        proj = np.zeros((4, 4))
        proj[0, 0] = inv_tan / self.aspect
        proj[1, 1] = inv_tan
        proj[3, 2] = -1.0
        if self.reverse_z:
            proj[2, 2] = 0.0
            proj[2, 3] = self.near
        else:
            proj[2, 2] = -1.0
            proj[2, 3] = -self.near
        return proj

    def view_matrix(self) -> np.ndarray:
        """4x4 world-to-view matrix (row-major, acts on column vectors)."""
        forward, side, up = self._basis()
        view = np.eye(4)
        view[0, :3] = side
        view[0, 3] = -float(np.dot(side, self.eye))
        view[1, :3] = up
        view[1, 3] = -float(np.dot(up, self.eye))
        view[2, :3] = -forward
        view[2, 3] = float(np.dot(forward, self.eye))
        return view

    def world_position_from_view(self, pos) -> np.ndarray:
        """Unproject a normalized device position back into world space."""
        proj_inv = np.linalg.inv(self.projection_matrix())
        view_inv = np.linalg.inv(self.view_matrix())
        world = view_inv @ proj_inv @ np.append(_vec3(pos), 1.0)
        return world[:3] / world[3]

    def update(self) -> None:
        """Recompute the frustum planes, corners and bounding box."""
        forward, side, up = self._basis()
        eye = self.eye

        tan_half = math.tan(self.fov / 2.0)
        near_h = self.near * tan_half
        far_h = self.far * tan_half
        near_w = near_h * self.aspect
        far_w = far_h * self.aspect

        near_center = eye + forward * self.near
        far_center = eye + forward * self.far
        planes = self.frustum.planes
        planes[0].set(forward, near_center)
        planes[1].set(-forward, far_center)

        top_center = near_center + up * near_h
        planes[2].set(np.cross(_normalize(top_center - eye), side), top_center)

        bottom_center = near_center - up * near_h
        planes[3].set(np.cross(side, _normalize(bottom_center - eye)), bottom_center)

        left_center = near_center - side * near_w
        planes[4].set(np.cross(_normalize(left_center - eye), up), left_center)

        right_center = near_center + side * near_w
        planes[5].set(np.cross(up, _normalize(right_center - eye)), right_center)

        self.frustum.corners = [
            near_center + up * near_h - side * near_w,
            near_center + up * near_h + side * near_w,
            near_center - up * near_h - side * near_w,
            near_center - up * near_h + side * near_w,
            far_center + up * far_h - side * far_w,
            far_center + up * far_h + side * far_w,
            far_center - up * far_h - side * far_w,
            far_center - up * far_h + side * far_w,
        ]

        bbox_min = np.full(3, _FLOAT32_MAX)
        bbox_max = np.full(3, _FLOAT32_TINY)
        for corner in self.frustum.corners:
            bbox_min = np.minimum(bbox_min, corner)
            bbox_max = np.maximum(bbox_max, corner)
        self.frustum.bbox = BoundingBox(bbox_min, bbox_max)