"""Orbit-style camera controllers driven by pixel deltas."""

from __future__ import annotations

import math

import numpy as np

from softglview.camera import Camera

MIN_ORBIT_ARM_LENGTH = 1.0

_INIT_EYE = (-1.5, 3.0, 3.0)
_INIT_CENTER = (0.0, 1.0, 0.0)
_INIT_UP = (0.0, 1.0, 0.0)


def _euler_rotation(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """3x3 rotation matrix of the quaternion built from Euler angles in radians."""
    cx, cy, cz = (math.cos(a * 0.5) for a in (pitch, yaw, roll))
    sx, sy, sz = (math.sin(a * 0.5) for a in (pitch, yaw, roll))
    w = cx * cy * cz + sx * sy * sz
    x = sx * cy * cz - cx * sy * sz
    y = cx * sy * cz + sx * cy * sz
    z = cx * cy * sz - sx * sy * cz
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
    )


class OrbitController:
    """Moves a camera on an arm around a center point."""

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self.pan_sensitivity = 0.1
        self.zoom_sensitivity = 0.2
        self.rotate_sensitivity = 0.2
        self.reset()

    def update(self) -> None:
        """Push the current orbit position into the camera."""
        self.eye = self.center + self.arm_dir * self.arm_length
        self.camera.look_at(self.eye, self.center, self.up)

    def pan_by_pixels(self, dx, dy) -> None:
        offset = self.camera.world_position_from_view((dx, -dy, 0.0))
        origin = self.camera.world_position_from_view((0.0, 0.0, 0.0))
        self.center = self.center + (origin - offset) * self.arm_length * self.pan_sensitivity

    def rotate_by_pixels(self, dx, dy) -> None:
        x_angle = float(dx) * self.rotate_sensitivity
        y_angle = float(dy) * self.rotate_sensitivity
        rotation = _euler_rotation(math.radians(-y_angle), math.radians(-x_angle), 0.0)
        new_dir = rotation @ self.arm_dir
        self.arm_dir = new_dir / np.linalg.norm(new_dir)

    def zoom_by_pixels(self, dx, dy) -> None:
        self.arm_length = max(
            self.arm_length - float(dy) * self.zoom_sensitivity, MIN_ORBIT_ARM_LENGTH
        )
        self.eye = self.center + self.arm_dir * self.arm_length

    def reset(self) -> None:
        """Return to the initial viewpoint."""
        self.eye = np.array(_INIT_EYE)
        self.center = np.array(_INIT_CENTER)
        self.up = np.array(_INIT_UP)
        direction = self.eye - self.center
        self.arm_length = float(np.linalg.norm(direction))
        self.arm_dir = direction / self.arm_length


class SmoothOrbitController:
    """Applies accumulated gestures to an orbit controller with decaying motion."""

    motion_eps = 0.001
    motion_sensitivity = 1.2

    def __init__(self, orbit_controller: OrbitController) -> None:
        self.orbit_controller = orbit_controller
        self.zoom_x = 0.0
        self.zoom_y = 0.0
        self.rotate_x = 0.0
        self.rotate_y = 0.0
        self.pan_x = 0.0
        self.pan_y = 0.0

    def _moving(self, a: float, b: float) -> bool:
        return abs(a) > self.motion_eps or abs(b) > self.motion_eps

    def update(self) -> None:
        if self._moving(self.zoom_x, self.zoom_y):
            self.zoom_x /= self.motion_sensitivity
            self.zoom_y /= self.motion_sensitivity
            self.orbit_controller.zoom_by_pixels(self.zoom_x, self.zoom_y)
        else:
            self.zoom_x = self.zoom_y = 0.0

        if self._moving(self.rotate_x, self.rotate_y):
            self.rotate_x /= self.motion_sensitivity
            self.rotate_y /= self.motion_sensitivity
            self.orbit_controller.rotate_by_pixels(self.rotate_x, self.rotate_y)
        else:
            self.rotate_x = self.rotate_y = 0.0

        if self._moving(self.pan_x, self.pan_y):
            self.orbit_controller.pan_by_pixels(self.pan_x, self.pan_y)
            self.pan_x = self.pan_y = 0.0

        self.orbit_controller.update()

    def reset(self) -> None:
        self.orbit_controller.reset()