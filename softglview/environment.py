"""Helpers for image-based-lighting map generation: cube capture views and cache keys."""

from __future__ import annotations

import hashlib
import math
import os
from dataclasses import dataclass

import numpy as np

from softglview.camera import Camera

IRRADIANCE_MAP_SIZE = 32
PREFILTER_MAX_MIP_LEVELS = 5
PREFILTER_MAP_SIZE = 128

IBL_TEX_CACHE_DIR = "./cache/IBL/"

CAPTURE_FOV = math.radians(90.0)
CAPTURE_ASPECT = 1.0
CAPTURE_NEAR = 0.1
CAPTURE_FAR = 10.0


@dataclass(frozen=True)
class LookAtParam:
    """Eye, target and up vector of one cube-face capture."""

    eye: tuple[float, float, float]
    center: tuple[float, float, float]
    up: tuple[float, float, float]


_ORIGIN = (0.0, 0.0, 0.0)

# Faces in +X, -X, +Y, -Y, +Z, -Z order.
CAPTURE_VIEWS: tuple[LookAtParam, ...] = (
    LookAtParam(_ORIGIN, (1.0, 0.0, 0.0), (0.0, -1.0, 0.0)),
    LookAtParam(_ORIGIN, (-1.0, 0.0, 0.0), (0.0, -1.0, 0.0)),
    LookAtParam(_ORIGIN, (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
    LookAtParam(_ORIGIN, (0.0, -1.0, 0.0), (0.0, 0.0, -1.0)),
    LookAtParam(_ORIGIN, (0.0, 0.0, 1.0), (0.0, -1.0, 0.0)),
    LookAtParam(_ORIGIN, (0.0, 0.0, -1.0), (0.0, -1.0, 0.0)),
)


def texture_hash_key(tag, width, height) -> str:
    """MD5 hex digest identifying a texture by its tag and size."""
    text = f"{tag}{int(width)}{int(height)}"
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def cache_file_path(hash_key, cache_dir=IBL_TEX_CACHE_DIR) -> str:
    """Path of the cached texture file for ``hash_key`` inside ``cache_dir``."""
    return os.path.join(cache_dir, f"{hash_key}.tex")


def prefilter_roughness(level) -> float:
    """Roughness rendered into the given mip level of the prefiltered map."""
    level = int(level)
    if not 0 <= level < PREFILTER_MAX_MIP_LEVELS:
        raise ValueError(
            f"prefilter level must be in [0, {PREFILTER_MAX_MIP_LEVELS}), got {level}"
        )
    return level / (PREFILTER_MAX_MIP_LEVELS - 1)


def capture_view_projection(face) -> np.ndarray:
    """Projection times rotation-only view matrix used to render one cube face."""
    face = int(face)
    if not 0 <= face < len(CAPTURE_VIEWS):
        raise ValueError(f"cube face must be in [0, {len(CAPTURE_VIEWS)}), got {face}")
    param = CAPTURE_VIEWS[face]
    camera = Camera()
    camera.set_perspective(CAPTURE_FOV, CAPTURE_ASPECT, CAPTURE_NEAR, CAPTURE_FAR)
    camera.look_at(param.eye, param.center, param.up)

    rotation_only = np.eye(4)
    rotation_only[:3, :3] = camera.view_matrix()[:3, :3]
    return camera.projection_matrix() @ rotation_only