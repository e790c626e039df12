"""Scene content for the viewer: helper geometry, skyboxes and a texture cache."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

import numpy as np
from PIL import Image

from softglview.camera import BoundingBox
from softglview.config_panel import ViewerConfig
from softglview.material import Material, MaterialTexType, ShadingModel, SkyboxMaterial, WrapMode

# Cube-map faces in +X, -X, +Y, -Y, +Z, -Z order.
SKYBOX_FACE_FILES = ("right.jpg", "left.jpg", "top.jpg", "bottom.jpg", "front.jpg", "back.jpg")


class PrimitiveType(IntEnum):
    POINT = 0
    LINE = 1
    TRIANGLE = 2


class TextureMapMode(IntEnum):
    """How a model file asks for texture coordinates outside [0, 1] to be handled."""

    WRAP = 0
    CLAMP = 1
    MIRROR = 2
    DECAL = 3


def _vec(values, size: int) -> np.ndarray:
    return np.asarray(values, dtype=np.float64).reshape(size).copy()


@dataclass
class Vertex:
    """One mesh vertex."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    tex_coord: np.ndarray = field(default_factory=lambda: np.zeros(2))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    tangent: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass
class Mesh:
    """Vertices, indices and the material used to draw them."""

    primitive_type: PrimitiveType = PrimitiveType.TRIANGLE
    primitive_count: int = 0
    vertexes: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    material: Optional[Material] = None
    aabb: BoundingBox = field(default_factory=BoundingBox)


@dataclass
class DemoScene:
    """Everything the viewer draws besides its renderer state."""

    world_axis: Mesh = field(default_factory=Mesh)
    point_light: Mesh = field(default_factory=Mesh)
    floor: Mesh = field(default_factory=Mesh)
    skybox: Mesh = field(default_factory=Mesh)
    model: Any = None


def convert_wrap_mode(mode) -> WrapMode:
    """Map a model file's texture map mode to a sampler wrap mode."""
    try:
        mode = TextureMapMode(mode)
    except ValueError:
        return WrapMode.REPEAT
    if mode is TextureMapMode.CLAMP:
        return WrapMode.CLAMP_TO_EDGE
    if mode is TextureMapMode.MIRROR:
        return WrapMode.MIRRORED_REPEAT
    return WrapMode.REPEAT


def adjust_model_center(bounds: BoundingBox) -> np.ndarray:
    """Transform that stands a model on y=0, centres it in x and z and scales its diagonal to 3."""
    bmin = _vec(bounds.min, 3)
    bmax = _vec(bounds.max, 3)
    length = float(np.linalg.norm(bmax - bmin))
    if length == 0.0:
        raise ValueError("cannot centre a model with an empty bounding box")

    trans = (bmax + bmin) / -2.0
    trans[1] = -bmin[1]

    scale = np.eye(4)
    scale[0, 0] = scale[1, 1] = scale[2, 2] = 3.0 / length
    translate = np.eye(4)
    translate[:3, 3] = trans
    return scale @ translate


def build_world_axis() -> Mesh:
    """Grid of lines just below the floor."""
    axis_y = -0.01
    vertexes: list[Vertex] = []
    for i in range(-16, 17):
        offset = 0.2 * i
        vertexes.append(Vertex(position=np.array([-3.2, axis_y, offset])))
        vertexes.append(Vertex(position=np.array([3.2, axis_y, offset])))
        vertexes.append(Vertex(position=np.array([offset, axis_y, -3.2])))
        vertexes.append(Vertex(position=np.array([offset, axis_y, 3.2])))
    indices = list(range(len(vertexes)))

    material = Material(
        shading_model=ShadingModel.BASE_COLOR,
        base_color=np.array([0.25, 0.25, 0.25, 1.0]),
        line_width=1.0,
    )
    return Mesh(
        primitive_type=PrimitiveType.LINE,
        primitive_count=len(indices) // 2,
        vertexes=vertexes,
        indices=indices,
        material=material,
    )


def build_point_light(position, color) -> Mesh:
    """A single large point drawn in the light's colour."""
    material = Material(
        shading_model=ShadingModel.BASE_COLOR,
        base_color=np.append(_vec(color, 3), 1.0),
        point_size=10.0,
    )
    return Mesh(
        primitive_type=PrimitiveType.POINT,
        primitive_count=1,
        vertexes=[Vertex(position=_vec(position, 3))],
        indices=[0],
        material=material,
    )


def build_floor() -> Mesh:
    """Double-sided square floor used to receive shadows."""
    floor_y = 0.01
    size = 2.0
    up = (0.0, 1.0, 0.0)
    corners = [
        ((-size, floor_y, size), (0.0, 1.0)),
        ((-size, floor_y, -size), (0.0, 0.0)),
        ((size, floor_y, -size), (1.0, 0.0)),
        ((size, floor_y, size), (1.0, 1.0)),
    ]
    vertexes = [
        Vertex(position=np.array(pos), tex_coord=np.array(uv), normal=np.array(up))
        for pos, uv in corners
    ]
    material = Material(
        shading_model=ShadingModel.BLINN_PHONG,
        base_color=np.ones(4),
        double_sided=True,
    )
    return Mesh(
        primitive_type=PrimitiveType.TRIANGLE,
        primitive_count=2,
        vertexes=vertexes,
        indices=[0, 2, 1, 0, 3, 2],
        material=material,
        aabb=BoundingBox(np.array([-2.0, 0.0, -2.0]), np.array([2.0, 0.0, 2.0])),
    )


class ModelLoader:
    """Builds the demo scene and loads skyboxes, caching decoded images and materials."""

    def __init__(self, config: ViewerConfig) -> None:
        self.config = config
        self.scene = DemoScene(
            world_axis=build_world_axis(),
            point_light=build_point_light(config.point_light_position, config.point_light_color),
            floor=build_floor(),
        )
        self.model_cache: dict[str, Any] = {}
        self.skybox_material_cache: dict[str, SkyboxMaterial] = {}
        self._texture_cache: dict[str, np.ndarray] = {}
        self._tex_cache_lock = threading.Lock()

    def load_texture_file(self, path) -> Optional[np.ndarray]:
        """Decode an image into an RGBA uint8 array of shape (height, width, 4).

        Results are cached by path; returns None if the file cannot be read.
        """
        path = str(path)
        with self._tex_cache_lock:
            cached = self._texture_cache.get(path)
        if cached is not None:
            return cached

        try:
            with Image.open(path) as image:
                pixels = np.asarray(image.convert("RGBA"), dtype=np.uint8)
        except (OSError, ValueError):
            return None

        with self._tex_cache_lock:
            return self._texture_cache.setdefault(path, pixels)

    def _load_required(self, path: str) -> np.ndarray:
        pixels = self.load_texture_file(path)
        if pixels is None:
            raise FileNotFoundError(f"load skybox texture failed: {path}")
        return pixels

    def load_skybox(self, filepath) -> bool:
        """Make the skybox at ``filepath`` current.

        A path ending in "/" names a directory of six cube faces; any other
        path names one equirectangular image. Returns False for an empty path
        and raises FileNotFoundError when an image cannot be read.
        """
        filepath = str(filepath)
        if not filepath:
            return False

        cached = self.skybox_material_cache.get(filepath)
        if cached is not None:
            self.scene.skybox.material = cached
            return True

        if filepath.endswith("/"):
            paths = [filepath + name for name in SKYBOX_FACE_FILES]
            with ThreadPoolExecutor(max_workers=len(paths)) as pool:
                layers = list(pool.map(self._load_required, paths))
            slot = MaterialTexType.CUBE
        else:
            layers = [self._load_required(filepath)]
            slot = MaterialTexType.EQUIRECTANGULAR

        height, width = layers[0].shape[:2]
        material = SkyboxMaterial(shading_model=ShadingModel.SKYBOX)
        texture = material.texture_data.setdefault(slot, type(material).__dataclass_fields__[
            "texture_data"
        ].type and _new_texture_data())
        texture.tag = filepath
        texture.width = width
        texture.height = height
        texture.data = layers
        texture.wrap_mode_u = WrapMode.CLAMP_TO_EDGE
        texture.wrap_mode_v = WrapMode.CLAMP_TO_EDGE
        texture.wrap_mode_w = WrapMode.CLAMP_TO_EDGE

        self.skybox_material_cache[filepath] = material
        self.scene.skybox.material = material
        return True

    def reset_all_model_states(self) -> None:
        """Drop renderer-side state of every cached model and skybox material."""
        for model in self.model_cache.values():
            model.reset_states()
        for material in self.skybox_material_cache.values():
            material.reset_states()


def _new_texture_data():
    from softglview.material import TextureData

    return TextureData()