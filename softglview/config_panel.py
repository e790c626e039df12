"""Viewer settings and the asset catalogue that drives model and skybox loading."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

import numpy as np

ASSETS_DIR = "./assets/"
ASSETS_CONFIG_FILE = "assets.json"

RENDERER_NAMES = ("Software", "OpenGL", "Vulkan")
ANTI_ALIASING_NAMES = ("NONE", "MSAA", "FXAA")


class ConfigError(Exception):
    """Raised when the asset catalogue cannot be read or lists no models."""


@dataclass
class ViewerConfig:
    """Settings shared between the settings panel and the viewer."""

    renderer_type: int = 0
    triangle_count: int = 0
    model_name: str = ""
    model_path: str = ""
    skybox_name: str = ""
    skybox_path: str = ""
    show_skybox: bool = False
    pbr_ibl: bool = False
    clear_color: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 0.0, 1.0]))
    wireframe: bool = False
    world_axis: bool = True
    show_floor: bool = True
    shadow_map: bool = True
    ambient_color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    show_light: bool = True
    point_light_color: np.ndarray = field(default_factory=lambda: np.ones(3))
    point_light_position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    mipmaps: bool = False
    cull_face: bool = True
    depth_test: bool = True
    reverse_z: bool = False
    aa_type: int = 0


PathCallback = Callable[[str], bool]
LightCallback = Callable[[np.ndarray, np.ndarray], None]
Action = Callable[[], None]


class ConfigPanel:
    """Holds the asset catalogue and applies setting changes through callbacks."""

    def __init__(self, config: ViewerConfig, assets_dir: str = ASSETS_DIR) -> None:
        self.config = config
        self.assets_dir = assets_dir
        self.frame_width = 0
        self.frame_height = 0
        self.light_position_angle = math.radians(235.0)

        self.model_paths: dict[str, str] = {}
        self.skybox_paths: dict[str, str] = {}
        self.model_names: list[str] = []
        self.skybox_names: list[str] = []

        self.reload_model_func: Optional[PathCallback] = None
        self.reload_skybox_func: Optional[PathCallback] = None
        self.update_light_func: Optional[LightCallback] = None
        self.reset_camera_func: Optional[Action] = None
        self.reset_mipmaps_func: Optional[Action] = None
        self.reset_reverse_z_func: Optional[Action] = None
        self.frame_dump_func: Optional[Action] = None

    def _read_catalogue(self) -> dict:
        config_path = Path(self.assets_dir + ASSETS_CONFIG_FILE)
        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"load models failed: error read config file {config_path}") from exc
        if not text:
            raise ConfigError(f"load models failed: error read config file {config_path}")
        try:
            catalogue = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"load models failed: {exc}") from exc
        return catalogue if isinstance(catalogue, dict) else {}

    def _section_paths(self, catalogue: dict, key: str) -> dict[str, str]:
        section = catalogue.get(key)
        if not isinstance(section, dict):
            return {}
        paths = {}
        for name, entry in section.items():
            path = entry.get("path", "") if isinstance(entry, dict) else ""
            paths[name] = self.assets_dir + (path if isinstance(path, str) else "")
        return paths

    def load_config(self) -> bool:
        """Read the asset catalogue and load the first model and skybox.

        Returns whether the default model and skybox loaded; raises
        ConfigError when the catalogue is unreadable or lists no models.
        """
        catalogue = self._read_catalogue()
        self.model_paths.update(self._section_paths(catalogue, "model"))
        self.skybox_paths.update(self._section_paths(catalogue, "skybox"))

        if not self.model_paths:
            raise ConfigError("load models failed: no models in config file")

        self.model_names.extend(self.model_paths)
        self.skybox_names.extend(self.skybox_paths)

        if not self.reload_model(next(iter(self.model_paths))):
            return False
        if self.skybox_paths:
            return self.reload_skybox(next(iter(self.skybox_paths)))
        return True

    def reload_model(self, name) -> bool:
        """Switch to the named model; unchanged names are a no-op."""
        if name == self.config.model_name:
            return True
        if name not in self.model_paths:
            raise KeyError(f"unknown model: {name}")
        self.config.model_name = name
        self.config.model_path = self.model_paths[name]
        if self.reload_model_func is not None:
            return bool(self.reload_model_func(self.config.model_path))
        return True

    def reload_skybox(self, name) -> bool:
        """Switch to the named skybox; unchanged names are a no-op."""
        if name == self.config.skybox_name:
            return True
        if name not in self.skybox_paths:
            raise KeyError(f"unknown skybox: {name}")
        self.config.skybox_name = name
        self.config.skybox_path = self.skybox_paths[name]
        if self.reload_skybox_func is not None:
            return bool(self.reload_skybox_func(self.config.skybox_path))
        return True

    def update(self) -> None:
        """Place the point light on its orbit and report it."""
        angle = self.light_position_angle
        self.config.point_light_position = 2.0 * np.array(
            [math.sin(angle), 1.2, math.cos(angle)]
        )
        if self.update_light_func is not None:
            self.update_light_func(self.config.point_light_position, self.config.point_light_color)

    def update_size(self, width, height) -> None:
        self.frame_width = int(width)
        self.frame_height = int(height)