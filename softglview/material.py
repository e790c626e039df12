"""Material description, texture slots and shader naming tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

import numpy as np


class AlphaMode(IntEnum):
    OPAQUE = 0
    BLEND = 1


class ShadingModel(IntEnum):
    UNKNOWN = 0
    BASE_COLOR = 1
    BLINN_PHONG = 2
    PBR = 3
    SKYBOX = 4
    IBL_IRRADIANCE = 5
    IBL_PREFILTER = 6
    FXAA = 7


class MaterialTexType(IntEnum):
    NONE = 0
    ALBEDO = 1
    NORMAL = 2
    EMISSIVE = 3
    AMBIENT_OCCLUSION = 4
    METAL_ROUGHNESS = 5
    CUBE = 6
    EQUIRECTANGULAR = 7
    IBL_IRRADIANCE = 8
    IBL_PREFILTER = 9
    QUAD_FILTER = 10
    SHADOWMAP = 11


class UniformBlockType(IntEnum):
    SCENE = 0
    MODEL = 1
    MATERIAL = 2
    QUAD_FILTER = 3
    IBL_PREFILTER = 4


class WrapMode(IntEnum):
    REPEAT = 0
    MIRRORED_REPEAT = 1
    CLAMP_TO_EDGE = 2


_SHADING_NAMES = {
    ShadingModel.UNKNOWN: "Shading_Unknown",
    ShadingModel.BASE_COLOR: "Shading_BaseColor",
    ShadingModel.BLINN_PHONG: "Shading_BlinnPhong",
    ShadingModel.PBR: "Shading_PBR",
    ShadingModel.SKYBOX: "Shading_Skybox",
    ShadingModel.IBL_IRRADIANCE: "Shading_IBL_Irradiance",
    ShadingModel.IBL_PREFILTER: "Shading_IBL_Prefilter",
    ShadingModel.FXAA: "Shading_FXAA",
}

_SAMPLER_DEFINES = {
    MaterialTexType.ALBEDO: "ALBEDO_MAP",
    MaterialTexType.NORMAL: "NORMAL_MAP",
    MaterialTexType.EMISSIVE: "EMISSIVE_MAP",
    MaterialTexType.AMBIENT_OCCLUSION: "AO_MAP",
    MaterialTexType.METAL_ROUGHNESS: "METALROUGHNESS_MAP",
    MaterialTexType.CUBE: "CUBE_MAP",
    MaterialTexType.EQUIRECTANGULAR: "EQUIRECTANGULAR_MAP",
    MaterialTexType.IBL_IRRADIANCE: "IBL_MAP",
    MaterialTexType.IBL_PREFILTER: "IBL_MAP",
}

_SAMPLER_NAMES = {
    MaterialTexType.ALBEDO: "u_albedoMap",
    MaterialTexType.NORMAL: "u_normalMap",
    MaterialTexType.EMISSIVE: "u_emissiveMap",
    MaterialTexType.AMBIENT_OCCLUSION: "u_aoMap",
    MaterialTexType.METAL_ROUGHNESS: "u_metalRoughnessMap",
    MaterialTexType.CUBE: "u_cubeMap",
    MaterialTexType.EQUIRECTANGULAR: "u_equirectangularMap",
    MaterialTexType.IBL_IRRADIANCE: "u_irradianceMap",
    MaterialTexType.IBL_PREFILTER: "u_prefilterMap",
    MaterialTexType.QUAD_FILTER: "u_screenTexture",
    MaterialTexType.SHADOWMAP: "u_shadowMap",
}


def shading_model_str(model) -> str:
    """Name of a shading model, or an empty string for an unknown value."""
    try:
        return _SHADING_NAMES[ShadingModel(model)]
    except ValueError:
        return ""


def material_tex_type_str(usage) -> str:
    """Name of a texture slot, or an empty string for an unknown value."""
    try:
        return f"MaterialTexType_{MaterialTexType(usage).name}"
    except ValueError:
        return ""


def _tex_type(usage) -> MaterialTexType | None:
    try:
        return MaterialTexType(usage)
    except ValueError:
        return None


def sampler_define(usage) -> str | None:
    """Shader define enabling the given texture slot, or None if it has none."""
    return _SAMPLER_DEFINES.get(_tex_type(usage))


def sampler_name(usage) -> str | None:
    """Shader sampler uniform name for the given slot, or None if it has none."""
    return _SAMPLER_NAMES.get(_tex_type(usage))


@dataclass
class TextureData:
    """Decoded image layers for one texture slot."""

    tag: str = ""
    width: int = 0
    height: int = 0
    data: list = field(default_factory=list)
    wrap_mode_u: WrapMode = WrapMode.REPEAT
    wrap_mode_v: WrapMode = WrapMode.REPEAT
    wrap_mode_w: WrapMode = WrapMode.REPEAT


def _white() -> np.ndarray:
    return np.ones(4)


@dataclass
class Material:
    """Surface description plus the renderer state derived from it."""

    shading_model: ShadingModel = ShadingModel.UNKNOWN
    double_sided: bool = False
    alpha_mode: AlphaMode = AlphaMode.OPAQUE
    base_color: np.ndarray = field(default_factory=_white)
    point_size: float = 1.0
    line_width: float = 1.0
    texture_data: dict[int, TextureData] = field(default_factory=dict)
    shader_defines: set[str] = field(default_factory=set)
    textures: dict[int, Any] = field(default_factory=dict)
    material_obj: Any = None

    def reset(self) -> None:
        """Return every field to its default."""
        self.shading_model = ShadingModel.UNKNOWN
        self.double_sided = False
        self.alpha_mode = AlphaMode.OPAQUE
        self.base_color = _white()
        self.point_size = 1.0
        self.line_width = 1.0
        self.texture_data.clear()
        self.shader_defines.clear()
        self.textures.clear()
        self.material_obj = None

    def reset_states(self) -> None:
        """Drop renderer-side state, keeping the surface description."""
        self.textures.clear()
        self.shader_defines.clear()
        self.material_obj = None


@dataclass
class SkyboxMaterial(Material):
    """Skybox material tracking whether its IBL maps have been generated."""

    ibl_ready: bool = False

    def reset_states(self) -> None:
        super().reset_states()
        self.ibl_ready = False