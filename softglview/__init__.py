"""Camera and frustum, orbit control, materials, IBL helpers, input handling, asset catalogue and demo scene building for a small 3D viewer."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "config_panel",
    "environment",
    "input",
    "material",
    "orbit",
    "scene",
]