[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softglview"
version = "0.1.0"
description = "Viewer-side scene logic for a small 3D renderer: camera, frustum, orbit control, materials, IBL helpers, asset catalogue and scene building"
requires-python = ">=3.10"
keywords = ["3d", "rendering", "camera", "frustum", "orbit", "material", "ibl", "skybox"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["softglview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
