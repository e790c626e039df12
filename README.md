# softglview

The viewer-side logic for a small 3D renderer, with no window system or
GPU interface. It builds cameras and view frusta and turns mouse gestures
into orbit-camera motion. It also describes materials and their shader
samplers, and prepares the helper data for image-based lighting. Finally,
it reads the viewer's asset catalogue and puts together a demo scene with
skybox and texture loading.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `softglview.camera`

- `Camera` keeps `fov` (in radians), `aspect`, `near`, `far`, `reverse_z`,
  `eye`, `center`, `up` and a `frustum`.
  - `set_perspective(fov, aspect, near, far)` sets the projection.
  - `look_at(eye, center, up)` sets where the camera looks from and to.
  - `projection_matrix()` returns a 4x4 perspective projection with an
    infinite far plane. It uses a reversed depth range when `reverse_z`
    is true.
  - `view_matrix()` returns the 4x4 look-at matrix.
  - `world_position_from_view(pos)` unprojects a normalized device
    position into world space.
  - `update()` rebuilds the `Frustum`. That is six inward-facing `Plane`s
    (near, far, top, bottom, left, right), eight corners and a
    `BoundingBox`.
- `Plane.set(normal, point)` and `Plane.distance(point)` work with signed
  plane distances.

### `softglview.orbit`

- `OrbitController(camera)` moves the camera on an arm around a centre
  point.
  - `pan_by_pixels` moves the centre point.
  - `rotate_by_pixels` turns the arm.
  - `zoom_by_pixels` changes the arm length. The arm is never shorter
    than 1.
  - `update` pushes the position into the camera.
  - `reset` returns to the initial viewpoint.
- `SmoothOrbitController(orbit_controller)` applies the accumulated
  gestures on each `update()`.
  - The gestures are the `zoom_x/zoom_y`, `rotate_x/rotate_y` and
    `pan_x/pan_y` values.
  - Zoom and rotation decay by a factor of 1.2 per update.
  - Pan is applied once and then cleared.

### `softglview.material`

- The enums are `AlphaMode`, `ShadingModel`, `MaterialTexType`,
  `UniformBlockType` and `WrapMode`.
- `TextureData` holds the image layers for one texture slot.
- `Material` has `reset()`, which returns every field to its default, and
  `reset_states()`, which drops the textures, shader defines and material
  object.
- `SkyboxMaterial` also clears `ibl_ready` on `reset_states()`.
- Lookup functions:
  - `shading_model_str` and `material_tex_type_str` return the names of
    values, or `""` for an unknown value.
  - `sampler_define` and `sampler_name` return the shader define and the
    sampler uniform name, or `None` when the slot has none.

### `softglview.environment`

This module holds the helpers for image-based lighting.

- `LookAtParam` and `CAPTURE_VIEWS` give the six cube-face capture views,
  in +X, -X, +Y, -Y, +Z, -Z order.
- `capture_view_projection(face)` returns the projection times the
  rotation-only view matrix for one face. It uses a 90° field of view.
- `prefilter_roughness(level)` returns the roughness for each of the five
  prefilter mip levels.
- `texture_hash_key(tag, width, height)` returns an MD5 key.
- `cache_file_path(hash_key, cache_dir)` places the key under the cache
  directory, which defaults to `./cache/IBL/`.
- An out-of-range face or level raises `ValueError`.

### `softglview.input`

`InputHandler(viewer)` turns window events into viewer gestures.

- `mouse_move(x, y, left_pressed, shift_pressed)` rotates while dragging
  and pans while shift-dragging.
- `scroll(dx, dy)` zooms.
- `key_h(pressed)` toggles the panel once per key press.
- Events are ignored when there is no viewer, or when the viewer reports
  that it wants to capture the input.

### `softglview.config_panel`

- `ViewerConfig` holds the viewer settings.
- `ConfigPanel(config, assets_dir="./assets/")` handles the asset
  catalogue.
  - `load_config()` reads the `model` and `skybox` sections of
    `assets.json`, then selects the first model and the first skybox. It
    raises `ConfigError` when the file cannot be read or lists no models.
  - `reload_model(name)` and `reload_skybox(name)` switch the selection
    and call `reload_model_func` / `reload_skybox_func` when these are
    set. An unknown name raises `KeyError`.
  - `update()` puts the point light on its orbit and reports it through
    `update_light_func`.
  - `update_size(width, height)` records the frame size.

### `softglview.scene`

- `build_world_axis()`, `build_point_light(position, color)` and
  `build_floor()` build the helper meshes. They return `Mesh` objects made
  of `Vertex` entries.
- `ModelLoader(config)` builds a `DemoScene` from these meshes.
  - `load_texture_file(path)` decodes an image into an RGBA `uint8` array
    with caching, or returns `None`.
  - `load_skybox(filepath)` loads one of two kinds of skybox:
    - a path ending in `/` is read as six cube-face JPEGs;
    - any other path is read as one equirectangular image.
  - Loaded skybox materials are cached. A face that cannot be read raises
    `FileNotFoundError`.
  - `reset_all_model_states()` clears the renderer state of every cached
    model and skybox material.
- `convert_wrap_mode(mode)` maps a `TextureMapMode` to a `WrapMode`.
- `adjust_model_center(bounds)` returns the transform that places a model
  on y=0, centres it in x and z and scales its diagonal to 3.

## Example

```python
import math
from softglview.camera import Camera
from softglview.orbit import OrbitController

camera = Camera()
camera.set_perspective(math.radians(60.0), 1000 / 800, 0.01, 100.0)

orbit = OrbitController(camera)
orbit.rotate_by_pixels(20.0, 0.0)
orbit.zoom_by_pixels(0.0, 1.0)
orbit.update()

camera.update()
print(camera.view_matrix())
print(camera.frustum.bbox)
```

## What this package does not do

- It opens no window, draws no settings panel and renders nothing. There
  is no rasterizer, GPU back end or command-line program.
- The `environment` helpers give capture matrices, roughness values and
  cache paths. They do not produce irradiance or prefiltered maps, and
  they do not read or write cached textures.
- `ModelLoader` does not import mesh files. `DemoScene.model` and
  `ModelLoader.model_cache` are left for the caller to fill.