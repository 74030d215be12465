# raytracer

A small path tracer. It renders a demo scene of four spheres (a large
diffuse ground, a glass sphere, a metallic sphere and a diffuse sphere)
into a window, five scanlines at a time, printing the percentage
completed as it goes.

Each pixel is the average of many jittered camera rays (200 by default).
Rays bounce up to 75 times off surfaces according to their material:

- **diffuse**: scattered in a random direction around the surface normal
- **metallic**: mirror reflection
- **glass**: refraction, with Schlick-approximated reflectance

Rays that miss everything take a sky-blue gradient as their colour.
The camera has a thin-lens defocus disk for depth of field.

## Installing

```
pip install .
```

The window is drawn with pygame.

## Running

```
raytracer
```

A window opens and the image fills in from top to bottom while the
percentage completed is printed to the terminal. Close the window to exit.

Options:

- `--preset {default,debug,release}`: image size of 100x100, 200x113 or
  800x450 pixels; `default` if not given
- `--width N`, `--height N`: override the preset's width or height

## Using it as a library

```python
from raytracer.camera import Camera
from raytracer.renderer import FrameBuffer
from raytracer.scene_builder import build_demo_scene

width, height = 40, 30
camera = Camera(width, height, None)
camera.samples_per_pixel = 10
scene = build_demo_scene()

frame = FrameBuffer(width, height)
camera.render_section(frame.set_pixel, scene, 0, 0, width, height)
print(frame.get_pixel(20, 15))
```

The modules:

- `raytracer.vector`: `Vector`, `Interval` and `Ray`, plus random vector
  helpers
- `raytracer.rng`: the `Xoshiro256Plus` and `FastPcg` generators; the
  shared generator is reached with `default_generator`, `set_seed` and
  `rng_01`. Anything with a `random()` method returning a float in [0, 1)
  can be passed wherever an `rng` is taken.
- `raytracer.hittable`: `Material`, `MaterialKind`, `HitRecord` and
  `Sphere`
- `raytracer.scene`: `Scene`, holding at most 1000 objects
  (`SceneFullError` past that)
- `raytracer.scatter`: the diffuse, metallic and glass bounce directions
- `raytracer.camera`: `Camera`, with `render_section` and `render`, which
  take any `set_pixel(x, y, colour)` callable
- `raytracer.renderer`: `colour_to_pixel`, `FrameBuffer` and the pygame
  `RenderWindow`
- `raytracer.scene_builder`: `build_demo_scene`
- `raytracer.obj_importer`: reading Wavefront OBJ text

Passing `None` as the camera's `rng` seeds the shared generator from the
current time. Colours are `Vector` values whose components run from 0 to
1; `colour_to_pixel` applies gamma correction and packs them as 0xRRGGBB.

`raytracer.obj_importer.parse_obj_file` (or `parse_obj` for text) reads
`v`, `vn` and `f` lines into an `ObjObject`'s `vertices`, `normals` and
`faces`. Tokens are at most five characters long and a line holds at
most ten; longer input raises `ObjParseError`, as does a `v`, `vn` or
`f` line without exactly three values.

## What it does not do

- Only spheres can be rendered. OBJ geometry is read, but no triangles
  are built from it (`ObjObject.tris` stays empty) and triangles cannot
  be intersected.
- Images are not saved to files: they are shown in the window, or kept in
  a `FrameBuffer` in memory.
- The command always renders the built-in demo scene from a fixed camera
  position.

## Tests

```
pip install .[test]
pytest
```