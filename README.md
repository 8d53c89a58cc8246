# raytracer

A small path tracer. It builds a scene of randomly placed spheres made of
diffuse, metal and glass materials. It renders that scene through a
thin-lens camera with depth of field. The result is written as a PNG image or
as a plain-text PPM stream.

The package needs nothing outside the Python standard library.

## Installation

```
pip install .
```

## Command line

```
raytracer
```

This renders the random scene and saves it as `out.png`. The image has an
aspect ratio of 3:2. Its height is the width divided by 1.5. The command
prints the image size and the number of worker processes before it starts.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--width N` | 1200 | image width in pixels |
| `--samples N` | 500 | samples per pixel |
| `--depth N` | 50 | maximum number of bounces per ray |
| `--workers N` | CPU count | number of worker processes for PNG rendering |
| `--output PATH` | `out.png` | PNG file to write |
| `--ppm` | off | write plain PPM (`P3`) to standard output instead of a PNG; progress goes to standard error |
| `--seed N` | none | seed for the random number generator |

Some settings are invalid:

- an image smaller than 2x2 pixels;
- fewer than one sample per pixel.

With one of these, the command prints an error to standard error and exits
with status 2.

About `--seed`:

- The seed always fixes the scene layout.
- The image itself is also reproducible only when rendering happens in a
  single process, that is with `--ppm` or with `--workers 1`.
- With more workers, each worker process seeds its random generator afresh.

Full-size renders with many samples take a long time in pure Python. Lower the
width and the number of samples for a quick preview:

```
raytracer --width 300 --samples 10 --output preview.png
```

## Library use

```python
from raytracer.vec3 import Vec3
from raytracer.camera import Camera
from raytracer.render import random_scene, render
from raytracer.image import save_png

world, materials = random_scene()
camera = Camera(
    Vec3(13.0, 2.0, 3.0),
    Vec3(0.0, 0.0, 0.0),
    Vec3(0.0, 1.0, 0.0),
    20.0,
    3.0 / 2.0,
    0.1,
    10.0,
)
width, height = 300, 200
data = render(camera, materials, world, width, height, 10, 50, 1)
save_png("preview.png", width, height, data)
```

`render` returns packed 8-bit RGB bytes, top row first. Its last argument
sets the number of worker processes. `None` means one per CPU; 1 renders in
the current process.

### Building blocks

- `raytracer.vec3`
  - `Vec3`: an immutable 3-component vector. It supports `+`, `-`, `*` and
    `/` with vectors or scalars. It also provides `dot`, `cross`, `unit`,
    `length`, `length_squared`, `sqrt`, `near_zero`, `lerp`, `reflect` and
    `refract`.
  - `randd01`, `randd` and `clamp`.
  - Sampling helpers: `random_vec`, `random_in_unit_sphere`,
    `random_unit_vector`, `random_in_hemisphere` and `random_in_unit_disk`.
- `raytracer.ray`
  - `Ray`: an origin and a direction. `Ray.at(t)` gives the point reached
    after travelling `t` times the direction.
- `raytracer.hittable`
  - `HitRecord`: the point, `t`, material index, normal and front-face flag
    of a hit.
  - `Hittable`: the abstract base for anything a ray can hit.
- `raytracer.sphere`
  - `Sphere`: the one shape available.
- `raytracer.world`
  - `World`: an ordered collection of objects. `World.hit` returns the closest
    hit, or `None`.
- `raytracer.material`
  - `Material`: the abstract base for all materials.
  - `Scatter`: the attenuation and the scattered ray.
- `raytracer.materials`
  - `Lambertian`, `Metal` and `Dielectric`: the concrete materials.
  - `reflectance`: Schlick's approximation.
- `raytracer.material_list`
  - `MaterialList`: materials addressed by the integer index that objects
    carry. An index out of range raises `IndexError`.
- `raytracer.camera`
  - `Camera`: a camera with look-from and look-at points, vertical field of
    view, aspect ratio, aperture and focus distance.
- `raytracer.image`
  - `to_rgb8`: averages the samples, applies gamma 2 correction and scales to
    0..255.
  - `format_color` and `write_color`: plain-PPM pixel lines.
  - `encode_png` and `save_png`: 8-bit RGB PNG output. Wrong dimensions or
    a wrong data length raise `ValueError`.
- `raytracer.render`
  - `ray_color`, `random_scene`, `render_row`, `render`, `write_ppm` and the
    command's `main`.

## Limitations

- The command always renders the built-in random sphere scene from a fixed
  camera position. There is no scene file format to load other scenes.
- Spheres are the only shape.
- There are no textures and no light-emitting materials.
- Output is limited to PNG and plain PPM.