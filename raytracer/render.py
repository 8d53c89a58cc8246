"""Shading rays, building the demo scene and rendering images."""

from __future__ import annotations

import argparse
import os
import random
import sys
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Optional, Sequence, TextIO

from raytracer.camera import Camera
from raytracer.image import format_color, save_png, to_rgb8
from raytracer.material_list import MaterialList
from raytracer.materials import Dielectric, Lambertian, Metal
from raytracer.ray import Ray
from raytracer.sphere import Sphere
from raytracer.vec3 import Vec3, randd, randd01, random_vec
from raytracer.world import World

EPSILON = 0.001
INF = sys.float_info.max

_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY_BLUE = Vec3(0.5, 0.7, 1.0)
_BLACK = Vec3(0.0, 0.0, 0.0)


def ray_color(ray: Ray, materials: MaterialList, world: World, depth: int) -> Vec3:
    """The colour seen along *ray*, following at most *depth* bounces."""
    throughput = _WHITE
    for _ in range(depth):
        rec = world.hit(ray, EPSILON, INF)
        if rec is None:
            t = 0.5 * (ray.direction.unit().y + 1.0)
            return throughput * _WHITE.lerp(_SKY_BLUE, t)
        bounce = materials.scatter(ray, rec)
        if bounce is None:
            return _BLACK
        throughput = throughput * bounce.attenuation
        ray = bounce.scattered
    return _BLACK


def random_scene() -> tuple[World, MaterialList]:
    """The cover scene: a ground plane, many small spheres and three large ones."""
    world = World()
    materials = MaterialList()
    min_offset = Vec3(4.0, 0.2, 0.0)

    ground = materials.add(Lambertian(Vec3(0.5, 0.5, 0.5)))
    world.add(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, ground))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = randd01()
            center = Vec3(a + 0.9 * randd01(), 0.2, b + 0.9 * randd01())
            if (center - min_offset).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = Lambertian(random_vec() * random_vec())
            elif choose_mat < 0.95:
                material = Metal(random_vec(0.5, 1.0), randd(0.0, 0.5))
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, materials.add(material)))

    big = (
        (Vec3(0.0, 1.0, 0.0), Dielectric(1.5)),
        (Vec3(-4.0, 1.0, 0.0), Lambertian(Vec3(0.4, 0.2, 0.1))),
        (Vec3(4.0, 1.0, 0.0), Metal(Vec3(0.7, 0.6, 0.5), 0.0)),
    )
    for center, material in big:
        world.add(Sphere(center, 1.0, materials.add(material)))
    return world, materials


def _check_size(width: int, height: int, samples: int) -> None:
    if width < 2 or height < 2:
        raise ValueError("image must be at least 2x2 pixels")
    if samples < 1:
        raise ValueError("at least one sample per pixel is required")


def render_row(
    camera: Camera,
    materials: MaterialList,
    world: World,
    width: int,
    height: int,
    row: int,
    samples: int,
    depth: int,
) -> bytes:
    """Render image row *row* (0 is the top) as packed 8-bit RGB."""
    j = height - 1 - row
    out = bytearray()
    for i in range(width):
        pixel = _BLACK
        for _ in range(samples):
            u = (i + randd01()) / (width - 1)
            v = (j + randd01()) / (height - 1)
            pixel = pixel + ray_color(camera.get_ray(u, v), materials, world, depth)
        out.extend(to_rgb8(pixel, samples))
    return bytes(out)


def render(
    camera: Camera,
    materials: MaterialList,
    world: World,
    width: int,
    height: int,
    samples: int,
    depth: int,
    workers: Optional[int] = 1,
) -> bytes:
    """Render the whole image, top row first, as packed 8-bit RGB."""
    _check_size(width, height, samples)
    job = partial(
        render_row, camera, materials, world, width, height,
        samples=samples, depth=depth,
    )
    rows = range(height)
    count = workers if workers is not None else (os.cpu_count() or 1)
    if count <= 1:
        return b"".join(map(job, rows))
    with ProcessPoolExecutor(max_workers=count, initializer=random.seed) as pool:
        return b"".join(pool.map(job, rows))


def write_ppm(
    out: TextIO,
    camera: Camera,
    materials: MaterialList,
    world: World,
    width: int,
    height: int,
    samples: int,
    depth: int,
) -> None:
    """Render the image as plain PPM text, reporting progress on stderr."""
    _check_size(width, height, samples)
    out.write(f"P3\n{width} {height}\n255\n")
    for j in range(height - 1, -1, -1):
        sys.stderr.write(f"\rScanlines remaining: {j} ")
        sys.stderr.flush()
        for i in range(width):
            pixel = _BLACK
            for _ in range(samples):
                u = (i + randd01()) / (width - 1)
                v = (j + randd01()) / (height - 1)
                pixel = pixel + ray_color(
                    camera.get_ray(u, v), materials, world, depth
                )
            out.write(format_color(pixel, samples))
    sys.stderr.write("\n")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raytracer", description="Render the random sphere scene."
    )
    parser.add_argument("--width", type=int, default=1200, help="image width")
    parser.add_argument("--samples", type=int, default=500, help="samples per pixel")
    parser.add_argument("--depth", type=int, default=50, help="maximum bounces")
    parser.add_argument("--workers", type=int, default=None,
                        help="worker processes (default: CPU count)")
    parser.add_argument("--output", default="out.png", help="PNG file to write")
    parser.add_argument("--ppm", action="store_true",
                        help="write plain PPM to stdout instead of a PNG")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    args = _parser().parse_args(argv)
    random.seed(args.seed)

    aspect_ratio = 3.0 / 2.0
    width = args.width
    height = int(width / aspect_ratio)

    world, materials = random_scene()
    camera = Camera(
        Vec3(13.0, 2.0, 3.0),
        Vec3(0.0, 0.0, 0.0),
        Vec3(0.0, 1.0, 0.0),
        20,
        aspect_ratio,
        0.1,
        10.0,
    )

    try:
        if args.ppm:
            write_ppm(sys.stdout, camera, materials, world,
                      width, height, args.samples, args.depth)
            return 0
        workers = args.workers if args.workers is not None else (os.cpu_count() or 1)
        print(f"{width}x{height}")
        print(f"Rendering with {workers} workers")
        data = render(camera, materials, world, width, height,
                      args.samples, args.depth, workers)
    except ValueError as exc:
        print(f"raytracer: {exc}", file=sys.stderr)
        return 2
    save_png(args.output, width, height, data)
    return 0


if __name__ == "__main__":
    sys.exit(main())