import io
import random

import pytest

from raytracer.camera import Camera
from raytracer.material import Material, Scatter
from raytracer.material_list import MaterialList
from raytracer.materials import Lambertian
from raytracer.ray import Ray
from raytracer.render import (
    main,
    random_scene,
    ray_color,
    render,
    render_row,
    write_ppm,
)
from raytracer.sphere import Sphere
from raytracer.vec3 import Vec3
from raytracer.world import World


class _Absorb(Material):
    def scatter(self, ray_in, rec):
        return None


class _BounceUp(Material):
    def scatter(self, ray_in, rec):
        return Scatter(Vec3(0.5, 0.5, 0.5), Ray(Vec3(0.0, 100.0, 0.0), Vec3(0.0, 1.0, 0.0)))


def _camera(aspect=2.0):
    return Camera(
        Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0), Vec3(0.0, 1.0, 0.0),
        90, aspect, 0.0, 1.0,
    )


def _blocked_scene(material):
    materials = MaterialList()
    idx = materials.add(material)
    world = World([Sphere(Vec3(0.0, 0.0, -2.0), 0.5, idx)])
    return world, materials


def test_zero_depth_is_black():
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    assert ray_color(ray, MaterialList(), World(), 0) == Vec3(0.0, 0.0, 0.0)


def test_sky_straight_up():
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    assert ray_color(ray, MaterialList(), World(), 5) == Vec3(0.5, 0.7, 1.0)


def test_sky_straight_down_is_white():
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, -3.0, 0.0))
    assert ray_color(ray, MaterialList(), World(), 5) == Vec3(1.0, 1.0, 1.0)


def test_absorbing_material_is_black():
    world, materials = _blocked_scene(_Absorb())
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    assert ray_color(ray, materials, world, 10) == Vec3(0.0, 0.0, 0.0)


def test_attenuation_multiplies_sky():
    world, materials = _blocked_scene(_BounceUp())
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    sky_up = ray_color(Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0)), materials, World(), 1)
    assert ray_color(ray, materials, world, 2) == Vec3(0.5, 0.5, 0.5) * sky_up


def test_depth_exhausted_after_bounce_is_black():
    world, materials = _blocked_scene(_BounceUp())
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    assert ray_color(ray, materials, world, 1) == Vec3(0.0, 0.0, 0.0)


def test_random_scene_structure():
    random.seed(7)
    world, materials = random_scene()
    objects = list(world)
    assert len(world) == len(materials)
    assert 4 <= len(world) <= 4 + 22 * 22
    assert objects[0].radius == 1000.0
    assert [o.center for o in objects[-3:]] == [
        Vec3(0.0, 1.0, 0.0), Vec3(-4.0, 1.0, 0.0), Vec3(4.0, 1.0, 0.0)
    ]
    assert all(o.radius == 1.0 for o in objects[-3:])
    for sphere in objects[1:-3]:
        assert sphere.radius == 0.2
        assert (sphere.center - Vec3(4.0, 0.2, 0.0)).length() > 0.9
    assert sorted(o.material_index for o in objects) == list(range(len(materials)))


def test_random_scene_is_reproducible():
    random.seed(3)
    first, _ = random_scene()
    random.seed(3)
    second, _ = random_scene()
    assert list(first) == list(second)


def test_render_row_length():
    row = render_row(_camera(), MaterialList(), World(), 5, 3, 1, 2, 3)
    assert len(row) == 5 * 3


def test_render_sky_gradient_is_bluish():
    data = render(_camera(), MaterialList(), World(), 6, 3, 2, 3, 1)
    assert len(data) == 6 * 3 * 3
    pixels = [data[i:i + 3] for i in range(0, len(data), 3)]
    assert all(b >= r for r, _, b in pixels)


def test_render_top_row_bluer_than_bottom():
    random.seed(1)
    data = render(_camera(), MaterialList(), World(), 4, 4, 4, 3, 1)
    stride = 4 * 3
    top_red = sum(data[0:stride:3])
    bottom_red = sum(data[3 * stride:4 * stride:3])
    assert top_red < bottom_red


def test_render_matte_ball_darkens_center():
    materials = MaterialList()
    idx = materials.add(Lambertian(Vec3(0.1, 0.1, 0.1)))
    world = World([Sphere(Vec3(0.0, 0.0, -1.0), 0.5, idx)])
    data = render(_camera(aspect=1.0), materials, world, 5, 5, 4, 4, 1)
    centre = data[(2 * 5 + 2) * 3:(2 * 5 + 2) * 3 + 3]
    corner = data[0:3]
    assert sum(centre) < sum(corner)


def test_render_with_processes():
    data = render(_camera(), MaterialList(), World(), 4, 2, 1, 2, 2)
    assert len(data) == 4 * 2 * 3


@pytest.mark.parametrize("width,height,samples", [(1, 4, 1), (4, 1, 1), (4, 4, 0)])
def test_render_rejects_bad_sizes(width, height, samples):
    with pytest.raises(ValueError):
        render(_camera(), MaterialList(), World(), width, height, samples, 2, 1)


def test_write_ppm_layout(capsys):
    out = io.StringIO()
    write_ppm(out, _camera(), MaterialList(), World(), 3, 2, 1, 2)
    lines = out.getvalue().splitlines()
    assert lines[:3] == ["P3", "3 2", "255"]
    assert len(lines) == 3 + 3 * 2
    for line in lines[3:]:
        values = [int(v) for v in line.split()]
        assert len(values) == 3
        assert all(0 <= v <= 255 for v in values)
    assert "Scanlines remaining: 0" in capsys.readouterr().err


def test_main_writes_png(tmp_path, capsys):
    path = tmp_path / "scene.png"
    code = main([
        "--width", "4", "--samples", "1", "--depth", "2",
        "--workers", "1", "--seed", "5", "--output", str(path),
    ])
    assert code == 0
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert "4x2" in capsys.readouterr().out


def test_main_ppm_to_stdout(capsys):
    code = main(["--width", "3", "--samples", "1", "--depth", "1", "--ppm", "--seed", "2"])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["P3", "3 2", "255"]
    assert len(lines) == 3 + 6


def test_main_rejects_tiny_image(tmp_path):
    code = main(["--width", "1", "--output", str(tmp_path / "x.png"), "--workers", "1"])
    assert code == 2
    assert not (tmp_path / "x.png").exists()