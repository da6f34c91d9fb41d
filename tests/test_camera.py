import io

import pytest

from raysketch.camera import Camera
from raysketch.hittable import HittableList
from raysketch.material import Lambertian, Material
from raysketch.ray import Ray
from raysketch.sphere import Sphere
from raysketch.vec3 import Point3, Vec3


def test_image_height_is_at_least_one():
    cam = Camera(aspect_ratio=1000.0, image_width=10)
    assert cam.image_height == 1


def test_image_height_follows_aspect_ratio():
    cam = Camera(aspect_ratio=16.0 / 9.0, image_width=400)
    assert cam.image_height == int(400 / (16.0 / 9.0))


def test_get_ray_starts_at_origin_and_hits_focal_plane():
    cam = Camera(image_width=10)
    for _ in range(20):
        r = cam.get_ray(3, 7)
        assert tuple(r.origin) == (0.0, 0.0, 0.0)
        assert r.direction.z == pytest.approx(-1.0)


def test_get_ray_stays_within_pixel():
    cam = Camera(aspect_ratio=2.0, image_width=20)
    width, height = cam.image_width, cam.image_height
    viewport_width = 2.0 * width / height
    du = viewport_width / width
    dv = 2.0 / height
    for _ in range(50):
        d = cam.get_ray(5, 3).direction
        assert -viewport_width / 2 + 5 * du <= d.x <= -viewport_width / 2 + 6 * du
        assert 1.0 - 4 * dv <= d.y <= 1.0 - 3 * dv


def test_ray_color_zero_depth_is_black():
    cam = Camera()
    result = cam.ray_color(Ray(Vec3(), Vec3(0, 1, 0)), 0, HittableList())
    assert tuple(result) == (0.0, 0.0, 0.0)


def test_ray_color_sky_gradient_top_and_bottom():
    cam = Camera()
    up = cam.ray_color(Ray(Vec3(), Vec3(0, 1, 0)), 5, HittableList())
    down = cam.ray_color(Ray(Vec3(), Vec3(0, -1, 0)), 5, HittableList())
    assert tuple(up) == pytest.approx((0.5, 0.7, 1.0))
    assert tuple(down) == pytest.approx((1.0, 1.0, 1.0))


def test_ray_color_absorbing_material_is_black():
    cam = Camera()
    world = HittableList(Sphere(Point3(0, 0, -1), 0.5, Material()))
    result = cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 10, world)
    assert tuple(result) == (0.0, 0.0, 0.0)


def test_ray_color_black_albedo_is_black():
    cam = Camera()
    world = HittableList(Sphere(Point3(0, 0, -1), 0.5, Lambertian(Vec3(0, 0, 0))))
    result = cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 10, world)
    assert tuple(result) == (0.0, 0.0, 0.0)


def test_ray_color_components_bounded_by_albedo():
    cam = Camera()
    world = HittableList(Sphere(Point3(0, 0, -1), 0.5, Lambertian(Vec3(0.5, 0.5, 0.5))))
    for _ in range(10):
        result = cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 10, world)
        assert all(0.0 <= c <= 0.5 for c in result)


def test_render_writes_header_and_one_line_per_pixel():
    cam = Camera(aspect_ratio=2.0, image_width=4, samples_per_pixel=2, max_depth=3)
    out, log = io.StringIO(), io.StringIO()
    cam.render(HittableList(), out=out, log=log)
    lines = out.getvalue().splitlines()
    assert lines[:3] == ["P3", "4 2", "255"]
    pixels = lines[3:]
    assert len(pixels) == cam.image_width * cam.image_height
    for line in pixels:
        values = [int(v) for v in line.split()]
        assert len(values) == 3
        assert all(0 <= v <= 255 for v in values)


def test_render_logs_progress_and_done():
    cam = Camera(aspect_ratio=1.0, image_width=3, samples_per_pixel=1, max_depth=2)
    out, log = io.StringIO(), io.StringIO()
    cam.render(HittableList(), out=out, log=log)
    text = log.getvalue()
    assert "Scanlines remaining: 3 " in text
    assert "Scanlines remaining: 1 " in text
    assert text.rstrip().endswith("Done")