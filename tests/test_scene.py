import pytest

from raysketch.interval import Interval
from raysketch.material import Lambertian, Metal
from raysketch.ray import Ray
from raysketch.rtutil import INFINITY
from raysketch.scene import build_world, main
from raysketch.vec3 import Vec3


def _hit(direction):
    world = build_world()
    return world.hit(Ray(Vec3(), direction), Interval(0.001, INFINITY))


def test_world_has_four_spheres():
    assert len(build_world()) == 4


def test_center_ray_hits_blue_lambertian():
    rec = _hit(Vec3(0, 0, -1))
    assert isinstance(rec.mat, Lambertian)
    assert tuple(rec.mat.albedo) == pytest.approx((0.1, 0.2, 0.5))
    assert rec.front_face


def test_downward_ray_hits_ground():
    rec = _hit(Vec3(0, -1, 0))
    assert isinstance(rec.mat, Lambertian)
    assert tuple(rec.mat.albedo) == pytest.approx((0.8, 0.8, 0.0))


def test_left_and_right_spheres_are_metal():
    left = _hit(Vec3(-1, 0, -1))
    right = _hit(Vec3(1, 0, -1))
    assert isinstance(left.mat, Metal)
    assert left.mat.fuzz == pytest.approx(0.3)
    assert isinstance(right.mat, Metal)
    assert right.mat.fuzz == pytest.approx(1.0)


def test_upward_ray_misses():
    assert _hit(Vec3(0, 1, 0)) is None


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as exc:
        main(["--bogus"])
    assert exc.value.code == 2