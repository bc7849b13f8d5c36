"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside (front face)
- Ray missing sphere
- Ray starting inside sphere (back face)
- Ray tangent to sphere
- Hit points satisfying the sphere equation
- Moving sphere interpolation and bounding boxes
"""

import math

import pytest

from conftest import approx_vec, make_ray
from pathtracer.core import utils
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import MovingSphere, Sphere, sphere_uv


class TestSphereIntersection:
    def test_direct_hit(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        rec = sphere.hit(make_ray((0, 0, 5), (0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 4.0)
        assert approx_vec(rec.p, (0, 0, 1))
        assert approx_vec(rec.normal, (0, 0, 1))
        assert rec.front_face
        assert rec.material is white

    def test_miss(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        assert sphere.hit(make_ray((0, 2, 5), (0, 0, -1)), 0.001, math.inf) is None

    def test_inside_hit_is_back_face(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        rec = sphere.hit(make_ray((0, 0, 0), (0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 1.0)
        assert not rec.front_face
        # Normal flipped to face the ray.
        assert approx_vec(rec.normal, (0, 0, 1))

    def test_tangent_ray_misses(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        assert sphere.hit(make_ray((0, 1, 5), (0, 0, -1)), 0.001, math.inf) is None

    def test_far_root_used_when_near_root_out_of_range(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        rec = sphere.hit(make_ray((0, 0, 5), (0, 0, -1)), 4.5, math.inf)
        assert math.isclose(rec.t, 6.0)

    def test_both_roots_out_of_range(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        assert sphere.hit(make_ray((0, 0, 5), (0, 0, -1)), 0.001, 3.0) is None

    def test_zero_direction_misses(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        assert sphere.hit(make_ray((0, 0, 0.5), (0, 0, 0)), 0.001, math.inf) is None

    def test_hit_points_lie_on_sphere(self, white):
        center = Vector3(1, -2, 3)
        sphere = Sphere(center, 2.5, white)
        hits = 0
        for _ in range(200):
            origin = center + utils.random_unit_vector() * 10
            target = center + utils.random_in_unit_sphere() * 3
            rec = sphere.hit(make_ray(tuple(origin), tuple(target - origin)), 0.001, math.inf)
            if rec is None:
                continue
            hits += 1
            assert math.isclose((rec.p - center).length(), 2.5, rel_tol=1e-9)
            assert math.isclose(rec.normal.length(), 1.0, rel_tol=1e-9)
        assert hits > 0

    def test_rays_passing_outside_never_hit(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        for _ in range(100):
            offset = utils.random_double(1.01, 5)
            ray = make_ray((offset, utils.random_double(-5, 5), 10), (0, 0, -1))
            assert sphere.hit(ray, -math.inf, math.inf) is None

    def test_bounding_box(self, white):
        box = Sphere(Vector3(1, 2, 3), 0.5, white).bounding_box()
        assert approx_vec(box.minimum, (0.5, 1.5, 2.5))
        assert approx_vec(box.maximum, (1.5, 2.5, 3.5))


class TestSphereUV:
    @pytest.mark.parametrize("point, expected", [
        ((1, 0, 0), (0.5, 0.5)),
        ((0, 1, 0), (0.5, 1.0)),
        ((0, -1, 0), (0.5, 0.0)),
        ((0, 0, 1), (0.25, 0.5)),
        ((0, 0, -1), (0.75, 0.5)),
    ])
    def test_sphere_uv(self, point, expected):
        uv = sphere_uv(Vector3(*point))
        assert math.isclose(uv.u, expected[0], abs_tol=1e-9)
        assert math.isclose(uv.v, expected[1], abs_tol=1e-9)

    def test_hit_reports_uv(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        rec = sphere.hit(make_ray((5, 0, 0), (-1, 0, 0)), 0.001, math.inf)
        assert math.isclose(rec.uv.u, 0.5)
        assert math.isclose(rec.uv.v, 0.5)


class TestMovingSphere:
    def test_center_interpolates(self, white):
        sphere = MovingSphere(Vector3(0, 0, 0), Vector3(2, 0, 0), 0.0, 1.0, 0.5, white)
        assert approx_vec(sphere.center(0.0), (0, 0, 0))
        assert approx_vec(sphere.center(0.5), (1, 0, 0))
        assert approx_vec(sphere.center(1.0), (2, 0, 0))

    def test_hit_depends_on_ray_time(self, white):
        sphere = MovingSphere(Vector3(0, 0, 0), Vector3(2, 0, 0), 0.0, 1.0, 0.5, white)
        early = make_ray((2, 0, 5), (0, 0, -1), time=0.0)
        late = make_ray((2, 0, 5), (0, 0, -1), time=1.0)
        assert sphere.hit(early, 0.001, math.inf) is None
        rec = sphere.hit(late, 0.001, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 4.5)

    def test_bounding_box_encloses_whole_path(self, white):
        sphere = MovingSphere(Vector3(0, 0, 0), Vector3(2, 1, 0), 0.0, 1.0, 0.5, white)
        box = sphere.bounding_box(0.0, 1.0)
        for step in range(11):
            c = sphere.center(step / 10)
            for axis in range(3):
                assert box.minimum[axis] <= c[axis] - 0.5 + 1e-12
                assert box.maximum[axis] >= c[axis] + 0.5 - 1e-12

    def test_empty_time_interval_rejected(self, white):
        with pytest.raises(ValueError):
            MovingSphere(Vector3(0, 0, 0), Vector3(1, 0, 0), 1.0, 1.0, 0.5, white)
