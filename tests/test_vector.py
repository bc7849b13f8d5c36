"""Unit tests for Vector3, Ray and the sampling helpers.

Tests cover:
- Vector arithmetic, dot/cross products and normalization
- Reflection and refraction formulas
- Random samplers staying inside their domains
- Per-thread isolation of the random generator
"""

import math
import random
import threading

import pytest

from conftest import approx_vec, make_ray
from pathtracer.core import utils
from pathtracer.core.vector import Vector3


class TestVectorArithmetic:
    def test_add_sub_neg(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)

    def test_scalar_and_hadamard_product(self):
        a = Vector3(1, 2, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * Vector3(2, 0.5, -1) == Vector3(2, 1, -3)
        assert a / 2 == Vector3(0.5, 1, 1.5)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_length_and_normalize(self):
        v = Vector3(3, 4, 0)
        assert v.length() == 5
        assert v.length_squared() == 25
        assert approx_vec(v.normalize(), (0.6, 0.8, 0.0))

    def test_normalize_zero_vector_stays_zero(self):
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_indexing_and_iteration(self):
        v = Vector3(7, 8, 9)
        assert (v[0], v[1], v[2]) == (7, 8, 9)
        assert list(v) == [7, 8, 9]
        with pytest.raises(IndexError):
            v[3]

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()


class TestRay:
    def test_at(self):
        ray = make_ray((1, 1, 1), (0, 0, -2), time=0.5)
        assert ray.at(2.0) == Vector3(1, 1, -3)
        assert ray.time == 0.5

    def test_default_time_is_zero(self):
        from pathtracer.core.ray import Ray
        assert Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)).time == 0.0


class TestReflectRefract:
    def test_reflect_flips_normal_component(self):
        n = Vector3(0, 1, 0)
        for _ in range(50):
            v = utils.random_vector(-5, 5)
            r = utils.reflect(v, n)
            assert math.isclose(r.dot(n), -v.dot(n), abs_tol=1e-9)

    def test_reflect_random_unit_normals(self):
        for _ in range(50):
            n = utils.random_unit_vector()
            v = utils.random_vector(-3, 3)
            assert math.isclose(utils.reflect(v, n).dot(n), -v.dot(n), abs_tol=1e-9)

    def test_refract_ratio_one_passes_straight_through(self):
        n = Vector3(0, 1, 0)
        v = Vector3(1, -1, 0).normalize()
        assert approx_vec(utils.refract(v, n, 1.0), tuple(v))

    def test_refract_result_is_unit_length(self):
        n = Vector3(0, 1, 0)
        v = Vector3(0.3, -1, 0.2).normalize()
        r = utils.refract(v, n, 1 / 1.5)
        assert math.isclose(r.length(), 1.0, rel_tol=1e-9)
        # Bends toward the normal when entering a denser medium.
        assert abs(r.x) < abs(v.x)

    def test_refract_snells_law(self):
        n = Vector3(0, 1, 0)
        v = Vector3(math.sin(0.5), -math.cos(0.5), 0)
        r = utils.refract(v, n, 1 / 1.5)
        assert math.isclose(r.x, math.sin(0.5) / 1.5, rel_tol=1e-9)


class TestSamplers:
    def test_random_in_unit_sphere(self):
        for _ in range(200):
            assert utils.random_in_unit_sphere().length_squared() < 1.0

    def test_random_unit_vector(self):
        for _ in range(200):
            assert math.isclose(utils.random_unit_vector().length(), 1.0, rel_tol=1e-9)

    def test_random_in_unit_disk(self):
        for _ in range(200):
            p = utils.random_in_unit_disk()
            assert p.z == 0
            assert p.length_squared() < 1.0

    def test_random_vector_range(self):
        for _ in range(200):
            v = utils.random_vector(2, 3)
            assert all(2 <= c <= 3 for c in v)

    def test_clamp_and_degrees(self):
        assert utils.clamp(-1, 0, 1) == 0
        assert utils.clamp(2, 0, 1) == 1
        assert utils.clamp(0.5, 0, 1) == 0.5
        assert math.isclose(utils.degrees_to_radians(180), math.pi)


class TestThreadLocalRandom:
    def test_seed_is_reproducible(self):
        utils.seed(42)
        first = [utils.random_double() for _ in range(5)]
        utils.seed(42)
        assert [utils.random_double() for _ in range(5)] == first

    def test_threads_get_their_own_generator(self):
        main_generator = utils.rng()
        seen = []

        def worker():
            seen.append(utils.rng())

        t = threading.Thread(target=worker)
        t.start()
        t.join()
        assert seen[0] is not main_generator

    def test_use_rng_restores_previous(self):
        before = utils.rng()
        custom = random.Random(5)
        with utils.use_rng(custom):
            assert utils.rng() is custom
        assert utils.rng() is before
