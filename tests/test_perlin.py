"""Unit tests for Perlin noise."""

import pytest

from pathtracer.core import utils
from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin


class TestPerlin:
    @pytest.mark.parametrize("point", [(0, 0, 0), (1, 2, 3), (-4, 7, -1), (255, 256, 257)])
    def test_noise_vanishes_on_lattice(self, point):
        assert Perlin(seed=3).noise(Vector3(*point)) == pytest.approx(0.0, abs=1e-12)

    def test_noise_is_deterministic_for_a_seed(self):
        p = Vector3(0.3, 1.7, -2.2)
        assert Perlin(seed=9).noise(p) == Perlin(seed=9).noise(p)
        assert Perlin(seed=9).turb(p) == Perlin(seed=9).turb(p)

    def test_different_seeds_differ(self):
        p = Vector3(0.3, 1.7, -2.2)
        assert Perlin(seed=1).noise(p) != Perlin(seed=2).noise(p)

    def test_noise_is_bounded(self):
        perlin = Perlin(seed=5)
        for _ in range(200):
            assert -1.0 <= perlin.noise(utils.random_vector(-20, 20)) <= 1.0

    def test_turbulence_is_non_negative(self):
        perlin = Perlin(seed=5)
        for _ in range(200):
            assert perlin.turb(utils.random_vector(-20, 20)) >= 0.0

    def test_noise_is_continuous(self):
        perlin = Perlin(seed=5)
        p = Vector3(0.4, 0.6, 0.2)
        q = p + Vector3(1e-6, 0, 0)
        assert abs(perlin.noise(p) - perlin.noise(q)) < 1e-4

    def test_seed_drawn_from_thread_generator(self):
        p = Vector3(0.3, 1.7, -2.2)
        utils.seed(11)
        first = Perlin().noise(p)
        utils.seed(11)
        assert Perlin().noise(p) == first

    def test_tables_are_read_only(self):
        perlin = Perlin(seed=1)
        with pytest.raises(ValueError):
            perlin.perm_x[0] = 0
