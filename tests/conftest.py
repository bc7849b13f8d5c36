"""Pytest configuration for path tracer tests.

Provides shared fixtures, and reseeds the calling thread's random generator
before every test so sampling-based tests are repeatable.
"""

import pytest

from pathtracer.core import utils
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def seeded_rng():
    """Give every test the same starting random state."""
    utils.seed(1234)
    yield utils.rng()


@pytest.fixture
def white():
    return Lambertian(Vector3(1.0, 1.0, 1.0))


@pytest.fixture
def grey():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


def approx_vec(v: Vector3, expected, tol: float = 1e-6) -> bool:
    """Component-wise comparison of a Vector3 against a 3-sequence."""
    return all(abs(a - b) <= tol for a, b in zip(v, expected))


def make_ray(origin, direction, time: float = 0.0) -> Ray:
    return Ray(Vector3(*origin), Vector3(*direction), time)
