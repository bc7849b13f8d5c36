# core/utils.py
"""
Random sampling and reflection helpers.

Every sampler draws from a generator that belongs to the calling thread, so
render tasks running on a pool never share random state. A task that wants
reproducible output installs its own seeded generator with ``use_rng``.
"""
import math
import random
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from pathtracer.core.vector import Vector3

_local = threading.local()


def rng() -> random.Random:
    """
    Returns the calling thread's random generator, creating it on first use.
    """
    generator = getattr(_local, "rng", None)
    if generator is None:
        generator = random.Random()
        _local.rng = generator
    return generator


def seed(value: Optional[int]) -> None:
    """
    Reseeds the calling thread's generator.
    """
    rng().seed(value)


@contextmanager
def use_rng(generator: random.Random) -> Iterator[random.Random]:
    """
    Installs ``generator`` as the calling thread's generator for the duration
    of the block, restoring the previous one afterwards.
    """
    previous = getattr(_local, "rng", None)
    _local.rng = generator
    try:
        yield generator
    finally:
        _local.rng = previous


def random_double(lo: float = 0.0, hi: float = 1.0) -> float:
    return lo + (hi - lo) * rng().random()


def random_vector(lo: float = 0.0, hi: float = 1.0) -> Vector3:
    """
    Returns a random vector uniformly distributed in the cube [lo, hi)^3.
    """
    r = rng()
    return Vector3(r.uniform(lo, hi), r.uniform(lo, hi), r.uniform(lo, hi))


def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    r = rng()
    while True:
        p = Vector3(r.uniform(-1, 1),
                    r.uniform(-1, 1),
                    r.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere()
        # Points too close to the center normalize badly.
        if p.length_squared() > 1e-12:
            return p.normalize()


def random_in_unit_disk(generator: Optional[random.Random] = None) -> Vector3:
    """
    Returns a random point inside the unit disk in the z = 0 plane.
    """
    r = generator if generator is not None else rng()
    while True:
        p = Vector3(r.uniform(-1, 1), r.uniform(-1, 1), 0)
        if p.dot(p) < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    # abs() absorbs tiny negative values from rounding.
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x
