# materials/perlin.py
"""
Gradient (Perlin) noise over 3D points.

Each Perlin instance owns its own permutation tables and gradient vectors,
built once at construction and only read afterwards. The per-sample work runs
in numba-compiled kernels over those numpy tables.
"""
from typing import Optional
import numpy as np
from numba import njit
from pathtracer.core.utils import rng
from pathtracer.core.vector import Vector3

POINT_COUNT = 256


@njit(cache=True, nogil=True)
def _noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    fx = np.floor(x)
    fy = np.floor(y)
    fz = np.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    # Hermite smoothing removes grid artifacts.
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = perm_x[(i + di) & 255] ^ perm_y[(j + dj) & 255] ^ perm_z[(k + dk) & 255]
                gx = ranvec[idx, 0]
                gy = ranvec[idx, 1]
                gz = ranvec[idx, 2]
                weight = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * weight)
    return accum


@njit(cache=True, nogil=True)
def _turb(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _noise(ranvec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)


class Perlin:
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = rng().getrandbits(63)
        generator = np.random.default_rng(seed)

        ranvec = generator.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        norms = np.linalg.norm(ranvec, axis=1, keepdims=True)
        norms[norms == 0.0] = 1.0
        self.ranvec = np.ascontiguousarray(ranvec / norms)
        self.perm_x = generator.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = generator.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = generator.permutation(POINT_COUNT).astype(np.int64)
        for table in (self.ranvec, self.perm_x, self.perm_y, self.perm_z):
            table.setflags(write=False)

    def noise(self, p: Vector3) -> float:
        return _noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                      float(p.x), float(p.y), float(p.z))

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """
        Sum of octaves at doubling frequency and halving weight.
        """
        return _turb(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                     float(p.x), float(p.y), float(p.z), depth)
