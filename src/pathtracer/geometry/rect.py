# geometry/rect.py
"""
Axis-aligned rectangles. Each lies in the plane ``axis = k`` and spans
``[a0, a1] x [b0, b1]`` in the two remaining axes.
"""
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Rectangles are infinitely thin; their boxes are padded along the normal.
THICKNESS = 0.0001


class AxisAlignedRect(Hittable):
    # (plane axis, first in-plane axis, second in-plane axis)
    axes = (2, 0, 1)

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = min(a0, a1)
        self.a1 = max(a0, a1)
        self.b0 = min(b0, b1)
        self.b1 = max(b0, b1)
        self.k = k
        self.material = material

    def _point(self, a: float, b: float, k: float) -> Vector3:
        coords = [0.0, 0.0, 0.0]
        plane, first, second = self.axes
        coords[plane] = k
        coords[first] = a
        coords[second] = b
        return Vector3(*coords)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        plane, first, second = self.axes
        d = ray.direction[plane]
        # Rays parallel to the plane never cross it.
        if d == 0.0:
            return None
        t = (self.k - ray.origin[plane]) / d
        if not t_min < t < t_max:
            return None
        a = ray.origin[first] + t * ray.direction[first]
        b = ray.origin[second] + t * ray.direction[second]
        if not (self.a0 <= a <= self.a1 and self.b0 <= b <= self.b1):
            return None

        rec = HitRecord()
        rec.uv = UV((a - self.a0) / (self.a1 - self.a0) if self.a1 > self.a0 else 0.0,
                    (b - self.b0) / (self.b1 - self.b0) if self.b1 > self.b0 else 0.0)
        rec.t = t
        normal = [0.0, 0.0, 0.0]
        normal[plane] = 1.0
        rec.set_face_normal(ray, Vector3(*normal))
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return AABB(self._point(self.a0, self.b0, self.k - THICKNESS),
                    self._point(self.a1, self.b1, self.k + THICKNESS))


class XYRect(AxisAlignedRect):
    """Rectangle in the plane z = k spanning x0..x1, y0..y1."""
    axes = (2, 0, 1)

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)


class XZRect(AxisAlignedRect):
    """Rectangle in the plane y = k spanning x0..x1, z0..z1."""
    axes = (1, 0, 2)

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)


class YZRect(AxisAlignedRect):
    """Rectangle in the plane x = k spanning y0..y1, z0..z1."""
    axes = (0, 1, 2)

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
