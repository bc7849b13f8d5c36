# geometry/box.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.transform import FlipFace
from pathtracer.geometry.world import HittableList

class Box(Hittable):
    """
    Axis-aligned box between two opposite corners, built from six rectangles.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = Vector3(min(p0.x, p1.x), min(p0.y, p1.y), min(p0.z, p1.z))
        self.box_max = Vector3(max(p0.x, p1.x), max(p0.y, p1.y), max(p0.z, p1.z))
        self.material = material
        lo, hi = self.box_min, self.box_max
        self.sides = HittableList([
            XYRect(lo.x, hi.x, lo.y, hi.y, hi.z, material),
            FlipFace(XYRect(lo.x, hi.x, lo.y, hi.y, lo.z, material)),
            XZRect(lo.x, hi.x, lo.z, hi.z, hi.y, material),
            FlipFace(XZRect(lo.x, hi.x, lo.z, hi.z, lo.y, material)),
            YZRect(lo.y, hi.y, lo.z, hi.z, hi.x, material),
            FlipFace(YZRect(lo.y, hi.y, lo.z, hi.z, lo.x, material)),
        ])

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return AABB(self.box_min, self.box_max)
