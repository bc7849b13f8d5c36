# core/aabb.py
import math
from pathtracer.core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        for a in range(3):
            if minimum[a] > maximum[a]:
                raise ValueError(
                    f"AABB minimum {minimum} exceeds maximum {maximum} on axis {a}")
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, narrow the [t_min, t_max] interval.
        for a in range(3):
            d = ray.direction[a]
            if d != 0.0:
                invD = 1.0 / d
            else:
                invD = math.copysign(math.inf, d)
            t0 = (self.minimum[a] - ray.origin[a]) * invD
            t1 = (self.maximum[a] - ray.origin[a]) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            # Written so that a NaN interval counts as a miss.
            if not t_max > t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(self.minimum[a] <= other.minimum[a] and
                   self.maximum[a] >= other.maximum[a] for a in range(3))

    def surface_area(self) -> float:
        d = self.maximum - self.minimum
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
