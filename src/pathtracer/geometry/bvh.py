# geometry/bvh.py
import logging
from typing import List, Optional, Sequence
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import rng
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class BVHNode(Hittable):
    """
    Bounding volume hierarchy node over a slice of hittables.

    The tree is built once and never mutated afterwards, so it can be read
    by any number of render threads without locking.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 1.0):
        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object")

        axis = rng().randint(0, 2)
        key = lambda obj: _box_of(obj, time0, time1).minimum[axis]

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            if key(objects[start]) <= key(objects[start + 1]):
                self.left, self.right = objects[start], objects[start + 1]
            else:
                self.left, self.right = objects[start + 1], objects[start]
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1)
            self.right = BVHNode(objects, mid, end, time0, time1)

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # Update t_max for right branch if we hit something on the left
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)

        # The right test was narrowed, so any right hit is the closer one.
        if hit_right is not None:
            return hit_right
        return hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.box


def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise ValueError(f"No bounding box for {obj!r}; it cannot be placed in a BVH")
    return box


def build_bvh(hittables: Sequence[Hittable], time0: float = 0.0,
              time1: float = 1.0) -> BVHNode:
    """
    Builds a BVH over the given hittables for the shutter interval
    [time0, time1]. The input sequence is copied, not reordered.
    """
    objects = list(hittables)
    if not objects:
        raise ValueError("Cannot build a BVH from an empty hittable list")
    root = BVHNode(objects, 0, len(objects), time0, time1)
    logger.debug("Built BVH over %d objects, root box %r", len(objects), root.box)
    return root
