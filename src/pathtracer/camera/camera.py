# camera/camera.py
import math
import random
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians, random_in_unit_disk, rng as thread_rng
from pathtracer.core.vector import Vector3

class Camera:
    """
    Thin-lens camera.

    Rays start on a lens disk of radius aperture / 2 around look_from and
    pass through the focus plane at distance focus_dist, giving depth of
    field. Each ray is stamped with a time drawn from the shutter interval
    [time0, time1] for motion blur.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, time0: float = 0.0, time1: float = 0.0):
        if not 0.0 < vfov < 180.0:
            raise ValueError(f"Vertical field of view must be in (0, 180) degrees, got {vfov}")
        if not aspect_ratio > 0.0:
            raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")
        if not focus_dist > 0.0:
            raise ValueError(f"Focus distance must be positive, got {focus_dist}")
        if aperture < 0.0:
            raise ValueError(f"Aperture cannot be negative, got {aperture}")
        if time1 < time0:
            raise ValueError(f"Shutter closes ({time1}) before it opens ({time0})")

        self.origin = look_from
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1

        theta = degrees_to_radians(vfov)
        viewport_height = 2.0 * math.tan(theta / 2) * focus_dist
        viewport_width = aspect_ratio * viewport_height

        view = look_from - look_at
        if view.near_zero():
            raise ValueError("look_from and look_at must be distinct points")
        self.w = view.normalize()
        side = vup.cross(self.w)
        if side.near_zero():
            raise ValueError("Up vector must not be parallel to the view direction")
        self.u = side.normalize()
        self.v = self.w.cross(self.u)

        self.horizontal = self.u * viewport_width
        self.vertical = self.v * viewport_height
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng: Optional[random.Random] = None) -> Ray:
        """
        Ray through the viewport point at normalized coordinates (s, t),
        where (0, 0) is the lower-left corner and (1, 1) the upper-right.
        """
        if rng is None:
            rng = thread_rng()

        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y
        else:
            offset = Vector3(0.0, 0.0, 0.0)

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        time = self.time0 if self.time1 == self.time0 else rng.uniform(self.time0, self.time1)
        return Ray(ray_origin, ray_direction, time)
