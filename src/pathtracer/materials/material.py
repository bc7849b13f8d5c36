# materials/material.py
from typing import Optional, Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.textures import Texture

BLACK = Vector3(0.0, 0.0, 0.0)

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are shared between hits and threads and are never mutated
    while rendering.
    """
    def __init__(self):
        self.texture: Optional[Texture] = None

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, uv: UV, p: Vector3) -> Vector3:
        """
        Light emitted at the hit point. Only emitters override this.
        """
        return BLACK

    def get_texture_color(self, uv: UV, point: Vector3) -> Optional[Vector3]:
        """
        Get the color from the texture at the given UV coordinates and point.
        If no texture is set, or the texture has no color there, returns None.
        """
        if self.texture is None:
            return None
        return self.texture.value(uv, point)
