# materials/isotropic.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

class Isotropic(Material):
    """
    Phase function of a participating medium: scatters in a uniformly
    random direction, independent of the surface normal.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Vector3]]:
        attenuation = self.get_texture_color(rec.uv, rec.p)
        if attenuation is None:
            return None
        return Ray(rec.p, random_in_unit_sphere(), ray_in.time), attenuation
