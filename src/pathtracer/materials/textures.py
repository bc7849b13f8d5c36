# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def value(self, uv: UV, p: Vector3) -> Optional[Vector3]:
        """
        Color at surface coordinates uv and world point p, or None when the
        texture has nothing to contribute.
        """
        raise NotImplementedError("value() must be implemented by texture subclasses.")

def as_texture(color_or_texture: Union[Vector3, Texture]) -> Texture:
    if isinstance(color_or_texture, Texture):
        return color_or_texture
    return SolidTexture(color_or_texture)

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, uv: UV, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """A 3D checker pattern, alternating between two textures in space."""
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture],
                 scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def value(self, uv: UV, p: Vector3) -> Optional[Vector3]:
        sines = (math.sin(self.scale * p.x) *
                 math.sin(self.scale * p.y) *
                 math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(uv, p)
        return self.even.value(uv, p)

class NoiseTexture(Texture):
    """A marble-like grey pattern driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, perlin: Optional[Perlin] = None):
        self.scale = scale
        self.noise = perlin if perlin is not None else Perlin()

    def value(self, uv: UV, p: Vector3) -> Vector3:
        grey = 0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turb(p, 7)))
        return Vector3(grey, grey, grey)

class ImageTexture(Texture):
    """
    A texture backed by a decoded image, given as an (height, width, 3)
    uint8 array with row 0 at the top. With no image data every lookup
    returns None.
    """
    def __init__(self, data: Optional[np.ndarray]):
        if data is not None:
            data = np.asarray(data)
            if data.ndim != 3 or data.shape[2] < 3 or data.shape[0] == 0 or data.shape[1] == 0:
                raise ValueError(f"Image texture needs an (H, W, 3) array, got shape {data.shape}")
            data = np.ascontiguousarray(data[:, :, :3])
            data.setflags(write=False)
            self.height, self.width = data.shape[0], data.shape[1]
        else:
            self.width = self.height = 0
        self.data = data

    @property
    def available(self) -> bool:
        return self.data is not None

    def value(self, uv: UV, p: Vector3) -> Optional[Vector3]:
        if self.data is None:
            return None

        uv = uv.clamped()
        u = uv.u
        v = 1.0 - uv.v  # Flip V, image rows run top to bottom

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        scale = 1.0 / 255.0
        return Vector3(float(color[0]) * scale, float(color[1]) * scale, float(color[2]) * scale)
