# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import CheckerTexture, NoiseTexture

class ColorPresets:
    """Common colors used by the built-in scenes."""

    RED = Vector3(0.65, 0.05, 0.05)
    GREEN = Vector3(0.12, 0.45, 0.15)
    WHITE = Vector3(0.73, 0.73, 0.73)
    GRASS = Vector3(0.48, 0.83, 0.53)
    CHECKER_DARK = Vector3(0.2, 0.3, 0.1)
    CHECKER_LIGHT = Vector3(0.9, 0.9, 0.9)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def brushed() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.9), fuzz=1.0)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

class LightPresets:
    """Predefined light sources."""

    @staticmethod
    def white(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 1.0, 1.0) * intensity)

    @staticmethod
    def warm(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 0.95, 0.9) * intensity)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(even: Vector3 = None, odd: Vector3 = None) -> CheckerTexture:
        """Create a 3D checker texture with default or custom colors."""
        if even is None:
            even = ColorPresets.CHECKER_LIGHT
        if odd is None:
            odd = ColorPresets.CHECKER_DARK
        return CheckerTexture(even, odd)

    @staticmethod
    def marble(scale: float = 4.0) -> NoiseTexture:
        return NoiseTexture(scale)
