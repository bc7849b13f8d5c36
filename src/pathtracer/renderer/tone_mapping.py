# renderer/tone_mapping.py
import math
import numpy as np
from pathtracer.core.utils import clamp
from pathtracer.core.vector import Vector3

GAMMA = 2.0
MAX_INTENSITY = 0.999
COLOR_SCALE = 256.0

def _channel(value: float, scale: float) -> float:
    value *= scale
    # NaN from a degenerate sample contributes nothing.
    if value != value:
        value = 0.0
    value = math.pow(max(value, 0.0), 1.0 / GAMMA)
    return COLOR_SCALE * clamp(value, 0.0, MAX_INTENSITY)

def resolve_color(pixel_color: Vector3, samples_per_pixel: int) -> Vector3:
    """
    Average the accumulated samples, gamma correct, clamp and scale to [0, 256).
    """
    scale = 1.0 / samples_per_pixel
    return Vector3(_channel(pixel_color.x, scale),
                   _channel(pixel_color.y, scale),
                   _channel(pixel_color.z, scale))

def to_bytes(color: Vector3) -> np.ndarray:
    """
    Convert a resolved color into three 8-bit channels.
    """
    return np.array([int(color.x), int(color.y), int(color.z)], dtype=np.uint8)
