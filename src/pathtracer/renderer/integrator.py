# renderer/integrator.py
"""
Path integrator: the color carried back along a camera ray, and the
per-pixel task that averages many such rays.
"""
import math
import random
from typing import Optional, Tuple
from pathtracer.camera.camera import Camera
from pathtracer.core.ray import Ray
from pathtracer.core.utils import use_rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.tone_mapping import resolve_color

# Lower bound on hit distance; keeps scattered rays from re-hitting their
# own origin through floating point error.
T_MIN = 0.001

SKY_WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Vector3:
    """
    Vertical white-to-blue gradient used when no background color is given.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, background: Optional[Vector3], world: Hittable,
              depth: int) -> Vector3:
    """
    Color seen along ``ray`` after at most ``depth`` scattering events.

    Equivalent to the recursive definition
        emitted + attenuation * ray_color(scattered, depth - 1)
    but evaluated in a loop, carrying the product of attenuations.
    """
    color = Vector3(0.0, 0.0, 0.0)
    throughput = Vector3(1.0, 1.0, 1.0)

    while depth > 0:
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            miss = sky_color(ray) if background is None else background
            return color + throughput * miss

        material = rec.material
        color = color + throughput * material.emitted(rec.uv, rec.p)
        scatter = material.scatter(ray, rec)
        if scatter is None:
            return color

        ray, attenuation = scatter
        throughput = throughput * attenuation
        depth -= 1

    # Out of bounces: no further light is gathered.
    return color


def pixel_seed(seed: int, row: int, col: int) -> int:
    return (seed * 1_000_003 + row) * 1_000_003 + col


def render_pixel(camera: Camera, world: Hittable, background: Optional[Vector3],
                 max_depth: int, samples_per_pixel: int, pixel: Tuple[int, int],
                 image_size: Tuple[int, int], seed: Optional[int] = None) -> Vector3:
    """
    Average ``samples_per_pixel`` jittered camera rays through one pixel.

    ``pixel`` is (row, col) with row 0 at the bottom of the image and
    ``image_size`` is (width, height). The result is gamma corrected and
    scaled to [0, 256). With a seed the pixel draws from its own generator,
    so its value does not depend on which thread runs it or in what order.
    """
    if samples_per_pixel <= 0:
        raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
    row, col = pixel
    width, height = image_size
    generator = random.Random(pixel_seed(seed, row, col)) if seed is not None else random.Random()

    with use_rng(generator):
        pixel_color = Vector3(0.0, 0.0, 0.0)
        for _ in range(samples_per_pixel):
            u = (col + generator.random()) / max(width - 1, 1)
            v = (row + generator.random()) / max(height - 1, 1)
            ray = camera.get_ray(u, v, generator)
            pixel_color = pixel_color + ray_color(ray, background, world, max_depth)

    return resolve_color(pixel_color, samples_per_pixel)
