# scenes.py
"""
Built-in scenes. Each builder returns a Scene: the world to render plus the
camera placement and background that suit it.
"""
import logging
from typing import Callable, Dict, Optional
from pathtracer.camera.camera import Camera
from pathtracer.core.utils import random_double, random_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import build_bvh
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.transform import RotateY, Translate
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import (
    ColorPresets, DielectricPresets, LightPresets, MetalPresets, TexturePresets,
)
from pathtracer.materials.texture_loader import load_image_texture
from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)

BLACK = Vector3(0.0, 0.0, 0.0)
UP = Vector3(0.0, 1.0, 0.0)


class Scene:
    """
    A world plus the viewpoint it is meant to be seen from.
    A background of None means the sky gradient.
    """
    def __init__(self, world: Hittable, look_from: Vector3, look_at: Vector3,
                 vfov: float = 40.0, aperture: float = 0.0, focus_dist: float = 10.0,
                 background: Optional[Vector3] = None, aspect_ratio: float = 16.0 / 9.0,
                 time0: float = 0.0, time1: float = 1.0):
        self.world = world
        self.look_from = look_from
        self.look_at = look_at
        self.vfov = vfov
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.background = background
        self.aspect_ratio = aspect_ratio
        self.time0 = time0
        self.time1 = time1

    def camera(self, aspect_ratio: Optional[float] = None) -> Camera:
        return Camera(self.look_from, self.look_at, UP, self.vfov,
                      aspect_ratio or self.aspect_ratio, self.aperture,
                      self.focus_dist, self.time0, self.time1)


def random_spheres(grid: int = 11) -> Scene:
    """Many small random spheres around three large ones, on a checker ground."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-grid, grid):
        for b in range(-grid, grid):
            choose_mat = random_double()
            center = Vector3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = random_vector() * random_vector()
                center2 = center + Vector3(0, random_double(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = random_vector(0.5, 1)
                fuzz = random_double(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

    return Scene(build_bvh(world.objects, 0.0, 1.0), Vector3(13, 2, 3), Vector3(0, 0, 0),
                 vfov=20.0, aperture=0.1, focus_dist=10.0)


def two_spheres() -> Scene:
    checker = Lambertian(TexturePresets.checkerboard())
    world = HittableList([
        Sphere(Vector3(0, -10, 0), 10, checker),
        Sphere(Vector3(0, 10, 0), 10, checker),
    ])
    return Scene(world, Vector3(13, 2, 3), Vector3(0, 0, 0), vfov=20.0)


def two_perlin_spheres() -> Scene:
    marble = Lambertian(TexturePresets.marble(4.0))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
    ])
    return Scene(world, Vector3(13, 2, 3), Vector3(0, 0, 0), vfov=20.0)


def earth(texture_path: Optional[str] = None) -> Scene:
    texture = load_image_texture(texture_path) if texture_path else ImageTexture(None)
    if not texture.available:
        logger.warning("Earth texture unavailable, the globe will render black")
    world = HittableList([Sphere(Vector3(0, 0, 0), 2, Lambertian(texture))])
    return Scene(world, Vector3(13, 2, 3), Vector3(0, 0, 0), vfov=20.0)


def simple_light() -> Scene:
    marble = Lambertian(TexturePresets.marble(4.0))
    light = LightPresets.white(4.0)
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
        XYRect(3, 5, 1, 3, -2, light),
    ])
    return Scene(world, Vector3(26, 3, 6), Vector3(0, 2, 0), vfov=20.0, background=BLACK)


def _cornell_walls(light_strength: float, light_rect) -> HittableList:
    red = ColorPresets.matte(ColorPresets.RED)
    white = ColorPresets.matte(ColorPresets.WHITE)
    green = ColorPresets.matte(ColorPresets.GREEN)
    light = LightPresets.white(light_strength)
    x0, x1, z0, z1, y = light_rect
    return HittableList([
        YZRect(0, 555, 0, 555, 555, green),
        YZRect(0, 555, 0, 555, 0, red),
        XZRect(x0, x1, z0, z1, y, light),
        XZRect(0, 555, 0, 555, 0, white),
        XZRect(0, 555, 0, 555, 555, white),
        XYRect(0, 555, 0, 555, 555, white),
    ])


def _cornell_blocks():
    white = ColorPresets.matte(ColorPresets.WHITE)
    tall = Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(165, 330, 165), white), 15),
                     Vector3(265, 0, 295))
    short = Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(165, 165, 165), white), -18),
                      Vector3(130, 0, 65))
    return tall, short


def cornell_box() -> Scene:
    world = _cornell_walls(15.0, (213, 343, 227, 332, 554))
    for block in _cornell_blocks():
        world.add(block)
    return Scene(world, Vector3(278, 278, -800), Vector3(278, 278, 0),
                 background=BLACK, aspect_ratio=1.0)


def cornell_smoke() -> Scene:
    world = _cornell_walls(7.0, (113, 443, 127, 432, 554))
    tall, short = _cornell_blocks()
    world.add(ConstantMedium(tall, 0.01, Vector3(0, 0, 0)))
    world.add(ConstantMedium(short, 0.01, Vector3(1, 1, 1)))
    return Scene(world, Vector3(278, 278, -800), Vector3(278, 278, 0),
                 background=BLACK, aspect_ratio=1.0)


def final_scene(texture_path: Optional[str] = None, boxes_per_side: int = 20,
                sphere_count: int = 1000) -> Scene:
    """Every primitive, material and texture in one scene."""
    ground = ColorPresets.matte(ColorPresets.GRASS)
    boxes = []
    w = 100.0
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = random_double(1, 101)
            boxes.append(Box(Vector3(x0, 0.0, z0), Vector3(x0 + w, y1, z0 + w), ground))

    objects = HittableList()
    objects.add(build_bvh(boxes, 0.0, 1.0))
    objects.add(XZRect(123, 423, 147, 412, 554, DiffuseLight(Vector3(7, 7, 7))))

    center1 = Vector3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    objects.add(MovingSphere(center1, center2, 0.0, 1.0, 50, Lambertian(Vector3(0.7, 0.3, 0.1))))
    objects.add(Sphere(Vector3(260, 150, 45), 50, Dielectric(1.5)))
    objects.add(Sphere(Vector3(0, 150, 145), 50, MetalPresets.brushed()))

    boundary = Sphere(Vector3(360, 150, 145), 70, Dielectric(1.5))
    objects.add(boundary)
    objects.add(ConstantMedium(boundary, 0.2, Vector3(0.2, 0.4, 0.9)))
    mist = Sphere(Vector3(0, 0, 0), 5000, Dielectric(1.5))
    objects.add(ConstantMedium(mist, 0.0001, Vector3(1, 1, 1)))

    texture = load_image_texture(texture_path) if texture_path else ImageTexture(None)
    objects.add(Sphere(Vector3(400, 200, 400), 100, Lambertian(texture)))
    objects.add(Sphere(Vector3(220, 280, 300), 80, Lambertian(TexturePresets.marble(0.1))))

    white = ColorPresets.matte(ColorPresets.WHITE)
    cluster = [Sphere(random_vector(0, 165), 10, white) for _ in range(sphere_count)]
    objects.add(Translate(RotateY(build_bvh(cluster, 0.0, 1.0), 15), Vector3(-100, 270, 395)))

    return Scene(objects, Vector3(478, 278, -600), Vector3(278, 278, 0),
                 background=BLACK, aspect_ratio=1.0)


SCENES: Dict[str, Callable[..., Scene]] = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
}

TEXTURED_SCENES = {"earth", "final_scene"}


def build_scene(name: str, texture_path: Optional[str] = None) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; choose from {', '.join(SCENES)}") from None
    if name in TEXTURED_SCENES:
        return builder(texture_path)
    return builder()
