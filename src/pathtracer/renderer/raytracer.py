# renderer/raytracer.py
import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional
import numpy as np
from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.integrator import render_pixel
from pathtracer.renderer.tone_mapping import to_bytes

logger = logging.getLogger(__name__)

MAX_BOUNCES = 50

class Renderer:
    """
    Renders a scene on a fixed pool of worker threads.

    Each task renders one scanline into its own row of the output buffer, so
    the buffer needs no locking. The scene and camera are only read.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 16,
                 max_depth: int = MAX_BOUNCES, workers: Optional[int] = None,
                 seed: Optional[int] = None, progress_every: int = 16):
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be at least 1x1, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth cannot be negative, got {max_depth}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers or os.cpu_count() or 1
        self.seed = seed
        self.progress_every = max(1, progress_every)

    def render_row(self, camera: Camera, world: Hittable,
                   background: Optional[Vector3], row: int) -> np.ndarray:
        """
        Render one scanline. ``row`` counts from the bottom of the image.
        """
        line = np.zeros((self.width, 3), dtype=np.uint8)
        for col in range(self.width):
            color = render_pixel(camera, world, background, self.max_depth,
                                 self.samples_per_pixel, (row, col),
                                 (self.width, self.height), self.seed)
            line[col] = to_bytes(color)
        return line

    def render(self, camera: Camera, world: Hittable,
               background: Optional[Vector3] = None) -> np.ndarray:
        """
        Render the full image and return it as a (height, width, 3) uint8
        array with row 0 at the top. Waits for every task before returning;
        an exception raised by any task is re-raised here.
        """
        image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        start = time.perf_counter()
        logger.info("Rendering %dx%d, %d samples/pixel, depth %d on %d workers",
                    self.width, self.height, self.samples_per_pixel,
                    self.max_depth, self.workers)

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = {
                row: executor.submit(self.render_row, camera, world, background, row)
                for row in range(self.height)
            }
            for done, (row, future) in enumerate(futures.items(), start=1):
                image[self.height - 1 - row] = future.result()
                if done % self.progress_every == 0 or done == self.height:
                    logger.info("Scanlines done: %d/%d", done, self.height)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image
