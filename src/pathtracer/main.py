# main.py
"""Render one of the built-in scenes to an image file.

Usage:
    pathtracer --scene cornell_box --width 200 --quality balanced --output cornell.png
    python -m pathtracer.main --scene random_spheres --samples 10 --seed 7
"""
import argparse
import logging
import sys
import time
from typing import List, Optional
from pathtracer.core import utils
from pathtracer.renderer.output import save_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, build_scene

QUALITY_PRESETS = {
    "preview": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 50, "bounces": 25},
    "high_quality": {"samples": 500, "bounces": 50},
}

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Monte Carlo path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random_spheres",
                        help="Scene to render (default: random_spheres)")
    parser.add_argument("--width", type=int, default=400,
                        help="Image width in pixels (default: 400)")
    parser.add_argument("--quality", choices=sorted(QUALITY_PRESETS), default="preview",
                        help="Samples/bounces preset (default: preview)")
    parser.add_argument("--samples", type=int, default=None,
                        help="Samples per pixel, overrides the preset")
    parser.add_argument("--depth", type=int, default=None,
                        help="Maximum bounces per path, overrides the preset")
    parser.add_argument("--workers", type=int, default=None,
                        help="Worker threads (default: CPU count)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for a reproducible scene and render")
    parser.add_argument("--texture", type=str, default=None,
                        help="Image file for textured scenes (earth, final_scene)")
    parser.add_argument("--output", type=str, default="image.png",
                        help="Output file; .ppm is written as plain text (default: image.png)")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    quality = QUALITY_PRESETS[args.quality]
    samples = args.samples if args.samples is not None else quality["samples"]
    depth = args.depth if args.depth is not None else quality["bounces"]

    start = time.perf_counter()
    if args.seed is not None:
        utils.seed(args.seed)
    try:
        scene = build_scene(args.scene, args.texture)
        height = max(1, int(args.width / scene.aspect_ratio))
        camera = scene.camera(args.width / height)
        renderer = Renderer(args.width, height, samples_per_pixel=samples,
                            max_depth=depth, workers=args.workers, seed=args.seed)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    image = renderer.render(camera, scene.world, scene.background)
    path = save_image(image, args.output)

    elapsed = time.perf_counter() - start
    print(f"Rendered {args.scene} ({args.width}x{height}, {samples} spp) to {path} in {elapsed:.1f}s")
    if elapsed > 0:
        print(f"{args.width * height / elapsed:.1f} pixels/s")
    return 0

if __name__ == "__main__":
    sys.exit(main())
