# renderer/output.py
import logging
from pathlib import Path
from typing import TextIO, Union
from PIL import Image
import numpy as np

logger = logging.getLogger(__name__)

def write_ppm(image: np.ndarray, stream: TextIO) -> None:
    """
    Write an (height, width, 3) uint8 image as plain-text PPM (P3),
    top row first.
    """
    height, width = image.shape[0], image.shape[1]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in image:
        for r, g, b in row:
            stream.write(f"{int(r)} {int(g)} {int(b)}\n")

def save_image(image: np.ndarray, path: Union[str, Path]) -> Path:
    """
    Save a rendered image. ``.ppm`` files are written as plain-text P3,
    anything else goes through Pillow and its format is picked from the
    extension.
    """
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        with path.open("w") as stream:
            write_ppm(image, stream)
    else:
        Image.fromarray(np.asarray(image, dtype=np.uint8)).save(path)
    logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], path)
    return path
