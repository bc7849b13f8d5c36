# materials/texture_loader.py
import logging
import os
from PIL import Image
import numpy as np
from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def load_image(image_path: str) -> np.ndarray:
    """
    Decode an image file into an (height, width, 3) uint8 array.

    Raises:
        FileNotFoundError: If the image file doesn't exist
        OSError: If Pillow cannot decode the file
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")
    with Image.open(image_path) as img:
        if img.mode != 'RGB':
            img = img.convert('RGB')
        return np.array(img, dtype=np.uint8)

def load_image_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture. A missing or unreadable file gives a
    texture that contributes no color instead of failing the render.
    """
    try:
        data = load_image(image_path)
    except OSError as e:
        logger.warning("Could not load texture %s: %s", image_path, e)
        return ImageTexture(None)
    logger.debug("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return ImageTexture(data)
