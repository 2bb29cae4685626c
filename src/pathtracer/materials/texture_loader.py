# materials/texture_loader.py
import logging
import os
import numpy as np
from PIL import Image
from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def load_texture(image_path: str) -> ImageTexture:
    """
    Decode an image file into an 8-bit RGB bitmap texture.

    Any mode Pillow can read (grayscale, palette, RGBA, ...) is converted
    to RGB first, so the texture always holds three channels.

    Raises:
        FileNotFoundError: no file at image_path
        ValueError: the file exists but Pillow cannot decode it
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            data = np.array(img.convert("RGB"), dtype=np.uint8)
    except OSError as e:  # includes PIL.UnidentifiedImageError
        raise ValueError(f"Cannot decode texture {image_path}: {e}") from e

    logger.debug("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return ImageTexture(data)
