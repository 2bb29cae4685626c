# renderer/image_output.py
import logging
import os
import numpy as np
from PIL import Image
from pathtracer.renderer.tone_mapping import encode_image

logger = logging.getLogger(__name__)


def _ensure_parent(path: str):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def write_png(linear_image: np.ndarray, path: str):
    """Gamma-encode a linear render and save it as PNG."""
    pixels = encode_image(linear_image)
    _ensure_parent(path)
    Image.fromarray(pixels).save(path, format="PNG")
    logger.debug("Wrote %s", path)


def write_ppm(linear_image: np.ndarray, path: str):
    """Gamma-encode a linear render and save it as plain-text PPM (P3)."""
    pixels = encode_image(linear_image)
    height, width = pixels.shape[:2]
    _ensure_parent(path)
    with open(path, "w") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for row in pixels:
            for r, g, b in row:
                f.write(f"{r} {g} {b}\n")
    logger.debug("Wrote %s", path)


def save_image(linear_image: np.ndarray, path: str):
    """Pick the writer from the file extension."""
    if path.lower().endswith(".ppm"):
        write_ppm(linear_image, path)
    else:
        write_png(linear_image, path)
