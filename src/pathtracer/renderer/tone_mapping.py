# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit


@njit
def gamma_quantize_kernel(linear_image, output_image):
    """
    Gamma-2 encode and quantize a linear image to 8 bits.

    Each channel is square-rooted, clamped to [0, 1], scaled by 255.999 and
    truncated. NaN channels saturate to 255.
    """
    height, width = linear_image.shape[0], linear_image.shape[1]
    for y in range(height):
        for x in range(width):
            for c in range(3):
                value = linear_image[y, x, c]
                if math.isnan(value):
                    encoded = 1.0
                elif value <= 0.0:
                    encoded = 0.0
                else:
                    encoded = min(math.sqrt(value), 1.0)
                output_image[y, x, c] = int(encoded * 255.999)


def encode_image(linear_image: np.ndarray) -> np.ndarray:
    """
    Convert a (height, width, 3) linear color grid into displayable uint8 RGB.
    """
    linear_image = np.ascontiguousarray(linear_image, dtype=np.float64)
    if linear_image.ndim != 3 or linear_image.shape[2] != 3:
        raise ValueError(f"Expected an (height, width, 3) image, got shape {linear_image.shape}")
    output = np.empty(linear_image.shape, dtype=np.uint8)
    gamma_quantize_kernel(linear_image, output)
    return output
