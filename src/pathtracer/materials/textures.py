# materials/textures.py
import math
import numpy as np
from pathtracer.core.vector import Vector3, Color, Point3


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Point3) -> Color:
        """Color of the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.color


class CheckerTexture(Texture):
    """A 3D checker pattern, alternating on the sign of sin(scale * x) sin(scale * y) sin(scale * z)."""
    def __init__(self, odd: Color, even: Color, scale: float = 10.0):
        self.odd = odd
        self.even = even
        self.scale = scale

    def value(self, u: float, v: float, p: Point3) -> Color:
        sines = math.sin(self.scale * p.x) * math.sin(self.scale * p.y) * math.sin(self.scale * p.z)
        return self.odd if sines < 0 else self.even


class ImageTexture(Texture):
    """
    A texture backed by a decoded RGB bitmap, sampled nearest-neighbor.

    Args:
        data: (height, width, 3) uint8 array, first row at the top of the image.
    """
    def __init__(self, data: np.ndarray):
        data = np.asarray(data)
        if data.ndim != 3 or data.shape[2] < 3:
            raise ValueError(f"Expected an (height, width, 3) image, got shape {data.shape}")
        self.data = data[:, :, :3]
        self.height, self.width = self.data.shape[:2]

    def value(self, u: float, v: float, p: Point3) -> Color:
        # Clamp input coords, image rows run top-down
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        pixel = self.data[y, x]
        return Color(int(pixel[0]) / 256.0, int(pixel[1]) / 256.0, int(pixel[2]) / 256.0)


def _fract(x: float) -> float:
    # Keeps the sign of x, like x - trunc(x).
    return math.modf(x)[0]


def hash12(a: float, b: float) -> float:
    """Cheap 2D -> 1D hash in [0, 1) for non-negative inputs."""
    p3 = Vector3(_fract(a * 0.1031), _fract(b * 0.1031), _fract(a * 0.1031))
    to_add = p3.dot(Vector3(p3.y + 33.33, p3.z + 33.33, p3.x + 33.33))
    p3 = Vector3(p3.x + to_add, p3.y + to_add, p3.z + to_add)
    return _fract((p3.x + p3.y) * p3.z)


class StarTexture(Texture):
    """Procedural star field: white where the (u, v) hash exceeds the threshold, black elsewhere."""
    def __init__(self, threshold: float = 0.8):
        self.threshold = threshold

    def value(self, u: float, v: float, p: Point3) -> Color:
        if hash12(u, v) > self.threshold:
            return Color(1.0, 1.0, 1.0)
        return Color(0.0, 0.0, 0.0)
