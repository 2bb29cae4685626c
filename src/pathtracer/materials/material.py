# materials/material.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, Color, Point3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.textures import Texture, SolidColor

BLACK = Color(0.0, 0.0, 0.0)


def as_texture(albedo: Union[Color, Texture]) -> Texture:
    """Wrap a plain color in a SolidColor texture."""
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    return albedo


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        """
        Radiance emitted at the hit point. Black for non-emissive materials.
        """
        return BLACK
