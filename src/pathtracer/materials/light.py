# materials/light.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Point3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, as_texture
from pathtracer.materials.textures import Texture


class Light(Material):
    """
    Emissive material. Paths end when they hit a light.

    emit is the constant radiance returned by emitted(). The albedo texture
    is stored alongside it but never sampled, since lights do not scatter.
    """
    def __init__(self, albedo: Union[Color, Texture], emit: Color):
        self.texture = as_texture(albedo)
        self.emit = emit

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        return self.emit
