# materials/metal.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import reflect, random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, as_texture
from pathtracer.materials.textures import Texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.texture.value(rec.u, rec.v, rec.p)

        return None  # Absorb the ray if it does not scatter forward
