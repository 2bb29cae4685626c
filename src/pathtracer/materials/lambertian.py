# materials/lambertian.py
from typing import Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, as_texture
from pathtracer.materials.textures import Texture


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Color, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Color]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation).
        """
        # Aim at a random point inside the unit sphere sitting on the normal.
        scatter_direction = rec.normal + random_in_unit_sphere(rng)

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return scattered, attenuation
