# materials/dielectric.py
import math
from typing import Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

WHITE = Color(1.0, 1.0, 1.0)


class Dielectric(Material):
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Color]:
        # Glass doesn't absorb light
        attenuation = WHITE

        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        if ni_over_nt * sin_theta > 1.0:
            # Total internal reflection
            direction = reflect(unit_direction, rec.normal)
        elif rng.random() < schlick(cos_theta, self.ref_idx):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return Ray(rec.p, direction, ray_in.time), attenuation
