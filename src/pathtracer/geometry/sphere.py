# geometry/sphere.py
import math
from typing import Optional, Tuple
from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord


def get_sphere_uv(outward_normal: Vector3) -> Tuple[float, float]:
    """
    Spherical texture coordinates of a point on the unit sphere.

    u runs around the Y axis starting from -X, v runs from the south pole
    (v=0) to the north pole (v=1).
    """
    theta = math.acos(max(-1.0, min(1.0, -outward_normal.y)))
    phi = math.atan2(-outward_normal.z, outward_normal.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi


def _hit_sphere(center: Point3, radius: float, material, ray: Ray,
                t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.length_squared()
    # A zero-length ray or a point-sized sphere has no surface to hit
    if a == 0.0 or radius == 0.0:
        return None
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root strictly inside (t_min, t_max)
    root = (-half_b - sqrt_disc) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrt_disc) / a
        if root <= t_min or root >= t_max:
            return None

    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(rec.t)
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.u, rec.v = get_sphere_uv(outward_normal)
    rec.material = material
    return rec


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Point3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, t0: float = 0.0, t1: float = 0.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"


class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1
    at time1. Rays see the sphere where it is at their own time.
    """
    def __init__(self, center0: Point3, center1: Point3, time0: float, time1: float,
                 radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Point3:
        if self.time1 == self.time0:
            return self.center0
        return self.center0 + (self.center1 - self.center0) * ((time - self.time0) / (self.time1 - self.time0))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center(ray.time), self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, t0: float = 0.0, t1: float = 1.0) -> AABB:
        # Covers the whole exposure window
        offset = Vector3(self.radius, self.radius, self.radius)
        c0 = self.center(t0)
        c1 = self.center(t1)
        box0 = AABB(c0 - offset, c0 + offset)
        box1 = AABB(c1 - offset, c1 + offset)
        return AABB.surrounding_box(box0, box1)

    def __repr__(self) -> str:
        return f"MovingSphere({self.center0!r} -> {self.center1!r}, {self.radius})"
