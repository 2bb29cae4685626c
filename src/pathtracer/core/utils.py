# core/utils.py
import math
from pathtracer.core.vector import Vector3, Color


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    a = rng.random() * 2.0 * math.pi
    z = rng.uniform(-1, 1)
    r = math.sqrt(1.0 - z * z)
    return Vector3(r * math.cos(a), r * math.sin(a), z)


def random_in_unit_disk(rng) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        p = Vector3(
            rng.uniform(-1, 1),
            rng.uniform(-1, 1),
            0
        )
        if p.dot(p) < 1:
            return p


def random_color(rng, low: float = 0.0, high: float = 1.0) -> Color:
    return Color(rng.uniform(low, high), rng.uniform(low, high), rng.uniform(low, high))


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n (Snell's law).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def schlick(cos_theta: float, ref_idx: float) -> float:
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
