from pathtracer.core.vector import Vector3, Point3, Color
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB

__all__ = ["Vector3", "Point3", "Color", "Ray", "AABB"]
