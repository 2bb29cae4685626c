from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.sphere import Sphere, MovingSphere
from pathtracer.geometry.bvh import BVH, BVHNode
from pathtracer.geometry.world import HittableList

__all__ = [
    "Hittable",
    "HitRecord",
    "Sphere",
    "MovingSphere",
    "BVH",
    "BVHNode",
    "HittableList",
]
