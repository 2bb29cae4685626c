# geometry/world.py
from typing import List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import BVH
from pathtracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    A list of Hittable objects. Once the scene is complete, build_bvh()
    compiles the objects into a BVH that hit() uses from then on.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.bvh_root: Optional[BVH] = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None

    def clear(self):
        self.objects.clear()
        self.bvh_root = None

    def build_bvh(self, time0: float, time1: float, rng):
        # A single primitive is faster to test directly.
        if len(self.objects) < 2:
            self.bvh_root = None
            return
        self.bvh_root = BVH(self.objects, time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        if self.bvh_root is not None:
            return self.bvh_root.bounding_box(t0, t1)
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(t0, t1)
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box

    def __len__(self) -> int:
        return len(self.objects)
