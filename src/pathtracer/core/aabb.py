# core/aabb.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3


class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, narrow the [t_min, t_max] interval.
        for a in range(3):
            d = ray.direction[a]
            # Python raises on float division by zero; use the IEEE result.
            invD = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            t0 = (self.minimum[a] - ray.origin[a]) * invD
            t1 = (self.maximum[a] - ray.origin[a]) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return False
        return True

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    @staticmethod
    def surrounding_option(box0: Optional["AABB"], box1: Optional["AABB"]) -> "AABB":
        """
        Union of two optional boxes. Raises ValueError when both are missing.
        """
        if box0 is not None and box1 is not None:
            return AABB.surrounding_box(box0, box1)
        if box0 is not None:
            return box0
        if box1 is not None:
            return box1
        raise ValueError("No bounding box on either side")

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
