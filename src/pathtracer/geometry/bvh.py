# geometry/bvh.py
import logging
from typing import List, Optional, Sequence
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class BVHNode:
    """
    One internal node of the hierarchy. Each child is either another node
    (index into BVH.nodes) or a leaf (index into BVH.primitives).
    """
    __slots__ = ("box", "left", "right", "left_is_leaf", "right_is_leaf")

    def __init__(self, box: AABB, left: int, right: int, left_is_leaf: bool, right_is_leaf: bool):
        self.box = box
        self.left = left
        self.right = right
        self.left_is_leaf = left_is_leaf
        self.right_is_leaf = right_is_leaf


class BVH(Hittable):
    """
    Bounding volume hierarchy over a list of primitives.

    Nodes live in a flat list addressed by index, with the root at index 0.
    The split axis is chosen at random for every node and primitives are
    split by count, not by position. The tree is built once and never
    modified afterwards, so it can be shared by concurrent readers.

    Args:
        objects: The primitives to partition. At least two are required.
        time0, time1: Shutter interval used for the primitives' boxes.
        rng: numpy Generator used to pick split axes.
    """
    def __init__(self, objects: Sequence[Hittable], time0: float, time1: float, rng):
        if len(objects) < 2:
            raise ValueError(f"BVH needs at least two primitives, got {len(objects)}")

        self.primitives: List[Hittable] = list(objects)
        self.nodes: List[Optional[BVHNode]] = []
        self._boxes: List[AABB] = []
        for obj in self.primitives:
            box = obj.bounding_box(time0, time1)
            if box is None:
                raise ValueError(f"Primitive {obj!r} has no bounding box")
            self._boxes.append(box)

        self._build(list(range(len(self.primitives))), rng)
        del self._boxes
        logger.debug("Built BVH with %d nodes over %d primitives", len(self.nodes), len(self.primitives))

    def _build(self, indices: List[int], rng) -> int:
        axis = int(rng.integers(0, 3))
        indices.sort(key=lambda i: self._boxes[i].minimum[axis])

        index = len(self.nodes)
        self.nodes.append(None)  # placeholder, filled once children exist

        count = len(indices)
        if count == 1:
            raise ValueError("BVH node cannot hold a single primitive")
        if count == 2:
            left, left_is_leaf = indices[0], True
            right, right_is_leaf = indices[1], True
            left_box = self._boxes[left]
            right_box = self._boxes[right]
        elif count == 3:
            left, left_is_leaf = indices[2], True
            right, right_is_leaf = self._build(indices[:2], rng), False
            left_box = self._boxes[left]
            right_box = self.nodes[right].box
        else:
            mid = count // 2
            left, left_is_leaf = self._build(indices[:mid], rng), False
            right, right_is_leaf = self._build(indices[mid:], rng), False
            left_box = self.nodes[left].box
            right_box = self.nodes[right].box

        box = AABB.surrounding_option(left_box, right_box)
        self.nodes[index] = BVHNode(box, left, right, left_is_leaf, right_is_leaf)
        return index

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self._hit_node(0, ray, t_min, t_max)

    def _hit_child(self, child: int, is_leaf: bool, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if is_leaf:
            return self.primitives[child].hit(ray, t_min, t_max)
        return self._hit_node(child, ray, t_min, t_max)

    def _hit_node(self, index: int, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        node = self.nodes[index]
        if not node.box.hit(ray, t_min, t_max):
            return None

        hit_left = self._hit_child(node.left, node.left_is_leaf, ray, t_min, t_max)

        # Only a closer hit on the right can matter
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self._hit_child(node.right, node.right_is_leaf, ray, t_min, t_max)

        # Return the closer hit
        if hit_left is not None and hit_right is not None:
            return hit_left if hit_left.t < hit_right.t else hit_right
        return hit_left if hit_left is not None else hit_right

    def bounding_box(self, t0: float = 0.0, t1: float = 0.0) -> AABB:
        return self.nodes[0].box

    def __len__(self) -> int:
        return len(self.nodes)
