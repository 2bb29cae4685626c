"""Unit tests for the bounding volume hierarchy.

Tests cover:
- Closest hit matches a brute-force scan for random scenes
- Node boxes are exact unions of their children
- Build contract: at least two bounded primitives
- Tree shape for small inputs
- HittableList switching between linear scan and BVH
"""

import numpy as np
import pytest

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.bvh import BVH
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian

INF = float("inf")


class Unbounded(Hittable):
    """A primitive without a bounding box."""

    def hit(self, ray, t_min, t_max):
        return None

    def bounding_box(self, t0, t1):
        return None


def random_spheres(rng, count):
    material = Lambertian(Color(0.5, 0.5, 0.5))
    spheres = []
    for _ in range(count):
        center = Point3(*rng.uniform(-10, 10, size=3))
        radius = float(rng.uniform(0.1, 1.5))
        if rng.random() < 0.2:
            center1 = center + Vector3(*rng.uniform(-1, 1, size=3))
            spheres.append(MovingSphere(center, center1, 0.0, 1.0, radius, material))
        else:
            spheres.append(Sphere(center, radius, material))
    return spheres


def brute_force_hit(objects, ray, t_min, t_max):
    closest = None
    for obj in objects:
        rec = obj.hit(ray, t_min, t_max)
        if rec is not None and (closest is None or rec.t < closest.t):
            closest = rec
    return closest


def node_child_box(bvh, child, is_leaf):
    if is_leaf:
        return bvh.primitives[child].bounding_box(0.0, 1.0)
    return bvh.nodes[child].box


class TestBVHMatchesBruteForce:
    """Traversal returns the same closest hit as a linear scan."""

    @pytest.mark.parametrize("count", [2, 3, 4, 5, 17, 64, 200])
    def test_random_scenes(self, count):
        rng = np.random.default_rng(count)
        spheres = random_spheres(rng, count)
        bvh = BVH(spheres, 0.0, 1.0, rng)

        hits = 0
        for _ in range(150):
            origin = Point3(*rng.uniform(-15, 15, size=3))
            direction = Vector3(*rng.normal(size=3))
            ray = Ray(origin, direction, time=float(rng.random()))
            expected = brute_force_hit(spheres, ray, 0.001, INF)
            actual = bvh.hit(ray, 0.001, INF)
            if expected is None:
                assert actual is None
            else:
                hits += 1
                assert actual is not None
                assert actual.t == pytest.approx(expected.t)
                assert actual.p.x == pytest.approx(expected.p.x)
                assert actual.p.y == pytest.approx(expected.p.y)
                assert actual.p.z == pytest.approx(expected.p.z)

    def test_axis_parallel_rays(self):
        rng = np.random.default_rng(7)
        spheres = random_spheres(rng, 50)
        bvh = BVH(spheres, 0.0, 1.0, rng)
        for axis in (Vector3(1, 0, 0), Vector3(0, -1, 0), Vector3(0, 0, 1)):
            for _ in range(50):
                origin = Point3(*rng.uniform(-15, 15, size=3))
                ray = Ray(origin, axis, time=0.5)
                expected = brute_force_hit(spheres, ray, 0.001, INF)
                actual = bvh.hit(ray, 0.001, INF)
                assert (expected is None) == (actual is None)
                if expected is not None:
                    assert actual.t == pytest.approx(expected.t)


class TestBVHStructure:
    """Shape and box invariants of the built tree."""

    def test_node_boxes_are_exact_unions(self, rng):
        bvh = BVH(random_spheres(rng, 37), 0.0, 1.0, rng)
        for node in bvh.nodes:
            left = node_child_box(bvh, node.left, node.left_is_leaf)
            right = node_child_box(bvh, node.right, node.right_is_leaf)
            assert node.box == AABB.surrounding_box(left, right)

    def test_every_primitive_is_a_leaf_once(self, rng):
        bvh = BVH(random_spheres(rng, 23), 0.0, 1.0, rng)
        leaves = []
        for node in bvh.nodes:
            if node.left_is_leaf:
                leaves.append(node.left)
            if node.right_is_leaf:
                leaves.append(node.right)
        assert sorted(leaves) == list(range(23))
        # A full binary tree over n leaves has n - 1 internal nodes
        assert len(bvh) == 22

    def test_two_primitives_make_one_leaf_pair(self, rng):
        bvh = BVH(random_spheres(rng, 2), 0.0, 1.0, rng)
        assert len(bvh.nodes) == 1
        root = bvh.nodes[0]
        assert root.left_is_leaf and root.right_is_leaf

    def test_three_primitives_make_leaf_plus_pair(self, rng):
        bvh = BVH(random_spheres(rng, 3), 0.0, 1.0, rng)
        assert len(bvh.nodes) == 2
        root = bvh.nodes[0]
        assert root.left_is_leaf != root.right_is_leaf

    def test_root_box_is_bounding_box(self, rng):
        spheres = random_spheres(rng, 10)
        bvh = BVH(spheres, 0.0, 1.0, rng)
        expected = spheres[0].bounding_box(0.0, 1.0)
        for s in spheres[1:]:
            expected = AABB.surrounding_box(expected, s.bounding_box(0.0, 1.0))
        assert bvh.bounding_box(0.0, 1.0) == expected

    def test_input_list_not_mutated(self, rng):
        spheres = random_spheres(rng, 10)
        original = list(spheres)
        BVH(spheres, 0.0, 1.0, rng)
        assert spheres == original


class TestBVHContract:
    """Invalid inputs are rejected."""

    def test_single_primitive_rejected(self, rng):
        with pytest.raises(ValueError):
            BVH(random_spheres(rng, 1), 0.0, 1.0, rng)

    def test_empty_rejected(self, rng):
        with pytest.raises(ValueError):
            BVH([], 0.0, 1.0, rng)

    def test_unbounded_primitive_rejected(self, rng):
        with pytest.raises(ValueError):
            BVH(random_spheres(rng, 3) + [Unbounded()], 0.0, 1.0, rng)


class TestHittableList:
    """Scene list with and without a compiled BVH."""

    def test_linear_scan_finds_closest(self):
        material = Lambertian(Color(0.5, 0.5, 0.5))
        world = HittableList()
        world.add(Sphere(Point3(0, 0, -10), 1.0, material))
        world.add(Sphere(Point3(0, 0, -5), 1.0, material))
        rec = world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), 0.001, INF)
        assert rec.t == pytest.approx(4.0)

    def test_build_bvh_same_answers(self, rng):
        world = HittableList(random_spheres(rng, 40))
        rays = [Ray(Point3(*rng.uniform(-15, 15, size=3)), Vector3(*rng.normal(size=3)), 0.5)
                for _ in range(100)]
        before = [world.hit(r, 0.001, INF) for r in rays]
        world.build_bvh(0.0, 1.0, rng)
        assert world.bvh_root is not None
        after = [world.hit(r, 0.001, INF) for r in rays]
        for a, b in zip(before, after):
            assert (a is None) == (b is None)
            if a is not None:
                assert a.t == pytest.approx(b.t)

    def test_build_bvh_skips_single_object(self, rng, single_sphere_world):
        single_sphere_world.build_bvh(0.0, 1.0, rng)
        assert single_sphere_world.bvh_root is None
        rec = single_sphere_world.hit(Ray(Point3(0, 0, 5), Vector3(0, 0, -1)), 0.001, INF)
        assert rec.t == pytest.approx(4.0)

    def test_add_invalidates_bvh(self, rng):
        world = HittableList(random_spheres(rng, 5))
        world.build_bvh(0.0, 1.0, rng)
        world.add(Sphere(Point3(0, 0, 0), 1.0, Lambertian(Color(1, 1, 1))))
        assert world.bvh_root is None

    def test_bounding_box(self):
        material = Lambertian(Color(0.5, 0.5, 0.5))
        world = HittableList()
        assert world.bounding_box(0.0, 1.0) is None
        world.add(Sphere(Point3(0, 0, 0), 1.0, material))
        world.add(Sphere(Point3(3, 0, 0), 1.0, material))
        box = world.bounding_box(0.0, 1.0)
        assert box.minimum == Vector3(-1, -1, -1)
        assert box.maximum == Vector3(4, 1, 1)
        world.add(Unbounded())
        assert world.bounding_box(0.0, 1.0) is None
