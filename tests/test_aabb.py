"""Unit tests for axis-aligned bounding boxes.

Tests cover:
- Rays through, beside and behind the box
- Ray origin inside the box
- Axis-parallel rays (zero direction components)
- The [t_min, t_max] window
- Box unions
"""

import pytest

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


@pytest.fixture
def unit_box():
    return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))


class TestAABBHit:
    """Slab test behaviour."""

    def test_ray_through_box(self, unit_box):
        ray = Ray(Vector3(-5, 0.2, 0.3), Vector3(1, 0.01, 0.02))
        assert unit_box.hit(ray, 0.0, float("inf"))

    def test_ray_misses_box(self, unit_box):
        ray = Ray(Vector3(-5, 3, 0), Vector3(1, 0.1, 0))
        assert not unit_box.hit(ray, 0.0, float("inf"))

    def test_box_behind_ray(self, unit_box):
        ray = Ray(Vector3(5, 0, 0), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 0.0, float("inf"))

    def test_negative_direction(self, unit_box):
        ray = Ray(Vector3(5, 0.5, -0.5), Vector3(-1, 0, 0))
        assert unit_box.hit(ray, 0.0, float("inf"))

    def test_origin_inside_box(self, unit_box):
        ray = Ray(Vector3(0, 0, 0), Vector3(0.3, -0.7, 0.2))
        assert unit_box.hit(ray, 0.0, float("inf"))

    def test_parallel_ray_inside_slab(self, unit_box):
        """Zero y and z components: only the x slab constrains the ray."""
        ray = Ray(Vector3(-5, 0.5, 0.5), Vector3(1, 0, 0))
        assert unit_box.hit(ray, 0.0, float("inf"))

    def test_parallel_ray_outside_slab(self, unit_box):
        ray = Ray(Vector3(-5, 2, 0), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 0.0, float("inf"))

    def test_parallel_ray_negative_zero(self, unit_box):
        ray = Ray(Vector3(5, -0.0, 0.5), Vector3(-1, -0.0, 0.0))
        assert unit_box.hit(ray, 0.0, float("inf"))

    def test_window_ends_before_box(self, unit_box):
        ray = Ray(Vector3(-5, 0, 0), Vector3(1, 0, 0))
        # Box spans t in [4, 6]
        assert not unit_box.hit(ray, 0.0, 3.5)
        assert unit_box.hit(ray, 0.0, 4.5)

    def test_window_starts_after_box(self, unit_box):
        ray = Ray(Vector3(-5, 0, 0), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 6.5, 10.0)
        assert unit_box.hit(ray, 5.5, 10.0)

    def test_flat_box(self):
        """A zero-thickness box is still hit head-on."""
        box = AABB(Vector3(-1, 0, -1), Vector3(1, 0, 1))
        ray = Ray(Vector3(0, 5, 0), Vector3(0, -1, 0))
        assert box.hit(ray, 0.0, float("inf"))


class TestAABBUnion:
    """surrounding_box and surrounding_option."""

    def test_surrounding_box(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-1, 0.5, 0.5), Vector3(0.5, 2, 0.8))
        u = AABB.surrounding_box(a, b)
        assert u.minimum == Vector3(-1, 0, 0)
        assert u.maximum == Vector3(1, 2, 1)

    def test_surrounding_option(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        assert AABB.surrounding_option(a, None) is a
        assert AABB.surrounding_option(None, a) is a
        with pytest.raises(ValueError):
            AABB.surrounding_option(None, None)
