"""Pytest configuration for path tracer tests.

Shared fixtures: seeded random generators and small scene building blocks.
"""

import numpy as np
import pytest

from pathtracer.camera.camera import CameraSettings
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian


class FixedRNG:
    """Stand-in generator that returns the same draws every time.

    Lets tests force one branch of a stochastic decision.
    """

    def __init__(self, value=0.5, low_bias=0.0):
        self.value = value
        self.low_bias = low_bias

    def random(self):
        return self.value

    def uniform(self, low=0.0, high=1.0):
        return low + (high - low) * self.low_bias

    def integers(self, low, high=None):
        return low


@pytest.fixture
def rng():
    """Seeded numpy Generator, fresh for each test."""
    return np.random.default_rng(1234)


@pytest.fixture
def fixed_rng():
    """Factory for FixedRNG instances."""
    return FixedRNG


@pytest.fixture
def single_sphere_world():
    """One grey Lambertian sphere at the origin, no BVH."""
    world = HittableList()
    world.add(Sphere(Point3(0, 0, 0), 1.0, Lambertian(Color(0.5, 0.5, 0.5))))
    return world


@pytest.fixture
def front_camera():
    """Pinhole camera on +Z looking at the origin."""
    return CameraSettings(
        look_from=Point3(0, 0, 5),
        look_at=Point3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        vfov=40.0,
        aperture=0.0,
        focus_dist=5.0,
    )
