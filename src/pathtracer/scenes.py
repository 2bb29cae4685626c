# scenes.py
"""
Ready-made worlds and matching camera settings.

Each builder takes a numpy Generator for the random parts of the scene and
returns (world, camera_settings). The world is not BVH-compiled yet.
"""
from typing import Callable, Dict, Optional, Tuple
from pathtracer.camera.camera import CameraSettings
from pathtracer.core.utils import random_color
from pathtracer.core.vector import Vector3, Color, Point3
from pathtracer.geometry.sphere import Sphere, MovingSphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.light import Light
from pathtracer.materials.material import Material
from pathtracer.materials.metal import Metal
from pathtracer.materials.texture_loader import load_texture
from pathtracer.materials.textures import CheckerTexture, SolidColor, StarTexture, Texture

Scene = Tuple[HittableList, CameraSettings]

EARTH_TEXTURE = "textures/earthmap.jpg"


def cover_camera(time0: float = 0.0, time1: float = 0.0) -> CameraSettings:
    return CameraSettings(
        look_from=Point3(13, 2, 3),
        look_at=Point3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        vfov=20.0,
        aperture=0.1,
        focus_dist=10.0,
        time0=time0,
        time1=time1,
    )


def _random_material(rng) -> Material:
    choice = rng.random()
    if choice < 0.5:
        # Diffuse
        return Lambertian(random_color(rng) * random_color(rng))
    if choice < 0.75:
        return Metal(random_color(rng, 0.5, 1.0), rng.uniform(0.0, 0.5))
    return Dielectric(1.5)


def _cover_world(rng, ground: Texture, moving_fraction: float) -> HittableList:
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(ground)))

    # Grid of small random balls
    for a in range(-11, 11):
        for b in range(-11, 11):
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue
            material = _random_material(rng)
            if moving_fraction > 0 and rng.random() < moving_fraction:
                center1 = center + Vector3(0, rng.uniform(0.1, 0.3), 0)
                world.add(MovingSphere(center, center1, 0.0, 1.0, 0.2, material))
            else:
                world.add(Sphere(center, 0.2, material))

    # Three big balls
    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world


def cover_world(rng) -> Scene:
    """Random small balls around three large ones on a grey ground."""
    world = _cover_world(rng, SolidColor(Color(0.5, 0.5, 0.5)), moving_fraction=0.0)
    return world, cover_camera()


def moving_cover_world(rng) -> Scene:
    """The cover world with a quarter of the small balls bouncing during the exposure."""
    world = _cover_world(rng, SolidColor(Color(0.5, 0.5, 0.5)), moving_fraction=0.25)
    return world, cover_camera(0.0, 1.0)


def checkered_cover_world(rng) -> Scene:
    ground = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world = _cover_world(rng, ground, moving_fraction=0.25)
    return world, cover_camera(0.0, 1.0)


def earth_world(rng, texture_path: Optional[str] = None) -> Scene:
    """An image-textured globe on a dark ground, lit by a red light ball."""
    world = HittableList()
    earth = load_texture(texture_path or EARTH_TEXTURE)
    world.add(Sphere(Point3(0, 0, 0), 2.0, Lambertian(earth)))
    world.add(Sphere(Point3(0, -1005, 0), 1000.0, Lambertian(Color(0.1, 0.1, 0.1))))
    world.add(Sphere(Point3(0, 3, 1), 1.0, Light(Color(1, 0, 0), Color(100, 20, 20))))
    settings = CameraSettings(
        look_from=Point3(13, 2, 3),
        look_at=Point3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        vfov=30.0,
        aperture=0.0,
        focus_dist=10.0,
    )
    return world, settings


def star_world(rng) -> Scene:
    """Three large balls resting on a star-speckled ground."""
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(StarTexture())))
    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    settings = CameraSettings(
        look_from=Point3(8, 0.4, 1.3),
        look_at=Point3(-3, 0.4, 0),
        vup=Vector3(0, 1, 0),
        vfov=20.0,
        aperture=0.1,
        focus_dist=8.0,
    )
    return world, settings


SCENES: Dict[str, Callable[..., Scene]] = {
    "cover": cover_world,
    "moving": moving_cover_world,
    "checkered": checkered_cover_world,
    "earth": earth_world,
    "stars": star_world,
}
