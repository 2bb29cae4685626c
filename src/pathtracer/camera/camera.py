# camera/camera.py
import math
from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk


class CameraSettings:
    """
    Everything about the camera except the output aspect ratio, which is
    only known at render time.

    Args:
        look_from: Position of the camera.
        look_at: Point the camera is looking at.
        vup: Vertical up of the camera. Use (0, 1, 0) if unsure.
        vfov: Vertical field of view in degrees.
        aperture: Lens diameter. 0 gives a pinhole camera.
        focus_dist: Distance to the plane in perfect focus.
        time0, time1: Shutter open and close times.
    """
    def __init__(self, look_from: Point3, look_at: Point3, vup: Vector3, vfov: float,
                 aperture: float = 0.0, focus_dist: float = 10.0,
                 time0: float = 0.0, time1: float = 0.0):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.time0 = time0
        self.time1 = time1

    def __repr__(self) -> str:
        return (f"CameraSettings(look_from={self.look_from!r}, look_at={self.look_at!r}, "
                f"vfov={self.vfov}, aperture={self.aperture}, focus_dist={self.focus_dist}, "
                f"shutter=[{self.time0}, {self.time1}])")


class Camera:
    def __init__(self, settings: CameraSettings, aspect_ratio: float):
        self.settings = settings
        self.aspect_ratio = aspect_ratio
        self.aperture = settings.aperture
        self.lens_radius = settings.aperture / 2.0
        self.time0 = settings.time0
        self.time1 = settings.time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        s = self.settings
        theta = math.radians(s.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Orthonormal basis, w points backwards
        self.w = (s.look_from - s.look_at).normalize()
        self.u = s.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance so the viewport sits on the focal plane
        self.origin = s.look_from
        self.horizontal = self.u * (s.focus_dist * viewport_width)
        self.vertical = self.v * (s.focus_dist * viewport_height)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * s.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray through viewport coordinates (s, t) with depth of field and motion blur."""
        time = rng.uniform(self.time0, self.time1) if self.time1 > self.time0 else self.time0
        if self.aperture <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         self.origin)
            return Ray(self.origin, direction, time)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)

        return Ray(ray_origin, ray_direction, time)
