# renderer/raytracer.py
import logging
import math
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Optional
import numpy as np
from pathtracer.camera.camera import Camera, CameraSettings
from pathtracer.config import MAX_DEPTH, SAMPLES_PER_PIXEL, SKY_HORIZON, SKY_ZENITH, T_MIN
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable

logger = logging.getLogger(__name__)

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)

ProgressCallback = Callable[[int, int], None]


def sky_color(ray: Ray) -> Color:
    """Vertical gradient from the horizon color to the zenith color."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_HORIZON * (1.0 - t) + SKY_ZENITH * t


def ray_color(ray: Ray, world: Hittable, rng, depth: int = 0,
              max_depth: int = MAX_DEPTH, emission: bool = False) -> Color:
    """
    Monte Carlo estimate of the radiance arriving along a ray.

    Each bounce multiplies the running attenuation by the material's
    attenuation. Paths that reach max_depth bounces or get absorbed
    contribute black, paths that escape pick up the sky color.

    With emission=True, the emitted radiance of every surface hit is added
    as well. Off by default: emissive surfaces end paths without lighting
    the scene.
    """
    throughput = WHITE
    radiance = BLACK
    while depth < max_depth:
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            return radiance + throughput * sky_color(ray)

        if emission:
            radiance = radiance + throughput * rec.material.emitted(rec.u, rec.v, rec.p)

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return radiance
        ray, attenuation = scattered
        throughput = throughput * attenuation
        depth += 1
    return radiance


def render_row(world: Hittable, camera: Camera, j: int, width: int, height: int,
               samples_per_pixel: int, max_depth: int, emission: bool, rng) -> np.ndarray:
    """
    Render scanline j (0 is the bottom of the frame).

    Returns a (width, 3) array of averaged linear colors.
    """
    row = np.zeros((width, 3), dtype=np.float64)
    for i in range(width):
        r = g = b = 0.0
        for _ in range(samples_per_pixel):
            u = (i + rng.random()) / (width - 1)
            v = (j + rng.random()) / (height - 1)
            ray = camera.get_ray(u, v, rng)
            color = ray_color(ray, world, rng, 0, max_depth, emission)
            r += color.x
            g += color.y
            b += color.z
        row[i, 0] = r / samples_per_pixel
        row[i, 1] = g / samples_per_pixel
        row[i, 2] = b / samples_per_pixel
    return row


# Per-process state for pool workers, set once by _init_worker.
_worker_state = {}


def _init_worker(world, camera, width, height, samples_per_pixel, max_depth, emission):
    _worker_state.update(world=world, camera=camera, width=width, height=height,
                         samples_per_pixel=samples_per_pixel, max_depth=max_depth,
                         emission=emission)


def _render_row_in_worker(j: int, seed_seq: np.random.SeedSequence):
    s = _worker_state
    rng = np.random.default_rng(seed_seq)
    row = render_row(s["world"], s["camera"], j, s["width"], s["height"],
                     s["samples_per_pixel"], s["max_depth"], s["emission"], rng)
    return j, row


class Renderer:
    """
    Renders a scene into a (height, width, 3) array of linear colors.

    Every scanline draws from its own random stream spawned from one
    SeedSequence, so the result depends only on the seed, not on how rows
    are spread across workers.

    Args:
        width, height: Output size in pixels, both at least 2.
        samples_per_pixel: Camera rays averaged per pixel.
        max_depth: Bounce cap for the radiance estimator.
        workers: Worker processes. 1 renders in the calling process,
            None uses one per CPU.
        emission: Add emitted radiance of light materials.
        seed: Seed for the random streams. None draws fresh entropy.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = SAMPLES_PER_PIXEL,
                 max_depth: int = MAX_DEPTH, workers: Optional[int] = 1,
                 emission: bool = False, seed: Optional[int] = None):
        if width < 2 or height < 2:
            raise ValueError(f"Image must be at least 2x2, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be positive, got {workers}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        self.emission = emission
        self.seed = seed

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def row_seeds(self):
        """One child SeedSequence per scanline, bottom row first."""
        seed_seq = np.random.SeedSequence(self.seed)
        if self.seed is None:
            logger.info("Render seed entropy: %d", seed_seq.entropy)
        return seed_seq.spawn(self.height)

    def render(self, world: Hittable, settings: CameraSettings,
               progress: Optional[ProgressCallback] = None) -> np.ndarray:
        """
        Render the world as seen through a camera built from settings.

        Returns a (height, width, 3) float64 array whose row 0 is the top of
        the frame. progress, if given, is called as progress(rows_done, height)
        after every finished scanline.
        """
        camera = Camera(settings, self.aspect_ratio)
        seeds = self.row_seeds()
        rows = [None] * self.height

        logger.info("Rendering %dx%d, %d samples per pixel, max depth %d, %d worker(s)",
                    self.width, self.height, self.samples_per_pixel, self.max_depth, self.workers)
        start = time.perf_counter()

        if self.workers == 1:
            for j in range(self.height):
                rng = np.random.default_rng(seeds[j])
                rows[j] = render_row(world, camera, j, self.width, self.height,
                                     self.samples_per_pixel, self.max_depth, self.emission, rng)
                if progress is not None:
                    progress(j + 1, self.height)
        else:
            initargs = (world, camera, self.width, self.height,
                        self.samples_per_pixel, self.max_depth, self.emission)
            with ProcessPoolExecutor(max_workers=self.workers, initializer=_init_worker,
                                     initargs=initargs) as executor:
                futures = [executor.submit(_render_row_in_worker, j, seeds[j])
                           for j in range(self.height)]
                for done, future in enumerate(as_completed(futures), start=1):
                    j, row = future.result()
                    rows[j] = row
                    if progress is not None:
                        progress(done, self.height)

        # Rows were produced bottom-up, flip so row 0 is the top of the frame
        image = np.stack(rows[::-1])
        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image


def render(world: Hittable, settings: CameraSettings, width: int, height: int,
           samples_per_pixel: int = SAMPLES_PER_PIXEL, max_depth: int = MAX_DEPTH,
           seed: Optional[int] = None, workers: Optional[int] = 1, emission: bool = False,
           progress: Optional[ProgressCallback] = None) -> np.ndarray:
    """Convenience wrapper around Renderer(...).render(...)."""
    renderer = Renderer(width, height, samples_per_pixel=samples_per_pixel, max_depth=max_depth,
                        workers=workers, emission=emission, seed=seed)
    return renderer.render(world, settings, progress=progress)
