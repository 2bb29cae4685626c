"""
CPU Monte Carlo path tracer.

Spheres (static or moving) bound to Lambertian, metal, dielectric or light
materials are rendered through a thin-lens, motion-blurred camera into a
grid of linear colors. Rendering is spread over scanlines with one
independent random stream per line.

Subpackages:
    core: vectors, rays, bounding boxes and sampling helpers
    geometry: spheres, the scene list and the BVH
    materials: materials and textures
    camera: camera settings and ray generation
    renderer: radiance estimator, render driver and image output
"""

__version__ = "0.1.0"
