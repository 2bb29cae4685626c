from pathtracer.renderer.raytracer import Renderer, render, ray_color, sky_color
from pathtracer.renderer.tone_mapping import encode_image
from pathtracer.renderer.image_output import write_png, write_ppm, save_image

__all__ = [
    "Renderer",
    "render",
    "ray_color",
    "sky_color",
    "encode_image",
    "write_png",
    "write_ppm",
    "save_image",
]
