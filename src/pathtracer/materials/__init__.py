from pathtracer.materials.material import Material
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.light import Light
from pathtracer.materials.textures import (
    Texture,
    SolidColor,
    CheckerTexture,
    ImageTexture,
    StarTexture,
)

__all__ = [
    "Material",
    "Lambertian",
    "Metal",
    "Dielectric",
    "Light",
    "Texture",
    "SolidColor",
    "CheckerTexture",
    "ImageTexture",
    "StarTexture",
]
