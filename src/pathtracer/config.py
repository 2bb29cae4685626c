# config.py
from pathtracer.core.vector import Color

# Path length cap: rays scattered this many times contribute black.
MAX_DEPTH = 50
SAMPLES_PER_PIXEL = 100

# Ignore hits this close to the ray origin (shadow acne).
T_MIN = 0.001

# Background gradient, blended on the ray's vertical direction.
SKY_HORIZON = Color(1.0, 1.0, 1.0)
SKY_ZENITH = Color(0.5, 0.7, 1.0)

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 225
