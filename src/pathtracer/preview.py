# preview.py
import numpy as np
import pygame
from pathtracer.renderer.tone_mapping import encode_image


def show_image(linear_image: np.ndarray, title: str = "Path Tracer"):
    """
    Open a window showing a finished render until it is closed or Escape
    is pressed.
    """
    pixels = encode_image(linear_image)
    height, width = pixels.shape[:2]

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # surfarray is indexed [x, y]
        frame_surface = pygame.surfarray.make_surface(pixels.swapaxes(0, 1))
        screen.blit(frame_surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
