# visualization.py
"""
Handles presenting rendered frames using Pygame.

The Display owns the window for the lifetime of the application. It takes
the raw pixel array produced by the star field, wraps it as a surface and
presents it, stretching the frame when the window has been resized.
"""
import logging
import pygame
import numpy as np
from typing import Tuple
from constants import WINDOW_TITLE

# --- Data Contracts ---
#
# class Display:
#   - __init__(self, width: int, height: int, title: str = WINDOW_TITLE):
#     - Inputs: Frame size in pixels and the window caption.
#     - Side Effects: Initializes Pygame and opens a resizable window.
#     - Raises: pygame.error if the window cannot be created.
#
#   - upload(self, pixels: np.ndarray, row_stride: int) -> None:
#     - Inputs:
#       - pixels: Flat uint8 array of width * height * 4 bytes, where
#         bytes 0..2 of each pixel are the color and byte 3 is ignored.
#       - row_stride: Bytes per row of pixels.
#     - Side Effects: Blits the frame onto the window surface.
#
#   - present(self) -> None:
#     - Side Effects: Flips the window to show the last upload.
#
#   - close(self) -> None:
#     - Side Effects: Shuts down Pygame. Safe to call more than once.

class Display:
    """
    The window that rendered frames are presented on.
    """
    def __init__(self, width: int, height: int, title: str = WINDOW_TITLE):
        """
        Initializes Pygame and the display window.
        """
        self.frame_size: Tuple[int, int] = (width, height)
        self.closed = False

        pygame.init()
        try:
            self.screen = pygame.display.set_mode(self.frame_size, pygame.RESIZABLE)
        except pygame.error:
            pygame.quit()
            self.closed = True
            raise
        pygame.display.set_caption(title)

        logging.info(f"Display initialized with Pygame window ({width}x{height}).")

    def __enter__(self) -> "Display":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def upload(self, pixels: np.ndarray, row_stride: int) -> None:
        if row_stride != self.frame_size[0] * 4:
            raise ValueError(f"Expected tightly packed rows, got a stride of {row_stride} bytes.")
        # frombuffer shares memory with `pixels`, so blit before it changes.
        frame = pygame.image.frombuffer(pixels, self.frame_size, "RGBX")
        screen = pygame.display.get_surface()
        if screen.get_size() == self.frame_size:
            screen.blit(frame, (0, 0))
        else:
            screen.blit(pygame.transform.smoothscale(frame, screen.get_size()), (0, 0))

    def present(self) -> None:
        pygame.display.flip()

    def close(self) -> None:
        """Shuts down Pygame."""
        if self.closed:
            return
        self.closed = True
        pygame.quit()
        logging.info("Display closed.")
