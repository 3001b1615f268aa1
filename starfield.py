# starfield.py
"""
Handles the core star simulation and its rasterization.

This module defines the StarField class, which owns a fixed population of
stars in NumPy arrays, advances them one tick at a time and draws them
into a PixelBuffer.
"""
import logging
import math
import numpy as np
from numba import jit
from star import Star, StarFactory
from pixel_buffer import PixelBuffer, _set_pixel_numba
from constants import (
    BRIGHTNESS_STEP, INITIAL_SPEED_MULTIPLIER, MAX_BRIGHTNESS, SPEED_STEP,
    WARM_UP_STEPS
)

# --- Data Contracts ---
#
# class StarField:
#   - __init__(self, factory: StarFactory, count: int,
#              speed_multiplier: float = INITIAL_SPEED_MULTIPLIER):
#     - Inputs:
#       - factory: Builds every initial and respawned star.
#       - count: Number of stars, fixed for the field's lifetime.
#     - Side Effects: Fills the state arrays with `count` factory stars.
#     - Invariants:
#       - self.positions is a NumPy array of shape (N, 2) of dtype float64.
#       - self.velocities is a NumPy array of shape (N, 2) of dtype float64.
#       - self.brightness is a NumPy array of shape (N,) of dtype uint8.
#       - N never changes. Stars are only overwritten in place.
#
#   - update(self, elapsed_ms: float) -> None:
#     - Inputs: elapsed_ms is accepted but does not scale the motion.
#     - Side Effects: Moves every star by velocity * speed_multiplier.
#       Stars leaving [0, width) x [0, height) are respawned in index order;
#       the rest gain BRIGHTNESS_STEP, saturating at MAX_BRIGHTNESS.
#
#   - draw(self, buffer: PixelBuffer) -> None:
#     - Side Effects: Writes each star's brightness at the floor of its
#       position, in index order. Later stars overwrite earlier ones.


@jit(nopython=True)
def _draw_stars_numba(pixels, width, bytes_per_pixel, positions, brightness):
    """
    Numba-jitted rasterization of every star into a flat pixel array.
    """
    for i in range(positions.shape[0]):
        x = int(math.floor(positions[i, 0]))
        y = int(math.floor(positions[i, 1]))
        _set_pixel_numba(pixels, width, bytes_per_pixel, x, y, brightness[i])


class StarField:
    """
    A fixed-size arena of stars flying away from the viewport center.
    """
    def __init__(self, factory: StarFactory, count: int,
                 speed_multiplier: float = INITIAL_SPEED_MULTIPLIER):
        if count < 0:
            msg = f"Star count must be non-negative, got {count}."
            logging.critical(msg)
            raise ValueError(msg)

        self.factory = factory
        self.width = factory.width
        self.height = factory.height
        self.star_count = count
        self.speed_multiplier = speed_multiplier

        self.positions = np.zeros((count, 2), dtype=np.float64)
        self.velocities = np.zeros((count, 2), dtype=np.float64)
        self.brightness = np.zeros(count, dtype=np.uint8)

        for i in range(count):
            self._respawn(i)

        logging.info(
            f"StarField initialized with {count} stars on a "
            f"{self.width}x{self.height} viewport."
        )

    def _respawn(self, index: int) -> None:
        self.place_star(index, self.factory.create_star())

    def star(self, index: int) -> Star:
        """Returns a snapshot of the star stored at `index`."""
        return Star(
            position=(float(self.positions[index, 0]), float(self.positions[index, 1])),
            velocity=(float(self.velocities[index, 0]), float(self.velocities[index, 1])),
            brightness=int(self.brightness[index]),
        )

    def place_star(self, index: int, star: Star) -> None:
        """Overwrites the slot at `index` with `star`."""
        self.positions[index] = star.position
        self.velocities[index] = star.velocity
        self.brightness[index] = star.brightness

    def update(self, elapsed_ms: float = 0.0) -> None:
        """
        Advances every star by one fixed step.

        `elapsed_ms` is part of the frame loop's contract but motion is
        per tick, so simulation speed follows the frame rate.
        """
        self.positions += self.velocities * self.speed_multiplier

        x = self.positions[:, 0]
        y = self.positions[:, 1]
        out_of_bounds = (x < 0) | (x >= self.width) | (y < 0) | (y >= self.height)

        # Brighten on-screen stars, saturating instead of wrapping the uint8.
        dimmed = ~out_of_bounds & (self.brightness < MAX_BRIGHTNESS)
        brightened = self.brightness[dimmed].astype(np.int32) + BRIGHTNESS_STEP
        self.brightness[dimmed] = np.minimum(brightened, MAX_BRIGHTNESS)

        # Respawn in index order so generator draws are reproducible.
        for i in np.flatnonzero(out_of_bounds):
            self._respawn(i)

    def draw(self, buffer: PixelBuffer) -> None:
        _draw_stars_numba(
            buffer.pixels, buffer.width, buffer.bytes_per_pixel,
            self.positions, self.brightness
        )

    def warm_up(self, steps: int = WARM_UP_STEPS) -> None:
        """
        Runs `steps` updates so the first frame already shows moving, lit
        stars spread across the viewport.
        """
        logging.info(f"Warming up star field for {steps} steps...")
        for _ in range(steps):
            self.update(0)
        logging.info(
            f"Warm-up finished. Average brightness: {self.average_brightness():.1f}"
        )

    def increase_speed(self) -> None:
        self.speed_multiplier += SPEED_STEP
        logging.info(f"Speed multiplier increased to {self.speed_multiplier:.2f}.")

    def decrease_speed(self) -> None:
        self.speed_multiplier -= SPEED_STEP
        logging.info(f"Speed multiplier decreased to {self.speed_multiplier:.2f}.")

    def average_brightness(self) -> float:
        if self.star_count == 0:
            return 0.0
        return float(np.mean(self.brightness))
