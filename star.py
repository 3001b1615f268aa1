# star.py
"""
Star construction and the random source that drives it.

This module defines the Star record, the RandomSource wrapper around a
single seeded NumPy generator, and the StarFactory that builds freshly
spawned stars near the screen center.
"""
import logging
import math
import numpy as np
from typing import NamedTuple, Optional, Tuple
from constants import MAX_STAR_SPEED, SPEED_FACTOR_RANGE

# --- Data Contracts ---
#
# class RandomSource:
#   - __init__(self, seed: Optional[int] = None):
#     - Inputs: seed, or None to seed from OS entropy.
#     - Side Effects: Creates one generator for the lifetime of the object.
#   - uniform(low, high) -> float in [low, high)
#   - uniform_int(bound) -> int in [0, bound)
#
# class StarFactory:
#   - __init__(self, rng: RandomSource, width: int, height: int)
#   - create_star(self) -> Star:
#     - Outputs: A star with brightness 0, placed at an integer radial
#       offset in [1, round(width / 8)] from the center, moving outward.
#     - Side Effects: Draws angle, speed factor and offset from rng,
#       in that order.


class Star(NamedTuple):
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    brightness: int


def round_half_up(value: float) -> int:
    """Rounds half away from zero for non-negative values (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


class RandomSource:
    """
    Supplies uniform floats and integers from one seeded generator.

    Rule 12: All randomness is controlled by a single master seed, so a
    fixed seed reproduces a whole run.
    """
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def uniform_int(self, bound: int) -> int:
        return int(self.rng.integers(bound))


class StarFactory:
    """
    Builds stars that emanate from the center of the viewport.
    """
    def __init__(self, rng: RandomSource, width: int, height: int):
        """
        Args:
            rng (RandomSource): Generator shared by every spawn.
            width (int): Viewport width. Also sets the spawn disk radius.
            height (int): Viewport height.
        """
        if width <= 0 or height <= 0:
            msg = f"Viewport must have positive dimensions, got {width}x{height}."
            logging.critical(msg)
            raise ValueError(msg)

        self.rng = rng
        self.width = width
        self.height = height
        self.center = (width // 2, height // 2)
        self.max_offset = max(round_half_up(width / 8), 1)

        logging.debug(
            f"StarFactory ready: center {self.center}, "
            f"spawn offset up to {self.max_offset}px."
        )

    def create_star(self) -> Star:
        angle = self.rng.uniform(-math.pi, math.pi)
        # Squaring skews the distribution: most stars start slow, a few fast.
        speed = MAX_STAR_SPEED * self.rng.uniform(*SPEED_FACTOR_RANGE) ** 2

        dx = math.cos(angle)
        dy = math.sin(angle)
        offset = self.rng.uniform_int(self.max_offset) + 1

        cx, cy = self.center
        return Star(
            position=(cx + dx * offset, cy + dy * offset),
            velocity=(dx * speed, dy * speed),
            brightness=0,
        )
