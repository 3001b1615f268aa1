# main.py
"""
Main entry point for the starfield simulation.

This script orchestrates the entire application lifecycle:
1. Initializes the logging system.
2. Builds the star field and warms it up.
3. Opens the display and runs the frame loop.
4. Handles clean shutdown.
"""
import logging
import sys
import cProfile
import pstats
import io
import pygame
from utils import setup_logging
from constants import (
    LOGGING, NUM_STARS, SEED, WARM_UP_STEPS, WINDOW_HEIGHT, WINDOW_TITLE,
    WINDOW_WIDTH
)

def main() -> int:
    """
    The main function to run the simulation. Returns the process exit code.
    """
    setup_logging(LOGGING)

    logging.info("--- Starfield Simulation Starting ---")

    from star import RandomSource, StarFactory
    from starfield import StarField
    from pixel_buffer import PixelBuffer
    from visualization import Display
    from frame_loop import FrameLoop

    # --- Component Initialization ---
    rng = RandomSource(SEED)
    factory = StarFactory(rng, WINDOW_WIDTH, WINDOW_HEIGHT)
    field = StarField(factory, NUM_STARS)
    field.warm_up(WARM_UP_STEPS)
    buffer = PixelBuffer(WINDOW_WIDTH, WINDOW_HEIGHT)

    try:
        display = Display(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
    except pygame.error as e:
        logging.critical(f"Could not create the display: {e}")
        return 1

    profiler = cProfile.Profile()

    with display:
        loop = FrameLoop(field, buffer, display)
        profiler.enable()
        loop.run()
        profiler.disable()

    # --- Performance Profile Output ---
    logging.info("--- Performance Profile ---")
    s = io.StringIO()
    # Sort by cumulative time spent in the function
    stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
    stats.print_stats(20)
    logging.info(f"\n{s.getvalue()}")

    logging.info("--- Starfield Simulation Shutting Down ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())
