# constants.py
"""
Application-level constants.

These values are static and do not change between runs. They cover the
viewport, the star population, user-adjustable speed settings, frame
pacing and the logging setup.
"""

# --- Viewport ---
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Starfield Simulation"
# Tightly packed RGBX pixels. Bytes 0..2 hold the color, byte 3 is unused.
BYTES_PER_PIXEL = 4

# --- Star population ---
NUM_STARS = 300
# None seeds the generator from OS entropy. Set an int for reproducible runs.
SEED = None

# --- Motion and brightness ---
INITIAL_SPEED_MULTIPLIER = 0.05
SPEED_STEP = 0.01
BRIGHTNESS_STEP = 5
MAX_BRIGHTNESS = 255
# Initial speed is 255 * t^2 with t drawn from this range.
SPEED_FACTOR_RANGE = (0.3, 1.0)
MAX_STAR_SPEED = 255

# Number of updates run before the first frame, so the field does not start
# with every star black and clustered at the center.
WARM_UP_STEPS = 2000

# --- Frame pacing ---
TARGET_FRAME_MS = 16

# --- Logging ---
# Hot loops must throttle logs.
LOG_THROTTLE_FRAMES = 600
LOGGING = {
    "level": "INFO",
    "format": "%(asctime)s - %(levelname)s - %(message)s",
    "log_file": "logs/starfield.log",
}
