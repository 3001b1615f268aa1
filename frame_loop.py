# frame_loop.py
"""
Drives the application one frame at a time.

Each frame polls input, advances the star field, rasterizes it, presents
the buffer and then waits out the rest of the target frame period.
"""
import logging
import pygame
from typing import Callable, Iterable, Optional
from starfield import StarField
from pixel_buffer import PixelBuffer
from constants import LOG_THROTTLE_FRAMES, TARGET_FRAME_MS

# --- Data Contracts ---
#
# class FrameLoop:
#   - __init__(self, field, buffer, display, poll_events=pygame.event.get,
#              clock=None):
#     - Inputs:
#       - display: Any object with upload(pixels, row_stride) and present().
#       - poll_events: Non-blocking callable returning pending events.
#       - clock: Object with tick(framerate) -> elapsed ms. Defaults to
#         pygame.time.Clock.
#
#   - handle_event(self, event) -> bool:
#     - Outputs: False if the event asks the loop to stop.
#     - Side Effects: Up/Down key presses change the field's speed.
#
#   - run(self, max_frames: Optional[int] = None) -> int:
#     - Outputs: Number of frames rendered.
#     - Invariants: The buffer is cleared after every presented frame.

class FrameLoop:
    """
    Sequences input, simulation, rasterization, presentation and pacing.
    """
    def __init__(self, field: StarField, buffer: PixelBuffer, display,
                 poll_events: Callable[[], Iterable[pygame.event.Event]] = pygame.event.get,
                 clock=None):
        self.field = field
        self.buffer = buffer
        self.display = display
        self.poll_events = poll_events
        self.clock = clock if clock is not None else pygame.time.Clock()
        # 1000 / 16ms; tick() sleeps away whatever is left of the period.
        self.framerate = 1000.0 / TARGET_FRAME_MS
        self.elapsed_ms = 0.0
        self.frame_count = 0

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            logging.info("Quit event received. Stopping frame loop.")
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                logging.info("ESC key pressed. Stopping frame loop.")
                return False
            if event.key == pygame.K_UP:
                self.field.increase_speed()
            elif event.key == pygame.K_DOWN:
                self.field.decrease_speed()

        return True

    def process_input(self) -> bool:
        """Drains pending events. Returns False once any of them asks to stop."""
        for event in self.poll_events():
            if not self.handle_event(event):
                return False
        return True

    def render_frame(self) -> None:
        self.field.update(self.elapsed_ms)
        self.field.draw(self.buffer)
        self.display.upload(self.buffer.pixels, self.buffer.row_stride)
        self.display.present()
        self.buffer.clear()

    def run(self, max_frames: Optional[int] = None) -> int:
        logging.info("Frame loop started.")
        self.buffer.clear()

        while max_frames is None or self.frame_count < max_frames:
            if not self.process_input():
                break

            self.render_frame()
            self.frame_count += 1

            # No catch-up: a long frame simply reports a longer elapsed time.
            self.elapsed_ms = self.clock.tick(self.framerate)

            if self.frame_count % LOG_THROTTLE_FRAMES == 0:
                logging.info(f"Rendered frame {self.frame_count}.")
                logging.debug(
                    f"Frame {self.frame_count} | Frame time: {self.elapsed_ms}ms | "
                    f"Speed: {self.field.speed_multiplier:.2f} | "
                    f"Average brightness: {self.field.average_brightness():.1f}"
                )

        logging.info(f"Frame loop finished after {self.frame_count} frames.")
        return self.frame_count
