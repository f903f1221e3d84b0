# fixed_step_loop.py

import pygame
import logging
from constants import LOGGER_NAME, LOG_INTERVAL

logger = logging.getLogger(LOGGER_NAME)

class FixedStepLoop:
    """
    Animation runner that advances an effect on a fixed time step.

    Each frame callback adds the time since the previous callback to an
    accumulator. Once the accumulator exceeds time_step, it is reset and the
    effect is updated and drawn exactly once. The next frame is requested
    whether or not a step ran.

    Data Contract:
    - Inputs:
        - effect: Object with update() and draw(screen). If it also has
          get_particle_counts(), the counts are added to the tick summary.
        - screen (pygame.Surface): Surface passed to effect.draw().
        - scheduler: Object with request_frame(callback) and cancel().
        - time_step (float): Threshold in milliseconds.
    - Invariants:
        - At most one update()/draw() pair per callback.
        - No callback is requested after stop().
    """
    def __init__(self, effect, screen: pygame.Surface, scheduler, time_step: float, log_interval: int = LOG_INTERVAL):
        self.effect = effect
        self.screen = screen
        self.scheduler = scheduler
        self.time_step = time_step
        self.log_interval = log_interval

        self.previous_timestamp = 0
        self.time_since_last_step = 0
        self.tick = 0
        self.running = False

    def start(self):
        if self.running:
            logger.warning("FixedStepLoop.start() called while already running. Ignoring.")
            return
        self.running = True
        logger.info(f"Animation loop started with a {self.time_step} ms time step.")
        self.scheduler.request_frame(self.on_frame)

    def stop(self):
        if not self.running:
            return
        self.running = False
        self.scheduler.cancel()
        logger.info(f"Animation loop stopped after {self.tick} ticks.")

    def on_frame(self, timestamp: float):
        """Frame callback. timestamp is in milliseconds."""
        if not self.running:
            return

        time_delta = timestamp - self.previous_timestamp
        self.previous_timestamp = timestamp
        self.time_since_last_step += time_delta

        if self.time_since_last_step > self.time_step:
            self.time_since_last_step = 0
            self.effect.update()
            self.effect.draw(self.screen)
            self.tick += 1

            if self.tick % self.log_interval == 0 and logger.isEnabledFor(logging.DEBUG):
                self._log_tick_summary(timestamp)

        self.scheduler.request_frame(self.on_frame)

    def _log_tick_summary(self, timestamp: float):
        summary = f"Tick={self.tick}, Timestamp={timestamp:.0f}ms"
        # Particle counts are optional; plain update/draw effects are logged without them.
        get_counts = getattr(self.effect, 'get_particle_counts', None)
        if get_counts is not None:
            rise, explosions, fragments = get_counts()
            summary += (
                f", RiseParticles={rise}, "
                f"Explosions={explosions}, "
                f"Fragments={fragments}"
            )
        logger.debug(summary)
