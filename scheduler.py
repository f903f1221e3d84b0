# scheduler.py

import pygame
import logging
from constants import LOGGER_NAME, REFRESH_FPS

logger = logging.getLogger(LOGGER_NAME)

STRATEGIES = ('auto', 'refresh', 'timer')


class FrameScheduler:
    """
    Invokes a queued callback once per frame, with a millisecond timestamp.

    pygame has no callback-based frame primitive, so the host pumps the
    scheduler from its event loop. The pygame Clock waits until the next frame
    is due: with fps=0 it never waits and the display's vsync paces frames;
    otherwise it caps the rate at fps (the timer fallback).

    Data Contract:
    - Inputs:
        - fps (int): Frame cap for the clock. 0 = uncapped.
        - clock: Object with tick(fps). Defaults to pygame.time.Clock().
        - time_source: Callable returning milliseconds. Defaults to pygame.time.get_ticks.
    - Invariants: At most one callback is pending; each request is invoked at most once.
    """
    def __init__(self, fps: int, clock=None, time_source=None):
        self.fps = fps
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.time_source = time_source if time_source is not None else pygame.time.get_ticks
        self._pending = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def request_frame(self, callback):
        """Arranges for callback(timestamp_ms) to run on the next pump()."""
        self._pending = callback

    def cancel(self):
        self._pending = None

    def pump(self) -> bool:
        """
        Waits for the next frame and runs the pending callback, if any.
        Returns True if a callback ran.
        """
        if self._pending is None:
            return False
        callback = self._pending
        self._pending = None
        self.clock.tick(self.fps)
        callback(self.time_source())
        return True


def open_display(size: tuple, scheduler_config: dict):
    """
    Opens the display window and picks the matching scheduler.

    'refresh' asks for a vsync'd display, 'timer' uses a plain display with a
    fixed frame cap, and 'auto' tries 'refresh' first and falls back to 'timer'.

    - Outputs: (pygame.Surface, FrameScheduler)
    - Raises:
        - ValueError: Unknown strategy.
        - pygame.error: The display could not be opened.
    """
    strategy = scheduler_config.get('strategy', 'auto')
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown scheduler strategy: {strategy!r}. Expected one of {STRATEGIES}.")

    if strategy in ('auto', 'refresh'):
        try:
            screen = pygame.display.set_mode(size, pygame.SCALED, vsync=1)
            logger.info("Display opened with vsync. Frames are paced by the display refresh.")
            return screen, FrameScheduler(REFRESH_FPS)
        except pygame.error as e:
            if strategy == 'refresh':
                raise
            logger.warning(f"Vsync unavailable ({e}). Falling back to timer scheduling.")

    fallback_fps = scheduler_config.get('fallback_fps', 30)
    screen = pygame.display.set_mode(size)
    logger.info(f"Display opened without vsync. Frames are capped at {fallback_fps} FPS.")
    return screen, FrameScheduler(fallback_fps)
