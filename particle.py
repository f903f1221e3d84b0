# particle.py

import pygame
import numpy as np
from constants import PARTICLE_WIDTH, PARTICLE_HEIGHT

class Particle:
    """
    Represents a single moving point with basic physics and a lifespan.

    Data Contract:
    - Inputs:
        - position, velocity, acceleration: (x, y) pairs, copied into float arrays.
        - lifespan (int): Remaining ticks before the particle expires.
        - color (tuple): RGB colour used when drawing.
        - bounds (tuple): (width, height) of the viewport.
        - screen_buffer (float): Margin around the viewport still considered on-screen.
    - Invariants:
        - lifespan drops by exactly 1 per update.
        - Once is_dead is set it is never cleared.
    """
    width = PARTICLE_WIDTH
    height = PARTICLE_HEIGHT

    def __init__(self, position, velocity, acceleration, lifespan: int, color: tuple,
                 bounds: tuple, screen_buffer: float):
        self.position = np.array(position, dtype=float)
        self.velocity = np.array(velocity, dtype=float)
        self.acceleration = np.array(acceleration, dtype=float)
        self.lifespan = lifespan
        self.color = color
        self.bounds = bounds
        self.screen_buffer = screen_buffer
        self.is_dead = False

    def update(self):
        """
        Updates the particle's state for one time step using basic physics.
        v_new = v_old + a
        p_new = p_old + v_new
        """
        self.velocity += self.acceleration
        self.position += self.velocity

        self.lifespan -= 1
        if self.lifespan <= 0 or self._is_off_screen():
            self.is_dead = True

    def _is_off_screen(self) -> bool:
        x, y = self.position
        width, height = self.bounds
        buffer = self.screen_buffer
        return x < -buffer or x > width + buffer or y < -buffer or y > height + buffer

    def draw(self, screen: pygame.Surface):
        """
        Draws the particle on the screen as a filled rectangle.
        """
        x, y = self.position
        screen.fill(self.color, (int(x), int(y), self.width, self.height))
