# explosion.py

import math
import pygame
import numpy as np
from particle import Particle
from random_util import RandomUtil

class Explosion:
    """
    A radial burst of particles that drift under gravity.

    The explosion owns its particles and prunes them as they die. It is
    finished once none are left; the owner polls is_finished after each update.

    Data Contract:
    - Inputs:
        - origin (tuple): (x, y) where every fragment starts.
        - primary_color (tuple): RGB colour inherited from the rise particle.
        - config (dict): The 'simulation' section of config.json.
        - rng (RandomUtil): Source for lifespans and accent colours.
        - bounds (tuple): (width, height) of the viewport.
    - Invariants:
        - Created with exactly max_particles fragments.
        - len(particles) never increases.
    """
    def __init__(self, origin, primary_color: tuple, config: dict, rng: RandomUtil, bounds: tuple):
        explosion_config = config['explosion']
        self.origin = np.array(origin, dtype=float)
        self.primary_color = primary_color
        self.max_particles = explosion_config['particles_max']
        self.lifespan = rng.randint(*explosion_config['life_range'])
        self.particles = []

        gravity = explosion_config['gravity']
        life_jitter = explosion_config['life_jitter']

        # Fragments are laid out evenly around a full circle.
        for i in reversed(range(self.max_particles)):
            angle = i * math.pi * 2 / self.max_particles
            velocity = (math.sin(angle), math.cos(angle))
            lifespan = rng.randint(self.lifespan, self.lifespan + life_jitter)
            # Indices divisible by 3 get an accent colour.
            color = self.primary_color if i % 3 else rng.random_color()

            self.particles.append(Particle(
                position=self.origin,
                velocity=velocity,
                acceleration=(0.0, gravity),
                lifespan=lifespan,
                color=color,
                bounds=bounds,
                screen_buffer=config['screen_buffer'],
            ))

    @property
    def is_finished(self) -> bool:
        return not self.particles

    def update(self):
        for particle in self.particles:
            particle.update()
        self.particles = [p for p in self.particles if not p.is_dead]

    def draw(self, screen: pygame.Surface):
        for particle in self.particles:
            particle.draw(screen)
