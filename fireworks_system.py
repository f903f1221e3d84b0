# fireworks_system.py

import pygame
import logging
from particle import Particle
from explosion import Explosion
from random_util import RandomUtil
from constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

class FireworksSystem:
    """
    Manages all active rise particles and explosions.

    Rise particles are spawned at random along the bottom edge. When one dies it
    is replaced by an Explosion at its last position, in its colour. Explosions
    are dropped once all their fragments are gone.

    Data Contract:
    - Inputs:
        - config (dict): The 'simulation' section of config.json.
        - rng (RandomUtil): The single source of randomness for the run.
        - bounds (tuple): (width, height) of the drawing surface.
    - Outputs: None. This class modifies its internal state.
    - Invariants: After update() returns, neither collection holds a dead entity.
    """
    def __init__(self, config: dict, rng: RandomUtil, bounds: tuple):
        self.config = config
        self.rng = rng
        self.bounds = bounds

        self.spawn_probability = config['spawn_probability']
        self.screen_buffer = config['screen_buffer']
        self.rise_config = config['rise']

        self.particles = []
        self.explosions = []

        # --- Trail surface ---
        # Blitting a translucent fill each frame only partly erases the previous
        # frame, which leaves fading trails behind moving particles.
        background = config['background']
        alpha = int(round(background['alpha'] * 255))
        self.background_color = (*background['color'], alpha)
        self.trail_surface = pygame.Surface(bounds, pygame.SRCALPHA)

        logger.info(f"FireworksSystem created with bounds {bounds}, spawn probability {self.spawn_probability}.")

    def spawn_rise_particle(self) -> Particle:
        """Creates a rise particle just below the bottom edge and registers it."""
        width, height = self.bounds
        rise = self.rise_config
        particle = Particle(
            position=(self.rng.randint(0, width), height + 1),
            velocity=(self.rng.uniform(*rise['vel_x_range']), rise['vel_y']),
            acceleration=(0.0, 0.0),
            lifespan=self.rng.randint(*rise['life_range']),
            color=self.rng.random_color(),
            bounds=self.bounds,
            screen_buffer=self.screen_buffer,
        )
        self.particles.append(particle)
        return particle

    def update(self):
        """
        Runs one simulation tick.

        1. Maybe spawn a rise particle.
        2. Update rise particles; convert the ones that died into explosions.
        3. Update explosions; drop the finished ones.
        """
        if self.rng.chance(self.spawn_probability):
            self.spawn_rise_particle()

        survivors = []
        for particle in self.particles:
            particle.update()
            if particle.is_dead:
                self.explosions.append(Explosion(
                    particle.position, particle.color, self.config, self.rng, self.bounds
                ))
                logger.debug(f"Explosion at ({particle.position[0]:.1f}, {particle.position[1]:.1f}), color={particle.color}")
            else:
                survivors.append(particle)
        self.particles = survivors

        for explosion in self.explosions:
            explosion.update()
        self.explosions = [e for e in self.explosions if not e.is_finished]

    def draw(self, screen: pygame.Surface):
        """
        Fades the previous frame, then draws rise particles and explosions on top.
        """
        self.trail_surface.fill(self.background_color)
        screen.blit(self.trail_surface, (0, 0))

        for particle in self.particles:
            particle.draw(screen)

        for explosion in self.explosions:
            explosion.draw(screen)

    def get_particle_counts(self):
        """Returns (rise particles, explosions, explosion fragments)."""
        fragments = sum(len(e.particles) for e in self.explosions)
        return len(self.particles), len(self.explosions), fragments
