# random_util.py

import numpy as np


class RandomUtil:
    """
    Single source of randomness for the simulation.

    Every random decision (spawn chance, positions, velocity jitter, lifespans,
    colours) is drawn from one numpy Generator so a seeded run is reproducible.

    Data Contract:
    - Inputs: rng (np.random.Generator) - The generator to draw from.
    - Invariants: Integer ranges are inclusive on both ends.
    """
    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    @classmethod
    def from_seed(cls, seed=None):
        return cls(np.random.default_rng(seed))

    def randint(self, start: int, finish: int) -> int:
        """Uniform integer N with start <= N <= finish."""
        return int(self.rng.integers(start, finish, endpoint=True))

    def uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return bool(self.rng.random() < probability)

    def random_color(self) -> tuple:
        """A uniformly random opaque RGB colour."""
        r, g, b = self.rng.integers(0, 256, size=3)
        return (int(r), int(g), int(b))
