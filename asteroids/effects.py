import random

import pygame

from .constants import PARTICLE_COUNT, PARTICLE_SHRINK
from .entities import Particle


class ParticlePool:
    """Recycled explosion debris. Purely cosmetic."""

    def __init__(self, count=PARTICLE_COUNT, rng=None, shrink=PARTICLE_SHRINK):
        self.rng = rng if rng is not None else random.Random()
        self.shrink = shrink
        self.origin = pygame.Vector2(0, 0)
        self.particles = [self._make() for _ in range(count)]

    def _make(self):
        rng = self.rng
        return Particle(
            position=pygame.Vector2(self.origin),
            velocity=pygame.Vector2(rng.uniform(-5, 5), rng.uniform(-5, 5)),
            radius=2 + rng.random() * 3,
        )

    def burst(self, origin):
        self.origin = pygame.Vector2(origin)
        self.particles = [self._make() for _ in self.particles]

    def update(self):
        for i, p in enumerate(self.particles):
            p.position += p.velocity
            p.radius -= self.shrink
            if p.radius < 0:
                self.particles[i] = self._make()
