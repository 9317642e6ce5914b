import logging
import math
import random

import pygame

from .entities import Asteroid, AsteroidSize
from .geometry import distance


logger = logging.getLogger(__name__)


class Spawner:
    """Creates asteroid belts and the children of split asteroids.

    All randomness goes through ``rng`` so a seeded ``random.Random`` makes
    belts and splits reproducible. ``level`` scales asteroid speed and is set
    by the game controller when a level starts.
    """

    def __init__(self, config, rng=None, level=0):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.level = level

    def make_shape(self):
        cfg = self.config
        rng = self.rng
        vertices = math.floor(rng.random() * (cfg.asteroid_vertices + 1) + cfg.asteroid_vertices / 2)
        jag = cfg.asteroid_jaggedness
        offsets = [rng.random() * jag * 2 + 1 - jag for _ in range(vertices)]
        return vertices, offsets

    def random_velocity(self):
        speed = self.config.asteroid_speed_per_tick * self.config.speed_multiplier(self.level)
        rng = self.rng
        vx = rng.random() * speed * (1 if rng.random() < 0.5 else -1)
        vy = rng.random() * speed * (1 if rng.random() < 0.5 else -1)
        return pygame.Vector2(vx, vy)

    def new_asteroid(self, x, y, size=AsteroidSize.LARGE):
        velocity = self.random_velocity()
        angle = self.rng.random() * math.tau
        vertices, offsets = self.make_shape()
        return Asteroid(
            position=pygame.Vector2(x, y),
            velocity=velocity,
            size=size,
            radius=size.radius(self.config.asteroid_size),
            angle=angle,
            vertices=vertices,
            offsets=offsets,
        )

    def spawn_belt(self, count, avoid_point, min_clearance):
        width, height = self.config.width, self.config.height
        belt = []
        for _ in range(count):
            while True:
                x = self.rng.uniform(0, width)
                y = self.rng.uniform(0, height)
                if distance(avoid_point, (x, y)) >= min_clearance:
                    break
            belt.append(self.new_asteroid(x, y))
        logger.debug("Spawned belt of %d asteroids at level %d", count, self.level)
        return belt

    def split(self, asteroid):
        child_size = asteroid.size.smaller
        if child_size is None:
            return []
        x, y = asteroid.position
        return [self.new_asteroid(x, y, child_size) for _ in range(2)]
