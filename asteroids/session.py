from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pygame

from .effects import ParticlePool
from .entities import Asteroid, Controls, Ship


def new_ship(config, invincible=True):
    ship = Ship(
        position=pygame.Vector2(config.width / 2, config.height / 2),
        radius=config.ship_radius,
    )
    if invincible:
        ship.blink_time = config.blink_ticks
        ship.blink_number = config.blink_cycles
    return ship


@dataclass
class GameSession:
    """All mutable state of one game, owned by the controller."""

    ship: Ship
    lives: int
    asteroids: List[Asteroid] = field(default_factory=list)
    controls: Controls = field(default_factory=Controls)
    particles: ParticlePool = field(default_factory=ParticlePool)
    level: int = 0
    score: int = 0

    @classmethod
    def start(cls, config, particles=None):
        return cls(
            ship=new_ship(config),
            lives=config.lives,
            particles=particles if particles is not None else ParticlePool(),
        )
