"""
Game entity dataclasses
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import pygame

from .constants import ASTEROID_POINTS


class AsteroidSize(Enum):
    """Size ladder: large -> medium -> small -> destroyed."""

    LARGE = ("large", 2)
    MEDIUM = ("medium", 4)
    SMALL = ("small", 8)

    def __init__(self, label, divisor):
        self.label = label
        self.divisor = divisor

    @property
    def points(self) -> int:
        return ASTEROID_POINTS[self.label]

    @property
    def smaller(self) -> Optional["AsteroidSize"]:
        if self is AsteroidSize.LARGE:
            return AsteroidSize.MEDIUM
        if self is AsteroidSize.MEDIUM:
            return AsteroidSize.SMALL
        return None

    def radius(self, asteroid_size: float) -> float:
        return asteroid_size / self.divisor


@dataclass
class Laser:
    """Projectile fired from the ship's nose"""
    position: pygame.Vector2
    velocity: pygame.Vector2
    distance: float = 0.0
    explode_time: int = 0

    @property
    def exploding(self) -> bool:
        return self.explode_time > 0


@dataclass
class Ship:
    """Player ship; replaced by a fresh instance on respawn"""
    position: pygame.Vector2
    radius: float
    angle: float = math.pi / 2
    velocity: pygame.Vector2 = field(default_factory=pygame.Vector2)
    rotation: float = 0.0  # radians per tick
    thrusting: bool = False
    blink_time: int = 0
    blink_number: int = 0
    explode_time: int = 0
    can_fire: bool = True
    dead: bool = False
    lasers: List[Laser] = field(default_factory=list)

    @property
    def exploding(self) -> bool:
        return self.explode_time > 0

    @property
    def piloting(self) -> bool:
        return not self.exploding and not self.dead

    @property
    def invincible(self) -> bool:
        return self.blink_number > 0

    @property
    def blink_visible(self) -> bool:
        return self.blink_number % 2 == 0

    @property
    def nose(self) -> pygame.Vector2:
        return pygame.Vector2(
            self.position.x + 4 / 3 * self.radius * math.cos(self.angle),
            self.position.y - 4 / 3 * self.radius * math.sin(self.angle),
        )


@dataclass
class Asteroid:
    """Drifting rock with a fixed jagged silhouette"""
    position: pygame.Vector2
    velocity: pygame.Vector2
    size: AsteroidSize
    radius: float
    angle: float
    vertices: int
    offsets: List[float]


@dataclass
class Particle:
    """Cosmetic explosion debris"""
    position: pygame.Vector2
    velocity: pygame.Vector2
    radius: float


@dataclass
class Controls:
    """Pending player intents, consumed by the next tick"""
    rotation: int = 0  # +1 left, -1 right
    thrusting: bool = False
    fire_requested: bool = False
    fire_released: bool = False
