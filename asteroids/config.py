"""
Game configuration.

All tuning values are expressed per second and converted to per-tick deltas
by dividing by ``tick_rate``. The simulation assumes every tick is exactly
``1 / tick_rate`` seconds long.
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from . import constants as C
from .geometry import ticks


@dataclass(frozen=True)
class GameConfig:
    tick_rate: int = C.TICK_RATE
    width: int = C.WIDTH
    height: int = C.HEIGHT

    ship_size: float = C.SHIP_SIZE
    turn_speed: float = C.SHIP_TURN_SPEED
    ship_thrust: float = C.SHIP_THRUST
    friction: float = C.SHIP_FRICTION
    ship_explode_duration: float = C.SHIP_EXPLODE_DURATION
    invincibility_duration: float = C.SHIP_INVINCIBILITY_DURATION
    blink_duration: float = C.SHIP_BLINK_DURATION

    laser_max: int = C.LASER_MAX
    laser_speed: float = C.LASER_SPEED
    laser_distance: float = C.LASER_DISTANCE
    laser_explode_duration: float = C.LASER_EXPLODE_DURATION

    number_asteroids: int = C.NUMBER_ASTEROIDS
    asteroids_per_level: int = C.ASTEROIDS_PER_LEVEL
    asteroid_size: float = C.ASTEROID_SIZE
    asteroid_speed: float = C.ASTEROID_SPEED
    asteroid_vertices: int = C.ASTEROID_VERTICES
    asteroid_jaggedness: float = C.ASTEROID_JAGGEDNESS
    level_speed_step: float = C.LEVEL_SPEED_STEP

    lives: int = C.GAME_LIVES
    text_fade_time: float = C.TEXT_FADE_TIME

    def __post_init__(self):
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"playfield must be non-empty, got {self.width}x{self.height}")
        if self.ship_size <= 0 or self.asteroid_size <= 0:
            raise ValueError("ship_size and asteroid_size must be positive")
        if self.laser_max < 1:
            raise ValueError(f"laser_max must be at least 1, got {self.laser_max}")
        if self.lives < 1:
            raise ValueError(f"lives must be at least 1, got {self.lives}")
        if self.asteroid_vertices < 2:
            raise ValueError(f"asteroid_vertices must be at least 2, got {self.asteroid_vertices}")
        if not 0 <= self.asteroid_jaggedness < 1:
            raise ValueError(f"asteroid_jaggedness must be in [0, 1), got {self.asteroid_jaggedness}")
        for name in ("blink_duration", "ship_explode_duration", "laser_explode_duration", "text_fade_time"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        # every avoid point has a playfield corner at least half a diagonal away
        if self.spawn_clearance >= math.hypot(self.width, self.height) / 2:
            raise ValueError(
                f"{self.width}x{self.height} playfield leaves no room for a belt "
                f"{self.spawn_clearance} away from the ship"
            )

    # ----------------------------
    # Per-tick values
    # ----------------------------

    @property
    def ship_radius(self) -> float:
        return self.ship_size / 2

    @property
    def laser_radius(self) -> float:
        return self.ship_size / 15

    @property
    def turn_per_tick(self) -> float:
        return math.radians(self.turn_speed) / self.tick_rate

    @property
    def thrust_per_tick(self) -> float:
        return self.ship_thrust / self.tick_rate

    @property
    def friction_per_tick(self) -> float:
        return self.friction / self.tick_rate

    @property
    def laser_speed_per_tick(self) -> float:
        return self.laser_speed / self.tick_rate

    @property
    def asteroid_speed_per_tick(self) -> float:
        return self.asteroid_speed / self.tick_rate

    @property
    def laser_range(self) -> float:
        return self.laser_distance * self.width

    @property
    def ship_explode_ticks(self) -> int:
        return ticks(self.ship_explode_duration, self.tick_rate)

    @property
    def laser_explode_ticks(self) -> int:
        return ticks(self.laser_explode_duration, self.tick_rate)

    @property
    def blink_ticks(self) -> int:
        return ticks(self.blink_duration, self.tick_rate)

    @property
    def blink_cycles(self) -> int:
        return math.ceil(self.invincibility_duration / self.blink_duration)

    @property
    def text_fade_ticks(self) -> int:
        return ticks(self.text_fade_time, self.tick_rate)

    @property
    def spawn_clearance(self) -> float:
        """Minimum distance between a fresh belt asteroid and the ship spawn point."""
        return self.asteroid_size * 2 + self.ship_radius

    def belt_size(self, level: int) -> int:
        return self.number_asteroids + self.asteroids_per_level * level

    def speed_multiplier(self, level: int) -> float:
        return 1 + self.level_speed_step * level

    # ----------------------------
    # Loading
    # ----------------------------

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path) -> GameConfig:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return GameConfig.from_dict(data)
