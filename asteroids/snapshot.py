"""
Read-only views handed to the presentation adapter once per tick.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class ShipView:
    position: Point
    angle: float
    radius: float
    alive: bool
    exploding: bool
    blink_visible: bool
    thrusting: bool


@dataclass(frozen=True)
class LaserView:
    position: Point
    exploding: bool


@dataclass(frozen=True)
class AsteroidView:
    position: Point
    radius: float
    vertices: int
    offsets: Tuple[float, ...]
    angle: float


@dataclass(frozen=True)
class ParticleView:
    position: Point
    radius: float


@dataclass(frozen=True)
class Snapshot:
    ship: ShipView
    lasers: Tuple[LaserView, ...]
    asteroids: Tuple[AsteroidView, ...]
    particles: Tuple[ParticleView, ...]
    score: int
    high_score: int
    lives: int
    level: int
    status_text: str
    status_alpha: float
    phase: str


def take_snapshot(session, *, high_score, status_text, status_alpha, phase) -> Snapshot:
    ship = session.ship
    ship_view = ShipView(
        position=(ship.position.x, ship.position.y),
        angle=ship.angle,
        radius=ship.radius,
        alive=not ship.dead,
        exploding=ship.exploding,
        blink_visible=ship.blink_visible,
        thrusting=ship.thrusting,
    )
    lasers = tuple(
        LaserView(position=(l.position.x, l.position.y), exploding=l.exploding)
        for l in ship.lasers
    )
    asteroids = tuple(
        AsteroidView(
            position=(a.position.x, a.position.y),
            radius=a.radius,
            vertices=a.vertices,
            offsets=tuple(a.offsets),
            angle=a.angle,
        )
        for a in session.asteroids
    )
    particles = ()
    if ship.exploding:
        particles = tuple(
            ParticleView(position=(p.position.x, p.position.y), radius=p.radius)
            for p in session.particles.particles
            if p.radius > 0
        )
    return Snapshot(
        ship=ship_view,
        lasers=lasers,
        asteroids=asteroids,
        particles=particles,
        score=session.score,
        high_score=high_score,
        lives=session.lives,
        level=session.level,
        status_text=status_text,
        status_alpha=status_alpha,
        phase=phase,
    )
