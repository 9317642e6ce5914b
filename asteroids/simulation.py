"""
Fixed-step simulation of ship, lasers and asteroids.

Every call to ``Simulation.step`` advances the session by exactly one tick,
in this order:

1. ship phase dispatch (explosion countdown / respawn, or piloting)
2. laser lifecycle
3. laser vs asteroid hits
4. ship vs asteroid hit
5. asteroid motion
6. level completion check

Collisions are discrete per-tick overlap tests. The step reports what
happened as a list of event records; score and level bookkeeping is left to
whoever consumes them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .entities import AsteroidSize, Laser
from .geometry import distance, heading_vector, wrap_position
from .session import new_ship


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AsteroidDestroyed:
    size: AsteroidSize
    points: int
    position: Tuple[float, float]
    children: int
    cause: str  # "laser" or "ship"


@dataclass(frozen=True)
class ShipExploded:
    position: Tuple[float, float]


@dataclass(frozen=True)
class ShipRespawned:
    lives: int


@dataclass(frozen=True)
class GameOver:
    score: int


@dataclass(frozen=True)
class LevelCleared:
    level: int


def fire_laser(ship, config):
    """Fire from the nose if the gate is open and the cap allows. Always closes the gate."""
    fired = False
    if ship.can_fire and len(ship.lasers) < config.laser_max:
        ship.lasers.append(
            Laser(
                position=ship.nose,
                velocity=heading_vector(ship.angle, config.laser_speed_per_tick),
            )
        )
        fired = True
    ship.can_fire = False
    assert len(ship.lasers) <= config.laser_max, "laser cap exceeded"
    return fired


def explode_ship(session, config):
    ship = session.ship
    ship.explode_time = config.ship_explode_ticks
    ship.thrusting = False
    session.particles.burst(ship.position)


class Simulation:

    def __init__(self, config, spawner):
        self.config = config
        self.spawner = spawner

    def step(self, session):
        events = []
        self._update_ship(session, events)
        self._update_lasers(session.ship.lasers)
        self._laser_hits(session, events)
        self._ship_hits(session, events)
        self._move_asteroids(session.asteroids)
        if not session.asteroids:
            events.append(LevelCleared(level=session.level))
        return events

    # ----------------------------
    # Ship
    # ----------------------------

    def _update_ship(self, session, events):
        ship = session.ship
        controls = session.controls
        assert not (ship.dead and ship.exploding), "ship is both dead and exploding"

        if ship.exploding:
            self._drop_requests(controls)
            session.particles.update()
            ship.explode_time -= 1
            if ship.explode_time == 0:
                session.lives -= 1
                if session.lives <= 0:
                    ship.dead = True
                    ship.lasers.clear()
                    events.append(GameOver(score=session.score))
                else:
                    session.ship = new_ship(self.config)
                    logger.debug("Ship respawned, %d lives left", session.lives)
                    events.append(ShipRespawned(lives=session.lives))
            return

        if ship.dead:
            self._drop_requests(controls)
            return

        self._pilot(ship, controls)

    def _pilot(self, ship, controls):
        cfg = self.config

        ship.rotation = controls.rotation * cfg.turn_per_tick
        ship.thrusting = controls.thrusting
        if controls.fire_requested:
            fire_laser(ship, cfg)
        if controls.fire_released:
            ship.can_fire = True
        self._drop_requests(controls)

        ship.angle += ship.rotation
        if ship.thrusting:
            ship.velocity += heading_vector(ship.angle, cfg.thrust_per_tick)
        else:
            ship.velocity -= ship.velocity * cfg.friction_per_tick

        ship.position += ship.velocity
        wrap_position(ship.position, ship.radius, cfg.width, cfg.height)

        if ship.blink_number > 0:
            ship.blink_time -= 1
            if ship.blink_time <= 0:
                ship.blink_time = cfg.blink_ticks
                ship.blink_number -= 1

    @staticmethod
    def _drop_requests(controls):
        controls.fire_requested = False
        controls.fire_released = False

    # ----------------------------
    # Lasers
    # ----------------------------

    def _update_lasers(self, lasers):
        cfg = self.config
        # reverse so deletion doesn't skip the next laser
        for i in range(len(lasers) - 1, -1, -1):
            laser = lasers[i]
            if laser.distance > cfg.laser_range:
                del lasers[i]
                continue
            if laser.exploding:
                laser.explode_time -= 1
                if laser.explode_time == 0:
                    del lasers[i]
                continue
            laser.position += laser.velocity
            laser.distance += laser.velocity.length()
            wrap_position(laser.position, cfg.laser_radius, cfg.width, cfg.height)

    # ----------------------------
    # Collisions
    # ----------------------------

    def _laser_hits(self, session, events):
        asteroids = session.asteroids
        lasers = session.ship.lasers
        for i in range(len(asteroids) - 1, -1, -1):
            asteroid = asteroids[i]
            for laser in reversed(lasers):
                if laser.exploding:
                    continue
                if distance(asteroid.position, laser.position) < asteroid.radius:
                    laser.explode_time = self.config.laser_explode_ticks
                    self._destroy_asteroid(session, i, "laser", events)
                    break

    def _ship_hits(self, session, events):
        ship = session.ship
        if not ship.piloting or ship.invincible:
            return
        for i, asteroid in enumerate(session.asteroids):
            if distance(ship.position, asteroid.position) < ship.radius + asteroid.radius:
                explode_ship(session, self.config)
                events.append(ShipExploded(position=tuple(ship.position)))
                self._destroy_asteroid(session, i, "ship", events)
                break

    def _destroy_asteroid(self, session, index, cause, events):
        # Children go to the end of the list, past any index still to be scanned.
        asteroid = session.asteroids.pop(index)
        children = self.spawner.split(asteroid)
        session.asteroids.extend(children)
        events.append(
            AsteroidDestroyed(
                size=asteroid.size,
                points=asteroid.size.points,
                position=tuple(asteroid.position),
                children=len(children),
                cause=cause,
            )
        )

    # ----------------------------
    # Asteroids
    # ----------------------------

    def _move_asteroids(self, asteroids):
        cfg = self.config
        for asteroid in asteroids:
            asteroid.position += asteroid.velocity
            wrap_position(asteroid.position, asteroid.radius, cfg.width, cfg.height)
