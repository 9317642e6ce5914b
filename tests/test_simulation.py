import math

import pygame
import pytest

from asteroids.entities import AsteroidSize, Laser
from asteroids.simulation import (
    AsteroidDestroyed,
    GameOver,
    LevelCleared,
    ShipExploded,
    ShipRespawned,
    explode_ship,
    fire_laser,
)
from helpers import still_asteroid


def step_until(simulation, session, event_type, limit=500):
    for _ in range(limit):
        for event in simulation.step(session):
            if isinstance(event, event_type):
                return event
    raise AssertionError(f"no {event_type.__name__} within {limit} ticks")


# ----------------------------
# Piloting
# ----------------------------

def test_rotation_applies_per_tick_turn(simulation, session, config):
    session.controls.rotation = 1
    simulation.step(session)
    assert session.ship.angle == pytest.approx(math.pi / 2 + config.turn_per_tick)
    session.controls.rotation = -1
    simulation.step(session)
    simulation.step(session)
    assert session.ship.angle == pytest.approx(math.pi / 2 - config.turn_per_tick)


def test_thrust_accelerates_along_heading(simulation, session, config):
    session.controls.thrusting = True
    start_y = session.ship.position.y
    for _ in range(10):
        simulation.step(session)
    assert session.ship.thrusting
    assert session.ship.velocity.y == pytest.approx(-10 * config.thrust_per_tick)
    assert session.ship.velocity.x == pytest.approx(0, abs=1e-9)
    assert session.ship.position.y < start_y


def test_friction_decays_velocity(simulation, session, config):
    session.ship.velocity = pygame.Vector2(2, 0)
    simulation.step(session)
    assert session.ship.velocity.x == pytest.approx(2 * (1 - config.friction_per_tick))


def test_ship_wraps_around(simulation, session, config):
    ship = session.ship
    ship.position = pygame.Vector2(config.width + ship.radius + 0.5, 300)
    simulation.step(session)
    assert ship.position.x == -ship.radius


def test_blink_counts_down(simulation, session, config):
    ship = session.ship
    assert ship.blink_number == config.blink_cycles
    for _ in range(config.blink_ticks):
        simulation.step(session)
    assert ship.blink_number == config.blink_cycles - 1
    assert ship.blink_time == config.blink_ticks


# ----------------------------
# Firing
# ----------------------------

def test_fire_request_spawns_laser_at_nose(simulation, session, config):
    nose = session.ship.nose
    session.controls.fire_requested = True
    simulation.step(session)

    lasers = session.ship.lasers
    assert len(lasers) == 1
    assert lasers[0].position.x == pytest.approx(nose.x)
    assert lasers[0].position.y == pytest.approx(nose.y - config.laser_speed_per_tick)
    assert not session.ship.can_fire
    assert not session.controls.fire_requested


def test_fire_gate_gives_one_shot_per_press(simulation, session):
    session.controls.fire_requested = True
    simulation.step(session)
    session.controls.fire_requested = True
    simulation.step(session)
    assert len(session.ship.lasers) == 1

    session.controls.fire_released = True
    simulation.step(session)
    session.controls.fire_requested = True
    simulation.step(session)
    assert len(session.ship.lasers) == 2


def test_laser_cap(session, config):
    ship = session.ship
    ship.lasers = [Laser(pygame.Vector2(0, 0), pygame.Vector2(0, 0)) for _ in range(config.laser_max)]

    assert not fire_laser(ship, config)
    assert len(ship.lasers) == config.laser_max
    assert not ship.can_fire

    # room again, but the gate is still closed
    ship.lasers.pop()
    assert not fire_laser(ship, config)

    ship.can_fire = True
    assert fire_laser(ship, config)
    assert len(ship.lasers) == config.laser_max


def test_laser_expires_after_range(simulation, session, config):
    session.controls.fire_requested = True
    simulation.step(session)
    for _ in range(99):
        simulation.step(session)
    assert len(session.ship.lasers) == 1
    assert session.ship.lasers[0].distance == pytest.approx(100 * config.laser_speed_per_tick)

    for _ in range(30):
        simulation.step(session)
    assert session.ship.lasers == []


# ----------------------------
# Collisions
# ----------------------------

def test_laser_splits_large_asteroid(simulation, session, spawner, config):
    session.asteroids = [still_asteroid(spawner, 400, 150)]
    session.controls.fire_requested = True

    event = step_until(simulation, session, AsteroidDestroyed)

    assert event.size is AsteroidSize.LARGE
    assert event.points == 20
    assert event.children == 2
    assert event.cause == "laser"
    assert [a.size for a in session.asteroids] == [AsteroidSize.MEDIUM, AsteroidSize.MEDIUM]

    laser = session.ship.lasers[0]
    assert laser.exploding
    for _ in range(config.laser_explode_ticks):
        simulation.step(session)
    assert session.ship.lasers == []


def test_one_laser_destroys_one_asteroid(simulation, session, spawner):
    session.asteroids = [
        still_asteroid(spawner, 100, 100, AsteroidSize.SMALL),
        still_asteroid(spawner, 100, 100, AsteroidSize.SMALL),
    ]
    session.ship.lasers = [Laser(pygame.Vector2(100, 100), pygame.Vector2(0, 0))]

    events = simulation.step(session)

    destroyed = [e for e in events if isinstance(e, AsteroidDestroyed)]
    assert len(destroyed) == 1
    assert len(session.asteroids) == 1
    assert session.ship.lasers[0].exploding


def test_exploding_laser_does_not_hit(simulation, session, spawner):
    session.asteroids = [still_asteroid(spawner, 100, 100)]
    session.ship.lasers = [Laser(pygame.Vector2(100, 100), pygame.Vector2(0, 0), explode_time=5)]

    events = simulation.step(session)

    assert not any(isinstance(e, AsteroidDestroyed) for e in events)
    assert len(session.asteroids) == 1


def test_invincible_ship_ignores_asteroids(simulation, session, spawner):
    x, y = session.ship.position
    session.asteroids = [still_asteroid(spawner, x, y)]
    events = simulation.step(session)
    assert events == []
    assert session.ship.piloting


def test_ship_collision_resolves_first_asteroid_only(simulation, session, spawner):
    ship = session.ship
    ship.blink_number = 0
    x, y = ship.position
    session.asteroids = [still_asteroid(spawner, x, y), still_asteroid(spawner, x + 10, y)]

    events = simulation.step(session)

    assert isinstance(events[0], ShipExploded)
    destroyed = [e for e in events if isinstance(e, AsteroidDestroyed)]
    assert len(destroyed) == 1
    assert destroyed[0].cause == "ship"
    assert ship.exploding
    # one large left, plus two medium children
    assert len(session.asteroids) == 3


def test_explosion_ends_in_respawn(simulation, session, config):
    old_ship = session.ship
    old_ship.position = pygame.Vector2(50, 50)
    explode_ship(session, config)

    for _ in range(config.ship_explode_ticks - 1):
        assert simulation.step(session) == [LevelCleared(level=0)]
    events = simulation.step(session)

    assert ShipRespawned(lives=config.lives - 1) in events
    assert session.lives == config.lives - 1
    ship = session.ship
    assert ship is not old_ship
    assert tuple(ship.position) == (config.width / 2, config.height / 2)
    assert ship.invincible
    assert ship.piloting


def test_last_life_ends_the_game(simulation, session, config):
    session.lives = 1
    session.score = 130
    explode_ship(session, config)

    event = step_until(simulation, session, GameOver)

    assert event.score == 130
    assert session.ship.dead
    assert not session.ship.exploding
    assert session.lives == 0
    # dead ships ignore input
    session.controls.fire_requested = True
    simulation.step(session)
    assert session.ship.lasers == []


def test_lasers_in_flight_vanish_with_the_last_life(simulation, session, spawner, config):
    session.lives = 1
    session.asteroids = [still_asteroid(spawner, 400, 100)]
    # on course for the asteroid, but too far to reach it before the game ends
    session.ship.lasers = [Laser(pygame.Vector2(100, 100), pygame.Vector2(config.laser_speed_per_tick, 0))]
    explode_ship(session, config)

    step_until(simulation, session, GameOver)
    assert session.ship.lasers == []

    for _ in range(120):
        events = simulation.step(session)
        assert not any(isinstance(e, AsteroidDestroyed) for e in events)
    assert len(session.asteroids) == 1


def test_fire_requests_dropped_while_exploding(simulation, session, config):
    explode_ship(session, config)
    session.controls.fire_requested = True
    simulation.step(session)
    assert not session.controls.fire_requested
    assert session.ship.lasers == []


# ----------------------------
# Asteroids
# ----------------------------

def test_asteroids_move_and_keep_their_shape(simulation, session, spawner):
    asteroid = spawner.new_asteroid(200, 200)
    asteroid.velocity = pygame.Vector2(1, -0.5)
    offsets = list(asteroid.offsets)
    session.asteroids = [asteroid]

    for _ in range(10):
        simulation.step(session)

    assert asteroid.position.x == pytest.approx(210)
    assert asteroid.position.y == pytest.approx(195)
    assert asteroid.offsets == offsets


def test_empty_field_reports_level_cleared(simulation, session):
    session.asteroids = []
    session.level = 2
    assert simulation.step(session) == [LevelCleared(level=2)]


def test_particles_burst_from_ship(session, config):
    session.ship.position = pygame.Vector2(123, 45)
    explode_ship(session, config)
    particles = session.particles.particles
    assert particles
    assert all(tuple(p.position) == (123, 45) for p in particles)

    radii = [p.radius for p in particles]
    session.particles.update()
    assert [p.radius for p in particles] == pytest.approx([r - 0.02 for r in radii])
