"""
Game state controller.

Owns the ``GameSession`` and drives it one tick at a time through the
``Simulation``. On top of the simulation it keeps score, advances levels,
shows status messages, persists the high score and restarts the game once the
game-over message has faded out.

Phases::

    LEVEL_ACTIVE -> SHIP_EXPLODING -> LEVEL_ACTIVE (respawned)
                                   -> GAME_OVER -> LEVEL_ACTIVE (new game)
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List, Optional

from .config import GameConfig
from .effects import ParticlePool
from .session import GameSession
from .simulation import (
    AsteroidDestroyed,
    GameOver,
    LevelCleared,
    ShipExploded,
    ShipRespawned,
    Simulation,
)
from .snapshot import Snapshot, take_snapshot
from .spawner import Spawner
from .storage import HighScoreStore, MemoryHighScoreStore


logger = logging.getLogger(__name__)


class Phase(str, Enum):
    LEVEL_ACTIVE = "level_active"
    SHIP_EXPLODING = "ship_exploding"
    GAME_OVER = "game_over"


class GameController:

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        store: Optional[HighScoreStore] = None,
    ):
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else random.Random()
        self.store = store if store is not None else MemoryHighScoreStore()

        self.spawner = Spawner(self.config, self.rng)
        self.simulation = Simulation(self.config, self.spawner)
        # separate stream so cosmetic effects never perturb belt generation
        self.particles = ParticlePool(rng=random.Random(self.rng.getrandbits(32)))

        self.high_score = 0
        self.status_text = ""
        self.status_ticks = 0
        self.game_over_ticks = 0
        self.new_game()

    # ----------------------------
    # Session lifecycle
    # ----------------------------

    def new_game(self):
        self.high_score = max(self.high_score, self.store.load_high_score())
        self.session = GameSession.start(self.config, particles=self.particles)
        self.game_over_ticks = 0
        logger.info("New game (high score %d)", self.high_score)
        self.start_level()

    def start_level(self):
        session = self.session
        self.spawner.level = session.level
        session.asteroids = self.spawner.spawn_belt(
            self.config.belt_size(session.level),
            session.ship.position,
            self.config.spawn_clearance,
        )
        logger.debug("Level %d started with %d asteroids", session.level, len(session.asteroids))
        if not session.ship.dead:
            self.show_status(f"Level {session.level + 1}")
        self.phase = self._ship_phase()

    def _ship_phase(self):
        ship = self.session.ship
        if ship.dead:
            return Phase.GAME_OVER
        if ship.exploding:
            return Phase.SHIP_EXPLODING
        return Phase.LEVEL_ACTIVE

    # ----------------------------
    # Tick
    # ----------------------------

    def tick(self) -> List[object]:
        if self.phase is Phase.GAME_OVER:
            self.game_over_ticks -= 1
            if self.game_over_ticks <= 0:
                self.new_game()

        events = self.simulation.step(self.session)
        for event in events:
            self._handle(event)

        if self.session.score > self.high_score:
            self.high_score = self.session.score
            self.store.save_high_score(self.high_score)

        if self.status_ticks > 0:
            self.status_ticks -= 1

        self._check_invariants()
        return events

    def _handle(self, event):
        session = self.session
        if isinstance(event, AsteroidDestroyed):
            session.score += event.points
        elif isinstance(event, ShipExploded):
            self.phase = Phase.SHIP_EXPLODING
        elif isinstance(event, ShipRespawned):
            self.phase = Phase.LEVEL_ACTIVE
        elif isinstance(event, GameOver):
            self.phase = Phase.GAME_OVER
            self.game_over_ticks = self.config.text_fade_ticks
            self.show_status("Game Over")
            session.controls.rotation = 0
            session.controls.thrusting = False
            logger.info("Game over at level %d with score %d", session.level + 1, event.score)
        elif isinstance(event, LevelCleared):
            session.level += 1
            self.start_level()

    def _check_invariants(self):
        ship = self.session.ship
        assert (self.phase is Phase.GAME_OVER) == ship.dead, "phase out of sync with dead ship"
        assert (self.phase is Phase.SHIP_EXPLODING) == ship.exploding, "phase out of sync with explosion"
        assert len(ship.lasers) <= self.config.laser_max, "laser cap exceeded"

    # ----------------------------
    # Status text
    # ----------------------------

    def show_status(self, text):
        self.status_text = text
        self.status_ticks = self.config.text_fade_ticks

    @property
    def status_alpha(self) -> float:
        return self.status_ticks / self.config.text_fade_ticks

    # ----------------------------
    # Input
    # ----------------------------

    @property
    def accepting_input(self) -> bool:
        return self.phase is not Phase.GAME_OVER

    def apply_rotation(self, direction):
        """+1 turns left (counter-clockwise), -1 turns right, 0 stops."""
        if direction not in (-1, 0, 1):
            raise ValueError(f"rotation direction must be -1, 0 or 1, got {direction!r}")
        if self.accepting_input:
            self.session.controls.rotation = direction

    def set_thrusting(self, thrusting):
        if self.accepting_input:
            self.session.controls.thrusting = bool(thrusting)

    def request_fire(self):
        if self.accepting_input:
            self.session.controls.fire_requested = True

    def release_fire_gate(self):
        if self.accepting_input:
            self.session.controls.fire_released = True

    # ----------------------------
    # Presentation
    # ----------------------------

    def snapshot(self) -> Snapshot:
        return take_snapshot(
            self.session,
            high_score=self.high_score,
            status_text=self.status_text if self.status_ticks > 0 else "",
            status_alpha=self.status_alpha,
            phase=self.phase.value,
        )
