import random

import pytest

from asteroids import GameConfig, GameController, MemoryHighScoreStore, Spawner
from asteroids.session import GameSession
from asteroids.simulation import Simulation


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def spawner(config, rng):
    return Spawner(config, rng)


@pytest.fixture
def simulation(config, spawner):
    return Simulation(config, spawner)


@pytest.fixture
def session(config):
    return GameSession.start(config)


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def controller(config, store):
    return GameController(config, rng=random.Random(7), store=store)
