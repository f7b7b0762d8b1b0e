"""Shared fixtures for the Ants vs. Bees test suite."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pytest
from numpy.random import Generator

from antsvbees.colony.colony import Colony
from antsvbees.colony.hive import Hive
from antsvbees.simulation.config import GameConfig
from antsvbees.simulation.game import Game
from antsvbees.world.location import Location


def first_entrance(entrances: Sequence[Location]) -> Location:
    """Deterministic chooser: always the first tunnel."""
    return entrances[0]


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def colony(rng: Generator) -> Colony:
    """A dry 3x8 colony with plenty of food."""
    return Colony(food=20, tunnels=3, tunnel_length=8, rng=rng)


@pytest.fixture
def hive() -> Hive:
    """An empty hive that always sends bees down tunnel 0."""
    return Hive(bee_armor=3, bee_damage=1, chooser=first_entrance)


@pytest.fixture
def game(colony: Colony, hive: Hive) -> Game:
    """A game at turn 0 with no waves scheduled."""
    return Game(colony=colony, hive=hive)


@pytest.fixture
def default_config() -> GameConfig:
    """Default game config (no YAML file needed)."""
    return GameConfig()
