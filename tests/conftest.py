"""Pytest fixtures for all tests."""

import io
import random

import pytest

from config import SimulationConfig
from simulation.engine import LifeEngine
from simulation.entities import Cell
from simulation.world import World


@pytest.fixture
def rng():
    """Seeded random source for reproducible boards."""
    return random.Random(1234)


@pytest.fixture
def world(rng):
    """Create a randomly populated 8x6 (inclusive) test world."""
    return World(width=7, height=5, rng=rng)


@pytest.fixture
def empty_world():
    """Factory for all-dead worlds of a given size."""
    def make(width, height):
        return World(width=width, height=height, rng=random.Random(0), alive_probability=0.0)
    return make


@pytest.fixture
def cell():
    """Create a test cell."""
    return Cell(x=3, y=4)


@pytest.fixture
def sim_config():
    """Create test simulation config."""
    return SimulationConfig(
        tick_interval=0.0,
        world_width=9,
        world_height=4,
        seed=7,
    )


@pytest.fixture
def output():
    """In-memory sink for engine frames."""
    return io.StringIO()


@pytest.fixture
def engine(sim_config, output):
    """Create test engine over a small seeded world."""
    world = World(sim_config.world_width, sim_config.world_height, rng=random.Random(sim_config.seed))
    return LifeEngine(world, config=sim_config, output=output)
