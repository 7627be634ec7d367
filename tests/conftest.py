"""
Shared fixtures. pygame runs against SDL's dummy drivers so no display is needed.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from flappy_circle import FLIGHT, GROUND, PIPES, Simulation


@pytest.fixture
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def flight_sim():
    sim = Simulation(FLIGHT, seed=1)
    sim.startup()
    return sim


@pytest.fixture
def ground_sim():
    sim = Simulation(GROUND, seed=1)
    sim.startup()
    return sim


@pytest.fixture
def pipes_sim():
    sim = Simulation(PIPES, seed=1)
    sim.startup()
    return sim


@pytest.fixture
def run_until_game_over():
    """Steps fixed ticks until the game ends. Returns the tick it ended on."""

    def run(sim, limit=1000):
        for _ in range(limit):
            sim.fixed_update()
            if sim.is_game_over:
                return sim.tick_count
        raise AssertionError(f"no game over within {limit} ticks")

    return run
