"""Flappy Circle: a small Flappy Bird-style game in three iterations."""

from .simulation import FixedTimestep, Simulation
from .variants import FLIGHT, GROUND, PIPES, VARIANTS, Variant, get_variant
from .world import World

__version__ = "0.3.0"

__all__ = [
    "FixedTimestep",
    "Simulation",
    "World",
    "Variant",
    "VARIANTS",
    "FLIGHT",
    "GROUND",
    "PIPES",
    "get_variant",
]
