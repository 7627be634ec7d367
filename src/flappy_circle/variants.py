"""
variants.py: Feature flags for the three iterations of the game.
"""

from dataclasses import dataclass
from typing import Dict

from .constants import PLAYER_SPEED_X


@dataclass(frozen=True)
class Variant:
    name: str
    description: str
    gravity_first: bool = True      # apply_gravity before update_position
    camera_follow_y: bool = False
    player_speed_x: float = 0.0
    has_ground: bool = False
    has_pipes: bool = False
    has_collision: bool = False
    animate: bool = False
    scroll_background: bool = False


FLIGHT = Variant(
    name="flight",
    description="A circle that falls and jumps; the camera follows it.",
    gravity_first=False,
    camera_follow_y=True,
)

GROUND = Variant(
    name="ground",
    description="Scrolling ground tiles, collisions and restart.",
    player_speed_x=PLAYER_SPEED_X,
    has_ground=True,
    has_collision=True,
)

PIPES = Variant(
    name="pipes",
    description="Procedural pipes, animated player and parallax background.",
    player_speed_x=PLAYER_SPEED_X,
    has_ground=True,
    has_pipes=True,
    has_collision=True,
    animate=True,
    scroll_background=True,
)

VARIANTS: Dict[str, Variant] = {v.name: v for v in (FLIGHT, GROUND, PIPES)}
DEFAULT_VARIANT = PIPES.name


def get_variant(name: str) -> Variant:
    try:
        return VARIANTS[name]
    except KeyError:
        choices = ", ".join(VARIANTS)
        raise ValueError(f"unknown variant {name!r} (choose from {choices})") from None
