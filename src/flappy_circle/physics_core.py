"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .constants import CEILING_Y, FLOOR_Y, GRAVITY, JUMP_VELOCITY, TICK_TIME
from .data_models import Collider, Transform, Velocity


@dataclass(frozen=True)
class Aabb:
    """Axis-aligned bounding box given by its edges."""
    left: float
    bottom: float
    right: float
    top: float

    @classmethod
    def around(cls, transform: Transform, collider: Collider) -> "Aabb":
        half_w = collider.width / 2
        half_h = collider.height / 2
        return cls(
            left=transform.x - half_w,
            bottom=transform.y - half_h,
            right=transform.x + half_w,
            top=transform.y + half_h,
        )

    def overlaps(self, other: "Aabb") -> bool:
        """Inclusive test: touching edges count as a hit."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.bottom <= other.top
            and self.top >= other.bottom
        )


class PhysicsCore:
    """
    Shared per-tick physics used by the fixed-update systems.
    All quantities are world units per tick.
    """

    DT = TICK_TIME

    def __init__(self, gravity: float = GRAVITY, jump_velocity: float = JUMP_VELOCITY):
        self.gravity = gravity
        self.jump_velocity = jump_velocity

    def apply_gravity(self, velocity: Velocity):
        velocity.vy += self.gravity

    def update_position(self, transform: Transform, velocity: Velocity):
        transform.x += velocity.vx
        transform.y += velocity.vy

    def flap(self, velocity: Velocity):
        """A jump replaces the vertical velocity outright."""
        velocity.vy = self.jump_velocity

    def out_of_bounds(self, box: Aabb) -> bool:
        """Floor/ceiling check; touching either line counts."""
        return box.top >= CEILING_Y or box.bottom <= FLOOR_Y

    def first_hit(self, box: Aabb, obstacles: Iterable[tuple]) -> Optional[int]:
        """
        Linear scan over (eid, Aabb) pairs.
        Returns the id of the first obstacle overlapping box, or None.
        """
        for eid, other in obstacles:
            if box.overlaps(other):
                return eid
        return None

