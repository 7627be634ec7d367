"""
data_models.py: Components, resources and events shared by the systems.
"""

from dataclasses import dataclass


# ----------------- Components -----------------

@dataclass
class Transform:
    """World position. y points up, origin at the centre of the first view."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Velocity:
    vx: float = 0.0
    vy: float = 0.0


@dataclass
class Gravity:
    pass


@dataclass
class Player:
    pass


@dataclass
class GameCamera:
    pass


@dataclass
class Ground:
    pass


@dataclass
class Pipe:
    """One half of a pipe pair."""
    top: bool = False


@dataclass
class Collider:
    """Axis-aligned bounding box centred on the entity's transform."""
    width: float
    height: float


@dataclass
class Sprite:
    image: str
    width: float
    height: float
    index: int = 0


@dataclass
class AnimationIndices:
    first: int
    last: int


@dataclass
class AnimationTimer:
    """Repeating timer; keeps the remainder when it wraps."""
    duration: float
    elapsed: float = 0.0

    def tick(self, dt: float) -> bool:
        """Advance by dt. Returns True once per elapsed period."""
        self.elapsed += dt
        if self.elapsed >= self.duration:
            self.elapsed -= self.duration
            return True
        return False


@dataclass
class Background:
    """Parallax background tile."""
    factor: float
    slot: int
    width: float


@dataclass
class GameOverText:
    message: str


# ----------------- Resources -----------------

@dataclass
class GameState:
    is_game_over: bool = False


@dataclass
class InputState:
    """Keys pressed during the current frame."""
    jump: bool = False
    restart: bool = False

    def clear(self):
        self.jump = False
        self.restart = False


# ----------------- Events -----------------

@dataclass
class GameOverEvent:
    pass


@dataclass
class RestartEvent:
    pass
