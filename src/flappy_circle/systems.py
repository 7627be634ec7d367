"""
systems.py: The per-frame systems. Each one is a plain function taking the
world and the tick context; the simulation decides which run and in what order.
"""

import random
from dataclasses import dataclass
from typing import Callable, Sequence

from .constants import (
    ANIMATION_FRAME_TIME, BACKGROUND_IMAGE, BACKGROUND_PARALLAX, BACKGROUND_TILES,
    BACKGROUND_Z, GAME_OVER_MESSAGE, GROUND_IMAGE, GROUND_START_X, GROUND_TILE_COUNT,
    GROUND_TILE_SIZE, GROUND_Y, GROUND_Z, PIPE_COUNT, PIPE_GAP, PIPE_GAP_MAX_Y,
    PIPE_GAP_MIN_Y, PIPE_HEIGHT, PIPE_IMAGE, PIPE_SPACING, PIPE_START_X, PIPE_WIDTH,
    PIPE_Z, PLAYER_FRAMES, PLAYER_IMAGE, PLAYER_SIZE, PLAYER_START, PLAYER_Z,
    SCREEN_HEIGHT, SCREEN_WIDTH, TICK_TIME
)
from .data_models import (
    AnimationIndices, AnimationTimer, Background, Collider, GameCamera, GameOverEvent,
    GameOverText, GameState, Gravity, Ground, InputState, Pipe, Player, RestartEvent,
    Sprite, Transform, Velocity
)
from .physics_core import Aabb, PhysicsCore
from .variants import Variant
from .world import World


@dataclass
class TickContext:
    variant: Variant
    physics: PhysicsCore
    dt: float = TICK_TIME


System = Callable[[World, TickContext], None]


# ----------------- Startup -----------------

def setup_level(world: World, ctx: TickContext):
    """Spawns the camera and, when enabled, the parallax background."""
    x, y = PLAYER_START
    world.spawn(Transform(x, y), GameCamera())

    if ctx.variant.scroll_background:
        for slot in range(BACKGROUND_TILES):
            world.spawn(
                Transform(x + slot * SCREEN_WIDTH, y, BACKGROUND_Z),
                Background(factor=BACKGROUND_PARALLAX, slot=slot, width=SCREEN_WIDTH),
                Sprite(BACKGROUND_IMAGE, SCREEN_WIDTH, SCREEN_HEIGHT),
            )


def spawn_player(world: World, ctx: TickContext):
    x, y = PLAYER_START
    width, height = PLAYER_SIZE
    eid = world.spawn(
        Transform(x, y, PLAYER_Z),
        Velocity(vx=ctx.variant.player_speed_x, vy=0.0),
        Gravity(),
        Player(),
        Collider(width, height),
        Sprite(PLAYER_IMAGE, width, height),
    )
    if ctx.variant.animate:
        world.attach(eid, AnimationIndices(first=0, last=PLAYER_FRAMES - 1))
        world.attach(eid, AnimationTimer(duration=ANIMATION_FRAME_TIME))


def spawn_ground(world: World, ctx: TickContext):
    for i in range(GROUND_TILE_COUNT):
        world.spawn(
            Transform(GROUND_START_X + i * GROUND_TILE_SIZE, GROUND_Y, GROUND_Z),
            Ground(),
            Collider(GROUND_TILE_SIZE, GROUND_TILE_SIZE),
            Sprite(GROUND_IMAGE, GROUND_TILE_SIZE, GROUND_TILE_SIZE),
        )


def spawn_pipes(world: World, ctx: TickContext):
    """Lays out PIPE_COUNT pipe pairs with a random gap height each."""
    rng = world.resource(random.Random)
    offset = (PIPE_GAP + PIPE_HEIGHT) / 2

    for i in range(PIPE_COUNT):
        x = PIPE_START_X + i * PIPE_SPACING
        gap_y = rng.uniform(PIPE_GAP_MIN_Y, PIPE_GAP_MAX_Y)
        for top, y in ((True, gap_y + offset), (False, gap_y - offset)):
            world.spawn(
                Transform(x, y, PIPE_Z),
                Pipe(top=top),
                Collider(PIPE_WIDTH, PIPE_HEIGHT),
                Sprite(PIPE_IMAGE, PIPE_WIDTH, PIPE_HEIGHT),
            )


# ----------------- Fixed update -----------------

def apply_gravity(world: World, ctx: TickContext):
    for _, (_, velocity) in world.query(Gravity, Velocity):
        ctx.physics.apply_gravity(velocity)


def update_position(world: World, ctx: TickContext):
    for _, (velocity, transform) in world.query(Velocity, Transform):
        ctx.physics.update_position(transform, velocity)


def check_collision(world: World, ctx: TickContext):
    """Ends the run when the player's box touches ground, a pipe, the floor or the ceiling."""
    try:
        player, (_, transform, collider) = world.single(Player, Transform, Collider)
    except LookupError:
        return

    box = Aabb.around(transform, collider)
    obstacles = (
        (eid, Aabb.around(t, c))
        for eid, (t, c) in world.query(Transform, Collider)
        if world.has(eid, Ground) or world.has(eid, Pipe)
    )
    if not ctx.physics.out_of_bounds(box) and ctx.physics.first_hit(box, obstacles) is None:
        return

    world.send(GameOverEvent())
    world.despawn(player)


def handle_game_over(world: World, ctx: TickContext):
    if not world.drain(GameOverEvent):
        return

    state = world.resource(GameState)
    if state.is_game_over:
        return

    state.is_game_over = True
    world.spawn(GameOverText(GAME_OVER_MESSAGE))
    print("Game over. Press R to restart.")


def camera_follow_player(world: World, ctx: TickContext):
    try:
        _, (_, target) = world.single(Player, Transform)
        _, (_, camera) = world.single(GameCamera, Transform)
    except LookupError:
        return

    camera.x = target.x
    if ctx.variant.camera_follow_y:
        camera.y = target.y


def scroll_background(world: World, ctx: TickContext):
    """Keeps the background tiles under the camera, scrolled by parallax."""
    try:
        _, (_, camera) = world.single(GameCamera, Transform)
    except LookupError:
        return

    for _, (background, transform) in world.query(Background, Transform):
        shift = (camera.x * background.factor) % background.width
        transform.x = camera.x - shift + background.slot * background.width
        transform.y = camera.y


# ----------------- Update -----------------

def update_velocity_on_space(world: World, ctx: TickContext):
    if not world.resource(InputState).jump:
        return
    for _, (_, velocity) in world.query(Player, Velocity):
        ctx.physics.flap(velocity)


def check_for_restart(world: World, ctx: TickContext):
    if world.resource(InputState).restart and world.resource(GameState).is_game_over:
        world.send(RestartEvent())


def make_restart_handler(spawners: Sequence[System]) -> System:
    """
    Builds the restart system. On a restart event it clears the message, the
    player and every obstacle, then runs `spawners` to rebuild the level.
    """

    def handle_restart(world: World, ctx: TickContext):
        if not world.drain(RestartEvent):
            return

        for component in (GameOverText, Player, Ground, Pipe):
            for eid in world.query_ids(component):
                world.despawn(eid)

        for spawn in spawners:
            spawn(world, ctx)

        camera_follow_player(world, ctx)
        world.resource(GameState).is_game_over = False
        print("Restarted.")

    return handle_restart


def animate_sprite(world: World, ctx: TickContext):
    for _, (indices, timer, sprite) in world.query(AnimationIndices, AnimationTimer, Sprite):
        if timer.tick(ctx.dt):
            sprite.index = indices.first if sprite.index >= indices.last else sprite.index + 1
