"""
simulation.py: Schedules the systems and steps the world.
Knows nothing about pygame, so it runs headless.
"""

import random
from typing import List, Optional

from .constants import MAX_FRAME_TIME, TICK_TIME
from .data_models import GameState, InputState, Player
from .physics_core import PhysicsCore
from .systems import (
    System, TickContext, animate_sprite, apply_gravity, camera_follow_player,
    check_collision, check_for_restart, handle_game_over, make_restart_handler,
    scroll_background, setup_level, spawn_ground, spawn_pipes, spawn_player,
    update_position, update_velocity_on_space
)
from .variants import Variant
from .world import World


class FixedTimestep:
    """Turns variable frame time into a whole number of fixed ticks."""

    def __init__(self, step: float = TICK_TIME, max_frame_time: float = MAX_FRAME_TIME):
        self.step = step
        self.max_frame_time = max_frame_time
        self.accumulator = 0.0

    def advance(self, frame_time: float) -> int:
        """Adds frame_time and returns how many ticks are due. Keeps the remainder."""
        self.accumulator += min(max(frame_time, 0.0), self.max_frame_time)
        ticks = 0
        while self.accumulator >= self.step:
            self.accumulator -= self.step
            ticks += 1
        return ticks


class Simulation:
    """
    One running game: the world plus the Startup, FixedUpdate and Update
    schedules for the chosen variant.
    """

    def __init__(self, variant: Variant, seed: Optional[int] = None):
        self.variant = variant
        self.physics = PhysicsCore()
        self.world = World()
        self.world.insert_resource(GameState())
        self.world.insert_resource(InputState())
        self.world.insert_resource(random.Random(seed))

        self.timestep = FixedTimestep()
        self.tick_count = 0
        self.started = False

        self.startup_systems: List[System] = []
        self.fixed_systems: List[System] = []
        self.update_systems: List[System] = []
        self._build_schedules()

    def _build_schedules(self):
        v = self.variant

        # 1. Startup
        spawners = [spawn_player]
        if v.has_ground:
            spawners.append(spawn_ground)
        if v.has_pipes:
            spawners.append(spawn_pipes)
        self.startup_systems = [setup_level, *spawners]

        # 2. Fixed update
        if v.gravity_first:
            self.fixed_systems = [apply_gravity, update_position]
        else:
            self.fixed_systems = [update_position, apply_gravity]
        if v.has_collision:
            self.fixed_systems += [check_collision, handle_game_over]
        self.fixed_systems.append(camera_follow_player)
        if v.scroll_background:
            self.fixed_systems.append(scroll_background)

        # 3. Per-frame update
        self.update_systems = [update_velocity_on_space]
        if v.has_collision:
            self.update_systems += [check_for_restart, make_restart_handler(spawners)]
        if v.animate:
            self.update_systems.append(animate_sprite)

    def _run(self, systems: List[System], dt: float):
        ctx = TickContext(variant=self.variant, physics=self.physics, dt=dt)
        for system in systems:
            system(self.world, ctx)

    def startup(self):
        """Runs the startup schedule once."""
        if self.started:
            return
        self._run(self.startup_systems, TICK_TIME)
        self.started = True

    def fixed_update(self):
        """Advances the simulation by one fixed tick."""
        self.tick_count += 1
        self._run(self.fixed_systems, TICK_TIME)

    def update(self, frame_time: float, jump: bool = False, restart: bool = False) -> int:
        """
        Runs one rendered frame: the fixed ticks that are due, then the
        per-frame systems with this frame's input. Returns the ticks run.
        """
        self.startup()

        ticks = self.timestep.advance(frame_time)
        for _ in range(ticks):
            self.fixed_update()

        keys = self.world.resource(InputState)
        keys.jump = jump
        keys.restart = restart
        self._run(self.update_systems, frame_time)
        keys.clear()
        return ticks

    @property
    def is_game_over(self) -> bool:
        return self.world.resource(GameState).is_game_over

    @property
    def player_count(self) -> int:
        return self.world.count(Player)
