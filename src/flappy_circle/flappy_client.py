#!/usr/bin/env python3
"""
flappy_client.py

Window, input and rendering for the simulation, using pygame.
The simulation runs on a fixed 16 ms tick; drawing runs at RENDER_FPS.
"""

import pygame
from typing import Tuple

from .assets import AssetServer
from .constants import (
    ASSETS_DIR, CLEAR_COLOR, GAME_OVER_COLOR, HELP_COLOR, HELP_FONT_SIZE, RENDER_FPS,
    SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
)
from .data_models import GameCamera, GameOverText, Pipe, Sprite, Transform
from .simulation import Simulation
from .variants import Variant


def world_to_screen(x: float, y: float, camera: Transform) -> Tuple[float, float]:
    """Maps world coordinates (y up) to screen pixels (y down) around the camera."""
    return (x - camera.x + SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2 - (y - camera.y))


class FlappyClient:
    def __init__(self, variant: Variant, seed=None, assets_dir: str = ASSETS_DIR):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.sim = Simulation(variant, seed=seed)
        self.assets = AssetServer(assets_dir)
        self.screen_rect = self.screen.get_rect()

        # Input collected between frames
        self.jump_pressed = False
        self.restart_pressed = False

    def run(self):
        """The main client loop."""
        self.sim.startup()

        running = True
        while running:
            frame_time = self.clock.tick(RENDER_FPS) / 1000.0
            running = self.handle_events(pygame.event.get())

            self.sim.update(frame_time, jump=self.jump_pressed, restart=self.restart_pressed)
            self.jump_pressed = False
            self.restart_pressed = False

            self.draw(self.screen)
            pygame.display.flip()

        pygame.quit()

    def handle_events(self, events) -> bool:
        """Records this frame's key presses. Returns False when asked to quit."""
        for event in events:
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.jump_pressed = True
            elif event.key == pygame.K_r:
                self.restart_pressed = True
        return True

    def camera(self) -> Transform:
        try:
            _, (_, transform) = self.sim.world.single(GameCamera, Transform)
        except LookupError:
            return Transform()
        return transform

    def draw(self, screen: pygame.Surface):
        """Renders sprites back to front, then the HUD."""
        world = self.sim.world
        camera = self.camera()
        screen.fill(CLEAR_COLOR)

        # Sprites, sorted by depth
        drawables = sorted(world.query(Transform, Sprite), key=lambda item: item[1][0].z)
        for eid, (transform, sprite) in drawables:
            size = (round(sprite.width), round(sprite.height))
            rect = pygame.Rect((0, 0), size)
            rect.center = world_to_screen(transform.x, transform.y, camera)
            if not rect.colliderect(self.screen_rect):
                continue

            pipe = world.get(eid, Pipe)
            flip = pipe is not None and pipe.top
            screen.blit(self.assets.frame(sprite.image, sprite.index, size, flip_y=flip), rect)

        # HUD
        font = self.assets.font()
        for _, (text,) in world.query(GameOverText):
            surf = font.render(text.message, True, GAME_OVER_COLOR)
            screen.blit(surf, surf.get_rect(center=self.screen_rect.center))

        help_text = "Space = Jump | R = Restart | Esc = Quit"
        help_surf = self.assets.font(HELP_FONT_SIZE).render(help_text, True, HELP_COLOR)
        screen.blit(help_surf, (10, SCREEN_HEIGHT - 30))
