"""
constants.py: Centralized configuration for window, timing, physics and layout.
"""

# -------- Window Config --------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_TITLE = "Flappy Circle"
CLEAR_COLOR = (135, 206, 235)   # Sky blue
RENDER_FPS = 60

# -------- Time Config --------
TICK_MS = 16                    # Fixed simulation step
TICK_TIME = TICK_MS / 1000.0    # Fixed time step (seconds)
MAX_FRAME_TIME = 0.25           # Frame time cap fed to the accumulator

# -------- Physics Config (world units per tick) --------
GRAVITY = -0.1                  # Added to velocity.y every tick
JUMP_VELOCITY = 5.0             # velocity.y after a jump
PLAYER_SPEED_X = 2.0            # Horizontal drift in the scrolling variants

# -------- Player Config --------
PLAYER_START = (0.0, 0.0)
PLAYER_SIZE = (32.0, 32.0)
PLAYER_Z = 1.0
PLAYER_FRAMES = 3               # Frames in the player sprite sheet
ANIMATION_FRAME_TIME = 0.1      # Seconds per animation frame

# -------- Pipe Config --------
PIPE_COUNT = 50                 # Pipe pairs
PIPE_WIDTH = 64.0
PIPE_HEIGHT = 500.0
PIPE_GAP = 180.0
PIPE_SPACING = 300.0
PIPE_START_X = 400.0
PIPE_GAP_MIN_Y = -120.0
PIPE_GAP_MAX_Y = 150.0
PIPE_Z = 0.4

# -------- Ground Config --------
GROUND_TILE_SIZE = 64.0
# Runs from the left edge of the first view to a screen past the last pipe
GROUND_TILE_COUNT = int((PIPE_START_X + PIPE_COUNT * PIPE_SPACING + SCREEN_WIDTH) // GROUND_TILE_SIZE)
GROUND_START_X = -SCREEN_WIDTH / 2 + GROUND_TILE_SIZE / 2
GROUND_Y = -SCREEN_HEIGHT / 2 + GROUND_TILE_SIZE / 2
GROUND_Z = 0.5

# -------- Play Area --------
# Touching either line ends the run
CEILING_Y = SCREEN_HEIGHT / 2
FLOOR_Y = -SCREEN_HEIGHT / 2

# -------- Background Config --------
BACKGROUND_PARALLAX = 0.5
BACKGROUND_TILES = 2
BACKGROUND_Z = -1.0

# -------- Assets --------
ASSETS_DIR = "assets"
PLAYER_IMAGE = "circle.png"
GROUND_IMAGE = "ground.png"
PIPE_IMAGE = "pipe.png"
BACKGROUND_IMAGE = "background.png"
FONT_FILE = "font.ttf"
FONT_SIZE = 40

# -------- HUD --------
GAME_OVER_MESSAGE = "Game Over! Press R to restart"
GAME_OVER_COLOR = (220, 40, 40)
HELP_COLOR = (40, 40, 40)
HELP_FONT_SIZE = 24
