"""
Astronum - Configuration loader.

Loads settings from .env file with sensible defaults.
"""
import os
from pathlib import Path

import pygame
from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 480)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 560)
TITLE_HEIGHT = _get_int('TITLE_HEIGHT', 80)  # Equation strip above the arena
FPS = _get_int('FPS', 60)

# Tokens
MIN_ASTEROID_COUNT = 3
DEFAULT_ASTEROID_COUNT = max(MIN_ASTEROID_COUNT, _get_int('ASTEROID_COUNT', 6))
MAX_SUM = _get_int('MAX_SUM', 100)
MAX_GENERATION_ATTEMPTS = _get_int('MAX_GENERATION_ATTEMPTS', 100_000)
ASTEROID_SIZE_RATIO = _get_float('ASTEROID_SIZE_RATIO', 0.10)  # Of min(arena w, h)
ASTEROID_BOUND_OFFSET = _get_int('ASTEROID_BOUND_OFFSET', 10)
ASTEROID_SPEED = _get_float('ASTEROID_SPEED', 1.0)  # Pixels per tick

# Scheduler
TICK_INTERVAL_MS = _get_float('TICK_INTERVAL_MS', 5.0)
RESUME_INTERVAL_MS = _get_float('RESUME_INTERVAL_MS', 100.0)

# Ship
SHIP_LENGTH_RATIO = _get_float('SHIP_LENGTH_RATIO', 0.14)
SHIP_BREADTH_RATIO = _get_float('SHIP_BREADTH_RATIO', 0.10)
TURN_ANGLE = _get_float('TURN_ANGLE', 2.0)  # Degrees per tick
THRUST_DISTANCE = _get_float('THRUST_DISTANCE', 1.0)  # Pixels per tick
INITIAL_HEADING = 90.0  # Tip pointing up
LEGACY_STEERING_DISTANCE = _get_bool('LEGACY_STEERING_DISTANCE', False)

# Keys
KEYS_FORWARD = (pygame.K_UP, pygame.K_w)
KEYS_BACKWARD = (pygame.K_DOWN, pygame.K_s)
KEYS_LEFT = (pygame.K_LEFT, pygame.K_a)
KEYS_RIGHT = (pygame.K_RIGHT, pygame.K_d)

# Colors
BACKGROUND_COLOR = (12, 14, 30)
TITLE_COLOR = (30, 34, 60)
SHIP_COLOR = (230, 230, 240)
ASTEROID_COLOR = (120, 110, 100)
ASTEROID_TEXT_COLOR = (255, 255, 255)
SLOT_COLOR = (60, 66, 100)
TEXT_COLOR = (230, 230, 240)
OVERLAY_COLOR = (0, 0, 0, 170)

# Overlay text
TEXT_INTRO = ("Solve the Equation", "Use arrow keys, mouse or finger to move. Click anywhere to start.")
TEXT_PAUSED = ("Paused", "Click anywhere to resume.")
TEXT_RETRY = ("Try Again", "Please solve the equation to continue.")
TEXT_SUCCESS = ("Success", "")
