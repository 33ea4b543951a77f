"""Window, timing and logging settings."""

from .logger import Level

TITLE = "Practical Tools for Simple Design"

WINDOW_POS_UNDEFINED = 0x1FFF0000
WINDOW_POS_X = WINDOW_POS_UNDEFINED
WINDOW_POS_Y = WINDOW_POS_UNDEFINED

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

DEFAULT_LOG_LEVEL = Level.DEBUG

# Frames per second limit; 0 turns the cap off.
FPS_CAP = 60