from tuitris.vec2 import Vec2

# ================== CONFIG ==================

# --- Board Settings ---
GAME_SIZE = Vec2(10, 22)
SPAWN_POSITION = Vec2(3, 0)

# --- Timing Settings ---
INPUT_RATE = 0.1
POLL_TIMEOUT = 0.1
LOOP_RATE = 0.01
GRAVITY_RATE = 1.0

# --- Visual Settings ---
TILE_SIZE = Vec2(3, 2)
TILE_CHARS = ["┌─┐", "└─┘"]
MIN_SIZE = Vec2(60, 48)
DEBUG_GREETING = "Hello World"
LEFT_PANEL_TEXT = "this is the left block"
RIGHT_PANEL_TEXT = "this is the right block"

# --- Keybinds ---
# Case sensitive. Anything not listed is a no-op.
KEYBINDS = {
    "q": "quit",
    "d": "lock",
    "h": "left",
    "l": "right",
    "j": "down",
    "H": "rotate_ccw",
    "L": "rotate_cw",
}

# --- Logging ---
LOGGER_NAME = "tuitris"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# ============== END CONFIG ==================
