# -----------------------------------------------------------------------------
# Karl Eido Configuration Module
# -----------------------------------------------------------------------------
# Shared constants, debug toggle and the mutable render configuration for the
# Karl Eido triangle-grid app. Imported by every other karl_* module so the
# screen geometry, size limits and key timings live in one place.
#
# Typical Contents:
#   DEBUG / debug_print(*args)
#     Serial diagnostics, only printed when DEBUG is True.
#
#   RenderConfig
#     Side length, sample count and display flags for one running session.
#     Created once per session; mutated only by the input controller.
# -----------------------------------------------------------------------------
from micropython import const

DEBUG = False

# ---- Screen (mono OLED) ----
SCREEN_W, SCREEN_H = const(128), const(64)
CENTER_Y = const(31)
BG, FG = const(0), const(1)

# ---- Modes ----
MODE_MIRROR = const(0)    # random pixels reflected into every triangle
MODE_OUTLINE = const(1)   # grid edges + statistics

# ---- Triangle size ----
MIN_SIDE_MIRROR = const(5)
MIN_SIDE_OUTLINE = const(10)
MAX_SIDE = const(63)
SIDE_STEP = const(2)

# ---- Sampling ----
MAX_PIXELS = const(200)

# ---- Input timing (seconds) ----
POLL_TIMEOUT = 0.1
LONG_PRESS_SEC = 1.0
REPEAT_DELAY = 0.5
REPEAT_INTERVAL = 0.1

# ---- Exit status ----
EXIT_OK = const(0)
EXIT_ALLOC_FAILED = const(1)


def debug_print(*args, **kwargs):
    """Print only if DEBUG is enabled."""
    if DEBUG:
        print("[karl]", *args, **kwargs)


def min_side_for(mode):
    return MIN_SIDE_OUTLINE if mode == MODE_OUTLINE else MIN_SIDE_MIRROR


class RenderConfig:
    def __init__(self, mode=MODE_MIRROR):
        self.mode = mode
        self.side_length = min_side_for(mode)
        self.num_random_pixels = 0
        self.show_centers = False
        self.show_lines = True
        self.running = True

    @property
    def min_side(self):
        return min_side_for(self.mode)

    # Outline mode calls the same flag "info": centres + stats overlay.
    @property
    def show_info(self):
        return self.show_centers

    @show_info.setter
    def show_info(self, value):
        self.show_centers = bool(value)

    @property
    def mirror(self):
        return self.mode == MODE_MIRROR

    def __repr__(self):
        return "RenderConfig(mode={}, side={}, pixels={}, centers={}, lines={}, running={})".format(
            self.mode, self.side_length, self.num_random_pixels,
            self.show_centers, self.show_lines, self.running)
