# karl_input.py — input events + interaction state machine
# CircuitPython 9.x / CPython
#
# Controls:
#   • Up / Down (press or repeat)    → side length ± SIDE_STEP, clamped
#   • Left / Right (press or repeat) → random pixel count ± 1 (mirror mode)
#   • Ok short press                 → toggle centres / info overlay
#   • Ok long press                  → toggle solid grid lines (outline mode)
#   • Back                           → stop the session
#
# Size or pixel-count changes mark the pattern dirty and the sampler is
# refilled before handle() returns, so the next frame already sees it.

from collections import namedtuple
from micropython import const
from karl_config import MAX_SIDE, SIDE_STEP, MODE_OUTLINE, debug_print

# ---- Keys ----
KEY_UP = const(0)
KEY_DOWN = const(1)
KEY_LEFT = const(2)
KEY_RIGHT = const(3)
KEY_OK = const(4)
KEY_BACK = const(5)

# ---- Event kinds ----
PRESS = const(0)
REPEAT = const(1)
LONG_PRESS = const(2)

KEY_NAMES = ("Up", "Down", "Left", "Right", "Ok", "Back")
KIND_NAMES = ("Press", "Repeat", "LongPress")

InputEvent = namedtuple("InputEvent", ("key", "kind"))


class InteractionController:
    def __init__(self, config, sampler=None):
        self.config = config
        self.sampler = sampler
        self.dirty = False

    def handle(self, event):
        """Apply one event; True when something visible changed."""
        cfg = self.config
        key, kind = event.key, event.kind
        changed = False

        if key == KEY_BACK:
            cfg.running = False
            return False

        if key == KEY_OK:
            if kind == PRESS:
                cfg.show_centers = not cfg.show_centers
                changed = True
            elif kind == LONG_PRESS and cfg.mode == MODE_OUTLINE:
                cfg.show_lines = not cfg.show_lines
                changed = True
            return changed

        if kind not in (PRESS, REPEAT):
            return False

        if key == KEY_UP:
            if cfg.side_length < MAX_SIDE:
                cfg.side_length = min(MAX_SIDE, cfg.side_length + SIDE_STEP)
                changed = self.dirty = True
        elif key == KEY_DOWN:
            if cfg.side_length > cfg.min_side:
                cfg.side_length = max(cfg.min_side, cfg.side_length - SIDE_STEP)
                changed = self.dirty = True
        elif key == KEY_LEFT and cfg.mirror:
            if cfg.num_random_pixels > 0:
                cfg.num_random_pixels -= 1
                changed = self.dirty = True
        elif key == KEY_RIGHT and cfg.mirror:
            cfg.num_random_pixels += 1
            changed = self.dirty = True

        if self.dirty:
            self.refresh()
        if changed:
            debug_print(KEY_NAMES[key], KIND_NAMES[kind], "->", cfg)
        return changed

    def refresh(self):
        if self.sampler is not None and self.config.mirror:
            self.sampler.regenerate(self.config.side_length, self.config.num_random_pixels)
        self.dirty = False
