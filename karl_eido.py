# ---------------------------------------------------------------------------
# karl_eido.py — Karl Eido: triangular grid mirror / outline viewer
# CircuitPython 9.x / Adafruit MacroPad RP2040 (128×64 mono OLED)
#
# OVERVIEW
# ────────────────────────────────────────────────
# Tiles the OLED with equilateral triangles lying on their side and offers
# two views of the same grid:
#   • Mirror:  random pixels sampled in one reference triangle are copied
#              into every visible triangle, around each centroid.
#   • Outline: the grid edges (solid, each edge once) or dash-dot outlines,
#              with visible / full / partial counts on demand.
#
# CONTROLS
# ────────────────────────────────────────────────
# • K1 / K7: triangle side + / − (held keys auto-repeat)
# • K3 / K5: random pixel count − / + (mirror)
# • K4 short: toggle centres (mirror) / info overlay (outline)
# • K4 long:  toggle solid grid lines (outline)
# • Encoder press: back to the launcher menu
#
# LOOP
# ────────────────────────────────────────────────
# Single-threaded pull loop: poll the input source with a ~100 ms timeout,
# hand events to the controller, redraw once when something visible
# changed. Canvas and input source are injected, so the whole loop runs
# against fakes on a desktop.
# ---------------------------------------------------------------------------
import random
from karl_config import (
    RenderConfig, MODE_MIRROR, MAX_PIXELS, POLL_TIMEOUT,
    EXIT_OK, EXIT_ALLOC_FAILED, debug_print,
)
from karl_pattern import SampleBuffer, PatternSampler
from karl_render import GridRenderer
from karl_input import InteractionController


class Session:
    def __init__(self, canvas, input_source, mode=MODE_MIRROR, rng=None, display=None):
        self.canvas = canvas
        self.input = input_source
        self.display = display
        self.config = RenderConfig(mode)
        self.buffer = SampleBuffer(MAX_PIXELS)
        self.sampler = PatternSampler(self.buffer, rng or random)
        self.renderer = GridRenderer(canvas, self.sampler)
        self.controller = InteractionController(self.config, self.sampler)
        self.frames = 0
        self._prev_root = None
        self._attached = False

    # ---- host registration ----
    def _attach(self):
        group = getattr(self.canvas, "group", None)
        if self.display is None or group is None:
            return
        self._prev_root = self.display.root_group
        self.display.root_group = group
        self._attached = True

    def _detach(self):
        if not self._attached:
            return
        try:
            self.display.root_group = self._prev_root
        except Exception:
            pass
        self._prev_root = None
        self._attached = False

    # ---- loop ----
    def render(self):
        stats = self.renderer.render(self.config)
        self.frames += 1
        if self.display is not None:
            try:
                self.display.refresh(minimum_frames_per_second=0)
            except Exception:
                pass
        return stats

    def step(self, timeout=POLL_TIMEOUT):
        """Poll once; True if a frame was drawn."""
        event = self.input.poll(timeout)
        if event is None:
            return False
        if self.controller.handle(event):
            self.render()
            return True
        return False

    def run(self):
        self._attach()
        try:
            self.controller.refresh()
            self.render()
            while self.config.running:
                self.step()
        finally:
            self._detach()
        debug_print("session ended after", self.frames, "frames")
        return EXIT_OK


def run_session(make_canvas, input_source, mode=MODE_MIRROR, display=None, rng=None):
    """Build the canvas and session, run until Back; returns an exit status."""
    try:
        canvas = make_canvas()
        session = Session(canvas, input_source, mode, rng=rng, display=display)
    except MemoryError as e:
        print("[karl] MemoryError while allocating:", e)
        print("[karl] Hint: free the menu group and GC before starting.")
        return EXIT_ALLOC_FAILED
    return session.run()
