# code.py — Karl Eido Launcher
# CircuitPython 9.x / Adafruit MacroPad RP2040 (128×64 mono OLED)
#
# Purpose:
# - Menu for the two Karl Eido views (mirror pattern / grid outline).
# - Runs the chosen view until Back, then returns to the menu.
#
# Controls:
# - Encoder rotate → Scroll menu items
# - Encoder press:
#     • In menu: Start selected view
#     • In view: Return to menu
# - Keys are read by the running view (see karl_eido.py).
#
# Notes:
# - Uses MerlinChrome.bmp as menu background when present.
# - RAM snapshots are printed around each session so leaks show up on serial.
# - A non-zero session status means the drawing surface or sample buffer
#   could not be allocated; the menu reports it and stays up.

print("Karl Eido\nLoading\n")
import time
import displayio
import terminalio
import gc
from adafruit_display_text import label
from adafruit_macropad import MacroPad
from karl_config import MODE_MIRROR, MODE_OUTLINE, EXIT_OK
from karl_canvas import BitmapCanvas
from karl_macropad import MacroPadInput
from karl_eido import run_session

# ---- RAM debug helpers ----
def ram_snapshot():
    gc.collect()
    return (gc.mem_free(), gc.mem_alloc())

def ram_report(label=""):
    free, alloc = ram_snapshot()
    print(f"[RAM] {label} — free: {free} bytes, allocated: {alloc} bytes, total: {free+alloc} bytes")
    return (free, alloc)

def ram_report_delta(before, label=""):
    b_free, b_alloc = before
    a_free, a_alloc = ram_snapshot()
    print(f"[RAM Δ] {label} — Δfree: {a_free - b_free} bytes, Δalloc: {a_alloc - b_alloc} bytes")
    return (a_free, a_alloc)

ram_report("Boot start")

# ---------- Setup hardware ----------
macropad = MacroPad()
macropad.pixels.fill((0, 0, 0))
keys_in = MacroPadInput(macropad)

VIEWS = [
    ("Karl Eido", MODE_MIRROR),
    ("Tri Lines", MODE_OUTLINE),
]

# ---------- Menu UI ----------
def build_menu_group():
    group = displayio.Group()
    try:
        bmp = displayio.OnDiskBitmap("MerlinChrome.bmp")
        tile = displayio.TileGrid(
            bmp, pixel_shader=getattr(bmp, "pixel_shader", displayio.ColorConverter())
        )
        group.append(tile)
    except Exception:
        pass

    title = label.Label(
        terminalio.FONT, text="Choose a view:", color=0xFFFFFF,
        anchor_point=(0.5, 0.0),
        anchored_position=(macropad.display.width // 2, 31)
    )
    choice = label.Label(
        terminalio.FONT, text=" " * 20, color=0xFFFFFF,
        anchor_point=(0.5, 0.0),
        anchored_position=(macropad.display.width // 2, 45)
    )
    group.append(title)
    group.append(choice)
    return group, title, choice

menu_group, title_lbl, choice_lbl = build_menu_group()

def enter_menu():
    macropad.display.root_group = menu_group
    try:
        macropad.display.auto_refresh = True
    except Exception:
        pass
    try:
        macropad.display.refresh(minimum_frames_per_second=0)
    except Exception:
        try: macropad.display.refresh()
        except Exception: pass

def start_view(name, mode):
    snap = ram_report(f"Before {name}")
    gc.collect()
    try:
        macropad.display.auto_refresh = False
    except Exception:
        pass
    keys_in.flush()
    status = run_session(BitmapCanvas, keys_in, mode, display=macropad.display)
    keys_in.flush()
    ram_report_delta(snap, f"After {name}")
    if status != EXIT_OK:
        print("[karl] session failed, status", status)
        title_lbl.text = "Out of memory"
    else:
        title_lbl.text = "Choose a view:"
    enter_menu()

# ---------- Main loop ----------
enter_menu()
menu_anchor = macropad.encoder
last_encoder_position = macropad.encoder
choice_lbl.text = VIEWS[0][0]

ram_report("After setup complete")

while True:
    pos = macropad.encoder
    if pos != last_encoder_position:
        idx = (pos - menu_anchor) % len(VIEWS)
        choice_lbl.text = VIEWS[idx][0]
        last_encoder_position = pos

    macropad.encoder_switch_debounced.update()
    if macropad.encoder_switch_debounced.pressed:
        idx = (macropad.encoder - menu_anchor) % len(VIEWS)
        name, mode = VIEWS[idx]
        # wait for release so the same press doesn't count as Back
        while macropad.encoder_switch_debounced.pressed:
            macropad.encoder_switch_debounced.update()
            time.sleep(0.01)
        start_view(name, mode)
        last_encoder_position = macropad.encoder

    time.sleep(0.01)
