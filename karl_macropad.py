# karl_macropad.py — MacroPad keys → Karl Eido input events
# CircuitPython 9.x / Adafruit MacroPad RP2040
#
# Key layout (launcher numbering 0..11):
#
#      K0  [K1 Up]   K2
#     [K3 Left] [K4 Ok] [K5 Right]
#      K6  [K7 Down] K8
#      K9   K10      K11
#
#   • Encoder press → Back
#   • Up/Down/Left/Right: PRESS on key down, then REPEAT every
#     REPEAT_INTERVAL once held past REPEAT_DELAY
#   • Ok: LONG_PRESS once held past LONG_PRESS_SEC, otherwise PRESS on
#     release (same short/long split as Spin the Bottle's K4)
#
# poll(timeout) blocks for at most `timeout` seconds and returns None when
# nothing happened, which doubles as the idle tick for the session loop.

import time
from micropython import const
from karl_config import POLL_TIMEOUT, LONG_PRESS_SEC, REPEAT_DELAY, REPEAT_INTERVAL
from karl_input import (
    InputEvent, KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_OK, KEY_BACK,
    PRESS, REPEAT, LONG_PRESS,
)

K_UP, K_LEFT, K_OK, K_RIGHT, K_DOWN = const(1), const(3), const(4), const(5), const(7)
KEYMAP = {K_UP: KEY_UP, K_DOWN: KEY_DOWN, K_LEFT: KEY_LEFT, K_RIGHT: KEY_RIGHT, K_OK: KEY_OK}
POLL_SLEEP = 0.01


class MacroPadInput:
    def __init__(self, macropad, clock=time.monotonic, sleep=time.sleep):
        self.mac = macropad
        self.clock = clock
        self.sleep = sleep
        self._down = {}          # key -> press time
        self._next_repeat = {}   # key -> next repeat time
        self._long_sent = False
        self._enc_last = False

    def poll(self, timeout=POLL_TIMEOUT):
        deadline = self.clock() + timeout
        while True:
            ev = self._step()
            if ev is not None:
                return ev
            if self.clock() >= deadline:
                return None
            self.sleep(POLL_SLEEP)

    def flush(self):
        while self.mac.keys.events.get():
            pass
        self._down.clear()
        self._next_repeat.clear()
        self._long_sent = False
        try:
            sw = self.mac.encoder_switch_debounced
            sw.update()
            self._enc_last = bool(sw.pressed)
        except Exception:
            pass

    # ---------- internals ----------
    def _step(self):
        now = self.clock()

        ev = self._encoder()
        if ev is not None:
            return ev

        ev = self._key_event(now)
        if ev is not None:
            return ev

        return self._held(now)

    def _encoder(self):
        sw = self.mac.encoder_switch_debounced
        sw.update()
        pressed = bool(sw.pressed)
        if pressed == self._enc_last:
            return None
        self._enc_last = pressed
        return InputEvent(KEY_BACK, PRESS) if pressed else None

    def _key_event(self, now):
        e = self.mac.keys.events.get()
        if not e:
            return None
        key = KEYMAP.get(e.key_number)
        if key is None:
            return None
        if e.pressed:
            self._down[key] = now
            if key == KEY_OK:
                self._long_sent = False
                return None
            self._next_repeat[key] = now + REPEAT_DELAY
            return InputEvent(key, PRESS)
        # released
        had = self._down.pop(key, None)
        self._next_repeat.pop(key, None)
        if key == KEY_OK and had is not None and not self._long_sent:
            return InputEvent(KEY_OK, PRESS)
        return None

    def _held(self, now):
        for key, since in self._down.items():
            if key == KEY_OK:
                if not self._long_sent and now - since >= LONG_PRESS_SEC:
                    self._long_sent = True
                    return InputEvent(KEY_OK, LONG_PRESS)
            elif now >= self._next_repeat[key]:
                self._next_repeat[key] = now + REPEAT_INTERVAL
                return InputEvent(key, REPEAT)
        return None
