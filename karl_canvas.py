# karl_canvas.py — drawing surface for the MacroPad OLED
# CircuitPython 9.x (or CPython + Blinka displayio)
#
# A 1-bit displayio.Bitmap behind a TileGrid, plus a small pool of text
# labels for the overlay. Exposes the canvas calls the renderer uses:
#   clear, set_foreground, draw_point, draw_line, draw_filled_disc,
#   draw_filled_rect, draw_text
#
# Everything clips to the screen; nothing raises for off-screen coordinates.
# Lines fully on-screen go through bitmaptools.draw_line, anything clipped is
# plotted pixel by pixel.

import displayio, terminalio
import bitmaptools
from adafruit_display_text import label
from karl_config import SCREEN_W, SCREEN_H, BG, FG
from karl_lines import line_points

TEXT_COLORS = (0x000000, 0xFFFFFF)


def make_surface(w=SCREEN_W, h=SCREEN_H):
    bmp = displayio.Bitmap(w, h, 2)
    pal = displayio.Palette(2); pal[0] = 0x000000; pal[1] = 0xFFFFFF
    return bmp, pal


class BitmapCanvas:
    def __init__(self, width=SCREEN_W, height=SCREEN_H):
        self.width, self.height = width, height
        self.bmp, self.pal = make_surface(width, height)
        self.group = displayio.Group()
        self.group.append(displayio.TileGrid(self.bmp, pixel_shader=self.pal))
        self.color = FG
        self._labels = {}

    def _inside(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    # ---------- Canvas API ----------
    def clear(self):
        self.bmp.fill(BG)
        for lbl in self._labels.values():
            if lbl.text:
                lbl.text = ""

    def set_foreground(self, color):
        self.color = FG if color else BG

    def draw_point(self, x, y):
        if self._inside(x, y):
            self.bmp[x, y] = self.color

    def draw_line(self, x0, y0, x1, y1):
        if self._inside(x0, y0) and self._inside(x1, y1):
            bitmaptools.draw_line(self.bmp, x0, y0, x1, y1, self.color)
            return
        for x, y in line_points(x0, y0, x1, y1):
            self.draw_point(x, y)

    def draw_filled_disc(self, x, y, r):
        rr = r * r
        for dy in range(-r, r + 1):
            for dx in range(-r, r + 1):
                if dx * dx + dy * dy <= rr:
                    self.draw_point(x + dx, y + dy)

    def draw_filled_rect(self, x, y, w, h):
        # fill_region takes (x1, y1, x2, y2) with exclusive far corner
        x1 = max(0, x); y1 = max(0, y)
        x2 = min(self.width, x + w); y2 = min(self.height, y + h)
        if x1 >= x2 or y1 >= y2:
            return
        bitmaptools.fill_region(self.bmp, x1, y1, x2, y2, self.color)

    def draw_text(self, x, y, text):
        lbl = self._labels.get((x, y))
        if lbl is None:
            lbl = label.Label(terminalio.FONT, text=text, color=TEXT_COLORS[self.color],
                              anchor_point=(0, 0), anchored_position=(x, y))
            self._labels[(x, y)] = lbl
            self.group.append(lbl)
            return
        lbl.color = TEXT_COLORS[self.color]
        if lbl.text != text:
            lbl.text = text

    # ---------- Helpers ----------
    def pixel(self, x, y):
        return self.bmp[x, y]

    def texts(self):
        return [lbl.text for lbl in self._labels.values() if lbl.text]
