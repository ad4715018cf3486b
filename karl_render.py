# karl_render.py — one full frame of the triangle grid
# CircuitPython 9.x / CPython
#
# Frame order:
#   clear → (outline + lines: seams) → per cell: cull, stats, draw
#         → overlay box + text
#
# The renderer never touches hardware directly; it talks to whatever canvas
# it was given (BitmapCanvas on the MacroPad, a recording fake in tests).

from karl_config import SCREEN_W, SCREEN_H, BG, FG
from karl_geometry import (
    grid_extent, grid_cells, triangle_center,
    is_visible, is_fully_visible, on_screen,
)
from karl_lines import LineDecorator
from karl_stats import StatsCollector

# ---- Overlay layout ----
TEXT_H = 12
MIRROR_BOX_W = 86
OUTLINE_BOX_W = 100
CENTER_R = 1


class GridRenderer:
    def __init__(self, canvas, sampler, lines=None, stats=None, viewport=(SCREEN_W, SCREEN_H)):
        self.canvas = canvas
        self.sampler = sampler
        self.lines = lines if lines is not None else LineDecorator()
        self.stats = stats if stats is not None else StatsCollector()
        self.viewport = viewport

    def render(self, config):
        c = self.canvas
        st = self.stats
        vp = self.viewport
        side = config.side_length
        mirror = config.mirror
        solid = (not mirror) and config.show_lines

        st.reset()
        c.clear()
        c.set_foreground(FG)

        if solid:
            num_cols, _ = grid_extent(side, vp)
            st.add_lines(self.lines.draw_seams(c, num_cols, side, vp[1]))

        for _col, _row, right, verts in grid_cells(side, vp):
            if not is_visible(verts, vp):
                continue
            st.add_triangle(verts, is_fully_visible(verts, vp))
            center = triangle_center(verts)

            # Culled cells never get here: diagonals are counted only for
            # visible pointing-right triangles.
            if solid:
                st.add_lines(self.lines.draw_owned(c, verts, right))
            else:
                st.add_lines(self.lines.draw_dashed(c, verts))

            if mirror:
                st.add_pixels(self.sampler.draw(c, center, vp))

            if config.show_centers and on_screen(center[0], center[1], vp):
                c.draw_filled_disc(center[0], center[1], CENTER_R)
                st.add_center()

        if mirror:
            self._overlay(vp[0] - MIRROR_BOX_W, MIRROR_BOX_W, (st.mirror_text(),))
        elif config.show_info:
            self._overlay(0, OUTLINE_BOX_W, st.outline_text())
        return st

    def _overlay(self, x, w, rows):
        c = self.canvas
        # white box, black text
        c.set_foreground(FG)
        c.draw_filled_rect(x, 0, w, TEXT_H * len(rows))
        c.set_foreground(BG)
        for i, text in enumerate(rows):
            c.draw_text(x + 2, i * TEXT_H, text)
