# karl_stats.py — per-frame statistics for the debug overlay
# CircuitPython 9.x / CPython
#
# Everything is reset at the start of each frame; nothing is averaged across
# frames. All grid triangles are congruent, so area is measured once.

from karl_geometry import triangle_area


class StatsCollector:
    def __init__(self):
        self.reset()

    def reset(self):
        self.full = 0
        self.partial = 0
        self.lines = 0
        self.area = None
        self.centers = 0
        self.pixels = 0

    # ---- accumulation ----
    def add_triangle(self, vertices, fully_visible):
        if fully_visible:
            self.full += 1
        else:
            self.partial += 1
        if self.area is None:
            self.area = triangle_area(vertices)

    def add_lines(self, n):
        self.lines += n

    def add_pixels(self, n):
        self.pixels += n

    def add_center(self):
        self.centers += 1

    # ---- derived ----
    @property
    def visible(self):
        return self.full + self.partial

    @property
    def average_area(self):
        # Only reported for triangles whose centre marker was drawn
        if not self.centers or self.area is None:
            return 0
        return self.area

    @property
    def mean_pixels(self):
        if not self.centers:
            return 0
        return self.pixels // self.centers

    # ---- overlay text ----
    def mirror_text(self):
        return "A:{} P:{} T:{}".format(self.average_area, self.mean_pixels, self.centers)

    def outline_text(self):
        return ("V:{} F:{} P:{}".format(self.visible, self.full, self.partial),
                "L:{} A:{}".format(self.lines, self.average_area))

    def __repr__(self):
        return "StatsCollector(vis={}, full={}, partial={}, lines={}, area={}, centers={}, pixels={})".format(
            self.visible, self.full, self.partial, self.lines, self.area, self.centers, self.pixels)
