# karl_pattern.py — mirror-mode random pattern
# CircuitPython 9.x / CPython
#
# Random pixels are sampled once inside the reference triangle (col 0, row 0,
# pointing right) and kept in a fixed-size buffer. Every visible triangle then
# shows the same pixels shifted by (its centroid - reference centroid), so the
# whole grid carries translated copies of one pattern.
#
# The buffer is allocated once at MAX_PIXELS and only its logical length
# changes; regeneration overwrites from slot 0.

import random
from karl_config import MAX_PIXELS, debug_print
from karl_geometry import (
    triangle_height, triangle_vertices, triangle_center,
    point_in_triangle, on_screen, VIEWPORT,
)


class SampleBuffer:
    def __init__(self, capacity=MAX_PIXELS):
        self.capacity = capacity
        self._slots = [(0, 0)] * capacity
        self.count = 0

    def reset(self):
        self.count = 0

    def append(self, point):
        if self.count >= self.capacity:
            return False
        self._slots[self.count] = point
        self.count += 1
        return True

    def full(self):
        return self.count >= self.capacity

    def __len__(self):
        return self.count

    def __getitem__(self, i):
        if i < 0:
            i += self.count
        if not 0 <= i < self.count:
            raise IndexError("sample index out of range")
        return self._slots[i]

    def __iter__(self):
        for i in range(self.count):
            yield self._slots[i]


def reference_triangle(side_length):
    verts = triangle_vertices(0, 0, side_length, True)
    return verts, triangle_center(verts)


def mirror_point(point, center, ref_center):
    return (center[0] + point[0] - ref_center[0],
            center[1] + point[1] - ref_center[1])


class PatternSampler:
    def __init__(self, buffer=None, rng=random):
        self.buffer = buffer if buffer is not None else SampleBuffer()
        self.rng = rng
        self.side_length = 0
        self.ref_center = (0, 0)

    def regenerate(self, side_length, num_random_pixels):
        """Refill the buffer with up to num_random_pixels samples.

        One draw per requested pixel, no retries: rejected draws simply
        leave the buffer shorter.
        """
        buf = self.buffer
        buf.reset()
        verts, center = reference_triangle(side_length)
        self.side_length = side_length
        self.ref_center = center

        span_x = int(triangle_height(side_length))
        half = side_length // 2
        x0 = verts[0][0]
        y0 = verts[0][1] - half     # box spans v0.y +- s/2

        for _ in range(num_random_pixels):
            if buf.full():
                break
            px = x0 + self.rng.randint(0, span_x)
            py = y0 + self.rng.randint(0, 2 * half)
            if not point_in_triangle((px, py), verts):
                continue
            # centroid pixel is reserved for the centre marker
            if (px, py) == center:
                continue
            buf.append((px, py))

        debug_print("regenerated", len(buf), "of", num_random_pixels,
                    "pixels at side", side_length)
        return len(buf)

    def mirrored(self, center):
        ref = self.ref_center
        for p in self.buffer:
            yield mirror_point(p, center, ref)

    def draw(self, canvas, center, viewport=VIEWPORT):
        """Plot the pattern around `center`; returns on-screen pixels drawn."""
        drawn = 0
        for x, y in self.mirrored(center):
            if on_screen(x, y, viewport):
                canvas.draw_point(x, y)
                drawn += 1
        return drawn
