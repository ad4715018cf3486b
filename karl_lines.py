# karl_lines.py — grid edge drawing
# CircuitPython 9.x / CPython
#
# Two styles over the same edge set:
#   • Dash-dot: each triangle edge walked with Bresenham, pixels drawn
#     through the cyclic ". .. " stipple. The stipple index advances once per
#     traversed pixel, so the dash phase follows the path, not x or y.
#   • Solid, deduplicated: every vertical seam once per column, plus the two
#     diagonals owned by each pointing-right triangle. Pointing-left
#     triangles own nothing; their edges are the neighbours' diagonals and
#     the seams.
#
# Every draw_* returns the number of lines it emitted so the caller can feed
# the line statistic.

from karl_geometry import triangle_height

# 1 = draw, 0 = skip
DASH_DOT = (1, 0, 1, 1, 0)


def line_points(x0, y0, x1, y1):
    """Yield each pixel of the digital line from (x0,y0) to (x1,y1) inclusive."""
    dx = abs(x1 - x0); dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy; x += sx
        if e2 < dx:
            err += dx; y += sy


def dash_dot_points(x0, y0, x1, y1, pattern=DASH_DOT):
    n = len(pattern)
    i = 0
    for x, y in line_points(x0, y0, x1, y1):
        if pattern[i]:
            yield x, y
        i = (i + 1) % n


def draw_dash_dot_line(canvas, x0, y0, x1, y1, pattern=DASH_DOT):
    for x, y in dash_dot_points(x0, y0, x1, y1, pattern):
        canvas.draw_point(x, y)


class LineDecorator:
    def __init__(self, pattern=DASH_DOT):
        self.pattern = pattern

    # ---------- Dash-dot ----------
    def draw_dashed(self, canvas, vertices):
        a, b, c = vertices
        for p, q in ((a, b), (b, c), (c, a)):
            draw_dash_dot_line(canvas, p[0], p[1], q[0], q[1], self.pattern)
        return 3

    # ---------- Solid, deduplicated ----------
    def draw_seams(self, canvas, num_cols, side_length, height):
        # One full-height vertical line per column boundary (0..num_cols).
        h = triangle_height(side_length)
        for col in range(num_cols + 1):
            x = int(col * h)
            canvas.draw_line(x, 0, x, height - 1)
        return num_cols + 1

    def draw_owned(self, canvas, vertices, right):
        if not right:
            return 0
        top, bottom, apex = vertices
        canvas.draw_line(top[0], top[1], apex[0], apex[1])
        canvas.draw_line(bottom[0], bottom[1], apex[0], apex[1])
        return 2
