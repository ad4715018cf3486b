# karl_geometry.py — triangle grid geometry + visibility culling
# CircuitPython 9.x / CPython (pure integer + float math, no display access)
#
# The grid is a column strip of equilateral triangles lying on their side:
#
#     |\  /|\
#     | \/ | \      pointing-right  |>   when (col + row) is even
#     | /\ | /      pointing-left   <|   when (col + row) is odd
#     |/  \|/
#
# Vertical seams sit at x = int(col * height). Rows step by side // 2 around
# CENTER_Y. All positions truncate toward zero; rounding shifts the seams by a
# pixel and the tiling no longer closes.
#
# Points are plain (x, y) int tuples. Vertices are 3-tuples of points in a
# fixed winding order per orientation.

import math
from karl_config import SCREEN_W, SCREEN_H, CENTER_Y

SQRT3_2 = math.sqrt(3) / 2
VIEWPORT = (SCREEN_W, SCREEN_H)


def _tdiv(a, b):
    # C-style integer division (truncates toward zero)
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


# ---------- GridGeometry ----------
def triangle_height(side_length):
    return side_length * SQRT3_2


def pointing_right(col, row):
    return (col + row) % 2 == 0


def triangle_vertices(col, row, side_length, right=None):
    """Vertices of grid cell (col, row).

    `right` defaults to the orientation implied by the cell parity.
    """
    if right is None:
        right = pointing_right(col, row)
    h = triangle_height(side_length)
    hi = int(h)
    half = side_length // 2
    base_x = int(col * h)
    base_y = CENTER_Y + _tdiv(row * side_length, 2)
    if right:
        return ((base_x, base_y - half),
                (base_x, base_y + half),
                (base_x + hi, base_y))
    return ((base_x, base_y),
            (base_x + hi, base_y - half),
            (base_x + hi, base_y + half))


def triangle_center(vertices):
    (x0, y0), (x1, y1), (x2, y2) = vertices
    return (_tdiv(x0 + x1 + x2, 3), _tdiv(y0 + y1 + y2, 3))


def triangle_area(vertices):
    # Shoelace, halved with truncation: counts "half-parallelograms"
    (x0, y0), (x1, y1), (x2, y2) = vertices
    twice = x0 * (y1 - y2) + x1 * (y2 - y0) + x2 * (y0 - y1)
    return abs(twice) // 2


def point_in_triangle(p, vertices):
    px, py = p
    (x0, y0), (x1, y1), (x2, y2) = vertices
    denom = (y1 - y2) * (x0 - x2) + (x2 - x1) * (y0 - y2)
    if denom == 0:
        return False
    a = ((y1 - y2) * (px - x2) + (x2 - x1) * (py - y2)) / denom
    b = ((y2 - y0) * (px - x2) + (x0 - x2) * (py - y2)) / denom
    c = 1.0 - a - b
    return 0 <= a <= 1 and 0 <= b <= 1 and 0 <= c <= 1


# ---------- VisibilityCuller ----------
def on_screen(x, y, viewport=VIEWPORT):
    return 0 <= x < viewport[0] and 0 <= y < viewport[1]


def is_visible(vertices, viewport=VIEWPORT):
    # Conservative: only culled when every vertex is past the same edge.
    w, h = viewport
    xs = [v[0] for v in vertices]
    ys = [v[1] for v in vertices]
    if max(xs) < 0 or min(xs) >= w:
        return False
    if max(ys) < 0 or min(ys) >= h:
        return False
    return True


def is_fully_visible(vertices, viewport=VIEWPORT):
    for x, y in vertices:
        if not on_screen(x, y, viewport):
            return False
    return True


def grid_extent(side_length, viewport=VIEWPORT):
    """(num_cols, num_rows) covering the viewport with one cell of overscan.

    Columns run 0..num_cols-1, rows run -num_rows..num_rows-1.
    """
    w, h = viewport
    num_cols = int(w / triangle_height(side_length)) + 2
    num_rows = int(h / (side_length / 2.0)) + 2
    return num_cols, num_rows


def grid_cells(side_length, viewport=VIEWPORT):
    """Yield (col, row, right, vertices) for every enumerated cell."""
    num_cols, num_rows = grid_extent(side_length, viewport)
    for col in range(num_cols):
        for row in range(-num_rows, num_rows):
            right = pointing_right(col, row)
            yield col, row, right, triangle_vertices(col, row, side_length, right)
