import pytest

from karl_config import MIN_SIDE_MIRROR, MAX_SIDE, SIDE_STEP
from karl_geometry import (
    triangle_height, triangle_vertices, triangle_center, triangle_area,
    point_in_triangle, pointing_right, is_visible, is_fully_visible,
    grid_extent, grid_cells,
)

SIDES = range(MIN_SIDE_MIRROR, MAX_SIDE + 1, SIDE_STEP)


def _edges2(verts):
    a, b, c = verts
    d = lambda p, q: (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2
    return sorted((d(a, b), d(b, c), d(c, a)))


@pytest.mark.parametrize("side", SIDES)
def test_height_is_side_times_half_sqrt3(side):
    assert triangle_height(side) == pytest.approx(side * 0.8660254, rel=1e-6)


def test_vertices_pointing_right_and_left():
    assert triangle_vertices(0, 0, 10, True) == ((0, 26), (0, 36), (8, 31))
    assert triangle_vertices(1, 0, 10) == ((8, 31), (16, 26), (16, 36))


def test_negative_rows_truncate_toward_zero():
    # -1 * 5 / 2 truncates to -2, not -3
    assert triangle_vertices(0, -1, 5) == ((0, 29), (4, 27), (4, 31))


def test_orientation_alternates():
    assert pointing_right(0, 0)
    assert not pointing_right(1, 0)
    assert not pointing_right(0, -1)
    assert pointing_right(3, -1)


@pytest.mark.parametrize("side", SIDES)
def test_grid_triangles_are_congruent(side):
    ref = _edges2(triangle_vertices(0, 0, side, True))
    for _c, _r, _right, verts in grid_cells(side):
        assert len(set(verts)) == 3
        assert _edges2(verts) == ref


@pytest.mark.parametrize("side", SIDES)
def test_centroid_lies_inside(side):
    for _c, _r, _right, verts in grid_cells(side):
        assert point_in_triangle(triangle_center(verts), verts)


def test_area_is_truncated_shoelace():
    assert triangle_area(((0, 26), (0, 36), (8, 31))) == 40
    assert triangle_area(((0, 29), (0, 33), (4, 31))) == 8
    # winding does not matter
    assert triangle_area(((0, 36), (0, 26), (8, 31))) == 40


def test_point_in_triangle_boundary_and_outside():
    verts = ((0, 26), (0, 36), (8, 31))
    for v in verts:
        assert point_in_triangle(v, verts)
    assert not point_in_triangle((8, 26), verts)
    assert not point_in_triangle((100, 100), verts)


def test_degenerate_triangle_rejects_everything():
    verts = ((0, 0), (1, 1), (2, 2))
    assert not point_in_triangle((1, 1), verts)


def test_visibility_culls_only_when_all_vertices_share_a_side():
    assert not is_visible(((-10, 5), (-10, 15), (-2, 10)))
    assert not is_visible(((130, 5), (128, 15), (140, 10)))
    assert not is_visible(((5, -10), (15, -1), (10, -5)))
    assert not is_visible(((5, 64), (15, 70), (10, 80)))
    assert is_visible(((-5, 10), (10, -5), (-5, -5)))


def test_huge_triangle_covering_screen_is_partial():
    verts = ((-100, -100), (300, -100), (-100, 300))
    assert is_visible(verts)
    assert not is_fully_visible(verts)


def test_fully_visible_bounds_are_half_open():
    assert is_fully_visible(((0, 0), (127, 0), (0, 63)))
    assert not is_fully_visible(((0, 0), (128, 0), (0, 63)))
    assert not is_fully_visible(((0, 0), (127, 0), (0, 64)))


@pytest.mark.parametrize("side", SIDES)
def test_visibility_is_monotonic(side):
    big, small = (128, 64), (64, 32)
    for _c, _r, _right, verts in grid_cells(side):
        if is_fully_visible(verts, big):
            assert is_visible(verts, big)
        if is_fully_visible(verts, small):
            assert is_fully_visible(verts, big)
        if is_visible(verts, small):
            assert is_visible(verts, big)


def test_grid_extent_has_overscan():
    assert grid_extent(5) == (31, 27)
    assert grid_extent(63) == (4, 4)


def test_grid_cells_cover_rows_symmetrically():
    cols, rows = grid_extent(21)
    cells = list(grid_cells(21))
    assert len(cells) == cols * 2 * rows
    assert {r for _c, r, _x, _v in cells} == set(range(-rows, rows))
