import random

from karl_config import RenderConfig, MODE_MIRROR, MODE_OUTLINE, BG, FG
from karl_geometry import grid_cells, grid_extent, is_visible, triangle_center, on_screen
from karl_pattern import PatternSampler
from karl_render import GridRenderer
from fakes import RecordingCanvas


def _setup(mode, side=None, pixels=0, seed=1):
    cfg = RenderConfig(mode)
    if side is not None:
        cfg.side_length = side
    cfg.num_random_pixels = pixels
    sampler = PatternSampler(rng=random.Random(seed))
    sampler.regenerate(cfg.side_length, pixels)
    canvas = RecordingCanvas()
    return cfg, sampler, canvas, GridRenderer(canvas, sampler)


def _visible_cells(side):
    return [(right, verts) for _c, _r, right, verts in grid_cells(side) if is_visible(verts)]


def test_frame_starts_with_clear():
    cfg, _s, canvas, renderer = _setup(MODE_MIRROR)
    renderer.render(cfg)
    renderer.render(cfg)
    assert canvas.clears == 3   # constructor + two frames


def test_mirror_empty_pattern_overlay():
    cfg, sampler, canvas, renderer = _setup(MODE_MIRROR, side=5, pixels=0)
    assert len(sampler.buffer) == 0
    st = renderer.render(cfg)
    assert canvas.points and st.pixels == 0
    assert st.visible == len(_visible_cells(5))
    assert st.lines == 3 * st.visible
    assert canvas.texts[-1][2] == "A:0 P:0 T:0"
    assert canvas.discs == []


def test_mirror_centres_report_area():
    cfg, _s, canvas, renderer = _setup(MODE_MIRROR, side=5, pixels=0)
    cfg.show_centers = True
    st = renderer.render(cfg)
    assert st.centers == len(canvas.discs) > 0
    assert st.average_area == 8
    assert canvas.texts[-1][2] == "A:8 P:0 T:{}".format(st.centers)


def test_overlay_is_white_box_with_black_text():
    cfg, _s, canvas, renderer = _setup(MODE_MIRROR)
    renderer.render(cfg)
    x, y, w, h, color = canvas.rects[-1]
    assert color == FG and x + w == 128 and y == 0
    assert canvas.text_colors == [BG]

    cfg, _s, canvas, renderer = _setup(MODE_OUTLINE)
    cfg.show_centers = True
    renderer.render(cfg)
    assert canvas.rects[-1][4] == FG and canvas.rects[-1][0] == 0
    assert canvas.text_colors == [BG] * len(canvas.texts)


def test_mirrored_pixels_match_translated_pattern():
    cfg, sampler, canvas, renderer = _setup(MODE_MIRROR, side=21, pixels=60, seed=9)
    st = renderer.render(cfg)
    c0 = sampler.ref_center
    expected = 0
    for _right, verts in _visible_cells(21):
        c = triangle_center(verts)
        for p in sampler.buffer:
            q = (c[0] + p[0] - c0[0], c[1] + p[1] - c0[1])
            if on_screen(q[0], q[1]):
                expected += 1
                assert q in canvas.points
    assert st.pixels == expected > 0


def test_outline_solid_lines_count_visible_right_triangles_once():
    # seams once per column boundary, two diagonals per visible |> cell
    for side in (10, 15, 24, 63):
        cfg, _s, canvas, renderer = _setup(MODE_OUTLINE, side=side)
        st = renderer.render(cfg)
        num_cols, _rows = grid_extent(side)
        rights = sum(1 for right, _v in _visible_cells(side) if right)
        assert st.lines == (num_cols + 1) + 2 * rights
        assert len(canvas.lines) == st.lines
        assert len({frozenset(seg) for seg in canvas.lines}) == st.lines
        assert canvas.points == []


def test_outline_dashed_when_lines_off():
    cfg, _s, canvas, renderer = _setup(MODE_OUTLINE)
    cfg.show_lines = False
    st = renderer.render(cfg)
    assert canvas.lines == []
    assert canvas.points
    assert st.lines == 3 * st.visible


def test_outline_info_overlay_toggles():
    cfg, _s, canvas, renderer = _setup(MODE_OUTLINE)
    renderer.render(cfg)
    assert canvas.texts == [] and canvas.discs == []
    cfg.show_info = True
    st = renderer.render(cfg)
    texts = [t for _x, _y, t in canvas.texts]
    assert texts == list(st.outline_text())
    assert texts[0] == "V:{} F:{} P:{}".format(st.visible, st.full, st.partial)
    assert canvas.discs
