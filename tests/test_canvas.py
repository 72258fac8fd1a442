"""Tests for the icon and status bar renderer"""

import pytest
from PIL import Image, ImageDraw

from config.settings import PROGRESS_FILL_COLOR, PROGRESS_TRACK_COLOR, BAR_BACKGROUND
from core.snapshot import PlaybackSnapshot
from rendering.canvas import CanvasRenderer, draw_rounded_rect, progress_fill_width


@pytest.fixture
def renderer():
    return CanvasRenderer((72, 72), (800, 100))


def row_colors(image, y):
    return [image.getpixel((x, y)) for x in range(image.width)]


def test_track_geometry_is_centered(renderer):
    # 50% of 800 wide, 10% of 100 high
    assert renderer.track_geometry == (200, 45, 400, 10)


@pytest.mark.parametrize('progress_ms, duration_ms', [
    (0, 180000),
    (1, 180000),
    (45000, 180000),
    (123456, 234567),
    (179999, 180000),
    (180000, 180000),
    (500000, 180000),
])
def test_fill_width_matches_progress(progress_ms, duration_ms):
    snapshot = PlaybackSnapshot('A', 'B', progress_ms=progress_ms, duration_ms=duration_ms)
    expected = 400 * max(0.0, min(1.0, progress_ms / duration_ms))

    assert abs(progress_fill_width(400, snapshot) - expected) <= 0.5


def test_half_progress_fills_half_the_track():
    snapshot = PlaybackSnapshot('A', 'B', progress_ms=90000, duration_ms=180000)
    assert progress_fill_width(400, snapshot) == 200


def test_no_duration_means_no_fill():
    assert progress_fill_width(400, PlaybackSnapshot('A', 'B', progress_ms=5000)) == 0


def test_rendered_fill_matches_width(renderer):
    snapshot = PlaybackSnapshot('', '', progress_ms=30000, duration_ms=120000)

    bar = renderer.render_bar(snapshot)
    middle = row_colors(bar, 50)

    assert middle.count(PROGRESS_FILL_COLOR) == 100
    assert middle.count(PROGRESS_TRACK_COLOR) == 300
    assert middle[200] == PROGRESS_FILL_COLOR
    assert middle[299] == PROGRESS_FILL_COLOR
    assert middle[300] == PROGRESS_TRACK_COLOR
    assert middle[199] == BAR_BACKGROUND


def test_unknown_duration_draws_empty_track(renderer):
    bar = renderer.render_bar(PlaybackSnapshot('', ''))
    middle = row_colors(bar, 50)

    assert middle.count(PROGRESS_FILL_COLOR) == 0
    assert middle.count(PROGRESS_TRACK_COLOR) == 400


def test_bar_draws_text(renderer):
    blank = renderer.render_bar(PlaybackSnapshot('', ''))
    labelled = renderer.render_bar(PlaybackSnapshot('Blur', 'Song 2'))

    assert blank.tobytes() != labelled.tobytes()


def test_icon_without_artwork_is_black(renderer):
    icon = renderer.render_icon(None)

    assert icon.size == (72, 72)
    assert icon.getcolors() == [(72 * 72, (0, 0, 0))]


def test_icon_artwork_fills_the_key(renderer):
    artwork = Image.new('RGB', (72, 72), (255, 0, 0))

    icon = renderer.render_icon(artwork)

    assert icon.getcolors() == [(72 * 72, (255, 0, 0))]


def test_icon_artwork_is_scaled(renderer):
    artwork = Image.new('RGB', (640, 640), (0, 0, 255))

    icon = renderer.render_icon(artwork)

    assert icon.size == (72, 72)
    for corner in [(0, 0), (71, 0), (0, 71), (71, 71), (36, 36)]:
        r, g, b = icon.getpixel(corner)
        assert r < 5 and g < 5 and b > 250


def test_rendering_is_deterministic(renderer):
    snapshot = PlaybackSnapshot('Blur', 'Song 2', progress_ms=61000, duration_ms=122000)
    artwork = Image.new('RGB', (300, 300), (10, 120, 200))

    first = renderer.render(snapshot, artwork)
    second = renderer.render(snapshot, artwork)

    assert first.icon.tobytes() == second.icon.tobytes()
    assert first.bar.tobytes() == second.bar.tobytes()


def test_rounded_rect_has_round_corners():
    image = Image.new('RGB', (20, 10), (255, 255, 255))
    draw_rounded_rect(ImageDraw.Draw(image), 0, 0, 20, 10, 3, (0, 0, 0))

    assert image.getpixel((0, 0)) == (255, 255, 255)
    assert image.getpixel((19, 9)) == (255, 255, 255)
    assert image.getpixel((0, 5)) == (0, 0, 0)
    assert image.getpixel((10, 0)) == (0, 0, 0)
    assert image.getpixel((10, 5)) == (0, 0, 0)


def test_rounded_rect_zero_width_draws_nothing():
    image = Image.new('RGB', (20, 10), (255, 255, 255))
    draw_rounded_rect(ImageDraw.Draw(image), 0, 0, 0, 10, 3, (0, 0, 0))

    assert image.getcolors() == [(200, (255, 255, 255))]


@pytest.mark.parametrize('width', [1, 2, 3, 4, 5, 6, 7])
def test_rounded_rect_narrow_widths(width):
    image = Image.new('RGB', (20, 10), (255, 255, 255))
    draw_rounded_rect(ImageDraw.Draw(image), 0, 0, width, 10, 3, (0, 0, 0))

    middle = row_colors(image, 5)
    assert middle.count((0, 0, 0)) == width
