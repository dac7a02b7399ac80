import pytest

from cubraycaster.constants import DOOR_OPEN_COLOR, RAY_COLOR, SPRITE_COLOR
from cubraycaster.errors import CubError
from cubraycaster.image import TRANSPARENT, Canvas, Texture, load_xpm, rgb

XPM_BASIC = """/* XPM */
static char *tex[] = {
"2 2 3 1",
"a c #FF0000",
"b c #00ff00",
"c c None",
"ab",
"ca"
};
"""


def _write(tmp_path, text, name="tex.xpm"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_rgb_matches_source_colours():
    assert rgb(255, 0, 0) == RAY_COLOR
    assert rgb(0, 255, 0) == DOOR_OPEN_COLOR
    assert rgb(255, 0, 255) == SPRITE_COLOR


@pytest.mark.parametrize("r,g,b", [(0, 0, 0), (1, 2, 3), (200, 100, 50), (255, 255, 255)])
def test_rgb_channels_round_trip(r, g, b):
    color = rgb(r, g, b)
    assert ((color >> 16) & 255, (color >> 8) & 255, color & 255) == (r, g, b)


def test_canvas_draw_and_get_round_trip():
    canvas = Canvas(4, 3)
    canvas.draw_pixel(2, 1, RAY_COLOR)
    assert canvas.get_pixel(2, 1) == RAY_COLOR
    assert canvas.get_pixel(1, 2) == 0


def test_canvas_ignores_out_of_bounds_writes():
    canvas = Canvas(10, 4)
    canvas.draw_pixel(-1, 0, RAY_COLOR)
    canvas.draw_pixel(10, 0, RAY_COLOR)
    canvas.draw_pixel(0, 5, RAY_COLOR)
    canvas.draw_pixel(0, -1, RAY_COLOR)
    assert set(canvas.pixels) == {0}


def test_canvas_get_out_of_bounds_is_zero():
    canvas = Canvas(3, 3, fill=SPRITE_COLOR)
    assert canvas.get_pixel(3, 0) == 0
    assert canvas.get_pixel(0, -1) == 0
    assert canvas.get_pixel(1, 1) == SPRITE_COLOR


def test_draw_column_is_half_open_and_clipped():
    canvas = Canvas(3, 6)
    canvas.draw_column(1, -2, 3, RAY_COLOR)
    column = [canvas.get_pixel(1, y) for y in range(6)]
    assert column == [RAY_COLOR] * 3 + [0] * 3
    assert all(canvas.get_pixel(0, y) == 0 for y in range(6))


def test_draw_column_outside_canvas_changes_nothing():
    canvas = Canvas(3, 3)
    canvas.draw_column(5, 0, 3, RAY_COLOR)
    assert set(canvas.pixels) == {0}


def test_fill_sets_every_pixel():
    canvas = Canvas(2, 2)
    canvas.fill(DOOR_OPEN_COLOR)
    assert canvas.pixels == [DOOR_OPEN_COLOR] * 4


def test_to_bytes_is_little_endian_words():
    canvas = Canvas(2, 2)
    canvas.draw_pixel(0, 0, 0x112233)
    data = canvas.to_bytes()
    assert len(data) == 16
    assert data[:4] == bytes([0x33, 0x22, 0x11, 0])


def test_canvas_rejects_empty_size():
    with pytest.raises(ValueError):
        Canvas(0, 5)


def test_load_xpm_basic(tmp_path):
    texture = load_xpm(_write(tmp_path, XPM_BASIC))
    assert (texture.width, texture.height) == (2, 2)
    assert texture.pixel(0, 0) == rgb(255, 0, 0)
    assert texture.pixel(1, 0) == rgb(0, 255, 0)
    assert texture.pixel(0, 1) == TRANSPARENT
    assert texture.pixel(1, 1) == rgb(255, 0, 0)


def test_load_xpm_two_chars_per_pixel_and_names(tmp_path):
    text = (
        '"2 1 2 2",\n'
        '"aa c blue",\n'
        '"bb c #FFFF00000000",\n'
        '"bbaa"\n'
    )
    texture = load_xpm(_write(tmp_path, text))
    assert texture.pixels == (rgb(255, 0, 0), rgb(0, 0, 255))


def test_texture_pixel_out_of_range_is_zero():
    texture = Texture(1, 1, (RAY_COLOR,))
    assert texture.pixel(1, 0) == 0
    assert texture.pixel(0, 0) == RAY_COLOR


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(CubError, match="Failed to load texture image"):
        load_xpm(tmp_path / "absent.xpm")


def test_load_xpm_truncated_rows(tmp_path):
    text = XPM_BASIC.replace('"ca"\n', "")
    with pytest.raises(CubError):
        load_xpm(_write(tmp_path, text))


def test_load_xpm_unknown_pixel_key(tmp_path):
    text = XPM_BASIC.replace('"ca"', '"zz"')
    with pytest.raises(CubError):
        load_xpm(_write(tmp_path, text))


def test_load_xpm_unknown_colour_name(tmp_path):
    text = XPM_BASIC.replace("#FF0000", "notacolour")
    with pytest.raises(CubError):
        load_xpm(_write(tmp_path, text))