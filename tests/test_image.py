import pytest

from minirt.image import Image, PixelQuality


def test_put_and_read_pixel_round_trip():
    img = Image(5, 4)
    img.put_pixel(2, 3, 0x123456)
    assert img.pixel_at(2, 3) == 0x123456
    assert img.pixel_at(0, 0) == 0


def test_full_32_bit_value_round_trips():
    img = Image(2, 2)
    img.put_pixel(1, 1, 0xFF336699)
    assert img.pixel_at(1, 1) == 0xFF336699


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 4)])
def test_put_pixel_outside_is_ignored(x, y):
    img = Image(5, 4)
    img.put_pixel(x, y, 0xFFFFFF)
    assert all(byte == 0 for byte in img.data)


def test_pixel_at_outside_raises():
    img = Image(3, 3)
    with pytest.raises(IndexError):
        img.pixel_at(3, 0)


@pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-2, 3)])
def test_invalid_size_raises(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


def test_quality_sets_grid_size():
    img = Image(8, 8)
    assert img.grid == 1
    img.set_quality(PixelQuality.LOW)
    assert img.grid == 4
    img.set_quality(PixelQuality.HIGH)
    assert img.grid == 1


def test_fill_grid_low_quality_fills_square():
    img = Image(8, 8)
    img.set_quality(PixelQuality.LOW)
    img.fill_grid(4, 0, 0xABCDEF)
    filled = {(x, y) for y in range(8) for x in range(8) if img.pixel_at(x, y) == 0xABCDEF}
    assert filled == {(x, y) for y in range(4) for x in range(4, 8)}


def test_fill_grid_clips_at_edges():
    img = Image(6, 6)
    img.set_quality(PixelQuality.LOW)
    img.fill_grid(4, 4, 0x010203)
    filled = {(x, y) for y in range(6) for x in range(6) if img.pixel_at(x, y) != 0}
    assert filled == {(4, 4), (5, 4), (4, 5), (5, 5)}


def test_fill_grid_high_quality_sets_single_pixel():
    img = Image(4, 4)
    img.fill_grid(1, 2, 0x00FF00)
    nonzero = [(x, y) for y in range(4) for x in range(4) if img.pixel_at(x, y)]
    assert nonzero == [(1, 2)]


def test_grid_origins_cover_every_pixel_once_at_high_quality():
    img = Image(3, 2)
    assert list(img.grid_origins()) == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]


def test_grid_origins_low_quality_step_by_grid():
    img = Image(8, 6)
    img.set_quality(PixelQuality.LOW)
    assert list(img.grid_origins()) == [(0, 0), (4, 0), (0, 4), (4, 4)]


def test_filling_all_origins_covers_image():
    img = Image(10, 7)
    img.set_quality(PixelQuality.LOW)
    for x, y in img.grid_origins():
        img.fill_grid(x, y, 0x112233)
    assert all(img.pixel_at(x, y) == 0x112233 for y in range(7) for x in range(10))


def test_clear_resets_pixels():
    img = Image(3, 3)
    img.put_pixel(1, 1, 0x777777)
    img.clear()
    assert img.pixel_at(1, 1) == 0
    assert len(img.data) == 3 * 3 * 4