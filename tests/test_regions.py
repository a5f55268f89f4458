import numpy as np
import pytest

from skinnorm.geometry import Rect
from skinnorm.regions import copy_region, flip_horizontal, has_transparency, is_area_black
from skinnorm.surface import Surface

from conftest import BLACK, GRAY, fill


def test_has_transparency_single_pixel():
    surface = Surface(8, 8)
    fill(surface, 0, 0, 8, 8, GRAY)
    rect = Rect(2, 2, 4, 4)
    assert not has_transparency(surface, rect)

    surface.data[5, 5, 3] = 0
    assert has_transparency(surface, rect)
    # Outside the rect does not count
    assert not has_transparency(surface, Rect(0, 0, 2, 8))


def test_has_transparency_partial_alpha():
    surface = Surface(4, 4)
    fill(surface, 0, 0, 4, 4, GRAY)
    surface.data[0, 3, 3] = 254
    assert has_transparency(surface, Rect(0, 0, 4, 4))


def test_is_area_black():
    surface = Surface(6, 6)
    fill(surface, 0, 0, 6, 6, BLACK)
    rect = Rect(1, 1, 4, 4)
    assert is_area_black(surface, rect)


@pytest.mark.parametrize("channel, value", [(0, 1), (1, 1), (2, 1), (3, 254)])
def test_is_area_black_single_mismatch(channel, value):
    surface = Surface(6, 6)
    fill(surface, 0, 0, 6, 6, BLACK)
    surface.data[4, 2, channel] = value
    assert not is_area_black(surface, Rect(1, 1, 4, 4))


def test_transparent_black_is_not_black():
    surface = Surface(2, 2)
    assert not is_area_black(surface, Rect(0, 0, 2, 2))
    assert has_transparency(surface, Rect(0, 0, 2, 2))


def test_empty_rect():
    surface = Surface(4, 4)
    assert not has_transparency(surface, Rect(1, 1, 0, 3))
    assert is_area_black(surface, Rect(1, 1, 0, 3))


@pytest.mark.parametrize("w, h", [(0, 0), (0, 3), (1, 1), (2, 3), (3, 2), (5, 4), (8, 12)])
def test_flip_is_involution(w, h):
    rng = np.random.default_rng(w * 31 + h)
    original = rng.integers(0, 256, size=(h, w, 4), dtype=np.uint8)
    buffer = original.copy()
    flip_horizontal(flip_horizontal(buffer))
    assert np.array_equal(buffer, original)


def test_flip_swaps_columns_and_keeps_centre():
    buffer = np.arange(1 * 5 * 4, dtype=np.uint8).reshape(1, 5, 4)
    expected = buffer[:, ::-1].copy()
    flip_horizontal(buffer)
    assert np.array_equal(buffer, expected)
    assert np.array_equal(buffer[0, 2], [8, 9, 10, 11])


def test_copy_region_mirrored():
    surface = Surface(8, 4)
    surface.data[0:2, 0:3] = np.arange(2 * 3 * 4, dtype=np.uint8).reshape(2, 3, 4)
    src = surface.get_region(0, 0, 3, 2)

    copy_region(surface, Rect(0, 0, 3, 2), Rect(4, 2, 3, 2), mirror=True)

    assert np.array_equal(surface.get_region(4, 2, 3, 2), src[:, ::-1])
    # Source untouched
    assert np.array_equal(surface.get_region(0, 0, 3, 2), src)


def test_copy_region_plain():
    surface = Surface(8, 4)
    surface.data[0:2, 0:3] = 200
    copy_region(surface, Rect(0, 0, 3, 2), Rect(5, 1, 3, 2), mirror=False)
    assert np.array_equal(surface.get_region(5, 1, 3, 2), surface.get_region(0, 0, 3, 2))
    assert not surface.data[0, 5].any()
