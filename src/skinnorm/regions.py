import numpy as np

from .geometry import Rect
from .surface import Surface

OPAQUE = 0xFF
OPAQUE_BLACK = np.array([0, 0, 0, OPAQUE], dtype=np.uint8)


def has_transparency(surface: Surface, rect: Rect) -> bool:
    """True if any pixel in the rect has alpha below fully opaque."""
    region = surface.get_region(*rect.pixels())
    return bool(np.any(region[:, :, 3] != OPAQUE))


def is_area_black(surface: Surface, rect: Rect) -> bool:
    """True if every pixel in the rect is exactly (0, 0, 0, 255). Empty rects count as black."""
    region = surface.get_region(*rect.pixels())
    return bool(np.all(region == OPAQUE_BLACK))


def flip_horizontal(buffer: np.ndarray) -> np.ndarray:
    """
    Mirrors a (h, w, 4) buffer left-right in place.
    Column x swaps with column w-1-x for x < w // 2; an odd centre column stays put.
    """
    w = buffer.shape[1]
    half = w // 2
    if half == 0:
        return buffer
    left = buffer[:, :half].copy()
    right = buffer[:, w - half:].copy()
    buffer[:, :half] = right[:, ::-1]
    buffer[:, w - half:] = left[:, ::-1]
    return buffer


def copy_region(surface: Surface, src: Rect, dst: Rect, mirror: bool):
    """
    Copies the pixels of src to the top-left of dst, optionally mirrored.
    dst is expected to have the same size as src; only its corner is used.
    """
    sx, sy, sw, sh = src.pixels()
    dx, dy, _, _ = dst.pixels()
    buffer = surface.get_region(sx, sy, sw, sh)
    if mirror:
        flip_horizontal(buffer)
    surface.put_region(buffer, dx, dy)
