import numpy as np
import pytest
from PIL import Image

from skinnorm.surface import Surface

GRAY = (128, 128, 128, 255)
BLACK = (0, 0, 0, 255)


def solid_image(width, height, color=GRAY):
    return Image.new("RGBA", (width, height), color)


def noise_image(width, height, seed=0, opaque=True):
    rng = np.random.default_rng(seed)
    data = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    if opaque:
        data[:, :, 3] = 255
    return Image.fromarray(data)


def fill(surface, x, y, w, h, color):
    surface.data[y:y + h, x:x + w] = color


@pytest.fixture
def gray_skin():
    """Modern 64x64 skin, fully opaque mid-gray."""
    return Surface.from_image(solid_image(64, 64))
