from typing import Optional, Tuple, Union
from PIL import Image
import numpy as np


class Surface:
    """
    Mutable RGBA pixel grid.
    Pixels live in a (height, width, 4) uint8 numpy array, the same layout
    np.array() gives for an RGBA Pillow image, so data[y, x] is one pixel.
    """

    def __init__(self, width: int = 0, height: int = 0):
        self.data = np.zeros((max(int(height), 0), max(int(width), 0), 4), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @classmethod
    def from_image(cls, image: Image.Image) -> "Surface":
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        surface = cls()
        surface.data = np.array(image, dtype=np.uint8).reshape(image.height, image.width, 4)
        return surface

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.data)

    def _clip(self, x: int, y: int, w: int, h: int) -> Tuple[int, int, int, int]:
        # Returns (x0, y0, x1, y1) clamped to the surface
        x0 = min(max(x, 0), self.width)
        y0 = min(max(y, 0), self.height)
        x1 = min(max(x + w, x0), self.width)
        y1 = min(max(y + h, y0), self.height)
        return x0, y0, x1, y1

    def resize(self, width: int, height: int):
        """
        Reallocates the pixel storage. Contents are undefined until cleared or drawn.
        """
        self.data = np.empty((max(int(height), 0), max(int(width), 0), 4), dtype=np.uint8)

    def clear(self, x: int, y: int, w: int, h: int):
        x0, y0, x1, y1 = self._clip(int(x), int(y), int(w), int(h))
        self.data[y0:y1, x0:x1] = 0

    def get_region(self, x: int, y: int, w: int, h: int) -> np.ndarray:
        """
        Returns a (h, w, 4) copy of the pixels in the rect.
        Parts of the rect outside the surface read as transparent black.
        """
        x, y, w, h = int(x), int(y), max(int(w), 0), max(int(h), 0)
        region = np.zeros((h, w, 4), dtype=np.uint8)
        x0, y0, x1, y1 = self._clip(x, y, w, h)
        region[y0 - y:y1 - y, x0 - x:x1 - x] = self.data[y0:y1, x0:x1]
        return region

    def put_region(self, buffer: np.ndarray, x: int, y: int):
        """
        Writes a (h, w, 4) buffer with its top-left corner at (x, y). No resampling.
        """
        x, y = int(x), int(y)
        h, w = buffer.shape[:2]
        x0, y0, x1, y1 = self._clip(x, y, w, h)
        self.data[y0:y1, x0:x1] = buffer[y0 - y:y1 - y, x0 - x:x1 - x]

    def draw_image(
        self,
        source: Union[Image.Image, "Surface"],
        dx: int,
        dy: int,
        dw: Optional[int] = None,
        dh: Optional[int] = None,
        src_rect: Optional[Tuple[int, int, int, int]] = None,
    ):
        """
        Copies source pixels into the destination rect.
        src_rect (x, y, w, h) selects part of the source; the default is the whole source.
        dw/dh default to the source size. Different sizes are resampled
        with nearest neighbour to keep texels sharp.
        """
        if isinstance(source, Surface):
            pixels = source.data
        else:
            if source.mode != "RGBA":
                source = source.convert("RGBA")
            pixels = np.array(source, dtype=np.uint8).reshape(source.height, source.width, 4)

        if src_rect is not None:
            sx, sy, sw, sh = (int(v) for v in src_rect)
            pixels = pixels[max(sy, 0):max(sy + sh, 0), max(sx, 0):max(sx + sw, 0)]

        src_h, src_w = pixels.shape[:2]
        dw = src_w if dw is None else int(dw)
        dh = src_h if dh is None else int(dh)
        if dw <= 0 or dh <= 0 or src_w == 0 or src_h == 0:
            return

        if (dw, dh) != (src_w, src_h):
            resized = Image.fromarray(np.ascontiguousarray(pixels)).resize((dw, dh), Image.NEAREST)
            pixels = np.array(resized, dtype=np.uint8).reshape(dh, dw, 4)

        self.put_region(pixels, dx, dy)

    def __repr__(self):
        return f"Surface({self.width}x{self.height})"
