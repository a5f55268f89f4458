from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    def scaled(self, scale: float) -> "Rect":
        return Rect(self.x * scale, self.y * scale, self.w * scale, self.h * scale)

    def pixels(self) -> Tuple[int, int, int, int]:
        """
        Integer pixel box (x, y, w, h).
        Fractional coordinates are truncated toward zero, the same way for
        reads, writes and clears so every access sees identical rects.
        """
        return int(self.x), int(self.y), int(self.w), int(self.h)


class SkinGeometry:
    # All tables are in 64-unit grid space. Multiply by skin_scale() at the
    # point of surface access, never before.
    GRID_WIDTH = 64

    # Head + body band of a legacy skin (top half of the square canvas).
    LEGACY_BAND = Rect(0, 0, 64, 32)

    # Helmet (hat) overlay faces, 8x8 each.
    HELMET_FACES = {
        "top": Rect(40, 0, 8, 8),
        "bottom": Rect(48, 0, 8, 8),
        "right": Rect(32, 8, 8, 8),
        "front": Rect(40, 8, 8, 8),
        "left": Rect(48, 8, 8, 8),
        "back": Rect(56, 8, 8, 8),
    }

    # Legacy -> modern copies: name -> (source rect, destination x, destination y).
    # The right leg/arm are mirrored into the left leg/arm slots.
    # Face Layout (u, v, w, h, d) = (0, 16, 4, 12, 4) for the leg and
    # (40, 16, 4, 12, 4) for the arm:
    # Top: (u+d, v, w, d), Bottom: (u+d+w, v, w, d)
    # Right: (u, v+d, d, h), Front: (u+d, v+d, w, h)
    # Left: (u+d+w, v+d, d, h), Back: (u+d+w+d, v+d, w, h)
    LEGACY_LIMB_COPIES = {
        "leg_top": (Rect(4, 16, 4, 4), 20, 48),
        "leg_bottom": (Rect(8, 16, 4, 4), 24, 48),
        "leg_outer": (Rect(0, 20, 4, 12), 24, 52),
        "leg_front": (Rect(4, 20, 4, 12), 20, 52),
        "leg_inner": (Rect(8, 20, 4, 12), 16, 52),
        "leg_back": (Rect(12, 20, 4, 12), 28, 52),
        "arm_top": (Rect(44, 16, 4, 4), 36, 48),
        "arm_bottom": (Rect(48, 16, 4, 4), 40, 48),
        "arm_outer": (Rect(40, 20, 4, 12), 40, 52),
        "arm_front": (Rect(44, 20, 4, 12), 36, 52),
        "arm_inner": (Rect(48, 20, 4, 12), 32, 52),
        "arm_back": (Rect(52, 20, 4, 12), 44, 52),
    }

    # Strips that only exist as unused space in the slim layout.
    # Slim right arm (44,16)->(40,20): top/bottom are 3x4, front/back are 3x12,
    # leaving a 2 wide gap after the bottom face and after the back face.
    # Same for the slim left arm at (36,48)->(32,52).
    SLIM_PROBES = {
        "right_arm_top": Rect(50, 16, 2, 4),
        "right_arm_back": Rect(54, 20, 2, 12),
        "left_arm_top": Rect(42, 48, 2, 4),
        "left_arm_back": Rect(46, 52, 2, 12),
    }

    # Cape grid conventions: (ratio width, ratio height, grid width)
    # 64x32 is checked separately as a 2:1 test.
    CAPE_GRID_WIDTH = 64
    CAPE_GRID_HEIGHT = 32
    CAPE_RATIOS = (
        (22, 17, 22),
        (23, 11, 46),
    )
    CAPE_FALLBACK_GRID_WIDTH = 21.25


def skin_scale(width: int) -> float:
    return width / 64.0


def cape_scale(width: int, height: int) -> float:
    """
    Scale of a cape texture relative to the 64x32 cape grid.
    Ratios are tested with integer cross-multiplication, first match wins:
    64x32 (2:1), 22x17, 46x22, then a 21.25 wide fallback for anything else.
    """
    if width == 2 * height:
        return width / SkinGeometry.CAPE_GRID_WIDTH
    for ratio_w, ratio_h, grid_width in SkinGeometry.CAPE_RATIOS:
        if width * ratio_h == height * ratio_w:
            return width / grid_width
    return width / SkinGeometry.CAPE_FALLBACK_GRID_WIDTH
