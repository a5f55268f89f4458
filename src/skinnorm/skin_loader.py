import enum
import logging
from typing import Tuple
from PIL import Image

from .exceptions import InvalidDimensions
from .geometry import Rect, SkinGeometry, cape_scale, skin_scale
from .regions import copy_region, has_transparency, is_area_black
from .surface import Surface

logger = logging.getLogger(__name__)


class ModelType(str, enum.Enum):
    DEFAULT = "default"
    SLIM = "slim"

    def __str__(self):
        return self.value


class SkinLoader:

    @staticmethod
    def load_skin(surface: Surface, image) -> None:
        """
        Draws a skin onto the surface in the modern 64x64-family layout.
        Square skins are drawn as-is. 2:1 skins (Legacy format) are drawn into
        the top half of a square surface and their limbs are mirrored into the
        left leg / left arm slots.
        Raises InvalidDimensions before touching the surface for any other shape.
        """
        width, height = image.width, image.height

        if width == height:
            surface.resize(width, height)
            surface.clear(0, 0, width, height)
            surface.draw_image(image, 0, 0, width, height)
        elif width == 2 * height:
            logger.debug("Detected %dx%d skin, converting to %dx%d (Legacy format)", width, height, width, width)
            side = width
            surface.resize(side, side)
            surface.clear(0, 0, side, side)
            surface.draw_image(image, 0, 0, side, side // 2)
            SkinLoader.convert_skin_to_modern(surface, side)
        else:
            raise InvalidDimensions(width, height)

    @staticmethod
    def load_cape(surface: Surface, image) -> None:
        """
        Draws a cape onto a surface sized to the 64x32 cape grid.
        Never fails on shape: unknown ratios use the fallback scale.
        """
        scale = cape_scale(image.width, image.height)
        width = int(SkinGeometry.CAPE_GRID_WIDTH * scale)
        height = int(SkinGeometry.CAPE_GRID_HEIGHT * scale)
        logger.debug("Cape %dx%d -> scale %.3f, surface %dx%d", image.width, image.height, scale, width, height)

        surface.resize(width, height)
        surface.clear(0, 0, width, height)
        surface.draw_image(image, 0, 0, image.width, image.height)

    @staticmethod
    def fix_opaque_skin(surface: Surface, width: int) -> bool:
        """
        Some ancient skins have no transparent pixels (nor a helmet).
        Their helmet area has to be cleared, otherwise it renders as solid black.
        Returns True if the helmet was cleared.
        """
        scale = skin_scale(width)
        if has_transparency(surface, SkinGeometry.LEGACY_BAND.scaled(scale)):
            return False

        logger.debug("Opaque legacy skin, clearing helmet area")
        for face in SkinGeometry.HELMET_FACES.values():
            surface.clear(*face.scaled(scale).pixels())
        return True

    @staticmethod
    def convert_skin_to_modern(surface: Surface, width: int) -> None:
        """
        Upgrades a legacy skin (already drawn in the top half of a square
        surface) to the modern layout. The helmet fix has to run first, the
        copies below would otherwise change what it reads.
        """
        scale = skin_scale(width)
        SkinLoader.fix_opaque_skin(surface, width)

        for src, dst_x, dst_y in SkinGeometry.LEGACY_LIMB_COPIES.values():
            dst = Rect(dst_x, dst_y, src.w, src.h)
            copy_region(surface, src.scaled(scale), dst.scaled(scale), mirror=True)

    @staticmethod
    def detect_model(surface: Surface) -> ModelType:
        """
        Detects if a modern layout skin is Default (Steve, 4px arms) or Slim (Alex, 3px arms).

        Slim arms leave a 2px wide strip unused after the bottom face and after
        the back face of each arm. First layer pixels are never transparent, so a
        transparent pixel in any strip means slim. Some editors fill the unused
        strips with solid black instead, so all four strips black also means slim.
        """
        scale = skin_scale(surface.width)
        probes = [probe.scaled(scale) for probe in SkinGeometry.SLIM_PROBES.values()]

        is_slim = (
            any(has_transparency(surface, probe) for probe in probes)
            or all(is_area_black(surface, probe) for probe in probes)
        )
        model = ModelType.SLIM if is_slim else ModelType.DEFAULT
        logger.debug("Inferred %s model for %dx%d skin", model, surface.width, surface.height)
        return model

    @staticmethod
    def normalize_skin(image: Image.Image) -> Tuple[Surface, ModelType]:
        surface = Surface()
        SkinLoader.load_skin(surface, image)
        return surface, SkinLoader.detect_model(surface)

    @staticmethod
    def normalize_cape(image: Image.Image) -> Surface:
        surface = Surface()
        SkinLoader.load_cape(surface, image)
        return surface


load_skin = SkinLoader.load_skin
load_cape = SkinLoader.load_cape
infer_model_type = SkinLoader.detect_model
normalize_skin = SkinLoader.normalize_skin
normalize_cape = SkinLoader.normalize_cape
