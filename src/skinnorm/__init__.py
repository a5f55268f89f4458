from .exceptions import InvalidDimensions, SkinError, SkinSourceError
from .geometry import Rect, SkinGeometry, cape_scale, skin_scale
from .skin_loader import (
    ModelType,
    SkinLoader,
    infer_model_type,
    load_cape,
    load_skin,
    normalize_cape,
    normalize_skin,
)
from .sources import TextureSource
from .surface import Surface

__version__ = "0.1.0"
