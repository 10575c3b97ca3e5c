from .color_types import ColorSpace, HUE_SPACES, CONVERTIBLE_SPACES, is_hue_space
from .request import ComponentRequest, ALL, FIRST, SECOND, THIRD

__all__ = [
    "ColorSpace",
    "HUE_SPACES",
    "CONVERTIBLE_SPACES",
    "is_hue_space",
    "ComponentRequest",
    "ALL",
    "FIRST",
    "SECOND",
    "THIRD",
]
