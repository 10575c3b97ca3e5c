"""Chromaconv: selective conversions between RGB, HSV and HSL colors."""

from .numbers import BoundedAngle, UnitInterval
from .exceptions import InvariantViolation
from .types import ColorSpace, ComponentRequest, ALL, FIRST, SECOND, THIRD
from .colors import (
    Color,
    ColorBase,
    ColorRGB,
    ColorHSV,
    ColorHSL,
    ColorCIELAB,
    ColorXYZ,
    ColorLMS,
    color_convert,
    get_color_class,
)
from .conversions import (
    rgb_to_hsv,
    rgb_to_hsl,
    hsv_to_rgb,
    hsl_to_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
    select,
)

__version__ = "0.1.0"

__all__ = [
    # bounded numbers
    "BoundedAngle",
    "UnitInterval",
    "InvariantViolation",
    # core color types
    "Color",
    "ColorBase",
    "ColorRGB",
    "ColorHSV",
    "ColorHSL",
    "ColorCIELAB",
    "ColorXYZ",
    "ColorLMS",
    "ColorSpace",
    "color_convert",
    "get_color_class",
    # component selection
    "ComponentRequest",
    "ALL",
    "FIRST",
    "SECOND",
    "THIRD",
    # conversions
    "rgb_to_hsv",
    "rgb_to_hsl",
    "hsv_to_rgb",
    "hsl_to_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "select",
    "__version__",
]
