from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple, TypeVar, Union

Scalar = int | float

T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
Selection = Tuple[Optional[T1], Optional[T2], Optional[T3]]

HUE_360 = 360
BYTE_MAX = 255


class ColorSpace(str, Enum):
    HSL = "hsl"
    HSV = "hsv"
    RGB = "rgb"
    CIELAB = "cielab"
    XYZ = "xyz"
    LMS = "lms"

    @classmethod
    def parse(cls, space: Union[str, "ColorSpace"]) -> "ColorSpace":
        """Accept an enum member or its (case-insensitive) name."""
        if isinstance(space, cls):
            return space
        try:
            return cls(str(space).lower())
        except ValueError:
            raise ValueError(f"Unknown color space: {space!r}") from None


HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSV}
CONVERTIBLE_SPACES = {ColorSpace.HSL, ColorSpace.HSV, ColorSpace.RGB}


def is_hue_space(color_space: Union[str, ColorSpace]) -> bool:
    """
    Check if the given color space is a hue-based space (HSV or HSL).

    Args:
        color_space: Color space enum member or name
    Returns:
        True if hue-based, False otherwise
    """
    return ColorSpace.parse(color_space) in HUE_SPACES
