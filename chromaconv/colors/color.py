from __future__ import annotations
from typing import Dict, Union
from ..types.color_types import ColorSpace
from .color_base import ColorBase
from .rgb import ColorRGB
from .hsv import ColorHSV
from .hsl import ColorHSL
from .unconverted import ColorCIELAB, ColorXYZ, ColorLMS

# Public name for the tagged union; variants are the registered subclasses
Color = ColorBase


def build_registry(*classes: type[ColorBase]) -> Dict[ColorSpace, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}


unified_space_to_class: Dict[ColorSpace, type[ColorBase]] = build_registry(
    ColorRGB,
    ColorHSV,
    ColorHSL,
    ColorCIELAB,
    ColorXYZ,
    ColorLMS,
)


def get_color_class(color_space: Union[ColorSpace, str]) -> type[ColorBase]:
    color_class = unified_space_to_class.get(ColorSpace.parse(color_space))
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(color: ColorBase, to_space: Union[ColorSpace, str, None] = None) -> ColorBase:
    """
    Convert a color to a different color space.

    Args:
        color: Source color
        to_space: Target color space (e.g. ``"rgb"``, ``ColorSpace.HSV``).
            Defaults to the color's own space.

    Returns:
        New color in the target space, or ``color`` itself if already there.

    Raises:
        NotImplementedError: if either space has no conversion support
    """
    return color.convert(to_space or color.mode)
