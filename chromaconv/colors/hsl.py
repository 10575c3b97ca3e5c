from typing import ClassVar, Tuple
from ..numbers import BoundedAngle, UnitInterval
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class ColorHSL(ColorBase):
    mode:     ClassVar[ColorSpace] = ColorSpace.HSL
    channels: ClassVar[Tuple[str, str, str]] = ("hue", "saturation", "luminosity")

    @classmethod
    def _coerce(cls, value):
        hue, saturation, luminosity = value
        return BoundedAngle(hue), UnitInterval(saturation), UnitInterval(luminosity)
