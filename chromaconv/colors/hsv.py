from typing import ClassVar, Tuple
from ..numbers import BoundedAngle, UnitInterval
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class ColorHSV(ColorBase):
    mode:     ClassVar[ColorSpace] = ColorSpace.HSV
    channels: ClassVar[Tuple[str, str, str]] = ("hue", "saturation", "value")

    @classmethod
    def _coerce(cls, value):
        hue, saturation, val = value
        return BoundedAngle(hue), UnitInterval(saturation), UnitInterval(val)
