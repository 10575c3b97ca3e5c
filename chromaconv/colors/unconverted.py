"""
Color spaces that can be stored but not yet converted.

Any conversion or component accessor on these classes raises
``NotImplementedError`` instead of guessing a value.
"""
from typing import ClassVar, Tuple
from ..numbers import UnitInterval
from ..types.color_types import ColorSpace
from ..utils import check_channel
from .color_base import ColorBase

I8_MIN, I8_MAX = -128, 127


class ColorCIELAB(ColorBase):
    mode:     ClassVar[ColorSpace] = ColorSpace.CIELAB
    channels: ClassVar[Tuple[str, str, str]] = ("l_star", "a_star", "b_star")

    @classmethod
    def _coerce(cls, value):
        l_star, a_star, b_star = value
        return (
            UnitInterval(l_star),
            check_channel(a_star, "a_star", I8_MIN, I8_MAX),
            check_channel(b_star, "b_star", I8_MIN, I8_MAX),
        )

    @property
    def l_star(self) -> UnitInterval:
        return self.value[0]

    @property
    def a_star(self) -> int:
        return self.value[1]

    @property
    def b_star(self) -> int:
        return self.value[2]


class ColorXYZ(ColorBase):
    mode:     ClassVar[ColorSpace] = ColorSpace.XYZ
    channels: ClassVar[Tuple[str, str, str]] = ("x", "y", "z")

    @classmethod
    def _coerce(cls, value):
        return tuple(check_channel(v, name, I8_MIN, I8_MAX) for v, name in zip(value, cls.channels))

    @property
    def x(self) -> int:
        return self.value[0]

    @property
    def y(self) -> int:
        return self.value[1]

    @property
    def z(self) -> int:
        return self.value[2]


class ColorLMS(ColorBase):
    # TODO: the LMS range is provisional bytes until cone-response scaling is settled
    mode:     ClassVar[ColorSpace] = ColorSpace.LMS
    channels: ClassVar[Tuple[str, str, str]] = ("l", "m", "s")

    @classmethod
    def _coerce(cls, value):
        return tuple(check_channel(v, name) for v, name in zip(value, cls.channels))

    @property
    def l(self) -> int:
        return self.value[0]

    @property
    def m(self) -> int:
        return self.value[1]

    @property
    def s(self) -> int:
        return self.value[2]
