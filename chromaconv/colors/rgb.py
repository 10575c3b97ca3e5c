from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..utils import check_channel
from .color_base import ColorBase


class ColorRGB(ColorBase):
    mode:     ClassVar[ColorSpace] = ColorSpace.RGB
    channels: ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")

    @classmethod
    def _coerce(cls, value):
        return tuple(check_channel(v, name) for v, name in zip(value, cls.channels))
