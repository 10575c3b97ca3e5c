from __future__ import annotations
from typing import Any, ClassVar, Dict, Optional, Tuple, Union, cast
import warnings
import numpy as np
from ..conversions import select
from ..exceptions import InvariantViolation
from ..numbers import BoundedAngle, UnitInterval
from ..types.color_types import ColorSpace, HUE_SPACES, CONVERTIBLE_SPACES
from ..types.request import ComponentRequest, ALL, FIRST, SECOND, THIRD

HEX_MAX = 0xFFFFFF

Components = Tuple[Any, Any, Any]


def _expect(component: Optional[Any], what: str) -> Any:
    if component is None:
        raise InvariantViolation(f"{what} was not calculated")
    return component


def _format_component(component: Any) -> str:
    if isinstance(component, UnitInterval):
        return str(np.float32(component))
    return str(int(component))


class ColorBase:
    """
    An immutable color held in exactly one color space.

    Subclasses pick the space through ``mode`` and validate their three
    stored fields in ``_coerce``. Conversions find the class for a target
    space through the registry in ``colors.color``.
    """
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace]
    channels:     ClassVar[Tuple[str, str, str]]
    _is_frozen: bool = False   # class-level default, shadowed per instance after __init__

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[Components, ColorBase]) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode:
                value = value.value
            else:
                value = value._full_tuple(self.mode)

        if isinstance(value, (str, bytes)) or not isinstance(value, (tuple, list)):
            raise TypeError(f"{self.mode.name} expects a {self.num_channels}-component tuple, got {value!r}")
        if len(value) != self.num_channels:
            raise ValueError(
                f"{self.mode.name} expects {self.num_channels} components {self.channels}, got {len(value)}"
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = self._coerce(cast(Components, tuple(value)))

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _coerce(cls, value: Components) -> Components:
        raise NotImplementedError(f"{cls.__name__} does not define its components")

    # ------------------ CONSTRUCTORS ------------------
    @staticmethod
    def class_for(space: Union[ColorSpace, str]) -> type:
        from .color import get_color_class  # local import to avoid cycles
        return get_color_class(space)

    @staticmethod
    def from_hex(packed: int) -> ColorBase:
        """
        Build an RGB color from a packed ``0xRRGGBB`` integer.

        Bits above the low 24 are discarded with a ``UserWarning``.
        """
        if isinstance(packed, bool) or not isinstance(packed, (int, np.integer)):
            raise TypeError(f"from_hex expects an integer, got {packed!r}")
        packed = int(packed)
        if packed < 0:
            raise ValueError(f"from_hex expects a non-negative integer, got {packed}")
        if packed > HEX_MAX:
            warnings.warn(
                f"from_hex ignores bits above 0xFFFFFF in {packed:#x}",
                UserWarning,
                stacklevel=2,
            )
        return ColorBase.rgb((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF)

    @staticmethod
    def rgb(red: int, green: int, blue: int) -> ColorBase:
        return ColorBase.class_for(ColorSpace.RGB)((red, green, blue))

    @staticmethod
    def hsv(hue: int, saturation: float, value: float) -> ColorBase:
        return ColorBase.class_for(ColorSpace.HSV)((hue, saturation, value))

    @staticmethod
    def hsl(hue: int, saturation: float, luminosity: float) -> ColorBase:
        return ColorBase.class_for(ColorSpace.HSL)((hue, saturation, luminosity))

    @staticmethod
    def cielab(l_star: float, a_star: int, b_star: int) -> ColorBase:
        return ColorBase.class_for(ColorSpace.CIELAB)((l_star, a_star, b_star))

    @staticmethod
    def xyz(x: int, y: int, z: int) -> ColorBase:
        return ColorBase.class_for(ColorSpace.XYZ)((x, y, z))

    @staticmethod
    def lms(l: int, m: int, s: int) -> ColorBase:
        return ColorBase.class_for(ColorSpace.LMS)((l, m, s))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Components:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    @property
    def is_convertible(self) -> bool:
        return self.mode in CONVERTIBLE_SPACES

    def as_dict(self) -> Dict[str, Any]:
        return dict(zip(self.channels, self._value))

    # ------------------ CONVERSIONS ------------------
    def select(self, to_space: Union[ColorSpace, str], request: ComponentRequest = ALL) -> Tuple:
        """Compute the requested components of this color in ``to_space``."""
        return select(self._value, self.mode, to_space, request)

    def _full_tuple(self, to_space: ColorSpace) -> Components:
        target = self.class_for(to_space)
        first, second, third = self.select(to_space, ALL)
        return (
            _expect(first, target.channels[0].capitalize()),
            _expect(second, target.channels[1].capitalize()),
            _expect(third, target.channels[2].capitalize()),
        )

    def convert(self, to_space: Union[ColorSpace, str]) -> ColorBase:
        """Return this color as a new instance of the class registered for ``to_space``."""
        to_space = ColorSpace.parse(to_space)
        if to_space == self.mode:
            return self
        return self.class_for(to_space)(self._full_tuple(to_space))

    def as_hsv(self) -> ColorBase:
        return self.convert(ColorSpace.HSV)

    def as_hsl(self) -> ColorBase:
        return self.convert(ColorSpace.HSL)

    def as_rgb(self) -> ColorBase:
        return self.convert(ColorSpace.RGB)

    def hsv_tuple(self) -> Tuple[BoundedAngle, UnitInterval, UnitInterval]:
        return self._full_tuple(ColorSpace.HSV)

    def hsl_tuple(self) -> Tuple[BoundedAngle, UnitInterval, UnitInterval]:
        return self._full_tuple(ColorSpace.HSL)

    def rgb_tuple(self) -> Tuple[int, int, int]:
        return self._full_tuple(ColorSpace.RGB)

    # ------------------ SINGLE COMPONENTS ------------------
    def hue(self) -> BoundedAngle:
        # HSV and HSL share a hue; read it from the stored fields when present
        target = self.mode if self.has_hue else ColorSpace.HSV
        return _expect(self.select(target, FIRST)[0], "Hue")

    def saturation_hsv(self) -> UnitInterval:
        return _expect(self.select(ColorSpace.HSV, SECOND)[1], "Saturation")

    def value_hsv(self) -> UnitInterval:
        return _expect(self.select(ColorSpace.HSV, THIRD)[2], "Value")

    def saturation_hsl(self) -> UnitInterval:
        return _expect(self.select(ColorSpace.HSL, SECOND)[1], "Saturation")

    def luminosity(self) -> UnitInterval:
        return _expect(self.select(ColorSpace.HSL, THIRD)[2], "Luminosity")

    def red(self) -> int:
        return _expect(self.select(ColorSpace.RGB, FIRST)[0], "Red")

    def green(self) -> int:
        return _expect(self.select(ColorSpace.RGB, SECOND)[1], "Green")

    def blue(self) -> int:
        return _expect(self.select(ColorSpace.RGB, THIRD)[2], "Blue")

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other):
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self):
        return hash((self.mode, self._value))

    def __repr__(self):
        return f"Color.{self.mode.name}({', '.join(_format_component(c) for c in self._value)})"
