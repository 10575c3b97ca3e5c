"""Conversions into HSL. Returns ``(hue, saturation, luminosity)`` selections."""
from __future__ import annotations
from ..exceptions import InvariantViolation
from ..numbers import BoundedAngle, UnitInterval
from ..types.color_types import Selection
from ..types.request import ComponentRequest, ALL
from ..utils import snap_unit
from .to_hsv import normalize_rgb, rgb_hue, unit

HSLSelection = Selection[BoundedAngle, UnitInterval, UnitInterval]


def rgb_to_hsl(red: int, green: int, blue: int, request: ComponentRequest = ALL) -> HSLSelection:
    r, g, b, c_max, c_min = normalize_rgb(red, green, blue)

    hue = rgb_hue(r, g, b, c_max, c_min) if request.first else None

    # HSL saturation is derived from luminosity
    l = None
    if request.second or request.third:
        l = snap_unit((c_max + c_min) / 2.0)

    saturation = None
    if request.second:
        if l is None:
            raise InvariantViolation("Luminosity value was not calculated")
        denominator = 1.0 - abs(2.0 * l - 1.0)
        saturation = unit(0.0 if denominator == 0.0 else (c_max - c_min) / denominator)

    return hue, saturation, unit(l) if request.third else None


def hsv_to_hsl(
    hue: BoundedAngle,
    saturation: UnitInterval,
    value: UnitInterval,
    request: ComponentRequest = ALL,
) -> HSLSelection:
    s_v = float(saturation)
    v = float(value)

    l = None
    if request.second or request.third:
        l = snap_unit(v * (1.0 - s_v / 2.0))

    s_l = None
    if request.second:
        if l is None:
            raise InvariantViolation("Luminosity value was not calculated")
        s_l = 0.0 if v in (0.0, 1.0) else (v - l) / min(l, 1.0 - l)

    return (
        hue if request.first else None,
        unit(s_l) if s_l is not None else None,
        unit(l) if request.third else None,
    )
