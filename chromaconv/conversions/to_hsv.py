"""
Conversions into HSV, plus the hue and extremes shared by every RGB source.

Each routine takes the three source components and a ``ComponentRequest``
and returns ``(hue, saturation, value)`` with unrequested slots set to
``None``.
"""
from __future__ import annotations
from typing import Tuple
from ..exceptions import InvariantViolation
from ..numbers import BoundedAngle, UnitInterval
from ..types.color_types import BYTE_MAX, Selection
from ..types.request import ComponentRequest, ALL
from ..utils import round_half_away, snap_unit

HSVSelection = Selection[BoundedAngle, UnitInterval, UnitInterval]


def unit(value: float) -> UnitInterval:
    return UnitInterval.new_or_panic(snap_unit(value))


def normalize_rgb(red: int, green: int, blue: int) -> Tuple[float, float, float, float, float]:
    """Scale bytes to ``[0, 1]`` and return ``(r, g, b, max, min)``."""
    r = red / BYTE_MAX
    g = green / BYTE_MAX
    b = blue / BYTE_MAX
    return r, g, b, max(r, g, b), min(r, g, b)


def rgb_hue(r: float, g: float, b: float, c_max: float, c_min: float) -> BoundedAngle:
    """
    Hue of normalized RGB channels, rounded to whole degrees.

    Args:
        r, g, b: channels in [0, 1]
        c_max, c_min: the largest and smallest of the three

    Returns:
        Hue in [0, 359]; 0 for achromatic input.
    """
    if c_max == c_min:
        return BoundedAngle.new_wrapped(0)

    chroma = c_max - c_min
    if c_max == r:
        sector = ((g - b) / chroma) % 6.0
    elif c_max == g:
        sector = (b - r) / chroma + 2.0
    elif c_max == b:
        sector = (r - g) / chroma + 4.0
    else:
        raise InvariantViolation(f"Max {c_max} does not match any RGB component of {(r, g, b)}")

    return BoundedAngle.new_wrapped(round_half_away(sector * 60.0))


def rgb_to_hsv(red: int, green: int, blue: int, request: ComponentRequest = ALL) -> HSVSelection:
    r, g, b, c_max, c_min = normalize_rgb(red, green, blue)

    hue = rgb_hue(r, g, b, c_max, c_min) if request.first else None
    saturation = None
    if request.second:
        saturation = unit(0.0 if c_max == 0.0 else (c_max - c_min) / c_max)
    value = unit(c_max) if request.third else None

    return hue, saturation, value


def hsl_to_hsv(
    hue: BoundedAngle,
    saturation: UnitInterval,
    luminosity: UnitInterval,
    request: ComponentRequest = ALL,
) -> HSVSelection:
    s_l = float(saturation)
    l = float(luminosity)

    # HSV saturation is derived from HSV value
    v = None
    if request.second or request.third:
        v = snap_unit(l + s_l * min(l, 1.0 - l))

    s_v = None
    if request.second:
        if v is None:
            raise InvariantViolation("Value was not calculated")
        s_v = 0.0 if v == 0.0 else 2.0 * (1.0 - l / v)

    return (
        hue if request.first else None,
        unit(s_v) if s_v is not None else None,
        unit(v) if request.third else None,
    )
