"""
Conversions into RGB bytes.

Both routines evaluate one channel function per requested channel, so
asking for ``red`` alone never computes green or blue.
"""
from __future__ import annotations
from typing import Callable
from boundednumbers import clamp
from ..exceptions import InvariantViolation
from ..numbers import BoundedAngle, UnitInterval
from ..types.color_types import BYTE_MAX, Selection
from ..types.request import ComponentRequest, ALL
from ..utils import round_half_away, snap_unit

RGBSelection = Selection[int, int, int]

# channel offsets, in red/green/blue order
HSL_OFFSETS = (0.0, 8.0, 4.0)
HSV_OFFSETS = (5.0, 3.0, 1.0)


def to_byte(unit_value: float) -> int:
    byte = round_half_away(snap_unit(unit_value) * BYTE_MAX)
    if not 0 <= byte <= BYTE_MAX:
        raise InvariantViolation(f"Channel {unit_value} does not fit in a byte")
    return byte


def _select_channels(channel: Callable[[float], int], offsets, request: ComponentRequest) -> RGBSelection:
    n_red, n_green, n_blue = offsets
    return (
        channel(n_red) if request.first else None,
        channel(n_green) if request.second else None,
        channel(n_blue) if request.third else None,
    )


def hsl_to_rgb(
    hue: BoundedAngle,
    saturation: UnitInterval,
    luminosity: UnitInterval,
    request: ComponentRequest = ALL,
) -> RGBSelection:
    h = float(hue)
    s = float(saturation)
    l = float(luminosity)
    a = s * min(l, 1.0 - l)

    def channel(n: float) -> int:
        k = (n + h / 30.0) % 12.0
        return to_byte(l - a * float(clamp(min(k - 3.0, 9.0 - k), -1.0, 1.0)))

    return _select_channels(channel, HSL_OFFSETS, request)


def hsv_to_rgb(
    hue: BoundedAngle,
    saturation: UnitInterval,
    value: UnitInterval,
    request: ComponentRequest = ALL,
) -> RGBSelection:
    h = float(hue)
    s = float(saturation)
    v = float(value)

    def channel(n: float) -> int:
        k = (n + h / 60.0) % 6.0
        return to_byte(v - v * s * float(clamp(min(k, 4.0 - k), 0.0, 1.0)))

    return _select_channels(channel, HSV_OFFSETS, request)
