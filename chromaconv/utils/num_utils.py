import math
import numpy as np

UNIT_SNAP_EPS = 1e-6


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (``127.5 -> 128``)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def snap_unit(value: float, eps: float = UNIT_SNAP_EPS) -> float:
    """Pull floating-point excursions just outside ``[0, 1]`` back onto the bound."""
    if -eps < value < 0.0:
        return 0.0
    if 1.0 < value < 1.0 + eps:
        return 1.0
    return value


def check_channel(value: object, name: str, low: int = 0, high: int = 255) -> int:
    """Validate an integer channel such as an RGB byte or a signed CIELAB axis."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} expects an integer in [{low}, {high}], got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} expects an integer in [{low}, {high}], got {value}")
    return int(value)
