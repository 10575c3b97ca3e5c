from __future__ import annotations
from typing import Optional, Union
import numpy as np
from ..types.color_types import HUE_360

IntLike = Union[int, np.integer]


def _check_int(degrees: object) -> int:
    if isinstance(degrees, bool) or not isinstance(degrees, (int, np.integer)):
        raise TypeError(f"BoundedAngle expects an integer number of degrees, got {degrees!r}")
    return int(degrees)


class BoundedAngle(int):
    """
    A whole number of degrees on a circle, always in ``0..359``.

    Addition and subtraction wrap around the circle and return a new
    ``BoundedAngle``; plain integers are accepted on either side.

    >>> BoundedAngle(350) + 20
    BoundedAngle(10)
    >>> BoundedAngle.new_wrapped(-30)
    BoundedAngle(330)
    """

    def __new__(cls, degrees: IntLike):
        degrees = _check_int(degrees)
        if not 0 <= degrees < HUE_360:
            raise ValueError(f"BoundedAngle expects degrees in [0, {HUE_360 - 1}], got {degrees}")
        return super().__new__(cls, degrees)

    @classmethod
    def new_exact(cls, degrees: IntLike) -> Optional[BoundedAngle]:
        """Return the angle, or ``None`` if ``degrees`` is outside ``0..359``."""
        degrees = _check_int(degrees)
        if 0 <= degrees < HUE_360:
            return cls(degrees)
        return None

    @classmethod
    def new_wrapped(cls, degrees: IntLike) -> BoundedAngle:
        """Reduce ``degrees`` onto the circle. Floored modulo, so ``-30`` gives ``330``."""
        return cls(_check_int(degrees) % HUE_360)

    @property
    def value(self) -> int:
        return int(self)

    def __add__(self, other):
        if isinstance(other, bool) or not isinstance(other, (int, np.integer)):
            return NotImplemented
        return BoundedAngle.new_wrapped(int(self) + int(other))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, bool) or not isinstance(other, (int, np.integer)):
            return NotImplemented
        return BoundedAngle.new_wrapped(int(self) - int(other))

    def __rsub__(self, other):
        if isinstance(other, bool) or not isinstance(other, (int, np.integer)):
            return NotImplemented
        return BoundedAngle.new_wrapped(int(other) - int(self))

    # int has no in-place operators; spell them out so += adds and -= subtracts
    def __iadd__(self, other):
        return self.__add__(other)

    def __isub__(self, other):
        return self.__sub__(other)

    def __repr__(self):
        return f"BoundedAngle({int(self)})"

    def __str__(self):
        return f"{int(self)}°"
