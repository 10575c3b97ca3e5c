from __future__ import annotations
from typing import Optional
import numpy as np
from ..exceptions import InvariantViolation
from ..types.color_types import Scalar

_NUMERIC = (int, float, np.integer, np.floating)


def _check_real(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, _NUMERIC):
        raise TypeError(f"UnitInterval expects a real number, got {value!r}")
    return float(value)


class UnitInterval(float):
    """
    A float32-backed proportion in the inclusive range ``[0, 1]``.

    Used for saturation, value and luminosity. Unlike a clamping float,
    out-of-range input is rejected: ``try_new`` and the arithmetic
    operators return ``None``, direct construction raises ``ValueError``.
    """

    def __new__(cls, value: Scalar):
        value = _check_real(value)
        if not cls.in_range(value):
            raise ValueError(f"UnitInterval expects a value in [0, 1], got {value}")
        return super().__new__(cls, float(np.float32(value)))

    @staticmethod
    def in_range(value: Scalar) -> bool:
        # NaN fails both comparisons
        return 0.0 <= value <= 1.0

    @classmethod
    def try_new(cls, value: Scalar) -> Optional[UnitInterval]:
        if not cls.in_range(_check_real(value)):
            return None
        return cls(value)

    @classmethod
    def new_or_panic(cls, value: Scalar) -> UnitInterval:
        """
        Build a value the caller has already proven to be in range.

        Raises:
            InvariantViolation: if ``value`` is outside ``[0, 1]``.
        """
        result = cls.try_new(value)
        if result is None:
            raise InvariantViolation(
                f"Attempted to create new UnitInterval using invalid value ({value})"
            )
        return result

    @classmethod
    def try_from(cls, value: Scalar) -> UnitInterval:
        result = cls.try_new(value)
        if result is None:
            raise ValueError(f"{value} is outside the unit interval [0, 1]")
        return result

    @property
    def value(self) -> float:
        return float(self)

    def __add__(self, other) -> Optional[UnitInterval]:
        if isinstance(other, bool) or not isinstance(other, _NUMERIC):
            return NotImplemented
        return UnitInterval.try_new(float(self) + float(other))

    def __radd__(self, other) -> Optional[UnitInterval]:
        return self.__add__(other)

    def __sub__(self, other) -> Optional[UnitInterval]:
        if isinstance(other, bool) or not isinstance(other, _NUMERIC):
            return NotImplemented
        return UnitInterval.try_new(float(self) - float(other))

    def __rsub__(self, other) -> Optional[UnitInterval]:
        if isinstance(other, bool) or not isinstance(other, _NUMERIC):
            return NotImplemented
        return UnitInterval.try_new(float(other) - float(self))

    def __repr__(self):
        return f"UnitInterval({np.float32(self)})"
