from .angle import BoundedAngle
from .unit_interval import UnitInterval

__all__ = ["BoundedAngle", "UnitInterval"]
