from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ComponentRequest:
    """
    Which of the three output components of a conversion are wanted.

    Routines leave unrequested slots as ``None`` unless another requested
    slot depends on them, in which case they are computed but still only
    returned when asked for.
    """

    first: bool = True
    second: bool = True
    third: bool = True

    def __or__(self, other: "ComponentRequest") -> "ComponentRequest":
        return ComponentRequest(
            self.first or other.first,
            self.second or other.second,
            self.third or other.third,
        )

    @property
    def is_empty(self) -> bool:
        return not (self.first or self.second or self.third)


ALL = ComponentRequest(True, True, True)
FIRST = ComponentRequest(True, False, False)
SECOND = ComponentRequest(False, True, False)
THIRD = ComponentRequest(False, False, True)
