from __future__ import annotations
from typing import Any, Callable, Dict, Tuple, Union

from ..types.color_types import ColorSpace, CONVERTIBLE_SPACES, Selection
from ..types.request import ComponentRequest, ALL

from .to_rgb import hsv_to_rgb, hsl_to_rgb
from .to_hsv import rgb_to_hsv, hsl_to_hsv
from .to_hsl import rgb_to_hsl, hsv_to_hsl

SelectFunction = Callable[[Any, Any, Any, ComponentRequest], Selection]

CONVERT_SELECT: Dict[Tuple[ColorSpace, ColorSpace], SelectFunction] = {
    (ColorSpace.RGB, ColorSpace.HSV): rgb_to_hsv,
    (ColorSpace.RGB, ColorSpace.HSL): rgb_to_hsl,
    (ColorSpace.HSV, ColorSpace.RGB): hsv_to_rgb,
    (ColorSpace.HSV, ColorSpace.HSL): hsv_to_hsl,
    (ColorSpace.HSL, ColorSpace.RGB): hsl_to_rgb,
    (ColorSpace.HSL, ColorSpace.HSV): hsl_to_hsv,
}


def _passthrough(first, second, third, request: ComponentRequest) -> Selection:
    return (
        first if request.first else None,
        second if request.second else None,
        third if request.third else None,
    )


def select(
    values: Tuple[Any, Any, Any],
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
    request: ComponentRequest = ALL,
) -> Selection:
    """
    Compute the requested components of ``values`` expressed in ``to_space``.

    Args:
        values: the three stored fields of a color in ``from_space``
        from_space: space the values are expressed in
        to_space: target space
        request: which target components to compute

    Returns:
        Three-slot tuple; unrequested slots are ``None``.

    Raises:
        NotImplementedError: if either space has no conversion support
    """
    fs = ColorSpace.parse(from_space)
    ts = ColorSpace.parse(to_space)
    for space in (fs, ts):
        if space not in CONVERTIBLE_SPACES:
            raise NotImplementedError(f"Conversions involving {space.name} are not implemented")

    if request.is_empty:
        return None, None, None

    first, second, third = values
    if fs == ts:
        return _passthrough(first, second, third, request)
    return CONVERT_SELECT[(fs, ts)](first, second, third, request)
