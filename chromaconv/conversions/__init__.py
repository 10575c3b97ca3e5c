"""
Chromaconv Color Space Conversions
==================================

Selective conversions between RGB, HSV and HSL. Every routine takes the
three source components plus a ``ComponentRequest`` and returns a
three-slot tuple in which only the requested components are filled in.
Components that another requested component depends on are computed
regardless; they are simply not returned unless asked for.

Conversion Functions
--------------------

RGB → HSV / HSL:
    rgb_to_hsv(red, green, blue, request=ALL)
    rgb_to_hsl(red, green, blue, request=ALL)

HSV / HSL → RGB:
    hsv_to_rgb(hue, saturation, value, request=ALL)
    hsl_to_rgb(hue, saturation, luminosity, request=ALL)

HSV ↔ HSL:
    hsv_to_hsl(hue, saturation, value, request=ALL)
    hsl_to_hsv(hue, saturation, luminosity, request=ALL)

High-Level API
--------------
    select(values, from_space, to_space, request=ALL)

Examples
--------
>>> from chromaconv.conversions import rgb_to_hsv
>>> from chromaconv.types import FIRST
>>> rgb_to_hsv(165, 102, 173, FIRST)
(BoundedAngle(293), None, None)
"""

from .to_hsv import rgb_to_hsv, hsl_to_hsv, rgb_hue
from .to_hsl import rgb_to_hsl, hsv_to_hsl
from .to_rgb import hsv_to_rgb, hsl_to_rgb
from .wrapper import select, CONVERT_SELECT

__all__ = [
    "rgb_to_hsv",
    "rgb_to_hsl",
    "rgb_hue",
    "hsv_to_rgb",
    "hsl_to_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "select",
    "CONVERT_SELECT",
]
