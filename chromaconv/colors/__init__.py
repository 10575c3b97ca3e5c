"""
Chromaconv Color Classes
========================

Immutable colors held in a single color space, converted on demand.

Scalar Usage
------------
>>> from chromaconv.colors import Color
>>>
>>> color = Color.rgb(165, 102, 173)
>>> color.hue()                # computes the hue only
BoundedAngle(293)
>>> color.as_hsv()
Color.HSV(293, 0.41040462, 0.6784314)
>>> Color.from_hex(0xece5db).rgb_tuple()
(236, 229, 219)

Color Classes
-------------
    - ColorRGB: bytes (0-255)
    - ColorHSV: BoundedAngle hue, UnitInterval saturation and value
    - ColorHSL: BoundedAngle hue, UnitInterval saturation and luminosity
    - ColorCIELAB, ColorXYZ, ColorLMS: stored only, conversions raise
      NotImplementedError

Notes
-----
- Instances are frozen after __init__ and compare by (mode, value)
- Accessors compute only the component they return, plus whatever that
  component is derived from
"""

from .color_base import ColorBase
from .rgb import ColorRGB
from .hsv import ColorHSV
from .hsl import ColorHSL
from .unconverted import ColorCIELAB, ColorXYZ, ColorLMS
from .color import Color, color_convert, get_color_class, unified_space_to_class


__all__ = [
    'Color',
    'ColorBase',
    'ColorRGB',
    'ColorHSV',
    'ColorHSL',
    'ColorCIELAB',
    'ColorXYZ',
    'ColorLMS',
    'color_convert',
    'get_color_class',
    'unified_space_to_class',
]
