"""Basic chromaconv usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaconv import (
    BoundedAngle,
    Color,
    ColorHSV,
    ColorSpace,
    FIRST,
    UnitInterval,
    color_convert,
    rgb_to_hsv,
)


def demonstrate_colors() -> None:
    # Construct colors in each space and convert between them.
    accent = Color.from_hex(0xa566ad)
    print("RGB:", accent)
    print("RGB -> HSV:", accent.as_hsv())
    print("RGB -> HSL:", color_convert(accent, "hsl"))

    gray = Color.hsl(0, 0.0, 0.5)
    print("HSL -> RGB:", gray.rgb_tuple())

    # Constructing from another color converts it.
    print("HSV from RGB:", ColorHSV(accent))


def demonstrate_selection() -> None:
    # Single accessors compute only the component they return.
    accent = Color.rgb(36, 237, 73)
    print("Hue only:", accent.hue())
    print("HSL saturation (needs luminosity):", accent.saturation_hsl())

    # The same selection is available on the raw conversion routines.
    print("rgb_to_hsv with FIRST:", rgb_to_hsv(36, 237, 73, FIRST))
    print("select through the color:", accent.select(ColorSpace.HSL, FIRST))


def demonstrate_bounded_numbers() -> None:
    hue = BoundedAngle(350)
    hue += 20
    print("350 + 20 wraps to:", hue)
    print("Exact 400:", BoundedAngle.new_exact(400))

    half = UnitInterval(0.5)
    print("0.5 + 0.25:", half + 0.25)
    print("0.5 + 0.75:", half + 0.75)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_selection()
    demonstrate_bounded_numbers()
