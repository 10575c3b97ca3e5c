"""Print the HSV form of a single hex color: ``python -m chromaconv ece5db``."""
import argparse
import sys
from typing import Optional, Sequence
from .colors import Color

DEFAULT_HEX = "55f323"


def parse_hex(text: str) -> int:
    digits = text.strip().lstrip("#")
    if digits.lower().startswith("0x"):
        digits = digits[2:]
    if len(digits) != 6:
        raise argparse.ArgumentTypeError(f"expected six hex digits, got {text!r}")
    try:
        return int(digits, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex color: {text!r}") from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="chromaconv", description=__doc__)
    parser.add_argument("hex", nargs="?", default=DEFAULT_HEX, type=parse_hex,
                        help=f"packed RRGGBB color (default: {DEFAULT_HEX})")
    args = parser.parse_args(argv)

    print(Color.from_hex(args.hex).hsv_tuple())
    return 0


if __name__ == "__main__":
    sys.exit(main())
