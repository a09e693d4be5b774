"""Color parsing for the CLI.

Accepts `#RRGGBB` (or bare `RRGGBB`) hex and `R, G, B` decimal triples and
returns an immutable `(r, g, b)` tuple of 8-bit ints.
"""
import string
from typing import Tuple

from gradient_loop.errors import (
    InvalidHexLength,
    InvalidHexDigits,
    WrongComponentCount,
    ComponentOutOfRange,
)

RGB = Tuple[int, int, int]

HEX_DIGITS = set(string.hexdigits)


def hex_to_rgb(hex_code: str) -> RGB:
    digits = hex_code.lstrip("#")
    if len(digits) != 6:
        raise InvalidHexLength(f"Hex code must be 6 characters long, got {hex_code!r}")
    # int(..., 16) alone would accept '0x', '_' and surrounding whitespace
    if not all(c in HEX_DIGITS for c in digits):
        raise InvalidHexDigits(f"Invalid hex code: {hex_code!r}")

    num = int(digits, 16)
    return ((num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF)


def _parse_component(token: str) -> int:
    token = token.strip()
    # a single leading '+' is allowed
    digits = token[1:] if token.startswith("+") else token
    if not (digits.isascii() and digits.isdigit()):
        raise ComponentOutOfRange(f"Each value must be a number between 0 - 255, got {token!r}")
    value = int(digits)
    if value > 255:
        raise ComponentOutOfRange(f"Each value must be a number between 0 - 255, got {token!r}")
    return value


def decimal_to_rgb(text: str) -> RGB:
    parts = text.split(",")
    if len(parts) != 3:
        raise WrongComponentCount(f"Must be in R, G, B format, got {text!r}")
    r, g, b = (_parse_component(p) for p in parts)
    return (r, g, b)


def _looks_like_bare_hex(text: str) -> bool:
    return len(text) == 6 and all(c in HEX_DIGITS for c in text)


def parse_color(text: str) -> RGB:
    """Parse a color argument.

    A leading '#' selects hex parsing only. Otherwise a comma-free run of six
    hex digits is read as hex and everything else as a decimal triple.
    """
    text = text.strip()
    if text.startswith("#"):
        return hex_to_rgb(text)
    if "," not in text and _looks_like_bare_hex(text):
        return hex_to_rgb(text)
    return decimal_to_rgb(text)


def format_rgb(color: RGB) -> str:
    return "#{:02X}{:02X}{:02X}".format(*color)
