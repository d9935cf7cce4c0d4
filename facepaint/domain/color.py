"""
Hex color parsing
"""
import logging
import re

from .models import Color

logger = logging.getLogger(__name__)

DEFAULT_COLOR = Color(0, 0, 0)

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


def parse_hex_color(value: str) -> Color:
    """
    Parse "#RRGGBB", "RRGGBB", "#RRGGBBAA" or "#RGB" into an opaque color.

    A trailing alpha byte is ignored. Anything unparseable yields opaque
    black rather than an error.
    """
    if not isinstance(value, str):
        logger.warning(f"Color is not a string: {value!r}, using default")
        return DEFAULT_COLOR

    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]

    if not _HEX_RE.match(digits):
        logger.warning(f"Malformed hex color {value!r}, using default")
        return DEFAULT_COLOR

    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    elif len(digits) == 8:
        digits = digits[:6]
    elif len(digits) != 6:
        logger.warning(f"Unsupported hex color length {value!r}, using default")
        return DEFAULT_COLOR

    rgb = int(digits, 16)
    return Color(
        r=(rgb & 0xFF0000) >> 16,
        g=(rgb & 0x00FF00) >> 8,
        b=rgb & 0x0000FF,
    )
