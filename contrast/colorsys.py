"""Simple color conversions.

These are the conversions needed at the boundary between the contrast
evaluator and whatever produced the color: hexadecimal codes, CSS color names
and 8-bit channel values all end up as normalized RGB coordinates.

Examples
--------
>>> from contrast import colorsys
>>> colorsys.hex_to_rgb("#ffffff")
(1.0, 1.0, 1.0)
>>> colorsys.rgb_to_hex(0.0, 0.0, 1.0)
255
"""


from __future__ import annotations

from typing import Text
import string

from . import web

__all__ = [
    "hex_to_hex",
    "hex_to_rgb",
    "rgb8_to_rgb",
    "rgb_to_hex",
    "rgb_to_relative_luminance",
    "srgb_to_linear",
    "web_color_to_hex",
    "web_color_to_rgb",
]


# Channel weights of the relative luminance as defined in WCAG 2.x.
LUMINANCE_WEIGHTS = 0.2126, 0.7152, 0.0722

# WCAG 2.x keeps the sRGB draft threshold rather than 0.04045.
LINEAR_THRESHOLD = 0.03928


def srgb_to_linear(c: float) -> float:
    """Linearize a gamma-encoded sRGB channel."""
    if c <= LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def rgb_to_relative_luminance(r: float, g: float, b: float) -> float:
    """Return the relative luminance of the RGB coordinates."""
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * srgb_to_linear(r) + wg * srgb_to_linear(g) + wb * srgb_to_linear(b)


def rgb_to_hex(r: float, g: float, b: float) -> int:
    """Convert the color from RGB coordinates to hexadecimal."""
    return round(r * 255) << 16 | round(g * 255) << 8 | round(b * 255)


def rgb8_to_rgb(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert 8-bit channel values to RGB coordinates."""
    return r / 255, g / 255, b / 255


def hex_to_rgb(hc: int | Text) -> tuple[float, float, float]:
    """Convert the color from hexadecimal to RGB coordinates."""
    hc = hex_to_hex(hc)
    r = hc >> 16
    g = (hc >> 8) & 0xFF
    b = hc & 0xFF
    return rgb8_to_rgb(r, g, b)


def web_color_to_hex(name: Text) -> int:
    """Convert the color from web color name to hexadecimal."""
    return hex_to_hex(web.colors[name])


def web_color_to_rgb(name: Text) -> tuple[float, float, float]:
    """Convert the color from web color name to RGB coordinates."""
    return hex_to_rgb(web_color_to_hex(name))


def hex_to_hex(hc: int | Text) -> int:
    """Ensure that the hexadecimal code is an integer.

    Three-digit codes are expanded the way CSS does (``#0af`` is ``#00aaff``).
    Raises ``ValueError`` for anything that isn't a 3 or 6 digit code
    or an integer in the 24-bit range.
    """
    if isinstance(hc, Text):
        digits = hc.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        if len(digits) != 6 or not all(d in string.hexdigits for d in digits):
            raise ValueError(f"{hc!r} is not a 3 or 6 digit hex code")
        return int(digits, 16)
    if isinstance(hc, bool) or not isinstance(hc, int):
        raise ValueError(f"{hc!r} is not a hex code")
    if not 0 <= hc <= 0xFFFFFF:
        raise ValueError(f"{hc:#x} is out of the 24-bit color range")
    return hc
