"""Relative luminance and contrast ratio of colors, as WCAG defines them."""


__version__ = "0.1.0"


__all__ = [
    "AA_LARGE_TEXT",
    "AA_NORMAL_TEXT",
    "AAA_LARGE_TEXT",
    "AAA_NORMAL_TEXT",
    "Color",
    "ColorPair",
    "ContrastResult",
    "Hex",
    "InvalidInput",
    "Level",
    "RGB",
    "WebColor",
    "contrast_ratio",
    "evaluate",
    "parse_color",
    "passes_threshold",
    "relative_luminance",
]


from .color_pair import ColorPair
from .errors import InvalidInput
from .spaces import RGB, Color, Hex, WebColor, parse_color
from .wcag import (
    AA_LARGE_TEXT,
    AA_NORMAL_TEXT,
    AAA_LARGE_TEXT,
    AAA_NORMAL_TEXT,
    ContrastResult,
    Level,
    contrast_ratio,
    evaluate,
    passes_threshold,
    relative_luminance,
)
