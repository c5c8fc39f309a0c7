"""Relative luminance and contrast ratio as defined in WCAG 2.x.

Every function here is pure: it only looks at its arguments, so it can be
called from anywhere without coordination. Colors can be given as
:class:`~contrast.spaces.Color` objects or as plain ``(red, green, blue)``
triples of normalized channels.

>>> from contrast import RGB, wcag
>>> round(wcag.contrast_ratio(RGB(0, 0, 0), RGB(1, 1, 1)), 2)
21.0
>>> wcag.passes_threshold((0, 0, 1), (1, 1, 1), wcag.AAA_NORMAL_TEXT)
True
"""


from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from . import colorsys
from .errors import InvalidInput
from .spaces import Color

ColorLike = Union[Color, Iterable[float]]

AA_NORMAL_TEXT = 4.5
AA_LARGE_TEXT = 3.0
AAA_NORMAL_TEXT = 7.0
AAA_LARGE_TEXT = 4.5


class Level(Enum):
    """A WCAG conformance level and text size, valued by its minimum ratio."""

    AA_NORMAL = "aa_normal"
    AA_LARGE = "aa_large"
    AAA_NORMAL = "aaa_normal"
    AAA_LARGE = "aaa_large"

    @property
    def threshold(self) -> float:
        return _THRESHOLDS[self]

    @property
    def label(self) -> str:
        conformance, size = self.value.split("_")
        return f"WCAG {conformance.upper()} ({size} text)"


_THRESHOLDS = {
    Level.AA_NORMAL: AA_NORMAL_TEXT,
    Level.AA_LARGE: AA_LARGE_TEXT,
    Level.AAA_NORMAL: AAA_NORMAL_TEXT,
    Level.AAA_LARGE: AAA_LARGE_TEXT,
}


@dataclass(frozen=True)
class ContrastResult:
    """The contrast ratio of a color pair and how it fares against each level."""

    ratio: float
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool

    def passes(self, level: Level) -> bool:
        return getattr(self, level.value)


def relative_luminance(color: ColorLike) -> float:
    """Return the relative luminance of a color, between 0 and 1."""
    if isinstance(color, Color):
        return color.relative_luminance
    r, g, b = color
    return colorsys.rgb_to_relative_luminance(r, g, b)


def contrast_ratio(foreground: ColorLike, background: ColorLike) -> float:
    """Return the contrast ratio of two colors, between 1 and 21.

    The ratio doesn't depend on the order of the arguments.
    """
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)

    if l1 < l2:
        l1, l2 = l2, l1

    return (l1 + 0.05) / (l2 + 0.05)


def passes_threshold(
    foreground: ColorLike, background: ColorLike, threshold: float
) -> bool:
    """Return True if the contrast ratio of the colors is at least threshold."""
    if threshold < 0:
        raise InvalidInput(f"threshold {threshold!r} is negative")
    return contrast_ratio(foreground, background) >= threshold


def passes_aa(foreground: ColorLike, background: ColorLike) -> bool:
    """Return True if the colors pass WCAG AA for normal text."""
    return passes_threshold(foreground, background, AA_NORMAL_TEXT)


def passes_aaa(foreground: ColorLike, background: ColorLike) -> bool:
    """Return True if the colors pass WCAG AAA for normal text."""
    return passes_threshold(foreground, background, AAA_NORMAL_TEXT)


def evaluate(foreground: ColorLike, background: ColorLike) -> ContrastResult:
    """Compute the contrast ratio and classify it against every level."""
    ratio = contrast_ratio(foreground, background)
    return ContrastResult(
        ratio=ratio,
        aa_normal=ratio >= AA_NORMAL_TEXT,
        aa_large=ratio >= AA_LARGE_TEXT,
        aaa_normal=ratio >= AAA_NORMAL_TEXT,
        aaa_large=ratio >= AAA_LARGE_TEXT,
    )
