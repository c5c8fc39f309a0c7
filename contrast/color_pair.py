"""A color pair of foreground and background colors."""


from dataclasses import dataclass
from typing import Optional, Tuple

from . import wcag
from .errors import InvalidInput
from .spaces import Color


@dataclass(frozen=True)
class ColorPair:
    """A color pair of foreground and background colors."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None

    def _colors(self) -> Tuple[Color, Color]:
        if self.foreground is None or self.background is None:
            raise InvalidInput(
                "Color pair must have both foreground and background colors set."
            )
        return self.foreground, self.background

    @property
    def contrast_ratio(self) -> float:
        """Return the contrast ratio of the color pair as defined in WCAG 2.x."""
        return wcag.contrast_ratio(*self._colors())

    def passes(self, threshold: float) -> bool:
        """Return True if the contrast ratio is at least threshold."""
        return wcag.passes_threshold(*self._colors(), threshold)

    def evaluate(self) -> wcag.ContrastResult:
        """Classify the color pair against every WCAG level."""
        return wcag.evaluate(*self._colors())
