"""Objects representing colors."""


import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, Text, Union

from . import colorsys, web
from .errors import InvalidInput


class Color(ABC, Iterable[float]):
    """Abstract base class for colors."""

    @property
    @abstractmethod
    def rgb(self) -> "RGB":
        """Return the color as an RGB object."""
        raise NotImplementedError()

    @property
    def hex(self) -> "Hex":
        """Return the color as an Hex object."""
        return self.rgb.hex

    def __index__(self) -> int:
        """Return the index of the color as an hexadecimal integer."""
        return colorsys.hex_to_hex(self.hex.hex_code)

    def __eq__(self, other: object) -> bool:
        """Return True if the colors have the same RGB channels."""
        if not isinstance(other, Color):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        """Return the hash of the color."""
        return hash(tuple(self))

    def __iter__(self) -> Iterator[float]:
        """Return an iterator over the color's RGB channels."""
        self_rgb = self.rgb
        yield self_rgb.red
        yield self_rgb.green
        yield self_rgb.blue

    def __str__(self) -> str:
        return f"#{hex(self)[2:]:0>6}"

    @property
    def relative_luminance(self) -> float:
        """Return the relative luminance of the color as defined in WCAG 2.x."""
        return colorsys.rgb_to_relative_luminance(*self)


@dataclass(frozen=True, eq=False)
class RGB(Color):
    """
    An RGB color.

    Values must be in the range `[0, 1]`. They are stored as given, so the
    luminance of an RGB color is exact for its channels.
    """

    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        """Validate RGB channels."""
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not math.isfinite(value) or not 0 <= value <= 1:
                raise InvalidInput(f"{name} channel {value!r} is not in [0, 1]")

    @classmethod
    def from_rgb8(cls, red: int, green: int, blue: int) -> "RGB":
        """Create a color from 8-bit channel values."""
        return cls(*colorsys.rgb8_to_rgb(red, green, blue))

    @property
    def rgb(self) -> "RGB":
        """Return the color as an RGB object."""
        return self

    @property
    def hex(self) -> "Hex":
        """Return the color as an Hex object."""
        return Hex(colorsys.rgb_to_hex(self.red, self.green, self.blue))


@dataclass(frozen=True, eq=False)
class Hex(Color):
    """A color represented by a hexadecimal integer or string."""

    hex_code: Union[int, Text]

    def __post_init__(self) -> None:
        """Reject codes that don't describe a 24-bit color."""
        try:
            colorsys.hex_to_hex(self.hex_code)
        except ValueError as e:
            raise InvalidInput(str(e)) from e

    def __repr__(self) -> Text:
        """Return a string representation of the color."""
        if isinstance(self.hex_code, int):
            return f"Hex({self.hex_code:06X})"
        return f"Hex({self.hex_code!r})"

    @property
    def rgb(self) -> RGB:
        """Return the color as an RGB object."""
        return RGB(*colorsys.hex_to_rgb(self.hex_code))

    @property
    def hex(self) -> "Hex":
        """Return the color as an Hex object."""
        return self


@dataclass(frozen=True, eq=False)
class WebColor(Color):
    """A color represented by a name."""

    name: Text

    NORM_PATTERN = re.compile(r"[\s\-_]+")

    def __post_init__(self) -> None:
        """Normalize the name of the color."""
        norm_name = self.NORM_PATTERN.sub("", self.name).lower()
        if norm_name not in web.colors:
            raise InvalidInput(
                f"{norm_name!r} ({self.name!r}) is not a valid color name"
            )
        object.__setattr__(self, "name", norm_name)

    @property
    def rgb(self) -> RGB:
        """Return the color as an RGB object."""
        return self.hex.rgb

    @property
    def hex(self) -> Hex:
        """Return the color as an Hex object."""
        return Hex(colorsys.web_color_to_hex(self.name))


RGB_FUNCTION_PATTERN = re.compile(
    r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$", re.IGNORECASE
)
HEX_PATTERN = re.compile(r"^#?(?:[0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)


def parse_color(text: Text) -> Color:
    """Parse a hex code, an ``rgb(r, g, b)`` triple or a CSS color name.

    >>> parse_color("#fff")
    Hex('#fff')
    >>> parse_color("Light Gray")
    WebColor(name='lightgray')
    """
    text = text.strip()
    match = RGB_FUNCTION_PATTERN.match(text)
    if match:
        channels = [int(c) for c in match.groups()]
        if any(c > 255 for c in channels):
            raise InvalidInput(f"{text!r} has a channel above 255")
        return RGB.from_rgb8(*channels)
    if HEX_PATTERN.match(text):
        return Hex(text)
    return WebColor(text)
