"""Errors raised by the contrast package."""


class InvalidInput(ValueError):
    """A color channel, color code or threshold is outside its valid range."""
