"""Custom exception hierarchy for pytwrn."""

from __future__ import annotations


class TwrnError(Exception):
    """Base exception for all pytwrn errors."""


class ConfigurationError(TwrnError):
    """Invalid or missing configuration."""


class MissingWidthForBreakpoint(ConfigurationError):
    """Breakpoint-tagged classes were used without a window width.

    Raised when a class such as ``md:text-lg`` is resolved and no (or a
    zero) ``window_width`` was supplied, so the active breakpoint tiers
    cannot be determined.
    """

    def __init__(self, message: str, *, class_names: str = "") -> None:
        self.class_names = class_names
        super().__init__(message)


class MissingFontSizeForLetterSpacing(ConfigurationError):
    """A ``tracking-*`` class was used without a ``text-<size>`` class.

    Letter spacing is stored in ``em`` and needs a font size to be
    converted to an absolute value, e.g. ``"text-lg tracking-tighter"``.
    """

    def __init__(self, message: str, *, class_names: str = "") -> None:
        self.class_names = class_names
        super().__init__(message)


class StylesLoadError(TwrnError):
    """Could not load the class name to style lookup table."""
