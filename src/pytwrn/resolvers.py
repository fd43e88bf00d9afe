"""Style entries that depend on more than one class.

Font variant numeric classes combine into one ``fontVariant`` list, and
``tracking-*`` letter spacing is stored in ``em`` so it needs the font size
of a ``text-*`` class to become an absolute value.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from pytwrn._constants import FONT_SIZE_SUFFIXES, FONT_VARIANT_CLASSES, LETTER_SPACING_PREFIX
from pytwrn.exceptions import MissingFontSizeForLetterSpacing

__all__ = [
    "font_variant",
    "is_cross_class",
    "leading_float",
    "letter_spacing",
]

_logger = logging.getLogger(__name__)

# Whole-token matches only: "(?<!\S)" / "(?!\S)" anchor to whitespace or the string ends.
_FONT_VARIANT_RE = re.compile(r"(?<!\S)(" + "|".join(map(re.escape, FONT_VARIANT_CLASSES)) + r")(?!\S)")
_LETTER_SPACING_RE = re.compile(r"(?<!\S)(" + re.escape(LETTER_SPACING_PREFIX) + r"[a-z]+)(?!\S)")
_FONT_SIZE_RE = re.compile(r"(?<!\S)(text-(?:" + "|".join(FONT_SIZE_SUFFIXES) + r"))(?!\S)")

# Leading numeric part of a CSS length such as "-0.025em".
_LEADING_FLOAT_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def leading_float(value: Any) -> float | None:
    """Parse the numeric prefix of *value* (``"0.05em"`` -> ``0.05``).

    Returns ``None`` when *value* has no numeric prefix.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return None
    match = _LEADING_FLOAT_RE.match(value)
    if match is None:
        return None
    return float(match.group(1))


def font_variant(class_names: str) -> list[str]:
    """Return every font variant class in *class_names*, in order, duplicates kept."""
    return [match.group(1) for match in _FONT_VARIANT_RE.finditer(class_names)]


def is_cross_class(name: str) -> bool:
    """Return True for classes handled here rather than by plain lookup."""
    return name.startswith(LETTER_SPACING_PREFIX) or name in FONT_VARIANT_CLASSES


def letter_spacing(
    styles: Mapping[str, Mapping[str, Any]],
    class_names: str,
    *,
    warn_unsupported: bool = True,
) -> float | None:
    """Compute an absolute ``letterSpacing`` for *class_names*.

    Returns ``None`` when no ``tracking-*`` class is present, or when
    either class has no usable value in *styles*. An unknown ``tracking-*``
    class is logged as a warning unless *warn_unsupported* is false.

    Raises :class:`MissingFontSizeForLetterSpacing` when a ``tracking-*``
    class appears without a ``text-<size>`` class. The pair is looked up
    across the whole string, not per breakpoint bucket.
    """
    spacing_match = _LETTER_SPACING_RE.search(class_names)
    if spacing_match is None:
        return None

    size_match = _FONT_SIZE_RE.search(class_names)
    if size_match is None:
        raise MissingFontSizeForLetterSpacing(
            "Font size is required when applying letter spacing, e.g. 'text-lg tracking-tighter'",
            class_names=class_names,
        )

    spacing_class = spacing_match.group(1)
    size_class = size_match.group(1)
    spacing = leading_float(styles.get(spacing_class, {}).get("letterSpacing"))
    font_size = leading_float(styles.get(size_class, {}).get("fontSize"))
    if spacing is None:
        # tracking-* never reaches the per-class merge, so report it here.
        if warn_unsupported:
            _logger.warning('Unsupported Tailwind class: "%s" from class names "%s"', spacing_class, class_names)
        return None
    if font_size is None:
        _logger.debug("No numeric fontSize for %s; letterSpacing skipped", size_class)
        return None
    return spacing * font_size
