"""Internal result cache keyed by normalized class name strings."""

from __future__ import annotations

from typing import Any

Style = dict[str, Any]


class StyleCache:
    """Memoize finished style dicts per normalized class string.

    The entry for ``""`` is seeded with an empty dict so blank input always
    resolves to the same object. Entries are never evicted: keys are the
    class combinations an application actually uses.

    Stored dicts are returned as-is and shared between callers.
    """

    def __init__(self) -> None:
        self._empty: Style = {}
        self._styles: dict[str, Style] = {"": self._empty}

    @property
    def empty(self) -> Style:
        """The shared result for blank input."""
        return self._empty

    def get(self, key: str) -> Style | None:
        """Return the stored style for *key*, or ``None``."""
        return self._styles.get(key)

    def store(self, key: str, style: Style) -> Style:
        """Store *style* under *key* and return it."""
        self._styles[key] = style
        return style

    def clear(self) -> None:
        """Drop every entry except the seeded empty result."""
        self._styles = {"": self._empty}

    def __contains__(self, key: object) -> bool:
        return key in self._styles

    def __len__(self) -> int:
        return len(self._styles)
