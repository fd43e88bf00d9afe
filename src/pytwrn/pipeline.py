"""Class name resolution pipeline.

Pass a list of class names separated by spaces, e.g.
``"bg-green-100 text-green-800 font-semibold"``, and receive a style dict
for use in React Native views::

    pipeline = create(load_styles())
    pipeline.resolve("text-lg md:text-xl", window_width=800)

Resolution runs breakpoint filtering, ordering, cross-class resolvers,
per-class merge and variable substitution, and memoizes the result per
normalized class string.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pytwrn._cache import Style, StyleCache
from pytwrn._constants import COLOR_PROPERTY, OPACITY_PREFIX
from pytwrn.breakpoints import filter_tokens
from pytwrn.config import TwrnConfig
from pytwrn.ordering import order_tokens
from pytwrn.resolvers import font_variant, is_cross_class, letter_spacing
from pytwrn.variables import resolve_variables

__all__ = ["StylePipeline", "create"]

_logger = logging.getLogger(__name__)


class StylePipeline:
    """Resolve Tailwind class strings against one lookup table.

    Parameters
    ----------
    styles : Mapping
        Class name to style fragment. Fragments are read, never modified.
    config : TwrnConfig or None
        Breakpoints, color prefix and warning switch. Defaults to
        :class:`TwrnConfig` defaults.

    Each instance owns its cache; pipelines never share results.
    """

    def __init__(
        self,
        styles: Mapping[str, Mapping[str, Any]],
        config: TwrnConfig | None = None,
    ) -> None:
        self._styles = styles
        self._config = config or TwrnConfig()
        self._cache = StyleCache()
        self._colors = StyleCache()

    @property
    def config(self) -> TwrnConfig:
        return self._config

    @property
    def cache(self) -> StyleCache:
        return self._cache

    def normalize(self, class_names: str, window_width: float | None = None) -> str:
        """Return the cache key for *class_names* at *window_width*.

        Breakpoint tags are filtered and stripped, then classes are put in
        merge order and joined by single spaces.
        """
        breakpoints = self._config.breakpoints
        tokens = filter_tokens(class_names.split(), window_width, breakpoints)
        return " ".join(order_tokens(tokens, len(breakpoints)))

    def resolve(self, class_names: str, window_width: float | None = None) -> Style:
        """Return the style dict for *class_names*.

        Raises :class:`MissingWidthForBreakpoint` when breakpoint classes are
        used without *window_width*, and
        :class:`MissingFontSizeForLetterSpacing` for ``tracking-*`` without
        ``text-*``. Unknown classes are skipped with a warning.

        The returned dict is cached and shared: do not modify it.
        """
        if not class_names or not class_names.strip():
            return self._cache.empty

        key = self.normalize(class_names, window_width)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        style = resolve_variables(self._merge(key))
        _logger.debug("Resolved %r into %d properties", key, len(style))
        return self._cache.store(key, style)

    __call__ = resolve

    def _merge(self, class_names: str) -> dict[str, Any]:
        style: dict[str, Any] = {}

        variants = font_variant(class_names)
        if variants:
            style["fontVariant"] = variants

        spacing = letter_spacing(self._styles, class_names, warn_unsupported=self._config.warn_unsupported)
        if spacing is not None:
            style["letterSpacing"] = spacing

        for name in class_names.split():
            if is_cross_class(name):
                continue
            fragment = self._styles.get(name)
            if fragment is None:
                if self._config.warn_unsupported:
                    _logger.warning('Unsupported Tailwind class: "%s" from class names "%s"', name, class_names)
                continue
            style.update(fragment)
        return style

    def get_color(self, color_spec: str) -> str | None:
        """Return the color value for a color name.

        ``"blue-500"`` gives the hex or rgba value of that color, and a color
        with an opacity, e.g. ``"black opacity-50"``, gives the color with
        the alpha channel applied (``"rgba(0, 0, 0, 0.5)"``). Returns
        ``None`` when the color cannot be resolved.

        Terms merge in the given order with ``opacity-*`` terms last, so
        the opacity always overrides the color's own default alpha.
        """
        terms = color_spec.split()
        if not terms:
            return None
        opacities = [term for term in terms if term.startswith(OPACITY_PREFIX)]
        colors = [term for term in terms if not term.startswith(OPACITY_PREFIX)]
        prefix = self._config.color_prefix
        key = " ".join(f"{prefix}{term}" for term in [*colors, *opacities])

        style = self._colors.get(key)
        if style is None:
            style = self._colors.store(key, resolve_variables(self._merge(key)))
        return style.get(COLOR_PROPERTY)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(classes={len(self._styles)}, cached={len(self._cache)})"


def create(
    styles: Mapping[str, Mapping[str, Any]],
    config: TwrnConfig | None = None,
) -> StylePipeline:
    """Build an independent pipeline over *styles* with its own cache."""
    return StylePipeline(styles, config)
