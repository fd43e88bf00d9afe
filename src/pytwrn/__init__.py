"""pytwrn - Tailwind utility classes to React Native style objects."""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

try:
    __version__ = version("pytwrn")
except PackageNotFoundError:
    __version__ = "0+local"

from pytwrn.config import Breakpoint, TwrnConfig
from pytwrn.exceptions import (
    ConfigurationError,
    MissingFontSizeForLetterSpacing,
    MissingWidthForBreakpoint,
    StylesLoadError,
    TwrnError,
)
from pytwrn.pipeline import StylePipeline, create
from pytwrn.styles import load_styles

_default: StylePipeline | None = None


def default_pipeline() -> StylePipeline:
    """Return the shared pipeline, building it from the environment on first use."""
    global _default
    if _default is None:
        config = TwrnConfig.from_env()
        _default = create(load_styles(config.styles_path), config)
    return _default


def reset_default_pipeline() -> None:
    """Forget the shared pipeline and its cache."""
    global _default
    _default = None


def tailwind(class_names: str, window_width: float | None = None) -> dict[str, Any]:
    """Resolve *class_names* with the shared pipeline over the bundled table."""
    return default_pipeline().resolve(class_names, window_width)


def get_color(color_spec: str) -> str | None:
    """Resolve a color name (e.g. ``"black opacity-50"``) with the shared pipeline."""
    return default_pipeline().get_color(color_spec)


__all__ = [
    "__version__",
    "Breakpoint",
    "ConfigurationError",
    "MissingFontSizeForLetterSpacing",
    "MissingWidthForBreakpoint",
    "StylePipeline",
    "StylesLoadError",
    "TwrnConfig",
    "TwrnError",
    "create",
    "default_pipeline",
    "get_color",
    "load_styles",
    "reset_default_pipeline",
    "tailwind",
]
