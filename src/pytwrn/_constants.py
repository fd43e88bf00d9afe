"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Default breakpoint tiers  (prefix, minimum window width in px)
# ------------------------------------------------------------------

DEFAULT_BREAKPOINTS: tuple[tuple[str, int], ...] = (
    ("sm:", 640),
    ("md:", 768),
    ("lg:", 1024),
    ("xl:", 1280),
)

# ------------------------------------------------------------------
# Classes resolved across tokens instead of by plain lookup
# ------------------------------------------------------------------

FONT_VARIANT_CLASSES: tuple[str, ...] = (
    "oldstyle-nums",
    "lining-nums",
    "tabular-nums",
    "proportional-nums",
)

FONT_SIZE_SUFFIXES: tuple[str, ...] = (
    "xs",
    "sm",
    "base",
    "lg",
    "xl",
    "2xl",
    "3xl",
    "4xl",
    "5xl",
    "6xl",
    "7xl",
    "8xl",
    "9xl",
)

LETTER_SPACING_PREFIX = "tracking-"
LINE_HEIGHT_PREFIX = "leading-"
OPACITY_PREFIX = "opacity-"

# Synthetic prefix turning a color name into a background utility.
COLOR_PREFIX = "bg-"
COLOR_PROPERTY = "backgroundColor"

# Properties with this prefix are intermediate variables, never returned.
VARIABLE_PREFIX = "--"
