"""Breakpoint filtering.

Classes may carry a tier tag such as ``md:``. Tiers are mobile-first and
cumulative: at a given window width every tier whose minimum width is at
or below it is active, and tagged classes of active tiers are kept with
the tag stripped. Tagged classes of inactive tiers are dropped.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple

from pytwrn.config import Breakpoint
from pytwrn.exceptions import MissingWidthForBreakpoint

__all__ = [
    "ClassToken",
    "active_tier_count",
    "filter_tokens",
    "require_width",
    "tier_of",
]


class ClassToken(NamedTuple):
    """A class name with its breakpoint tag stripped."""

    name: str
    tier: int | None = None


def tier_of(token: str, breakpoints: Sequence[Breakpoint]) -> int | None:
    """Return the index of the tier *token* is tagged with, or ``None``."""
    for index, breakpoint in enumerate(breakpoints):
        if token.startswith(breakpoint.prefix):
            return index
    return None


def require_width(
    tokens: Iterable[str],
    window_width: float | None,
    breakpoints: Sequence[Breakpoint],
) -> None:
    """Raise :class:`MissingWidthForBreakpoint` for tagged tokens without a width."""
    if window_width:
        return
    tokens = list(tokens)
    if any(tier_of(token, breakpoints) is not None for token in tokens):
        raise MissingWidthForBreakpoint(
            f"Found media queries usage without windowWidth: {window_width}",
            class_names=" ".join(tokens),
        )


def active_tier_count(window_width: float | None, breakpoints: Sequence[Breakpoint]) -> int:
    """Return how many tiers are active at *window_width*."""
    if not window_width:
        return 0
    return sum(1 for breakpoint in breakpoints if window_width >= breakpoint.min_width)


def filter_tokens(
    tokens: Iterable[str],
    window_width: float | None,
    breakpoints: Sequence[Breakpoint],
) -> list[ClassToken]:
    """Drop tokens of inactive tiers and strip the tag from the rest.

    Untagged tokens are always kept. Relative order is preserved.
    """
    tokens = list(tokens)
    require_width(tokens, window_width, breakpoints)
    active = active_tier_count(window_width, breakpoints)

    kept: list[ClassToken] = []
    for token in tokens:
        tier = tier_of(token, breakpoints)
        if tier is None:
            kept.append(ClassToken(token))
        elif tier < active:
            kept.append(ClassToken(token[len(breakpoints[tier].prefix) :], tier))
    return kept
