"""Merge ordering for filtered class tokens.

The order produced here is the only override mechanism: later classes win
when fragments are merged. Tokens are grouped into buckets (untagged first,
then each breakpoint tier in ascending order), each bucket is sorted, and
``leading-*`` classes go last in their bucket so a line height always beats
the default line height carried by a ``text-*`` font size.
"""

from __future__ import annotations

from collections.abc import Iterable

from pytwrn._constants import LINE_HEIGHT_PREFIX
from pytwrn.breakpoints import ClassToken

__all__ = ["order_tokens", "put_leading_last"]


def put_leading_last(names: Iterable[str]) -> list[str]:
    """Move ``leading-*`` names behind the others, keeping both groups' order."""
    leading: list[str] = []
    others: list[str] = []
    for name in names:
        if name.startswith(LINE_HEIGHT_PREFIX):
            leading.append(name)
        else:
            others.append(name)
    return [*others, *leading]


def order_tokens(tokens: Iterable[ClassToken], tier_count: int) -> list[str]:
    """Return class names in merge order.

    Parameters
    ----------
    tokens : iterable of ClassToken
        Filtered tokens with their tier of origin.
    tier_count : int
        Number of configured breakpoint tiers.

    Returns
    -------
    list of str
        Untagged bucket, then tier 0 .. ``tier_count - 1``, each sorted
        with ``leading-*`` names last.
    """
    buckets: list[list[str]] = [[] for _ in range(tier_count + 1)]
    for token in tokens:
        index = 0 if token.tier is None else token.tier + 1
        buckets[index].append(token.name)

    ordered: list[str] = []
    for bucket in buckets:
        ordered.extend(put_leading_last(sorted(bucket)))
    return ordered
