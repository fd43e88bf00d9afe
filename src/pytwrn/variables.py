"""Primitive support for CSS variables in style fragments.

Tailwind expresses color opacity through variables, e.g.::

    {"--tw-bg-opacity": 1, "backgroundColor": "rgba(0, 0, 0, var(--tw-bg-opacity))"}

Only one level is substituted and variables themselves are not returned.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pytwrn._constants import VARIABLE_PREFIX

__all__ = ["resolve_variables"]

_VAR_RE = re.compile(r"var\(\s*(--[a-zA-Z0-9_-]+)\s*\)")


def _format_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_variables(style: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *style* with ``var(--name)`` placeholders filled in.

    Values are read from *style* by name. Keys starting with ``--`` are
    dropped. Only the first placeholder of a string is replaced; an
    unknown variable leaves the string untouched.
    """
    resolved: dict[str, Any] = {}
    for key, value in style.items():
        if key.startswith(VARIABLE_PREFIX):
            continue
        if isinstance(value, str):
            match = _VAR_RE.search(value)
            if match is not None and match.group(1) in style:
                substitute = style[match.group(1)]
                if match.group(0) == value:
                    value = substitute
                else:
                    value = value[: match.start()] + _format_value(substitute) + value[match.end() :]
        resolved[key] = value
    return resolved
