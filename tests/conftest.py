from __future__ import annotations

import copy
from typing import Any

import pytest

from pytwrn import StylePipeline, create

STYLES: dict[str, dict[str, Any]] = {
    "bg-red-500": {"backgroundColor": "#ef4444"},
    "bg-blue-500": {"backgroundColor": "#3b82f6"},
    "bg-black": {"--tw-bg-opacity": 1, "backgroundColor": "rgba(0, 0, 0, var(--tw-bg-opacity))"},
    "bg-white": {"--tw-bg-opacity": 1, "backgroundColor": "rgba(255, 255, 255, var(--tw-bg-opacity))"},
    "bg-opacity-50": {"--tw-bg-opacity": 0.5},
    "text-white": {"--tw-text-opacity": 1, "color": "rgba(255, 255, 255, var(--tw-text-opacity))"},
    "text-sm": {"fontSize": 14, "lineHeight": 20},
    "text-lg": {"fontSize": 18, "lineHeight": 28},
    "text-xl": {"fontSize": 20, "lineHeight": 28},
    "leading-6": {"lineHeight": 24},
    "leading-8": {"lineHeight": 32},
    "tracking-tighter": {"letterSpacing": "-0.05em"},
    "tracking-wide": {"letterSpacing": "0.025em"},
    "oldstyle-nums": {"fontVariant": ["oldstyle-nums"]},
    "tabular-nums": {"fontVariant": ["tabular-nums"]},
    "font-bold": {"fontWeight": "700"},
    "p-2": {"paddingTop": 8, "paddingRight": 8, "paddingBottom": 8, "paddingLeft": 8},
    "p-4": {"paddingTop": 16, "paddingRight": 16, "paddingBottom": 16, "paddingLeft": 16},
    "custom-color": {"--tw-color": "#fff", "color": "var(--tw-color)"},
}


@pytest.fixture
def styles() -> dict[str, dict[str, Any]]:
    return copy.deepcopy(STYLES)


@pytest.fixture
def pipeline(styles: dict[str, dict[str, Any]]) -> StylePipeline:
    return create(styles)
