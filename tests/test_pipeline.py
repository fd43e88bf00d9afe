from __future__ import annotations

import copy
import logging
from typing import Any

import pytest

from pytwrn import (
    Breakpoint,
    MissingFontSizeForLetterSpacing,
    MissingWidthForBreakpoint,
    StylePipeline,
    TwrnConfig,
    create,
)


def test_empty_input_returns_seeded_empty_dict(pipeline: StylePipeline) -> None:
    empty = pipeline.resolve("")
    assert empty == {}
    assert pipeline.resolve("   ") is empty
    assert pipeline.resolve("\t\n") is empty
    assert empty is pipeline.cache.empty


def test_repeated_resolve_returns_cached_object(pipeline: StylePipeline) -> None:
    first = pipeline.resolve("p-2 font-bold")
    assert pipeline.resolve("p-2 font-bold") is first
    assert pipeline.resolve("  font-bold   p-2 ") is first


def test_sort_order_decides_precedence(pipeline: StylePipeline) -> None:
    style = pipeline.resolve("bg-red-500 bg-blue-500")

    # "bg-red-500" sorts after "bg-blue-500" and so wins regardless of input order.
    assert style["backgroundColor"] == "#ef4444"
    assert pipeline.resolve("bg-blue-500 bg-red-500") is style


def test_leading_overrides_font_size_line_height(pipeline: StylePipeline) -> None:
    style = pipeline.resolve("leading-6 text-lg")
    assert style == {"fontSize": 18, "lineHeight": 24}
    assert pipeline.resolve("text-lg leading-6") is style


def test_breakpoint_requires_width(pipeline: StylePipeline) -> None:
    with pytest.raises(MissingWidthForBreakpoint):
        pipeline.resolve("md:text-lg")


def test_breakpoint_below_threshold_is_filtered(pipeline: StylePipeline) -> None:
    assert pipeline.resolve("md:text-lg", 700) is pipeline.cache.empty
    assert pipeline.resolve("p-2 md:text-lg", 700) == pipeline.resolve("p-2")


def test_breakpoint_at_threshold_is_kept_and_stripped(pipeline: StylePipeline) -> None:
    style = pipeline.resolve("md:text-lg", 800)
    assert style == {"fontSize": 18, "lineHeight": 28}
    assert pipeline.resolve("text-lg") is style


def test_wider_tier_overrides_untagged(pipeline: StylePipeline) -> None:
    style = pipeline.resolve("lg:text-xl text-sm md:text-lg", 1100)
    assert style["fontSize"] == 20

    assert pipeline.resolve("lg:text-xl text-sm md:text-lg", 900)["fontSize"] == 18


def test_letter_spacing_coupled_to_font_size(pipeline: StylePipeline) -> None:
    style = pipeline.resolve("text-lg tracking-tighter")
    assert style["letterSpacing"] == pytest.approx(-0.05 * 18)
    assert style["fontSize"] == 18


def test_letter_spacing_without_font_size_raises(pipeline: StylePipeline) -> None:
    with pytest.raises(MissingFontSizeForLetterSpacing):
        pipeline.resolve("tracking-tighter")


def test_letter_spacing_validated_across_breakpoints(pipeline: StylePipeline) -> None:
    style = pipeline.resolve("tracking-wide md:text-xl", 800)
    assert style["letterSpacing"] == pytest.approx(0.5)

    with pytest.raises(MissingFontSizeForLetterSpacing):
        pipeline.resolve("tracking-wide md:text-xl", 700)


def test_font_variant_aggregated(pipeline: StylePipeline) -> None:
    style = pipeline.resolve("tabular-nums oldstyle-nums")
    assert style == {"fontVariant": ["oldstyle-nums", "tabular-nums"]}


def test_unsupported_class_warns_once(pipeline: StylePipeline, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="pytwrn"):
        style = pipeline.resolve("not-a-real-class")
        again = pipeline.resolve("not-a-real-class")

    assert style == {}
    assert again is style
    assert len(caplog.records) == 1
    message = caplog.records[0].getMessage()
    assert '"not-a-real-class"' in message


def test_unsupported_class_keeps_partial_result(
    pipeline: StylePipeline,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="pytwrn"):
        style = pipeline.resolve("p-2 bogus font-bold")

    assert style["fontWeight"] == "700"
    assert style["paddingTop"] == 8
    assert [r.getMessage() for r in caplog.records] == [
        'Unsupported Tailwind class: "bogus" from class names "bogus font-bold p-2"'
    ]


def test_warnings_can_be_disabled(styles: dict[str, dict[str, Any]], caplog: pytest.LogCaptureFixture) -> None:
    quiet = create(styles, TwrnConfig(warn_unsupported=False))
    with caplog.at_level(logging.WARNING, logger="pytwrn"):
        assert quiet.resolve("bogus") == {}
        assert quiet.resolve("text-lg tracking-huge") == {"fontSize": 18, "lineHeight": 28}
        assert quiet.get_color("chartreuse") is None
    assert caplog.records == []


def test_variables_substituted_and_dropped(pipeline: StylePipeline) -> None:
    assert pipeline.resolve("custom-color") == {"color": "#fff"}


def test_opacity_variable_overridden_by_later_class(pipeline: StylePipeline) -> None:
    style = pipeline.resolve("bg-opacity-50 bg-black text-white")
    assert style == {
        "backgroundColor": "rgba(0, 0, 0, 0.5)",
        "color": "rgba(255, 255, 255, 1)",
    }


def test_fragments_are_not_modified(styles: dict[str, dict[str, Any]]) -> None:
    before = copy.deepcopy(styles)
    pipeline = create(styles)

    pipeline.resolve("text-lg leading-6 tracking-tighter bg-black bg-opacity-50 tabular-nums oldstyle-nums")

    assert styles == before


def test_get_color(pipeline: StylePipeline) -> None:
    assert pipeline.get_color("red-500") == "#ef4444"
    assert pipeline.get_color("black") == "rgba(0, 0, 0, 1)"
    assert pipeline.get_color("black opacity-50") == "rgba(0, 0, 0, 0.5)"


def test_get_color_opacity_wins_for_colors_sorting_after_it(pipeline: StylePipeline) -> None:
    assert pipeline.get_color("white opacity-50") == "rgba(255, 255, 255, 0.5)"
    assert pipeline.get_color("opacity-50 white") == "rgba(255, 255, 255, 0.5)"
    assert pipeline.get_color("white") == "rgba(255, 255, 255, 1)"


def test_get_color_is_cached_apart_from_class_lists(pipeline: StylePipeline) -> None:
    assert pipeline.get_color("white opacity-50") == "rgba(255, 255, 255, 0.5)"

    # The same classes as a class list still follow sort order.
    assert pipeline.resolve("bg-white bg-opacity-50")["backgroundColor"] == "rgba(255, 255, 255, 1)"
    assert pipeline.get_color("white opacity-50") == "rgba(255, 255, 255, 0.5)"


def test_get_color_unresolved(pipeline: StylePipeline, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="pytwrn"):
        assert pipeline.get_color("chartreuse") is None
    assert pipeline.get_color("") is None
    assert pipeline.get_color("   ") is None


def test_get_color_custom_prefix() -> None:
    pipeline = create({"fill-black": {"backgroundColor": "#000"}}, TwrnConfig(color_prefix="fill-"))
    assert pipeline.get_color("black") == "#000"


def test_pipelines_do_not_share_cache(styles: dict[str, dict[str, Any]]) -> None:
    first = create(styles)
    second = create(styles)

    style = first.resolve("p-2")

    assert "p-2" in first.cache
    assert "p-2" not in second.cache
    assert second.resolve("p-2") == style
    assert second.resolve("p-2") is not style


def test_pipeline_is_callable(pipeline: StylePipeline) -> None:
    assert pipeline("text-lg") is pipeline.resolve("text-lg")


def test_normalize_builds_cache_key(pipeline: StylePipeline) -> None:
    assert pipeline.normalize("xl:p-4 leading-6  text-lg sm:p-2", 1300) == "text-lg leading-6 p-2 p-4"


def test_custom_breakpoints(styles: dict[str, dict[str, Any]]) -> None:
    config = TwrnConfig(breakpoints=(Breakpoint(prefix="tablet:", min_width=600),))
    pipeline = create(styles, config)

    assert pipeline.resolve("p-2 tablet:p-4", 700)["paddingTop"] == 16
    assert pipeline.resolve("p-2 tablet:p-4", 500)["paddingTop"] == 8
