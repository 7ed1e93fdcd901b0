"""Tests for margin, padding, border and background mixins."""

import pytest

from stylemix.errors import MixinArgumentError
from stylemix.mixins import MixinContext


def pairs(statements) -> list[tuple[str, object]]:
    return [(decl.property, decl.value) for decl in statements]


class TestMarginPadding:
    @pytest.mark.parametrize("name", ["margin", "padding"])
    def test_shorthand(self, ctx: MixinContext, name: str) -> None:
        assert pairs(ctx.call(name, 2)) == [(name, 2)]

    def test_shorthand_string(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("margin", "0 auto")) == [("margin", "0 auto")]

    def test_ordered(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("margin", 1, 2, 3, 4)) == [
            ("margin-top", 1),
            ("margin-right", 2),
            ("margin-left", 3),
            ("margin-bottom", 4),
        ]

    def test_two_values(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("padding", 1, 2)) == [("padding-top", 1), ("padding-right", 2)]

    def test_keywords_keep_call_order(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("margin", top=1, bottom=4, right=2, left=3)) == [
            ("margin-top", 1),
            ("margin-bottom", 4),
            ("margin-right", 2),
            ("margin-left", 3),
        ]

    def test_no_arguments(self, ctx: MixinContext) -> None:
        assert ctx.call("margin") == ()

    def test_too_many(self, ctx: MixinContext) -> None:
        with pytest.raises(MixinArgumentError, match="Mixin 'padding'"):
            ctx.call("padding", 1, 2, 3, 4, 5)


class TestBorder:
    def test_default(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("border")) == [("border", "1px solid #d8d8d8")]

    def test_theme_color(self, themed_ctx) -> None:
        ctx = themed_ctx(border_color="#000")
        assert pairs(ctx.call("border", "top")) == [("border-top", "1px solid #000")]

    @pytest.mark.parametrize("side", ["top", "right", "bottom", "left"])
    def test_side(self, ctx: MixinContext, side: str) -> None:
        assert pairs(ctx.call("border", side)) == [(f"border-{side}", "1px solid #d8d8d8")]

    def test_vertical(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("border", "vertical")) == [
            ("border-left", "1px solid #d8d8d8"),
            ("border-right", "1px solid #d8d8d8"),
        ]

    def test_horizontal(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("border", "horizontal")) == [
            ("border-top", "1px solid #d8d8d8"),
            ("border-bottom", "1px solid #d8d8d8"),
        ]

    @pytest.mark.parametrize("value", [0, "0", "none"])
    def test_none(self, ctx: MixinContext, value: object) -> None:
        assert pairs(ctx.call("border", value)) == [("border", "none")]

    def test_color(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("border", "#f00")) == [("border", "1px solid #f00")]

    def test_verbatim(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("border", "2px dashed red")) == [("border", "2px dashed red")]

    def test_side_with_color(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("border", "left", "#f00")) == [("border-left", "1px solid #f00")]

    def test_axis_with_value(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("border", "vertical", "2px solid red")) == [
            ("border-left", "2px solid red"),
            ("border-right", "2px solid red"),
        ]

    def test_sub_property(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("border", "radius", "3px")) == [("border-radius", "3px")]

    def test_keywords(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("border", color="#fff", width="2px")) == [
            ("border-color", "#fff"),
            ("border-width", "2px"),
        ]

    def test_too_many(self, ctx: MixinContext) -> None:
        with pytest.raises(MixinArgumentError, match="Mixin 'border'"):
            ctx.call("border", "top", "1px", "red")


class TestBackground:
    def test_color(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("background", "#fff")) == [("background", "#fff")]

    def test_opacity_folds_into_rgba(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("background", "#fff", 0.5)) == [
            ("background", "rgba(255, 255, 255, 0.5)")
        ]

    def test_opacity_out_of_hundred(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("background", "#000", 50)) == [("background", "rgba(0, 0, 0, 0.5)")]

    def test_zero_opacity(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("background", "#000", 0)) == [("background", "rgba(0, 0, 0, 0)")]

    def test_remaining_arguments_joined(self, ctx: MixinContext) -> None:
        result = ctx.call("background", "#fff", 0.5, "url(bg.png)", "no-repeat")
        assert pairs(result) == [("background", "rgba(255, 255, 255, 0.5) url(bg.png) no-repeat")]

    def test_without_opacity(self, ctx: MixinContext) -> None:
        result = ctx.call("background", "#fff", "no-repeat", "right", "top")
        assert pairs(result) == [("background", "#fff no-repeat right top")]

    def test_numbers_after_first_position_formatted(self, ctx: MixinContext) -> None:
        result = ctx.call("background", "url(a.png)", "repeat-x", 0)
        assert pairs(result) == [("background", "url(a.png) repeat-x 0")]

    def test_opacity_needs_hex_color(self, ctx: MixinContext) -> None:
        with pytest.raises(MixinArgumentError, match="Mixin 'background'"):
            ctx.call("background", "red", 0.5)

    def test_empty(self, ctx: MixinContext) -> None:
        assert ctx.call("background") == ()

    def test_keywords(self, ctx: MixinContext) -> None:
        assert pairs(ctx.call("background", color="#fff", repeat="no-repeat")) == [
            ("background-color", "#fff"),
            ("background-repeat", "no-repeat"),
        ]
