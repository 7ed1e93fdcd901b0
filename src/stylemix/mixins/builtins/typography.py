"""Text and font mixins."""

from __future__ import annotations

from stylemix.helpers import find_top_level, split_words
from stylemix.mixins.context import MixinContext
from stylemix.mixins.decorator import mixin
from stylemix.mixins.props import build_props, positional, required
from stylemix.nodes import Arguments, Declaration, Keyword, Statement, Value

# Positional font arguments after the family, in call order
FONT_ORDER = ("font-size", "font-weight", "line-height", "font-style")


def font_family(value: Value) -> Value:
    """Turn a space-separated family list into a comma-separated one.

    Examples:
        >>> font_family("'Open Sans' Arial sans-serif")
        "'Open Sans', Arial, sans-serif"
    """
    if not isinstance(value, str) or find_top_level(value, ",") != -1:
        return value
    return ", ".join(split_words(value))


@mixin("font")
def font(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Font shorthand.

    ``font(family, size, weight, lineHeight, style)`` emits each part that
    is given and truthy. A keyword call prefixes its names with ``font-``,
    except ``lineHeight``.

    Example:
        font('Open Sans' Arial sans-serif, 5, bold, 1.2);
    """
    if isinstance(args, Keyword):
        return build_props(args, "font", ["lineHeight", "line-height"])

    values = positional("font", args, max_count=1 + len(FONT_ORDER))
    if not values:
        return []

    props: list[Statement] = [Declaration("font-family", font_family(values[0]))]
    for prop, value in zip(FONT_ORDER, values[1:]):
        if value:
            props.append(Declaration(prop, value))
    return props


@mixin("bold")
def bold(ctx: MixinContext, args: Arguments) -> Declaration:
    return Declaration("font-weight", ctx.theme.font_weight_bold)


@mixin("italic")
def italic(ctx: MixinContext, args: Arguments) -> Declaration:
    return Declaration("font-style", "italic")


@mixin("align")
def align(ctx: MixinContext, args: Arguments) -> Declaration:
    return Declaration("text-align", required("align", args))


@mixin("vAlign")
def v_align(ctx: MixinContext, args: Arguments) -> Declaration:
    return Declaration("vertical-align", required("vAlign", args))


@mixin("color")
def color(ctx: MixinContext, args: Arguments) -> Declaration:
    return Declaration("color", required("color", args))


@mixin("unstyled")
def unstyled(ctx: MixinContext, args: Arguments) -> Declaration:
    """Remove list bullets."""
    return Declaration("list-style", "none")
