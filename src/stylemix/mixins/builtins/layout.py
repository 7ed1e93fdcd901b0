"""Positioning, display and sizing mixins.

Example:
.card {
    absolute(0, 0);
    spacedBlock(3, 20, 10);
    clearfix();
}

Thread Safety:
Stateless functions. Safe for concurrent use across threads.
"""

from __future__ import annotations

from stylemix.errors import MixinArgumentError
from stylemix.mixins.context import MixinContext
from stylemix.mixins.decorator import mixin
from stylemix.mixins.props import argument_errors, build_ordered_props, build_props, positional, required
from stylemix.nodes import Arguments, Declaration, Keyword, Positional, Rule, Statement

# Positional order for offsets; left comes before bottom
OFFSET_ORDER = ("top", "right", "left", "bottom")


# =============================================================================
# Position
# =============================================================================


def _position(kind: str, args: Arguments) -> list[Statement]:
    props: list[Statement] = [Declaration("position", kind)]
    match args:
        case Keyword():
            props.extend(build_props(args))
        case Positional(values=values) if values:
            with argument_errors(kind):
                props.extend(build_ordered_props(OFFSET_ORDER, values))
    return props


@mixin("absolute")
def absolute(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """``position: absolute`` plus offsets (top, right, left, bottom)."""
    return _position("absolute", args)


@mixin("fixed")
def fixed(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """``position: fixed`` plus offsets (top, right, left, bottom)."""
    return _position("fixed", args)


@mixin("relative")
def relative(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """``position: relative`` plus offsets (top, right, left, bottom)."""
    return _position("relative", args)


def _float_or_offset(side: str, args: Arguments) -> Declaration:
    values = positional(side, args, max_count=1)
    if not values:
        return Declaration("float", side)
    return Declaration(side, values[0])


@mixin("left")
def left(ctx: MixinContext, args: Arguments) -> Declaration:
    """``float: left`` without a value, ``left: <value>`` with one."""
    return _float_or_offset("left", args)


@mixin("right")
def right(ctx: MixinContext, args: Arguments) -> Declaration:
    """``float: right`` without a value, ``right: <value>`` with one."""
    return _float_or_offset("right", args)


# =============================================================================
# Display and visibility
# =============================================================================


@mixin("display")
def display(ctx: MixinContext, args: Arguments) -> Declaration:
    return Declaration("display", required("display", args))


@mixin("inline")
def inline(ctx: MixinContext, args: Arguments) -> tuple[Statement, ...]:
    return ctx.call("display", "inline")


@mixin("hide")
def hide(ctx: MixinContext, args: Arguments) -> tuple[Statement, ...]:
    return ctx.call("display", "none")


@mixin("show")
def show(ctx: MixinContext, args: Arguments) -> tuple[Statement, ...]:
    return ctx.call("display", "inherit")


@mixin("visibility")
def visibility(ctx: MixinContext, args: Arguments) -> Declaration:
    return Declaration("visibility", required("visibility", args))


@mixin("hidden")
def hidden(ctx: MixinContext, args: Arguments) -> tuple[Statement, ...]:
    return ctx.call("visibility", "hidden")


@mixin("visible")
def visible(ctx: MixinContext, args: Arguments) -> tuple[Statement, ...]:
    return ctx.call("visibility", "visible")


def _sized_display(ctx: MixinContext, name: str, kind: str, args: Arguments) -> list[Statement]:
    """``display: <kind>`` followed by width and height."""
    props: list[Statement] = list(ctx.call("display", kind))
    match args:
        case Keyword():
            props.extend(build_props(args))
        case Positional(values=values) if values:
            positional(name, args, max_count=2)
            props.append(Declaration("width", values[0]))
            if len(values) > 1 and values[1]:
                props.append(Declaration("height", values[1]))
    return props


@mixin("block")
def block(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Display block with optional width and height.

    Accepts ``block(width, height)`` or ``block(width: ..., height: ...)``.
    """
    return _sized_display(ctx, "block", "block", args)


@mixin("inlineBlock")
def inline_block(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Display inline-block with optional width and height."""
    return _sized_display(ctx, "inlineBlock", "inline-block", args)


@mixin("centeredBlock")
def centered_block(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """A block centered with auto left and right margins."""
    return [*ctx.invoke("block", args), *ctx.call("margin", left="auto", right="auto")]


# =============================================================================
# Floats
# =============================================================================


@mixin("clear")
def clear(ctx: MixinContext, args: Arguments) -> Declaration:
    values = positional("clear", args, max_count=1)
    return Declaration("clear", values[0] if values else "both")


@mixin("content")
def content(ctx: MixinContext, args: Arguments) -> Declaration:
    return Declaration("content", "''")


@mixin("clearfix")
def clearfix(ctx: MixinContext, args: Arguments) -> Rule:
    """Clear floats with an ``&:after`` pseudo-element."""
    return Rule(
        "&:after",
        [*ctx.call("clear"), *ctx.call("content"), *ctx.call("display", "block")],
    )


# =============================================================================
# Size
# =============================================================================


def _dimensions(name: str, width_prop: str, height_prop: str, args: Arguments) -> list[Statement]:
    values = positional(name, args, max_count=2)
    if not values:
        raise MixinArgumentError(name, "requires a width")
    width = values[0]
    height = values[1] if len(values) > 1 and values[1] else width
    return [Declaration(width_prop, width), Declaration(height_prop, height)]


@mixin("size")
def size(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Width and height; height defaults to width."""
    return _dimensions("size", "width", "height", args)


@mixin("minSize")
def min_size(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Min-width and min-height; min-height defaults to min-width."""
    return _dimensions("minSize", "min-width", "min-height", args)


# =============================================================================
# Spacing
# =============================================================================


@mixin("spaced")
def spaced(ctx: MixinContext, args: Arguments) -> tuple[Statement, ...]:
    """Bottom margin, defaulting to the theme's block spacing.

    Only the first positional value is used; keyword calls get the default.
    """
    match args:
        case Positional(values=values) if values:
            value = values[0]
        case _:
            value = ctx.theme.block_margin_bottom
    return ctx.call("margin", bottom=value)


@mixin("spacedBlock")
def spaced_block(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Bottom margin plus a block.

    ``spacedBlock(spacing, width, height)`` passes the values after the
    spacing on to ``block``. A keyword call emits its pairs as given and
    uses the default spacing.
    """
    props: list[Statement] = list(ctx.invoke("spaced", args))
    match args:
        case Keyword():
            props.extend(build_props(args))
            props.extend(ctx.call("block"))
        case Positional(values=values) if len(values) > 1:
            props.extend(ctx.call("block", *values[1:]))
        case _:
            props.extend(ctx.call("block"))
    return props
