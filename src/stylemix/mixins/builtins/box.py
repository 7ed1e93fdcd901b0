"""Box model mixins: margin, padding, border and background."""

from __future__ import annotations

from stylemix.helpers import format_number, hex_to_rgba, is_color, is_number
from stylemix.mixins.context import MixinContext
from stylemix.mixins.decorator import mixin
from stylemix.mixins.props import argument_errors, build_ordered_props, build_props, positional, prefixer
from stylemix.nodes import Arguments, Declaration, Keyword, Positional, Statement, Value

SIDES = ("top", "right", "left", "bottom")

BORDER_KEYWORDS = frozenset({"top", "right", "bottom", "left", "vertical", "horizontal"})

_AXES = {
    "vertical": ("border-left", "border-right"),
    "horizontal": ("border-top", "border-bottom"),
}


def _box(name: str, args: Arguments) -> list[Statement]:
    match args:
        case Keyword():
            return build_props(args, name)
        case Positional(values=values) if len(values) > 1:
            with argument_errors(name):
                return list(build_ordered_props([f"{name}-{side}" for side in SIDES], values))
        case Positional(values=(value,)):
            return [Declaration(name, value)]
    return []


@mixin("margin")
def margin(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Margin shorthand or individual sides.

    ``margin(1, 2, 3, 4)`` sets top, right, left and bottom in that order;
    ``margin(top: 1)`` sets the named sides; ``margin(2)`` is the shorthand.
    """
    return _box("margin", args)


@mixin("padding")
def padding(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Padding with the same argument forms as margin."""
    return _box("padding", args)


# =============================================================================
# Border
# =============================================================================


def _border_sides(side: str, value: Value) -> list[Statement]:
    if side in _AXES:
        return list(build_ordered_props(_AXES[side], value))
    return [Declaration(prefixer(side, "border"), value)]


@mixin("border")
def border(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Border shorthand.

    - ``border()``: default 1px solid theme border
    - ``border(top)``, ``border(vertical)``: sides with the default border
    - ``border(none)``, ``border(#f00)``, ``border(2px dashed red)``
    - ``border(left, #f00)``, ``border(radius, 3px)``: side or sub-property
    """
    if isinstance(args, Keyword):
        return build_props(args, "border")

    values = positional("border", args, max_count=2)
    default = f"1px solid {ctx.theme.border_color}"

    if not values:
        return [Declaration("border", default)]

    first = values[0]
    if len(values) == 1:
        if first in BORDER_KEYWORDS:
            return _border_sides(str(first), default)
        if first in (0, "0", "none"):
            return [Declaration("border", "none")]
        if is_color(first):
            return [Declaration("border", f"1px solid {first}")]
        return [Declaration("border", first)]

    value = values[1]
    if is_color(value):
        value = f"1px solid {value}"
    return _border_sides(str(first), value)


# =============================================================================
# Background
# =============================================================================


def _css_text(value: Value) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


@mixin("background")
def background(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Background shorthand.

    A number directly after the color is an opacity and folds the color
    into ``rgba()``: ``background(#fff, .5, url(bg.png))`` gives
    ``background: rgba(255, 255, 255, 0.5) url(bg.png)``.
    """
    if isinstance(args, Keyword):
        return build_props(args, "background")

    values = list(positional("background", args))
    if not values or not values[0]:
        return []

    if len(values) > 1 and is_number(values[1]):
        with argument_errors("background"):
            values[0:2] = [hex_to_rgba(str(values[0]), values[1])]

    return [Declaration("background", " ".join(_css_text(value) for value in values))]
