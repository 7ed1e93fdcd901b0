"""Float-based grid mixins.

Column widths are percentages of the theme's column count; rows pull
their gutters back with a negative left margin.

Example:
.row { row(); }
.sidebar { column(3); }
.main { column(spaced, 9); }
"""

from __future__ import annotations

from stylemix.errors import MixinArgumentError
from stylemix.helpers import format_number, is_percentage, strip_unit, to_number
from stylemix.mixins.context import MixinContext
from stylemix.mixins.decorator import mixin
from stylemix.mixins.props import argument_errors, positional
from stylemix.nodes import Arguments, Declaration, Statement, Value


def column_width(span: Value, columns: Value) -> str:
    """Width of span columns out of columns, as a percentage."""
    with argument_errors("column"):
        span_number = to_number(span)
        column_count = to_number(columns)
    if column_count == 0:
        raise MixinArgumentError("column", "column count must not be zero")
    return f"{format_number(100 / column_count * span_number)}%"


@mixin("column")
def column(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Floated grid column.

    - ``column()``: full width
    - ``column(25%)``: explicit width
    - ``column(span, columns)``: span out of columns (default from theme)
    - ``column(spaced, span, columns, margin)``: same, plus a left gutter
    """
    values = positional("column", args, max_count=4)
    props: list[Statement] = [Declaration("float", "left")]

    if not values:
        props.append(Declaration("width", "100%"))
        return props

    first = values[0]
    if is_percentage(first):
        props.append(Declaration("width", first))
    elif first == "spaced":
        if len(values) < 2:
            raise MixinArgumentError("column", "spaced columns require a span")
        columns = values[2] if len(values) > 2 else ctx.theme.grid_columns
        margin = values[3] if len(values) > 3 else ctx.theme.grid_margin
        props.append(Declaration("width", column_width(values[1], columns)))
        props.extend(ctx.call("margin", left=margin))
    else:
        columns = values[1] if len(values) > 1 else ctx.theme.grid_columns
        props.append(Declaration("width", column_width(first, columns)))
    return props


def _gutter(name: str, args: Arguments, ctx: MixinContext) -> int:
    """Row gutter as a whole percentage."""
    values = positional(name, args, max_count=1)
    margin = values[0] if values and values[0] else ctx.theme.grid_margin
    with argument_errors(name):
        return int(strip_unit(margin))


@mixin("row")
def row(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Grid row: negative gutter, widened max-width, clearfix."""
    gutter = _gutter("row", args, ctx)
    return [
        *ctx.call("margin", left=f"{-gutter}%"),
        Declaration("max-width", f"{100 + gutter}%"),
        *ctx.call("clearfix"),
    ]


@mixin("rowModify")
def row_modify(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Change a row's gutter without adding another clearfix."""
    gutter = _gutter("rowModify", args, ctx)
    return [
        *ctx.call("margin", left=f"{-gutter}%"),
        Declaration("max-width", f"{100 + gutter}%"),
    ]


@mixin("rowReset")
def row_reset(ctx: MixinContext, args: Arguments) -> list[Statement]:
    """Undo a row's gutter."""
    return [*ctx.call("margin", left=0), Declaration("max-width", "none")]
