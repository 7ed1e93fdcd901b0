"""Opacity mixins."""

from __future__ import annotations

from stylemix.helpers import calc_opacity, is_variable
from stylemix.mixins.context import MixinContext
from stylemix.mixins.decorator import mixin
from stylemix.mixins.props import argument_errors, required
from stylemix.nodes import Arguments, Declaration, Statement


@mixin("opacity")
def opacity(ctx: MixinContext, args: Arguments) -> Declaration:
    """Opacity from a fraction, a percentage or a number out of 100.

    ``opacity(.4)``, ``opacity(40%)`` and ``opacity(40)`` all give 0.4.
    Variables are passed through for a later processor.
    """
    value = required("opacity", args)
    if is_variable(value):
        return Declaration("opacity", value)
    with argument_errors("opacity"):
        return Declaration("opacity", calc_opacity(value))


@mixin("opaque")
def opaque(ctx: MixinContext, args: Arguments) -> tuple[Statement, ...]:
    return ctx.call("opacity", 1)


@mixin("transparent")
def transparent(ctx: MixinContext, args: Arguments) -> tuple[Statement, ...]:
    return ctx.call("opacity", 0)
