"""Built-in mixins.

Provides the standard mixin library out of the box:
- Layout: absolute, fixed, relative, display aliases, block, size, spacing
- Grid: column, row, rowModify, rowReset
- Box: margin, padding, border, background
- Typography: font, bold, italic, align, vAlign, color, unstyled
- Effects: opacity, opaque, transparent

"""

from __future__ import annotations

from stylemix.mixins.builtins.box import background, border, margin, padding
from stylemix.mixins.builtins.effects import opacity, opaque, transparent
from stylemix.mixins.builtins.grid import column, row, row_modify, row_reset
from stylemix.mixins.builtins.layout import (
    absolute,
    block,
    centered_block,
    clear,
    clearfix,
    content,
    display,
    fixed,
    hidden,
    hide,
    inline,
    inline_block,
    left,
    min_size,
    relative,
    right,
    show,
    size,
    spaced,
    spaced_block,
    visibility,
    visible,
)
from stylemix.mixins.builtins.typography import (
    align,
    bold,
    color,
    font,
    italic,
    unstyled,
    v_align,
)

BUILTIN_MIXINS = (
    # Layout
    absolute,
    fixed,
    relative,
    left,
    right,
    display,
    inline,
    hide,
    show,
    visibility,
    hidden,
    visible,
    block,
    inline_block,
    centered_block,
    clear,
    content,
    clearfix,
    size,
    min_size,
    spaced,
    spaced_block,
    # Grid
    column,
    row,
    row_modify,
    row_reset,
    # Box
    margin,
    padding,
    border,
    background,
    # Typography
    font,
    bold,
    italic,
    align,
    v_align,
    color,
    unstyled,
    # Effects
    opacity,
    opaque,
    transparent,
)

__all__ = [
    "BUILTIN_MIXINS",
    # Layout
    "absolute",
    "block",
    "centered_block",
    "clear",
    "clearfix",
    "content",
    "display",
    "fixed",
    "hidden",
    "hide",
    "inline",
    "inline_block",
    "left",
    "min_size",
    "relative",
    "right",
    "show",
    "size",
    "spaced",
    "spaced_block",
    "visibility",
    "visible",
    # Grid
    "column",
    "row",
    "row_modify",
    "row_reset",
    # Box
    "background",
    "border",
    "margin",
    "padding",
    # Typography
    "align",
    "bold",
    "color",
    "font",
    "italic",
    "unstyled",
    "v_align",
    # Effects
    "opacity",
    "opaque",
    "transparent",
]
