"""CSS stringifier for resolved stylesheets.

Turns a Stylesheet with no MixinCall nodes left into CSS text.

Output shape:
- Each rule becomes ``selector {`` + one indented line per declaration + ``}``
- Nested rules are written flat, after the declarations that precede
  them, with ``&`` replaced by the enclosing selector
- Declarations following a nested rule start a new block for the same
  selector, so source order is kept
- Blocks are separated by a blank line, with no trailing newline

Numeric values, including strings holding a bare number such as a
literal ``width: 5``, get the configured unit, except ``line-height`` (its own
unit) and properties that take plain numbers such as ``opacity``.

Thread Safety:
A Stringifier holds only its config. All per-call state lives in a
StringBuilder created inside stringify().

"""

from __future__ import annotations

from collections.abc import Iterable

from stylemix.config import CompileConfig, get_compile_config
from stylemix.errors import RenderError
from stylemix.helpers import format_number, is_number, resolve_selector, to_number
from stylemix.nodes import Declaration, MixinCall, Rule, Statement, Stylesheet, Value
from stylemix.stringbuilder import StringBuilder

# Properties whose numeric values never take a unit
UNITLESS_PROPERTIES = frozenset(
    {
        "opacity",
        "z-index",
        "font-weight",
        "flex",
        "flex-grow",
        "flex-shrink",
        "order",
        "zoom",
        "orphans",
        "widows",
        "columns",
        "column-count",
        "tab-size",
        "fill-opacity",
        "stroke-opacity",
        "animation-iteration-count",
    }
)


class Stringifier:
    """Writes resolved stylesheets as CSS.

    Usage:
        >>> Stringifier().stringify(resolution.stylesheet)
        '.block {\\n\\tdisplay: block;\\n}'

    """

    __slots__ = ("_config",)

    def __init__(self, config: CompileConfig | None = None) -> None:
        self._config = config

    def stringify(self, stylesheet: Stylesheet) -> str:
        """Render stylesheet as CSS text.

        Raises:
            RenderError: If a MixinCall is still present
        """
        config = self._config or get_compile_config()
        sb = StringBuilder(config.indent)
        self._write_children(sb, stylesheet.children, None, config)
        return sb.build()

    def format_value(self, prop: str, value: Value, config: CompileConfig | None = None) -> str:
        """Format a declaration value for output.

        Examples:
            >>> stringifier = Stringifier()
            >>> stringifier.format_value("width", 10), stringifier.format_value("line-height", 1.2)
            ('10rem', '1.2em')
            >>> stringifier.format_value("opacity", 0.4), stringifier.format_value("width", "10px")
            ('0.4', '10px')
        """
        config = config or self._config or get_compile_config()
        if isinstance(value, str):
            if not is_number(value):
                return value
            value = to_number(value)
        number = format_number(value)
        if prop in UNITLESS_PROPERTIES or prop.startswith("--"):
            return number
        if prop == "line-height":
            return f"{number}{config.line_height_unit}"
        return f"{number}{config.default_unit}"

    def _write_children(
        self,
        sb: StringBuilder,
        children: Iterable[Statement],
        selector: str | None,
        config: CompileConfig,
    ) -> None:
        """Write a run of declarations, flushing it whenever a rule interrupts."""
        run: list[str] = []
        for child in children:
            match child:
                case Declaration(property=prop, value=value):
                    run.append(f"{prop}: {self.format_value(prop, value, config)};")
                case Rule():
                    self._flush(sb, selector, run)
                    run = []
                    self._write_rule(sb, child, selector, config)
                case MixinCall(name=name):
                    msg = f"unresolved mixin call {name}() at {child.location}"
                    raise RenderError(msg)
                case _:
                    msg = f"cannot render {type(child).__name__}"
                    raise RenderError(msg)
        self._flush(sb, selector, run)

    def _write_rule(
        self,
        sb: StringBuilder,
        rule: Rule,
        parent: str | None,
        config: CompileConfig,
    ) -> None:
        selector = resolve_selector(rule.selector, parent)
        if not rule.children:
            sb.block(selector, [])
            return
        self._write_children(sb, rule.children, selector, config)

    @staticmethod
    def _flush(sb: StringBuilder, selector: str | None, run: list[str]) -> None:
        if not run:
            return
        if selector is None:
            sb.bare(run)
        else:
            sb.block(selector, run)


def stringify(stylesheet: Stylesheet, *, config: CompileConfig | None = None) -> str:
    """Render stylesheet with a one-off Stringifier."""
    return Stringifier(config).stringify(stylesheet)
