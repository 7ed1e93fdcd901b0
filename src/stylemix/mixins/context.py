"""Invocation context handed to every mixin.

The context is how a mixin reaches its siblings: ``ctx.call("display",
"block")`` looks the name up in the same catalog the resolver uses, so
caller overrides apply to composed mixins too.

Thread Safety:
MixinContext is frozen. One is created per call site.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from stylemix.config import CompileConfig
from stylemix.errors import MixinError
from stylemix.nodes import (
    Arguments,
    Declaration,
    Keyword,
    MixinCall,
    Positional,
    Rule,
    Statement,
    Value,
)
from stylemix.theme import Theme

if TYPE_CHECKING:
    from stylemix.mixins.catalog import MixinCatalog


@dataclass(frozen=True, slots=True)
class MixinContext:
    """Everything a mixin may consult besides its arguments.

    Attributes:
        catalog: Catalog the current call was resolved against
        config: Active compile configuration
        selector: Enclosing selector with ``&`` already resolved, or None
            at the top level
        node: The call being expanded, or None for direct invocations

    """

    catalog: MixinCatalog
    config: CompileConfig
    selector: str | None = None
    node: MixinCall | None = None

    @property
    def theme(self) -> Theme:
        """Design tokens of the active configuration."""
        return self.config.theme

    def call(self, name: str, *values: Value, **keywords: Value) -> tuple[Statement, ...]:
        """Expand a sibling mixin with Python-style arguments.

        Positional values build a Positional, keywords a Keyword.

        Example:
            >>> ctx.call("margin", left="auto", right="auto")
            (Declaration(property='margin-left', value='auto'), ...)

        Raises:
            TypeError: If both positional and keyword values are given
            MixinError: If name is not in the catalog
        """
        if values and keywords:
            msg = f"cannot mix positional and keyword arguments calling {name!r}"
            raise TypeError(msg)
        args: Arguments = Keyword(tuple(keywords.items())) if keywords else Positional(values)
        return self.invoke(name, args)

    def invoke(self, name: str, args: Arguments) -> tuple[Statement, ...]:
        """Expand a sibling mixin with already-bound arguments."""
        func = self.catalog.resolve(name)
        if func is None:
            raise MixinError(name, "not found in catalog")
        return normalize_expansion(name, func(self, args))


def normalize_expansion(name: str, result: Any) -> tuple[Statement, ...]:
    """Flatten whatever a mixin returned into a tuple of statements.

    Raises:
        MixinError: If result contains something that is not a node, a
            declaration mapping, a sequence of those, or None
    """
    if result is None:
        return ()
    if isinstance(result, (Declaration, Rule, MixinCall)):
        return (result,)
    if isinstance(result, Mapping):
        try:
            return (Declaration.from_mapping(result),)
        except (TypeError, ValueError) as exc:
            raise MixinError(name, str(exc)) from exc
    if isinstance(result, (str, bytes)) or not isinstance(result, Iterable):
        msg = f"returned unsupported value of type {type(result).__name__}"
        raise MixinError(name, msg)

    statements: list[Statement] = []
    for item in result:
        statements.extend(normalize_expansion(name, item))
    return tuple(statements)
