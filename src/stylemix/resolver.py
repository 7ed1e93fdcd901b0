"""Mixin resolution for stylemix.

Walks a parsed Stylesheet depth-first and replaces every MixinCall with
the statements its mixin expands to. The result is a new tree with no
MixinCall nodes left; the input tree is not modified.

Unknown mixin names are not errors. The call is dropped, a MixinWarning
is recorded and the walk continues with the next sibling.

Thread Safety:
A Resolver holds only its catalog and config, both immutable. Per-call
state (the warnings list) lives inside resolve(), so one Resolver can be
shared across threads.

Example:
    >>> sheet = parse(".a { hidden(); }")
    >>> resolution = Resolver().resolve(sheet)
    >>> resolution.stylesheet.children[0].children
    (Declaration(property='visibility', value='hidden'),)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from stylemix.config import CompileConfig, get_compile_config
from stylemix.helpers import resolve_selector
from stylemix.location import SourceLocation
from stylemix.mixins.catalog import MixinCatalog, create_default_catalog
from stylemix.mixins.context import MixinContext, normalize_expansion
from stylemix.nodes import Declaration, MixinCall, Rule, Statement, Stylesheet
from stylemix.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class MixinWarning:
    """A non-fatal problem found while resolving.

    Attributes:
        message: Human-readable description (e.g., "unknown mixin: foo")
        node: The call that caused it

    """

    message: str
    node: MixinCall

    @property
    def location(self) -> SourceLocation:
        return self.node.location

    def __str__(self) -> str:
        if self.location.is_known:
            return f"{self.location}: {self.message}"
        return self.message


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving a stylesheet."""

    stylesheet: Stylesheet
    warnings: tuple[MixinWarning, ...] = field(default=())


class Resolver:
    """Expands mixin calls using a catalog.

    Usage:
        >>> resolver = Resolver(create_catalog({"brand": brand}))
        >>> resolution = resolver.resolve(sheet)

    """

    __slots__ = ("_catalog", "_config")

    def __init__(
        self,
        catalog: MixinCatalog | None = None,
        config: CompileConfig | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            catalog: Mixins to resolve against (default: built-ins)
            config: Compile configuration (default: the active context config)
        """
        self._catalog = catalog if catalog is not None else create_default_catalog()
        self._config = config

    @property
    def catalog(self) -> MixinCatalog:
        return self._catalog

    def resolve(self, stylesheet: Stylesheet) -> Resolution:
        """Expand every mixin call in stylesheet.

        Raises:
            MixinError: If a mixin returns something that is not a node
            Exception: Whatever a mixin body raises, unchanged
        """
        config = self._config or get_compile_config()
        warnings: list[MixinWarning] = []
        children = self._resolve_children(stylesheet.children, None, config, warnings)
        logger.debug("Resolved stylesheet with %d warning(s)", len(warnings))
        return Resolution(
            Stylesheet(children, location=stylesheet.location),
            tuple(warnings),
        )

    def _resolve_children(
        self,
        children: Iterable[Statement],
        selector: str | None,
        config: CompileConfig,
        warnings: list[MixinWarning],
    ) -> tuple[Statement, ...]:
        resolved: list[Statement] = []
        for child in children:
            match child:
                case Declaration():
                    resolved.append(child)
                case Rule(selector=rule_selector, children=rule_children):
                    nested = self._resolve_children(
                        rule_children,
                        resolve_selector(rule_selector, selector),
                        config,
                        warnings,
                    )
                    resolved.append(Rule(rule_selector, nested, location=child.location))
                case MixinCall():
                    expansion = self._expand(child, selector, config, warnings)
                    # Expansions may contain rules and further calls
                    resolved.extend(self._resolve_children(expansion, selector, config, warnings))
                case _:
                    msg = f"Unexpected node in stylesheet: {type(child).__name__}"
                    raise TypeError(msg)
        return tuple(resolved)

    def _expand(
        self,
        call: MixinCall,
        selector: str | None,
        config: CompileConfig,
        warnings: list[MixinWarning],
    ) -> tuple[Statement, ...]:
        func = self._catalog.resolve(call.name)
        if func is None:
            warning = MixinWarning(f"unknown mixin: {call.name}", call)
            warnings.append(warning)
            logger.warning("%s", warning)
            return ()

        ctx = MixinContext(self._catalog, config, selector, call)
        expansion = normalize_expansion(call.name, func(ctx, call.arguments))
        logger.debug("Expanded %s() into %d statement(s)", call.name, len(expansion))
        return expansion


def resolve(
    stylesheet: Stylesheet,
    *,
    catalog: MixinCatalog | None = None,
    config: CompileConfig | None = None,
) -> Resolution:
    """Resolve stylesheet with a one-off Resolver."""
    return Resolver(catalog, config).resolve(stylesheet)
