"""
stylemix: mixins for plain CSS

A small compiler for a CSS superset with mixin calls. Mixins are Python
functions that expand into declarations and nested rules; built-ins cover
layout, grids, borders, fonts and opacity.

Quick Start:
    >>> from stylemix import process
    >>> result = process(".block { spacedBlock(3, 20); }")
    >>> print(result.css)
    .block {
    	margin-bottom: 3rem;
    	display: block;
    	width: 20rem;
    }

    >>> # Or keep settings on a reusable compiler
    >>> from stylemix import Compiler, CompileConfig
    >>> compiler = Compiler(config=CompileConfig(default_unit="px"))
    >>> css = compiler(".a { size(10); }")

Custom Mixins:
    >>> from stylemix import Compiler, mixin
    >>>
    >>> @mixin("brand")
    ... def brand(ctx, args):
    ...     return [*ctx.call("color", "#f5830f"), *ctx.call("bold")]
    >>>
    >>> compiler = Compiler(mixins={"brand": brand})
    >>> css = compiler("h1 { brand(); }")
"""

from collections.abc import Mapping
from dataclasses import dataclass

from stylemix.config import (
    CompileConfig,
    compile_config_context,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)
from stylemix.errors import (
    MixinArgumentError,
    MixinError,
    ParseError,
    RenderError,
    StyleMixError,
)
from stylemix.lexer import Lexer
from stylemix.location import SourceLocation
from stylemix.mixins import (
    MixinCatalog,
    MixinCatalogBuilder,
    MixinContext,
    MixinFunction,
    create_catalog,
    create_catalog_with_defaults,
    create_default_catalog,
    mixin,
)
from stylemix.nodes import (
    Arguments,
    Declaration,
    Keyword,
    MixinCall,
    Node,
    Positional,
    Rule,
    Statement,
    Stylesheet,
)
from stylemix.parser import Parser
from stylemix.resolver import MixinWarning, Resolution, Resolver
from stylemix.stringifier import Stringifier
from stylemix.theme import DEFAULT_THEME, Theme

__version__ = "0.1.0"


@dataclass(frozen=True, slots=True)
class CompileResult:
    """CSS text plus the warnings collected while resolving mixins."""

    css: str
    warnings: tuple[MixinWarning, ...] = ()


def parse(source: str, *, source_file: str | None = None) -> Stylesheet:
    """Parse style sheet source into a typed AST.

    Args:
        source: Style sheet source text
        source_file: Optional source file path for error messages

    Returns:
        Stylesheet AST root node

    Raises:
        ParseError: On the first malformed construct

    Example:
        >>> sheet = parse(".a { color: red; }")
        >>> sheet.children[0].children
        (Declaration(property='color', value='red'),)
    """
    return Parser(source, source_file=source_file).parse()


def resolve(
    stylesheet: Stylesheet,
    *,
    mixins: Mapping[str, MixinFunction] | None = None,
    catalog: MixinCatalog | None = None,
    config: CompileConfig | None = None,
) -> Resolution:
    """Expand every mixin call in stylesheet.

    Args:
        stylesheet: Parsed stylesheet
        mixins: Caller mixins overlaid on the built-ins (caller wins)
        catalog: Complete catalog to use instead of built-ins plus mixins
        config: Compile configuration (default: the active context config)

    Returns:
        Resolution with the resolved stylesheet and any warnings
    """
    if catalog is None:
        catalog = create_catalog(mixins)
    return Resolver(catalog, config).resolve(stylesheet)


def stringify(stylesheet: Stylesheet, *, config: CompileConfig | None = None) -> str:
    """Render a resolved stylesheet as CSS text.

    Raises:
        RenderError: If the stylesheet still contains mixin calls
    """
    return Stringifier(config).stringify(stylesheet)


def process(
    source: str,
    *,
    mixins: Mapping[str, MixinFunction] | None = None,
    config: CompileConfig | None = None,
    source_file: str | None = None,
) -> CompileResult:
    """Parse, resolve and stringify in one call.

    Example:
        >>> result = process(".a { unknown(); }")
        >>> result.css, [str(w) for w in result.warnings]
        ('.a {\\n}', ['1:6: unknown mixin: unknown'])
    """
    sheet = parse(source, source_file=source_file)
    resolution = resolve(sheet, mixins=mixins, config=config)
    return CompileResult(stringify(resolution.stylesheet, config=config), resolution.warnings)


class Compiler:
    """High-level compiler holding a catalog and configuration.

    Usage:
        >>> compiler = Compiler()
        >>> compiler(".a { hidden(); }")
        '.a {\\n\\tvisibility: hidden;\\n}'

        >>> # Warnings are available through process()
        >>> result = compiler.process(".a { nope(); }")
        >>> len(result.warnings)
        1

    Thread Safety:
        Catalog and config are immutable and built once. Safe to use one
        Compiler from several threads.

    """

    __slots__ = ("_catalog", "_config")

    def __init__(
        self,
        *,
        mixins: Mapping[str, MixinFunction] | None = None,
        config: CompileConfig | Mapping[str, object] | None = None,
    ) -> None:
        """Initialize compiler.

        Args:
            mixins: Caller mixins overlaid on the built-ins (caller wins)
            config: CompileConfig, or a dict for ``CompileConfig.from_dict``
                (e.g. ``{"units": {"default": "px"}}``). Defaults to the
                config active when each call runs.
        """
        self._catalog = create_catalog(mixins)
        if isinstance(config, Mapping):
            config = CompileConfig.from_dict(dict(config))
        self._config = config

    @property
    def catalog(self) -> MixinCatalog:
        return self._catalog

    @property
    def config(self) -> CompileConfig:
        return self._config or get_compile_config()

    def __call__(self, source: str) -> str:
        """Compile source and return only the CSS text."""
        return self.process(source).css

    def process(self, source: str, *, source_file: str | None = None) -> CompileResult:
        """Compile source, keeping warnings."""
        resolution = self.resolve(self.parse(source, source_file=source_file))
        return CompileResult(self.stringify(resolution.stylesheet), resolution.warnings)

    def parse(self, source: str, *, source_file: str | None = None) -> Stylesheet:
        return parse(source, source_file=source_file)

    def resolve(self, stylesheet: Stylesheet) -> Resolution:
        return Resolver(self._catalog, self.config).resolve(stylesheet)

    def stringify(self, stylesheet: Stylesheet) -> str:
        return Stringifier(self.config).stringify(stylesheet)


__all__ = [  # noqa: RUF022 (grouped by category)
    "__version__",
    # API
    "Compiler",
    "CompileResult",
    "parse",
    "process",
    "resolve",
    "stringify",
    # Pipeline
    "Lexer",
    "Parser",
    "Resolver",
    "Resolution",
    "MixinWarning",
    "Stringifier",
    # Configuration
    "CompileConfig",
    "Theme",
    "DEFAULT_THEME",
    "compile_config_context",
    "get_compile_config",
    "reset_compile_config",
    "set_compile_config",
    # Mixins
    "MixinCatalog",
    "MixinCatalogBuilder",
    "MixinContext",
    "MixinFunction",
    "create_catalog",
    "create_catalog_with_defaults",
    "create_default_catalog",
    "mixin",
    # Nodes
    "Arguments",
    "Declaration",
    "Keyword",
    "MixinCall",
    "Node",
    "Positional",
    "Rule",
    "Statement",
    "Stylesheet",
    "SourceLocation",
    # Errors
    "StyleMixError",
    "ParseError",
    "MixinError",
    "MixinArgumentError",
    "RenderError",
]
