"""Mixin system for stylemix.

A mixin is a function called from a style sheet as ``name(args);`` that
expands into declarations, nested rules or further calls:

.button {
    inlineBlock(10, 2);
    border(bottom, #ccc);
}

Key components:
- MixinFunction: Protocol for mixin implementations
- MixinContext: Catalog, configuration and selector handed to each call
- MixinCatalog: Name lookup, built-ins overlaid with caller mixins
- mixin: Decorator recording the style sheet names of a function

Thread Safety:
Catalogs and contexts are immutable; built-in mixins are stateless.

Example:
    >>> from stylemix.mixins import mixin, create_catalog
    >>>
    >>> @mixin("verticalPadding")
    ... def vertical_padding(ctx, args):
    ...     return ctx.call("padding", top=args[0], bottom=args[0])
    ...
    >>> catalog = create_catalog({"verticalPadding": vertical_padding})
"""

from __future__ import annotations

from stylemix.mixins.catalog import (
    MixinCatalog,
    MixinCatalogBuilder,
    create_catalog,
    create_catalog_with_defaults,
    create_default_catalog,
)
from stylemix.mixins.context import MixinContext, normalize_expansion
from stylemix.mixins.decorator import mixin
from stylemix.mixins.props import (
    build_ordered_props,
    build_props,
    prefixer,
)
from stylemix.mixins.protocol import Expansion, MixinFunction

__all__ = [
    # Protocol
    "Expansion",
    "MixinFunction",
    # Context
    "MixinContext",
    "normalize_expansion",
    # Catalog
    "MixinCatalog",
    "MixinCatalogBuilder",
    "create_catalog",
    "create_catalog_with_defaults",
    "create_default_catalog",
    # Decorator
    "mixin",
    # Props
    "build_ordered_props",
    "build_props",
    "prefixer",
]
