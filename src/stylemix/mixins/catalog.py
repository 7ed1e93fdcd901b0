"""Mixin catalog for name lookup and registration.

The catalog maps mixin names to implementations. The built-in catalog is
built once and cached; caller-supplied mixins are overlaid on top of it,
winning on name collisions.

Thread Safety:
MixinCatalog is immutable after creation. Safe to share across threads
and documents. Use MixinCatalogBuilder for mutable construction.

Example:
    >>> builder = MixinCatalogBuilder()
    >>> builder.register(vertical_padding, "verticalPadding")
    >>> catalog = builder.build()
    >>> catalog.resolve("verticalPadding") is vertical_padding
    True
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from stylemix.config import CompileConfig, get_compile_config
from stylemix.mixins.context import MixinContext, normalize_expansion
from stylemix.utils.logger import get_logger

if TYPE_CHECKING:
    from stylemix.mixins.protocol import MixinFunction
    from stylemix.nodes import Arguments, Statement

logger = get_logger(__name__)


class MixinCatalog:
    """Immutable mapping of mixin names to implementations.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_by_name",)

    def __init__(self, by_name: Mapping[str, MixinFunction]) -> None:
        """Initialize catalog with a pre-built mapping.

        Use MixinCatalogBuilder, create_default_catalog() or
        create_catalog() to create instances.
        """
        self._by_name: dict[str, MixinFunction] = dict(by_name)

    def resolve(self, name: str) -> MixinFunction | None:
        """Get the implementation registered for name.

        Args:
            name: Mixin name as written at the call site (e.g., "spacedBlock")

        Returns:
            The implementation, or None if name is unknown
        """
        return self._by_name.get(name)

    def invoke(
        self,
        name: str,
        args: Arguments,
        *,
        config: CompileConfig | None = None,
        selector: str | None = None,
    ) -> tuple[Statement, ...]:
        """Expand name with args outside of a resolution pass.

        Handy for testing mixins directly.

        Raises:
            KeyError: If name is not registered
        """
        func = self.resolve(name)
        if func is None:
            raise KeyError(name)
        ctx = MixinContext(self, config or get_compile_config(), selector)
        return normalize_expansion(name, func(ctx, args))

    def overlay(self, overrides: Mapping[str, MixinFunction]) -> MixinCatalog:
        """Return a new catalog with overrides added on top of this one.

        Entries in overrides replace same-named entries here.

        Raises:
            TypeError: If an override is not callable
        """
        for name, func in overrides.items():
            if not callable(func):
                msg = f"Mixin '{name}' must be callable, got {type(func).__name__}"
                raise TypeError(msg)
        shadowed = sorted(set(overrides) & set(self._by_name))
        if shadowed:
            logger.debug("Overriding built-in mixins: %s", ", ".join(shadowed))
        return MixinCatalog({**self._by_name, **overrides})

    def has(self, name: str) -> bool:
        """Check if a mixin name is registered."""
        return name in self._by_name

    @property
    def names(self) -> frozenset[str]:
        """Get all registered mixin names."""
        return frozenset(self._by_name)

    def __contains__(self, name: object) -> bool:
        """Support 'name in catalog' syntax."""
        return name in self._by_name

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        """Number of registered mixin names."""
        return len(self._by_name)


class MixinCatalogBuilder:
    """Mutable builder for MixinCatalog.

    Use this to register implementations, then call build() to create an
    immutable catalog.

    Example:
        >>> builder = MixinCatalogBuilder()
        >>> builder.register(margin).register(padding)
        >>> catalog = builder.build()
    """

    __slots__ = ("_by_name",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._by_name: dict[str, MixinFunction] = {}

    def register(self, func: MixinFunction, *names: str) -> MixinCatalogBuilder:
        """Register an implementation under one or more names.

        Names default to those given to the ``@mixin`` decorator.

        Returns:
            Self for chaining

        Raises:
            TypeError: If func is not callable or has no names
            ValueError: If a name is already registered
        """
        if not callable(func):
            msg = f"Mixin {func!r} is not callable"
            raise TypeError(msg)

        names = names or getattr(func, "mixin_names", ())
        if not names:
            msg = f"Mixin {getattr(func, '__name__', func)!r} has no names; use @mixin or pass names"
            raise TypeError(msg)

        for name in names:
            if name in self._by_name:
                existing = self._by_name[name]
                msg = f"Mixin '{name}' already registered by {getattr(existing, '__name__', existing)!r}"
                raise ValueError(msg)
            self._by_name[name] = func
        return self

    def register_all(self, mixins: Mapping[str, MixinFunction]) -> MixinCatalogBuilder:
        """Register a name → implementation mapping.

        Returns:
            Self for chaining
        """
        for name, func in mixins.items():
            self.register(func, name)
        return self

    def build(self) -> MixinCatalog:
        """Build immutable catalog from registered implementations."""
        return MixinCatalog(self._by_name)

    def __len__(self) -> int:
        """Number of registered names."""
        return len(self._by_name)


def create_catalog_with_defaults() -> MixinCatalogBuilder:
    """Create a builder pre-populated with the built-in mixins.

    Use this to extend the built-ins with new names:

        >>> builder = create_catalog_with_defaults()
        >>> builder.register(vertical_padding, "verticalPadding")
        >>> catalog = builder.build()

    Registering a built-in name again raises; use create_catalog() to
    replace built-ins.
    """
    from stylemix.mixins.builtins import BUILTIN_MIXINS

    builder = MixinCatalogBuilder()
    for func in BUILTIN_MIXINS:
        builder.register(func)
    return builder


# Cached singleton; MixinCatalog is immutable
_DEFAULT_CATALOG: MixinCatalog | None = None


def create_default_catalog() -> MixinCatalog:
    """Get the built-in mixin catalog (cached singleton)."""
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = create_catalog_with_defaults().build()
        logger.debug("Built default mixin catalog with %d mixins", len(_DEFAULT_CATALOG))
    return _DEFAULT_CATALOG


def create_catalog(overrides: Mapping[str, MixinFunction] | None = None) -> MixinCatalog:
    """Built-in catalog overlaid with caller mixins (caller wins).

    Args:
        overrides: Mapping of name → implementation, or None for built-ins only
    """
    catalog = create_default_catalog()
    if not overrides:
        return catalog
    return catalog.overlay(overrides)
