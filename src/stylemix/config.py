"""ContextVar-based compile configuration for stylemix.

Provides context-local configuration using Python's ContextVars (PEP 567).
The resolver and stringifier read the active config when none is passed
to them explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Explicit
    css = stringify(sheet, config=CompileConfig(default_unit="px"))

    # Or scoped to a block
    with compile_config_context(CompileConfig(default_unit="px")):
        css = stringify(sheet)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from stylemix.theme import DEFAULT_THEME, Theme


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Immutable compile configuration.

    Attributes:
        default_unit: Unit appended to unitless numeric declaration values
        line_height_unit: Unit appended to unitless ``line-height`` values
        indent: Indentation used for declarations inside a block
        theme: Design tokens read by the built-in mixins

    """

    default_unit: str = "rem"
    line_height_unit: str = "em"
    indent: str = "\t"
    theme: Theme = field(default=DEFAULT_THEME)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "CompileConfig":
        """Create CompileConfig from a dictionary.

        Accepts flat field names as well as the ``units`` group used by
        host pipelines::

            {"units": {"default": "px", "lineHeight": "%"}}

        A ``theme`` entry may be a Theme or a dict for ``Theme.from_dict``.
        Unknown keys are silently ignored.

        Example:
            >>> config = CompileConfig.from_dict({"units": {"default": "px"}})
            >>> config.default_unit, config.line_height_unit
            ('px', 'em')

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        units = config_dict.get("units") or {}
        if "default" in units:
            filtered["default_unit"] = units["default"]
        if "lineHeight" in units:
            filtered["line_height_unit"] = units["lineHeight"]
        elif "line_height" in units:
            filtered["line_height_unit"] = units["line_height"]

        theme = filtered.get("theme")
        if isinstance(theme, dict):
            filtered["theme"] = Theme.from_dict(theme)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CompileConfig = CompileConfig()

_compile_config: ContextVar[CompileConfig] = ContextVar(
    "compile_config",
    default=_DEFAULT_CONFIG,
)


def get_compile_config() -> CompileConfig:
    """Get the compile configuration active in this context."""
    return _compile_config.get()


def set_compile_config(config: CompileConfig) -> None:
    """Set compile configuration for the current context.

    Only affects the current thread's context.
    """
    _compile_config.set(config)


def reset_compile_config() -> None:
    """Reset to the default configuration."""
    _compile_config.set(_DEFAULT_CONFIG)


@contextmanager
def compile_config_context(config: CompileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with compile_config_context(CompileConfig(default_unit="px")):
        ...     get_compile_config().default_unit
        'px'

    Restores the previous config even if an exception is raised.
    """
    previous = _compile_config.get()
    _compile_config.set(config)
    try:
        yield
    finally:
        _compile_config.set(previous)


__all__ = [
    "CompileConfig",
    "get_compile_config",
    "set_compile_config",
    "reset_compile_config",
    "compile_config_context",
]
