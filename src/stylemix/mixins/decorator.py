"""@mixin decorator for naming mixin implementations.

Mixin names in style sheets are camelCase (``spacedBlock``) while the
Python functions behind them are snake_case. The decorator records the
style sheet names on the function so MixinCatalogBuilder.register() can
pick them up.

Example:
    >>> @mixin("hidden")
    ... def hidden(ctx, args):
    ...     return ctx.call("visibility", "hidden")
    >>> hidden.mixin_names
    ('hidden',)
"""

from collections.abc import Callable
from typing import TypeVar

F = TypeVar("F", bound=Callable[..., object])


def mixin(*names: str) -> Callable[[F], F]:
    """Decorator tagging a function with the names it is registered under.

    Args:
        *names: Style sheet names (e.g., "inlineBlock")

    The function itself is returned unchanged apart from the
    ``mixin_names`` attribute.
    """
    if not names:
        msg = "At least one mixin name must be provided"
        raise ValueError(msg)

    def decorator(func: F) -> F:
        func.mixin_names = names  # type: ignore[attr-defined]
        return func

    return decorator
