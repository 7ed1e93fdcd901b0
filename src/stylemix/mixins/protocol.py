"""MixinFunction protocol for extensible mixins.

Mixins are the extension mechanism of stylemix. Any callable taking a
MixinContext and the call's bound arguments can be registered.

Thread Safety:
Mixins must be stateless. Everything they need arrives through the
context and the arguments. Multiple threads may call the same mixin
concurrently.

Example:
    >>> def vertical_padding(ctx, args):
    ...     value = args[0]
    ...     return [Declaration("padding-top", value), Declaration("padding-bottom", value)]
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from stylemix.nodes import Arguments, Declaration, MixinCall, Rule

if TYPE_CHECKING:
    from stylemix.mixins.context import MixinContext

# A single node, a {"prop": ..., "value": ...} mapping, a (possibly nested)
# sequence of those, or None for nothing
Expansion = Declaration | Rule | MixinCall | Mapping[str, Any] | Sequence[Any] | None


@runtime_checkable
class MixinFunction(Protocol):
    """Protocol for mixin implementations.

    The resolver calls the mixin once per call site. Positional and
    keyword calls arrive as ``Positional`` and ``Keyword`` respectively;
    mixins match on the shape instead of inspecting values.

    """

    def __call__(self, ctx: MixinContext, args: Arguments) -> Expansion:
        """Expand a call into declarations and rules.

        Args:
            ctx: Catalog access for composing sibling mixins, the enclosing
                selector, and configuration
            args: The call's arguments

        Returns:
            An Expansion
        """
        ...
