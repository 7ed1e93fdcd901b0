"""Typed AST nodes for stylemix.

All AST nodes are frozen dataclasses with slots:
- Immutability: a parsed tree is never modified, resolution builds a new one
- Pattern matching: resolver and stringifier dispatch with ``match``

Node Hierarchy:
Node (base)
├── Stylesheet   document root
├── Rule         selector + ordered children
├── Declaration  property/value leaf
└── MixinCall    pending mixin invocation (parse time only)

Arguments of a MixinCall are one of two shapes, decided by the parser:
Positional (ordered values) or Keyword (ordered name/value pairs).

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from stylemix.location import SourceLocation

Value = str | int | float


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


# =============================================================================
# Call arguments
# =============================================================================


@dataclass(frozen=True, slots=True)
class Positional:
    """Positional call arguments: ``margin(1, 2, 3, 4)``."""

    values: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.values)

    def __getitem__(self, index: int) -> Value:
        return self.values[index]

    def get(self, index: int, default: Any = None) -> Any:
        """Value at index, or default when the call supplied fewer values."""
        if -len(self.values) <= index < len(self.values):
            return self.values[index]
        return default


@dataclass(frozen=True, slots=True)
class Keyword:
    """Keyword call arguments: ``margin(top: 1, bottom: 4)``.

    Pairs keep call-site order, which is the order declarations are
    emitted in. Mapping-style access is provided for lookups.

    """

    items: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        items = self.items.items() if isinstance(self.items, Mapping) else self.items
        object.__setattr__(self, "items", tuple((str(k), v) for k, v in items))

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self.items)

    def __getitem__(self, key: str) -> Value:
        for name, value in self.items:
            if name == key:
                return value
        raise KeyError(key)

    def get(self, key: str, default: Any = None) -> Any:
        """Value for key, or default."""
        for name, value in self.items:
            if name == key:
                return value
        return default

    def keys(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.items)

    def as_dict(self) -> dict[str, Value]:
        """Copy of the pairs as an insertion-ordered dict."""
        return dict(self.items)


Arguments = Positional | Keyword


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    Parsed nodes carry the location of their first character. Nodes
    built by mixins get an unknown location. Location is ignored when
    comparing nodes.

    """

    location: SourceLocation = field(
        default_factory=SourceLocation.unknown, kw_only=True, compare=False, repr=False
    )


# =============================================================================
# Statements
# =============================================================================


@dataclass(frozen=True, slots=True)
class Declaration(Node):
    """A single property/value pair.

    Source: ``color: red;``

    Numeric values are unitless; the stringifier applies the configured
    unit. String values are emitted verbatim.

    """

    property: str
    value: Value

    def __post_init__(self) -> None:
        if not _is_scalar(self.value):
            msg = (
                f"Declaration value for {self.property!r} must be a string or "
                f"number, got {type(self.value).__name__}"
            )
            raise TypeError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Declaration":
        """Build a declaration from ``{"prop": ..., "value": ...}``.

        ``property`` is accepted in place of ``prop``.
        """
        prop = data.get("prop", data.get("property"))
        if prop is None or "value" not in data:
            msg = f"declaration mapping needs 'prop' and 'value' keys, got {sorted(data)}"
            raise ValueError(msg)
        return cls(str(prop), data["value"])


@dataclass(frozen=True, slots=True)
class MixinCall(Node):
    """A pending mixin invocation.

    Source: ``border(top, #fff);``

    Exists only between parsing and resolution.

    """

    name: str
    arguments: Arguments = field(default_factory=Positional)


@dataclass(frozen=True, slots=True)
class Rule(Node):
    """A selector with an ordered sequence of children.

    Source: ``.block { color: red; &:hover { color: blue; } }``

    The selector may reference the enclosing selector with ``&``.

    """

    selector: str
    children: tuple[Statement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True, slots=True)
class Stylesheet(Node):
    """Root of a parsed document."""

    children: tuple[Statement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


Statement = Declaration | Rule | MixinCall


def iter_mixin_calls(node: Stylesheet | Rule) -> Iterator[MixinCall]:
    """Yield every MixinCall below node, depth-first in document order."""
    for child in node.children:
        if isinstance(child, MixinCall):
            yield child
        elif isinstance(child, Rule):
            yield from iter_mixin_calls(child)
