"""Declaration builders and argument checks shared by the built-in mixins."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager

from stylemix.errors import MixinArgumentError
from stylemix.helpers import to_dash_case
from stylemix.nodes import Arguments, Declaration, Keyword, Positional, Value


def prefixer(name: str, prefix: str | None = None, ignored: Sequence[str] = ()) -> str:
    """Dash-case name and put prefix in front of it.

    Names listed in ignored are dash-cased but not prefixed.

    Examples:
        >>> prefixer("top", "margin"), prefixer("lineHeight", "font", ["lineHeight"])
        ('margin-top', 'line-height')
    """
    dashed = to_dash_case(name)
    if prefix is None or name in ignored or dashed in ignored:
        return dashed
    return f"{prefix}-{dashed}"


def build_props(
    properties: Keyword | Mapping[str, Value],
    prefix: str | None = None,
    ignored: Sequence[str] = (),
) -> list[Declaration]:
    """One declaration per key, in the order given."""
    items = properties.items if isinstance(properties, Keyword) else properties.items()
    return [Declaration(prefixer(name, prefix, ignored), value) for name, value in items]


def build_ordered_props(properties: Sequence[str], values: Sequence[Value] | Value) -> list[Declaration]:
    """Pair properties with values by position.

    A single scalar value is repeated for every property. A sequence may
    be shorter than properties; the remaining properties are skipped.

    Raises:
        ValueError: If there are more values than properties
    """
    if isinstance(values, (str, int, float)):
        return [Declaration(prop, values) for prop in properties]
    if len(values) > len(properties):
        msg = f"expected at most {len(properties)} values, got {len(values)}"
        raise ValueError(msg)
    return [Declaration(prop, value) for prop, value in zip(properties, values)]


def positional(name: str, args: Arguments, *, max_count: int | None = None) -> tuple[Value, ...]:
    """Values of a positional call.

    Raises:
        MixinArgumentError: For keyword calls, or more than max_count values
    """
    match args:
        case Keyword():
            raise MixinArgumentError(name, "takes positional arguments only")
        case Positional(values=values):
            if max_count is not None and len(values) > max_count:
                msg = f"takes at most {max_count} argument(s), got {len(values)}"
                raise MixinArgumentError(name, msg)
            return values
    msg = f"unsupported arguments {args!r}"
    raise MixinArgumentError(name, msg)


def required(name: str, args: Arguments) -> Value:
    """The single value of a one-argument mixin.

    Raises:
        MixinArgumentError: If the call has no value
    """
    values = positional(name, args, max_count=1)
    if not values:
        raise MixinArgumentError(name, "requires a value")
    return values[0]


@contextmanager
def argument_errors(name: str) -> Iterator[None]:
    """Report a helper's ValueError as a MixinArgumentError for name."""
    try:
        yield
    except MixinArgumentError:
        raise
    except ValueError as exc:
        raise MixinArgumentError(name, str(exc)) from exc
