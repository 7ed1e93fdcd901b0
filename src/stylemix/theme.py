"""Design tokens consumed by the built-in mixins.

The theme is static configuration: default border color, bold weight,
grid geometry and block spacing. Mixins read it through
``MixinContext.theme``; they never change it.

Example:
    >>> theme = Theme.from_dict({"grid": {"columns": 16}})
    >>> theme.grid_columns
    16
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from stylemix.helpers import to_dash_case

# Nested keys accepted by from_dict, mapped onto flat field names
_NESTED_KEYS: dict[tuple[str, str], str] = {
    ("colors", "border"): "border_color",
    ("font", "bold"): "font_weight_bold",
    ("grid", "columns"): "grid_columns",
    ("grid", "margin"): "grid_margin",
    ("block", "margin-bottom"): "block_margin_bottom",
}


@dataclass(frozen=True, slots=True)
class Theme:
    """Immutable design-token table.

    Attributes:
        border_color: Color used by ``border()`` when none is given
        font_weight_bold: Value emitted by ``bold()``
        grid_columns: Column count for ``column()``
        grid_margin: Gutter used by ``column(spaced, ...)`` and ``row()``
        block_margin_bottom: Default spacing for ``spaced()``

    """

    border_color: str = "#d8d8d8"
    font_weight_bold: str | int = "bold"
    grid_columns: int = 12
    grid_margin: str = "2%"
    block_margin_bottom: str | int | float = 2

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Theme:
        """Create a Theme from a flat or nested dictionary.

        Flat keys match field names. Nested groups such as
        ``{"grid": {"columns": 16}}`` are also understood, with camelCase
        keys (``marginBottom``) accepted. Unknown keys are ignored.
        """
        valid = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            if key in valid:
                values[key] = value
            elif isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    name = _NESTED_KEYS.get((key, to_dash_case(sub_key)))
                    if name is not None:
                        values[name] = sub_value
        return cls(**values)


DEFAULT_THEME = Theme()
