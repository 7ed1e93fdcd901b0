"""Value helpers shared by the parser, mixins and stringifier.

Predicates, number and unit handling, color conversion, identifier casing
and selector nesting. Everything here is a pure function of its arguments.

Example:
    >>> from stylemix.helpers import calc_opacity, hex_to_rgba
    >>> calc_opacity("20%")
    0.2
    >>> hex_to_rgba("#f5830f", 0.2)
    'rgba(245, 131, 15, 0.2)'
"""

from __future__ import annotations

import colorsys
import re
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

Number = int | float

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")
_UNIT_RE = re.compile(r"([+-]?(?:\d+\.?\d*|\.\d+))([a-zA-Z]+|%)")
_PERCENT_RE = re.compile(r"\d+(?:\.\d+)?%")
_HEX_RE = re.compile(r"#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")
_COLOR_FUNC_RE = re.compile(
    r"(?:rgba?|hsla?)\(\s*[\d.]+%?\s*,\s*[\d.]+%?\s*,\s*[\d.]+%?\s*(?:,\s*[\d.]+%?\s*)?\)",
    re.IGNORECASE,
)
_CAMEL_RE = re.compile(r"([a-z0-9])([A-Z])")

_OPENERS = {"(": ")", "[": "]"}
_CLOSERS = frozenset(")]")


# =============================================================================
# Predicates
# =============================================================================


def is_number(value: Any) -> bool:
    """True for ints, floats and strings holding a bare number.

    Booleans are not numbers here, even though Python says they are.

    Examples:
        >>> is_number("2"), is_number(2.1), is_number("2px"), is_number(None)
        (True, True, False, False)
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return _NUMBER_RE.fullmatch(value.strip()) is not None
    return False


def is_string(value: Any) -> bool:
    """True if value is a string."""
    return isinstance(value, str)


def is_empty(value: Any) -> bool:
    """True for None, empty strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, (str, Sequence, Mapping)):
        return len(value) == 0
    return False


def is_percentage(value: Any) -> bool:
    """True for strings like ``50%`` or ``33.3%``."""
    return isinstance(value, str) and _PERCENT_RE.fullmatch(value.strip()) is not None


def is_color(value: Any) -> bool:
    """True for hex colors and rgb()/rgba()/hsl()/hsla() notation.

    Examples:
        >>> is_color("#f7f7f7"), is_color("hsl(0, 100%, 50%)"), is_color("red")
        (True, True, False)
    """
    if not isinstance(value, str):
        return False
    value = value.strip()
    return bool(_HEX_RE.fullmatch(value) or _COLOR_FUNC_RE.fullmatch(value))


def is_variable(value: Any) -> bool:
    """True for variable references such as ``$margin``.

    Variables are opaque: they are never converted or given a unit.
    """
    return isinstance(value, str) and len(value) > 1 and value.startswith("$")


def has_unit(value: Any) -> bool:
    """True for strings holding a number with a unit suffix (``5px``, ``20%``)."""
    return isinstance(value, str) and _UNIT_RE.fullmatch(value.strip()) is not None


# =============================================================================
# Numbers and units
# =============================================================================


def to_number(value: Any) -> Number:
    """Convert a number or numeric string to int or float.

    Raises:
        ValueError: If value does not hold a bare number
    """
    if not is_number(value):
        msg = f"not a number: {value!r}"
        raise ValueError(msg)
    if isinstance(value, (int, float)):
        return value
    text = value.strip()
    if "." in text:
        return float(text)
    return int(text)


def format_number(value: Number) -> str:
    """Format a number for output without trailing zeros.

    Floats are rounded to four decimal places.

    Examples:
        >>> format_number(25.0), format_number(0.4), format_number(100 / 3)
        ('25', '0.4', '33.3333')
    """
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def strip_unit(value: Any) -> Number:
    """Return the numeric part of a value, dropping any unit.

    Examples:
        >>> strip_unit("2%"), strip_unit("-1.5rem"), strip_unit(3)
        (2, -1.5, 3)

    Raises:
        ValueError: If value has no numeric part
    """
    if is_number(value):
        return to_number(value)
    if isinstance(value, str):
        match = _UNIT_RE.fullmatch(value.strip())
        if match:
            return to_number(match.group(1))
    msg = f"cannot take the number out of {value!r}"
    raise ValueError(msg)


def unit(value: Any, suffix: str = "rem") -> Any:
    """Append a unit to a bare number, leaving anything else untouched.

    Examples:
        >>> unit(2), unit("2"), unit("2px"), unit("$gap")
        ('2rem', '2rem', '2px', '$gap')
    """
    if is_number(value):
        return f"{format_number(to_number(value))}{suffix}"
    return value


def calc_opacity(value: Any) -> Number:
    """Normalize an opacity to the 0-1 range.

    A percentage divides by 100, as does a plain number above 1. Values
    already between 0 and 1 pass through.

    Examples:
        >>> calc_opacity("20%"), calc_opacity(20), calc_opacity(0.2)
        (0.2, 0.2, 0.2)

    Raises:
        ValueError: If value is neither a number nor a percentage
    """
    if is_percentage(value):
        return to_number(value.strip()[:-1]) / 100
    if is_number(value):
        number = to_number(value)
        if number > 1:
            return number / 100
        return number
    msg = f"cannot interpret {value!r} as an opacity"
    raise ValueError(msg)


# =============================================================================
# Colors
# =============================================================================


def _hex_channels(color: str) -> tuple[int, int, int]:
    """Split a 3- or 6-digit hex color into red, green and blue."""
    digits = color.strip().removeprefix("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6 or any(ch not in "0123456789abcdefABCDEF" for ch in digits):
        msg = f"not a hex color: {color!r}"
        raise ValueError(msg)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def hex_to_rgba(color: str, opacity: Any = None) -> str:
    """Convert a hex color to ``rgb()``, or ``rgba()`` when given an opacity.

    Three-digit colors are expanded first. The opacity goes through
    ``calc_opacity``.

    Examples:
        >>> hex_to_rgba("#fff")
        'rgb(255, 255, 255)'
        >>> hex_to_rgba("#f5830f", "20%")
        'rgba(245, 131, 15, 0.2)'

    Raises:
        ValueError: If color is not a 3- or 6-digit hex color
    """
    red, green, blue = _hex_channels(color)
    if opacity is None:
        return f"rgb({red}, {green}, {blue})"
    alpha = format_number(calc_opacity(opacity))
    return f"rgba({red}, {green}, {blue}, {alpha})"


def _shift_lightness(color: str, amount: Number) -> str:
    red, green, blue = _hex_channels(color)
    hue, lightness, saturation = colorsys.rgb_to_hls(red / 255, green / 255, blue / 255)
    lightness = min(1.0, max(0.0, lightness + amount / 100))
    red_f, green_f, blue_f = colorsys.hls_to_rgb(hue, lightness, saturation)
    return "#{:02x}{:02x}{:02x}".format(
        round(red_f * 255), round(green_f * 255), round(blue_f * 255)
    )


def lighten(color: str, percent: Number = 10) -> str:
    """Raise the HSL lightness of a hex color by ``percent`` points.

    Examples:
        >>> lighten("#000", 50)
        '#808080'
    """
    return _shift_lightness(color, percent)


def darken(color: str, percent: Number = 10) -> str:
    """Lower the HSL lightness of a hex color by ``percent`` points."""
    return _shift_lightness(color, -percent)


# =============================================================================
# Text
# =============================================================================


def to_dash_case(name: str) -> str:
    """Convert a camelCase identifier to dash-case.

    Examples:
        >>> to_dash_case("lineHeight")
        'line-height'
    """
    return _CAMEL_RE.sub(r"\1-\2", name).lower()


def _top_level_positions(text: str, separator: str) -> Iterator[int]:
    """Yield indexes of separator outside quotes, parentheses and brackets."""
    depth = 0
    quote = ""
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if quote:
            if char == "\\":
                pos += 1
            elif char == quote:
                quote = ""
        elif char in "'\"":
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(0, depth - 1)
        elif char == separator and depth == 0:
            yield pos
        pos += 1


def find_top_level(text: str, separator: str) -> int:
    """Index of the first top-level separator, or -1.

    Examples:
        >>> find_top_level("content: 'a:b'", ":")
        7
        >>> find_top_level("url(http://x)", ":")
        -1
    """
    return next(_top_level_positions(text, separator), -1)


def split_top_level(text: str, separator: str = ",") -> list[str]:
    """Split on a separator that is outside quotes, parentheses and brackets.

    Parts are stripped. Empty parts are kept so callers can reject them.

    Examples:
        >>> split_top_level("a, rgb(0, 0, 0), 'x, y'")
        ['a', 'rgb(0, 0, 0)', "'x, y'"]
    """
    parts: list[str] = []
    start = 0
    for pos in _top_level_positions(text, separator):
        parts.append(text[start:pos].strip())
        start = pos + 1
    parts.append(text[start:].strip())
    return parts


def split_words(text: str) -> list[str]:
    """Split on whitespace that is outside quotes, parentheses and brackets.

    Examples:
        >>> split_words("'Open Sans' Arial sans-serif")
        ["'Open Sans'", 'Arial', 'sans-serif']
    """
    words: list[str] = []
    current: list[str] = []
    depth = 0
    quote = ""
    for char in text:
        if quote:
            current.append(char)
            if char == quote and (len(current) < 2 or current[-2] != "\\"):
                quote = ""
            continue
        if char.isspace() and depth == 0:
            if current:
                words.append("".join(current))
                current = []
            continue
        if char in "'\"":
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(0, depth - 1)
        current.append(char)
    if current:
        words.append("".join(current))
    return words


def resolve_selector(selector: str, parent: str | None) -> str:
    """Resolve a nested selector against its enclosing selector.

    ``&`` is replaced by the parent; a selector without ``&`` becomes a
    descendant of the parent. Comma lists expand parent-first.

    Examples:
        >>> resolve_selector("&:after", ".block")
        '.block:after'
        >>> resolve_selector("&:hover, span", ".a, .b")
        '.a:hover, .a span, .b:hover, .b span'
    """
    if parent is None:
        return selector
    resolved: list[str] = []
    children = split_top_level(selector)
    for parent_part in split_top_level(parent):
        for child in children:
            if "&" in child:
                resolved.append(child.replace("&", parent_part))
            else:
                resolved.append(f"{parent_part} {child}")
    return ", ".join(resolved)
