"""StringBuilder for CSS output.

Collects finished blocks in a list and joins them once at the end, so
output cost stays linear in the size of the style sheet.

Thread Safety:
StringBuilder instances are local to each stringify() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Accumulates CSS blocks separated by a blank line.

    Usage:
            >>> sb = StringBuilder(indent="  ")
            >>> sb.block(".a", ["color: red;"])
            >>> sb.block(".b", [])
            >>> print(sb.build())
            .a {
              color: red;
            }
            <BLANKLINE>
            .b {
            }

    """

    __slots__ = ("_blocks", "_indent")

    def __init__(self, indent: str = "\t") -> None:
        """Initialize empty StringBuilder.

        Args:
            indent: Prefix for each line inside a block
        """
        self._blocks: list[str] = []
        self._indent = indent

    def block(self, selector: str, lines: list[str]) -> StringBuilder:
        """Append ``selector { ... }`` with one indented line per entry.

        Returns:
            self for method chaining
        """
        body = "".join(f"{self._indent}{line}\n" for line in lines)
        self._blocks.append(f"{selector} {{\n{body}}}")
        return self

    def bare(self, lines: list[str]) -> StringBuilder:
        """Append lines with no selector, for top-level declarations.

        Empty line lists are skipped.

        Returns:
            self for method chaining
        """
        if lines:
            self._blocks.append("\n".join(lines))
        return self

    def build(self) -> str:
        """Join all blocks into the final string (no trailing newline)."""
        return "\n\n".join(self._blocks)

    def __len__(self) -> int:
        """Return number of blocks (not total length)."""
        return len(self._blocks)

    def __bool__(self) -> bool:
        """Return True if any blocks have been appended."""
        return bool(self._blocks)
