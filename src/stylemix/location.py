"""Where a token or node came from in the style sheet source.

Parsed nodes carry the location of their first character; nodes built by
mixins carry an unknown location.

Thread Safety:
Frozen, so locations can be shared freely.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and warnings.

    All positions are 1-indexed (lineno and col_offset start at 1).
    A location with lineno 0 is synthetic (see ``unknown``).

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5)
            >>> str(loc)
            '3:5'

            >>> loc = SourceLocation(1, 1, source_file="theme.mcss")
            >>> str(loc)
            'theme.mcss:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for messages.

        Returns:
            Formatted string like "file.mcss:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def is_known(self) -> bool:
        """True if this location points into real source text."""
        return self.lineno > 0

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for AST nodes created synthetically, e.g. by mixins.
        """
        return cls(lineno=0, col_offset=0)
