"""Token and TokenType definitions for the stylemix lexer.

The lexer produces a stream of statement-level Token objects that the
parser consumes. Each Token has a type, the statement text, and the
position of its first character.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from stylemix.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    EOF = auto()

    # Blocks
    RULE_START = auto()  # selector {
    RULE_END = auto()  # }

    # Statements
    DECLARATION = auto()  # property: value;
    MIXIN_CALL = auto()  # name(args);


@dataclass(frozen=True, slots=True)
class Token:
    """A statement-level token.

    Attributes:
        type: The token type
        value: Selector for RULE_START, the statement text (without the
            terminating ``;``) for DECLARATION and MIXIN_CALL, empty otherwise
        lineno: Line of the first character (1-indexed)
        col: Column of the first character (1-indexed)
        offset: Absolute offset of the first character
        source_file: Optional source file path

    """

    type: TokenType
    value: str
    lineno: int
    col: int
    offset: int = 0
    source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        """Source location of this token."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.offset,
            end_offset=self.offset + len(self.value),
            source_file=self.source_file,
        )

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.col})"
