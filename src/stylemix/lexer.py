"""Statement-window lexer for stylemix sources.

Works the way a block lexer works on lines, one statement at a time:
1. Scan forward to the first ``{``, ``;`` or ``}`` outside quotes and
   parentheses (the window)
2. Classify the window (rule start, mixin call, declaration)
3. Commit the position past the window

Comments (``/* ... */``) are dropped while scanning. Every window
advances the position, so tokenizing is linear in the source length.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import re
from bisect import bisect_right
from collections.abc import Iterator

from stylemix.errors import ParseError
from stylemix.helpers import find_top_level, split_words
from stylemix.tokens import Token, TokenType

_CALL_START_RE = re.compile(r"[A-Za-z_][\w-]*\s*\(")


class Lexer:
    """Statement-window lexer.

    Usage:
            >>> lexer = Lexer(".a { margin(1, 2); color: red; }")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(RULE_START, '.a', 1:1)
        Token(MIXIN_CALL, 'margin(1, 2)', 1:6)
        Token(DECLARATION, 'color: red', 1:20)
        Token(RULE_END, '', 1:32)
        Token(EOF, '', 1:33)

    """

    __slots__ = ("_source", "_source_len", "_pos", "_source_file", "_line_starts")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Style sheet source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file
        self._line_starts = [0] + [i + 1 for i, ch in enumerate(source) if ch == "\n"]

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a statement token stream.

        Yields:
            Token objects, ending with exactly one EOF

        Raises:
            ParseError: On unterminated strings, comments or calls, stray
                closing parentheses, at-rule selectors, and statements
                that are neither a declaration nor a mixin call
        """
        while True:
            self._skip_trivia()
            if self._pos >= self._source_len:
                break
            yield self._scan_statement()

        yield self._make_token(TokenType.EOF, "", self._source_len)

    # =========================================================================
    # Position helpers
    # =========================================================================

    def _line_col(self, offset: int) -> tuple[int, int]:
        """Convert an absolute offset into 1-indexed line and column."""
        line_index = bisect_right(self._line_starts, offset) - 1
        return line_index + 1, offset - self._line_starts[line_index] + 1

    def _make_token(self, token_type: TokenType, value: str, offset: int) -> Token:
        lineno, col = self._line_col(offset)
        return Token(
            type=token_type,
            value=value,
            lineno=lineno,
            col=col,
            offset=offset,
            source_file=self._source_file,
        )

    def _error(self, message: str, offset: int) -> ParseError:
        lineno, col = self._line_col(offset)
        return ParseError(message, lineno, col, self._source_file)

    # =========================================================================
    # Scanning
    # =========================================================================

    def _skip_trivia(self) -> None:
        """Advance past whitespace and comments."""
        source = self._source
        while self._pos < self._source_len:
            if source[self._pos].isspace():
                self._pos += 1
            elif source.startswith("/*", self._pos):
                self._pos = self._skip_comment(self._pos)
            else:
                break

    def _skip_comment(self, start: int) -> int:
        """Return the offset just past the comment opening at start."""
        end = self._source.find("*/", start + 2)
        if end == -1:
            raise self._error("unterminated comment", start)
        return end + 2

    def _scan_statement(self) -> Token:
        """Scan one window starting at the current position and classify it."""
        source = self._source
        start = self._pos

        if source[start] == "}":
            self._pos += 1
            return self._make_token(TokenType.RULE_END, "", start)

        parts: list[str] = []
        segment_start = start
        depth = 0
        paren_start = -1
        quote = ""
        quote_start = -1
        pos = start

        while pos < self._source_len:
            char = source[pos]
            if quote:
                if char == "\\":
                    pos += 2
                    continue
                if char == quote:
                    quote = ""
            elif char in "'\"":
                quote = char
                quote_start = pos
            elif source.startswith("/*", pos):
                parts.append(source[segment_start:pos])
                pos = self._skip_comment(pos)
                segment_start = pos
                continue
            elif char in "([":
                if depth == 0:
                    paren_start = pos
                depth += 1
            elif char in ")]":
                if depth == 0:
                    raise self._error(f"unexpected '{char}'", pos)
                depth -= 1
            elif depth == 0 and char in "{;}":
                parts.append(source[segment_start:pos])
                text = "".join(parts).strip()
                if char == "{":
                    self._pos = pos + 1
                    return self._rule_start(text, start)
                # "}" is left for the next window to emit RULE_END
                self._pos = pos + 1 if char == ";" else pos
                return self._classify_statement(text, start)
            pos += 1

        if quote:
            raise self._error("unterminated string", quote_start)
        if depth:
            if _CALL_START_RE.match(source, start):
                raise self._error("unterminated mixin call", start)
            raise self._error("unbalanced parentheses", paren_start)
        raise self._error("unexpected end of input, expected ';' or '{'", start)

    # =========================================================================
    # Classification
    # =========================================================================

    def _rule_start(self, text: str, start: int) -> Token:
        if not text:
            raise self._error("empty selector", start)
        if text.startswith("@"):
            raise self._error(f"at-rule {text.split()[0]!r} is not supported", start)
        return self._make_token(TokenType.RULE_START, " ".join(split_words(text)), start)

    def _classify_statement(self, text: str, start: int) -> Token:
        """Classify a statement window as a mixin call or a declaration."""
        if not text:
            raise self._error("empty statement", start)

        match = _CALL_START_RE.match(text)
        if match and text.endswith(")") and _closing_paren(text, match.end() - 1) == len(text) - 1:
            return self._make_token(TokenType.MIXIN_CALL, text, start)

        if find_top_level(text, ":") > 0:
            return self._make_token(TokenType.DECLARATION, text, start)

        raise self._error(f"invalid statement {text!r}", start)


def _closing_paren(text: str, open_index: int) -> int:
    """Index of the parenthesis closing the one at open_index, or -1."""
    depth = 0
    quote = ""
    pos = open_index
    while pos < len(text):
        char = text[pos]
        if quote:
            if char == "\\":
                pos += 1
            elif char == quote:
                quote = ""
        elif char in "'\"":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return pos
        pos += 1
    return -1
