"""Recursive descent parser producing a typed AST.

Consumes the statement token stream from Lexer and builds immutable
nodes: Rule for ``selector { ... }``, Declaration for ``property: value``
and MixinCall for ``name(args)``.

Argument lists are decided here, once: a call with any ``key: value``
argument gets a Keyword holding only those pairs (bare values in the same
call are dropped with a warning), anything else a Positional. Numbers
become int or float; everything else stays a string (quoted strings keep
their quotes, variables like ``$gap`` are kept as written).

Thread Safety:
Parser instances are single-use. The resulting AST is immutable.

"""

from __future__ import annotations

import re

from stylemix.errors import ParseError
from stylemix.helpers import find_top_level, is_number, split_top_level, split_words, to_number
from stylemix.lexer import Lexer
from stylemix.location import SourceLocation
from stylemix.nodes import (
    Arguments,
    Declaration,
    Keyword,
    MixinCall,
    Positional,
    Rule,
    Statement,
    Stylesheet,
    Value,
)
from stylemix.tokens import Token, TokenType
from stylemix.utils.logger import get_logger

logger = get_logger(__name__)

_PROPERTY_RE = re.compile(r"(?:-{0,2}|\$)[A-Za-z_][\w-]*")
_KEYWORD_RE = re.compile(r"[A-Za-z_][\w-]*")


class Parser:
    """Recursive descent parser for stylemix sources.

    Usage:
            >>> sheet = Parser(".a { margin(1, 2); }").parse()
            >>> sheet.children[0].children[0]
        MixinCall(name='margin', arguments=Positional(values=(1, 2)))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation.

    """

    __slots__ = ("_source", "_source_file", "_tokens", "_pos", "_current")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Style sheet source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._tokens: list[Token] = []
        self._pos = 0
        self._current: Token | None = None

    def parse(self) -> Stylesheet:
        """Parse the source into a Stylesheet.

        Returns:
            Stylesheet whose children are rules and, at top level or inside
            rules, declarations and mixin calls

        Raises:
            ParseError: On the first malformed construct. No recovery is
                attempted.
        """
        self._tokens = list(Lexer(self._source, self._source_file).tokenize())
        self._pos = 0
        self._current = self._tokens[0]

        children = self._parse_block(None)
        location = SourceLocation(
            lineno=1,
            col_offset=1,
            offset=0,
            end_offset=len(self._source),
            source_file=self._source_file,
        )
        return Stylesheet(children, location=location)

    # =========================================================================
    # Token navigation
    # =========================================================================

    def _advance(self) -> None:
        self._pos += 1
        self._current = self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _error(self, message: str, token: Token) -> ParseError:
        return ParseError(message, token.lineno, token.col, self._source_file)

    # =========================================================================
    # Blocks
    # =========================================================================

    def _parse_block(self, opener: Token | None) -> list[Statement]:
        """Parse statements until the block opened by opener closes.

        opener is None for the top level, which ends at EOF.
        """
        children: list[Statement] = []
        while True:
            token = self._current
            assert token is not None, "token stream always ends with EOF"

            match token.type:
                case TokenType.EOF:
                    if opener is not None:
                        raise self._error(f"unterminated block {opener.value!r}", opener)
                    return children
                case TokenType.RULE_END:
                    if opener is None:
                        raise self._error("unexpected '}'", token)
                    self._advance()
                    return children
                case TokenType.RULE_START:
                    self._advance()
                    body = self._parse_block(token)
                    children.append(Rule(token.value, body, location=token.location))
                case TokenType.DECLARATION:
                    children.append(self._parse_declaration(token))
                    self._advance()
                case TokenType.MIXIN_CALL:
                    children.append(self._parse_mixin_call(token))
                    self._advance()

    # =========================================================================
    # Statements
    # =========================================================================

    def _parse_declaration(self, token: Token) -> Declaration:
        text = token.value
        colon = find_top_level(text, ":")
        prop = text[:colon].strip()
        value = text[colon + 1 :].strip()

        if not _PROPERTY_RE.fullmatch(prop):
            raise self._error(f"invalid property name {prop!r}", token)
        if not value:
            raise self._error(f"missing value for property {prop!r}", token)
        return Declaration(prop, value, location=token.location)

    def _parse_mixin_call(self, token: Token) -> MixinCall:
        text = token.value
        open_paren = text.index("(")
        name = text[:open_paren].strip()
        arguments = self._parse_arguments(text[open_paren + 1 : -1], name, token)
        return MixinCall(name, arguments, location=token.location)

    def _parse_arguments(self, text: str, name: str, token: Token) -> Arguments:
        """Bind a raw argument list to Positional or Keyword."""
        if not text.strip():
            return Positional()

        positional: list[Value] = []
        keyword: dict[str, Value] = {}
        for raw in split_top_level(text, ","):
            if not raw:
                raise self._error(f"empty argument in call to {name!r}", token)

            colon = find_top_level(raw, ":")
            key = raw[:colon].strip() if colon > 0 else ""
            if key and _KEYWORD_RE.fullmatch(key):
                value_text = raw[colon + 1 :].strip()
                if not value_text:
                    raise self._error(f"missing value for argument {key!r} in call to {name!r}", token)
                if key in keyword:
                    raise self._error(f"duplicate argument {key!r} in call to {name!r}", token)
                keyword[key] = _parse_value(value_text)
            else:
                positional.append(_parse_value(raw))

        if keyword and positional:
            logger.warning(
                "%s: ignoring %d positional argument(s) in keyword call to %r",
                token.location,
                len(positional),
                name,
            )
        if keyword:
            return Keyword(tuple(keyword.items()))
        return Positional(tuple(positional))


def _parse_value(text: str) -> Value:
    """Convert one argument to a scalar.

    A single number becomes int or float. Anything else is a string with
    whitespace outside quotes collapsed.
    """
    words = split_words(text)
    if len(words) == 1:
        word = words[0]
        if is_number(word):
            return to_number(word)
        return word
    return " ".join(words)
