"""Exception classes for stylemix.

Provides standardized exceptions for error handling throughout stylemix.
Unknown mixins are not errors: the resolver records them as warnings.
"""

from __future__ import annotations


class StyleMixError(Exception):
    """Base exception for all stylemix errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(StyleMixError):
    """Error during style sheet parsing.

    Raised when the lexer or parser encounters malformed input. Parsing
    never recovers: the first error aborts the document.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Record the message and where it happened.

        The string form is ``file:line:col message``; unknown parts are
        left out.

        Args:
            message: What went wrong
            lineno: 1-indexed line of the offending statement
            col_offset: 1-indexed column of the offending statement
            source_file: Style sheet path, when parsing a file
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        parts: list[str] = [source_file] if source_file else []
        if lineno is not None:
            parts.append(str(lineno))
            if col_offset is not None:
                parts.append(str(col_offset))
        prefix = ":".join(parts)
        super().__init__(f"{prefix} {message}" if prefix else message)


class MixinError(StyleMixError):
    """Error raised on behalf of a mixin implementation.

    Raised when a mixin returns something that cannot be spliced into
    the tree.
    """

    def __init__(self, mixin_name: str, message: str) -> None:
        """Initialize mixin error.

        Args:
            mixin_name: Name the mixin was called by (e.g., "border")
            message: Description of the fault
        """
        self.mixin_name = mixin_name
        super().__init__(f"Mixin '{mixin_name}': {message}")


class MixinArgumentError(MixinError, ValueError):
    """A mixin or helper received arguments it cannot use.

    Also a ValueError so callers treating bad input generically still
    catch it.
    """

    pass


class RenderError(StyleMixError):
    """Error during stringification.

    Raised when the stringifier encounters a node it cannot serialize,
    such as a mixin call that escaped resolution.
    """

    pass
