"""Exception types raised by typed-xmljson.

The conversion engine itself is total over any parsed element tree and never
raises.  Errors only come from the edges: parsing raw XML text and reading
configuration.
"""

from __future__ import annotations

__all__ = ["ConfigError", "MalformedDocumentError", "TypedXmlJsonError"]


class TypedXmlJsonError(Exception):
    """Base class for every error raised by this package."""


class MalformedDocumentError(TypedXmlJsonError, ValueError):
    """The XML input could not be parsed into an element tree.

    Attributes:
        message: The parser's own description of the problem.
        line:    1-based line of the error, or None when the parser gave none.
        column:  Column of the error, or None when the parser gave none.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            super().__init__(f"Malformed XML document (line {line}): {message}")
        else:
            super().__init__(f"Malformed XML document: {message}")


class ConfigError(TypedXmlJsonError, ValueError):
    """A configuration file or a type directive spec is invalid."""
