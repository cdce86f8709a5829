"""Text classification: turn trimmed XML text into a typed JSON scalar.

The order of checks matters and is fixed:

1. AlwaysString returns the text untouched.
2. Bool(tokens) returns membership of the text in ``tokens``.
3. Unsigned 64-bit integer.  A leading zero makes it a string only under
   StringIfLeadingZero, and never for the single character "0".
4. Float.  Text that starts with "0" but not "0." is a string under every
   directive ("0123.5", "0e5"); non-finite values are not JSON numbers.
5. Exactly "true" or "false".
6. Anything else is the trimmed string.

Python's ``int()`` and ``float()`` accept more than these grammars
(underscores, surrounding whitespace, non-ASCII digits, "inf"), so the text
is matched against explicit patterns first.
"""

from __future__ import annotations

import math
import re

from typed_xmljson.algorithm.directives import (
    AlwaysString,
    Bool,
    StringIfLeadingZero,
    TypeDirective,
)

__all__ = ["classify"]

_U64_MAX = 2**64 - 1

# "+" is allowed on unsigned integers, "-" is not
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

# Finite decimal floats: "1", "1.", "1.5", ".5", each with an optional exponent
_FLOAT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def classify(text: str, directive: TypeDirective) -> str | int | float | bool:
    """Return ``text`` as a JSON scalar according to ``directive``.

    Args:
        text:      Element text or attribute value.  It is trimmed here as
                   well, so an all-blank value matches a ``""`` Bool token.
        directive: The effective directive for the node being converted.

    Returns:
        An ``int``, ``float``, ``bool`` or ``str``.

    Example::

        classify("0.4200", Infer())                # 0.42
        classify("0000", Infer())                  # 0
        classify("0000", StringIfLeadingZero())    # "0000"
        classify("True", Infer())                  # "True"
        classify("yes", Bool(("yes", "y")))        # True
    """
    text = text.strip()

    if isinstance(directive, AlwaysString):
        return text

    if isinstance(directive, Bool):
        return text in directive.tokens

    if _UNSIGNED_INT.fullmatch(text):
        value = int(text)
        if value <= _U64_MAX:
            # "0" is always 0; "0000" is 0 or "0000" depending on the directive
            if (
                isinstance(directive, StringIfLeadingZero)
                and text.startswith("0")
                and (value != 0 or len(text) > 1)
            ):
                return text
            return value

    if _FLOAT.fullmatch(text):
        # octal-looking and overflowed leading-zero tokens stay as written
        if text.startswith("0") and not text.startswith("0."):
            return text
        number = float(text)
        if math.isfinite(number):
            return number

    if text == "true":
        return True
    if text == "false":
        return False

    return text
