"""TypeDirective variants: the rules that decide the JSON type of XML text.

A directive is one of four frozen dataclasses.  They share no base class;
``TypeDirective`` is the closed union the classifier matches on.

- Infer:               heuristic int / float / bool / string detection.
- AlwaysString:        never infer, keep the trimmed text as a string.
- StringIfLeadingZero: like Infer, but "007" or "0000" stay strings.
- Bool(tokens):        True when the trimmed text is one of ``tokens``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from typed_xmljson.errors import ConfigError

__all__ = [
    "AlwaysString",
    "Bool",
    "Infer",
    "StringIfLeadingZero",
    "TypeDirective",
    "parse_directive",
]


@dataclass(frozen=True, slots=True)
class Infer:
    """Infer the type from the single value being converted.

    ``<a>1234</a>`` and ``<a>001234</a>`` both become ``1234``;
    ``<a>true</a>`` becomes ``true``.  Not guaranteed to be consistent
    across nodes of the same kind.
    """


@dataclass(frozen=True, slots=True)
class AlwaysString:
    """Emit the trimmed text as a JSON string, e.g. ``<a>1234</a>`` -> ``"1234"``."""


@dataclass(frozen=True, slots=True)
class StringIfLeadingZero:
    """Infer, except numeric-looking text with a leading zero stays a string.

    ``"0"`` is still the integer 0; ``"007"`` and ``"0000"`` are strings.
    """


@dataclass(frozen=True, slots=True)
class Bool:
    """Force a JSON boolean.

    Attributes:
        tokens: Case-sensitive spellings that mean ``true``.  Anything else
            is ``false``.
    """

    tokens: tuple[str, ...] = ("true",)

    def __post_init__(self) -> None:
        # accept any iterable of strings but store an immutable tuple
        if isinstance(self.tokens, str):
            msg = f"Bool tokens must be a sequence of strings, got {self.tokens!r}"
            raise TypeError(msg)
        object.__setattr__(self, "tokens", tuple(self.tokens))


TypeDirective = Infer | AlwaysString | StringIfLeadingZero | Bool

_NAMED: dict[str, TypeDirective] = {
    "infer": Infer(),
    "string": AlwaysString(),
    "always_string": AlwaysString(),
    "string-if-leading-zero": StringIfLeadingZero(),
    "string_if_leading_zero": StringIfLeadingZero(),
    "bool": Bool(),
}


def parse_directive(spec: Any) -> TypeDirective:
    """Build a TypeDirective from its textual or TOML form.

    Accepted forms::

        "infer" | "string" | "string-if-leading-zero" | "bool"
        "bool:True,yes,1"          # explicit truthy tokens
        {"bool": ["True", "yes"]}  # TOML inline table

    Directive instances are returned unchanged.

    Raises:
        ConfigError: If ``spec`` is not a recognised directive.
    """
    if isinstance(spec, (Infer, AlwaysString, StringIfLeadingZero, Bool)):
        return spec

    if isinstance(spec, str):
        name, sep, rest = spec.partition(":")
        key = name.strip().lower()
        if sep:
            if key != "bool":
                raise ConfigError(f"Only 'bool' takes tokens, got {spec!r}")
            return Bool(tuple(token.strip() for token in rest.split(",")))
        if key in _NAMED:
            return _NAMED[key]
        raise ConfigError(
            f"Unknown type directive {spec!r}; "
            f"expected one of {sorted(_NAMED)} or 'bool:TOKENS'"
        )

    if isinstance(spec, Mapping):
        if set(spec) != {"bool"}:
            raise ConfigError(
                f"Directive table must have a single 'bool' key, got {dict(spec)!r}"
            )
        tokens = spec["bool"]
        if isinstance(tokens, str) or not isinstance(tokens, Iterable):
            raise ConfigError(
                f"'bool' tokens must be a list of strings, got {tokens!r}"
            )
        if not all(isinstance(t, str) for t in tokens):
            raise ConfigError(f"'bool' tokens must be strings, got {tokens!r}")
        return Bool(tuple(tokens))

    raise ConfigError(f"Unsupported directive spec: {spec!r}")
