"""ConverterConfig and EmptyElementPolicy for XML-to-JSON conversion.

ConverterConfig is a frozen (immutable) dataclass holding every rule the
converter consults.  It is built once, before conversion, and may be shared
by any number of concurrent conversions.  The builder methods
``add_json_type_override`` and ``add_array_override`` return a new config
rather than mutating the receiver.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType

from typed_xmljson.algorithm.directives import (
    AlwaysString,
    Bool,
    Infer,
    StringIfLeadingZero,
    TypeDirective,
)
from typed_xmljson.tree.paths import normalize_path

__all__ = ["ConverterConfig", "EmptyElementPolicy"]

_DIRECTIVE_TYPES = (Infer, AlwaysString, StringIfLeadingZero, Bool)


class EmptyElementPolicy(StrEnum):
    """How an element with no attributes, no text and no kept children is emitted.

    - IGNORE:       Leave the element out of its parent.
                    At the document root this falls back to NULL.
    - NULL:         ``"x": null``
    - EMPTY_OBJECT: ``"x": {}``
    """

    IGNORE = auto()
    NULL = auto()
    EMPTY_OBJECT = auto()


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable configuration for the XML-to-JSON converter.

    Attributes:
        attribute_prefix: Prepended to attribute names in the output, e.g. ``@``
            turns ``<x a="1"/>`` into ``{"x": {"@a": 1}}``.  May be empty.
        text_node_key: Property name for an element's own text when the
            element also has attributes, e.g. ``#text``.
        empty_element_policy: Representation of empty elements.
        default_type_directive: Document-wide directive used wherever no
            override matches.
        overrides: Structural path -> directive.  Paths are exact, with a
            leading ``/``: for ``<a><b c="123">007</b></a>`` the path of ``c``
            is ``/a/b/@c`` and the path of the text ``007`` is ``/a/b``.
        array_paths: Element paths whose values are always emitted as JSON
            arrays, even when the element occurs only once under its parent.
    """

    attribute_prefix: str = "@"
    text_node_key: str = "#text"
    empty_element_policy: EmptyElementPolicy = EmptyElementPolicy.EMPTY_OBJECT
    default_type_directive: TypeDirective = field(default_factory=Infer)
    overrides: Mapping[str, TypeDirective] = field(default_factory=dict)
    array_paths: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if not isinstance(self.default_type_directive, _DIRECTIVE_TYPES):
            msg = (
                "default_type_directive must be a TypeDirective, "
                f"got {self.default_type_directive!r}"
            )
            raise ValueError(msg)

        object.__setattr__(
            self, "empty_element_policy", EmptyElementPolicy(self.empty_element_policy)
        )

        overrides: dict[str, TypeDirective] = {}
        for path, directive in self.overrides.items():
            if not path.startswith("/"):
                msg = f"override path must start with '/', got {path!r}"
                raise ValueError(msg)
            if not isinstance(directive, _DIRECTIVE_TYPES):
                msg = (
                    f"override for {path!r} must be a TypeDirective, "
                    f"got {directive!r}"
                )
                raise ValueError(msg)
            overrides[path] = directive
        object.__setattr__(self, "overrides", MappingProxyType(overrides))

        array_paths = frozenset(self.array_paths)
        for path in array_paths:
            if not path.startswith("/"):
                msg = f"array path must start with '/', got {path!r}"
                raise ValueError(msg)
        object.__setattr__(self, "array_paths", array_paths)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def new_with_defaults(cls) -> ConverterConfig:
        """Return the default config.

        Leading-zero numbers are inferred as numbers, attributes get the
        ``@`` prefix, text next to attributes is ``#text`` and empty
        elements become ``{}``.
        """
        return cls()

    @classmethod
    def new_with_custom_values(
        cls,
        leading_zero_as_string: bool,
        xml_attr_prefix: str,
        xml_text_node_prop_name: str,
        empty_element_handling: EmptyElementPolicy | str,
    ) -> ConverterConfig:
        """Create a config from the four classic conversion options.

        Args:
            leading_zero_as_string: Keep numeric text with a leading zero as
                a string (``<agent>007</agent>`` -> ``"007"`` instead of ``7``).
            xml_attr_prefix: Prefix for attribute keys.
            xml_text_node_prop_name: Key for text next to attributes.
            empty_element_handling: Representation of empty elements.
        """
        directive: TypeDirective = (
            StringIfLeadingZero() if leading_zero_as_string else Infer()
        )
        return cls(
            attribute_prefix=xml_attr_prefix,
            text_node_key=xml_text_node_prop_name,
            empty_element_policy=EmptyElementPolicy(empty_element_handling),
            default_type_directive=directive,
        )

    # ------------------------------------------------------------------
    # Builder steps
    # ------------------------------------------------------------------

    def add_json_type_override(
        self, path: str, directive: TypeDirective
    ) -> ConverterConfig:
        """Return a copy of this config with one more type override.

        The leading ``/`` is added when missing, so ``"a/@x"`` and
        ``"/a/@x"`` register the same key.  A later registration for the
        same path replaces the earlier one.

        Example::

            config = ConverterConfig().add_json_type_override(
                "/a/b/c/@attr2", AlwaysString()
            )
        """
        overrides = dict(self.overrides)
        overrides[normalize_path(path)] = directive
        return dataclasses.replace(self, overrides=overrides)

    def add_array_override(self, path: str) -> ConverterConfig:
        """Return a copy of this config that always emits ``path`` as an array."""
        return dataclasses.replace(
            self, array_paths=self.array_paths | {normalize_path(path)}
        )

    @property
    def leading_zero_as_string(self) -> bool:
        """True when leading-zero numbers stay strings document-wide."""
        return isinstance(self.default_type_directive, StringIfLeadingZero)
