"""XmlElement dataclass and the JsonValue alias.

XmlElement is the parsed-input side of the converter: just the parts of an
XML element the conversion rules look at.  JsonValue is the output side.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["JsonValue", "XmlElement"]

# Output value tree: null / bool / number / string / object / array
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass(frozen=True, slots=True)
class XmlElement:
    """One element of a parsed XML document.

    Attributes:
        name:       Local name of the element (namespace prefix stripped).
        attributes: Ordered ``(name, value)`` pairs; names are unique.
        text:       All direct text children concatenated, untrimmed.
                    Text inside child elements is not included.
        children:   Child elements in document order.
    """

    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    text: str = ""
    children: tuple[XmlElement, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))
        object.__setattr__(self, "children", tuple(self.children))
