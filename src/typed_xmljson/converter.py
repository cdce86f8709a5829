"""XmlConverter: converts an XmlElement tree into a JSON value tree.

Uses recursive dispatch over element shape:

- Text (non-blank after trimming) and no attributes -> the typed scalar itself.
- Text and attributes -> object of prefixed attributes plus the text key.
  Child elements of such mixed-content elements are not converted.
- No text -> object of prefixed attributes and converted children.  A child
  name seen twice under the same parent is promoted to an array holding every
  occurrence in document order.  An empty result object is handled by the
  configured EmptyElementPolicy.

Structural paths are threaded through the recursion as plain arguments:
- Root is "" (empty string)
- Each element level appends "/{name}", each attribute "/@{name}"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from typed_xmljson.algorithm.classifier import classify
from typed_xmljson.algorithm.config import ConverterConfig, EmptyElementPolicy
from typed_xmljson.algorithm.overrides import resolve
from typed_xmljson.tree.nodes import JsonValue, XmlElement
from typed_xmljson.tree.paths import attr_path, child_path

__all__ = ["XmlConverter"]

# Sentinel for "element left out of its parent" (EmptyElementPolicy.IGNORE).
# Distinct from None, which is the JSON null the NULL policy produces.
_OMIT: Any = object()


@dataclass
class XmlConverter:
    """Converts an XmlElement tree into a JSON value.

    The converter holds only its (immutable) config, so one instance can
    convert any number of documents, from any number of threads, and always
    produces the same output for the same input.

    Example::

        converter = XmlConverter(ConverterConfig(attribute_prefix=""))
        converter.convert_document(parse_xml('<a x="1"><b>t</b></a>'))
        # {"a": {"x": 1, "b": "t"}}
    """

    config: ConverterConfig = field(default_factory=ConverterConfig)

    def convert_document(self, root: XmlElement) -> JsonValue:
        """Convert a whole document and wrap it under the root element's name.

        The result is always a single-key object.  An ignored (empty) root
        becomes ``null`` because a document has no parent to leave it out of.
        """
        value = self._convert(root, "")
        return {root.name: None if value is _OMIT else value}

    def convert_element(self, element: XmlElement, parent_path: str = "") -> JsonValue:
        """Convert one element without the document wrapper.

        Args:
            element:     The element to convert.
            parent_path: Structural path of the element's parent, "" for the root.

        Returns:
            The element's JSON value, or None when the element is empty and
            the policy is IGNORE.
        """
        value = self._convert(element, parent_path)
        return None if value is _OMIT else value

    def _convert(self, element: XmlElement, parent_path: str) -> Any:
        path = child_path(parent_path, element.name)
        config = self.config
        text = element.text.strip()

        if text:
            scalar = classify(
                text,
                resolve(path, config.overrides, config.default_type_directive),
            )
            if not element.attributes:
                return scalar
            data = self._attributes(element, path)
            data[config.text_node_key] = scalar
            return data

        data = self._attributes(element, path)
        for child in element.children:
            value = self._convert(child, path)
            if value is _OMIT:
                continue
            self._merge_child(data, child.name, value, child_path(path, child.name))

        if data:
            return data

        policy = config.empty_element_policy
        if policy is EmptyElementPolicy.NULL:
            return None
        if policy is EmptyElementPolicy.EMPTY_OBJECT:
            return data
        return _OMIT

    def _attributes(self, element: XmlElement, path: str) -> dict[str, Any]:
        """Build the ordered object of prefixed, typed attribute values."""
        config = self.config
        data: dict[str, Any] = {}
        for name, raw in element.attributes:
            directive = resolve(
                attr_path(path, name), config.overrides, config.default_type_directive
            )
            data[config.attribute_prefix + name] = classify(raw, directive)
        return data

    def _merge_child(
        self, data: dict[str, Any], name: str, value: Any, path: str
    ) -> None:
        """Insert a converted child, promoting repeated names to arrays."""
        if name not in data:
            data[name] = [value] if path in self.config.array_paths else value
            return

        existing = data[name]
        if isinstance(existing, list):
            existing.append(value)
        else:
            data[name] = [existing, value]
