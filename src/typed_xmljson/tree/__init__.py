"""Tree subpackage: the input side of the converter.

Re-exports the public API for the tree module:
- XmlElement: dataclass for one parsed XML element
- JsonValue: type alias for the converter's output values
- parse_xml / from_etree: build XmlElement trees with lxml
- child_path / attr_path / normalize_path: structural path composition
"""

from typed_xmljson.tree.nodes import JsonValue, XmlElement
from typed_xmljson.tree.parser import from_etree, parse_xml
from typed_xmljson.tree.paths import attr_path, child_path, normalize_path

__all__ = [
    "JsonValue",
    "XmlElement",
    "attr_path",
    "child_path",
    "from_etree",
    "normalize_path",
    "parse_xml",
]
