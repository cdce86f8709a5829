"""Public API functions for typed-xmljson.

Each function creates a fresh XmlConverter, so calls never share state.
``config=None`` always means ``ConverterConfig()`` defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from typed_xmljson.algorithm.config import ConverterConfig
from typed_xmljson.converter import XmlConverter
from typed_xmljson.tree.nodes import JsonValue, XmlElement
from typed_xmljson.tree.parser import from_etree, parse_xml

__all__ = ["dumps", "element_to_json", "xml_file_to_json", "xml_string_to_json"]

logger = logging.getLogger(__name__)


def element_to_json(element: Any, config: ConverterConfig | None = None) -> JsonValue:
    """Convert an already parsed element tree into a JSON value.

    Args:
        element: The root element: an ``XmlElement``, or an lxml /
                 ``xml.etree.ElementTree`` element.
        config:  Conversion rules. Defaults to ``ConverterConfig()`` when None.

    Returns:
        ``{root_name: value}``, where value is ``None`` if the root is empty
        and empty elements are ignored.
    """
    root = element if isinstance(element, XmlElement) else from_etree(element)
    converter = XmlConverter(config if config is not None else ConverterConfig())
    logger.debug(
        "Converting <%s> with %d type override(s)",
        root.name,
        len(converter.config.overrides),
    )
    return converter.convert_document(root)


def xml_string_to_json(
    xml: str | bytes, config: ConverterConfig | None = None
) -> JsonValue:
    """Parse an XML document and convert it into a JSON value.

    Example::

        xml_string_to_json('<a attr1="1"><b><c attr2="001">some text</c></b></a>')
        # {"a": {"@attr1": 1, "b": {"c": {"@attr2": 1, "#text": "some text"}}}}

    Raises:
        MalformedDocumentError: If ``xml`` is not well-formed.  No partial
            result is produced.
    """
    return element_to_json(parse_xml(xml), config)


def xml_file_to_json(
    path: str | Path, config: ConverterConfig | None = None
) -> JsonValue:
    """Read an XML file and convert it into a JSON value.

    The file is read as bytes so the document's own encoding declaration
    decides how it is decoded.

    Raises:
        OSError: If the file cannot be read.
        MalformedDocumentError: If the file is not well-formed XML.
    """
    path = Path(path)
    logger.debug("Reading %s", path)
    return xml_string_to_json(path.read_bytes(), config)


def dumps(value: JsonValue, indent: int | None = None) -> str:
    """Serialise a converted value to JSON text, keeping key and array order."""
    return json.dumps(value, ensure_ascii=False, indent=indent)
