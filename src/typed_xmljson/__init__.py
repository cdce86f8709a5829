"""typed-xmljson - XML to JSON conversion with configurable JSON typing."""

from __future__ import annotations

import logging

from typed_xmljson.algorithm.classifier import classify
from typed_xmljson.algorithm.config import ConverterConfig, EmptyElementPolicy
from typed_xmljson.algorithm.directives import (
    AlwaysString,
    Bool,
    Infer,
    StringIfLeadingZero,
    TypeDirective,
    parse_directive,
)
from typed_xmljson.api import (
    dumps,
    element_to_json,
    xml_file_to_json,
    xml_string_to_json,
)
from typed_xmljson.converter import XmlConverter
from typed_xmljson.errors import ConfigError, MalformedDocumentError, TypedXmlJsonError
from typed_xmljson.loader import load_config
from typed_xmljson.tree.nodes import JsonValue, XmlElement
from typed_xmljson.tree.parser import from_etree, parse_xml

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "AlwaysString",
    "Bool",
    "ConfigError",
    "ConverterConfig",
    "EmptyElementPolicy",
    "Infer",
    "JsonValue",
    "MalformedDocumentError",
    "StringIfLeadingZero",
    "TypeDirective",
    "TypedXmlJsonError",
    "XmlConverter",
    "XmlElement",
    "classify",
    "dumps",
    "element_to_json",
    "from_etree",
    "load_config",
    "parse_directive",
    "parse_xml",
    "xml_file_to_json",
    "xml_string_to_json",
]
