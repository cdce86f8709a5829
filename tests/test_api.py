"""Unit tests for the public API functions: xml_string_to_json, xml_file_to_json,
element_to_json and dumps."""

from __future__ import annotations

import json
import xml.etree.ElementTree as StdET
from pathlib import Path

import pytest
from lxml import etree

from typed_xmljson import (
    AlwaysString,
    ConverterConfig,
    EmptyElementPolicy,
    MalformedDocumentError,
    XmlElement,
    dumps,
    element_to_json,
    xml_file_to_json,
    xml_string_to_json,
)


class TestXmlStringToJson:
    """Tests for the xml_string_to_json() function."""

    def test_default_config_when_none(self) -> None:
        assert xml_string_to_json("<a>1</a>") == {"a": 1}

    def test_config_passthrough(self) -> None:
        config = ConverterConfig(empty_element_policy=EmptyElementPolicy.NULL)
        assert xml_string_to_json("<a><b/></a>", config) == {"a": {"b": None}}

    def test_accepts_bytes(self) -> None:
        assert xml_string_to_json(b"<a>x</a>") == {"a": "x"}

    def test_xml_declaration(self) -> None:
        xml = '<?xml version="1.0" encoding="utf-8"?><a attr1="val1">some text</a>'
        assert xml_string_to_json(xml) == {"a": {"@attr1": "val1", "#text": "some text"}}

    def test_malformed_raises(self) -> None:
        with pytest.raises(MalformedDocumentError):
            xml_string_to_json("<a>some text<b></a>")

    def test_no_global_state_between_calls(self) -> None:
        config = ConverterConfig().add_json_type_override("/a", AlwaysString())
        assert xml_string_to_json("<a>1</a>", config) == {"a": "1"}
        assert xml_string_to_json("<a>1</a>") == {"a": 1}


class TestXmlFileToJson:
    """Tests for the xml_file_to_json() function."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.xml"
        path.write_text("<a><b>1</b><b>2</b></a>", encoding="utf-8")
        assert xml_file_to_json(path) == {"a": {"b": [1, 2]}}

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.xml"
        path.write_text("<a>t</a>", encoding="utf-8")
        assert xml_file_to_json(str(path)) == {"a": "t"}

    def test_honours_declared_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.xml"
        path.write_bytes(
            '<?xml version="1.0" encoding="ISO-8859-1"?><a>café</a>'.encode("iso-8859-1")
        )
        assert xml_file_to_json(path) == {"a": "café"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            xml_file_to_json(tmp_path / "missing.xml")

    def test_malformed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.xml"
        path.write_text("<a>", encoding="utf-8")
        with pytest.raises(MalformedDocumentError):
            xml_file_to_json(path)


class TestElementToJson:
    """Tests for the element_to_json() function."""

    def test_xml_element(self) -> None:
        element = XmlElement("a", (("x", "1"),), "", (XmlElement("b", (), "t"),))
        assert element_to_json(element) == {"a": {"@x": 1, "b": "t"}}

    def test_lxml_element(self) -> None:
        assert element_to_json(etree.fromstring("<a><b>2.5</b></a>")) == {
            "a": {"b": 2.5}
        }

    def test_stdlib_element(self) -> None:
        assert element_to_json(StdET.fromstring("<a><b>true</b></a>")) == {
            "a": {"b": True}
        }

    def test_ignored_root_is_null(self) -> None:
        config = ConverterConfig(empty_element_policy=EmptyElementPolicy.IGNORE)
        assert element_to_json(XmlElement("a"), config) == {"a": None}


class TestDumps:
    """Tests for the dumps() function."""

    def test_compact(self) -> None:
        value = xml_string_to_json("<a><b>12345</b><b>12345.0</b><b>12345.6</b></a>")
        assert dumps(value) == '{"a": {"b": [12345, 12345.0, 12345.6]}}'

    def test_key_order_preserved(self) -> None:
        value = xml_string_to_json('<a z="1" y="2"><x>3</x></a>')
        assert dumps(value) == '{"a": {"@z": 1, "@y": 2, "x": 3}}'

    def test_non_ascii_kept(self) -> None:
        assert dumps(xml_string_to_json("<a>ünïcode</a>")) == '{"a": "ünïcode"}'

    def test_indent(self) -> None:
        text = dumps({"a": 1}, indent=2)
        assert text == '{\n  "a": 1\n}'

    def test_null_and_bool(self) -> None:
        assert json.loads(dumps({"a": None, "b": True})) == {"a": None, "b": True}
