"""pytest plugin for typed-xmljson.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from typed_xmljson import ConverterConfig, dumps, xml_string_to_json


def strict_equal(left: Any, right: Any) -> bool:
    """Compare two JSON values, treating ``1``, ``1.0`` and ``True`` as different.

    Plain ``==`` cannot check conversion output because Python considers
    ``1 == 1.0 == True``.  Object key order is not compared.
    """
    if type(left) is not type(right):
        return False
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(
            strict_equal(left[key], right[key]) for key in left
        )
    if isinstance(left, list):
        return len(left) == len(right) and all(
            strict_equal(a, b) for a, b in zip(left, right, strict=True)
        )
    return bool(left == right)


@pytest.fixture(scope="session")
def assert_xml_converts() -> Any:
    """Fixture that returns a callable XML-to-JSON conversion asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to xml_string_to_json() which creates a fresh converter per call).

    Usage in tests::

        def test_numbers(assert_xml_converts):
            assert_xml_converts("<a><b>1</b></a>", {"a": {"b": 1}})

        def test_float_is_not_int(assert_xml_converts):
            with pytest.raises(AssertionError, match=r"not converted as expected"):
                assert_xml_converts("<a>1.0</a>", {"a": 1})

    Returns:
        A callable ``_assert(xml, expected, config=None) -> None`` that raises
        ``AssertionError`` when the converted value differs from ``expected``
        in structure, value or JSON type.
    """

    def _assert(
        xml: str | bytes,
        expected: Any,
        config: ConverterConfig | None = None,
    ) -> None:
        """Assert that ``xml`` converts to exactly ``expected``.

        Raises:
            AssertionError: On any difference, with both values rendered as JSON.
            MalformedDocumentError: If ``xml`` does not parse.
        """
        actual = xml_string_to_json(xml, config=config)
        if not strict_equal(actual, expected):
            raise AssertionError(
                f"XML not converted as expected\n"
                f"  actual:   {dumps(actual)}\n"
                f"  expected: {dumps(expected)}"
            )

    return _assert
