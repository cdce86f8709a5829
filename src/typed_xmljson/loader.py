"""Load a ConverterConfig from a TOML file.

Example file::

    leading_zero_as_string = true
    attribute_prefix = ""
    text_node_key = "text"
    empty_element_policy = "null"
    array_paths = ["/catalog/book"]

    [overrides]
    "/catalog/book/@id" = "string"
    "catalog/book/available" = { bool = ["yes", "Y"] }

Override and array paths are normalised the same way as
``ConverterConfig.add_json_type_override`` does it.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from typed_xmljson.algorithm.config import ConverterConfig, EmptyElementPolicy
from typed_xmljson.algorithm.directives import parse_directive
from typed_xmljson.errors import ConfigError

__all__ = ["config_from_mapping", "load_config"]

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset(
    {
        "leading_zero_as_string",
        "attribute_prefix",
        "text_node_key",
        "empty_element_policy",
        "array_paths",
        "overrides",
    }
)


def load_config(path: str | Path) -> ConverterConfig:
    """Read ``path`` as TOML and build a ConverterConfig from it.

    Raises:
        OSError: If the file cannot be read.
        ConfigError: If the file is not valid TOML or holds invalid settings.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e

    logger.debug("Loaded converter settings from %s", path)
    return config_from_mapping(data)


def config_from_mapping(data: Mapping[str, Any]) -> ConverterConfig:
    """Build a ConverterConfig from already parsed settings.

    Raises:
        ConfigError: On unknown keys or values of the wrong type.
    """
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    leading_zero = _typed(data, "leading_zero_as_string", bool, False)
    try:
        config = ConverterConfig.new_with_custom_values(
            leading_zero_as_string=leading_zero,
            xml_attr_prefix=_typed(data, "attribute_prefix", str, "@"),
            xml_text_node_prop_name=_typed(data, "text_node_key", str, "#text"),
            empty_element_handling=_typed(
                data, "empty_element_policy", str, EmptyElementPolicy.EMPTY_OBJECT
            ),
        )
    except ValueError as e:
        raise ConfigError(str(e)) from e

    overrides = _typed(data, "overrides", Mapping, {})
    for override_path, spec in overrides.items():
        config = config.add_json_type_override(override_path, parse_directive(spec))

    array_paths = _typed(data, "array_paths", list, [])
    for array_path in array_paths:
        if not isinstance(array_path, str):
            raise ConfigError(
                f"array_paths entries must be strings, got {array_path!r}"
            )
        config = config.add_array_override(array_path)

    return config


def _typed(data: Mapping[str, Any], key: str, expected: type, default: Any) -> Any:
    """Return ``data[key]`` after a type check, or ``default`` when absent."""
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, expected):
        raise ConfigError(
            f"{key} must be of type {expected.__name__}, got {type(value).__name__}"
        )
    return value
