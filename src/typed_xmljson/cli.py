"""
CLI interface for typed-xmljson.

Converts XML files (or stdin) to JSON using the same rules as the library.
Command-line options are applied on top of an optional TOML config file.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Any

from .algorithm.config import ConverterConfig, EmptyElementPolicy
from .algorithm.directives import StringIfLeadingZero, parse_directive
from .api import dumps, xml_file_to_json, xml_string_to_json
from .errors import ConfigError, MalformedDocumentError
from .loader import load_config

logger = logging.getLogger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="typed-xmljson",
        description="Convert XML documents to JSON with configurable value typing",
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Input XML files (reads stdin and writes stdout if none are given)",
    )

    parser.add_argument(
        "--output",
        "-o",
        help="Output file for a single input (default: stdout)",
    )

    parser.add_argument(
        "--output-dir",
        help="Write <name>.json for each input into this directory",
    )

    parser.add_argument(
        "--config",
        "-c",
        help="TOML file with converter settings",
    )

    parser.add_argument(
        "--attr-prefix",
        help="Prefix for attribute keys (default: @, may be empty)",
    )

    parser.add_argument(
        "--text-key",
        help="Key for element text next to attributes (default: #text)",
    )

    parser.add_argument(
        "--empty",
        choices=[policy.value for policy in EmptyElementPolicy],
        help="How to emit empty elements (default: empty_object)",
    )

    parser.add_argument(
        "--leading-zero-as-string",
        action="store_true",
        help="Keep numbers with a leading zero (e.g. 007) as strings",
    )

    parser.add_argument(
        "--override",
        action="append",
        default=[],
        metavar="PATH=TYPE",
        help=(
            "Type override for one path, e.g. /a/b/@id=string or "
            "/a/flag=bool:yes,Y (repeatable)"
        ),
    )

    parser.add_argument(
        "--array",
        action="append",
        default=[],
        metavar="PATH",
        help="Always emit the element at PATH as an array (repeatable)",
    )

    parser.add_argument(
        "--indent",
        type=int,
        help="Pretty-print with this many spaces",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug information to stderr",
    )

    return parser.parse_args(args)


def build_config(parsed: argparse.Namespace) -> ConverterConfig:
    """Combine the config file (if any) with command-line options.

    Raises:
        ConfigError: On an invalid config file or override spec.
        OSError: If the config file cannot be read.
    """
    config = load_config(parsed.config) if parsed.config else ConverterConfig()

    changes: dict[str, Any] = {}
    if parsed.attr_prefix is not None:
        changes["attribute_prefix"] = parsed.attr_prefix
    if parsed.text_key is not None:
        changes["text_node_key"] = parsed.text_key
    if parsed.empty is not None:
        changes["empty_element_policy"] = EmptyElementPolicy(parsed.empty)
    if parsed.leading_zero_as_string:
        changes["default_type_directive"] = StringIfLeadingZero()
    if changes:
        try:
            config = dataclasses.replace(config, **changes)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    for item in parsed.override:
        path, sep, spec = item.partition("=")
        if not sep or not path:
            raise ConfigError(f"--override expects PATH=TYPE, got {item!r}")
        config = config.add_json_type_override(path, parse_directive(spec))

    for path in parsed.array:
        config = config.add_array_override(path)

    return config


def output_path_for(source: Path, output_dir: str | None) -> Path:
    """Return where the JSON for ``source`` goes in batch mode."""
    target = source.with_suffix(".json")
    if output_dir is not None:
        return Path(output_dir) / target.name
    return target


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(parsed)
    except (ConfigError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # stdin -> stdout
    if not parsed.files:
        try:
            value = xml_string_to_json(sys.stdin.buffer.read(), config)
        except MalformedDocumentError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(dumps(value, indent=parsed.indent))
        return 0

    if parsed.output and len(parsed.files) > 1:
        print("Error: --output requires a single input file", file=sys.stderr)
        return 1

    # single file -> stdout or --output
    if len(parsed.files) == 1 and parsed.output_dir is None:
        source = Path(parsed.files[0])
        try:
            text = dumps(xml_file_to_json(source, config), indent=parsed.indent)
        except (MalformedDocumentError, OSError) as e:
            print(f"Error: {source}: {e}", file=sys.stderr)
            return 1
        if parsed.output:
            Path(parsed.output).write_text(text + "\n", encoding="utf-8")
        else:
            print(text)
        return 0

    # batch: one .json per input, keep going past failures
    if parsed.output_dir is not None:
        Path(parsed.output_dir).mkdir(parents=True, exist_ok=True)

    status = 0
    written: set[Path] = set()
    for name in parsed.files:
        source = Path(name)
        target = output_path_for(source, parsed.output_dir)
        if target.resolve() == source.resolve():
            print(f"Error: {source}: output would overwrite the input", file=sys.stderr)
            status = 1
            continue
        if target.resolve() in written:
            print(
                f"Error: {source}: {target} was already written by another input",
                file=sys.stderr,
            )
            status = 1
            continue
        try:
            text = dumps(xml_file_to_json(source, config), indent=parsed.indent)
            target.write_text(text + "\n", encoding="utf-8")
        except (MalformedDocumentError, OSError) as e:
            print(f"Error: {source}: {e}", file=sys.stderr)
            status = 1
            continue
        written.add(target.resolve())
        logger.info("Wrote %s", target)

    return status


if __name__ == "__main__":
    sys.exit(main())
