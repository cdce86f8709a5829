"""Integrations subpackage for typed-xmljson.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_xml_converts`` fixture

The plugin module imports pytest, so it is not imported here.
"""

from __future__ import annotations

__all__: list[str] = []
