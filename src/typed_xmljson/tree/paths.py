"""Structural paths used as override lookup keys.

A path is built during traversal from the element names on the way down:

- Root is "" (empty string), so the root element's path is "/{root}"
- Each element level appends "/{name}"
- An attribute appends "/@{name}" to its element's path

Example: for ``<a><b c="123">007</b></a>`` the path of ``c`` is ``/a/b/@c``
and the path of ``b``'s text is ``/a/b``.
"""

from __future__ import annotations

__all__ = ["attr_path", "child_path", "normalize_path"]


def child_path(parent_path: str, element_name: str) -> str:
    """Return the path of an element named ``element_name`` under ``parent_path``."""
    return f"{parent_path}/{element_name}"


def attr_path(element_path: str, attr_name: str) -> str:
    """Return the path of attribute ``attr_name`` on the element at ``element_path``."""
    return f"{element_path}/@{attr_name}"


def normalize_path(path: str) -> str:
    """Prepend the leading "/" to a user-supplied path when it is missing."""
    if path.startswith("/"):
        return path
    return "/" + path
