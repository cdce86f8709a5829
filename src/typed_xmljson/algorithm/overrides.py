"""Override resolution: exact path lookup with a fallback directive."""

from __future__ import annotations

from collections.abc import Mapping

from typed_xmljson.algorithm.directives import TypeDirective

__all__ = ["resolve"]


def resolve(
    path: str,
    overrides: Mapping[str, TypeDirective],
    fallback: TypeDirective,
) -> TypeDirective:
    """Return the directive registered for ``path``, else ``fallback``.

    Matching is exact on the full structural path; there is no prefix,
    suffix or wildcard matching.  ``/a/b`` does not match ``/x/a/b``.
    """
    return overrides.get(path, fallback)
