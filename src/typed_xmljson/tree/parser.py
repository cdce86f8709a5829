"""Build XmlElement trees from raw XML or from already parsed etree elements.

Parsing is delegated to lxml.  The parser is configured so that untrusted
documents cannot pull in external entities or touch the network, and so
that comments and processing instructions never show up as children.

``from_etree`` also accepts stdlib ``xml.etree.ElementTree`` elements: both
libraries expose ``tag`` / ``attrib`` / ``text`` / ``tail`` and iterate over
their children, and both use a non-string ``tag`` for comments and
processing instructions.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from lxml import etree

from typed_xmljson.errors import MalformedDocumentError
from typed_xmljson.tree.nodes import XmlElement

__all__ = ["from_etree", "parse_xml"]

logger = logging.getLogger(__name__)


def _make_parser(*, override_encoding: bool) -> etree.XMLParser:
    # Unicode input has already been decoded; ignore the declared encoding
    encoding = "utf-8" if override_encoding else None
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
        remove_comments=True,
        remove_pis=True,
    )


def _local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from a Clark-notation name."""
    return etree.QName(tag).localname


def _attributes(element: Any) -> tuple[tuple[str, str], ...]:
    """Return the element's attributes as ordered ``(name, value)`` pairs.

    Names are local names, except where attributes from different namespaces
    share one (``p:x`` and ``q:x``): those keep their ``prefix:local`` form
    so neither value is lost.  Without a known prefix (stdlib ElementTree
    keeps no prefix map) the Clark-notation name ``{uri}local`` is kept.
    """
    items = list(element.attrib.items())
    names = [_local_name(key) for key, _ in items]
    clashes = {name for name, count in Counter(names).items() if count > 1}
    if not clashes:
        return tuple(zip(names, (value for _, value in items), strict=True))

    prefixes: dict[str, str] = {}
    for prefix, uri in getattr(element, "nsmap", {}).items():
        if prefix:
            prefixes.setdefault(uri, prefix)

    pairs: list[tuple[str, str]] = []
    for (key, value), name in zip(items, names, strict=True):
        uri = etree.QName(key).namespace
        if name in clashes and uri is not None:
            name = f"{prefixes[uri]}:{name}" if uri in prefixes else key
        pairs.append((name, value))
    return tuple(pairs)


def parse_xml(source: str | bytes) -> XmlElement:
    """Parse an XML document and return its root as an XmlElement.

    Args:
        source: The document.  ``bytes`` are decoded according to the
            document's own encoding declaration; ``str`` is taken as already
            decoded text even when it carries an ``encoding=`` declaration.

    Returns:
        The root XmlElement.

    Raises:
        MalformedDocumentError: If the document is not well-formed XML.
    """
    if isinstance(source, str):
        try:
            data = source.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MalformedDocumentError(f"not encodable as UTF-8: {e.reason}") from e
        parser = _make_parser(override_encoding=True)
    else:
        data = source
        parser = _make_parser(override_encoding=False)

    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        line = e.position[0] if e.position else None
        column = e.position[1] if e.position else None
        logger.debug("XML parse failed at line %s column %s: %s", line, column, e.msg)
        raise MalformedDocumentError(str(e.msg or e), line=line, column=column) from e

    return from_etree(root)


def from_etree(element: Any) -> XmlElement:
    """Convert an lxml or ElementTree element (and its subtree) into an XmlElement.

    Direct text is the element's own ``text`` plus the ``tail`` of each
    direct child, including the tails of skipped comments and processing
    instructions, so text interrupted by a comment still reads as one run.
    """
    text_parts = [element.text or ""]
    children: list[XmlElement] = []

    for child in element:
        if isinstance(child.tag, str):
            children.append(from_etree(child))
        text_parts.append(child.tail or "")

    return XmlElement(
        name=_local_name(element.tag),
        attributes=_attributes(element),
        text="".join(text_parts),
        children=tuple(children),
    )
