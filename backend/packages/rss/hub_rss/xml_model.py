"""
XML to generic model conversion.

Turns feed XML into nested dicts and lists so that normalizers can read any
RSS/RDF/Atom variant with plain key lookups.
"""

import re
from html.entities import html5
from typing import Any

from lxml import etree

from .errors import FeedParseError

# Element names that are always materialized as lists, even when a feed
# contains a single occurrence.
FORCE_LIST: frozenset[str] = frozenset({"item", "entry", "media:content", "enclosure"})

ATTR_PREFIX = "@"
TEXT_KEY = "#text"

_XML_PREDEFINED = {"amp", "lt", "gt", "quot", "apos"}
_XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
_UTF8_BOM = b"\xef\xbb\xbf"

# CDATA sections are matched first so their raw text is left untouched
_ENTITY_RE = re.compile(rb"(<!\[CDATA\[.*?\]\]>)|&([A-Za-z][A-Za-z0-9]*);", re.DOTALL)
_DECLARATION_RE = re.compile(r"^<\?xml[^>]*\?>")

_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_comments=True,
    remove_pis=True,
)


def _replace_entity(match: re.Match[bytes]) -> bytes:
    if match.group(1):
        return match.group(1)
    name = match.group(2).decode("ascii")
    if name in _XML_PREDEFINED:
        return match.group(0)
    chars = html5.get(f"{name};")
    if chars is None:
        # Unknown entity: keep it as literal text instead of failing the document
        return b"&amp;" + match.group(2) + b";"
    return "".join(f"&#{ord(char)};" for char in chars).encode("ascii")


def _prepare(source: str | bytes) -> bytes:
    if isinstance(source, str):
        text = source.lstrip("\ufeff \t\r\n")
        # The string is already decoded, so its declared encoding no longer applies
        text = _DECLARATION_RE.sub("", text, count=1)
        data = text.encode("utf-8")
    elif source.startswith(_UTF8_BOM):
        data = source
    else:
        data = source.lstrip()
    return _ENTITY_RE.sub(_replace_entity, data)


def _element_name(element: etree._Element) -> str:
    localname = etree.QName(element).localname
    if element.prefix:
        return f"{element.prefix}:{localname}"
    return localname


def _attribute_name(element: etree._Element, name: str) -> str:
    qname = etree.QName(name)
    if not qname.namespace:
        return qname.localname
    if qname.namespace == _XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in element.nsmap.items():
        if uri == qname.namespace and prefix:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _element_to_value(
    element: etree._Element, force_list: frozenset[str], attr_prefix: str
) -> Any:
    node: dict[str, Any] = {}
    for name, value in element.attrib.items():
        node[attr_prefix + _attribute_name(element, name)] = value

    text_parts = [element.text or ""]
    for child in element:
        text_parts.append(child.tail or "")
        if not isinstance(child.tag, str):
            # Unresolved entity references
            continue

        key = _element_name(child)
        value = _element_to_value(child, force_list, attr_prefix)
        if key in node:
            existing = node[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                node[key] = [existing, value]
        elif key in force_list:
            node[key] = [value]
        else:
            node[key] = value

    text = "".join(text_parts).strip()
    if not node:
        return text
    if text:
        node[TEXT_KEY] = text
    return node


def xml_to_model(
    source: str | bytes,
    *,
    force_list: frozenset[str] = FORCE_LIST,
    attr_prefix: str = ATTR_PREFIX,
) -> dict[str, Any]:
    """
    Convert XML into a nested dict model.

    Elements are keyed by qualified name (``media:content``), attributes by
    ``attr_prefix`` plus name, and mixed text by ``#text``. Names listed in
    ``force_list`` are always lists.

    Args:
        source: XML document as text or raw bytes.
        force_list: Element names that are always materialized as lists.
        attr_prefix: Prefix for attribute keys.

    Returns:
        Dict with the root element name as its single key.

    Raises:
        FeedParseError: If the document is empty or not well-formed.
    """
    data = _prepare(source)
    if not data.strip():
        raise FeedParseError("Failed to parse feed XML: empty document")

    try:
        root = etree.fromstring(data, parser=_PARSER)
    except etree.XMLSyntaxError as e:
        raise FeedParseError(f"Failed to parse feed XML: {e}") from e

    if root is None:
        raise FeedParseError("Failed to parse feed XML: empty document")

    return {_element_name(root): _element_to_value(root, force_list, attr_prefix)}


def as_list(value: Any) -> list[Any]:
    """Wrap a single model value in a list; missing or empty values become []."""
    if isinstance(value, list):
        return value
    if value is None or value == "":
        return []
    return [value]


def node_text(value: Any) -> str:
    """
    Read the text of a model value.

    Nodes with attributes or children yield their ``#text``; lists yield the
    text of their first element.
    """
    if isinstance(value, list):
        return node_text(value[0]) if value else ""
    if isinstance(value, dict):
        return str(value.get(TEXT_KEY, ""))
    if value is None:
        return ""
    return str(value)


def node_attr(value: Any, name: str, attr_prefix: str = ATTR_PREFIX) -> str:
    """Read an attribute of a model node, or "" when the node has none."""
    if not isinstance(value, dict):
        return ""
    return str(value.get(attr_prefix + name, "")).strip()
