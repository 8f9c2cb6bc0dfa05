"""
Generic document tree helpers.

FGU exports are parsed into a plain tree of dicts, lists and strings where
every child element sits in a list under its tag name, even when it occurs
once. Attributes live under ``$`` and text that shares an element with
attributes or children lives under ``_``. ``safe_get`` reads that tree
without ever failing on a missing or oddly shaped node.
"""

import re
import xml.etree.ElementTree as ET

ATTR_KEY = "$"
TEXT_KEYS = ("_", "$t")
ENTRY_PREFIX = "id-"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SheetError(Exception):
    """A character sheet could not be produced from the uploaded document."""


class DocumentError(SheetError):
    """Raised when an uploaded document cannot be read as a tree."""


def element_to_tree(element):
    """Convert an ElementTree element into the list-wrapped tree shape."""
    node = {}
    if element.attrib:
        node[ATTR_KEY] = dict(element.attrib)

    text = element.text or ""
    for child in element:
        node.setdefault(child.tag, []).append(element_to_tree(child))
        text += child.tail or ""

    if text.strip():
        node[TEXT_KEYS[0]] = text

    if not node:
        return text
    if list(node) == [TEXT_KEYS[0]]:
        return node[TEXT_KEYS[0]]
    return node


def parse_document(xml_content):
    """Parse XML bytes (or text) into ``{root_tag: tree}``."""
    try:
        root = ET.fromstring(xml_content)
    except ET.ParseError as e:
        raise DocumentError(f"Invalid XML: {e}") from e
    try:
        return {root.tag: element_to_tree(root)}
    except RecursionError as e:
        raise DocumentError("Document is nested too deeply") from e


def _is_empty(value):
    if value is None:
        return True
    try:
        return len(value) == 0
    except TypeError:
        return False


def safe_get(tree, path, default=""):
    """Walk ``tree`` along a dotted path, returning ``default`` on any miss.

    Segments are dict keys or, on lists, decimal indexes. The result is
    unwrapped from single-element lists and from text-wrapper dicts.
    """
    current = tree
    for key in path.split("."):
        if isinstance(current, dict):
            if key not in current:
                return default
            current = current[key]
        elif isinstance(current, list):
            if not key.isdecimal() or int(key) >= len(current):
                return default
            current = current[int(key)]
        else:
            return default

    while isinstance(current, list) and len(current) == 1:
        current = current[0]

    if isinstance(current, dict):
        for text_key in TEXT_KEYS:
            if text_key in current:
                current = current[text_key]
                break

    if _is_empty(current):
        return default
    return current


def parse_int(value, default=0):
    """Parse the leading integer of ``value``; return ``default`` otherwise."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    return int(match.group(1))


def iter_entries(node):
    """Yield each ``id-*`` child record of ``node`` in document order."""
    if not isinstance(node, dict):
        return
    for key, value in node.items():
        if not key.startswith(ENTRY_PREFIX):
            continue
        entry = value[0] if isinstance(value, list) and value else value
        if isinstance(entry, dict):
            yield entry


def extract_entries(tree, path, build):
    """Apply ``build`` to every indexed entry under ``path``.

    ``build`` may return ``None`` to skip an entry.
    """
    records = []
    for entry in iter_entries(safe_get(tree, path, {})):
        record = build(entry)
        if record is not None:
            records.append(record)
    return records
