"""Convert nested mappings into XML text.

The tree handed to :func:`build_xml` follows a small set of conventions:

* a key starting with ``@`` holds an attribute of the enclosing element,
* the ``#text`` key holds the text content of the enclosing element,
* a list or tuple produces one sibling element per entry under the same tag,
* ``None`` anywhere means "absent" and produces nothing.
"""

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any

ATTRIBUTE_PREFIX = "@"
TEXT_KEY = "#text"

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile(r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def build_xml(tree: Mapping[str, Any], indent: str = "  ") -> str:
    """Serialize a tree with exactly one root element.

    Args:
        tree: Mapping of a single root tag to its content
        indent: Whitespace used for each nesting level

    Returns:
        XML text without a declaration

    Raises:
        ValueError: If the tree does not have exactly one root element
        TypeError: If a value cannot be rendered
    """
    roots = [(tag, value) for tag, value in tree.items() if value is not None]
    if len(roots) != 1:
        raise ValueError(f"XML tree must have exactly one root, got {len(roots)}")

    tag, value = roots[0]
    root = _make_element(tag, value)
    ET.indent(root, space=indent)
    return ET.tostring(root, encoding="unicode")


def _make_element(tag: str, value: Any) -> ET.Element:
    element = ET.Element(tag)

    if not isinstance(value, Mapping):
        element.text = _to_text(value)
        return element

    for key, child in value.items():
        if child is None:
            continue
        if key == TEXT_KEY:
            element.text = _to_text(child)
        elif key.startswith(ATTRIBUTE_PREFIX):
            element.set(key[len(ATTRIBUTE_PREFIX):], _to_text(child))
        else:
            _append_children(element, key, child)

    return element


def _append_children(parent: ET.Element, tag: str, value: Any) -> None:
    if isinstance(value, (list, tuple)):
        for entry in value:
            if entry is not None:
                _append_children(parent, tag, entry)
        return

    parent.append(_make_element(tag, value))


def _to_text(value: Any) -> str:
    # bool first: it is also an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        text = str(value)
        match = INVALID_XML_CHARS.search(text)
        if match:
            raise ValueError(f"Character {match.group()!r} is not allowed in XML text")
        return text
    raise TypeError(f"Cannot render value of type {type(value).__name__} as XML text")
