"""Intermediate XML tree and its rendering.

Exporters describe their output as a tree of :class:`XmlNode` objects and
hand it to :func:`render`, which is the only place that touches
``xml.etree.ElementTree``. This keeps element ordering in the exporters and
out of the XML library.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class XmlNode:
    """Element with a tag, optional text and ordered children."""

    tag: str
    text: str | None = None
    children: list[XmlNode] = field(default_factory=list)

    def append(self, child: XmlNode) -> XmlNode:
        """Append an existing node and return it."""
        self.children.append(child)
        return child

    def add(self, tag: str, text: str | None = None) -> XmlNode:
        """Create a child node, append it and return it."""
        return self.append(XmlNode(tag, text))

    def find(self, tag: str) -> XmlNode | None:
        """Return the first direct child with ``tag``."""
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def findall(self, tag: str) -> list[XmlNode]:
        return [child for child in self.children if child.tag == tag]

    def iter(self) -> Iterator[XmlNode]:
        """Walk the subtree depth-first, starting with this node."""
        yield self
        for child in self.children:
            yield from child.iter()


def render(node: XmlNode, parent: ET.Element | None = None) -> ET.Element:
    """Render ``node`` as an ElementTree element.

    Parameters
    ----------
    node : XmlNode
        Root of the tree to render.
    parent : ET.Element | None
        When given, the rendered element is appended to it.

    Returns
    -------
    ET.Element
        The element created for ``node``.
    """
    if parent is None:
        element = ET.Element(node.tag)
    else:
        element = ET.SubElement(parent, node.tag)
    if node.text is not None:
        element.text = node.text
    for child in node.children:
        render(child, element)
    return element


def to_string(node: XmlNode, pretty: bool = False) -> str:
    """Render ``node`` to XML text."""
    element = render(node)
    if pretty:
        ET.indent(element)
    return ET.tostring(element, encoding="unicode")
