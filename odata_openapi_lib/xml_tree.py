"""
Attributed element tree over lxml used by every metadata resolver.

Attributes and children live behind separate accessors and are always
present, so resolvers never need to check whether a child list exists.
"""

from typing import Dict, List, Optional, Union

from lxml import etree


def _local_name(tag: str) -> str:
    return tag.split("}", 1)[-1] if "}" in tag else tag


class XmlNode:
    """One element of the metadata document, namespace-insensitive by tag."""

    __slots__ = ("name", "attributes", "namespaces", "text", "_children")

    def __init__(self, element):
        self.name = _local_name(element.tag)
        self.attributes: Dict[str, str] = dict(element.attrib)
        self.namespaces: Dict[Optional[str], str] = dict(element.nsmap)
        self.text = element.text.strip() if element.text else None
        self._children: Dict[str, List["XmlNode"]] = {}
        for child in element:
            # Comments and processing instructions have a non-string tag
            if not isinstance(child.tag, str):
                continue
            node = XmlNode(child)
            self._children.setdefault(node.name, []).append(node)

    def get(self, attr: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(attr, default)

    def get_ns(self, namespace: str, attr: str, default: Optional[str] = None) -> Optional[str]:
        """Reads a namespaced attribute, independent of the prefix the document uses."""
        return self.attributes.get(f"{{{namespace}}}{attr}", default)

    def children(self, name: str) -> List["XmlNode"]:
        return self._children.get(name, [])

    def first(self, name: str) -> Optional["XmlNode"]:
        found = self._children.get(name)
        return found[0] if found else None

    def has(self, name: str) -> bool:
        return bool(self._children.get(name))

    def __repr__(self) -> str:
        return f"XmlNode({self.name!r}, {self.attributes.get('Name')!r})"


def build_tree(xml: Union[str, bytes]) -> XmlNode:
    """
    Parse metadata text into an XmlNode tree.

    Args:
        xml: EDMX document as text or bytes

    Returns:
        The root node (normally ``Edmx``)

    Raises:
        lxml.etree.XMLSyntaxError: if the document is not well-formed
    """
    if isinstance(xml, str):
        # lxml refuses str input carrying an encoding declaration
        xml = xml.encode("utf-8")
    parser = etree.XMLParser(
        remove_blank_text=True,
        remove_comments=True,
        resolve_entities=False,
        no_network=True,
    )
    root = etree.fromstring(xml, parser=parser)
    return XmlNode(root)


def parse_optional_bool(value: Optional[str]) -> Optional[bool]:
    """None when the attribute is absent, otherwise a case-insensitive 'true' test."""
    return None if value is None else value.lower() == "true"
