"""
Structural property parsing.
"""

from typing import List, Optional

from .constants import SAP_NAMESPACE, UNQUOTED_URL_TYPES
from .models import EntityProperty, PropertyItems
from .type_names import collection_item_type, definition_ref, is_primitive
from .xml_tree import XmlNode


def parse_property(node: XmlNode, sap_namespace: str = SAP_NAMESPACE) -> EntityProperty:
    """
    Turn one <Property> element into an EntityProperty.

    Args:
        node: The Property element
        sap_namespace: Namespace URI the sap:label description is read from

    Returns:
        The normalized property. ``Collection(X)`` types become arrays whose
        items are inline for EDM primitives and a definition reference otherwise.
    """
    prop_type = node.get('Type')
    items = None
    item_type = collection_item_type(prop_type)
    if item_type is not None:
        if is_primitive(item_type):
            items = PropertyItems(type=item_type)
        else:
            items = PropertyItems(ref=definition_ref(item_type))
        prop_type = 'array'

    return EntityProperty(
        name=node.get('Name'),
        type=prop_type,
        required=node.get('Nullable') == 'false',
        wrap_value_in_quotes_in_urls=node.get('Type') not in UNQUOTED_URL_TYPES,
        items=items,
        description=node.get_ns(sap_namespace, 'label') or None,
    )


def parse_properties(node: XmlNode, sap_namespace: str = SAP_NAMESPACE) -> List[EntityProperty]:
    return [parse_property(p, sap_namespace) for p in node.children('Property') if p.get('Name')]


def find_properties(properties: List[EntityProperty], names: List[Optional[str]]) -> List[EntityProperty]:
    """Properties whose name appears in names, in property order."""
    wanted = set(names)
    return [prop for prop in properties if prop.name in wanted]
