"""
Entity type resolution: base-type flattening, keys and navigation properties.
"""

from typing import List, Optional, Sequence, Tuple

from .constants import SAP_NAMESPACE
from .models import EntityPath, EntityProperty, EntityType, PropertyItems, ReferentialConstraint, Relation
from .properties import find_properties, parse_properties
from .type_names import collection_item_type, definition_ref, type_name_from_type
from .verbose_log import VerboseLog
from .xml_tree import XmlNode, parse_optional_bool


def find_raw_type(name: Optional[str], raw_types: Sequence[XmlNode]) -> Optional[XmlNode]:
    """Looks up a raw type element by bare name."""
    if not name:
        return None
    for node in raw_types:
        if node.get('Name') == name:
            return node
    return None


def get_entity_base_types(node: XmlNode, raw_types: Sequence[XmlNode],
                          log: Optional[VerboseLog] = None) -> List[XmlNode]:
    """Ancestor chain of node, nearest ancestor first."""
    base_types = []
    seen = {id(node)}
    current = node
    while current is not None:
        current = find_raw_type(type_name_from_type(current.get('BaseType')), raw_types)
        if current is None:
            break
        if id(current) in seen:
            if log:
                log.warn(f"Inheritance cycle at EntityType '{current.get('Name')}', chain truncated.")
            break
        seen.add(id(current))
        base_types.append(current)
    return base_types


def parse_entity_paths(node: XmlNode) -> List[EntityPath]:
    """Navigation properties declared with ContainsTarget="true". Any other value is not a containment."""
    return [
        EntityPath(name=nav.get('Name'), type=nav.get('Type'))
        for nav in node.children('NavigationProperty')
        if parse_optional_bool(nav.get('ContainsTarget')) and nav.get('Name')
    ]


def _find_association_end(nav: XmlNode, associations: Sequence[XmlNode]) -> Tuple[Optional[str], Optional[str]]:
    """Type and multiplicity of the association end named by the ToRole of nav."""
    to_role = nav.get('ToRole')
    relationship = type_name_from_type(nav.get('Relationship'))
    named = [a for a in associations if a.get('Name') == relationship]
    for association in named or associations:
        for end in association.children('End'):
            if end.get('Role') == to_role:
                return end.get('Type'), end.get('Multiplicity')
    return None, None


def _v4_navigation_property(nav: XmlNode) -> EntityProperty:
    name = nav.get('Name')
    nav_type = nav.get('Type')
    item_type = collection_item_type(nav_type)
    if item_type is not None:
        return EntityProperty(
            name=name,
            type='array',
            items=PropertyItems(ref=definition_ref(item_type)),
        )

    constraints = [
        ReferentialConstraint(property=c.get('Property'), ref_property=c.get('ReferencedProperty'))
        for c in nav.children('ReferentialConstraint')
        if c.get('Property')
    ]
    return EntityProperty(
        name=name,
        ref=definition_ref(nav_type),
        relation=Relation(name=name, partner=nav.get('Partner'), constraints=constraints),
    )


def _v2_navigation_property(nav: XmlNode, associations: Sequence[XmlNode],
                            log: VerboseLog) -> Optional[EntityProperty]:
    name = nav.get('Name')
    if not (associations and name and nav.get('Relationship') and nav.get('ToRole')):
        return None

    end_type, multiplicity = _find_association_end(nav, associations)
    if not end_type:
        log.warn(f"No association end for role '{nav.get('ToRole')}' of NavigationProperty '{name}'.")
        return None
    if multiplicity == '1':
        return EntityProperty(name=name, ref=definition_ref(end_type))
    if multiplicity == '*':
        return EntityProperty(
            name=name,
            type='array',
            items=PropertyItems(ref=definition_ref(end_type)),
        )
    log.warn(f"Multiplicity '{multiplicity}' of NavigationProperty '{name}' is not mapped, property skipped.")
    return None


def parse_navigation_properties(node: XmlNode, associations: Sequence[XmlNode] = (),
                                log: Optional[VerboseLog] = None) -> List[EntityProperty]:
    """
    Resolve navigation properties into reference-carrying properties.

    A ``Type`` attribute marks the OData v4 form. Otherwise the v2 form is
    resolved through the association whose end role matches ``ToRole``;
    only multiplicities ``1`` and ``*`` produce a property.
    """
    log = log or VerboseLog()
    result = []
    for nav in node.children('NavigationProperty'):
        if nav.get('Type'):
            if nav.get('Name'):
                result.append(_v4_navigation_property(nav))
            continue
        prop = _v2_navigation_property(nav, associations, log)
        if prop is not None:
            result.append(prop)
    return result


def resolve_entity_type(node: XmlNode, raw_types: Sequence[XmlNode], namespace: Optional[str] = None,
                        associations: Sequence[XmlNode] = (), sap_namespace: str = SAP_NAMESPACE,
                        log: Optional[VerboseLog] = None) -> EntityType:
    """
    Resolve one raw EntityType element.

    Args:
        node: The raw EntityType element
        raw_types: Raw entity types that base types are looked up in, by bare name
        namespace: Owning schema namespace
        associations: v2 Association elements for navigation resolution
        sap_namespace: Namespace URI of the SAP vendor attributes
        log: Diagnostics channel

    Returns:
        EntityType with inherited properties first (root ancestor first),
        own properties next and navigation properties last.
    """
    log = log or VerboseLog()
    base_types = get_entity_base_types(node, raw_types, log)

    properties: List[EntityProperty] = []
    # Root ancestor first, so a chain C -> B -> A yields A, B, C properties
    for base in reversed(base_types):
        properties.extend(parse_properties(base, sap_namespace))
    properties.extend(parse_properties(node, sap_namespace))

    key = None
    key_node = node.first('Key')
    if key_node is None:
        key_node = next((b.first('Key') for b in base_types if b.has('Key')), None)
    if key_node is not None:
        refs = [ref.get('Name') for ref in key_node.children('PropertyRef')]
        key = find_properties(properties, refs)
        known = {prop.name for prop in properties}
        for ref in refs:
            if ref not in known:
                log.warn(f"Key of EntityType '{node.get('Name')}' references unknown property '{ref}'.")

    properties.extend(parse_navigation_properties(node, associations, log))

    return EntityType(
        name=node.get('Name'),
        namespace=namespace,
        abstract=parse_optional_bool(node.get('Abstract')),
        properties=properties,
        key=key,
        paths=parse_entity_paths(node),
    )
