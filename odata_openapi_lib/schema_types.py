"""
Complex types, enum types, annotations and singletons.
"""

from typing import List, Optional, Sequence

from .constants import SAP_NAMESPACE
from .models import Annotation, ComplexType, EntitySet, EnumType, Singleton, SingletonProperty
from .properties import parse_properties
from .verbose_log import VerboseLog
from .xml_tree import XmlNode


def find_owning_schema(node: XmlNode, schemas: Sequence[XmlNode], kind: str) -> Optional[XmlNode]:
    """The schema whose <kind> children contain node."""
    for schema in schemas:
        if any(child is node for child in schema.children(kind)):
            return schema
    return None


def find_owning_namespace(node: XmlNode, schemas: Sequence[XmlNode], kind: str) -> Optional[str]:
    schema = find_owning_schema(node, schemas, kind)
    return schema.get('Namespace') if schema is not None else None


def parse_complex_types(nodes: Sequence[XmlNode], schemas: Sequence[XmlNode],
                        sap_namespace: str = SAP_NAMESPACE) -> List[ComplexType]:
    return [
        ComplexType(
            name=node.get('Name'),
            properties=parse_properties(node, sap_namespace),
            namespace=find_owning_namespace(node, schemas, 'ComplexType'),
        )
        for node in nodes
        if node.get('Name')
    ]


def parse_enum_types(nodes: Sequence[XmlNode], schemas: Sequence[XmlNode]) -> List[EnumType]:
    return [
        EnumType(
            name=node.get('Name'),
            member_names=[m.get('Name') for m in node.children('Member') if m.get('Name')],
            namespace=find_owning_namespace(node, schemas, 'EnumType'),
        )
        for node in nodes
        if node.get('Name')
    ]


def parse_annotations(nodes: Sequence[XmlNode]) -> List[Annotation]:
    """One Annotation per <Annotations> block, terms deduplicated in order of appearance."""
    annotations = []
    for node in nodes:
        target = node.get('Target')
        if not target:
            continue
        terms = []
        for annotation in node.children('Annotation'):
            term = annotation.get('Term')
            if term and term not in terms:
                terms.append(term)
        annotations.append(Annotation(target=target, terms=terms))
    return annotations


def parse_singletons(nodes: Sequence[XmlNode], entity_sets: Sequence[EntitySet],
                     log: Optional[VerboseLog] = None) -> List[Singleton]:
    """
    Resolve singletons, synthesizing properties from NavigationPropertyBinding.

    A binding path containing '/' yields a to-one property typed as the bound
    set's entity type, otherwise a Collection() of that type. This is a
    heuristic, not the OData multiplicity rule.
    """
    log = log or VerboseLog()
    singletons = []
    for node in nodes:
        if not node.get('Name'):
            continue
        properties = []
        for binding in node.children('NavigationPropertyBinding'):
            target = binding.get('Target')
            entity_set = next((es for es in entity_sets if es.name == target), None)
            if entity_set is None:
                log.warn(f"Singleton '{node.get('Name')}' binds unknown entity set '{target}'.")
                continue
            path = binding.get('Path')
            if not path:
                continue
            qualified = f"{entity_set.namespace}.{entity_set.entity_type.name}"
            properties.append(SingletonProperty(
                name=path.split('/')[-1],
                type=qualified if '/' in path else f"Collection({qualified})",
            ))
        singletons.append(Singleton(name=node.get('Name'), type=node.get('Type'), properties=properties))
    return singletons
