"""
Entity set builders for plain OData metadata and the SAP dialect.
"""

from typing import Dict, List, Optional, Sequence

from .constants import SAP_CAPABILITY_DEFAULTS, SAP_NAMESPACE
from .entity_types import find_raw_type, get_entity_base_types, resolve_entity_type
from .models import Annotation, EntitySet, EntityType, FunctionImport, SAPEntitySet
from .type_names import type_name_from_type
from .verbose_log import VerboseLog
from .xml_tree import XmlNode


def parse_entity_type_annotations(namespace: Optional[str], node: XmlNode, raw_types: Sequence[XmlNode],
                                  annotations: Sequence[Annotation]) -> List[str]:
    """Terms annotated on the entity type or any ancestor, first discovery order, no duplicates."""
    all_types = [node] + get_entity_base_types(node, raw_types)
    targets = [f"{namespace}.{t.get('Name')}" for t in all_types]
    terms: List[str] = []
    for annotation in annotations:
        for target in targets:
            if annotation.target != target:
                continue
            for term in annotation.terms:
                if term not in terms:
                    terms.append(term)
    return terms


class EntitySetBuilder:
    """Builds entity sets for plain OData metadata."""

    def __init__(self, sap_namespace: str = SAP_NAMESPACE, log: Optional[VerboseLog] = None):
        self.sap_namespace = sap_namespace
        self.log = log or VerboseLog()

    def associations(self, schema: XmlNode) -> List[XmlNode]:
        """Associations used to resolve v2 navigation properties. Plain metadata uses none."""
        return []

    def build(self, schema: XmlNode, container: XmlNode, annotations: Sequence[Annotation],
              function_imports: Sequence[FunctionImport]) -> List[EntitySet]:
        """
        Build every container entity set whose type is declared in schema.

        Args:
            schema: Schema element holding the raw entity types
            container: The EntityContainer element
            annotations: Schema-level annotations of the container schema
            function_imports: Function imports of the container, resolved once

        Returns:
            Entity sets in container order. Sets whose type is not declared in
            this schema are skipped.
        """
        namespace = schema.get('Namespace')
        raw_types = schema.children('EntityType')
        associations = self.associations(schema)

        entity_sets = []
        for node in container.children('EntitySet'):
            raw_type = find_raw_type(type_name_from_type(node.get('EntityType')), raw_types)
            if raw_type is None or not node.get('Name'):
                continue
            entity_type = resolve_entity_type(
                raw_type, raw_types, namespace, associations, self.sap_namespace, self.log)
            entity_sets.append(self.build_entity_set(
                node,
                namespace=namespace,
                entity_type=entity_type,
                annotations=parse_entity_type_annotations(namespace, raw_type, raw_types, annotations),
                function_imports=[fi for fi in function_imports if fi.entity_set == node.get('Name')],
            ))
        return entity_sets

    def build_entity_set(self, node: XmlNode, namespace: Optional[str], entity_type: EntityType,
                         annotations: List[str], function_imports: List[FunctionImport]) -> EntitySet:
        return EntitySet(
            namespace=namespace,
            name=node.get('Name'),
            entity_type=entity_type,
            annotations=annotations,
            function_imports=function_imports,
        )


class SAPEntitySetBuilder(EntitySetBuilder):
    """SAP dialect: v2 associations, capability flags and labels."""

    def associations(self, schema: XmlNode) -> List[XmlNode]:
        return schema.children('Association')

    def _capability(self, node: XmlNode, attr: str) -> bool:
        default = SAP_CAPABILITY_DEFAULTS[attr]
        value = node.get_ns(self.sap_namespace, attr)
        if value is None:
            return default
        value = value.lower()
        if value not in ('true', 'false'):
            self.log.warn(f"EntitySet '{node.get('Name')}' has sap:{attr}='{value}', using default {default}.")
            return default
        return value == 'true'

    def capabilities(self, node: XmlNode) -> Dict[str, bool]:
        flags = {attr: self._capability(node, attr) for attr in SAP_CAPABILITY_DEFAULTS}
        # The model spells the flag "deleteable"
        flags['deleteable'] = flags.pop('deletable')
        return flags

    def build_entity_set(self, node: XmlNode, namespace: Optional[str], entity_type: EntityType,
                         annotations: List[str], function_imports: List[FunctionImport]) -> SAPEntitySet:
        return SAPEntitySet(
            namespace=namespace,
            name=node.get('Name'),
            entity_type=entity_type,
            annotations=annotations,
            function_imports=function_imports,
            label=node.get_ns(self.sap_namespace, 'label'),
            **self.capabilities(node),
        )
