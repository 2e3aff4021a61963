"""
OData metadata parser that turns an EDMX document into a Service model.
"""

from typing import List, Optional, Union

from lxml import etree

from .constants import CONTAINER_MISSING_MESSAGE, SAP_NAMESPACE
from .entity_sets import EntitySetBuilder, SAPEntitySetBuilder
from .entity_types import resolve_entity_type
from .exceptions import MetadataStructureError
from .models import EntityType, Service
from .operations import parse_actions, parse_function_imports, parse_functions, parse_sap_functions
from .schema_types import find_owning_schema, parse_annotations, parse_complex_types, parse_enum_types, parse_singletons
from .verbose_log import VerboseLog
from .xml_tree import XmlNode, build_tree


class MetadataParser:
    """Parses OData v2/v4 metadata, including the SAP v2 dialect."""

    def __init__(self, verbose: bool = False, sap_namespace: str = SAP_NAMESPACE):
        self.verbose = verbose
        self.sap_namespace = sap_namespace
        self.log = VerboseLog("Parser", verbose)

    @property
    def warnings(self) -> List[str]:
        """Soft omissions recorded during the last parse."""
        return self.log.warnings

    def _log_verbose(self, message: str):
        self.log.log(message)

    def is_sap_document(self, root: XmlNode) -> bool:
        """True when the root declares the SAP namespace URI, whatever its prefix."""
        return any(uri == self.sap_namespace for uri in root.namespaces.values())

    def entity_set_builder(self, is_sap: bool) -> EntitySetBuilder:
        if is_sap:
            self._log_verbose("SAP namespace declared, using SAP entity set builder.")
            return SAPEntitySetBuilder(self.sap_namespace, self.log)
        return EntitySetBuilder(self.sap_namespace, self.log)

    def _resolve_entity_type(self, node: XmlNode, raw_entity_types: List[XmlNode], schemas: List[XmlNode],
                             builder: EntitySetBuilder) -> EntityType:
        schema = find_owning_schema(node, schemas, 'EntityType')
        namespace = schema.get('Namespace') if schema is not None else None
        associations = builder.associations(schema) if schema is not None else []
        return resolve_entity_type(node, raw_entity_types, namespace, associations, self.sap_namespace, self.log)

    def parse(self, xml: Union[str, bytes]) -> Service:
        """
        Parse a metadata document into a Service.

        Args:
            xml: The EDMX document text

        Returns:
            The normalized service model

        Raises:
            MetadataStructureError: if no schema declares an EntityContainer
            lxml.etree.XMLSyntaxError: if the document is not well-formed
        """
        self.log.reset()
        try:
            root = build_tree(xml)
        except etree.XMLSyntaxError as parse_err:
            self.log.error(f"Error parsing XML metadata: {parse_err}")
            raise
        return self.parse_tree(root)

    def parse_tree(self, root: XmlNode) -> Service:
        """Build the Service from an already materialized element tree."""
        version = root.get('Version')
        is_sap = self.is_sap_document(root)
        builder = self.entity_set_builder(is_sap)

        data_services = root.first('DataServices')
        schemas = data_services.children('Schema') if data_services is not None else []
        container_schema = next((s for s in schemas if s.has('EntityContainer')), None)
        if container_schema is None:
            self.log.error(CONTAINER_MISSING_MESSAGE)
            raise MetadataStructureError(CONTAINER_MISSING_MESSAGE)

        container = container_schema.first('EntityContainer')
        default_namespace = container_schema.get('Namespace')
        self._log_verbose(f"Found EntityContainer '{container.get('Name')}' in schema '{default_namespace}'.")

        annotations = parse_annotations(container_schema.children('Annotations'))
        actions = parse_actions(container_schema.children('Action'))
        if is_sap:
            functions = parse_sap_functions(container_schema.children('Function'), self.sap_namespace)
        else:
            functions = parse_functions(container_schema.children('Function'))
        function_imports = parse_function_imports(container.children('FunctionImport'), self.sap_namespace)

        entity_sets = []
        raw_entity_types: List[XmlNode] = []
        raw_complex_types: List[XmlNode] = []
        raw_enum_types: List[XmlNode] = []
        for schema in schemas:
            if schema.has('EntityType'):
                raw_entity_types.extend(schema.children('EntityType'))
                entity_sets.extend(builder.build(schema, container, annotations, function_imports))
            raw_complex_types.extend(schema.children('ComplexType'))
            raw_enum_types.extend(schema.children('EnumType'))

        built = {es.name for es in entity_sets}
        for node in container.children('EntitySet'):
            if node.get('Name') not in built:
                self.log.warn(f"EntityType '{node.get('EntityType')}' for EntitySet '{node.get('Name')}' "
                              "not found, entity set skipped.")

        complex_types = parse_complex_types(raw_complex_types, schemas, self.sap_namespace)
        enum_types = parse_enum_types(raw_enum_types, schemas)
        singletons = parse_singletons(container.children('Singleton'), entity_sets, self.log)
        # In SAP documents the global list resolves v2 navigation through the owning schema's associations too
        entity_types = [self._resolve_entity_type(node, raw_entity_types, schemas, builder)
                        for node in raw_entity_types if node.get('Name')]

        self._log_verbose(f"Parsing complete. Found {len(entity_types)} types, {len(entity_sets)} sets, "
                          f"{len(actions)} actions, {len(functions)} functions, {len(singletons)} singletons.")
        return Service(
            default_namespace=default_namespace,
            version=version,
            entity_sets=entity_sets,
            entity_types=entity_types,
            complex_types=complex_types,
            enum_types=enum_types,
            actions=actions,
            functions=functions,
            singletons=singletons,
        )


async def parse(xml: Union[str, bytes], *, verbose: bool = False,
                sap_namespace: Optional[str] = None) -> Service:
    """
    Awaitable entry point so callers can chain it after fetching the document.

    The work itself is a single synchronous pass and never yields.
    """
    parser = MetadataParser(verbose=verbose, sap_namespace=sap_namespace or SAP_NAMESPACE)
    return parser.parse(xml)
