"""
OData metadata to OpenAPI library - normalizes EDMX/CSDL documents into a
version-independent service model for Swagger/OpenAPI generation.
"""

from .exceptions import MetadataStructureError
from .models import (
    Action,
    ActionAndFunctionParameter,
    Annotation,
    ComplexType,
    EntityPath,
    EntityProperty,
    EntitySet,
    EntityType,
    EnumType,
    Function,
    FunctionImport,
    Parameter,
    PropertyItems,
    ReferentialConstraint,
    Relation,
    ReturnType,
    SAPEntitySet,
    SAPFunction,
    Service,
    Singleton,
    SingletonProperty,
)
from .entity_sets import EntitySetBuilder, SAPEntitySetBuilder
from .metadata_parser import MetadataParser, parse
from .xml_tree import XmlNode, build_tree

__all__ = [
    'Action',
    'ActionAndFunctionParameter',
    'Annotation',
    'ComplexType',
    'EntityPath',
    'EntityProperty',
    'EntitySet',
    'EntitySetBuilder',
    'EntityType',
    'EnumType',
    'Function',
    'FunctionImport',
    'MetadataParser',
    'MetadataStructureError',
    'Parameter',
    'PropertyItems',
    'ReferentialConstraint',
    'Relation',
    'ReturnType',
    'SAPEntitySet',
    'SAPEntitySetBuilder',
    'SAPFunction',
    'Service',
    'Singleton',
    'SingletonProperty',
    'XmlNode',
    'build_tree',
    'parse',
]
