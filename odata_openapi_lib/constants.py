"""
Constants used throughout the OData metadata to OpenAPI library.
"""

from typing import Dict, NamedTuple, Optional

# Namespaces for OData XML parsing
NAMESPACES = {
    'edmx': 'http://schemas.microsoft.com/ado/2007/06/edmx',
    'edmx4': 'http://docs.oasis-open.org/odata/ns/edmx',
    'edm': 'http://schemas.microsoft.com/ado/2008/09/edm',
    'edm4': 'http://docs.oasis-open.org/odata/ns/edm',
    'm': 'http://schemas.microsoft.com/ado/2007/08/dataservices/metadata',
    'sap': 'http://www.sap.com/Protocols/SAPData',
}

SAP_NAMESPACE = NAMESPACES['sap']
METADATA_NAMESPACE = NAMESPACES['m']

# Prefix used for every schema pointer handed to the renderer
DEFINITIONS_REF_PREFIX = '#/definitions/'

# Primitive types whose literals go into URL key predicates unquoted
UNQUOTED_URL_TYPES = frozenset([
    'Edm.Int16',
    'Edm.Int32',
    'Edm.Int64',
    'Edm.Double',
    'Edm.Single',
    'Edm.Decimal',
    'Edm.Guid',
])


class SwaggerType(NamedTuple):
    name: str
    format: Optional[str] = None


DEFAULT_SWAGGER_TYPE = SwaggerType('string')

# OData primitive type mappings to Swagger primitive types
EDM_TO_SWAGGER_TYPES: Dict[str, SwaggerType] = {
    'Edm.String': SwaggerType('string'),
    'Edm.Boolean': SwaggerType('boolean'),
    'Edm.Byte': SwaggerType('integer', 'uint8'),
    'Edm.SByte': SwaggerType('integer', 'int8'),
    'Edm.Int16': SwaggerType('integer', 'int32'),
    'Edm.Int32': SwaggerType('integer', 'int32'),
    'Edm.Int64': SwaggerType('integer', 'int64'),
    'Edm.Single': SwaggerType('number', 'float'),
    'Edm.Double': SwaggerType('number', 'double'),
    'Edm.Decimal': SwaggerType('number', 'double'),
    'Edm.Guid': SwaggerType('string', 'uuid'),
    'Edm.Binary': SwaggerType('string', 'binary'),
    'Edm.Date': SwaggerType('string', 'date'),
    'Edm.DateTime': SwaggerType('string', 'date-time'),
    'Edm.DateTimeOffset': SwaggerType('string', 'date-time'),
    'Edm.Time': SwaggerType('string'),
    'Edm.TimeOfDay': SwaggerType('string'),
    'Edm.Duration': SwaggerType('string'),
}

# SAP entity set capability attributes and their defaults when absent
SAP_CAPABILITY_DEFAULTS = {
    'creatable': True,
    'updatable': True,
    'deletable': True,
    'pageable': True,
    'searchable': False,
}

CONTAINER_MISSING_MESSAGE = "Cannot find EntityContainer element."
