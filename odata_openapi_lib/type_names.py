"""
Helpers for OData type names: namespace stripping, Collection() unwrapping
and EDM to Swagger primitive mapping.
"""

import re
from typing import Optional

from .constants import DEFAULT_SWAGGER_TYPE, DEFINITIONS_REF_PREFIX, EDM_TO_SWAGGER_TYPES, SwaggerType

_COLLECTION_RE = re.compile(r'^Collection\((.*)\)$')


def type_name_from_type(type_name: Optional[str]) -> Optional[str]:
    """'Namespace.Sub.Type' -> 'Type'. None stays None."""
    return type_name.split('.')[-1] if type_name else None


def collection_item_type(type_name: str) -> Optional[str]:
    """Returns X for 'Collection(X)', or None when the name is not a collection."""
    match = _COLLECTION_RE.match(type_name or '')
    return match.group(1) if match else None


def is_primitive(type_name: Optional[str]) -> bool:
    return bool(type_name) and type_name.startswith('Edm.')


def definition_ref(type_name: str) -> str:
    return f"{DEFINITIONS_REF_PREFIX}{type_name}"


def edm_to_swagger_type(edm_type: Optional[str]) -> SwaggerType:
    return EDM_TO_SWAGGER_TYPES.get(edm_type, DEFAULT_SWAGGER_TYPE)
