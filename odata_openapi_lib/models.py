"""
Data models for the normalized OData service representation.

Field names are snake_case; aliases give the camelCase shape consumed by the
Swagger renderer (``model_dump(by_alias=True, exclude_none=True)``).
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ODataModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class PropertyItems(ODataModel):
    """Item descriptor of an array property: inline primitive or a reference."""
    type: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")


class ReferentialConstraint(ODataModel):
    property: str
    ref_property: Optional[str] = None


class Relation(ODataModel):
    name: str
    partner: Optional[str] = None
    constraints: List[ReferentialConstraint] = []


class EntityProperty(ODataModel):
    name: str
    type: Optional[str] = None  # EDM type, "array", or None for a reference
    required: bool = False
    wrap_value_in_quotes_in_urls: bool = True
    items: Optional[PropertyItems] = None
    description: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    relation: Optional[Relation] = Field(None, alias="x-ref")

    @property
    def is_array(self) -> bool:
        return self.type == "array"

    @property
    def is_reference(self) -> bool:
        return self.ref is not None or (self.items is not None and self.items.ref is not None)


class EntityPath(ODataModel):
    """Contained navigation path used for deep links."""
    name: str
    type: Optional[str] = None


class EntityType(ODataModel):
    name: str
    namespace: Optional[str] = None
    abstract: Optional[bool] = None
    properties: List[EntityProperty] = []
    key: Optional[List[EntityProperty]] = None
    paths: List[EntityPath] = []

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name

    def get_property(self, name: str) -> Optional[EntityProperty]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


class ReturnType(ODataModel):
    type: Optional[str] = None
    nullable: bool = True


class ActionAndFunctionParameter(ODataModel):
    name: str
    type: Optional[str] = None
    nullable: bool = True


class Parameter(ODataModel):
    """Function import parameter, always passed in the query string."""
    name: str
    in_: str = Field("query", alias="in")
    type: str = "string"
    required: bool = True


class Action(ODataModel):
    name: str
    is_bound: Optional[bool] = None
    entity_set_path: Optional[str] = None
    return_type: Optional[ReturnType] = None
    parameters: List[ActionAndFunctionParameter] = []


class Function(Action):
    is_composable: Optional[bool] = None


class SAPFunction(Function):
    label: Optional[str] = None
    action_for: Optional[str] = None


class FunctionImport(ODataModel):
    name: str
    label: Optional[str] = None
    http_method: Optional[str] = None
    entity_set: Optional[str] = None
    return_type: Optional[str] = None
    parameters: List[Parameter] = []


class EntitySet(ODataModel):
    namespace: Optional[str] = None
    name: str
    entity_type: EntityType
    annotations: List[str] = []
    function_imports: List[FunctionImport] = []


class SAPEntitySet(EntitySet):
    creatable: bool = True
    updatable: bool = True
    deleteable: bool = True
    pageable: bool = True
    searchable: bool = False
    label: Optional[str] = None


class ComplexType(ODataModel):
    name: str
    namespace: Optional[str] = None
    properties: List[EntityProperty] = []


class EnumType(ODataModel):
    name: str
    namespace: Optional[str] = None
    member_names: List[str] = []


class Annotation(ODataModel):
    target: str
    terms: List[str] = []


class SingletonProperty(ODataModel):
    name: str
    type: str


class Singleton(ODataModel):
    name: str
    type: Optional[str] = None
    properties: List[SingletonProperty] = []


class Service(ODataModel):
    default_namespace: Optional[str] = None
    version: Optional[str] = None
    # Plain members first, so a dump without SAP fields rebuilds as the plain model
    entity_sets: List[Union[EntitySet, SAPEntitySet]] = []
    entity_types: List[EntityType] = []
    complex_types: List[ComplexType] = []
    enum_types: List[EnumType] = []
    actions: List[Action] = []
    functions: List[Union[Function, SAPFunction]] = []
    singletons: List[Singleton] = []

    @property
    def is_sap(self) -> bool:
        """True when any entity set is a SAPEntitySet. A SAP document without entity sets reads as plain."""
        return any(isinstance(es, SAPEntitySet) for es in self.entity_sets)

    def get_entity_set(self, name: str) -> Optional[EntitySet]:
        for entity_set in self.entity_sets:
            if entity_set.name == name:
                return entity_set
        return None

    def get_entity_type(self, name: str) -> Optional[EntityType]:
        """Looks up an entity type by bare or namespace-qualified name."""
        for entity_type in self.entity_types:
            if name in (entity_type.name, entity_type.qualified_name):
                return entity_type
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Renderer-facing dump with camelCase keys and unset optionals left out."""
        return self.model_dump(by_alias=True, exclude_none=True)
