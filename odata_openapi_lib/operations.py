"""
Action, Function and FunctionImport parsing.
"""

from typing import List, Optional

from .constants import METADATA_NAMESPACE, SAP_NAMESPACE
from .models import Action, ActionAndFunctionParameter, Function, FunctionImport, Parameter, ReturnType, SAPFunction
from .type_names import edm_to_swagger_type
from .xml_tree import XmlNode, parse_optional_bool


def _nullable(node: XmlNode) -> bool:
    # Only an explicit "false" makes a value non-nullable
    return node.get('Nullable') != 'false'


def parse_return_type(node: XmlNode) -> Optional[ReturnType]:
    return_type = node.first('ReturnType')
    if return_type is None:
        return None
    return ReturnType(type=return_type.get('Type'), nullable=_nullable(return_type))


def parse_action_and_function_parameters(node: XmlNode) -> List[ActionAndFunctionParameter]:
    return [
        ActionAndFunctionParameter(name=p.get('Name'), type=p.get('Type'), nullable=_nullable(p))
        for p in node.children('Parameter')
        if p.get('Name')
    ]


def parse_actions(nodes: List[XmlNode]) -> List[Action]:
    return [
        Action(
            name=action.get('Name'),
            is_bound=parse_optional_bool(action.get('IsBound')),
            entity_set_path=action.get('EntitySetPath'),
            return_type=parse_return_type(action),
            parameters=parse_action_and_function_parameters(action),
        )
        for action in nodes
        if action.get('Name')
    ]


def _function_fields(func: XmlNode) -> dict:
    return dict(
        name=func.get('Name'),
        is_bound=parse_optional_bool(func.get('IsBound')),
        is_composable=parse_optional_bool(func.get('IsComposable')),
        entity_set_path=func.get('EntitySetPath'),
        return_type=parse_return_type(func),
        parameters=parse_action_and_function_parameters(func),
    )


def parse_functions(nodes: List[XmlNode]) -> List[Function]:
    return [Function(**_function_fields(func)) for func in nodes if func.get('Name')]


def parse_sap_functions(nodes: List[XmlNode], sap_namespace: str = SAP_NAMESPACE) -> List[SAPFunction]:
    """Functions carrying the SAP label and action-for annotations."""
    return [
        SAPFunction(
            **_function_fields(func),
            label=func.get_ns(sap_namespace, 'label'),
            action_for=func.get_ns(sap_namespace, 'action-for'),
        )
        for func in nodes
        if func.get('Name')
    ]


def parse_parameters(node: XmlNode) -> List[Parameter]:
    """Function import parameters: query-string values with a Swagger primitive type."""
    return [
        Parameter(name=p.get('Name'), type=edm_to_swagger_type(p.get('Type')).name)
        for p in node.children('Parameter')
        if p.get('Name')
    ]


def parse_function_imports(nodes: List[XmlNode], sap_namespace: str = SAP_NAMESPACE) -> List[FunctionImport]:
    return [
        FunctionImport(
            name=fi.get('Name'),
            label=fi.get_ns(sap_namespace, 'label'),
            http_method=fi.get_ns(METADATA_NAMESPACE, 'HttpMethod'),
            entity_set=fi.get('EntitySet'),
            return_type=fi.get('ReturnType'),
            parameters=parse_parameters(fi),
        )
        for fi in nodes
        if fi.get('Name')
    ]
