# Copyright 2017-present Kensho Technologies, LLC.
"""Conversion of GraphQL field arguments into Cypher parameters and map literals."""
import logging
from typing import Any, Optional

from graphql.language.ast import (
    BooleanValueNode,
    EnumValueNode,
    FieldNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
    VariableNode,
)
from graphql.pyutils import Undefined
from graphql.utilities import value_from_ast_untyped

from .ast_manipulation import get_ast_field_name
from .query_formatting import represent_cypher_map
from .schema import FieldMetadata
from .typedefs import ArgumentNodes, ParameterMap, VariableValues


logger = logging.getLogger(__name__)

# Key under which the current node's pattern variable is passed to @cypher statements.
THIS_VARIABLE_KEY = "this"


def _drop_undefined(value: Any) -> Any:
    """Replace unbound nested variables in a converted list or object value."""
    if isinstance(value, list):
        return [None if item is Undefined else _drop_undefined(item) for item in value]
    elif isinstance(value, dict):
        return {
            key: _drop_undefined(item) for key, item in value.items() if item is not Undefined
        }
    return value


def convert_value_node(
    argument_name: str, value_node: ValueNode, variable_values: VariableValues
) -> Any:
    """Return the Python value of a single argument, or Undefined if its variable is unbound.

    Variables are looked up by the name of the argument they are passed to, not by
    the name the variable is declared with. Variables nested inside list and object
    values are looked up by their own name.
    """
    if isinstance(value_node, IntValueNode):
        return int(value_node.value)
    elif isinstance(value_node, FloatValueNode):
        return float(value_node.value)
    elif isinstance(value_node, VariableNode):
        return variable_values.get(argument_name, Undefined)
    elif isinstance(value_node, (StringValueNode, BooleanValueNode, EnumValueNode)):
        return value_node.value
    elif isinstance(value_node, NullValueNode):
        return None
    elif isinstance(value_node, (ListValueNode, ObjectValueNode)):
        return _drop_undefined(value_from_ast_untyped(value_node, variable_values))
    else:
        raise AssertionError(
            "Unreachable code reached: unexpected value node {} for argument {}".format(
                value_node, argument_name
            )
        )


def parse_args(
    arguments: Optional[ArgumentNodes], variable_values: VariableValues
) -> ParameterMap:
    """Convert the arguments of a selection into a parameter name -> value mapping.

    Arguments passed as variables that are not bound in variable_values are left out of the
    result, so that callers see them as "no value supplied" rather than as null.

    Args:
        arguments: ArgumentNode objects of a single selection, or None
        variable_values: variable values of the current request

    Returns:
        dict mapping argument name to its Python value
    """
    params: ParameterMap = {}
    for argument in arguments or ():
        argument_name = get_ast_field_name(argument)
        value = convert_value_node(argument_name, argument.value, variable_values)
        if value is Undefined:
            logger.debug(
                "Argument %s refers to a variable with no bound value, leaving it out.",
                argument_name,
            )
            continue
        params[argument_name] = value

    return params


def get_argument_value(
    arguments: Optional[ArgumentNodes], name: str, variable_values: VariableValues
) -> Any:
    """Return the value of the first argument with the given name, or None if there is none.

    An argument passed as an unbound variable is treated as absent.
    """
    for argument in arguments or ():
        if get_ast_field_name(argument) == name:
            value = convert_value_node(name, argument.value, variable_values)
            return None if value is Undefined else value
    return None


def cypher_directive_args(
    variable: str,
    head_selection: FieldNode,
    field_metadata: Optional[FieldMetadata],
    variable_values: VariableValues,
) -> str:
    """Return the Cypher map literal of the arguments passed to a @cypher statement.

    Arguments given in the query override the defaults declared in the schema.
    The current node is bound to the "this" key.

    Args:
        variable: Cypher pattern variable of the current node, e.g. "movie"
        head_selection: the field being resolved
        field_metadata: schema metadata of the field, or None if it is unavailable,
                        in which case no defaults are applied
        variable_values: variable values of the current request

    Returns:
        string such as {this: movie, first: 3}
    """
    merged_arguments: ParameterMap = {}
    if field_metadata is not None:
        merged_arguments.update(field_metadata.default_arguments)
    merged_arguments.update(parse_args(head_selection.arguments, variable_values))

    prefix = "{" + THIS_VARIABLE_KEY + ": " + variable
    if not merged_arguments:
        return prefix + "}"
    return prefix + ", " + represent_cypher_map(merged_arguments)[1:]
