# Copyright 2017-present Kensho Technologies, LLC.
from typing import Optional, Sequence

from graphql.language.ast import SelectionNode

from .arguments import parse_args
from .ast_manipulation import get_ast_field_name
from .pagination import PAGINATION_ARGUMENT_NAMES
from .query_formatting import represent_cypher_map
from .typedefs import VariableValues


def inner_filter_params(
    selections: Sequence[SelectionNode], variable_values: Optional[VariableValues] = None
) -> str:
    """Return the inline property filter for the head selection, e.g. {name:"Tom",born:1956}.

    Every argument of the first selection is an equality filter, except the pagination arguments
    "first" and "offset". List values are written as list literals: membership (IN) filters
    are not supported.

    Args:
        selections: flattened selections, whose first element is the field being resolved
        variable_values: optional variable values of the current request. Arguments passed as
                         variables that are not bound here are left out of the filter.

    Returns:
        the filter map literal, or the empty string if there is nothing to filter on
    """
    if not selections:
        return ""

    head_arguments = getattr(selections[0], "arguments", None) or ()
    filter_arguments = [
        argument
        for argument in head_arguments
        if get_ast_field_name(argument) not in PAGINATION_ARGUMENT_NAMES
    ]
    filters = parse_args(filter_arguments, variable_values or {})
    if not filters:
        return ""

    return represent_cypher_map(filters, item_separator=",", key_value_separator=":")
