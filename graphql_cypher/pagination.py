# Copyright 2017-present Kensho Technologies, LLC.
from typing import Any, Optional

from graphql.language.ast import FieldNode

from .arguments import get_argument_value
from .exceptions import InvalidPaginationArgumentError
from .typedefs import VariableValues


FIRST_ARGUMENT_NAME = "first"
OFFSET_ARGUMENT_NAME = "offset"
PAGINATION_ARGUMENT_NAMES = frozenset({FIRST_ARGUMENT_NAME, OFFSET_ARGUMENT_NAME})


def _get_slice_bound(
    selection: FieldNode, name: str, variable_values: VariableValues
) -> Optional[int]:
    """Return the named pagination argument as an int, or None if it is not supplied."""
    value: Any = get_argument_value(selection.arguments, name, variable_values)
    if value is None:
        return None

    # Booleans and fractional floats are not valid bounds, even though int() accepts them.
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidPaginationArgumentError(
            'Pagination argument "{}" must be an integer, got: {}'.format(name, value)
        )
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidPaginationArgumentError(
            'Pagination argument "{}" must be an integer, got: {}'.format(name, value)
        ) from e


def compute_skip_limit(selection: FieldNode, variable_values: VariableValues) -> str:
    """Return the Cypher list slice implementing the "first" and "offset" arguments.

    | first  | offset | result           |
    |--------|--------|------------------|
    | absent | absent | ""               |
    | absent | N      | [N..]            |
    | M      | absent | [..M]            |
    | M      | N      | [N..N+M]         |

    Args:
        selection: the field whose arguments are inspected
        variable_values: variable values of the current request

    Returns:
        the slice expression, or the empty string if no slicing is required

    Raises:
        InvalidPaginationArgumentError: if a supplied bound is not an integer
    """
    first = _get_slice_bound(selection, FIRST_ARGUMENT_NAME, variable_values)
    offset = _get_slice_bound(selection, OFFSET_ARGUMENT_NAME, variable_values)

    if first is None and offset is None:
        return ""
    if offset is None:
        return "[..{}]".format(first)
    if first is None:
        return "[{}..]".format(offset)
    return "[{}..{}]".format(offset, offset + first)
