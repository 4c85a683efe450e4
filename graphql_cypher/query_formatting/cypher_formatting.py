# Copyright 2017-present Kensho Technologies, LLC.
import datetime
import decimal
from typing import Any, Mapping

from ..exceptions import CypherLiteralError
from .representations import represent_float_as_str, represent_map_key, represent_string


def _represent_cypher_list(value: Any, item_separator: str, key_value_separator: str) -> str:
    """Represent a list or tuple of values as a Cypher list literal."""
    components = (
        _represent_cypher_value(item, item_separator, key_value_separator) for item in value
    )
    return "[" + item_separator.join(components) + "]"


def _represent_cypher_value(value: Any, item_separator: str, key_value_separator: str) -> str:
    """Return a Cypher literal representing the given Python value."""
    if value is None:
        return "null"
    # Special case: in Python, isinstance(True, int) returns True,
    # so booleans must be checked before ints.
    elif isinstance(value, bool):
        return "true" if value else "false"
    elif isinstance(value, int):
        return str(value)
    elif isinstance(value, float):
        return represent_float_as_str(value)
    elif isinstance(value, str):
        return represent_string(value)
    elif isinstance(value, decimal.Decimal):
        raise CypherLiteralError(
            "Cypher doesn't support Decimals, only ints and floats. Value was {}".format(value)
        )
    elif isinstance(value, (datetime.date, datetime.datetime)):
        raise CypherLiteralError(
            "Temporal values cannot be written as Cypher literals; pass them as query "
            "parameters instead. Value was {}".format(value)
        )
    elif isinstance(value, (list, tuple)):
        return _represent_cypher_list(value, item_separator, key_value_separator)
    elif isinstance(value, Mapping):
        return represent_cypher_map(
            value, item_separator=item_separator, key_value_separator=key_value_separator
        )
    else:
        raise CypherLiteralError(
            "Could not represent value of type {} as a Cypher literal: {}".format(
                type(value).__name__, value
            )
        )


######
# Public API
######


def represent_cypher_value(value: Any) -> str:
    """Return a Cypher literal for the given value, e.g. 5, 1.5, "abc", true, null or [1, 2]."""
    return _represent_cypher_value(value, ", ", ": ")


def represent_cypher_map(
    mapping: Mapping[str, Any], item_separator: str = ", ", key_value_separator: str = ": "
) -> str:
    """Represent the mapping as a Cypher map literal with unquoted keys.

    Entries are written in the mapping's iteration order.

    Args:
        mapping: str -> value mapping to represent
        item_separator: string placed between consecutive entries
        key_value_separator: string placed between each key and its value

    Returns:
        string such as {name: "Tom", born: 1956}
    """
    entries = (
        represent_map_key(key)
        + key_value_separator
        + _represent_cypher_value(value, item_separator, key_value_separator)
        for key, value in mapping.items()
    )
    return "{" + item_separator.join(entries) + "}"
