# Copyright 2017-present Kensho Technologies, LLC.
"""Common representations of scalar values in Cypher literals."""
import decimal
import json
import math
import re

from ..exceptions import CypherLiteralError


# Map keys matching this pattern may be written without quoting.
UNQUOTED_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def represent_float_as_str(value: float) -> str:
    """Represent a float as a Cypher decimal literal without losing precision."""
    if not isinstance(value, float):
        raise CypherLiteralError("Attempting to represent a non-float as a float: {}".format(value))
    if not math.isfinite(value):
        raise CypherLiteralError("Cypher has no literal for non-finite float {}".format(value))

    # repr() is the shortest string that round-trips, but it may use exponent notation
    # with an explicit "+" sign, which Cypher does not accept.
    float_literal = "{:f}".format(decimal.Decimal(repr(value)))

    # Cypher reads a numeric literal without a decimal point as an Integer.
    if "." not in float_literal:
        float_literal += ".0"
    return float_literal


def represent_string(value: str) -> str:
    """Represent a string as a double-quoted Cypher literal."""
    # Using JSON encoding means that all unicode literals and special chars
    # (e.g. newlines and backslashes) are replaced by appropriate escape sequences.
    return json.dumps(value)


def represent_map_key(key: str) -> str:
    """Represent a map key, backtick-quoting it only if it is not a plain identifier."""
    if not isinstance(key, str):
        raise CypherLiteralError("Cypher map keys must be strings, got: {}".format(key))
    if UNQUOTED_KEY_PATTERN.match(key):
        return key
    return "`" + key.replace("`", "``") + "`"
