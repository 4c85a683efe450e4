# Copyright 2017-present Kensho Technologies, LLC.
from typing import Any, Protocol, Sequence

from graphql import GraphQLType

from .ast_manipulation import is_array_type, type_identifiers


class QueryResultRecord(Protocol):
    """A single result row returned by the Cypher executor, e.g. a neo4j.Record."""

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value bound to the given key in the row."""
        ...


def extract_query_result(records: Sequence[QueryResultRecord], return_type: GraphQLType) -> Any:
    """Return the resolved field value from the rows of a Cypher query result.

    Each row binds the result under the pattern variable name of the return type.
    For list return types, the value of every row is returned as a list. Otherwise,
    the value of the first row is returned, or None if there are no rows.
    """
    variable_name = type_identifiers(return_type).variable_name

    if is_array_type(return_type):
        return [record.get(variable_name) for record in records]
    elif records:
        return records[0].get(variable_name)
    else:
        return None
