# Copyright 2017-present Kensho Technologies, LLC.
"""Helper functions for reading developer-declared directives on schema fields."""
from typing import Any, Callable, Dict, Optional, Sequence

from .schema import CYPHER_DIRECTIVE_NAME, RELATION_DIRECTIVE_NAME, FieldMetadata
from .typedefs import DirectiveArguments


def get_field_directive(
    field_metadata: Optional[FieldMetadata], directive_name: str
) -> Optional[DirectiveArguments]:
    """Return the arguments of the named directive on the field, or None if it is not applied."""
    if field_metadata is None:
        return None
    return field_metadata.directives.get(directive_name)


def directive_with_args(
    directive_name: str, argument_names: Sequence[str]
) -> Callable[[Optional[FieldMetadata]], Dict[str, Any]]:
    """Return a function extracting the given arguments of the named directive from a field.

    The returned function produces a dict with an entry for each of the requested argument names
    that is present on the directive. If the field does not carry the directive, the dict is empty;
    no distinction is made between a missing directive and a directive missing some arguments.

    Args:
        directive_name: name of the directive, without the "@"
        argument_names: names of the directive arguments to extract

    Returns:
        function taking the FieldMetadata of a field (or None) and returning
        a dict of argument name -> literal value
    """
    wanted_argument_names = tuple(argument_names)

    def extract_directive_arguments(field_metadata: Optional[FieldMetadata]) -> Dict[str, Any]:
        directive_arguments = get_field_directive(field_metadata, directive_name)
        if directive_arguments is None:
            return {}
        return {
            argument_name: directive_arguments[argument_name]
            for argument_name in wanted_argument_names
            if argument_name in directive_arguments
        }

    return extract_directive_arguments


cypher_directive = directive_with_args(CYPHER_DIRECTIVE_NAME, ["statement"])
relation_directive = directive_with_args(RELATION_DIRECTIVE_NAME, ["name", "direction"])
