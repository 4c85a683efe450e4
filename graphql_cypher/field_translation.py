# Copyright 2017-present Kensho Technologies, LLC.
"""Translation of a resolved GraphQL field into the pieces of a Cypher query fragment."""
from typing import List, NamedTuple, Optional

import funcy
from graphql import GraphQLResolveInfo
from graphql.language.ast import FieldNode, SelectionNode

from .arguments import cypher_directive_args, parse_args
from .ast_manipulation import (
    extract_selections,
    inner_type,
    is_graphql_scalar_type,
    type_identifiers,
)
from .filters import inner_filter_params
from .mutations import fix_params_for_add_relationship_mutation, is_add_relationship_mutation
from .pagination import compute_skip_limit
from .schema import RelationDirectiveInfo, SchemaIndex
from .typedefs import ParameterMap


class FieldTranslation(NamedTuple):
    """The Cypher fragment pieces derived from a single field resolution."""

    # Pattern variable and type name of the field's innermost return type, e.g. "movie", "Movie".
    variable_name: str
    type_name: str

    # True if the innermost return type is a scalar or enum, i.e. there is nothing to project.
    returns_scalar: bool

    # Sub-selections of the field, with top-level fragment spreads inlined.
    selections: List[SelectionNode]

    # Parsed field arguments; renamed for the relationship fragment on add-relationship mutations.
    params: ParameterMap

    # Argument map for the field's @cypher statement, e.g. {this: movie, first: 3}.
    cypher_args: str

    # List slice for "first" and "offset", e.g. [10..15], or "".
    skip_limit: str

    # Inline equality filter over the remaining arguments, e.g. {title:"Big"}, or "".
    filter_params: str

    # Statement of the field's @cypher directive, if any.
    cypher_statement: Optional[str]

    # Contents of the field's @relation directive, if any.
    relation: Optional[RelationDirectiveInfo]


def translate_field(info: GraphQLResolveInfo, schema_index: SchemaIndex) -> FieldTranslation:
    """Compute every Cypher fragment piece for the field currently being resolved.

    Args:
        info: resolve info of the field, as passed to the field's resolver by graphql-core
        schema_index: SchemaIndex built from the schema the request is executed against

    Returns:
        FieldTranslation for the field

    Raises:
        FragmentNotFoundError: if the field's selections spread an unknown fragment
        MutationMetadataError: if the field is an add-relationship mutation with unusable metadata
        InvalidPaginationArgumentError: if "first" or "offset" is not an integer
    """
    head_selection: FieldNode = funcy.first(info.field_nodes)
    variable_values = info.variable_values
    variable_name, type_name = type_identifiers(info.return_type)
    field_metadata = schema_index.get_field_metadata(info.parent_type.name, info.field_name)
    cypher_info = field_metadata.cypher_info if field_metadata is not None else None

    selections: List[SelectionNode] = []
    if head_selection.selection_set is not None:
        selections = extract_selections(head_selection.selection_set.selections, info.fragments)

    params = parse_args(head_selection.arguments, variable_values)
    if is_add_relationship_mutation(info, schema_index):
        params = fix_params_for_add_relationship_mutation(
            params, schema_index.get_mutation_field_metadata(info.field_name)
        )

    return FieldTranslation(
        variable_name=variable_name,
        type_name=type_name,
        returns_scalar=is_graphql_scalar_type(inner_type(info.return_type)),
        selections=selections,
        params=params,
        cypher_args=cypher_directive_args(
            variable_name, head_selection, field_metadata, variable_values
        ),
        skip_limit=compute_skip_limit(head_selection, variable_values),
        filter_params=inner_filter_params(info.field_nodes, variable_values),
        cypher_statement=cypher_info.statement if cypher_info is not None else None,
        relation=field_metadata.relation_info if field_metadata is not None else None,
    )
