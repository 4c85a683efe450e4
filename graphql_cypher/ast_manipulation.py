# Copyright 2017-present Kensho Technologies, LLC.
from typing import Any, List, NamedTuple, Sequence

from graphql import GraphQLEnumType, GraphQLList, GraphQLNonNull, GraphQLScalarType, GraphQLType
from graphql.language.ast import FragmentSpreadNode, SelectionNode

from .exceptions import FragmentNotFoundError
from .typedefs import FragmentTable


class TypeIdentifiers(NamedTuple):
    """Names under which a GraphQL return type appears in the generated Cypher."""

    variable_name: str  # The pattern variable bound to nodes of the type, e.g. "movie".
    type_name: str  # The name of the innermost named type, e.g. "Movie".


def get_ast_field_name(ast):
    """Return the field name for the given AST node."""
    return ast.name.value


def low_first_letter(word: str) -> str:
    """Return the word with its first character lowercased, e.g. "MovieGenre" -> "movieGenre"."""
    return word[:1].lower() + word[1:]


def inner_type(graphql_type: Any) -> Any:
    """Strip all GraphQLList and GraphQLNonNull layers around the type, return the named type."""
    of_type = getattr(graphql_type, "of_type", None)
    if of_type is None:
        return graphql_type
    return inner_type(of_type)


def type_identifiers(return_type: GraphQLType) -> TypeIdentifiers:
    """Return the type name and Cypher pattern variable name of the given return type.

    For example, the return type [Movie!]! produces the type name "Movie"
    and the variable name "movie".
    """
    type_name = str(inner_type(return_type))
    return TypeIdentifiers(variable_name=low_first_letter(type_name), type_name=type_name)


def is_graphql_scalar_type(graphql_type: GraphQLType) -> bool:
    """Return True if the type is a scalar or enum type, i.e. it has no selectable fields."""
    return isinstance(graphql_type, (GraphQLScalarType, GraphQLEnumType))


def is_array_type(graphql_type: GraphQLType) -> bool:
    """Return True if the type is a list type, possibly wrapped in a GraphQLNonNull."""
    if isinstance(graphql_type, GraphQLNonNull):
        graphql_type = graphql_type.of_type
    return isinstance(graphql_type, GraphQLList)


def extract_selections(
    selections: Sequence[SelectionNode], fragments: FragmentTable
) -> List[SelectionNode]:
    """Replace every fragment spread in the selections with the selections of that fragment.

    Only one level of fragment spreads is expanded: spreads inside the inlined fragments are
    kept as they are. The relative order of all selections is preserved.

    Args:
        selections: selections of a single selection set, in query order
        fragments: fragment name -> FragmentDefinitionNode, for all fragments in the document

    Returns:
        new list of selections, containing no spreads from the top level of the input

    Raises:
        FragmentNotFoundError: if a spread refers to a fragment not present in fragments
    """
    result: List[SelectionNode] = []
    for selection in selections:
        if not isinstance(selection, FragmentSpreadNode):
            result.append(selection)
            continue

        fragment_name = get_ast_field_name(selection)
        fragment = fragments.get(fragment_name)
        if fragment is None:
            raise FragmentNotFoundError(
                "Fragment spread refers to an unknown fragment {}. Known fragments: {}".format(
                    fragment_name, sorted(fragments)
                )
            )
        result.extend(fragment.selection_set.selections)

    return result
