# Copyright 2017-present Kensho Technologies, LLC.
"""Schema directives that carry Cypher mapping hints, and their typed representations."""
from typing import AbstractSet, Dict, FrozenSet, NamedTuple, Optional

from graphql import DirectiveLocation, GraphQLArgument, GraphQLDirective, GraphQLString

from ..exceptions import MissingMutationMetadataError, MutationMetadataErrorKind
from ..typedefs import DirectiveArguments


CYPHER_DIRECTIVE_NAME = "cypher"
RELATION_DIRECTIVE_NAME = "relation"
MUTATION_META_DIRECTIVE_NAME = "MutationMeta"


# Constraints:
# - 'statement' is a Cypher fragment evaluated with the current node bound to "this";
# - only the first @cypher on a field definition is considered.
CypherDirective = GraphQLDirective(
    name=CYPHER_DIRECTIVE_NAME,
    args={
        "statement": GraphQLArgument(
            type_=GraphQLString,
            description="Cypher statement used to compute the value of the field.",
        ),
    },
    locations=[
        DirectiveLocation.FIELD_DEFINITION,
    ],
)


# Constraints:
# - 'name' is the relationship type in the graph, e.g. "ACTED_IN";
# - 'direction' is the traversal direction of the relationship, e.g. "OUT" or "IN".
RelationDirective = GraphQLDirective(
    name=RELATION_DIRECTIVE_NAME,
    args={
        "name": GraphQLArgument(
            type_=GraphQLString,
            description="Name of the relationship type in the graph.",
        ),
        "direction": GraphQLArgument(
            type_=GraphQLString,
            description="Direction in which the relationship is traversed.",
        ),
    },
    locations=[
        DirectiveLocation.FIELD_DEFINITION,
    ],
)


# Constraints:
# - may only be applied to mutation fields whose name starts with "add" or "Add";
# - 'from' and 'to' are the names of the types at each end of the relationship;
# - the mutation field declares exactly two arguments: the "from" end first, the "to" end second;
# - 'fromParam' and 'toParam' optionally name the parameter key each end is remapped to. When
#   omitted, the key is the argument name with the lowercased type name prefix stripped.
# 'from' and 'to' are nullable. Missing metadata is reported when the mutation is translated.
MutationMetaDirective = GraphQLDirective(
    name=MUTATION_META_DIRECTIVE_NAME,
    args={
        "relationship": GraphQLArgument(
            type_=GraphQLString,
            description="Name of the relationship type created by the mutation.",
        ),
        "from": GraphQLArgument(
            type_=GraphQLString,
            description="Name of the type at the start of the relationship.",
        ),
        "to": GraphQLArgument(
            type_=GraphQLString,
            description="Name of the type at the end of the relationship.",
        ),
        "fromParam": GraphQLArgument(
            type_=GraphQLString,
            description="Parameter key under which the start-of-relationship argument is passed.",
        ),
        "toParam": GraphQLArgument(
            type_=GraphQLString,
            description="Parameter key under which the end-of-relationship argument is passed.",
        ),
    },
    locations=[
        DirectiveLocation.FIELD_DEFINITION,
    ],
)


DIRECTIVES = (
    CypherDirective,
    RelationDirective,
    MutationMetaDirective,
)


# SDL declarations of the directives above, for schemas that are built from SDL text.
DIRECTIVES_SDL = """
directive @cypher(statement: String) on FIELD_DEFINITION

directive @relation(name: String, direction: String) on FIELD_DEFINITION

directive @MutationMeta(
    relationship: String
    from: String
    to: String
    fromParam: String
    toParam: String
) on FIELD_DEFINITION
"""


class DirectiveSchema(NamedTuple):
    """The arguments a supported schema directive must and may carry."""

    name: str
    required_arguments: FrozenSet[str]
    optional_arguments: FrozenSet[str]

    def get_missing_arguments(self, directive_arguments: DirectiveArguments) -> AbstractSet[str]:
        """Return the required argument names that are absent from the given directive."""
        return self.required_arguments - set(directive_arguments)

    def get_unknown_arguments(self, directive_arguments: DirectiveArguments) -> AbstractSet[str]:
        """Return the argument names of the given directive that it does not support."""
        return set(directive_arguments) - self.required_arguments - self.optional_arguments


SUPPORTED_DIRECTIVE_SCHEMAS: Dict[str, DirectiveSchema] = {
    CYPHER_DIRECTIVE_NAME: DirectiveSchema(
        name=CYPHER_DIRECTIVE_NAME,
        required_arguments=frozenset({"statement"}),
        optional_arguments=frozenset(),
    ),
    RELATION_DIRECTIVE_NAME: DirectiveSchema(
        name=RELATION_DIRECTIVE_NAME,
        required_arguments=frozenset({"name"}),
        optional_arguments=frozenset({"direction"}),
    ),
    MUTATION_META_DIRECTIVE_NAME: DirectiveSchema(
        name=MUTATION_META_DIRECTIVE_NAME,
        required_arguments=frozenset({"from", "to"}),
        optional_arguments=frozenset({"relationship", "fromParam", "toParam"}),
    ),
}

if set(SUPPORTED_DIRECTIVE_SCHEMAS) != {directive.name for directive in DIRECTIVES}:
    raise AssertionError(
        "Every supported directive must have both a GraphQLDirective definition and a "
        "DirectiveSchema: {} {}".format(set(SUPPORTED_DIRECTIVE_SCHEMAS), DIRECTIVES)
    )


class CypherDirectiveInfo(NamedTuple):
    """Typed contents of a @cypher directive."""

    statement: str


class RelationDirectiveInfo(NamedTuple):
    """Typed contents of a @relation directive."""

    name: str
    direction: Optional[str]


class MutationMetaInfo(NamedTuple):
    """Typed contents of a @MutationMeta directive."""

    relationship: Optional[str]
    from_type: str
    to_type: str
    from_param: Optional[str]  # Explicit parameter key for the "from" end, if any.
    to_param: Optional[str]  # Explicit parameter key for the "to" end, if any.


def parse_cypher_directive(
    directive_arguments: Optional[DirectiveArguments],
) -> Optional[CypherDirectiveInfo]:
    """Return the @cypher directive contents, or None if absent or lacking a statement."""
    if directive_arguments is None or directive_arguments.get("statement") is None:
        return None
    return CypherDirectiveInfo(statement=directive_arguments["statement"])


def parse_relation_directive(
    directive_arguments: Optional[DirectiveArguments],
) -> Optional[RelationDirectiveInfo]:
    """Return the @relation directive contents, or None if absent or lacking a name."""
    if directive_arguments is None or directive_arguments.get("name") is None:
        return None
    return RelationDirectiveInfo(
        name=directive_arguments["name"], direction=directive_arguments.get("direction")
    )


def _get_missing_mutation_meta_arguments(
    directive_arguments: DirectiveArguments,
) -> FrozenSet[str]:
    """Return the required @MutationMeta argument names that are absent or null."""
    directive_schema = SUPPORTED_DIRECTIVE_SCHEMAS[MUTATION_META_DIRECTIVE_NAME]
    return frozenset(
        argument_name
        for argument_name in directive_schema.required_arguments
        if directive_arguments.get(argument_name) is None
    )


def get_mutation_meta_info(
    directive_arguments: Optional[DirectiveArguments],
) -> Optional[MutationMetaInfo]:
    """Return the @MutationMeta directive contents, or None if absent or lacking "from" or "to"."""
    if directive_arguments is None or _get_missing_mutation_meta_arguments(directive_arguments):
        return None
    return MutationMetaInfo(
        relationship=directive_arguments.get("relationship"),
        from_type=directive_arguments["from"],
        to_type=directive_arguments["to"],
        from_param=directive_arguments.get("fromParam"),
        to_param=directive_arguments.get("toParam"),
    )


def parse_mutation_meta_directive(
    field_name: str, directive_arguments: Optional[DirectiveArguments]
) -> MutationMetaInfo:
    """Return the typed @MutationMeta contents of the given mutation field.

    Args:
        field_name: name of the mutation field, used in error messages
        directive_arguments: arguments of the field's @MutationMeta directive,
                             or None if the field has no such directive

    Returns:
        MutationMetaInfo describing both ends of the relationship

    Raises:
        MissingMutationMetadataError: if the directive is absent, or if it lacks
                                      its "from" or "to" argument
    """
    if directive_arguments is None:
        raise MissingMutationMetadataError(
            MutationMetadataErrorKind.MISSING_DIRECTIVE,
            "Missing required @{} directive on add relationship mutation {}.".format(
                MUTATION_META_DIRECTIVE_NAME, field_name
            ),
        )

    mutation_meta_info = get_mutation_meta_info(directive_arguments)
    if mutation_meta_info is None:
        raise MissingMutationMetadataError(
            MutationMetadataErrorKind.MISSING_DIRECTIVE_ARGUMENT,
            "Missing required argument(s) {} in @{} directive on mutation {}.".format(
                sorted(_get_missing_mutation_meta_arguments(directive_arguments)),
                MUTATION_META_DIRECTIVE_NAME,
                field_name,
            ),
        )
    return mutation_meta_info
