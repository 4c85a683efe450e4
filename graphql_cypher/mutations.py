# Copyright 2017-present Kensho Technologies, LLC.
"""Helpers for mutations that create a relationship between two existing nodes."""
from dataclasses import dataclass
import logging
from typing import Optional

from graphql import GraphQLResolveInfo, OperationType

from .ast_manipulation import low_first_letter
from .directive_helpers import get_field_directive
from .exceptions import (
    AmbiguousRelationshipParamsError,
    MissingMutationMetadataError,
    MutationMetadataError,
    MutationMetadataErrorKind,
)
from .schema import (
    MUTATION_META_DIRECTIVE_NAME,
    FieldMetadata,
    SchemaIndex,
    parse_mutation_meta_directive,
)
from .typedefs import ParameterMap


logger = logging.getLogger(__name__)

# Name prefixes of mutation fields that add a relationship.
ADD_MUTATION_PREFIXES = ("add", "Add")


@dataclass(frozen=True)
class RelationshipParamRemap:
    """Outcome of remapping the parameters of an add-relationship mutation.

    Exactly one of "params" and "error" is set.
    """

    params: Optional[ParameterMap] = None
    error: Optional[MutationMetadataError] = None

    def __post_init__(self) -> None:
        """Validate fields."""
        if (self.params is None) == (self.error is None):
            raise AssertionError(
                "Expected exactly one of params and error to be set, got: {} {}".format(
                    self.params, self.error
                )
            )

    def unwrap(self) -> ParameterMap:
        """Return the remapped parameters, raising the metadata error if there is one."""
        if self.error is not None:
            raise self.error
        if self.params is None:
            raise AssertionError("Unreachable code reached: {}".format(self))
        return self.params


def is_mutation(info: GraphQLResolveInfo) -> bool:
    """Return True if the field is being resolved as part of a mutation operation."""
    return info.operation.operation == OperationType.MUTATION


def is_add_relationship_mutation(info: GraphQLResolveInfo, schema_index: SchemaIndex) -> bool:
    """Return True if the field is a mutation adding a relationship, as marked by @MutationMeta."""
    if not is_mutation(info) or not info.field_name.startswith(ADD_MUTATION_PREFIXES):
        return False

    field_metadata = schema_index.get_mutation_field_metadata(info.field_name)
    return get_field_directive(field_metadata, MUTATION_META_DIRECTIVE_NAME) is not None


def _strip_role_prefix(field_name: str, argument_name: str, role_variable_name: str) -> str:
    """Return the argument name without its role variable prefix, e.g. movieTitle -> Title."""
    parameter_key = argument_name[len(role_variable_name) :]
    if not argument_name.startswith(role_variable_name) or not parameter_key:
        raise AmbiguousRelationshipParamsError(
            MutationMetadataErrorKind.UNDERIVABLE_PARAMETER_KEY,
            'Cannot derive a parameter key for argument "{}" of mutation {}: expected the '
            'argument name to be "{}" followed by a non-empty suffix.'.format(
                argument_name, field_name, role_variable_name
            ),
        )
    return parameter_key


def remap_add_relationship_params(
    params: ParameterMap, field_metadata: FieldMetadata
) -> RelationshipParamRemap:
    """Rename the two relationship end parameters of an add-relationship mutation.

    The mutation field declares two arguments: the first identifies the node at the "from" end
    of the relationship, the second the node at the "to" end. Each is renamed to the key given by
    the "fromParam"/"toParam" argument of @MutationMeta if present; otherwise the key is the
    argument name with the lowercased end type name stripped from its front. For example, with
    @MutationMeta(from: "Person", to: "Movie") and arguments personName and movieTitle,
    {"personName": "Tom", "movieTitle": "Big"} becomes {"Name": "Tom", "Title": "Big"}.
    If both ends would be renamed to the same key, the remap is refused with an
    AMBIGUOUS_PARAMETER_KEYS error rather than letting one value overwrite the other.

    Args:
        params: parsed arguments of the mutation field. Not modified.
        field_metadata: schema metadata of the mutation field

    Returns:
        RelationshipParamRemap holding either the new parameter dict, or the
        MutationMetadataError describing why the schema metadata is unusable
    """
    field_name = field_metadata.field_name
    try:
        # Parsing only runs for metadata built outside of a SchemaIndex, or to report the error.
        mutation_meta = field_metadata.mutation_meta_info or parse_mutation_meta_directive(
            field_name, get_field_directive(field_metadata, MUTATION_META_DIRECTIVE_NAME)
        )

        if len(field_metadata.argument_names) != 2:
            raise MissingMutationMetadataError(
                MutationMetadataErrorKind.WRONG_ARGUMENT_COUNT,
                "Expected add relationship mutation {} to declare exactly two arguments, "
                "but found: {}".format(field_name, field_metadata.argument_names),
            )
        from_argument, to_argument = field_metadata.argument_names

        from_key = mutation_meta.from_param or _strip_role_prefix(
            field_name, from_argument, low_first_letter(mutation_meta.from_type)
        )
        to_key = mutation_meta.to_param or _strip_role_prefix(
            field_name, to_argument, low_first_letter(mutation_meta.to_type)
        )
        if from_key == to_key:
            raise AmbiguousRelationshipParamsError(
                MutationMetadataErrorKind.AMBIGUOUS_PARAMETER_KEYS,
                'Both ends of add relationship mutation {} map to the parameter key "{}". '
                "Use the fromParam and toParam arguments of @{} to name the keys "
                "explicitly.".format(field_name, from_key, MUTATION_META_DIRECTIVE_NAME),
            )
    except MutationMetadataError as e:
        return RelationshipParamRemap(error=e)

    remapped_params = dict(params)
    end_values = {
        new_key: remapped_params.pop(argument_name)
        for new_key, argument_name in ((from_key, from_argument), (to_key, to_argument))
        if argument_name in remapped_params
    }
    remapped_params.update(end_values)
    return RelationshipParamRemap(params=remapped_params)


def fix_params_for_add_relationship_mutation(
    params: ParameterMap, field_metadata: Optional[FieldMetadata]
) -> ParameterMap:
    """Return the add-relationship mutation parameters, renamed for the relationship fragment.

    See remap_add_relationship_params() for the renaming rules.

    Raises:
        MissingMutationMetadataError: if the field or its @MutationMeta metadata is missing
        AmbiguousRelationshipParamsError: if the new parameter keys cannot be told apart
    """
    if field_metadata is None:
        raise MissingMutationMetadataError(
            MutationMetadataErrorKind.MISSING_DIRECTIVE,
            "Missing schema metadata for add relationship mutation.",
        )

    remapped_params = remap_add_relationship_params(params, field_metadata).unwrap()
    logger.debug(
        "Remapped parameters of mutation %s: %s", field_metadata.field_name, remapped_params
    )
    return remapped_params
