# Copyright 2017-present Kensho Technologies, LLC.
"""Precomputed per-field metadata, built once when the schema is loaded."""
from dataclasses import dataclass
import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from graphql import GraphQLField, GraphQLInterfaceType, GraphQLObjectType, GraphQLSchema
from graphql.language.ast import FieldDefinitionNode
from graphql.pyutils import Undefined
from graphql.utilities import value_from_ast_untyped

from ..typedefs import DirectiveArguments
from .directives import (
    CYPHER_DIRECTIVE_NAME,
    MUTATION_META_DIRECTIVE_NAME,
    RELATION_DIRECTIVE_NAME,
    SUPPORTED_DIRECTIVE_SCHEMAS,
    CypherDirectiveInfo,
    MutationMetaInfo,
    RelationDirectiveInfo,
    get_mutation_meta_info,
    parse_cypher_directive,
    parse_relation_directive,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldMetadata:
    """Schema metadata of a single field, as needed to translate its arguments into Cypher."""

    field_name: str

    # Names of the arguments the field declares, in declaration order.
    argument_names: Tuple[str, ...]

    # Argument name -> default value, only for arguments that declare a default.
    default_arguments: Mapping[str, Any]

    # Directive name -> (argument name -> literal value). If a directive is applied more than once
    # on the field definition, only the first application is recorded.
    directives: Mapping[str, DirectiveArguments]

    # Typed contents of the supported directives, or None if the directive is absent or incomplete.
    cypher_info: Optional[CypherDirectiveInfo] = None
    relation_info: Optional[RelationDirectiveInfo] = None
    mutation_meta_info: Optional[MutationMetaInfo] = None


@dataclass(frozen=True)
class SchemaIndex:
    """Field metadata for every object and interface type of a schema.

    The index is immutable once built, so a single instance may be shared by
    all concurrent field resolutions against the same schema.
    """

    # Type name -> (field name -> FieldMetadata).
    fields: Mapping[str, Mapping[str, FieldMetadata]]

    # Name of the schema's mutation root type, or None if the schema has no mutations.
    mutation_type_name: Optional[str]

    def get_field_metadata(self, type_name: str, field_name: str) -> Optional[FieldMetadata]:
        """Return the metadata of the given field, or None if the schema doesn't define it."""
        return self.fields.get(type_name, {}).get(field_name)

    def get_mutation_field_metadata(self, field_name: str) -> Optional[FieldMetadata]:
        """Return the metadata of the given mutation field, or None if there is no such field."""
        if self.mutation_type_name is None:
            return None
        return self.get_field_metadata(self.mutation_type_name, field_name)


def _get_directive_arguments(
    field_definition: Optional[FieldDefinitionNode],
) -> Dict[str, DirectiveArguments]:
    """Return the literal arguments of every directive on the field definition, first one wins."""
    result: Dict[str, DirectiveArguments] = {}
    if field_definition is None or not field_definition.directives:
        return result

    for directive_node in field_definition.directives:
        directive_name = directive_node.name.value
        if directive_name in result:
            continue

        result[directive_name] = MappingProxyType(
            {
                argument_node.name.value: value_from_ast_untyped(argument_node.value)
                for argument_node in directive_node.arguments or ()
            }
        )

    return result


def _warn_on_invalid_directives(
    type_name: str, field_name: str, directives: Mapping[str, DirectiveArguments]
) -> None:
    """Log supported directives that lack required arguments or carry unsupported ones."""
    for directive_name, directive_arguments in directives.items():
        directive_schema = SUPPORTED_DIRECTIVE_SCHEMAS.get(directive_name)
        if directive_schema is None:
            continue

        missing_arguments = directive_schema.get_missing_arguments(directive_arguments)
        if missing_arguments:
            logger.warning(
                "Directive @%(directive)s on field %(type)s.%(field)s is missing required "
                "argument(s) %(missing)s and will be treated as incomplete.",
                {
                    "directive": directive_name,
                    "type": type_name,
                    "field": field_name,
                    "missing": sorted(missing_arguments),
                },
            )

        unknown_arguments = directive_schema.get_unknown_arguments(directive_arguments)
        if unknown_arguments:
            logger.warning(
                "Directive @%(directive)s on field %(type)s.%(field)s has unsupported "
                "argument(s) %(unknown)s, which will be ignored.",
                {
                    "directive": directive_name,
                    "type": type_name,
                    "field": field_name,
                    "unknown": sorted(unknown_arguments),
                },
            )


def make_field_metadata(field_name: str, field: GraphQLField) -> FieldMetadata:
    """Collect the argument defaults and parsed directives of the given schema field."""
    default_arguments = {
        argument_name: argument.default_value
        for argument_name, argument in field.args.items()
        if argument.default_value is not Undefined
    }
    directives = _get_directive_arguments(field.ast_node)
    return FieldMetadata(
        field_name=field_name,
        argument_names=tuple(field.args),
        default_arguments=MappingProxyType(default_arguments),
        directives=MappingProxyType(directives),
        cypher_info=parse_cypher_directive(directives.get(CYPHER_DIRECTIVE_NAME)),
        relation_info=parse_relation_directive(directives.get(RELATION_DIRECTIVE_NAME)),
        mutation_meta_info=get_mutation_meta_info(directives.get(MUTATION_META_DIRECTIVE_NAME)),
    )


def get_field_metadata_from_type(
    schema_type: Union[GraphQLObjectType, GraphQLInterfaceType], field_name: str
) -> Optional[FieldMetadata]:
    """Return the metadata of a field of the given type without building a full index.

    Returns None if the type does not define a field with that name.
    """
    field = schema_type.fields.get(field_name)
    if field is None:
        return None
    return make_field_metadata(field_name, field)


def build_schema_index(schema: GraphQLSchema) -> SchemaIndex:
    """Build the field metadata index of the given schema.

    Introspection types are skipped. Supported directives that lack required arguments
    or carry unsupported ones are kept in the index as-is, and a warning is logged for each.

    Args:
        schema: GraphQL schema object, created using the GraphQL library

    Returns:
        SchemaIndex covering every object and interface type in the schema
    """
    fields: Dict[str, Mapping[str, FieldMetadata]] = {}
    for type_name, schema_type in schema.type_map.items():
        if type_name.startswith("__"):
            continue
        if not isinstance(schema_type, (GraphQLObjectType, GraphQLInterfaceType)):
            continue

        type_fields = {}
        for field_name, field in schema_type.fields.items():
            field_metadata = make_field_metadata(field_name, field)
            _warn_on_invalid_directives(type_name, field_name, field_metadata.directives)
            type_fields[field_name] = field_metadata

        fields[type_name] = MappingProxyType(type_fields)

    mutation_type = schema.mutation_type
    return SchemaIndex(
        fields=MappingProxyType(fields),
        mutation_type_name=mutation_type.name if mutation_type is not None else None,
    )
