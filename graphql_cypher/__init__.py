# Copyright 2017-present Kensho Technologies, LLC.
"""Commonly-used functions and data types from this package."""
from .arguments import cypher_directive_args, get_argument_value, parse_args  # noqa
from .ast_manipulation import (  # noqa
    TypeIdentifiers,
    extract_selections,
    inner_type,
    is_array_type,
    is_graphql_scalar_type,
    low_first_letter,
    type_identifiers,
)
from .directive_helpers import (  # noqa
    cypher_directive,
    directive_with_args,
    get_field_directive,
    relation_directive,
)
from .exceptions import (  # noqa
    AmbiguousRelationshipParamsError,
    CypherFragmentError,
    CypherLiteralError,
    FragmentNotFoundError,
    InvalidPaginationArgumentError,
    MissingMutationMetadataError,
    MutationMetadataError,
    MutationMetadataErrorKind,
)
from .field_translation import FieldTranslation, translate_field  # noqa
from .filters import inner_filter_params  # noqa
from .mutations import (  # noqa
    RelationshipParamRemap,
    fix_params_for_add_relationship_mutation,
    is_add_relationship_mutation,
    is_mutation,
    remap_add_relationship_params,
)
from .pagination import compute_skip_limit  # noqa
from .query_results import extract_query_result  # noqa
from .schema import (  # noqa
    DIRECTIVES,
    DIRECTIVES_SDL,
    FieldMetadata,
    SchemaIndex,
    build_schema_index,
    get_field_metadata_from_type,
)


__package_name__ = "graphql-cypher-fragments"
__version__ = "1.0.0"
