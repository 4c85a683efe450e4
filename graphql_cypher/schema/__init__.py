# Copyright 2017-present Kensho Technologies, LLC.
from .directives import (  # noqa
    CYPHER_DIRECTIVE_NAME,
    DIRECTIVES,
    DIRECTIVES_SDL,
    MUTATION_META_DIRECTIVE_NAME,
    RELATION_DIRECTIVE_NAME,
    SUPPORTED_DIRECTIVE_SCHEMAS,
    CypherDirective,
    CypherDirectiveInfo,
    DirectiveSchema,
    MutationMetaDirective,
    MutationMetaInfo,
    RelationDirective,
    RelationDirectiveInfo,
    get_mutation_meta_info,
    parse_cypher_directive,
    parse_mutation_meta_directive,
    parse_relation_directive,
)
from .schema_index import (  # noqa
    FieldMetadata,
    SchemaIndex,
    build_schema_index,
    get_field_metadata_from_type,
    make_field_metadata,
)
