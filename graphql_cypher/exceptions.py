# Copyright 2017-present Kensho Technologies, LLC.
from enum import Enum, unique


class CypherFragmentError(Exception):
    """Generic error when translating GraphQL field arguments into Cypher fragments."""


class FragmentNotFoundError(CypherFragmentError):
    """Exception raised when a fragment spread refers to a fragment that is not defined.

    The fragment table is supplied by the GraphQL execution engine, so this indicates a request
    that did not pass validation. It terminates the translation of the affected selection.
    """


class InvalidPaginationArgumentError(CypherFragmentError):
    """Exception raised when a "first" or "offset" argument cannot be used as a slice bound."""


@unique
class MutationMetadataErrorKind(Enum):
    """The ways in which an add-relationship mutation field can be misconfigured in the schema."""

    MISSING_DIRECTIVE = "missing_directive"
    MISSING_DIRECTIVE_ARGUMENT = "missing_directive_argument"
    WRONG_ARGUMENT_COUNT = "wrong_argument_count"
    AMBIGUOUS_PARAMETER_KEYS = "ambiguous_parameter_keys"
    UNDERIVABLE_PARAMETER_KEY = "underivable_parameter_key"


class MutationMetadataError(CypherFragmentError):
    """Exception raised when an add-relationship mutation lacks usable relationship metadata.

    This is a schema authoring defect rather than a problem with the request, so it is never
    retried. The "kind" attribute describes which part of the metadata is at fault.
    """

    def __init__(self, kind: MutationMetadataErrorKind, message: str) -> None:
        """Record the kind of metadata defect alongside the error message."""
        super().__init__(message)
        self.kind = kind


class MissingMutationMetadataError(MutationMetadataError):
    """Exception raised when the @MutationMeta directive or one of its required parts is absent.

    For example:
    - the mutation field has no @MutationMeta directive;
    - the directive is missing its "from" or "to" argument;
    - the mutation field does not declare exactly two arguments.
    """


class AmbiguousRelationshipParamsError(MutationMetadataError):
    """Exception raised when the parameter keys of the relationship ends cannot be derived.

    For example:
    - both relationship ends would be remapped to the same parameter key;
    - an argument name does not start with the lowercased name of its relationship end type,
      or consists of nothing but that name.
    """


class CypherLiteralError(CypherFragmentError):
    """Exception raised when a value cannot be represented as a Cypher literal.

    For example:
    - the value is a float that is not finite;
    - the value is a Decimal, which Cypher does not support;
    - the value is of a type that has no Cypher literal syntax.
    """
