# Copyright 2017-present Kensho Technologies, LLC.
from typing import Any, Dict, Mapping, Sequence

from graphql.language.ast import ArgumentNode, FragmentDefinitionNode


# Variable values for the current request, keyed by name. These have already been coerced
# by the GraphQL execution engine, e.g. GraphQLResolveInfo.variable_values.
VariableValues = Mapping[str, Any]

# Parameters handed to the Cypher executor. Request-time values override schema defaults.
ParameterMap = Dict[str, Any]

# Fragment definitions of the current document, keyed by fragment name,
# e.g. GraphQLResolveInfo.fragments.
FragmentTable = Mapping[str, FragmentDefinitionNode]

# Arguments of a single selection, in the order they appear in the query.
ArgumentNodes = Sequence[ArgumentNode]

# Literal arguments of a schema directive, keyed by argument name.
DirectiveArguments = Mapping[str, Any]
