# Copyright 2017-present Kensho Technologies, LLC.
from .cypher_formatting import represent_cypher_map, represent_cypher_value  # noqa
