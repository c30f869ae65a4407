"""Data models shared by the registry, the validator and the API."""

from .schema_types import REF_KEY, SchemaType
from .violation import (
    ROOT_PATH,
    DataPath,
    Violation,
    data_violation,
    join_index,
    join_property,
    schema_violation,
)
