from .schema_registry import Schema, SchemaRegistry
