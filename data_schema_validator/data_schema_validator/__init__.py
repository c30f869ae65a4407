"""Declarative schema registry and recursive data validator.

Typical use::

    import data_schema_validator as dsv

    dsv.add("port", {"type": "integer", "minimum": 1, "maximum": 65535})
    dsv.validate("port", 8080)
"""

__version__ = "0.1.0"

from .api import SchemaValidator, add, clear, collect, default_validator, has, validate
from .exceptions import (
    ConfigurationError,
    DocumentLoadError,
    SchemaLoadError,
    SchemaValidatorError,
    ValidationError,
)
from .models.violation import Violation
from .registry.schema_registry import SchemaRegistry
from .validator.node_validator import validate_node

# Error class exposed under a short name for callers that catch it via the module
error = ValidationError
