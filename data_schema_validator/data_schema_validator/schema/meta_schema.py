# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""JSON Schema describing the shape of a schema definition file."""

import json
from pathlib import Path
from typing import Any, List, Optional

from jsonschema import Draft7Validator

from ..exceptions import SchemaLoadError


_META_SCHEMA_FILE = "definition.json"

# Loaded once per process
_META_VALIDATOR: Optional[Draft7Validator] = None


def get_meta_schema_path() -> Path:
    """Get the path to the JSON Schema that describes schema definitions."""
    return Path(__file__).parent / _META_SCHEMA_FILE


def load_meta_schema() -> dict:
    """Load the definition meta-schema.

    Raises:
        SchemaLoadError: If the meta-schema file is missing or not valid JSON
    """
    schema_path = get_meta_schema_path()
    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SchemaLoadError(f"Failed to load meta-schema {schema_path}: {e}") from e


def _get_validator() -> Draft7Validator:
    global _META_VALIDATOR
    if _META_VALIDATOR is None:
        meta_schema = load_meta_schema()
        Draft7Validator.check_schema(meta_schema)
        _META_VALIDATOR = Draft7Validator(meta_schema, format_checker=Draft7Validator.FORMAT_CHECKER)
    return _META_VALIDATOR


def _format_location(path) -> str:
    location = "$"
    for token in path:
        location += f"[{token}]" if isinstance(token, int) else f".{token}"
    return location


def check_schema_definition(schema: Any) -> List[str]:
    """Check a schema definition against the meta-schema.

    Args:
        schema: Schema definition as loaded from a file

    Returns:
        Sorted list of ``"<location>: <message>"`` strings, empty when the
        definition is well formed
    """
    errors = sorted(_get_validator().iter_errors(schema), key=lambda e: list(map(str, e.absolute_path)))
    return [f"{_format_location(e.absolute_path)}: {e.message}" for e in errors]


def clear_cache() -> None:
    """Drop the cached meta-schema validator. Useful for testing."""
    global _META_VALIDATOR
    _META_VALIDATOR = None
