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

"""Custom exceptions for the data schema validator."""

import json
import re
from typing import Any, Dict, List, Sequence

from .models.violation import Violation


class SchemaValidatorError(Exception):
    """Base exception for data-schema-validator related errors."""
    pass


class SchemaLoadError(SchemaValidatorError):
    """Exception raised when a schema file cannot be loaded or is malformed."""
    pass


class DocumentLoadError(SchemaValidatorError):
    """Exception raised when a data document cannot be read or parsed."""
    pass


class ConfigurationError(SchemaValidatorError):
    """Exception raised for invalid validator configuration."""
    pass


def _json_default(value: Any) -> Any:
    if isinstance(value, re.Pattern):
        return value.pattern
    return repr(value)


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), default=_json_default)


def jsonable_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``record`` with every field JSON can not encode rendered by ``repr``.

    Covers mappings with non-string keys and values that contain themselves.
    """
    safe: Dict[str, Any] = {}
    for key, value in record.items():
        try:
            _dumps(value)
        except (TypeError, ValueError):
            value = repr(value)
        safe[key] = value
    return safe


def serialize_violations(violations: Sequence[Violation]) -> str:
    """Serialize violations as a compact JSON array, preserving order."""
    return _dumps([jsonable_record(violation.to_dict()) for violation in violations])


class ValidationError(SchemaValidatorError):
    """Exception raised when data does not satisfy a registered schema.

    The message is the serialized violation list; the structured records are
    available as ``violations``.
    """

    def __init__(self, violations: Sequence[Violation]):
        self.violations: List[Violation] = list(violations)
        super().__init__(serialize_violations(self.violations))

    def to_list(self) -> List[Dict[str, Any]]:
        return [violation.to_dict() for violation in self.violations]
