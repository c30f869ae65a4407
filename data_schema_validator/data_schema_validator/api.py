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

"""Public entry points: register schemas and validate data against them."""

import logging
from typing import Any, List, Optional

from .config import ValidatorConfig, validator_config
from .exceptions import ValidationError
from .models.violation import ROOT_PATH, Violation
from .registry.schema_registry import Schema, SchemaRegistry
from .validator.node_validator import validate_node

logger = logging.getLogger(__name__)


class SchemaValidator:
    """Registry-backed validator.

    Unknown ids and duplicate registrations are logged and ignored rather than
    raised, so registration stays idempotent and a mistyped id never crashes
    the caller. The only raised error is :class:`ValidationError`.
    """

    def __init__(self, registry: Optional[SchemaRegistry] = None, config: Optional[ValidatorConfig] = None):
        self.registry = registry if registry is not None else SchemaRegistry()
        self.config = config if config is not None else validator_config

    def add(self, schema_id: str, schema: Schema) -> None:
        if self.registry.add(schema_id, schema):
            logger.debug(f'schema "{schema_id}" added')

    def has(self, schema_id: str) -> bool:
        found = self.registry.has(schema_id)
        logger.debug(f'schema "{schema_id}" lookup, found: {found}')
        return found

    def clear(self) -> None:
        logger.debug('all schemas cleared')
        self.registry.clear()

    def collect(self, schema_id: str, data: Any = None) -> List[Violation]:
        """Validate ``data`` and return the violations instead of raising.

        Returns an empty list when the schema id is not registered.
        """
        if not self.registry.has(schema_id):
            logger.debug(f'schema with "{schema_id}" not exist')
            return []

        logger.debug(f'schema "{schema_id}" validating')
        violations = validate_node(
            self.registry.get(schema_id),
            data,
            ROOT_PATH,
            registry=self.registry,
            max_depth=self.config.max_depth,
        )
        logger.debug(f'schema "{schema_id}" validated')
        return violations

    def validate(self, schema_id: str, data: Any = None) -> None:
        """Validate ``data`` against the schema registered as ``schema_id``.

        Args:
            schema_id: Registered schema id; an unknown id is a logged no-op
            data: Value to validate

        Raises:
            ValidationError: If at least one constraint is violated
        """
        violations = self.collect(schema_id, data)
        if violations:
            raise ValidationError(violations)


# Default instance behind the module-level functions
default_validator = SchemaValidator()


def add(schema_id: str, schema: Schema) -> None:
    default_validator.add(schema_id, schema)


def has(schema_id: str) -> bool:
    return default_validator.has(schema_id)


def clear() -> None:
    default_validator.clear()


def collect(schema_id: str, data: Any = None) -> List[Violation]:
    return default_validator.collect(schema_id, data)


def validate(schema_id: str, data: Any = None) -> None:
    default_validator.validate(schema_id, data)
