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

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional

logger = logging.getLogger(__name__)

Schema = Mapping[str, Any]


class SchemaRegistry:
    """Store of schema definitions keyed by schema id.

    Registration is insert-if-absent: adding an id that already exists is a
    logged no-op, never an overwrite. Definitions are stored as given and are
    not checked for shape until validation reaches them.

    The registry performs no locking. It assumes a single writer; callers that
    mutate it from several threads must guard it themselves.
    """

    def __init__(self):
        self._schemas: Dict[str, Schema] = {}

    def add(self, schema_id: str, schema: Schema) -> bool:
        """Register ``schema`` under ``schema_id`` unless the id is taken.

        Args:
            schema_id: Identifier used by ``validate`` and ``$ref`` lookups
            schema: Schema definition

        Returns:
            True when the schema was stored, False when the id already existed
        """
        if schema_id in self._schemas:
            logger.debug(f'schema with "{schema_id}" already exist')
            return False

        self._schemas[schema_id] = schema
        return True

    def has(self, schema_id: str) -> bool:
        return schema_id in self._schemas

    def get(self, schema_id: str, default: Optional[Schema] = None) -> Optional[Schema]:
        """Get schema by id with default value."""
        return self._schemas.get(schema_id, default)

    def clear(self) -> None:
        self._schemas.clear()

    def ids(self) -> List[str]:
        return list(self._schemas.keys())

    def __contains__(self, schema_id: object) -> bool:
        return schema_id in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)
